from __future__ import annotations

import json

import pytest
import requests
import responses

from scanback_admin_sdk.auth_store import SessionStore
from scanback_admin_sdk.exceptions import BackendError, TransportError, UnauthorizedError
from scanback_admin_sdk.http_client import HttpClient
from scanback_admin_sdk.models import QRCodeStats

BASE_URL = "https://api.example.com"


@responses.activate
def test_request_without_token_omits_authorization_header(http: HttpClient) -> None:
    responses.add(responses.GET, f"{BASE_URL}/api/admin/stats", json={"success": True, "data": {}}, status=200)

    http.request("/api/admin/stats")

    sent = responses.calls[0].request.headers
    assert "Authorization" not in sent
    assert sent["Content-Type"] == "application/json"


@responses.activate
def test_request_injects_bearer_token(http: HttpClient, store: SessionStore) -> None:
    store.set("abc")
    responses.add(responses.GET, f"{BASE_URL}/api/admin/stats", json={"success": True, "data": {}}, status=200)

    http.request("/api/admin/stats")

    assert responses.calls[0].request.headers["Authorization"] == "Bearer abc"


@responses.activate
def test_request_picks_up_token_changes_between_calls(http: HttpClient, store: SessionStore) -> None:
    responses.add(responses.GET, f"{BASE_URL}/api/admin/stats", json={"success": True, "data": {}}, status=200)
    responses.add(responses.GET, f"{BASE_URL}/api/admin/stats", json={"success": True, "data": {}}, status=200)

    store.set("first")
    http.request("/api/admin/stats")
    store.clear()
    http.request("/api/admin/stats")

    assert responses.calls[0].request.headers["Authorization"] == "Bearer first"
    assert "Authorization" not in responses.calls[1].request.headers


@responses.activate
def test_caller_headers_override_defaults(http: HttpClient) -> None:
    responses.add(responses.POST, f"{BASE_URL}/api/admin/generate-qr", json={"success": True}, status=201)

    http.request(
        "/api/admin/generate-qr",
        method="post",
        json_body={"type": "item"},
        headers={"X-Request-Source": "cli"},
    )

    request = responses.calls[0].request
    assert request.method == "POST"
    assert request.headers["X-Request-Source"] == "cli"
    assert json.loads(request.body) == {"type": "item"}


@responses.activate
def test_request_parses_typed_envelope(http: HttpClient) -> None:
    responses.add(
        responses.GET,
        f"{BASE_URL}/api/admin/stats",
        json={
            "success": True,
            "data": {"totalQRCodes": 12, "activeQRCodes": 7, "totalUsers": 3, "totalScans": 40},
        },
        status=200,
    )

    response = http.request("/api/admin/stats", model=QRCodeStats)

    assert response.success is True
    assert response.data.total_qr_codes == 12
    assert response.data.total_scans == 40
    assert http.last_operation is not None
    assert http.last_operation.result == "success"


@responses.activate
def test_success_false_envelope_is_returned_not_raised(http: HttpClient) -> None:
    responses.add(
        responses.GET,
        f"{BASE_URL}/api/admin/stats",
        json={"success": False, "message": "Stats unavailable"},
        status=200,
    )

    response = http.request("/api/admin/stats")

    assert response.success is False
    with pytest.raises(BackendError) as exc_info:
        response.require_data()
    assert exc_info.value.message == "Stats unavailable"


@responses.activate
def test_rejected_token_surfaces_backend_message_verbatim(http: HttpClient, store: SessionStore) -> None:
    store.set("expired")
    responses.add(
        responses.GET,
        f"{BASE_URL}/api/admin/qr-codes",
        json={"success": False, "message": "Invalid or expired token"},
        status=401,
    )

    with pytest.raises(UnauthorizedError) as exc_info:
        http.request("/api/admin/qr-codes")

    assert exc_info.value.message == "Invalid or expired token"
    assert exc_info.value.status_code == 401
    # the gateway never clears the session on its own
    assert store.get() == "expired"


@responses.activate
def test_error_without_json_body_uses_generic_message(http: HttpClient) -> None:
    responses.add(responses.GET, f"{BASE_URL}/api/admin/users", body="<html>Bad Gateway</html>", status=502)

    with pytest.raises(BackendError) as exc_info:
        http.request("/api/admin/users")

    assert exc_info.value.message == "Request failed"
    assert exc_info.value.status_code == 502


@responses.activate
def test_success_with_non_json_body_is_invalid_response(http: HttpClient) -> None:
    responses.add(responses.GET, f"{BASE_URL}/api/admin/users", body="ok", status=200)

    with pytest.raises(BackendError) as exc_info:
        http.request("/api/admin/users")

    assert exc_info.value.code == "INVALID_RESPONSE"


@responses.activate
def test_success_with_mismatched_shape_is_invalid_response(http: HttpClient) -> None:
    payload = {"success": True, "data": {"totalQRCodes": "many"}}
    responses.add(responses.GET, f"{BASE_URL}/api/admin/stats", json=payload, status=200)

    with pytest.raises(BackendError) as exc_info:
        http.request("/api/admin/stats", model=QRCodeStats)

    assert exc_info.value.code == "INVALID_RESPONSE"
    assert exc_info.value.status_code == 200
    assert exc_info.value.raw_payload == payload
    assert exc_info.value.details[0]["loc"] == ("data", "totalQRCodes")
    assert http.last_operation is not None
    assert http.last_operation.result == "invalid_response"


def test_transport_failure_is_not_retried(http: HttpClient, monkeypatch: pytest.MonkeyPatch) -> None:
    attempts = {"count": 0}

    def _request(**_: object):
        attempts["count"] += 1
        raise requests.ConnectionError("connection refused")

    assert http.session is not None
    monkeypatch.setattr(http.session, "request", _request)

    with pytest.raises(TransportError) as exc_info:
        http.request("/api/admin/stats")

    assert exc_info.value.status_code == 0
    assert exc_info.value.code == "TRANSPORT_ERROR"
    assert "connection refused" in exc_info.value.message
    assert attempts["count"] == 1
    assert http.last_operation is not None
    assert http.last_operation.result == "transport_error"


@responses.activate
def test_server_error_is_not_retried(http: HttpClient) -> None:
    responses.add(responses.GET, f"{BASE_URL}/api/admin/stats", json={"message": "down"}, status=503)

    with pytest.raises(BackendError):
        http.request("/api/admin/stats")

    assert len(responses.calls) == 1


def test_request_uses_configured_timeout(http: HttpClient, monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    class _Response:
        ok = True
        status_code = 200
        text = "{}"

        def json(self) -> dict:
            return {"success": True}

    def _request(**kwargs: object) -> _Response:
        captured.update(kwargs)
        return _Response()

    assert http.session is not None
    monkeypatch.setattr(http.session, "request", _request)

    http.request("/api/admin/stats")

    assert captured["timeout"] is None
    assert captured["url"] == f"{BASE_URL}/api/admin/stats"
