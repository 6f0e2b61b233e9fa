from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from typing import Any, TypeVar
from urllib.parse import urljoin

import requests
from pydantic import BaseModel, ValidationError

from .auth_store import SessionStore
from .config import ClientConfig
from .error_mapper import map_error
from .exceptions import BackendError, TransportError
from .logger import get_logger, log_action
from .models import ApiResponse

T = TypeVar("T", bound=BaseModel)

logger = get_logger(__name__)


@dataclass
class LastOperation:
    method: str
    endpoint: str
    duration_ms: int
    result: str
    status_code: int


@dataclass
class HttpClient:
    """Gateway for every backend call.

    Injects the bearer token held by ``store`` and turns transport failures
    and non-2xx statuses into ``RequestError`` subclasses. Nothing is retried.
    """

    config: ClientConfig
    store: SessionStore = field(default_factory=SessionStore)
    session: requests.Session | None = None
    last_operation: LastOperation | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()

    def _build_url(self, endpoint: str) -> str:
        base = self.config.api_base_url.rstrip("/") + "/"
        return urljoin(base, endpoint.lstrip("/"))

    def build_headers(self, headers: dict[str, str] | None = None) -> dict[str, str]:
        request_headers = {"Content-Type": "application/json", "Accept": "application/json"}
        token = self.store.get()
        if token:
            request_headers["Authorization"] = f"Bearer {token}"
        if headers:
            request_headers.update(headers)
        return request_headers

    def request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        model: type[T] | None = None,
    ) -> ApiResponse:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        normalized_method = method.upper()
        url = self._build_url(endpoint)
        request_headers = self.build_headers(headers)

        started = time.monotonic()
        try:
            response = self.session.request(
                method=normalized_method,
                url=url,
                headers=request_headers,
                json=json_body,
                params=params,
                timeout=self.config.timeout_seconds,
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            self._record(normalized_method, endpoint, started, "transport_error", 0)
            raise TransportError(
                code="TRANSPORT_ERROR",
                message=str(exc) or "Network request failed",
                details={"type": type(exc).__name__},
                status_code=0,
            ) from exc

        try:
            payload = response.json()
        except (json.JSONDecodeError, ValueError):
            payload = None

        if not response.ok:
            self._record(normalized_method, endpoint, started, "error", response.status_code)
            raise map_error(response.status_code, payload if isinstance(payload, dict) else None)

        if not isinstance(payload, dict):
            self._record(normalized_method, endpoint, started, "invalid_response", response.status_code)
            raise BackendError(
                code="INVALID_RESPONSE",
                message="Expected a JSON object response",
                status_code=response.status_code,
                raw_payload=response.text,
            )

        envelope = ApiResponse[model] if model is not None else ApiResponse[Any]
        try:
            parsed = envelope.model_validate(payload)
        except ValidationError as exc:
            self._record(normalized_method, endpoint, started, "invalid_response", response.status_code)
            raise BackendError(
                code="INVALID_RESPONSE",
                message="Response did not match the expected shape",
                details=exc.errors(include_url=False),
                status_code=response.status_code,
                raw_payload=payload,
            ) from exc
        self._record(normalized_method, endpoint, started, "success", response.status_code)
        return parsed

    def _record(self, method: str, endpoint: str, started: float, result: str, status_code: int) -> None:
        self.last_operation = LastOperation(
            method=method,
            endpoint=endpoint,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
            status_code=status_code,
        )
        log_action(
            logger,
            module="http",
            action=f"{method} {endpoint}",
            outcome=result,
            status_code=status_code,
            duration_ms=self.last_operation.duration_ms,
        )
