from __future__ import annotations

import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import ClientValidationError
from ..models import ApiResponse, QRCodeListResponse, QRCodeRecord, QRCodeStats, QRStatus
from .base import BaseClient, clean_params, require_field


_TAG_PATTERN = re.compile(r"<[^>]*>")


class QRCodeQuery(BaseModel):
    model_config = ConfigDict(extra="forbid")

    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    type: str | None = None
    status: str | None = None
    search: str | None = None


class QRCodeEnvelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    qr_code: QRCodeRecord = Field(alias="qrCode")


class UserQRCodes(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    qr_codes: list[QRCodeRecord] = Field(default_factory=list, alias="qrCodes")


class AdminClient(BaseClient):
    def stats(self) -> ApiResponse[QRCodeStats]:
        return self._request("GET", "/api/admin/stats", model=QRCodeStats)

    def list_qr_codes(self, query: QRCodeQuery | None = None) -> ApiResponse[QRCodeListResponse]:
        params = (query or QRCodeQuery()).model_dump(exclude_none=True)
        return self._request("GET", "/api/admin/qr-codes", params=params or None, model=QRCodeListResponse)

    def get_qr_code(self, code: str) -> ApiResponse[QRCodeEnvelope]:
        return self._request("GET", f"/api/admin/qr-codes/{code}", model=QRCodeEnvelope)

    def generate_qr_codes(
        self,
        qr_type: str,
        *,
        quantity: int | None = None,
        client_id: str | None = None,
        white_label_id: str | None = None,
        mode: Literal["connected", "unique"] | None = None,
    ) -> ApiResponse:
        if quantity is not None and quantity < 1:
            raise ClientValidationError("quantity", "quantity must be at least 1")
        body = {
            "type": qr_type,
            "clientId": client_id,
            "whiteLabelId": white_label_id,
            "quantity": quantity,
            "mode": mode,
        }
        body = {key: value for key, value in body.items() if value is not None}
        require_field(body, "type")
        return self._request("POST", "/api/admin/generate-qr", json_body=body)

    def bulk_generate_qr_codes(
        self,
        count: int,
        qr_type: Literal["item", "pet", "emergency"],
        template: dict[str, Any] | None = None,
        *,
        client_id: str | None = None,
    ) -> ApiResponse:
        if count < 1:
            raise ClientValidationError("count", "count must be at least 1")
        body: dict[str, Any] = {"count": count, "type": qr_type, "template": template or {}}
        if client_id:
            body["clientId"] = client_id
        return self._request("POST", "/api/admin/bulk-generate", json_body=body)

    def update_qr_code(self, code: str, payload: dict[str, Any]) -> ApiResponse:
        return self._request("PUT", f"/api/admin/qr-codes/{code}", json_body=payload)

    def update_qr_code_status(self, code: str, status: QRStatus | str) -> ApiResponse:
        value = QRStatus(status).value
        return self._request("PUT", f"/api/admin/qr-codes/{code}/status", json_body={"status": value})

    def update_qr_code_owner(
        self,
        code: str,
        *,
        owner_id: str | None = None,
        owner_email: str | None = None,
        clear_owner: bool = False,
    ) -> ApiResponse:
        if not clear_owner and not (owner_id or owner_email):
            raise ClientValidationError("owner", "owner_id or owner_email is required unless clearing")
        body: dict[str, Any] = {"clearOwner": clear_owner} if clear_owner else {}
        if owner_id:
            body["ownerId"] = owner_id
        if owner_email:
            body["ownerEmail"] = owner_email
        return self._request("PUT", f"/api/admin/qr-codes/{code}/owner", json_body=body)

    def delete_qr_code(self, code: str) -> ApiResponse:
        return self._request("DELETE", f"/api/admin/qr-codes/{code}")

    def list_users(self, *, page: int | None = None, limit: int | None = None, search: str | None = None) -> ApiResponse:
        params = clean_params({"page": page, "limit": limit, "search": search})
        return self._request("GET", "/api/admin/users", params=params)

    def get_user(self, user_id: str) -> ApiResponse:
        return self._request("GET", f"/api/admin/users/{user_id}")

    def user_qr_codes(self, user_id: str) -> ApiResponse[UserQRCodes]:
        return self._request("GET", f"/api/admin/users/{user_id}/qr-codes", model=UserQRCodes)

    def user_stats(self) -> ApiResponse:
        return self._request("GET", "/api/admin/user-stats")

    def update_user(self, user_id: str, payload: dict[str, Any]) -> ApiResponse:
        return self._request("PUT", f"/api/admin/users/{user_id}", json_body=payload)

    def update_user_status(self, user_id: str, status: str) -> ApiResponse:
        return self._request("PUT", f"/api/admin/users/{user_id}/status", json_body={"status": status})

    def delete_user(
        self,
        user_id: str,
        *,
        delete_qr_codes: bool | None = None,
        reassign_qr_to_user_id: str | None = None,
        reassign_qr_to_email: str | None = None,
    ) -> ApiResponse:
        body = {
            "deleteQRCodes": delete_qr_codes,
            "reassignQrToUserId": reassign_qr_to_user_id,
            "reassignQrToEmail": reassign_qr_to_email,
        }
        body = {key: value for key, value in body.items() if value is not None}
        return self._request("DELETE", f"/api/admin/users/{user_id}", json_body=body)

    def analytics(self, period: str = "30d") -> ApiResponse:
        return self._request("GET", "/api/admin/analytics", params={"period": period})

    def scan_history(self, *, page: int | None = None, limit: int | None = None, code: str | None = None) -> ApiResponse:
        params = clean_params({"page": page, "limit": limit, "code": code})
        return self._request("GET", "/api/admin/scan-history", params=params)

    def recent_activity(self, limit: int = 10) -> ApiResponse:
        return self._request("GET", "/api/admin/recent-activity", params={"limit": limit})

    def notifications(self, *, page: int | None = None, limit: int | None = None, type: str | None = None) -> ApiResponse:
        params = clean_params({"page": page, "limit": limit, "type": type})
        return self._request("GET", "/api/admin/notifications", params=params)

    def export_qr_codes(self, format: Literal["csv", "excel"] = "csv") -> ApiResponse:
        return self._request("GET", "/api/admin/export", params={"format": format})

    def send_bulk_email(
        self,
        subject: str,
        html_content: str,
        *,
        user_ids: list[str] | None = None,
        client_ids: list[str] | None = None,
        custom_emails: list[str] | None = None,
        text_content: str | None = None,
        attachments: list[dict[str, str]] | None = None,
    ) -> ApiResponse:
        body: dict[str, Any] = {
            "subject": subject.strip(),
            "htmlContent": html_content.strip(),
            "userIds": user_ids or [],
            "clientIds": client_ids or [],
        }
        require_field(body, "subject")
        require_field(body, "htmlContent")
        if not (user_ids or client_ids or custom_emails):
            raise ClientValidationError("recipients", "at least one recipient is required")
        if custom_emails:
            body["customEmails"] = custom_emails
        if text_content is None:
            text_content = _TAG_PATTERN.sub("", body["htmlContent"]).strip()
        body["textContent"] = text_content
        if attachments:
            body["attachments"] = attachments
        return self._request("POST", "/api/admin/send-email", json_body=body)
