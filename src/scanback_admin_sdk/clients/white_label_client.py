from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from ..exceptions import ClientValidationError
from ..models import AdminUser, ApiResponse, WhiteLabel
from .base import BaseClient, clean_params, require_field


class WhiteLabelList(BaseModel):
    white_labels: list[WhiteLabel] = Field(default_factory=list, alias="whiteLabels")


class WhiteLabelAdminList(BaseModel):
    admins: list[AdminUser] = Field(default_factory=list)


_WHITE_LABEL_FIELDS = ("email", "logo", "brandName", "website", "isActive")
_REQUIRED_ON_CREATE = ("email", "logo", "brandName", "website")
MIN_ADMIN_PASSWORD_LENGTH = 6


def _white_label_body(payload: dict[str, Any]) -> dict[str, Any]:
    return {key: payload[key] for key in _WHITE_LABEL_FIELDS if key in payload}


@dataclass
class WhiteLabelClient(BaseClient):
    """White-label brands under ``/api/white-label`` and their admin users."""

    def list_white_labels(
        self, *, page: int | None = None, limit: int | None = None, search: str | None = None
    ) -> ApiResponse[WhiteLabelList]:
        params = clean_params({"page": page, "limit": limit, "search": search})
        return self._request("GET", "/api/white-label", params=params, model=WhiteLabelList)

    def get_white_label(self, white_label_id: str) -> ApiResponse:
        return self._request("GET", f"/api/white-label/{white_label_id}")

    def create_white_label(self, payload: dict[str, Any]) -> ApiResponse:
        for name in _REQUIRED_ON_CREATE:
            require_field(payload, name)
        return self._request("POST", "/api/white-label", json_body=_white_label_body(payload))

    def update_white_label(self, white_label_id: str, payload: dict[str, Any]) -> ApiResponse:
        return self._request("PUT", f"/api/white-label/{white_label_id}", json_body=_white_label_body(payload))

    def delete_white_label(self, white_label_id: str) -> ApiResponse:
        return self._request("DELETE", f"/api/white-label/{white_label_id}")

    def toggle_white_label(self, white_label_id: str) -> ApiResponse:
        return self._request("PATCH", f"/api/white-label/{white_label_id}/toggle")

    def create_admin(self, white_label_id: str, *, email: str, password: str, name: str) -> ApiResponse:
        body = {"whiteLabelId": white_label_id, "email": email, "password": password, "name": name}
        for key in body:
            require_field(body, key)
        if len(password) < MIN_ADMIN_PASSWORD_LENGTH:
            raise ClientValidationError(
                "password", f"password must be at least {MIN_ADMIN_PASSWORD_LENGTH} characters"
            )
        return self._request("POST", "/api/admin/white-label-admin", json_body=body)

    def list_admins(self, white_label_id: str | None = None) -> ApiResponse[WhiteLabelAdminList]:
        params = clean_params({"whiteLabelId": white_label_id})
        return self._request("GET", "/api/admin/white-label-admins", params=params, model=WhiteLabelAdminList)
