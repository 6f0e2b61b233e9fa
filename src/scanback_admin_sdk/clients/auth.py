from __future__ import annotations

from ..models import ApiResponse, LoginData, MeData
from .base import BaseClient


class AuthClient(BaseClient):
    def login(self, email: str, password: str) -> ApiResponse[LoginData]:
        payload = {"email": email, "password": password}
        return self._request("POST", "/api/auth/login", json_body=payload, model=LoginData)

    def me(self) -> ApiResponse[MeData]:
        return self._request("GET", "/api/auth/me", model=MeData)
