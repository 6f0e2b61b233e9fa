from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..exceptions import ClientValidationError
from ..http_client import HttpClient


@dataclass
class BaseClient:
    http: HttpClient

    def _request(self, method: str, path: str, **kwargs):
        return self.http.request(path, method=method, **kwargs)


def clean_params(params: dict[str, Any]) -> dict[str, Any] | None:
    cleaned = {key: value for key, value in params.items() if value not in (None, "")}
    return cleaned or None


def require_field(payload: dict[str, Any], field: str) -> None:
    value = payload.get(field)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ClientValidationError(field, f"{field} is required")
