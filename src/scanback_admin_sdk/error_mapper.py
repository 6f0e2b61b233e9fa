from __future__ import annotations

from typing import Mapping

from .exceptions import (
    BackendError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)

DEFAULT_ERROR_MESSAGE = "Request failed"


def map_error(status_code: int, payload: Mapping[str, object] | None) -> BackendError:
    payload = payload or {}
    code = str(payload.get("code") or "HTTP_ERROR")
    raw_message = payload.get("message")
    message = str(raw_message) if raw_message else DEFAULT_ERROR_MESSAGE
    details = payload.get("details") or payload.get("errors")
    mapped: type[BackendError]
    if status_code == 401:
        mapped = UnauthorizedError
    elif status_code == 403:
        mapped = ForbiddenError
    elif status_code == 404:
        mapped = NotFoundError
    elif status_code in {400, 422}:
        mapped = BadRequestError
    elif status_code == 409:
        mapped = ConflictError
    elif status_code == 429:
        mapped = RateLimitError
    elif status_code >= 500:
        mapped = ServerError
    else:
        mapped = BackendError
    return mapped(
        code=code,
        message=message,
        details=details,
        status_code=status_code,
        raw_payload=dict(payload),
    )
