from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RequestError(Exception):
    code: str
    message: str
    details: object | None = None
    status_code: int = 0
    raw_payload: object | None = None

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.code}: {self.message}"


class TransportError(RequestError):
    """Network/transport failure before an HTTP response was returned."""


class BackendError(RequestError):
    """Non-success HTTP status or a ``success: false`` envelope."""


class UnauthorizedError(BackendError):
    """Credential missing, expired or rejected."""


class ForbiddenError(BackendError):
    pass


class NotFoundError(BackendError):
    pass


class BadRequestError(BackendError):
    pass


class ConflictError(BackendError):
    """409 or conflict-style errors."""


class RateLimitError(BackendError):
    """429 throttling error."""


class ServerError(BackendError):
    """5xx server-side failures."""


class ClientValidationError(ValueError):
    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")
