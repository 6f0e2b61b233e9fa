from __future__ import annotations

from dataclasses import dataclass

from .exceptions import RequestError, TransportError


@dataclass(frozen=True)
class UserFacingError:
    message: str
    details: str | None = None
    session_expired: bool = False

    @property
    def technical_details(self) -> str | None:
        if self.details:
            return self.details
        return None


def to_user_facing_error(exc: RequestError) -> UserFacingError:
    primary = exc.message.strip() or "Request failed"
    if isinstance(exc, TransportError):
        details = f"{exc.code} (network)"
    else:
        details = f"{exc.code} (HTTP {exc.status_code})"
    if exc.details:
        details = f"{details}: {exc.details}"
    return UserFacingError(message=primary, details=details, session_expired=exc.status_code == 401)
