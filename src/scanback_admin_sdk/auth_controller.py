from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .auth_store import SessionStore
from .clients.auth import AuthClient
from .exceptions import RequestError
from .logger import get_logger, log_action
from .models import AdminIdentity

logger = get_logger(__name__)


class AuthState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    VERIFYING = "verifying"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class LoginResult:
    success: bool
    admin: AdminIdentity | None = None
    message: str | None = None


class AuthController:
    """Login, logout and identity verification for one console session.

    Calls are not serialized; whichever call finishes last owns ``state``
    and ``admin``.
    """

    def __init__(self, auth_client: AuthClient, store: SessionStore) -> None:
        self.auth_client = auth_client
        self.store = store
        self.state = AuthState.UNAUTHENTICATED
        self.admin: AdminIdentity | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.state is AuthState.AUTHENTICATED and self.admin is not None

    def check_auth(self) -> AuthState:
        if not self.store.get():
            self._transition(AuthState.UNAUTHENTICATED, "check_auth", "no_token")
            self.admin = None
            return self.state

        self._transition(AuthState.VERIFYING, "check_auth", "token_present")
        try:
            response = self.auth_client.me()
        except RequestError as exc:
            self._reject_stored_token(type(exc).__name__)
            return self.state

        if not response.success or response.data is None:
            self._reject_stored_token("unsuccessful_response")
            return self.state

        self.admin = response.data.user
        self._transition(AuthState.AUTHENTICATED, "check_auth", "verified")
        return self.state

    def login(self, email: str, password: str) -> LoginResult:
        try:
            response = self.auth_client.login(email, password)
        except RequestError as exc:
            self._fail_login(exc.code)
            return LoginResult(success=False, message=exc.message or "Login failed")

        if not response.success or response.data is None or not response.data.token:
            self._fail_login("UNSUCCESSFUL_RESPONSE")
            return LoginResult(success=False, message=response.message or "Login failed")

        self.store.set(response.data.token)
        self.admin = response.data.user
        self._transition(AuthState.AUTHENTICATED, "login", "success")
        return LoginResult(success=True, admin=self.admin)

    def logout(self) -> None:
        self.admin = None
        self.store.clear()
        self._transition(AuthState.UNAUTHENTICATED, "logout", "success")

    def _reject_stored_token(self, reason: str) -> None:
        self.store.clear()
        self.admin = None
        self._transition(AuthState.UNAUTHENTICATED, "check_auth", "token_rejected", reason=reason)

    def _fail_login(self, reason: str) -> None:
        self.admin = None
        self._transition(AuthState.UNAUTHENTICATED, "login", "failed", level=logging.WARNING, reason=reason)

    def _transition(
        self,
        state: AuthState,
        action: str,
        outcome: str,
        level: int = logging.INFO,
        **fields: object,
    ) -> None:
        previous = self.state
        self.state = state
        log_action(
            logger,
            module="auth",
            action=action,
            outcome=outcome,
            level=level,
            from_state=previous.value,
            to_state=state.value,
            **fields,
        )
