from __future__ import annotations

from dataclasses import dataclass

from .auth_controller import AuthController
from .auth_store import SessionStore
from .clients.admin_client import AdminClient
from .clients.auth import AuthClient
from .clients.parties_client import PartiesClient
from .clients.stock_client import StockClient
from .clients.white_label_client import WhiteLabelClient
from .config import ClientConfig
from .http_client import HttpClient


@dataclass
class ApiSession:
    config: ClientConfig
    store: SessionStore | None = None
    http: HttpClient | None = None

    def __post_init__(self) -> None:
        self.store = self.store or SessionStore(app_name=self.config.session_app_name)
        self.http = self.http or HttpClient(config=self.config, store=self.store)

    def auth_client(self) -> AuthClient:
        return AuthClient(http=self.http)

    def admin_client(self) -> AdminClient:
        return AdminClient(http=self.http)

    def parties_client(self) -> PartiesClient:
        return PartiesClient(http=self.http)

    def stock_client(self) -> StockClient:
        return StockClient(http=self.http)

    def white_label_client(self) -> WhiteLabelClient:
        return WhiteLabelClient(http=self.http)

    def auth_controller(self) -> AuthController:
        return AuthController(auth_client=self.auth_client(), store=self.store)
