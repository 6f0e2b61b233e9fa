from .auth_controller import AuthController, AuthState, LoginResult
from .auth_store import SessionStore
from .config import ClientConfig, ConfigError, load_config
from .exceptions import (
    BackendError,
    ClientValidationError,
    ForbiddenError,
    NotFoundError,
    RequestError,
    TransportError,
    UnauthorizedError,
)
from .http_client import HttpClient
from .models import (
    AdminIdentity,
    ApiResponse,
    Client,
    Party,
    QRCodeRecord,
    QRStatus,
    QRType,
    Supplier,
    WhiteLabel,
)
from .models_stock import GenerationBatch, PartyStockReport, StockBalance, StockSummary
from .session import ApiSession
from .stock import activation_rate, compute_stock_summary

__all__ = [
    "AdminIdentity",
    "ApiResponse",
    "ApiSession",
    "AuthController",
    "AuthState",
    "BackendError",
    "Client",
    "ClientConfig",
    "ClientValidationError",
    "ConfigError",
    "ForbiddenError",
    "GenerationBatch",
    "HttpClient",
    "LoginResult",
    "NotFoundError",
    "Party",
    "PartyStockReport",
    "QRCodeRecord",
    "QRStatus",
    "QRType",
    "RequestError",
    "SessionStore",
    "StockBalance",
    "StockSummary",
    "Supplier",
    "TransportError",
    "UnauthorizedError",
    "WhiteLabel",
    "activation_rate",
    "compute_stock_summary",
    "load_config",
]
