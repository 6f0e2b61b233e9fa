from .admin_client import AdminClient, QRCodeQuery
from .auth import AuthClient
from .parties_client import PartiesClient
from .stock_client import StockClient
from .white_label_client import WhiteLabelClient

__all__ = [
    "AdminClient",
    "AuthClient",
    "PartiesClient",
    "QRCodeQuery",
    "StockClient",
    "WhiteLabelClient",
]
