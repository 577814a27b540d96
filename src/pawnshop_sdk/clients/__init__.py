from .auth import AuthClient
from .clients_client import ClientsClient
from .orders_client import OrdersClient
from .pawns_client import PawnsClient
from .products_client import ProductsClient

__all__ = [
    "AuthClient",
    "ClientsClient",
    "OrdersClient",
    "PawnsClient",
    "ProductsClient",
]
