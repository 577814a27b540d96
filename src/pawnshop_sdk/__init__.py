from .auth_store import AuthStore
from .config import ClientConfig, ConfigError, load_config
from .exceptions import (
    AlreadyExistsError,
    ApiError,
    AuthError,
    EnvelopeError,
    NotFoundError,
    PermissionDeniedError,
    ServerError,
    TransportError,
    ValidationError,
)
from .http_client import HttpClient
from .models import (
    Client,
    NextId,
    OrderCreate,
    OrderInvoice,
    OrderLine,
    OrderSummary,
    OrderUpdate,
    PawnCreate,
    PawnInvoice,
    PawnLine,
    PawnSummary,
    PawnUpdate,
    Product,
    ProductCreate,
    ProductUpdate,
    SessionData,
    TokenResponse,
)
from .session import ApiSession
from .ui_errors import UserFacingError, to_user_facing_error

__version__ = "0.1.0"

__all__ = [
    "AlreadyExistsError",
    "ApiError",
    "ApiSession",
    "AuthError",
    "AuthStore",
    "Client",
    "ClientConfig",
    "ConfigError",
    "EnvelopeError",
    "HttpClient",
    "NextId",
    "NotFoundError",
    "OrderCreate",
    "OrderInvoice",
    "OrderLine",
    "OrderSummary",
    "OrderUpdate",
    "PawnCreate",
    "PawnInvoice",
    "PawnLine",
    "PawnSummary",
    "PawnUpdate",
    "PermissionDeniedError",
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "ServerError",
    "SessionData",
    "TokenResponse",
    "TransportError",
    "UserFacingError",
    "ValidationError",
    "load_config",
    "to_user_facing_error",
]
