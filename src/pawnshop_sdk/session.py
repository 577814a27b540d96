from __future__ import annotations

from dataclasses import dataclass

from .auth_store import AuthStore
from .clients.auth import AuthClient
from .clients.clients_client import ClientsClient
from .clients.orders_client import OrdersClient
from .clients.pawns_client import PawnsClient
from .clients.products_client import ProductsClient
from .config import ClientConfig
from .http_client import HttpClient
from .models import SessionData


@dataclass
class ApiSession:
    config: ClientConfig
    auth_store: AuthStore | None = None
    http: HttpClient | None = None
    token: str | None = None
    phone_number: str | None = None

    def __post_init__(self) -> None:
        self.auth_store = self.auth_store or AuthStore()
        self.http = self.http or HttpClient(config=self.config)
        stored = self.auth_store.load()
        if stored and not self.token:
            self.token = stored.access_token
            self.phone_number = stored.phone_number

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def auth_client(self) -> AuthClient:
        return AuthClient(http=self.http, access_token=self.token, prefix="")

    def products_client(self) -> ProductsClient:
        return ProductsClient(http=self.http, access_token=self.token, prefix=self.config.staff_prefix)

    def clients_client(self) -> ClientsClient:
        return ClientsClient(http=self.http, access_token=self.token, prefix=self.config.staff_prefix)

    def orders_client(self) -> OrdersClient:
        return OrdersClient(http=self.http, access_token=self.token, prefix=self.config.staff_prefix)

    def pawns_client(self) -> PawnsClient:
        return PawnsClient(http=self.http, access_token=self.token, prefix=self.config.staff_prefix)

    def establish(self, token: str, phone_number: str | None = None) -> None:
        self.token = token
        self.phone_number = phone_number
        self.auth_store.save(
            SessionData(access_token=token, phone_number=phone_number, env_name=self.config.env_name)
        )

    def clear(self) -> None:
        self.token = None
        self.phone_number = None
        if self.auth_store:
            self.auth_store.clear()
