from __future__ import annotations

import logging
from dataclasses import dataclass

from pawnshop_sdk import ApiSession, ClientConfig, load_config

from pawnshop_app.app.state import AppState, Route
from pawnshop_app.services.auth_service import AuthService
from pawnshop_app.services.client_service import ClientService
from pawnshop_app.services.order_service import OrderService
from pawnshop_app.services.pawn_service import PawnService
from pawnshop_app.services.product_service import ProductService

logger = logging.getLogger(__name__)


@dataclass
class BootstrapResult:
    route: Route
    error_message: str | None = None


class BackOfficeBootstrap:
    def __init__(self, config: ClientConfig | None = None, session: ApiSession | None = None) -> None:
        self.config = config or load_config()
        self.session = session or ApiSession(self.config)
        self.state = AppState()
        self.auth_service = AuthService(self.session)
        self.product_service = ProductService(self.session)
        self.client_service = ClientService(self.session)
        self.order_service = OrderService(self.session)
        self.pawn_service = PawnService(self.session)

    def start(self) -> BootstrapResult:
        if not self.auth_service.has_active_session():
            self._navigate(Route.LOGIN, "No active session")
            return BootstrapResult(route=self.state.route)
        self.state.phone_number = self.session.phone_number
        self._navigate(Route.SHELL, "Authenticated")
        return BootstrapResult(route=self.state.route)

    def sign_out(self) -> BootstrapResult:
        self.auth_service.sign_out()
        self.state.phone_number = None
        self._navigate(Route.LOGIN, "Session cleared")
        return BootstrapResult(route=self.state.route)

    def _navigate(self, route: Route, status_message: str) -> None:
        logger.info("navigation", extra={"route": route.value})
        self.state.route = route
        self.state.status_message = status_message
