from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pawnshop_sdk.models import Client, EntityId

from pawnshop_app.invoices import InvoicePrinter, ShopProfile
from pawnshop_app.services.client_service import ClientService
from pawnshop_app.services.errors import ServiceError
from pawnshop_app.ui.shared.view_state import resolve_state

NO_CLIENTS_MESSAGE = "No clients found with the given input."

CLIENT_COLUMNS: list[tuple[str, str]] = [
    ("cus_id", "ID"),
    ("cus_name", "Name"),
    ("phone_number", "Phone"),
    ("address", "Address"),
]


@dataclass
class ClientSearchView:
    """Client list with a filter panel; subclasses load the selected client's records."""

    client_service: ClientService
    service: Any
    printer: InvoicePrinter = field(default_factory=InvoicePrinter)
    shop: ShopProfile = field(default_factory=ShopProfile)
    clients: list[Client] = field(default_factory=list)
    filtered: list[Client] = field(default_factory=list)
    selected_client: Client | None = None
    response_message: str = ""
    error_message: str | None = None
    is_loading: bool = False
    last_invoice_path: Path | None = None

    def load(self) -> bool:
        self.is_loading = True
        self.error_message = None
        try:
            self.clients = self.client_service.list_clients()
        except ServiceError as exc:
            self.clients = []
            self.filtered = []
            self.error_message = exc.message
            self.response_message = exc.message
            return False
        finally:
            self.is_loading = False
        self.filtered = list(self.clients)
        return True

    def search(self, cus_id: str = "", cus_name: str = "", phone_number: str = "") -> bool:
        self.filtered = self.client_service.filter_clients(
            self.clients,
            cus_id=cus_id,
            cus_name=cus_name,
            phone_number=phone_number,
        )
        self.response_message = "" if self.filtered else NO_CLIENTS_MESSAGE
        return bool(self.filtered)

    def find_client(self, cus_id: EntityId) -> Client | None:
        wanted = str(cus_id).strip()
        for client in self.clients:
            if str(client.cus_id) == wanted:
                return client
        return None

    def client_rows(self) -> list[dict[str, Any]]:
        return [client.model_dump(mode="json", include={key for key, _ in CLIENT_COLUMNS}) for client in self.filtered]

    def render(self) -> dict[str, Any]:
        state = resolve_state(is_loading=self.is_loading, list_error=self.error_message, row_count=len(self.filtered))
        return {
            "state": state.render(),
            "message": self.response_message,
            "rows": self.client_rows(),
            "columns": CLIENT_COLUMNS,
            "selected_client": self.selected_client.model_dump(mode="json") if self.selected_client else None,
        }
