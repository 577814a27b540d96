from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pawnshop_sdk.models import EntityId, OrderSummary

from pawnshop_app.invoices import InvoiceError, InvoicePrintError, render_order_invoice
from pawnshop_app.services.errors import ServiceError
from pawnshop_app.services.order_service import OrderService
from pawnshop_app.ui.client_search_view import ClientSearchView
from pawnshop_app.ui.order_form_view import INVALID_ORDER_ID_MESSAGE, LINE_COLUMNS, parse_record_id

ORDER_COLUMNS: list[tuple[str, str]] = [
    ("order_id", "Order"),
    ("order_date", "Date"),
    ("order_deposit", "Deposit"),
    ("total", "Total"),
]
LINE_KEYS = {key for key, _ in LINE_COLUMNS}


@dataclass
class OrderSearchView(ClientSearchView):
    service: OrderService
    orders: list[OrderSummary] = field(default_factory=list)

    def select_client(self, cus_id: EntityId) -> bool:
        self.selected_client = self.find_client(cus_id)
        try:
            self.orders = self.service.orders_for_client(cus_id)
        except ServiceError as exc:
            self.orders = []
            self.response_message = exc.message
            return False
        self.response_message = ""
        return True

    def close_details(self) -> None:
        self.selected_client = None
        self.orders = []

    def print_invoice(self, order_id: Any) -> Path | None:
        parsed = parse_record_id(order_id)
        if parsed is None:
            self.response_message = INVALID_ORDER_ID_MESSAGE
            return None
        try:
            invoice = self.service.invoice(parsed)
            document = render_order_invoice(invoice, parsed, self.shop)
            self.last_invoice_path = self.printer.print_document("order", parsed, document)
        except (ServiceError, InvoiceError, InvoicePrintError) as exc:
            self.response_message = str(exc)
            return None
        return self.last_invoice_path

    def order_rows(self) -> list[dict[str, Any]]:
        return [
            {
                "order_id": order.order_id,
                "order_date": order.order_date,
                "order_deposit": order.order_deposit,
                "total": order.total,
                "lines": [line.model_dump(mode="json", include=LINE_KEYS) for line in order.products],
            }
            for order in self.orders
        ]

    def render(self) -> dict[str, Any]:
        payload = super().render()
        payload["orders"] = self.order_rows()
        payload["order_columns"] = ORDER_COLUMNS
        payload["line_columns"] = LINE_COLUMNS
        return payload
