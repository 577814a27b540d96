from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pawnshop_sdk.models import EntityId, OrderCreate, OrderLine

from pawnshop_app.invoices import InvoiceError, InvoicePrinter, InvoicePrintError, ShopProfile, render_order_invoice
from pawnshop_app.services.errors import ServiceError
from pawnshop_app.services.order_service import OrderService
from pawnshop_app.ui.shared.line_items import LineItemError, replace_field
from pawnshop_app.ui.shared.validators import validate_customer, validate_order_lines

ORDER_CREATED_MESSAGE = "Order created successfully."
ORDER_UPDATED_MESSAGE = "Order updated successfully!"
ORDER_CANCELLED_MESSAGE = "Order cancelled."
CUSTOMER_FOUND_MESSAGE = "Customer found."
CUSTOMER_NOT_FOUND_MESSAGE = "Customer not found."
PHONE_REQUIRED_MESSAGE = "Please enter a phone number to search."
INVALID_ORDER_ID_MESSAGE = "Please enter a valid Order ID."

LINE_COLUMNS: list[tuple[str, str]] = [
    ("prod_name", "Product"),
    ("order_weight", "Weight"),
    ("order_amount", "Amount"),
    ("product_sell_price", "Sell price"),
    ("product_labor_cost", "Labor cost"),
    ("product_buy_price", "Buy price"),
]


def _blank_lines() -> list[OrderLine]:
    return [OrderLine()]


def parse_record_id(value: Any) -> int | None:
    text = str(value or "").strip()
    if not text.isdigit() or int(text) <= 0:
        return None
    return int(text)


@dataclass
class OrderFormView:
    service: OrderService
    printer: InvoicePrinter = field(default_factory=InvoicePrinter)
    shop: ShopProfile = field(default_factory=ShopProfile)
    customer_id: EntityId | None = None
    next_client_id: EntityId | None = None
    order_id: EntityId | None = None
    last_order_id: EntityId | None = None
    customer_name: str = ""
    phone_number: str = ""
    address: str = ""
    invoice_number: str = ""
    order_date: str = ""
    order_deposit: float = 0
    lines: list[OrderLine] = field(default_factory=_blank_lines)
    response_message: str = ""
    last_invoice_path: Path | None = None

    def initialize(self) -> None:
        ids = self.service.next_ids()
        self.next_client_id = ids.client_id
        self.order_id = ids.record_id

    @property
    def effective_customer_id(self) -> EntityId | None:
        return self.customer_id or self.next_client_id

    def add_line(self) -> None:
        self.lines.append(OrderLine())

    def remove_line(self, index: int) -> bool:
        if not 0 <= index < len(self.lines):
            return False
        del self.lines[index]
        return True

    def update_line(self, index: int, field_name: str, value: Any) -> bool:
        if not 0 <= index < len(self.lines):
            return False
        try:
            self.lines[index] = replace_field(self.lines[index], field_name, value)
        except LineItemError as exc:
            self.response_message = str(exc)
            return False
        return True

    def total_price(self) -> float:
        return sum(line.line_total for line in self.lines)

    def search_customer(self) -> bool:
        if not self.phone_number.strip():
            self.response_message = PHONE_REQUIRED_MESSAGE
            return False
        try:
            customer = self.service.lookup_customer(self.phone_number)
        except ServiceError as exc:
            self.response_message = exc.message
            return False
        if customer is None:
            self.response_message = CUSTOMER_NOT_FOUND_MESSAGE
            self.customer_name = ""
            self.address = ""
            self.customer_id = None
            self.next_client_id = self.service.next_ids().client_id
            return False
        self.customer_name = customer.cus_name
        self.address = customer.address
        self.customer_id = customer.cus_id
        self.response_message = CUSTOMER_FOUND_MESSAGE
        return True

    def build_order(self) -> OrderCreate:
        return OrderCreate(
            order_id=self.order_id,
            cus_id=self.effective_customer_id,
            cus_name=self.customer_name.strip(),
            address=self.address.strip(),
            phone_number=self.phone_number.strip(),
            invoice_number=self.invoice_number.strip() or "N/A",
            order_date=self.order_date.strip() or "N/A",
            order_deposit=self.order_deposit or 0,
            order_product_detail=list(self.lines),
        )

    def validate(self) -> bool:
        customer = validate_customer(self.effective_customer_id, self.customer_name, self.phone_number, self.address)
        if not customer.ok:
            self.response_message = customer.summary[0]
            return False
        lines = validate_order_lines(self.lines)
        if not lines.ok:
            self.response_message = lines.summary[0]
            return False
        return True

    def submit(self) -> bool:
        if not self.validate():
            return False
        order = self.build_order()
        try:
            self.service.create(order)
        except ServiceError as exc:
            self.response_message = exc.message
            return False
        self.last_order_id = order.order_id
        self.reset()
        self.initialize()
        self.response_message = ORDER_CREATED_MESSAGE
        return True

    def update(self) -> bool:
        if not self.validate():
            return False
        order = self.build_order()
        try:
            outcome = self.service.update_or_create(order)
        except ServiceError as exc:
            self.response_message = exc.message
            return False
        if outcome == "created":
            self.last_order_id = order.order_id
            self.reset()
            self.initialize()
            self.response_message = ORDER_CREATED_MESSAGE
        else:
            self.response_message = ORDER_UPDATED_MESSAGE
        return True

    def reset(self) -> None:
        self.customer_id = None
        self.customer_name = ""
        self.phone_number = ""
        self.address = ""
        self.invoice_number = ""
        self.order_date = ""
        self.order_deposit = 0
        self.lines = _blank_lines()

    def cancel(self) -> None:
        self.reset()
        self.initialize()
        self.response_message = ORDER_CANCELLED_MESSAGE

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
        self.response_message = ""
        return self.last_invoice_path

    def render(self) -> dict[str, Any]:
        return {
            "customer_id": self.effective_customer_id,
            "order_id": self.order_id,
            "last_order_id": self.last_order_id,
            "customer_name": self.customer_name,
            "phone_number": self.phone_number,
            "address": self.address,
            "invoice_number": self.invoice_number,
            "order_date": self.order_date,
            "order_deposit": self.order_deposit,
            "lines": [line.model_dump(mode="json", include={key for key, _ in LINE_COLUMNS}) for line in self.lines],
            "columns": LINE_COLUMNS,
            "total": self.total_price(),
            "message": self.response_message,
        }
