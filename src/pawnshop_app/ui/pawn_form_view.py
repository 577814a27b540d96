from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pawnshop_sdk.models import EntityId, PawnCreate, PawnLine, PawnUpdate

from pawnshop_app.invoices import InvoiceError, InvoicePrinter, InvoicePrintError, ShopProfile, render_pawn_invoice
from pawnshop_app.services.errors import ServiceError
from pawnshop_app.services.pawn_service import PawnService
from pawnshop_app.ui.order_form_view import (
    CUSTOMER_FOUND_MESSAGE,
    CUSTOMER_NOT_FOUND_MESSAGE,
    PHONE_REQUIRED_MESSAGE,
    parse_record_id,
)
from pawnshop_app.ui.shared.line_items import LineItemError, replace_field
from pawnshop_app.ui.shared.validators import validate_customer, validate_pawn_lines

PAWN_UPDATED_MESSAGE = "Pawn record updated successfully!"
PAWN_ID_MISSING_MESSAGE = "Pawn ID is missing. Cannot update."
PAWN_ID_UNAVAILABLE_MESSAGE = "Failed to retrieve a valid Pawn ID."
INVALID_PAWN_ID_MESSAGE = "Please enter a valid Pawn ID."

LINE_COLUMNS: list[tuple[str, str]] = [
    ("prod_name", "Item"),
    ("pawn_weight", "Weight"),
    ("pawn_amount", "Amount"),
    ("pawn_unit_price", "Unit price"),
]


def _blank_lines() -> list[PawnLine]:
    return [PawnLine()]


@dataclass
class PawnFormView:
    service: PawnService
    printer: InvoicePrinter = field(default_factory=InvoicePrinter)
    shop: ShopProfile = field(default_factory=ShopProfile)
    pawn_id: EntityId | None = None
    cus_id: EntityId | None = None
    next_client_id: EntityId | None = None
    cus_name: str = ""
    phone_number: str = ""
    address: str = ""
    pawn_deposit: float = 0
    pawn_date: str = ""
    pawn_expire_date: str = ""
    lines: list[PawnLine] = field(default_factory=_blank_lines)
    last_pawn_id: EntityId | None = None
    response_message: str = ""
    last_invoice_path: Path | None = None

    def initialize(self) -> None:
        ids = self.service.next_ids()
        self.next_client_id = ids.client_id
        self.pawn_id = ids.record_id

    @property
    def effective_customer_id(self) -> EntityId | None:
        return self.cus_id or self.next_client_id

    def add_line(self) -> None:
        self.lines.append(PawnLine())

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
            self.cus_id = None
            self.cus_name = ""
            self.address = ""
            return False
        self.cus_id = customer.cus_id
        self.cus_name = customer.cus_name
        self.address = customer.address
        self.response_message = CUSTOMER_FOUND_MESSAGE
        return True

    def _validate(self, record_id: EntityId | None) -> bool:
        customer = validate_customer(record_id, self.cus_name, self.phone_number, self.address)
        if not customer.ok:
            self.response_message = customer.summary[0]
            return False
        lines = validate_pawn_lines(self.lines)
        if not lines.ok:
            self.response_message = lines.summary[0]
            return False
        return True

    def submit(self) -> bool:
        pawn_id = self.pawn_id
        if not pawn_id:
            try:
                pawn_id = self.service.next_pawn_id()
            except ServiceError:
                pawn_id = None
        if not pawn_id:
            self.response_message = PAWN_ID_UNAVAILABLE_MESSAGE
            return False
        self.pawn_id = pawn_id
        if not self._validate(pawn_id):
            return False
        pawn = PawnCreate(
            pawn_id=pawn_id,
            cus_id=self.effective_customer_id,
            cus_name=self.cus_name.strip(),
            address=self.address.strip(),
            phone_number=self.phone_number.strip(),
            pawn_deposit=self.pawn_deposit or 0,
            pawn_date=self.pawn_date.strip(),
            pawn_expire_date=self.pawn_expire_date.strip(),
            pawn_product_detail=list(self.lines),
        )
        try:
            self.service.create(pawn)
        except ServiceError as exc:
            self.response_message = exc.message
            return False
        self.last_pawn_id = pawn_id
        self.reset()
        self.response_message = f"Pawn record successfully created! (Pawn ID: {pawn_id})"
        return True

    def edit(self) -> bool:
        if not self.pawn_id:
            self.response_message = PAWN_ID_MISSING_MESSAGE
            return False
        if not self._validate(self.pawn_id):
            return False
        update = PawnUpdate(
            pawn_id=self.pawn_id,
            cus_id=self.cus_id,
            customer_name=self.cus_name.strip(),
            address=self.address.strip(),
            phone_number=self.phone_number.strip(),
            pawn_deposit=self.pawn_deposit or 0,
            pawn_expire_date=self.pawn_expire_date.strip(),
            products=list(self.lines),
        )
        try:
            self.service.update(update)
        except ServiceError as exc:
            self.response_message = exc.message
            return False
        self.last_pawn_id = self.pawn_id
        self.response_message = PAWN_UPDATED_MESSAGE
        return True

    def reset(self) -> None:
        self.cus_id = None
        self.cus_name = ""
        self.phone_number = ""
        self.address = ""
        self.pawn_deposit = 0
        self.pawn_date = ""
        self.pawn_expire_date = ""
        self.lines = _blank_lines()
        self.initialize()

    def print_invoice(self, pawn_id: Any = None) -> Path | None:
        parsed = parse_record_id(pawn_id if pawn_id is not None else (self.last_pawn_id or self.pawn_id))
        if parsed is None:
            self.response_message = INVALID_PAWN_ID_MESSAGE
            return None
        try:
            invoice = self.service.invoice(parsed)
            document = render_pawn_invoice(invoice, self.shop)
            self.last_invoice_path = self.printer.print_document("pawn", parsed, document)
        except (ServiceError, InvoiceError, InvoicePrintError) as exc:
            self.response_message = str(exc)
            return None
        self.response_message = ""
        return self.last_invoice_path

    def render(self) -> dict[str, Any]:
        return {
            "pawn_id": self.pawn_id,
            "customer_id": self.effective_customer_id,
            "customer_name": self.cus_name,
            "phone_number": self.phone_number,
            "address": self.address,
            "pawn_deposit": self.pawn_deposit,
            "pawn_date": self.pawn_date,
            "pawn_expire_date": self.pawn_expire_date,
            "lines": [line.model_dump(mode="json", include={key for key, _ in LINE_COLUMNS}) for line in self.lines],
            "columns": LINE_COLUMNS,
            "total": self.total_price(),
            "message": self.response_message,
        }
