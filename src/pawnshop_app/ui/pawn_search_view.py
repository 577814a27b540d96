from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pawnshop_sdk.models import EntityId, PawnSummary

from pawnshop_app.invoices import InvoiceError, InvoicePrintError, render_pawn_invoice
from pawnshop_app.services.errors import ServiceError
from pawnshop_app.services.pawn_service import PawnService
from pawnshop_app.ui.client_search_view import ClientSearchView
from pawnshop_app.ui.order_form_view import parse_record_id
from pawnshop_app.ui.pawn_form_view import INVALID_PAWN_ID_MESSAGE, LINE_COLUMNS

PAWN_COLUMNS: list[tuple[str, str]] = [
    ("pawn_id", "Pawn"),
    ("pawn_date", "Date"),
    ("pawn_expire_date", "Expires"),
    ("pawn_deposit", "Deposit"),
    ("total", "Total"),
]
LINE_KEYS = {key for key, _ in LINE_COLUMNS}


@dataclass
class PawnSearchView(ClientSearchView):
    service: PawnService
    pawns: list[PawnSummary] = field(default_factory=list)

    def select_client(self, cus_id: EntityId) -> bool:
        self.selected_client = self.find_client(cus_id)
        try:
            self.pawns = self.service.pawns_for_client(cus_id)
        except ServiceError as exc:
            self.pawns = []
            self.response_message = exc.message
            return False
        self.response_message = ""
        return True

    def close_details(self) -> None:
        self.selected_client = None
        self.pawns = []

    def print_invoice(self, pawn_id: Any) -> Path | None:
        parsed = parse_record_id(pawn_id)
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
        return self.last_invoice_path

    def pawn_rows(self) -> list[dict[str, Any]]:
        return [
            {
                "pawn_id": pawn.pawn_id,
                "pawn_date": pawn.pawn_date,
                "pawn_expire_date": pawn.pawn_expire_date,
                "pawn_deposit": pawn.pawn_deposit,
                "total": pawn.total,
                "lines": [line.model_dump(mode="json", include=LINE_KEYS) for line in pawn.products],
            }
            for pawn in self.pawns
        ]

    def render(self) -> dict[str, Any]:
        payload = super().render()
        payload["pawns"] = self.pawn_rows()
        payload["pawn_columns"] = PAWN_COLUMNS
        payload["line_columns"] = LINE_COLUMNS
        return payload
