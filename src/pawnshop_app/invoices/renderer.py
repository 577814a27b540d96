"""HTML invoices in the layout of the shop's paper forms.

Documents are self-contained: inline CSS sized for A4 and a script that opens
the print dialog once the page has loaded.
"""
from __future__ import annotations

from html import escape
from typing import Any

from pawnshop_sdk.models import EntityId, OrderInvoice, PawnInvoice

from .shop import ShopProfile

NO_ORDER_DETAILS_MESSAGE = "No order details found."
NO_PAWN_DETAILS_MESSAGE = "No pawn data found for the provided ID."

ORDER_COLUMNS = ("ល.រ", "ឈ្មោះទំនិញ", "ទម្ងន់", "ចំនួន", "តម្លៃ", "តម្លៃកម្មាល", "តម្លៃទិញ")
PAWN_COLUMNS = ("ល.រ", "ឈ្មោះទំនិញ", "ទម្ងន់", "ចំនួន", "តម្លៃ")

_STYLE = """
    @page { size: A4; margin: 15mm; }
    body { font-family: 'Khmer OS', Arial, sans-serif; margin: 0; padding: 20px; }
    .invoice-header { text-align: center; margin-bottom: 20px; }
    .logo { max-width: 150px; }
    .company-name { font-size: 24px; font-weight: bold; margin: 10px 0; }
    .contact-info { font-size: 14px; margin: 5px 0; }
    .date-id-section { display: flex; justify-content: space-between; }
    .invoice-title { text-align: center; font-size: 20px; font-weight: bold; margin: 10px 0; }
    .customer-details { margin: 20px 0; }
    .customer-row { margin: 5px 0; }
    table { width: 100%; border-collapse: collapse; margin: 20px 0; }
    th, td { border: 1px solid #ddd; padding: 8px; text-align: left; }
    th { background-color: #f5f5f5; }
    table.total-section { width: 40%; margin-left: auto; }
    .signatures { margin-top: 50px; display: flex; justify-content: space-between; }
    .signature-box { text-align: center; width: 200px; }
    .signature-line { border-top: 1px solid #000; margin-top: 50px; }
    @media print { body { padding: 0; margin: 0; } }
"""

_PRINT_SCRIPT = """
    <script>
      window.onload = function() {
        window.print();
        window.close();
      };
    </script>
"""


class InvoiceError(ValueError):
    pass


def format_amount(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def _cell(value: Any) -> str:
    return f"<td>{escape(format_amount(value))}</td>"


def _header(shop: ShopProfile, date_value: Any, number_label: str, number: Any) -> str:
    contact = "".join(
        f'<div class="contact-info">{escape(text)}</div>' for text in (shop.phone, shop.address) if text
    )
    name = f'<div class="company-name">{escape(shop.name)}</div>' if shop.name else ""
    return (
        '<div class="invoice-header">'
        f'<div class="logo-section"><img src="{escape(shop.logo_url)}" alt="Company Logo" class="logo"></div>'
        f"{name}{contact}"
        '<div class="date-id-section">'
        f'<div class="date-section">កាលបរិច្ឆេទ៖ {escape(format_amount(date_value))}</div>'
        f'<div class="id-section">{number_label} {escape(format_amount(number))}</div>'
        "</div>"
        '<div class="invoice-title">វិក្កយបត្រ<br>INVOICE</div>'
        "</div>"
    )


def _customer_block(rows: list[tuple[str, Any]]) -> str:
    body = "".join(
        f'<div class="customer-row">{label} {escape(format_amount(value))}</div>' for label, value in rows
    )
    return f'<div class="customer-details">{body}</div>'


def _lines_table(columns: tuple[str, ...], rows: list[list[Any]]) -> str:
    head = "".join(f"<th>{column}</th>" for column in columns)
    body = "".join(
        "<tr>" + "".join(_cell(value) for value in [idx, *row]) + "</tr>" for idx, row in enumerate(rows, start=1)
    )
    return f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"


def _totals_table(total: float, deposit: float, balance: float) -> str:
    return (
        '<table class="total-section">'
        f"<tr><td>សរុប</td>{_cell(total)}</tr>"
        f"<tr><td>កក់មុន</td>{_cell(deposit)}</tr>"
        f"<tr><td>នៅខ្វះ</td>{_cell(balance)}</tr>"
        "</table>"
    )


def _signatures() -> str:
    boxes = "".join(
        f'<div class="signature-box"><div class="signature-line"></div><div>{label}</div></div>'
        for label in ("ហត្ថលេខាអ្នកទិញ", "ហត្ថលេខាអ្នកលក់")
    )
    return f'<div class="signatures">{boxes}</div>'


def _document(body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="km">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        "<title>វិក្កយបត្រ</title>\n"
        f"<style>{_STYLE}</style>\n"
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        f"{_PRINT_SCRIPT}"
        "</body>\n"
        "</html>\n"
    )


def render_order_invoice(invoice: OrderInvoice, order_id: EntityId, shop: ShopProfile | None = None) -> str:
    if not invoice.orders:
        raise InvoiceError(NO_ORDER_DETAILS_MESSAGE)
    shop = shop or ShopProfile()
    rows = [
        [
            item.product.prod_name,
            item.product.order_weight,
            item.product.order_amount,
            item.product.product_sell_price,
            item.product.product_labor_cost,
            item.product.product_buy_price,
        ]
        for item in invoice.orders
    ]
    body = "".join(
        [
            _header(shop, invoice.order_date, "លេខវិក្កយបត្រ៖", order_id),
            _customer_block(
                [
                    ("ឈ្មោះអតិថិជន៖", invoice.customer_name),
                    ("លេខទូរស័ព្ទ៖", invoice.phone_number),
                    ("អាសយដ្ឋាន៖", invoice.address),
                ]
            ),
            _lines_table(ORDER_COLUMNS, rows),
            _totals_table(invoice.total, invoice.deposit, invoice.balance),
            _signatures(),
        ]
    )
    return _document(body)


def render_pawn_invoice(invoice: PawnInvoice, shop: ShopProfile | None = None) -> str:
    first = invoice.first_pawn
    if first is None:
        raise InvoiceError(NO_PAWN_DETAILS_MESSAGE)
    shop = shop or ShopProfile()
    rows = [
        [line.prod_name, line.pawn_weight, line.pawn_amount, line.pawn_unit_price] for line in invoice.lines
    ]
    body = "".join(
        [
            _header(shop, first.pawn_date, "លេខ៖", first.pawn_id),
            _customer_block(
                [
                    ("លេខអតិថិជន៖", invoice.cus_id),
                    ("ឈ្មោះអតិថិជន៖", invoice.customer_name),
                    ("លេខទូរស័ព្ទ៖", invoice.phone_number),
                    ("អាសយដ្ឋាន៖", invoice.address),
                    ("ថ្ងៃផុតកំណត់៖", first.pawn_expire_date),
                ]
            ),
            _lines_table(PAWN_COLUMNS, rows),
            _totals_table(invoice.total, invoice.deposit, invoice.balance),
            _signatures(),
        ]
    )
    return _document(body)
