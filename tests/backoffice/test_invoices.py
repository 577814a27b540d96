from __future__ import annotations

from pathlib import Path

import pytest

from pawnshop_sdk.models import OrderInvoice, PawnInvoice

from pawnshop_app.invoices import (
    InvoiceError,
    InvoicePrinter,
    ShopProfile,
    load_shop_profile,
    render_order_invoice,
    render_pawn_invoice,
)

from fakes import RecordingOpener

ORDER_INVOICE = {
    "cus_id": 7,
    "customer_name": "Dara <VIP>",
    "phone_number": "012",
    "address": "Street 1 & 2",
    "orders": [
        {
            "order_date": "2024-05-01",
            "order_deposit": 50,
            "product": {
                "prod_name": "Ring",
                "order_weight": "2",
                "order_amount": 2,
                "product_sell_price": 100,
                "product_labor_cost": 10,
                "product_buy_price": 80,
            },
        },
        {
            "order_date": "2024-05-01",
            "order_deposit": 0,
            "product": {"prod_name": "Chain", "order_weight": "1", "order_amount": 1, "product_sell_price": 40},
        },
    ],
}


def test_order_invoice_layout_and_totals() -> None:
    invoice = OrderInvoice.model_validate(ORDER_INVOICE)

    html = render_order_invoice(invoice, 12, ShopProfile(name="Golden Pawn", logo_url="https://cdn.test/logo.png"))

    assert "@page { size: A4" in html
    assert "វិក្កយបត្រ<br>INVOICE" in html
    assert "កាលបរិច្ឆេទ៖ 2024-05-01" in html
    assert "លេខវិក្កយបត្រ៖ 12" in html
    assert "ឈ្មោះអតិថិជន៖ Dara &lt;VIP&gt;" in html
    assert "អាសយដ្ឋាន៖ Street 1 &amp; 2" in html
    for header in ("ល.រ", "ឈ្មោះទំនិញ", "ទម្ងន់", "ចំនួន", "តម្លៃ", "តម្លៃកម្មាល", "តម្លៃទិញ"):
        assert f"<th>{header}</th>" in html
    assert "<tr><td>1</td><td>Ring</td>" in html
    assert "<tr><td>2</td><td>Chain</td>" in html
    assert "<tr><td>សរុប</td><td>250</td></tr>" in html
    assert "<tr><td>កក់មុន</td><td>50</td></tr>" in html
    assert "<tr><td>នៅខ្វះ</td><td>200</td></tr>" in html
    assert "ហត្ថលេខាអ្នកទិញ" in html and "ហត្ថលេខាអ្នកលក់" in html
    assert "window.print();" in html
    assert 'src="https://cdn.test/logo.png"' in html
    assert "Golden Pawn" in html


def test_order_invoice_without_lines_is_rejected() -> None:
    invoice = OrderInvoice.model_validate({**ORDER_INVOICE, "orders": []})
    with pytest.raises(InvoiceError, match="No order details found."):
        render_order_invoice(invoice, 12)


def test_pawn_invoice_numbers_lines_across_pawns() -> None:
    invoice = PawnInvoice.model_validate(
        {
            "cus_id": 7,
            "customer_name": "Dara",
            "phone_number": "012",
            "address": "PP",
            "pawns": [
                {
                    "pawn_id": 99,
                    "pawn_date": "2024-05-01",
                    "pawn_expire_date": "2024-08-01",
                    "pawn_deposit": 20,
                    "products": [
                        {"prod_name": "Ring", "pawn_weight": "3", "pawn_amount": 2, "pawn_unit_price": 50},
                        {"prod_name": "Chain", "pawn_weight": "1", "pawn_amount": 1, "pawn_unit_price": 30.5},
                    ],
                },
                {
                    "pawn_id": 100,
                    "pawn_deposit": 5,
                    "products": [{"prod_name": "Watch", "pawn_amount": 1, "pawn_unit_price": 10}],
                },
            ],
        }
    )

    html = render_pawn_invoice(invoice)

    assert "លេខ៖ 99" in html
    assert "លេខអតិថិជន៖ 7" in html
    assert "<tr><td>1</td><td>Ring</td>" in html
    assert "<tr><td>2</td><td>Chain</td>" in html
    assert "<tr><td>3</td><td>Watch</td>" in html
    assert "<tr><td>សរុប</td><td>140.50</td></tr>" in html
    assert "<tr><td>កក់មុន</td><td>20</td></tr>" in html
    assert "<tr><td>នៅខ្វះ</td><td>120.50</td></tr>" in html


def test_pawn_invoice_without_pawns_is_rejected() -> None:
    with pytest.raises(InvoiceError):
        render_pawn_invoice(PawnInvoice())


def test_printer_writes_utf8_file_and_opens_it(tmp_path: Path) -> None:
    opener = RecordingOpener()
    printer = InvoicePrinter(output_dir=tmp_path / "out", opener=opener)

    path = printer.print_document("order", 12, "<html>វិក្កយបត្រ</html>")

    assert path.parent == tmp_path / "out"
    assert path.read_text(encoding="utf-8") == "<html>វិក្កយបត្រ</html>"
    assert opener.opened == [path.resolve().as_uri()]


def test_shop_profile_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAWNSHOP_SHOP_NAME", "Golden Pawn")
    monkeypatch.setenv("PAWNSHOP_LOGO_URL", "https://cdn.test/logo.png")

    profile = load_shop_profile()

    assert profile.name == "Golden Pawn"
    assert profile.logo_url == "https://cdn.test/logo.png"
    assert load_shop_profile().phone == ""
