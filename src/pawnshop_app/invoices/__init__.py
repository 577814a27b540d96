from .printer import InvoicePrinter, InvoicePrintError
from .renderer import InvoiceError, render_order_invoice, render_pawn_invoice
from .shop import ShopProfile, load_shop_profile

__all__ = [
    "InvoiceError",
    "InvoicePrintError",
    "InvoicePrinter",
    "ShopProfile",
    "load_shop_profile",
    "render_order_invoice",
    "render_pawn_invoice",
]
