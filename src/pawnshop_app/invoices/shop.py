from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_data_dir

DEFAULT_LOGO_URL = "/logo.png"


@dataclass(frozen=True)
class ShopProfile:
    name: str = ""
    logo_url: str = DEFAULT_LOGO_URL
    phone: str = ""
    address: str = ""


def load_shop_profile() -> ShopProfile:
    """Shop header details printed on every invoice."""
    return ShopProfile(
        name=os.getenv("PAWNSHOP_SHOP_NAME", "").strip(),
        logo_url=os.getenv("PAWNSHOP_LOGO_URL", DEFAULT_LOGO_URL).strip() or DEFAULT_LOGO_URL,
        phone=os.getenv("PAWNSHOP_SHOP_PHONE", "").strip(),
        address=os.getenv("PAWNSHOP_SHOP_ADDRESS", "").strip(),
    )


def default_invoice_dir() -> Path:
    configured = os.getenv("PAWNSHOP_INVOICE_DIR", "").strip()
    if configured:
        return Path(configured).expanduser()
    return Path(user_data_dir("pawnshop", "Pawnshop")) / "invoices"
