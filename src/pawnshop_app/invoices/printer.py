from __future__ import annotations

import logging
import webbrowser
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable

from pawnshop_sdk.models import EntityId

from .shop import default_invoice_dir

logger = logging.getLogger(__name__)


class InvoicePrintError(RuntimeError):
    pass


@dataclass
class InvoicePrinter:
    """Writes rendered invoices to disk and hands them to the browser's print window."""

    output_dir: Path = field(default_factory=default_invoice_dir)
    opener: Callable[[str], bool] = webbrowser.open

    def print_document(self, kind: str, record_id: EntityId, document: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d%H%M%S")
        path = self.output_dir / f"{kind}_{record_id}_{stamp}.html"
        path.write_text(document, encoding="utf-8")
        logger.info("invoice_written", extra={"kind": kind, "record_id": str(record_id), "path": str(path)})
        if not self.opener(path.resolve().as_uri()):
            raise InvoicePrintError("Failed to open print window.")
        return path
