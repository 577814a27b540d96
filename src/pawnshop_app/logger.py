"""Audit trail of staff actions, one JSON object per line."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import IO

ACTION_FIELDS = ("section", "action", "staff", "record_id", "outcome")


class ActionFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "at": datetime.fromtimestamp(record.created, timezone.utc).isoformat(timespec="seconds"),
            "event": record.getMessage(),
        }
        for name in ACTION_FIELDS:
            entry[name] = getattr(record, name, None)
        return json.dumps(entry, ensure_ascii=False)


def mask_phone(phone_number: str | None) -> str | None:
    """Keep the last three digits of a phone number."""
    digits = "".join(ch for ch in phone_number or "" if ch.isdigit())
    if not digits:
        return None
    return "*" * max(len(digits) - 3, 0) + digits[-3:]


def get_logger(name: str, stream: IO[str] | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    # Lines go only to this handler.
    logger.propagate = False
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ActionFormatter())
    logger.addHandler(handler)
    return logger


def log_action(
    logger: logging.Logger,
    section: str,
    action: str,
    *,
    staff_phone: str | None,
    record_id: object | None,
    ok: bool,
) -> None:
    logger.info(
        "staff_action",
        extra={
            "section": section,
            "action": action,
            "staff": mask_phone(staff_phone),
            "record_id": None if record_id in (None, "") else str(record_id),
            "outcome": "success" if ok else "error",
        },
    )
