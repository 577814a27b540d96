from __future__ import annotations

import io
import json

from pawnshop_app.logger import get_logger, log_action, mask_phone


def test_mask_phone_keeps_last_three_digits() -> None:
    assert mask_phone("012 345 678") == "******678"
    assert mask_phone("78") == "78"
    assert mask_phone("") is None
    assert mask_phone(None) is None


def test_log_action_writes_one_json_line() -> None:
    stream = io.StringIO()
    logger = get_logger("pawnshop_app.tests.actions", stream=stream)

    log_action(logger, "pawns", "create", staff_phone="012345678", record_id=41, ok=True)
    log_action(logger, "orders", "print_invoice", staff_phone=None, record_id="", ok=False)

    first, second = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert first["event"] == "staff_action"
    assert first["section"] == "pawns"
    assert first["staff"] == "******678"
    assert first["record_id"] == "41"
    assert first["outcome"] == "success"
    assert second["record_id"] is None
    assert second["staff"] is None
    assert second["outcome"] == "error"
