from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

PRODUCT_FORM_MESSAGE = "Please fill in all fields correctly."
CUSTOMER_FORM_MESSAGE = "Please review the customer details."
ORDER_LINES_MESSAGE = "Please add at least one valid product with all fields filled."
PAWN_LINES_MESSAGE = "Please add at least one valid pawn item with all fields filled."


@dataclass
class ValidationResult:
    ok: bool
    field_errors: dict[str, str] = field(default_factory=dict)
    summary: list[str] = field(default_factory=list)


def _result(errors: dict[str, str]) -> ValidationResult:
    return ValidationResult(ok=not errors, field_errors=errors, summary=list(dict.fromkeys(errors.values())))


def _blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def _positive(value: Any) -> bool:
    try:
        return float(value) > 0
    except (TypeError, ValueError):
        return False


def validate_product_form(name: str, price: Any, amount: Any) -> ValidationResult:
    errors: dict[str, str] = {}
    if _blank(name):
        errors["product_name"] = PRODUCT_FORM_MESSAGE
    if not _positive(price):
        errors["product_price"] = PRODUCT_FORM_MESSAGE
    if not _positive(amount):
        errors["product_amount"] = PRODUCT_FORM_MESSAGE
    return _result(errors)


def validate_customer(record_id: Any, name: str, phone_number: str, address: str) -> ValidationResult:
    errors: dict[str, str] = {}
    for key, value in (
        ("record_id", record_id),
        ("customer_name", name),
        ("phone_number", phone_number),
        ("address", address),
    ):
        if _blank(value):
            errors[key] = CUSTOMER_FORM_MESSAGE
    return _result(errors)


def validate_order_lines(lines: Sequence[Any]) -> ValidationResult:
    errors: dict[str, str] = {}
    if not lines:
        errors["lines"] = ORDER_LINES_MESSAGE
    for idx, line in enumerate(lines):
        if _blank(line.prod_name):
            errors[f"lines[{idx}].prod_name"] = ORDER_LINES_MESSAGE
        if _blank(line.order_weight):
            errors[f"lines[{idx}].order_weight"] = ORDER_LINES_MESSAGE
        if not _positive(line.order_amount):
            errors[f"lines[{idx}].order_amount"] = ORDER_LINES_MESSAGE
        if not _positive(line.product_sell_price):
            errors[f"lines[{idx}].product_sell_price"] = ORDER_LINES_MESSAGE
    return _result(errors)


def validate_pawn_lines(lines: Sequence[Any]) -> ValidationResult:
    errors: dict[str, str] = {}
    if not lines:
        errors["lines"] = PAWN_LINES_MESSAGE
    for idx, line in enumerate(lines):
        if _blank(line.prod_name):
            errors[f"lines[{idx}].prod_name"] = PAWN_LINES_MESSAGE
        if not _positive(line.pawn_amount):
            errors[f"lines[{idx}].pawn_amount"] = PAWN_LINES_MESSAGE
        if not _positive(line.pawn_unit_price):
            errors[f"lines[{idx}].pawn_unit_price"] = PAWN_LINES_MESSAGE
    return _result(errors)
