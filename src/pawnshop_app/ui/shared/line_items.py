from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

LineT = TypeVar("LineT", bound=BaseModel)


class LineItemError(ValueError):
    pass


def replace_field(line: LineT, field_name: str, value: Any) -> LineT:
    """Return a copy of ``line`` with one field re-validated from form input."""
    model = type(line)
    if field_name not in model.model_fields:
        raise LineItemError(f"Unknown field: {field_name}")
    if isinstance(value, str):
        value = value.strip()
        if not value and model.model_fields[field_name].annotation in (int, float):
            value = 0
    try:
        return model.model_validate({**line.model_dump(), field_name: value})
    except ValidationError as exc:
        raise LineItemError(f"Invalid value for {field_name}.") from exc
