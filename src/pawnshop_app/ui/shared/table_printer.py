from __future__ import annotations

from typing import Any, Callable

EMPTY_VALUE = "-"


def normalize_value(value: Any) -> str:
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, float):
        return f"{value:g}"
    text = str(value).strip()
    return text or EMPTY_VALUE


def format_table(rows: list[dict[str, Any]], columns: list[tuple[str, str]]) -> list[str]:
    widths = []
    for key, header in columns:
        max_cell = max((len(normalize_value(row.get(key))) for row in rows), default=0)
        widths.append(max(len(header), max_cell))

    lines = [
        " | ".join(header.ljust(widths[idx]) for idx, (_, header) in enumerate(columns)),
        "-+-".join("-" * width for width in widths),
    ]
    for row in rows:
        lines.append(
            " | ".join(normalize_value(row.get(key)).ljust(widths[idx]) for idx, (key, _) in enumerate(columns))
        )
    return lines


def print_table(
    title: str,
    rows: list[dict[str, Any]],
    columns: list[tuple[str, str]],
    out: Callable[[str], None] = print,
) -> None:
    out(f"\n{title}")
    if not rows:
        out("(no results)")
        return
    for line in format_table(rows, columns):
        out(line)
