from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class PageStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    READY = "ready"
    STALE = "stale"
    FAILED = "failed"
    NO_NEXT_ID = "no_next_id"


@dataclass(frozen=True)
class PageState:
    """What a page can show: its table, and whether a new record can be numbered."""

    status: PageStatus
    message: str | None = None
    row_count: int = 0
    can_create: bool = True

    def render(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "message": self.message,
            "row_count": self.row_count,
            "can_create": self.can_create,
        }


def resolve_state(
    *,
    is_loading: bool,
    list_error: str | None,
    row_count: int,
    next_id_error: str | None = None,
) -> PageState:
    # A failed list load outranks a missing next id.
    can_create = next_id_error is None
    if is_loading:
        return PageState(PageStatus.LOADING, "Loading...", row_count, can_create)
    if list_error and row_count:
        return PageState(PageStatus.STALE, list_error, row_count, can_create)
    if list_error:
        return PageState(PageStatus.FAILED, list_error, 0, can_create)
    if next_id_error:
        return PageState(PageStatus.NO_NEXT_ID, f"Next ID unavailable: {next_id_error}", row_count, False)
    if not row_count:
        return PageState(PageStatus.EMPTY, "No records yet", 0)
    return PageState(PageStatus.READY, None, row_count)
