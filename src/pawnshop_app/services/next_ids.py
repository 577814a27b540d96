from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable

from pawnshop_sdk.models import EntityId, NextId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NextIds:
    client_id: EntityId | None
    record_id: EntityId | None


def _safe_fetch(name: str, fetch: Callable[[], NextId]) -> EntityId | None:
    try:
        return fetch().id
    except Exception:
        logger.warning("next_id_fetch_failed", extra={"id_kind": name}, exc_info=True)
        return None


def fetch_next_ids(
    client_fetch: Callable[[], NextId],
    record_fetch: Callable[[], NextId],
) -> NextIds:
    """Fetch the next client id and next record id concurrently.

    The two requests are independent; a failed fetch yields None for that id.
    """
    with ThreadPoolExecutor(max_workers=2) as executor:
        client_future = executor.submit(_safe_fetch, "client", client_fetch)
        record_future = executor.submit(_safe_fetch, "record", record_fetch)
        return NextIds(client_id=client_future.result(), record_id=record_future.result())
