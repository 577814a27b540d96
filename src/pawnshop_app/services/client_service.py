from __future__ import annotations

import logging

from pawnshop_sdk import ApiSession
from pawnshop_sdk.exceptions import NotFoundError
from pawnshop_sdk.models import Client, EntityId

from .errors import normalize_error

logger = logging.getLogger(__name__)


def _parse_id(value: str) -> int | None:
    value = value.strip()
    return int(value) if value.isdigit() else None


def filter_clients(
    clients: list[Client],
    cus_id: str = "",
    cus_name: str = "",
    phone_number: str = "",
) -> list[Client]:
    """Match on id equality, or a case-insensitive name or phone substring.

    With every criterion empty all clients are returned.
    """
    cus_id = cus_id.strip()
    name = cus_name.strip().lower()
    phone = phone_number.strip().lower()
    if not (cus_id or name or phone):
        return list(clients)
    wanted_id = _parse_id(cus_id)

    def matches(client: Client) -> bool:
        if cus_id and _same_id(client.cus_id, wanted_id, cus_id):
            return True
        if name and name in (client.cus_name or "").lower():
            return True
        if phone and phone in (client.phone_number or "").lower():
            return True
        return False

    return [client for client in clients if matches(client)]


def _same_id(value: EntityId | None, wanted: int | None, raw: str) -> bool:
    if value is None:
        return False
    if wanted is not None and isinstance(value, int):
        return value == wanted
    return str(value).strip() == raw


class ClientService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def list_clients(self) -> list[Client]:
        try:
            clients = self.session.clients_client().list_clients()
        except Exception as exc:
            raise normalize_error(exc) from exc
        logger.info("clients_loaded", extra={"count": len(clients)})
        return clients

    def filter_clients(
        self,
        clients: list[Client],
        cus_id: str = "",
        cus_name: str = "",
        phone_number: str = "",
    ) -> list[Client]:
        return filter_clients(clients, cus_id=cus_id, cus_name=cus_name, phone_number=phone_number)


def lookup_customer(session: ApiSession, phone_number: str) -> Client | None:
    """First client registered under ``phone_number``, or None."""
    try:
        matches = session.clients_client().find_by_phone(phone_number.strip())
    except NotFoundError:
        return None
    except Exception as exc:
        raise normalize_error(exc) from exc
    return matches[0] if matches else None
