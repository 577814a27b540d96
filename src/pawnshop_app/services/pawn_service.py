from __future__ import annotations

import logging

from pawnshop_sdk import ApiSession
from pawnshop_sdk.exceptions import AlreadyExistsError, NotFoundError
from pawnshop_sdk.models import Client, EntityId, PawnCreate, PawnInvoice, PawnSummary, PawnUpdate

from .client_service import lookup_customer
from .errors import ServiceError, normalize_error
from .next_ids import NextIds, fetch_next_ids

logger = logging.getLogger(__name__)

NO_PAWN_DATA_MESSAGE = "No pawn data found for the provided ID."


class PawnService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def next_ids(self) -> NextIds:
        return fetch_next_ids(
            self.session.clients_client().next_client_id,
            self.session.pawns_client().next_pawn_id,
        )

    def next_pawn_id(self) -> EntityId:
        try:
            return self.session.pawns_client().next_pawn_id().id
        except Exception as exc:
            raise normalize_error(exc) from exc

    def lookup_customer(self, phone_number: str) -> Client | None:
        return lookup_customer(self.session, phone_number)

    def create(self, pawn: PawnCreate) -> None:
        logger.info("pawn_create_attempt", extra={"pawn_id": pawn.pawn_id})
        try:
            self.session.pawns_client().create_pawn(pawn)
        except AlreadyExistsError as exc:
            logger.warning("pawn_create_duplicate", extra={"pawn_id": pawn.pawn_id})
            raise ServiceError(f"Pawn ID {pawn.pawn_id} already exists.", details=exc.code) from exc
        except Exception as exc:
            raise normalize_error(exc) from exc
        logger.info("pawn_create_success", extra={"pawn_id": pawn.pawn_id})

    def update(self, pawn: PawnUpdate) -> None:
        logger.info("pawn_update_attempt", extra={"pawn_id": pawn.pawn_id})
        try:
            self.session.pawns_client().update_pawn(pawn)
        except Exception as exc:
            raise normalize_error(exc) from exc
        logger.info("pawn_update_success", extra={"pawn_id": pawn.pawn_id})

    def pawns_for_client(self, cus_id: EntityId) -> list[PawnSummary]:
        try:
            return self.session.pawns_client().list_pawns(cus_id)
        except NotFoundError:
            return []
        except Exception as exc:
            raise normalize_error(exc) from exc

    def invoice(self, pawn_id: EntityId) -> PawnInvoice:
        try:
            invoice = self.session.pawns_client().get_invoice(pawn_id)
        except NotFoundError as exc:
            raise ServiceError(NO_PAWN_DATA_MESSAGE) from exc
        except Exception as exc:
            raise normalize_error(exc) from exc
        if invoice is None or not invoice.pawns:
            raise ServiceError(NO_PAWN_DATA_MESSAGE)
        return invoice
