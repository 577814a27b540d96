from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..http_client import envelope_ok, result_list
from ..models import EntityId, NextId, PawnCreate, PawnInvoice, PawnSummary, PawnUpdate
from .base import BaseClient, path_segment


@dataclass
class PawnsClient(BaseClient):
    module: str = "pawns"

    def next_pawn_id(self) -> NextId:
        return self._next_id("/next-pawn-id", "next_pawn_id")

    def create_pawn(self, pawn: PawnCreate) -> Any:
        return self._request(
            "POST",
            "/pawn",
            json_body=pawn.model_dump(mode="json"),
            operation="create_pawn",
        )

    def update_pawn(self, pawn: PawnUpdate) -> Any:
        return self._request(
            "PUT",
            f"/pawn/{path_segment(pawn.pawn_id)}",
            json_body=pawn.model_dump(mode="json", by_alias=True),
            operation="update_pawn",
        )

    def list_pawns(self, cus_id: EntityId) -> list[PawnSummary]:
        payload = self._request(
            "GET",
            "/pawn",
            params={"cus_id": cus_id},
            operation="list_pawns",
        )
        return [PawnSummary.model_validate(item) for item in result_list(payload, operation="list_pawns")]

    def get_invoice(self, pawn_id: EntityId) -> PawnInvoice | None:
        payload = self._request(
            "GET",
            "/pawn/print",
            params={"pawn_id": pawn_id},
            operation="pawn_invoice",
        )
        if not envelope_ok(payload):
            return None
        rows = result_list(payload, operation="pawn_invoice")
        return PawnInvoice.model_validate(rows[0])
