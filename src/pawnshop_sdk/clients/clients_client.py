from __future__ import annotations

from dataclasses import dataclass

from ..http_client import envelope_ok, result_list
from ..models import Client, NextId
from .base import BaseClient


@dataclass
class ClientsClient(BaseClient):
    module: str = "clients"

    def next_client_id(self) -> NextId:
        return self._next_id("/next-client-id", "next_client_id")

    def list_clients(self) -> list[Client]:
        payload = self._request("GET", "/client", operation="list_clients")
        return [Client.model_validate(item) for item in result_list(payload, operation="list_clients")]

    def find_by_phone(self, phone_number: str) -> list[Client]:
        payload = self._request(
            "GET",
            "/order/client_phone",
            params={"phone_number": phone_number},
            operation="find_client_by_phone",
        )
        if not envelope_ok(payload):
            return []
        return [Client.model_validate(item) for item in result_list(payload, operation="find_client_by_phone")]
