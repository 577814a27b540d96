from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..http_client import envelope_ok, result_list
from ..models import EntityId, NextId, OrderCreate, OrderInvoice, OrderSummary, OrderUpdate
from .base import BaseClient, path_segment


@dataclass
class OrdersClient(BaseClient):
    module: str = "orders"

    def next_order_id(self) -> NextId:
        return self._next_id("/next-order-id", "next_order_id")

    def create_order(self, order: OrderCreate) -> Any:
        return self._request(
            "POST",
            "/order",
            json_body=order.model_dump(mode="json"),
            operation="create_order",
        )

    def update_order(self, order_id: EntityId, order: OrderUpdate) -> Any:
        return self._request(
            "PUT",
            f"/orders/{path_segment(order_id)}",
            json_body=order.model_dump(
                mode="json",
                exclude={"order_product_detail": {"__all__": {"customer_id"}}},
            ),
            operation="update_order",
        )

    def find_order_id_by_phone(self, phone_number: str) -> EntityId | None:
        payload = self._request(
            "GET",
            "/order",
            params={"phone_number": phone_number},
            operation="find_order_by_phone",
        )
        rows = result_list(payload, operation="find_order_by_phone")
        if not rows or not isinstance(rows[0], dict):
            return None
        return rows[0].get("order_id")

    def list_orders(self, cus_id: EntityId) -> list[OrderSummary]:
        payload = self._request(
            "GET",
            "/order",
            params={"cus_id": cus_id},
            operation="list_orders",
        )
        return [OrderSummary.model_validate(item) for item in result_list(payload, operation="list_orders")]

    def get_invoice(self, order_id: EntityId) -> OrderInvoice | None:
        payload = self._request(
            "GET",
            "/orders/print",
            params={"order_id": order_id},
            operation="order_invoice",
        )
        if not envelope_ok(payload):
            return None
        rows = result_list(payload, operation="order_invoice")
        return OrderInvoice.model_validate(rows[0])
