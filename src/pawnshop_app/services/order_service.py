from __future__ import annotations

import logging
from datetime import date

from pawnshop_sdk import ApiSession
from pawnshop_sdk.exceptions import NotFoundError
from pawnshop_sdk.models import Client, EntityId, OrderCreate, OrderInvoice, OrderSummary, OrderUpdate

from .client_service import lookup_customer
from .errors import ServiceError, normalize_error
from .next_ids import NextIds, fetch_next_ids

logger = logging.getLogger(__name__)

NO_ORDER_DETAILS_MESSAGE = "No order details found."


class OrderService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def next_ids(self) -> NextIds:
        return fetch_next_ids(
            self.session.clients_client().next_client_id,
            self.session.orders_client().next_order_id,
        )

    def lookup_customer(self, phone_number: str) -> Client | None:
        return lookup_customer(self.session, phone_number)

    def create(self, order: OrderCreate) -> None:
        logger.info("order_create_attempt", extra={"order_id": order.order_id, "phone_number": order.phone_number})
        try:
            self.session.orders_client().create_order(order)
        except Exception as exc:
            raise normalize_error(exc) from exc
        logger.info("order_create_success", extra={"order_id": order.order_id})

    def find_order_id(self, phone_number: str) -> EntityId | None:
        try:
            return self.session.orders_client().find_order_id_by_phone(phone_number.strip())
        except Exception:
            logger.warning("order_lookup_failed", extra={"phone_number": phone_number}, exc_info=True)
            return None

    def update_or_create(self, order: OrderCreate) -> str:
        """Update the customer's existing order, creating one when there is nothing to update.

        Returns ``"updated"`` or ``"created"``. An empty phone number or an
        order without named lines is always created; ``OrderFormView``
        rejects both before calling, so only direct callers reach them.
        """
        if not order.phone_number.strip():
            self.create(order)
            return "created"
        order_id = self.find_order_id(order.phone_number)
        if not order_id:
            logger.info("order_update_fallback", extra={"reason": "order_not_found"})
            self.create(order)
            return "created"
        named_lines = [line for line in order.order_product_detail if line.prod_name.strip()]
        if not named_lines:
            logger.info("order_update_fallback", extra={"reason": "no_products"})
            self.create(order)
            return "created"

        update = OrderUpdate(
            order_id=order_id,
            cus_name=order.cus_name,
            address=order.address,
            phone_number=order.phone_number,
            order_deposit=order.order_deposit,
            order_date=_order_date(order.order_date),
            order_product_detail=order.order_product_detail,
        )
        try:
            self.session.orders_client().update_order(order_id, update)
        except NotFoundError:
            logger.info("order_update_fallback", extra={"reason": "update_not_found", "order_id": order_id})
            self.create(order)
            return "created"
        except Exception as exc:
            raise normalize_error(exc) from exc
        logger.info("order_update_success", extra={"order_id": order_id})
        return "updated"

    def orders_for_client(self, cus_id: EntityId) -> list[OrderSummary]:
        try:
            return self.session.orders_client().list_orders(cus_id)
        except NotFoundError:
            return []
        except Exception as exc:
            raise normalize_error(exc) from exc

    def invoice(self, order_id: EntityId) -> OrderInvoice:
        try:
            invoice = self.session.orders_client().get_invoice(order_id)
        except NotFoundError as exc:
            raise ServiceError(NO_ORDER_DETAILS_MESSAGE) from exc
        except Exception as exc:
            raise normalize_error(exc) from exc
        if invoice is None or not invoice.orders:
            raise ServiceError(NO_ORDER_DETAILS_MESSAGE)
        return invoice


def _order_date(value: str) -> str:
    value = value.strip()
    if not value or value == "N/A":
        return date.today().isoformat()
    return value
