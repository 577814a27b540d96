from __future__ import annotations

import logging

from pawnshop_sdk import ApiSession
from pawnshop_sdk.exceptions import NotFoundError
from pawnshop_sdk.models import EntityId, Product, ProductCreate, ProductUpdate

from .errors import ServiceError, normalize_error

logger = logging.getLogger(__name__)


def is_numeric_id(value: str) -> bool:
    return value.strip().isdigit()


class ProductService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def next_product_id(self) -> EntityId:
        try:
            return self.session.products_client().next_product_id().id
        except Exception as exc:
            raise normalize_error(exc) from exc

    def list_products(self) -> list[Product]:
        try:
            return self.session.products_client().list_products()
        except Exception as exc:
            raise normalize_error(exc) from exc

    def search(self, query: str) -> list[Product]:
        query = query.strip()
        if not query:
            return self.list_products()
        try:
            return self.session.products_client().search_products(query)
        except Exception as exc:
            raise normalize_error(exc) from exc

    def create(self, name: str, price: float, amount: int) -> None:
        # the add form has a single price; it seeds both unit and sell price
        payload = ProductCreate(prod_name=name, unit_price=price, product_sell_price=price, amount=amount)
        logger.info("product_create_attempt", extra={"prod_name": name})
        try:
            self.session.products_client().create_product(payload)
        except Exception as exc:
            raise normalize_error(exc) from exc
        logger.info("product_create_success", extra={"prod_name": name})

    def update(
        self,
        product_id: int | None,
        name: str | None,
        price: float | None = None,
        amount: int | None = None,
    ) -> None:
        payload = ProductUpdate(
            prod_id=product_id,
            prod_name=name or None,
            unit_price=price or None,
            amount=amount or None,
        )
        logger.info("product_update_attempt", extra={"prod_id": product_id, "prod_name": name})
        try:
            self.session.products_client().update_product(payload)
        except Exception as exc:
            raise normalize_error(exc) from exc

    def delete(self, query: str, name: str) -> None:
        """Delete by id when ``query`` is numeric, otherwise by ``name``.

        A non-numeric ``query`` stands in for a blank ``name``. A 404 means
        the product is already gone and counts as deleted.
        """
        name = name.strip() or query.strip()
        if not is_numeric_id(query) and not name:
            raise ServiceError("Please enter a product ID or name to delete.")
        client = self.session.products_client()
        try:
            if is_numeric_id(query):
                client.delete_product(int(query))
            else:
                client.delete_product_by_name(name)
        except NotFoundError:
            logger.info("product_delete_not_found", extra={"query": query, "prod_name": name})
        except Exception as exc:
            raise normalize_error(exc) from exc
