from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..http_client import result_list
from ..models import NextId, Product, ProductCreate, ProductUpdate
from .base import BaseClient, path_segment


@dataclass
class ProductsClient(BaseClient):
    module: str = "products"

    def next_product_id(self) -> NextId:
        return self._next_id("/next-product-id", "next_product_id")

    def list_products(self) -> list[Product]:
        payload = self._request("GET", "/product", operation="list_products")
        return [Product.model_validate(item) for item in result_list(payload, operation="list_products")]

    def search_products(self, query: str) -> list[Product]:
        payload = self._request(
            "GET",
            f"/products/search/{path_segment(query)}",
            operation="search_products",
        )
        return [Product.model_validate(item) for item in result_list(payload, operation="search_products")]

    def create_product(self, product: ProductCreate) -> Any:
        return self._request(
            "POST",
            "/product",
            json_body=product.model_dump(mode="json"),
            operation="create_product",
        )

    def update_product(self, product: ProductUpdate) -> Any:
        body = product.model_dump(mode="json", exclude_none=True)
        # the backend expects both keys, null when the lookup uses the other one
        body.setdefault("prod_id", None)
        body.setdefault("prod_name", None)
        return self._request("PUT", "/product", json_body=body, operation="update_product")

    def delete_product(self, product_id: int) -> Any:
        return self._request(
            "DELETE",
            f"/products/{path_segment(product_id)}",
            operation="delete_product",
        )

    def delete_product_by_name(self, name: str) -> Any:
        return self._request(
            "DELETE",
            f"/products/name/{path_segment(name)}",
            operation="delete_product_by_name",
        )
