from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pawnshop_sdk.models import EntityId, Product

from pawnshop_app.services.errors import ServiceError
from pawnshop_app.services.product_service import ProductService, is_numeric_id
from pawnshop_app.ui.shared.validators import validate_product_form
from pawnshop_app.ui.shared.view_state import resolve_state

PRODUCT_CREATED_MESSAGE = "Product added successfully."
PRODUCT_UPDATED_MESSAGE = "Product updated successfully!"
PRODUCT_DELETED_MESSAGE = "Product deleted successfully!"
DELETE_MISSING_TARGET_MESSAGE = "Please enter a product ID or name to delete."
EDIT_MISSING_TARGET_MESSAGE = "Please enter a product ID or name to edit."

PRODUCT_COLUMNS: list[tuple[str, str]] = [
    ("id", "ID"),
    ("name", "Name"),
    ("price", "Price"),
    ("amount", "Amount"),
]


@dataclass
class ProductFormView:
    service: ProductService
    search_input: str = ""
    product_name: str = ""
    product_price: float = 0
    product_amount: int = 0
    next_product_id: EntityId | None = None
    products: list[Product] = field(default_factory=list)
    response_message: str = ""
    error_message: str | None = None
    next_id_error: str | None = None
    is_loading: bool = False

    def load(self) -> bool:
        found = self.search()
        self.refresh_next_id()
        return found

    def refresh_next_id(self) -> None:
        try:
            self.next_product_id = self.service.next_product_id()
            self.next_id_error = None
        except ServiceError as exc:
            self.next_id_error = exc.message

    def reset(self) -> None:
        self.search_input = ""
        self.product_name = ""
        self.product_price = 0
        self.product_amount = 0

    def search(self) -> bool:
        self.is_loading = True
        self.error_message = None
        try:
            self.products = self.service.search(self.search_input)
            self.response_message = ""
            return True
        except ServiceError as exc:
            self.products = []
            self.error_message = exc.message
            self.response_message = exc.message
            return False
        finally:
            self.is_loading = False

    def submit(self) -> bool:
        validation = validate_product_form(self.product_name, self.product_price, self.product_amount)
        if not validation.ok:
            self.response_message = validation.summary[0]
            return False
        try:
            self.service.create(self.product_name.strip(), float(self.product_price), int(self.product_amount))
        except ServiceError as exc:
            self.response_message = exc.message
            return False
        self.product_name = ""
        self.product_price = 0
        self.product_amount = 0
        self.refresh_next_id()
        self.search()
        self.response_message = PRODUCT_CREATED_MESSAGE
        return True

    def delete(self) -> bool:
        if not self.search_input.strip() and not self.product_name.strip():
            self.response_message = DELETE_MISSING_TARGET_MESSAGE
            return False
        query = self.search_input.strip()
        name = self.product_name.strip()
        if not name and not is_numeric_id(query):
            name = query
        try:
            self.service.delete(query, name)
        except ServiceError as exc:
            self.response_message = exc.message
            return False
        self.response_message = PRODUCT_DELETED_MESSAGE
        self._remove_locally(query, name)
        self.search_input = ""
        self.product_name = ""
        self.refresh_next_id()
        return True

    def _remove_locally(self, query: str, name: str) -> None:
        if is_numeric_id(query):
            product_id = int(query)
            self.products = [product for product in self.products if product.id != product_id]
        else:
            lowered = name.lower()
            self.products = [product for product in self.products if product.name.lower() != lowered]

    def edit(self) -> bool:
        if not self.search_input.strip() and not self.product_name.strip():
            self.response_message = EDIT_MISSING_TARGET_MESSAGE
            return False
        query = self.search_input.strip()
        product_id = int(query) if is_numeric_id(query) else None
        try:
            self.service.update(
                product_id,
                self.product_name.strip() or None,
                price=float(self.product_price or 0) or None,
                amount=int(self.product_amount or 0) or None,
            )
        except ServiceError as exc:
            self.response_message = exc.message
            return False
        self.reset()
        self.search()
        self.response_message = PRODUCT_UPDATED_MESSAGE
        return True

    def render(self) -> dict[str, Any]:
        state = resolve_state(
            is_loading=self.is_loading,
            list_error=self.error_message,
            row_count=len(self.products),
            next_id_error=self.next_id_error,
        )
        return {
            "next_product_id": self.next_product_id,
            "message": self.response_message,
            "state": state.render(),
            "rows": [product.model_dump(mode="json", include={"id", "name", "price", "amount"}) for product in self.products],
            "columns": PRODUCT_COLUMNS,
        }
