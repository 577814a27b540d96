from __future__ import annotations

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

EntityId = int | str


class TokenResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    access_token: str | None = None
    token_type: str | None = None


class NextId(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: EntityId


class SessionData(BaseModel):
    access_token: str
    phone_number: str | None = None
    env_name: str | None = None


class Client(BaseModel):
    model_config = ConfigDict(extra="allow")

    cus_id: EntityId | None = None
    cus_name: str = Field(default="", validation_alias=AliasChoices("cus_name", "customer_name"))
    phone_number: str = ""
    address: str = ""


class Product(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int | None = Field(default=None, validation_alias=AliasChoices("id", "prod_id"))
    name: str = Field(default="", validation_alias=AliasChoices("name", "prod_name"))
    price: float = Field(default=0, validation_alias=AliasChoices("price", "unit_price"))
    sell_price: float | None = Field(
        default=None, validation_alias=AliasChoices("sell_price", "product_sell_price")
    )
    amount: int = 0


class ProductCreate(BaseModel):
    prod_name: str
    unit_price: float
    product_sell_price: float
    amount: int


class ProductUpdate(BaseModel):
    prod_id: int | None = None
    prod_name: str | None = None
    unit_price: float | None = None
    amount: int | None = None


class OrderLine(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    customer_id: EntityId | None = None
    prod_id: int | None = None
    prod_name: str = ""
    order_weight: str = ""
    order_amount: int = 0
    product_sell_price: float = 0
    product_labor_cost: float = 0
    product_buy_price: float = 0

    @property
    def line_total(self) -> float:
        return self.order_amount * self.product_sell_price + self.product_labor_cost


class OrderCreate(BaseModel):
    order_id: EntityId | None = None
    cus_id: EntityId | None = None
    cus_name: str
    address: str
    phone_number: str
    invoice_number: str = "N/A"
    order_date: str = "N/A"
    order_deposit: float = 0
    order_product_detail: List[OrderLine] = Field(default_factory=list)


class OrderUpdate(BaseModel):
    order_id: EntityId
    cus_name: str = ""
    address: str = ""
    phone_number: str
    order_deposit: float = 0
    order_date: str
    order_product_detail: List[OrderLine] = Field(default_factory=list)


class OrderSummary(BaseModel):
    model_config = ConfigDict(extra="allow")

    order_id: EntityId
    order_date: str | None = None
    order_deposit: float = 0
    products: List[OrderLine] = Field(default_factory=list)

    @property
    def total(self) -> float:
        return sum(line.line_total for line in self.products)


class OrderInvoiceItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    order_date: str | None = None
    order_deposit: float = 0
    product: OrderLine


class OrderInvoice(BaseModel):
    model_config = ConfigDict(extra="allow")

    cus_id: EntityId | None = None
    customer_name: str = Field(default="", validation_alias=AliasChoices("customer_name", "cus_name"))
    phone_number: str = ""
    address: str = ""
    orders: List[OrderInvoiceItem] = Field(default_factory=list)

    @property
    def total(self) -> float:
        return sum(item.product.line_total for item in self.orders)

    @property
    def deposit(self) -> float:
        return self.orders[0].order_deposit if self.orders else 0

    @property
    def balance(self) -> float:
        return self.total - self.deposit

    @property
    def order_date(self) -> str | None:
        return self.orders[0].order_date if self.orders else None


class PawnLine(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    prod_id: int | None = None
    prod_name: str = ""
    pawn_weight: str = ""
    pawn_amount: int = 0
    pawn_unit_price: float = 0

    @property
    def line_total(self) -> float:
        return self.pawn_amount * self.pawn_unit_price


class PawnCreate(BaseModel):
    pawn_id: EntityId
    cus_id: EntityId | None = None
    cus_name: str
    address: str
    phone_number: str
    pawn_deposit: float = 0
    pawn_date: str = ""
    pawn_expire_date: str = ""
    pawn_product_detail: List[PawnLine] = Field(default_factory=list)


class PawnUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pawn_id: EntityId
    cus_id: EntityId | None = None
    customer_name: str = ""
    address: str = ""
    phone_number: str = ""
    pawn_deposit: float = 0
    pawn_expire_date: str = ""
    products: List[PawnLine] = Field(default_factory=list)
    delete_old_products: bool = Field(default=True, alias="deleteOldProducts")


class PawnSummary(BaseModel):
    model_config = ConfigDict(extra="allow")

    pawn_id: EntityId
    pawn_date: str | None = None
    pawn_expire_date: str | None = None
    pawn_deposit: float = 0
    products: List[PawnLine] = Field(default_factory=list)

    @property
    def total(self) -> float:
        return sum(line.line_total for line in self.products)


class PawnInvoice(BaseModel):
    model_config = ConfigDict(extra="allow")

    cus_id: EntityId | None = None
    customer_name: str = Field(default="", validation_alias=AliasChoices("customer_name", "cus_name"))
    phone_number: str = ""
    address: str = ""
    pawns: List[PawnSummary] = Field(default_factory=list)

    @property
    def first_pawn(self) -> Optional[PawnSummary]:
        return self.pawns[0] if self.pawns else None

    @property
    def lines(self) -> list[PawnLine]:
        return [line for pawn in self.pawns for line in pawn.products]

    @property
    def total(self) -> float:
        return sum(line.line_total for line in self.lines)

    @property
    def deposit(self) -> float:
        first = self.first_pawn
        return first.pawn_deposit if first else 0

    @property
    def balance(self) -> float:
        return self.total - self.deposit
