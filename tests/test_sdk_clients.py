from __future__ import annotations

import json

import pytest
import responses
from responses import matchers

from pawnshop_sdk import ApiSession
from pawnshop_sdk.exceptions import AlreadyExistsError
from pawnshop_sdk.models import (
    OrderCreate,
    OrderLine,
    OrderUpdate,
    PawnCreate,
    PawnLine,
    PawnUpdate,
    ProductCreate,
    ProductUpdate,
)

BASE_URL = "http://api.test"
STAFF = f"{BASE_URL}/staff"


def _body(call_index: int = 0) -> dict:
    return json.loads(responses.calls[call_index].request.body)


@responses.activate
def test_sign_in_posts_credentials_without_prefix(session: ApiSession) -> None:
    responses.add(
        responses.POST,
        f"{BASE_URL}/sign_in",
        json={"code": 200, "result": {"access_token": "abc", "token_type": "bearer"}},
    )

    token = session.auth_client().sign_in("012345678", "secret")

    assert token.access_token == "abc"
    assert _body() == {"phone_number": "012345678", "password": "secret"}


@responses.activate
def test_next_ids_use_staff_prefix_and_bearer(session: ApiSession) -> None:
    responses.add(responses.GET, f"{STAFF}/next-product-id", json={"code": 200, "result": {"id": 41}})
    responses.add(responses.GET, f"{STAFF}/next-client-id", json={"code": 200, "result": {"id": 7}})
    responses.add(responses.GET, f"{STAFF}/next-order-id", json={"code": 200, "result": {"id": 12}})
    responses.add(responses.GET, f"{STAFF}/next-pawn-id", json={"code": 200, "result": {"id": 99}})

    assert session.products_client().next_product_id().id == 41
    assert session.clients_client().next_client_id().id == 7
    assert session.orders_client().next_order_id().id == 12
    assert session.pawns_client().next_pawn_id().id == 99
    assert all(call.request.headers["Authorization"] == "Bearer token-123" for call in responses.calls)


@responses.activate
def test_product_listing_and_search_accepts_single_object(session: ApiSession) -> None:
    responses.add(
        responses.GET,
        f"{STAFF}/product",
        json={"code": 200, "result": [{"id": 1, "name": "Ring", "price": 120.5, "amount": 2}]},
    )
    responses.add(
        responses.GET,
        f"{STAFF}/products/search/Gold%20chain",
        json={"code": 200, "result": {"prod_id": 2, "prod_name": "Gold chain", "unit_price": 300, "amount": 1}},
    )
    client = session.products_client()

    listed = client.list_products()
    found = client.search_products("Gold chain")

    assert listed[0].name == "Ring"
    assert listed[0].price == 120.5
    assert len(found) == 1
    assert found[0].id == 2
    assert found[0].name == "Gold chain"


@responses.activate
def test_product_mutations(session: ApiSession) -> None:
    responses.add(responses.POST, f"{STAFF}/product", json={"code": 200, "result": {}})
    responses.add(responses.PUT, f"{STAFF}/product", json={"code": 200, "result": {}})
    responses.add(responses.DELETE, f"{STAFF}/products/5", json={"code": 200, "result": {}})
    responses.add(responses.DELETE, f"{STAFF}/products/name/Old%20ring", json={"code": 200, "result": {}})
    client = session.products_client()

    client.create_product(ProductCreate(prod_name="Ring", unit_price=10, product_sell_price=10, amount=3))
    client.update_product(ProductUpdate(prod_name="Ring", amount=4))
    client.delete_product(5)
    client.delete_product_by_name("Old ring")

    assert _body(0) == {"prod_name": "Ring", "unit_price": 10.0, "product_sell_price": 10.0, "amount": 3}
    assert _body(1) == {"prod_id": None, "prod_name": "Ring", "amount": 4}
    assert len(responses.calls) == 4


@responses.activate
def test_find_client_by_phone(session: ApiSession) -> None:
    responses.add(
        responses.GET,
        f"{STAFF}/order/client_phone",
        match=[matchers.query_param_matcher({"phone_number": "012"})],
        json={"code": 200, "result": [{"cus_id": 3, "cus_name": "Dara", "address": "PP", "phone_number": "012"}]},
    )
    responses.add(
        responses.GET,
        f"{STAFF}/order/client_phone",
        match=[matchers.query_param_matcher({"phone_number": "099"})],
        json={"code": 200, "result": []},
    )
    client = session.clients_client()

    found = client.find_by_phone("012")
    assert found[0].cus_id == 3
    assert found[0].cus_name == "Dara"
    assert client.find_by_phone("099") == []


@responses.activate
def test_order_create_and_update_payloads(session: ApiSession) -> None:
    responses.add(responses.POST, f"{STAFF}/order", json={"code": 200, "result": {}})
    responses.add(responses.PUT, f"{STAFF}/orders/12", json={"code": 200, "result": {}})
    line = OrderLine(prod_name="Ring", order_weight=2.5, order_amount=1, product_sell_price=100, product_labor_cost=5)
    client = session.orders_client()

    client.create_order(
        OrderCreate(order_id=12, cus_id=7, cus_name="Dara", address="PP", phone_number="012", order_product_detail=[line])
    )
    client.update_order(
        12,
        OrderUpdate(order_id=12, phone_number="012", order_date="2024-05-01", order_product_detail=[line]),
    )

    created = _body(0)
    assert created["invoice_number"] == "N/A"
    assert created["order_date"] == "N/A"
    assert created["order_product_detail"][0]["order_weight"] == "2.5"
    assert "customer_id" in created["order_product_detail"][0]
    updated = _body(1)
    assert updated["order_id"] == 12
    assert "customer_id" not in updated["order_product_detail"][0]


@responses.activate
def test_find_order_id_by_phone(session: ApiSession) -> None:
    responses.add(
        responses.GET,
        f"{STAFF}/order",
        match=[matchers.query_param_matcher({"phone_number": "012"})],
        json={"code": 200, "result": [{"order_id": 12}, {"order_id": 13}]},
    )
    responses.add(
        responses.GET,
        f"{STAFF}/order",
        match=[matchers.query_param_matcher({"phone_number": "099"})],
        json={"code": 200, "result": []},
    )
    client = session.orders_client()

    assert client.find_order_id_by_phone("012") == 12
    assert client.find_order_id_by_phone("099") is None


@responses.activate
def test_order_invoice(session: ApiSession) -> None:
    responses.add(
        responses.GET,
        f"{STAFF}/orders/print",
        match=[matchers.query_param_matcher({"order_id": "12"})],
        json={
            "code": 200,
            "result": [
                {
                    "cus_id": 7,
                    "customer_name": "Dara",
                    "phone_number": "012",
                    "address": "PP",
                    "orders": [
                        {
                            "order_date": "2024-05-01",
                            "order_deposit": 50,
                            "product": {
                                "prod_name": "Ring",
                                "order_weight": "2",
                                "order_amount": 2,
                                "product_sell_price": 100,
                                "product_labor_cost": 10,
                                "product_buy_price": 80,
                            },
                        },
                        {
                            "order_date": "2024-05-01",
                            "order_deposit": 0,
                            "product": {
                                "prod_name": "Chain",
                                "order_weight": "1",
                                "order_amount": 1,
                                "product_sell_price": 40,
                                "product_labor_cost": 0,
                                "product_buy_price": 30,
                            },
                        },
                    ],
                }
            ],
        },
    )

    invoice = session.orders_client().get_invoice(12)

    assert invoice is not None
    assert invoice.total == 250
    assert invoice.deposit == 50
    assert invoice.balance == 200
    assert invoice.order_date == "2024-05-01"


@responses.activate
def test_pawn_create_duplicate_and_update_alias(session: ApiSession) -> None:
    responses.add(responses.POST, f"{STAFF}/pawn", json={"detail": "Pawn ID 99 already exists"}, status=400)
    responses.add(responses.PUT, f"{STAFF}/pawn/99", json={"code": 200, "result": {}})
    line = PawnLine(prod_name="Ring", pawn_weight="3", pawn_amount=1, pawn_unit_price=200)
    client = session.pawns_client()

    with pytest.raises(AlreadyExistsError):
        client.create_pawn(
            PawnCreate(pawn_id=99, cus_id=7, cus_name="Dara", address="PP", phone_number="012", pawn_product_detail=[line])
        )
    client.update_pawn(PawnUpdate(pawn_id=99, cus_id=7, customer_name="Dara", products=[line]))

    updated = _body(1)
    assert updated["deleteOldProducts"] is True
    assert updated["customer_name"] == "Dara"
    assert updated["products"][0]["pawn_unit_price"] == 200.0


@responses.activate
def test_pawn_invoice_missing_returns_none(session: ApiSession) -> None:
    responses.add(responses.GET, f"{STAFF}/pawn/print", json={"code": 404, "result": []})
    assert session.pawns_client().get_invoice(5) is None


@responses.activate
def test_list_pawns_for_client(session: ApiSession) -> None:
    responses.add(
        responses.GET,
        f"{STAFF}/pawn",
        match=[matchers.query_param_matcher({"cus_id": "7"})],
        json={
            "code": 200,
            "result": [
                {
                    "pawn_id": 99,
                    "pawn_date": "2024-05-01",
                    "pawn_expire_date": "2024-08-01",
                    "pawn_deposit": 20,
                    "products": [{"prod_name": "Ring", "pawn_weight": "3", "pawn_amount": 2, "pawn_unit_price": 50}],
                }
            ],
        },
    )

    pawns = session.pawns_client().list_pawns(7)

    assert pawns[0].pawn_id == 99
    assert pawns[0].total == 100
