from __future__ import annotations

import json

import pytest
import requests
import responses

from pawnshop_sdk.exceptions import EnvelopeError, NotFoundError, ServerError, TransportError
from pawnshop_sdk.http_client import HttpClient, envelope_ok, result_list, unwrap_result

BASE_URL = "http://api.test"


@responses.activate
def test_request_sends_json_and_parses_response(http: HttpClient) -> None:
    responses.add(responses.POST, f"{BASE_URL}/staff/product", json={"code": 200, "result": {"ok": True}})

    payload = http.request(
        "post",
        "/staff/product",
        json_body={"prod_name": "Ring"},
        headers={"Authorization": "Bearer abc"},
        module="products",
        operation="create_product",
    )

    assert payload == {"code": 200, "result": {"ok": True}}
    sent = responses.calls[0].request
    assert sent.headers["Authorization"] == "Bearer abc"
    assert json.loads(sent.body) == {"prod_name": "Ring"}
    assert http.last_operation is not None
    assert http.last_operation.operation == "create_product"
    assert http.last_operation.result == "success"
    assert http.last_operation.status_code == 200


@responses.activate
def test_single_attempt_on_server_error(http: HttpClient) -> None:
    responses.add(responses.GET, f"{BASE_URL}/staff/product", json={"detail": "boom"}, status=503)

    with pytest.raises(ServerError) as excinfo:
        http.request("GET", "/staff/product")

    assert excinfo.value.status_code == 503
    assert len(responses.calls) == 1


@responses.activate
def test_not_found_maps_detail(http: HttpClient) -> None:
    responses.add(responses.DELETE, f"{BASE_URL}/staff/products/9", json={"detail": "Product not found"}, status=404)

    with pytest.raises(NotFoundError, match="Product not found"):
        http.request("DELETE", "/staff/products/9")


@responses.activate
def test_connection_failure_becomes_transport_error(http: HttpClient) -> None:
    responses.add(responses.GET, f"{BASE_URL}/staff/client", body=requests.ConnectionError("refused"))

    with pytest.raises(TransportError) as excinfo:
        http.request("GET", "/staff/client")

    assert excinfo.value.status_code == 0
    assert http.last_operation is not None
    assert http.last_operation.result == "transport_error"


@responses.activate
def test_empty_body_returns_none(http: HttpClient) -> None:
    responses.add(responses.DELETE, f"{BASE_URL}/staff/products/3", body="", status=204)
    assert http.request("DELETE", "/staff/products/3") is None


@responses.activate
def test_invalid_json_raises_envelope_error(http: HttpClient) -> None:
    responses.add(responses.GET, f"{BASE_URL}/staff/client", body="<html>", status=200)
    with pytest.raises(EnvelopeError):
        http.request("GET", "/staff/client")


def test_envelope_helpers() -> None:
    assert unwrap_result({"code": 200, "result": {"id": 4}}) == {"id": 4}
    assert result_list({"result": {"id": 4}}) == [{"id": 4}]
    assert result_list({"result": None}) == []
    assert result_list({"result": [1, 2]}) == [1, 2]
    with pytest.raises(EnvelopeError):
        unwrap_result(["not", "an", "envelope"])

    assert envelope_ok({"code": 200, "result": [{"id": 1}]})
    assert envelope_ok({"result": [{"id": 1}]})
    assert not envelope_ok({"code": 404, "result": [{"id": 1}]})
    assert not envelope_ok({"code": 200, "result": []})
    assert not envelope_ok(None)
