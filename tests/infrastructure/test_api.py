"""Integration tests for the store API via TestClient."""

import pytest
from fastapi.testclient import TestClient

from storefront.infrastructure.http.api import create_app
from storefront.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)


@pytest.fixture()
def ledger():
    return InMemoryOrderRepository()


@pytest.fixture()
def client(ledger):
    return TestClient(create_app(order_repo=ledger))


class TestListProducts:

    def test_returns_catalog(self, client):
        response = client.get("/api/products")
        assert response.status_code == 200
        assert response.headers["cache-control"] == "no-cache"
        data = response.json()
        assert [p["name"] for p in data] == ["Smartphone", "Headphones", "Laptop"]
        assert data[0] == {
            "id": 1,
            "name": "Smartphone",
            "description": "Latest smartphone with high performance.",
            "price": 699.99,
            "image": "https://via.placeholder.com/400?text=Smartphone",
        }


class TestPlaceOrder:

    def test_first_and_second_orders(self, client):
        body = '{"items":[{"id":1,"quantity":2}]}'
        first = client.post("/api/orders", content=body)
        second = client.post("/api/orders", content=body)

        assert first.status_code == 200
        assert first.json() == {"message": "Order placed successfully", "orderId": 1}
        assert second.json()["orderId"] == 2

    def test_records_items_and_timestamp(self, client, ledger):
        client.post("/api/orders", json={"items": [{"id": 3, "quantity": 1}]})
        order = ledger.get_by_id(1)
        assert order is not None
        assert order.items[0].product_id == 3
        assert order.created_at is not None

    def test_empty_body_is_an_empty_order(self, client, ledger):
        response = client.post("/api/orders", content=b"")
        assert response.status_code == 200
        assert ledger.get_by_id(1).items == ()

    def test_null_items_is_an_empty_order(self, client, ledger):
        response = client.post("/api/orders", content=b'{"items": null}')
        assert response.status_code == 200
        assert response.json() == {"message": "Order placed successfully", "orderId": 1}
        assert ledger.get_by_id(1).items == ()

    def test_extra_item_fields_are_ignored(self, client):
        response = client.post(
            "/api/orders", json={"items": [{"id": 1, "quantity": 1, "name": "Phone"}]}
        )
        assert response.status_code == 200


class TestMalformedOrder:

    @pytest.mark.parametrize(
        "body",
        [
            "not json",
            "null",
            "[1, 2]",
            '{"items": "lots"}',
            '{"items": [{"id": "one", "quantity": 1}]}',
            '{"items": [{"quantity": 1}]}',
        ],
    )
    def test_rejected_with_400(self, client, ledger, body):
        response = client.post("/api/orders", content=body)
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid JSON"}
        assert ledger.count() == 0

    def test_bad_request_does_not_disturb_ledger(self, client, ledger):
        client.post("/api/orders", json={"items": [{"id": 1, "quantity": 1}]})
        client.post("/api/orders", content="not json")
        response = client.post("/api/orders", json={"items": [{"id": 2, "quantity": 1}]})

        assert response.json()["orderId"] == 2
        assert ledger.count() == 2


class TestOtherRoutes:

    def test_unknown_route_is_404(self, client):
        assert client.get("/api/unknown").status_code == 404
