"""Unit tests for OrderRequest and Order."""

from datetime import timezone

from storefront.domain.model.order import Order, OrderItem, OrderRequest


class TestOrderRequest:

    def test_empty_request(self):
        assert OrderRequest().is_empty
        assert OrderRequest().to_payload() == {"items": []}

    def test_payload_uses_wire_names(self):
        request = OrderRequest(items=(OrderItem(product_id=1, quantity=2),))
        assert request.to_payload() == {"items": [{"id": 1, "quantity": 2}]}


class TestOrderCreation:

    def test_new_order_has_no_id(self):
        order = Order.create(OrderRequest(items=(OrderItem(1, 2),)))
        assert order.id is None  # assigned by the ledger

    def test_created_at_is_utc(self):
        order = Order.create(OrderRequest())
        assert order.created_at.tzinfo == timezone.utc

    def test_item_count(self):
        order = Order.create(OrderRequest(items=(OrderItem(1, 2), OrderItem(3, 1))))
        assert order.item_count == 3
        assert order.items == (OrderItem(1, 2), OrderItem(3, 1))
