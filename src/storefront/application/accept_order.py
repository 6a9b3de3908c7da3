"""Application service: Accept Order use case.

Turns already-parsed item specs into an Order and appends it to the
ledger. Reading the request body is the HTTP layer's job; a body that
cannot be read never reaches this handler, so it never allocates an id.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderConfirmationDTO, OrderItemSpec
from storefront.domain.model.order import Order, OrderItem, OrderRequest
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)

ORDER_PLACED_MESSAGE = "Order placed successfully"


class AcceptOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, item_specs: list[OrderItemSpec]) -> OrderConfirmationDTO:
        """Record a new order and return its confirmation.

        Product ids and quantities are taken as given; there is no
        catalog or stock check here.
        """
        request = OrderRequest(
            items=tuple(
                OrderItem(product_id=spec.product_id, quantity=spec.quantity)
                for spec in item_specs
            )
        )
        order = self._order_repo.add(Order.create(request))

        logger.info(
            "Order accepted",
            order_id=order.id,
            lines=len(order.items),
            units=order.item_count,
        )
        return OrderConfirmationDTO(message=ORDER_PLACED_MESSAGE, order_id=order.id)  # type: ignore[arg-type]
