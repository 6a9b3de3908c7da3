"""Application service: Checkout use case (client side).

Checkout is all-or-nothing from the client's point of view:

- empty cart: notify, no request is sent;
- confirmed: show the server's message, then empty the cart;
- any failure: notify, keep the cart so the user can retry.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderConfirmationDTO
from storefront.application.gateway import GatewayError, StoreGateway
from storefront.application.notifier import Notifier
from storefront.domain.model.cart import Cart

logger = structlog.get_logger(__name__)

EMPTY_CART_MESSAGE = "Your cart is empty."
CHECKOUT_FAILED_MESSAGE = "Failed to place order."


class CheckoutHandler:

    def __init__(self, cart: Cart, gateway: StoreGateway, notifier: Notifier) -> None:
        self._cart = cart
        self._gateway = gateway
        self._notifier = notifier

    def handle(self) -> OrderConfirmationDTO | None:
        """Submit the cart. Returns the confirmation, or None if nothing was placed."""
        if self._cart.is_empty:
            self._notifier.post(EMPTY_CART_MESSAGE)
            return None

        logger.debug("Submitting order", lines=len(self._cart))
        request = self._cart.snapshot()
        try:
            confirmation = self._gateway.submit_order(request)
        except GatewayError as exc:
            logger.error("Error placing order", error=str(exc))
            self._notifier.post(CHECKOUT_FAILED_MESSAGE)
            return None

        logger.info("Order confirmed", order_id=confirmation.order_id)
        self._notifier.post(confirmation.message)
        self._cart.clear()
        return confirmation
