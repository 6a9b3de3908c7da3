"""Application services: Add To Cart / Remove From Cart / Show Cart."""

from __future__ import annotations

from storefront.application.dto import CartDTO, CartLineDTO
from storefront.application.notifier import Notifier
from storefront.domain.model.cart import Cart, CartEntry
from storefront.domain.model.product import Product


class AddToCartHandler:

    def __init__(self, cart: Cart, notifier: Notifier) -> None:
        self._cart = cart
        self._notifier = notifier

    def handle(self, product: Product) -> CartEntry:
        """Add one unit and acknowledge it with a short-lived notification."""
        entry = self._cart.add(product)
        self._notifier.post(f"Added {product.name} to cart.")
        return entry


class RemoveFromCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, product_id: int) -> CartEntry | None:
        return self._cart.remove(product_id)


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=entry.product.id,
                    product_name=entry.product.name,
                    quantity=entry.quantity.value,
                    line_total=str(entry.line_total),
                )
                for entry in self._cart.entries
            ],
            total=str(self._cart.total),
        )
