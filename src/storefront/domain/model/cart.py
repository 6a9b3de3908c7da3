"""Cart aggregate: the client-side shopping cart.

The cart is a keyed container (product id -> CartEntry). Entries are
frozen and every change replaces the whole entry, so nothing outside the
cart can alias and mutate a quantity behind its back.

Invariant: no entry ever holds a quantity below 1. An entry whose
quantity would drop to 0 is removed instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import OrderItem, OrderRequest
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartEntry:
    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    def incremented(self) -> CartEntry:
        return CartEntry(self.product, Quantity(self.quantity.value + 1))

    def decremented(self) -> CartEntry | None:
        """Return the entry with one unit less, or None if it would be empty."""
        if self.quantity.value <= 1:
            return None
        return CartEntry(self.product, Quantity(self.quantity.value - 1))


class Cart:
    """In-memory cart owned by a single client session."""

    def __init__(self) -> None:
        self._entries: dict[int, CartEntry] = {}

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> CartEntry:
        """Add one unit of *product*. Always succeeds."""
        current = self._entries.get(product.id)
        entry = current.incremented() if current else CartEntry(product, Quantity(1))
        self._entries[product.id] = entry
        return entry

    def remove(self, product_id: int) -> CartEntry | None:
        """Remove one unit of the product; drop the entry when it reaches 0.

        Returns the remaining entry, or None if the product is no longer
        (or never was) in the cart.
        """
        current = self._entries.get(product_id)
        if current is None:
            return None

        remaining = current.decremented()
        if remaining is None:
            del self._entries[product_id]
        else:
            self._entries[product_id] = remaining
        return remaining

    def clear(self) -> None:
        self._entries = {}

    # --- Queries --------------------------------------------------------------

    @property
    def entries(self) -> list[CartEntry]:
        return list(self._entries.values())

    @property
    def is_empty(self) -> bool:
        return not self._entries

    @property
    def total(self) -> Money:
        result = Money.zero()
        for entry in self._entries.values():
            result = result + entry.line_total
        return result

    def quantity_of(self, product_id: int) -> int:
        entry = self._entries.get(product_id)
        return entry.quantity.value if entry else 0

    def snapshot(self) -> OrderRequest:
        """Build the order request for the current contents."""
        return OrderRequest(
            items=tuple(
                OrderItem(product_id=entry.product.id, quantity=entry.quantity.value)
                for entry in self._entries.values()
            )
        )

    def as_dict(self) -> dict[int, int]:
        """Product id -> quantity, handy for comparisons."""
        return {pid: entry.quantity.value for pid, entry in self._entries.items()}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._entries
