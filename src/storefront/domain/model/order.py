"""Order request and Order: what the client sends and what the ledger keeps.

The ledger does not check product existence or quantity bounds; an
order is accepted as long as its shape could be read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class OrderItem:
    """A single (product id, quantity) pair. Product metadata is not sent."""

    product_id: int
    quantity: int

    def to_payload(self) -> dict:
        return {"id": self.product_id, "quantity": self.quantity}


@dataclass(frozen=True)
class OrderRequest:
    """Snapshot of a cart at submission time."""

    items: tuple[OrderItem, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_payload(self) -> dict:
        return {"items": [item.to_payload() for item in self.items]}


@dataclass(frozen=True)
class Order:
    """An accepted order.

    Use ``Order.create()`` for new orders; the id stays ``None`` until the
    ledger assigns one on append.
    """

    id: int | None
    items: tuple[OrderItem, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(request: OrderRequest) -> Order:
        return Order(id=None, items=tuple(request.items))

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)
