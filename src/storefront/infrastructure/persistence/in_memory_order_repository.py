"""In-memory order ledger.

Orders accumulate for the lifetime of the process and are never updated
or removed. Ids come from a counter that only moves forward, so they
would stay unique even if a removal path were added later.
"""

from __future__ import annotations

import threading
from dataclasses import replace

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._orders: list[Order] = []
        self._last_id = 0
        self._lock = threading.Lock()

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> Order:
        if order.id is not None:
            raise ValidationError(f"Order #{order.id} is already recorded")

        # Read-counter, assign and append must not interleave between requests.
        with self._lock:
            self._last_id += 1
            stored = replace(order, id=self._last_id)
            self._orders.append(stored)
        return stored

    def get_by_id(self, order_id: int) -> Order | None:
        with self._lock:
            for order in self._orders:
                if order.id == order_id:
                    return order
        return None

    def list_all(self) -> list[Order]:
        with self._lock:
            return list(self._orders)

    def count(self) -> int:
        with self._lock:
            return len(self._orders)
