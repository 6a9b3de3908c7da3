"""Abstract repository for the order ledger."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Assign the next id to a new order and append it.

        Id assignment and append happen as one atomic step. Returns the
        stored order, carrying its id.
        """

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every accepted order, oldest first."""

    @abstractmethod
    def count(self) -> int:
        """Number of accepted orders."""
