"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI edges and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line (product id + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderConfirmationDTO:
    """Output: what the ledger tells the client after accepting an order."""

    message: str
    order_id: int

    def to_payload(self) -> dict:
        return {"message": self.message, "orderId": self.order_id}


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    line_total: str  # formatted, e.g. "$399.98"


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart as displayed to the user."""

    lines: list[CartLineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines
