"""Port for the client's view of the store server.

The application layer only knows this interface; the ``requests``-backed
implementation lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.application.dto import OrderConfirmationDTO
from storefront.domain.model.order import OrderRequest
from storefront.domain.model.product import Product


class GatewayError(Exception):
    """The server was unreachable or answered with something unusable."""


class StoreGateway(ABC):

    @abstractmethod
    def fetch_products(self) -> list[Product]:
        """Return the server's catalog. Raises GatewayError on failure."""

    @abstractmethod
    def submit_order(self, request: OrderRequest) -> OrderConfirmationDTO:
        """Send an order and return the confirmation. Raises GatewayError."""
