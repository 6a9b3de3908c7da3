"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The in-memory catalog lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in catalog order."""
