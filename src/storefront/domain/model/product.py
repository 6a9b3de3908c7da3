"""Product: a catalog entry.

Products are loaded once by the catalog and never change afterwards.
Carts hold references to them; orders only keep the product id.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A purchasable item in the catalog."""

    id: int
    name: str
    description: str
    price: Money
    image: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.id, int) or isinstance(self.id, bool) or self.id <= 0:
            raise ValidationError(f"Product id must be a positive integer, got {self.id!r}")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
