"""In-memory implementation of ProductRepository.

The catalog is fixed for the lifetime of the process.
"""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

DEFAULT_PRODUCTS = (
    Product(
        id=1,
        name="Smartphone",
        description="Latest smartphone with high performance.",
        price=Money.of("699.99"),
        image="https://via.placeholder.com/400?text=Smartphone",
    ),
    Product(
        id=2,
        name="Headphones",
        description="Noise cancelling headphones.",
        price=Money.of("199.99"),
        image="https://via.placeholder.com/400?text=Headphones",
    ),
    Product(
        id=3,
        name="Laptop",
        description="Powerful laptop for professionals.",
        price=Money.of("1299.99"),
        image="https://via.placeholder.com/400?text=Laptop",
    ),
)


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | tuple[Product, ...] = DEFAULT_PRODUCTS) -> None:
        self._products: tuple[Product, ...] = tuple(products)

    def list_all(self) -> list[Product]:
        return list(self._products)
