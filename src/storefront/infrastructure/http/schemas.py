"""Pydantic request/response schemas for the store API.

These are the external wire contract, kept apart from the domain model.
Field names follow the JSON the browser client speaks (``orderId``,
``image``).
"""

from __future__ import annotations

from pydantic import BaseModel, StrictInt

from storefront.domain.model.product import Product


class ProductSchema(BaseModel):
    id: int
    name: str
    description: str
    price: float
    image: str

    @classmethod
    def from_domain(cls, product: Product) -> ProductSchema:
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=float(product.price.amount),
            image=product.image,
        )


class OrderLineSchema(BaseModel):
    id: StrictInt
    quantity: StrictInt


class OrderRequestSchema(BaseModel):
    items: list[OrderLineSchema] | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [{"items": [{"id": 1, "quantity": 2}]}]
        }
    }


class OrderConfirmationSchema(BaseModel):
    message: str
    orderId: int


class ErrorSchema(BaseModel):
    message: str
