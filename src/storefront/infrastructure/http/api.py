"""FastAPI application for the store: catalog and order endpoints.

Usage:
    storefront serve --port 3000
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from storefront.application.accept_order import AcceptOrderHandler
from storefront.application.dto import OrderItemSpec
from storefront.application.list_products import ListProductsHandler
from storefront.domain.exceptions import DomainException, MalformedOrderError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.http.schemas import (
    ErrorSchema,
    OrderConfirmationSchema,
    OrderRequestSchema,
    ProductSchema,
)
from storefront.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from storefront.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

logger = structlog.get_logger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON"

# ---------------------------------------------------------------------------
# Store Router
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/api", tags=["store"])


@router.get("/products", response_model=list[ProductSchema])
def list_products(request: Request, response: Response) -> list[ProductSchema]:
    handler = ListProductsHandler(request.app.state.product_repo)
    response.headers["Cache-Control"] = "no-cache"
    return [ProductSchema.from_domain(p) for p in handler.handle()]


@router.post(
    "/orders",
    response_model=OrderConfirmationSchema,
    responses={400: {"model": ErrorSchema}},
)
async def place_order(request: Request) -> OrderConfirmationSchema:
    # Read the raw body ourselves: any unreadable body is a 400, not a 422.
    body = await request.body()
    try:
        payload = OrderRequestSchema.model_validate_json(body or b"{}")
    except PydanticValidationError as exc:
        logger.warning("Rejected malformed order", errors=exc.error_count())
        raise MalformedOrderError(INVALID_JSON_MESSAGE) from exc

    # A missing or null items list is an empty order.
    lines = payload.items or []

    handler = AcceptOrderHandler(request.app.state.order_repo)
    dto = handler.handle(
        [OrderItemSpec(product_id=line.id, quantity=line.quantity) for line in lines]
    )
    return OrderConfirmationSchema(**dto.to_payload())


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
async def _domain_error(request: Request, exc: DomainException) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": str(exc)})


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(
    product_repo: ProductRepository | None = None,
    order_repo: OrderRepository | None = None,
) -> FastAPI:
    """Build the API with its own catalog and ledger.

    Each app gets a fresh ledger unless one is passed in, so tests never
    share orders.
    """
    app = FastAPI(title="Storefront API", description="Product catalog and order ledger")
    app.state.product_repo = product_repo or InMemoryProductRepository()
    app.state.order_repo = order_repo or InMemoryOrderRepository()
    app.add_exception_handler(DomainException, _domain_error)
    app.include_router(router)
    return app
