"""Application service: Load Catalog use case (client side)."""

from __future__ import annotations

import structlog

from storefront.application.gateway import GatewayError, StoreGateway
from storefront.application.notifier import Notifier
from storefront.domain.model.product import Product

logger = structlog.get_logger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load products."


class LoadCatalogHandler:

    def __init__(self, gateway: StoreGateway, notifier: Notifier) -> None:
        self._gateway = gateway
        self._notifier = notifier

    def handle(self) -> list[Product]:
        """Fetch the catalog; an unreachable server yields an empty list."""
        try:
            products = self._gateway.fetch_products()
        except GatewayError as exc:
            logger.error("Failed to load products", error=str(exc))
            self._notifier.post(LOAD_FAILED_MESSAGE)
            return []

        logger.debug("Catalog loaded", count=len(products))
        return products
