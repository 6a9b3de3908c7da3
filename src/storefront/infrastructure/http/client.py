"""HTTP implementation of StoreGateway, using ``requests``."""

from __future__ import annotations

import requests
import structlog

from storefront.application.dto import OrderConfirmationDTO
from storefront.application.gateway import GatewayError, StoreGateway
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderRequest
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

logger = structlog.get_logger(__name__)


class HttpStoreGateway(StoreGateway):

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    # --- StoreGateway interface -----------------------------------------------

    def fetch_products(self) -> list[Product]:
        data = self._request("GET", "/api/products")
        if not isinstance(data, list):
            raise GatewayError("Catalog response is not a list")
        try:
            return [self._to_product(raw) for raw in data]
        except (KeyError, TypeError, ValidationError) as exc:
            raise GatewayError(f"Malformed product in catalog: {exc}") from exc

    def submit_order(self, request: OrderRequest) -> OrderConfirmationDTO:
        data = self._request("POST", "/api/orders", json=request.to_payload())
        message = data.get("message") if isinstance(data, dict) else None
        order_id = data.get("orderId") if isinstance(data, dict) else None
        if not isinstance(message, str) or not isinstance(order_id, int):
            raise GatewayError(f"Unexpected order response: {data!r}")
        return OrderConfirmationDTO(message=message, order_id=order_id)

    # --- Internal helpers -----------------------------------------------------

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self._base_url}{path}"
        logger.debug("HTTP request", method=method, url=url)
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            raise GatewayError(f"{method} {url} failed: {exc}") from exc
        except ValueError as exc:
            # Body was not JSON
            raise GatewayError(f"{method} {url} returned invalid JSON") from exc

    @staticmethod
    def _to_product(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money.of(raw["price"]),
            image=raw.get("image", ""),
        )
