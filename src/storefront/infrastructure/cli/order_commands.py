"""CLI command for placing an order in one shot."""

from __future__ import annotations

import click

from storefront.application.cart_items import ShowCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import OrderItemSpec
from storefront.application.load_catalog import LoadCatalogHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import Cart
from storefront.infrastructure.bootstrap import notifier, store_gateway
from storefront.infrastructure.cli.display import display_cart, echo_notification


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            product_id = int(id_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product id and quantity must be integers."
            )
        if qty <= 0:
            raise click.BadParameter(f"Quantity for product {product_id} must be positive.")
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty))
    return specs


@click.command("order")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--url", default=None, help="Store server URL (defaults to STORE_URL).")
def order_place(items: str, url: str | None) -> None:
    """Fill a cart from the catalog and check it out."""
    specs = _parse_items(items)

    gateway = store_gateway(url)
    note = notifier()
    note.subscribe(echo_notification)
    try:
        catalog = {p.id: p for p in LoadCatalogHandler(gateway, note).handle()}
        if not catalog:
            raise click.ClickException("Catalog is unavailable.")

        cart = Cart()
        for spec in specs:
            product = catalog.get(spec.product_id)
            if product is None:
                raise click.ClickException(f"Product not found: #{spec.product_id}")
            for _ in range(spec.quantity):
                cart.add(product)

        display_cart(ShowCartHandler(cart).handle())
        confirmation = CheckoutHandler(cart, gateway, note).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        note.close()

    if confirmation is None:
        raise click.ClickException("Order was not placed.")
    click.echo(f"Order #{confirmation.order_id} placed.")
