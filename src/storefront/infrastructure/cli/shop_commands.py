"""Interactive shopping session: a cart driven from the terminal."""

from __future__ import annotations

import click

from storefront.application.cart_items import (
    AddToCartHandler,
    RemoveFromCartHandler,
    ShowCartHandler,
)
from storefront.application.checkout import CheckoutHandler
from storefront.application.load_catalog import LoadCatalogHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import Cart
from storefront.infrastructure.bootstrap import notifier, store_gateway
from storefront.infrastructure.cli.display import (
    display_cart,
    display_products,
    echo_notification,
)

HELP = "Commands: products, add <id>, remove <id>, cart, checkout, quit"


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        click.echo("Expected exactly one product id.")
        return None
    try:
        return int(args[0])
    except ValueError:
        click.echo(f"Invalid product id '{args[0]}'.")
        return None


@click.command("shop")
@click.option("--url", default=None, help="Store server URL (defaults to STORE_URL).")
def shop(url: str | None) -> None:
    """Start an interactive shopping session."""
    gateway = store_gateway(url)
    note = notifier()
    note.subscribe(echo_notification)

    products = LoadCatalogHandler(gateway, note).handle()
    catalog = {p.id: p for p in products}
    display_products(products)

    cart = Cart()
    add = AddToCartHandler(cart, note)
    remove = RemoveFromCartHandler(cart)
    show = ShowCartHandler(cart)
    checkout = CheckoutHandler(cart, gateway, note)

    click.echo(HELP)
    try:
        while True:
            try:
                line = click.prompt("shop", prompt_suffix="> ")
            except click.Abort:
                break

            verb, *args = line.split() or [""]
            if verb in ("quit", "exit"):
                break
            elif verb == "products":
                display_products(products)
            elif verb == "add":
                product_id = _parse_id(args)
                if product_id is None:
                    continue
                product = catalog.get(product_id)
                if product is None:
                    click.echo(f"Product not found: #{product_id}")
                    continue
                add.handle(product)
            elif verb == "remove":
                product_id = _parse_id(args)
                if product_id is None:
                    continue
                if product_id not in cart:
                    click.echo(f"Product #{product_id} is not in your cart.")
                    continue
                remove.handle(product_id)
                display_cart(show.handle())
            elif verb == "cart":
                display_cart(show.handle())
            elif verb == "checkout":
                checkout.handle()
            else:
                click.echo(HELP)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        note.close()
