"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.load_catalog import LoadCatalogHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import notifier, store_gateway
from storefront.infrastructure.cli.display import display_products, echo_notification


@click.command("products")
@click.option("--url", default=None, help="Store server URL (defaults to STORE_URL).")
def product_list(url: str | None) -> None:
    """List all products in the catalog."""
    note = notifier()
    note.subscribe(echo_notification)
    try:
        products = LoadCatalogHandler(store_gateway(url), note).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        note.close()

    display_products(products)
