"""Shared text rendering for CLI commands."""

from __future__ import annotations

import click

from storefront.application.dto import CartDTO
from storefront.domain.model.product import Product


def echo_notification(message: str) -> None:
    # Clears arrive as empty strings; nothing to print for those.
    if message:
        click.echo(f"* {message}")


def display_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}  Description")
    click.echo("-" * 70)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10}  {p.description}")


def display_cart(dto: CartDTO) -> None:
    click.echo("Your Cart")
    if dto.is_empty:
        click.echo("  Cart is empty.")
    for line in dto.lines:
        click.echo(f"  {line.product_name} x {line.quantity} ({line.line_total})")
    click.echo(f"Total: {dto.total}")
