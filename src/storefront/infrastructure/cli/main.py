import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.order_commands import order_place
from storefront.infrastructure.cli.product_commands import product_list
from storefront.infrastructure.cli.server_commands import serve
from storefront.infrastructure.cli.shop_commands import shop
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront: product catalog, cart and checkout"""
    try:
        cfg = settings()
    except ValueError as exc:
        raise click.ClickException(str(exc))
    configure_logging(cfg.log_level)


# Register subcommands
cli.add_command(order_place)
cli.add_command(product_list)
cli.add_command(serve)
cli.add_command(shop)
