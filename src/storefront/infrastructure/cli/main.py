import logging

import click

from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.product_commands import product_list
from storefront.infrastructure.cli.quote_commands import quote_export, quote_preview
from storefront.infrastructure.config import load_settings

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override STOREFRONT_LOG_LEVEL.",
)
def cli(log_level: str | None) -> None:
    """Storefront: catalog, cart and quotes"""
    level = (log_level or load_settings().log_level).upper()
    logging.basicConfig(
        level=level if level in LOG_LEVELS else "WARNING",
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def quote() -> None:
    """Preview and export quotes."""


# Register subcommands
product.add_command(product_list)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
quote.add_command(quote_export)
quote.add_command(quote_preview)
