"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    try:
        products = product_repository().list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'SKU':<10} {'Name':<24} {'Price':>12} {'Stock':>6}  Breaks")
    click.echo("-" * 78)
    for p in products:
        breaks = ", ".join(
            f"{pb.min_quantity}+ @ {pb.unit_price}"
            for pb in sorted(p.price_breaks, key=lambda pb: pb.min_quantity)
        )
        click.echo(
            f"{p.id:<6} {p.sku:<10} {p.name:<24} {str(p.base_price):>12} {p.stock:>6}  {breaks or '-'}"
        )
