"""CLI commands for the shopping cart.

Each command builds the store through the composition root and subscribes
a notifier that echoes the outcome of the mutation.
"""

from __future__ import annotations

import click

from storefront.application.cart_store import CartStore
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException, EntityNotFoundError
from storefront.domain.model.cart import CartEvent, CartEventType
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.bootstrap import cart_store, product_repository


def _describe(event: CartEvent, product: Product | None) -> str:
    name = product.name if product is not None else f"Product #{event.product_id}"

    if event.type is CartEventType.ADDED:
        return f"Added {event.quantity} x {name} to the cart."
    if event.type is CartEventType.CAPPED:
        stock = product.stock if product is not None else event.quantity
        if event.quantity == 0:
            return f"{name} is already at the stock limit ({stock})."
        return f"Stock limit reached for {name}: {event.quantity} applied ({stock} available)."
    if event.type is CartEventType.REMOVED:
        return f"Removed {name} from the cart."
    if event.type is CartEventType.UPDATED:
        return f"{name} quantity set to {event.quantity}."
    return f"Cart cleared ({event.quantity} unit(s) removed)."


def _open_store(products: ProductRepository) -> CartStore:
    try:
        store = cart_store(products=products)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    def notify(event: CartEvent) -> None:
        product = None
        if event.product_id is not None:
            product = products.get_by_id(event.product_id)
        click.echo(_describe(event, product))

    store.subscribe(notify)
    return store


def _require_product(products: ProductRepository, product_id: int) -> Product:
    product = products.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError(f"Product #{product_id} not found")
    return product


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def cart_add(product_id: int, quantity: int) -> None:
    """Add a product to the cart (capped at stock)."""
    products = product_repository()

    try:
        product = _require_product(products, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _open_store(products).add_to_cart(product, quantity)


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_remove(product_id: int) -> None:
    """Remove a product from the cart."""
    event = _open_store(product_repository()).remove_from_cart(product_id)
    if event is None:
        click.echo(f"Product #{product_id} is not in the cart.")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_update(product_id: int, quantity: int) -> None:
    """Set the quantity of a product already in the cart."""
    if quantity < 0:
        raise click.BadParameter("Quantity cannot be negative.", param_hint="--quantity")

    event = _open_store(product_repository()).update_quantity(product_id, quantity)
    if event is None:
        click.echo(f"Product #{product_id} is not in the cart.")


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    _open_store(product_repository()).clear_cart()


@click.command("show")
def cart_show() -> None:
    """Show the cart with volume pricing applied."""
    try:
        dto = ShowCartHandler(cart_store()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<5} {'Product':<24} {'Qty':>5} {'Unit':>12} {'Disc.':>7} {'Total':>14}")
    click.echo(f"  {'-'*72}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<5} {item.product_name:<24} {item.quantity:>5} "
            f"{item.unit_price:>12} {item.discount:>7} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*72}")
    click.echo(f"  {'Items':<30} {dto.total_items:>5}")
    click.echo(f"  {'Total':<30} {dto.grand_total:>41}")
