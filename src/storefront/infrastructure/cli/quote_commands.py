"""CLI commands for quotes."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

from storefront.application.cart_store import CartStore
from storefront.application.dto import QuoteDocument
from storefront.application.export_quote import ExportQuoteHandler
from storefront.application.quote_assembler import QuoteAssembler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.quote import CompanyInfo
from storefront.infrastructure.bootstrap import EXPORT_FORMATS, cart_store, quote_exporter

INCOMPLETE_CONTACT = "All company fields are required (company, contact, email, phone, tax id, address)."

F = TypeVar("F", bound=Callable[..., Any])


def company_options(command: F) -> F:
    """Attach the six company header options to *command*."""
    options = [
        click.option("--company", "company_name", default="", help="Company name."),
        click.option("--contact", "contact_name", default="", help="Contact name."),
        click.option("--email", default="", help="Contact email."),
        click.option("--phone", default="", help="Contact phone."),
        click.option("--tax-id", default="", help="Company tax identifier."),
        click.option("--address", default="", help="Company address."),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _open_store() -> CartStore:
    try:
        return cart_store()
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _display_document(doc: QuoteDocument) -> None:
    h = doc.header
    click.echo("Quote")
    click.echo(f"Company:  {h.company_name}  (tax id {h.tax_id})")
    click.echo(f"Contact:  {h.contact_name} - {h.email} - {h.phone}")
    click.echo(f"Address:  {h.address}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Unit price':>12} {'Disc.':>7} {'Subtotal':>14}")
    click.echo(f"  {'-'*66}")
    for row in doc.rows:
        click.echo(
            f"  {row.product_name:<24} {row.quantity:>5} {row.unit_price:>12} "
            f"{row.discount:>7} {row.subtotal:>14}"
        )
    click.echo(f"  {'-'*66}")
    click.echo(f"  {'Subtotal':<24} {doc.subtotal:>41}")
    click.echo(f"  {'Discount':<24} {doc.discount:>41}")
    click.echo(f"  {'Total':<24} {doc.total:>41}")


@click.command("preview")
@company_options
def quote_preview(**fields: str) -> None:
    """Preview the quote for the current cart."""
    store = _open_store()
    if not store.items:
        click.echo("Your cart is empty.")
        return

    document = QuoteAssembler().build_document(store.items, CompanyInfo(**fields))
    if document is None:
        raise click.ClickException(INCOMPLETE_CONTACT)

    _display_document(document)


@click.command("export")
@company_options
@click.option(
    "--format",
    "fmt",
    type=click.Choice(sorted(EXPORT_FORMATS)),
    default="pdf",
    show_default=True,
    help="Document format.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Target file (defaults to a timestamped file in STOREFRONT_EXPORT_DIR).",
)
def quote_export(fmt: str, output: Path | None, **fields: str) -> None:
    """Export the quote document for the current cart."""
    store = _open_store()
    if not store.items:
        click.echo("Your cart is empty.")
        return

    company = CompanyInfo(**fields)
    if not QuoteAssembler.validate_contact(company):
        raise click.ClickException(INCOMPLETE_CONTACT)

    path = ExportQuoteHandler(store, quote_exporter(output=output, fmt=fmt)).handle(company)
    click.echo(f"Quote written to {path}")
