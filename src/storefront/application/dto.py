"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry formatted data from the application layer to the CLI and to
the quote exporter without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    stock: int
    unit_price: str  # effective price, formatted, e.g. "$900"
    discount: str  # e.g. "10.0%"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total_items: int
    grand_total: str


@dataclass(frozen=True)
class QuoteHeaderDTO:
    """Company header fields of a quote document."""

    company_name: str
    contact_name: str
    email: str
    phone: str
    tax_id: str
    address: str


@dataclass(frozen=True)
class QuoteRowDTO:
    """One row of a quote document."""

    product_name: str
    quantity: int
    unit_price: str  # base price
    discount: str
    subtotal: str


@dataclass(frozen=True)
class QuoteDocument:
    """Everything a document exporter needs to render a quote."""

    header: QuoteHeaderDTO
    rows: list[QuoteRowDTO]
    subtotal: str
    discount: str
    total: str
