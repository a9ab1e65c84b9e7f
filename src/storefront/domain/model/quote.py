"""Quote model: a priced breakdown of the cart for a buyer.

Quotes are derived values: always recomputed from the current cart and
never stored.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from decimal import Decimal

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class CompanyInfo:
    """Buyer contact details printed on the quote header."""

    company_name: str = ""
    contact_name: str = ""
    email: str = ""
    phone: str = ""
    tax_id: str = ""
    address: str = ""

    @property
    def is_complete(self) -> bool:
        """True iff every field is non-empty after trimming."""
        return all((value or "").strip() for value in astuple(self))

    def stripped(self) -> CompanyInfo:
        return CompanyInfo(*((value or "").strip() for value in astuple(self)))


@dataclass(frozen=True)
class QuoteLine:
    product_id: int
    product_name: str
    sku: str
    quantity: int
    unit_price: Money  # base price, before any break
    effective_unit_price: Money
    discount_percent: Decimal
    line_subtotal: Money  # effective_unit_price * quantity

    @property
    def base_subtotal(self) -> Money:
        return self.unit_price * self.quantity

    @property
    def discount_amount(self) -> Money:
        # A break priced above base is treated as no discount.
        if self.line_subtotal >= self.base_subtotal:
            return Money.zero(self.unit_price.currency)
        return self.base_subtotal - self.line_subtotal


@dataclass(frozen=True)
class Quote:
    """Ordered quote lines plus totals.

    ``subtotal`` is undiscounted (base price * quantity); ``total`` is what
    the buyer pays. The gap between them is ``discount``.
    """

    lines: tuple[QuoteLine, ...]
    subtotal: Money
    total: Money

    @property
    def discount(self) -> Money:
        return Money.total(
            (line.discount_amount for line in self.lines), self.subtotal.currency
        )

    @property
    def is_empty(self) -> bool:
        return not self.lines
