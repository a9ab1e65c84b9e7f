"""Price-break resolution.

Pure functions: given a product and a requested quantity, work out which
volume tier applies, the unit price actually charged and the resulting
discount. Quantities below 1 are outside the contract (a cart item is
always at least 1); they simply resolve to the base price.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.product import PriceBreak, Product
from storefront.domain.model.value_objects import Money

_HUNDRED = Decimal("100")


def applicable_break(product: Product, quantity: int) -> PriceBreak | None:
    """Return the break with the largest minimum not exceeding *quantity*."""
    if not product.has_price_breaks:
        return None

    qualifying = [pb for pb in product.price_breaks if pb.min_quantity <= quantity]
    if not qualifying:
        return None
    return max(qualifying, key=lambda pb: pb.min_quantity)


def effective_unit_price(product: Product, quantity: int) -> Money:
    """Unit price charged for *quantity* units of *product*."""
    price_break = applicable_break(product, quantity)
    if price_break is None:
        return product.base_price
    return price_break.unit_price


def discount_percent(product: Product, quantity: int) -> Decimal:
    """Discount of the effective unit price against the base price, in [0, 100).

    A break priced above the base price is bad catalog data; it yields 0
    rather than a negative discount.
    """
    if not product.has_price_breaks:
        return Decimal("0")

    base = product.base_price.amount
    effective = effective_unit_price(product, quantity).amount
    percent = (base - effective) / base * _HUNDRED
    return max(percent, Decimal("0"))


def line_total(product: Product, quantity: int) -> Money:
    return effective_unit_price(product, quantity) * quantity
