"""Product aggregate, as supplied by the catalog.

Products are owned by the catalog and never mutated by the cart or the
quote engine; they are only referenced.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class PriceBreak:
    """A volume tier: ``unit_price`` applies from ``min_quantity`` units up."""

    min_quantity: int
    unit_price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.min_quantity, int) or self.min_quantity <= 0:
            raise ValidationError(
                f"Price break minimum quantity must be a positive integer, "
                f"got {self.min_quantity!r}"
            )


@dataclass(frozen=True)
class Product:
    """A sellable product in the catalog.

    Invariants:
    - ``base_price`` is greater than zero
    - ``stock`` is a non-negative integer (the maximum sellable quantity)
    - no two price breaks share the same ``min_quantity``

    ``price_breaks`` is an explicit (possibly empty) tuple; its order is
    irrelevant.
    """

    id: int
    name: str
    sku: str
    base_price: Money
    stock: int
    price_breaks: tuple[PriceBreak, ...] = ()

    def __post_init__(self) -> None:
        if self.base_price.amount <= 0:
            raise ValidationError(
                f"Base price of {self.name} must be greater than zero"
            )
        if not isinstance(self.stock, int) or self.stock < 0:
            raise ValidationError(
                f"Stock of {self.name} must be a non-negative integer"
            )
        minimums = [pb.min_quantity for pb in self.price_breaks]
        if len(minimums) != len(set(minimums)):
            raise ValidationError(
                f"Duplicate price break minimum quantity for {self.name}"
            )
        if any(pb.unit_price.currency != self.currency for pb in self.price_breaks):
            raise ValidationError(
                f"Price breaks of {self.name} must be in {self.currency}"
            )

    @property
    def has_price_breaks(self) -> bool:
        return len(self.price_breaks) > 0

    @property
    def currency(self) -> str:
        return self.base_price.currency
