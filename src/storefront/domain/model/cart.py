"""Cart aggregate: the stock-bounded list of products a buyer selected.

The Cart owns its items and enforces their invariants; every mutation
reports what actually happened as a CartEvent so a notification layer
can tell the buyer (e.g. that an addition was capped at stock).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.service import price_breaks


class CartEventType(Enum):
    ADDED = "ADDED"
    CAPPED = "CAPPED"
    REMOVED = "REMOVED"
    UPDATED = "UPDATED"
    CLEARED = "CLEARED"


@dataclass(frozen=True)
class CartEvent:
    """Outcome of a cart mutation.

    ``quantity`` is the number of units added for ADDED/CAPPED additions,
    the resulting quantity for updates, the units removed for REMOVED and
    the units dropped for CLEARED.
    """

    type: CartEventType
    product_id: int | None
    quantity: int


@dataclass(frozen=True)
class CartItem:
    """A product reference plus a quantity in ``[1, product.stock]``."""

    product: Product
    quantity: int

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def unit_price(self) -> Money:
        return price_breaks.effective_unit_price(self.product, self.quantity)

    @property
    def line_total(self) -> Money:
        return price_breaks.line_total(self.product, self.quantity)


def _clamp(quantity: int, stock: int) -> int:
    return max(1, min(quantity, stock))


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - at most one item per product id
    - every item quantity lies in ``[1, product.stock]``

    Items are replaced rather than mutated, so snapshots handed out by
    ``items`` stay valid after later mutations.
    """

    items: list[CartItem] = field(default_factory=list)

    # --- Factory (used when hydrating from storage) ---------------------------

    @staticmethod
    def restore(entries: list[tuple[Product, int]]) -> Cart:
        """Rebuild a cart from stored (product, quantity) pairs.

        Repeated products keep their first occurrence, stored quantities are
        re-clamped to current stock, and entries that can no longer satisfy
        the bounds (zero stock, non-positive quantity) are dropped.
        """
        cart = Cart()
        for product, quantity in entries:
            if cart.find(product.id) is not None:
                continue
            if quantity < 1 or product.stock < 1:
                continue
            cart.items.append(CartItem(product, _clamp(quantity, product.stock)))
        return cart

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int = 1) -> CartEvent:
        """Add *quantity* units, capping silently at the product's stock.

        Requests below 1 count as 1. When the product is already at stock
        nothing changes and a CAPPED event with quantity 0 is returned.
        """
        requested = max(quantity, 1)
        index = self._index_of(product.id)

        if index is None:
            if product.stock < 1:
                return CartEvent(CartEventType.CAPPED, product.id, 0)
            added = min(requested, product.stock)
            self.items.append(CartItem(product, added))
        else:
            current = self.items[index]
            headroom = product.stock - current.quantity
            added = max(min(requested, headroom), 0)
            if added:
                self.items[index] = replace(current, quantity=current.quantity + added)

        event_type = CartEventType.ADDED if added == requested else CartEventType.CAPPED
        return CartEvent(event_type, product.id, added)

    def remove(self, product_id: int) -> CartEvent | None:
        """Remove the item for *product_id*; returns None if it was absent."""
        index = self._index_of(product_id)
        if index is None:
            return None
        removed = self.items.pop(index)
        return CartEvent(CartEventType.REMOVED, product_id, removed.quantity)

    def update_quantity(self, product_id: int, quantity: int) -> CartEvent | None:
        """Set the quantity of an existing item.

        Zero removes the item. Values above stock are clamped to stock
        (reported as CAPPED). Negative values and unknown ids change nothing
        and return None.
        """
        if quantity < 0:
            return None
        if quantity == 0:
            return self.remove(product_id)

        index = self._index_of(product_id)
        if index is None:
            return None

        current = self.items[index]
        new_quantity = _clamp(quantity, current.product.stock)
        self.items[index] = replace(current, quantity=new_quantity)

        event_type = (
            CartEventType.UPDATED if new_quantity == quantity else CartEventType.CAPPED
        )
        return CartEvent(event_type, product_id, new_quantity)

    def clear(self) -> CartEvent:
        dropped = self.total_items
        self.items = []
        return CartEvent(CartEventType.CLEARED, None, dropped)

    # --- Computed properties --------------------------------------------------

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def grand_total(self) -> Money:
        currency = self.items[0].product.currency if self.items else DEFAULT_CURRENCY
        return Money.total((item.line_total for item in self.items), currency)

    def find(self, product_id: int) -> CartItem | None:
        index = self._index_of(product_id)
        return None if index is None else self.items[index]

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, product_id: int) -> int | None:
        for i, item in enumerate(self.items):
            if item.product_id == product_id:
                return i
        return None
