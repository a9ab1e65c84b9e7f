"""Application service: the cart store.

CartStore is the single owner and writer of the cart. It is created once
by the composition root and handed to whoever needs it. Each mutation is
applied to the Cart aggregate, persisted, and then announced to
subscribers, who pull the settled snapshot from the store.

Storage is best-effort: a failed write is logged and the in-memory cart
stays authoritative for the session.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from storefront.domain.model.cart import Cart, CartEvent, CartItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import (
    CartRepository,
    StoredCartLine,
)
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

CartListener = Callable[[CartEvent], None]


class CartStore:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._listeners: list[CartListener] = []
        self._cart = self._hydrate()

    # --- Mutations ------------------------------------------------------------

    def add_to_cart(self, product: Product, quantity: int = 1) -> CartEvent:
        """Add units of *product*, capped at its stock."""
        event = self._cart.add(product, quantity)
        logger.debug("add_to_cart(%s, %s) -> %s", product.id, quantity, event)
        self._commit(event)
        return event

    def remove_from_cart(self, product_id: int) -> CartEvent | None:
        """Remove a product; an id that is not in the cart is a no-op."""
        event = self._cart.remove(product_id)
        logger.debug("remove_from_cart(%s) -> %s", product_id, event)
        self._commit(event)
        return event

    def update_quantity(self, product_id: int, quantity: int) -> CartEvent | None:
        """Set a product's quantity (0 removes, above stock clamps).

        Negative quantities are rejected without touching the cart.
        """
        if quantity < 0:
            logger.warning(
                "Rejected quantity %s for product %s: must not be negative",
                quantity,
                product_id,
            )
            return None
        event = self._cart.update_quantity(product_id, quantity)
        logger.debug("update_quantity(%s, %s) -> %s", product_id, quantity, event)
        self._commit(event)
        return event

    def clear_cart(self) -> CartEvent:
        event = self._cart.clear()
        logger.debug("clear_cart() -> %s", event)
        self._commit(event)
        return event

    # --- Read side ------------------------------------------------------------

    @property
    def items(self) -> tuple[CartItem, ...]:
        """Immutable snapshot of the cart in insertion order."""
        return tuple(self._cart.items)

    @property
    def total_items(self) -> int:
        return self._cart.total_items

    @property
    def grand_total(self) -> Money:
        return self._cart.grand_total

    def get_item(self, product_id: int) -> CartItem | None:
        return self._cart.find(product_id)

    # --- Subscriptions --------------------------------------------------------

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Call *listener* after every committed mutation.

        Returns a function that removes the subscription.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Internal helpers -----------------------------------------------------

    def _commit(self, event: CartEvent | None) -> None:
        self._persist()
        if event is not None:
            self._notify(event)

    def _persist(self) -> None:
        lines = [
            StoredCartLine(product_id=item.product_id, quantity=item.quantity)
            for item in self._cart.items
        ]
        try:
            self._cart_repo.save(lines)
        except OSError as exc:
            logger.warning("Could not persist cart (%d lines): %s", len(lines), exc)

    def _notify(self, event: CartEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Cart listener %r failed for %s", listener, event)

    def _hydrate(self) -> Cart:
        entries: list[tuple[Product, int]] = []
        for line in self._cart_repo.load():
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                logger.warning(
                    "Dropping stored cart line for unknown product %s",
                    line.product_id,
                )
                continue
            entries.append((product, line.quantity))

        cart = Cart.restore(entries)
        logger.debug("Hydrated cart with %d item(s)", len(cart.items))
        return cart
