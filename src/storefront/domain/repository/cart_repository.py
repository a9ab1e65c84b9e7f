"""Abstract repository for the persisted cart.

Only product identifiers and quantities are stored; products are
re-resolved against the catalog when the cart is loaded.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class StoredCartLine:
    product_id: int
    quantity: int


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> list[StoredCartLine]:
        """Return the stored lines in insertion order; empty if nothing is stored."""

    @abstractmethod
    def save(self, lines: list[StoredCartLine]) -> None:
        """Replace the stored cart with *lines*."""
