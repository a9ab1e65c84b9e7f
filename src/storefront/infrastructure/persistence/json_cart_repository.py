"""JSON-file-backed implementation of CartRepository.

The file is a small keyed store (a JSON object); the cart lives under a
single key as an ordered list of ``{"productId": int, "quantity": int}``.
Anything unreadable under that key is treated as an empty cart.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.repository.cart_repository import (
    CartRepository,
    StoredCartLine,
)

logger = logging.getLogger(__name__)

CART_KEY = "cart_items"


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path, key: str = CART_KEY) -> None:
        self._file_path = file_path
        self._key = key

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> list[StoredCartLine]:
        record = self._read_store().get(self._key)
        if record is None:
            return []
        try:
            return [self._to_line(raw) for raw in record]
        except (TypeError, KeyError, ValueError) as exc:
            logger.warning("Ignoring corrupt cart record in %s: %s", self._file_path, exc)
            return []

    def save(self, lines: list[StoredCartLine]) -> None:
        store = self._read_store()
        store[self._key] = [
            {"productId": line.product_id, "quantity": line.quantity}
            for line in lines
        ]
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(store, indent=2) + "\n", encoding="utf-8"
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_line(raw: dict) -> StoredCartLine:
        product_id, quantity = raw["productId"], raw["quantity"]
        if isinstance(product_id, bool) or isinstance(quantity, bool):
            raise ValueError(f"Invalid cart line {raw!r}")
        if not isinstance(product_id, int) or not isinstance(quantity, int):
            raise ValueError(f"Invalid cart line {raw!r}")
        return StoredCartLine(product_id=product_id, quantity=quantity)

    # --- File helpers ---------------------------------------------------------

    def _read_store(self) -> dict:
        if not self._file_path.exists():
            return {}
        try:
            store = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Cannot read cart storage %s: %s", self._file_path, exc)
            return {}
        if not isinstance(store, dict):
            logger.warning("Cart storage %s is not a JSON object; ignoring it", self._file_path)
            return {}
        return store
