"""JSON-file-backed, read-only implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import PriceBreak, Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):
    """Catalog loaded once from a JSON list of products.

    The catalog is static for a session, so the file is read on first use
    and kept in memory afterwards. A catalog is priced in a single currency;
    a product declaring any other currency is rejected.
    """

    def __init__(self, file_path: Path, currency: str = DEFAULT_CURRENCY) -> None:
        self._file_path = file_path
        self._currency = currency
        self._products: dict[int, Product] | None = None

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        if self._products is None:
            if not self._file_path.exists():
                logger.warning("Catalog file %s not found; catalog is empty", self._file_path)
                self._products = {}
            else:
                raw = json.loads(self._file_path.read_text(encoding="utf-8"))
                self._products = {}
                for item in raw:
                    product = self._to_domain(item)
                    self._products[product.id] = product
        return self._products

    def _to_domain(self, raw: dict) -> Product:
        currency = raw.get("currency", self._currency)
        if currency != self._currency:
            raise ValidationError(
                f"Product {raw.get('id')!r} is priced in {currency}, "
                f"catalog currency is {self._currency}"
            )
        return Product(
            id=int(raw["id"]),
            name=raw["name"],
            sku=raw.get("sku", ""),
            base_price=Money.of(raw["base_price"], currency),
            stock=int(raw["stock"]),
            price_breaks=tuple(
                PriceBreak(
                    min_quantity=int(pb["min_qty"]),
                    unit_price=Money.of(pb["price"], currency),
                )
                for pb in raw.get("price_breaks") or []
            ),
        )
