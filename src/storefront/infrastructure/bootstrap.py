"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
The CartStore is built here once per session and passed to its
consumers; nothing else constructs one.
"""

from __future__ import annotations

from pathlib import Path

from storefront.application.cart_store import CartStore
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.config import Settings, load_settings
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.application.export_quote import QuoteExporter
from storefront.infrastructure.persistence.json_quote_exporter import (
    JsonQuoteExporter,
)
from storefront.infrastructure.persistence.pdf_quote_exporter import (
    PdfQuoteExporter,
)

EXPORT_FORMATS = {"pdf": PdfQuoteExporter, "json": JsonQuoteExporter}


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    settings = settings or load_settings()
    return JsonProductRepository(settings.catalog_file, settings.currency)


def cart_repository(settings: Settings | None = None) -> JsonCartRepository:
    settings = settings or load_settings()
    return JsonCartRepository(settings.cart_file)


def cart_store(
    settings: Settings | None = None,
    products: ProductRepository | None = None,
) -> CartStore:
    settings = settings or load_settings()
    return CartStore(
        cart_repo=cart_repository(settings),
        product_repo=products or product_repository(settings),
    )


def quote_exporter(
    settings: Settings | None = None,
    output: Path | None = None,
    fmt: str = "pdf",
) -> QuoteExporter:
    exporter_cls = EXPORT_FORMATS[fmt]
    if output is not None:
        return exporter_cls(output.parent, output.name)
    settings = settings or load_settings()
    return exporter_cls(settings.export_dir)
