"""Application service: Export Quote use case.

The exporter is only invoked for a complete contact and a non-empty cart;
otherwise the handler returns None and the caller keeps the export
disabled.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from storefront.application.cart_store import CartStore
from storefront.application.dto import QuoteDocument
from storefront.application.quote_assembler import QuoteAssembler
from storefront.domain.model.quote import CompanyInfo

logger = logging.getLogger(__name__)


class QuoteExporter(ABC):

    @abstractmethod
    def export(self, document: QuoteDocument) -> Path:
        """Render *document* to a downloadable file and return its path."""


class ExportQuoteHandler:

    def __init__(
        self,
        cart_store: CartStore,
        exporter: QuoteExporter,
        assembler: QuoteAssembler | None = None,
    ) -> None:
        self._cart_store = cart_store
        self._exporter = exporter
        self._assembler = assembler or QuoteAssembler()

    def handle(self, company: CompanyInfo) -> Path | None:
        items = self._cart_store.items
        if not items:
            logger.info("Quote export skipped: cart is empty")
            return None

        document = self._assembler.build_document(items, company)
        if document is None:
            logger.info("Quote export skipped: contact details incomplete")
            return None

        path = self._exporter.export(document)
        logger.info("Quote exported to %s", path)
        return path
