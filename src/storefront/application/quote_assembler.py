"""Application service: quote assembly.

Turns a cart snapshot into a priced Quote, and a Quote plus buyer
details into the QuoteDocument handed to an exporter. Nothing here is
cached: every call reprices from the items it is given.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.application.dto import QuoteDocument, QuoteHeaderDTO, QuoteRowDTO
from storefront.domain.model.cart import CartItem
from storefront.domain.model.quote import CompanyInfo, Quote, QuoteLine
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.service.price_breaks import (
    discount_percent,
    effective_unit_price,
)


class QuoteAssembler:

    def build_quote(self, items: Iterable[CartItem]) -> Quote:
        """Price every item through its volume breaks.

        ``subtotal`` sums base price * quantity; ``total`` sums the
        effective line subtotals.
        """
        lines = tuple(self._to_line(item) for item in items)
        currency = lines[0].unit_price.currency if lines else DEFAULT_CURRENCY
        return Quote(
            lines=lines,
            subtotal=Money.total((line.base_subtotal for line in lines), currency),
            total=Money.total((line.line_subtotal for line in lines), currency),
        )

    @staticmethod
    def validate_contact(company: CompanyInfo) -> bool:
        return company.is_complete

    def build_document(
        self,
        items: Iterable[CartItem],
        company: CompanyInfo,
    ) -> QuoteDocument | None:
        """Assemble the exporter's input, or None if the contact is incomplete."""
        if not self.validate_contact(company):
            return None
        return self._to_document(self.build_quote(items), company.stripped())

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_line(item: CartItem) -> QuoteLine:
        product, qty = item.product, item.quantity
        unit = effective_unit_price(product, qty)
        return QuoteLine(
            product_id=product.id,
            product_name=product.name,
            sku=product.sku,
            quantity=qty,
            unit_price=product.base_price,
            effective_unit_price=unit,
            discount_percent=discount_percent(product, qty),
            line_subtotal=unit * qty,
        )

    @staticmethod
    def _to_document(quote: Quote, company: CompanyInfo) -> QuoteDocument:
        return QuoteDocument(
            header=QuoteHeaderDTO(
                company_name=company.company_name,
                contact_name=company.contact_name,
                email=company.email,
                phone=company.phone,
                tax_id=company.tax_id,
                address=company.address,
            ),
            rows=[
                QuoteRowDTO(
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=str(line.unit_price),
                    discount=f"{line.discount_percent:.1f}%",
                    subtotal=str(line.line_subtotal),
                )
                for line in quote.lines
            ],
            subtotal=str(quote.subtotal),
            discount=str(quote.discount),
            total=str(quote.total),
        )
