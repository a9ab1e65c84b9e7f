"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.service.price_breaks import discount_percent


class ShowCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self) -> CartDTO:
        return CartDTO(
            items=[
                CartLineDTO(
                    product_id=item.product_id,
                    product_name=item.product.name,
                    quantity=item.quantity,
                    stock=item.product.stock,
                    unit_price=str(item.unit_price),
                    discount=f"{discount_percent(item.product, item.quantity):.1f}%",
                    line_total=str(item.line_total),
                )
                for item in self._cart_store.items
            ],
            total_items=self._cart_store.total_items,
            grand_total=str(self._cart_store.grand_total),
        )
