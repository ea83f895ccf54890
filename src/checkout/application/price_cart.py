"""Application service: Price Cart use case.

Scans a list of SKUs into a fresh cart and returns the receipt.
"""

from __future__ import annotations

import uuid

from checkout.application.dto import ReceiptDTO, ReceiptLineDTO
from checkout.domain.model.cart import Cart
from checkout.domain.model.value_objects import format_amount
from checkout.domain.repository.catalog import ProductLookup, PromotionLookup


class PriceCartHandler:

    def __init__(
        self,
        product_lookup: ProductLookup,
        promotion_lookup: PromotionLookup,
    ) -> None:
        self._product_lookup = product_lookup
        self._promotion_lookup = promotion_lookup

    async def handle(self, skus: list[str]) -> ReceiptDTO:
        """Scan *skus* in order and price the resulting cart.

        Raises ProductNotFound for the first SKU the catalog cannot resolve.
        """
        cart = Cart(
            id=str(uuid.uuid4()),
            products=self._product_lookup,
            promotions=self._promotion_lookup,
        )
        for sku in skus:
            await cart.scan(sku)
        return self._to_dto(cart)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(cart: Cart) -> ReceiptDTO:
        total = cart.total_cost()
        return ReceiptDTO(
            cart_id=cart.id,
            lines=[
                ReceiptLineDTO(
                    sku=line.id,
                    product_name=line.product.name,
                    quantity=line.quantity,
                    unit_price=str(line.product.price),
                    promotions=[promo.description for promo in line.promotions],
                    cost=format_amount(line.cost),
                )
                for line in cart.lines()
            ],
            total=format_amount(total),
            total_amount=total,
        )
