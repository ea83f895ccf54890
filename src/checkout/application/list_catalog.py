"""Application service: List Catalog use case (query)."""

from __future__ import annotations

import asyncio

from checkout.application.dto import CatalogEntryDTO
from checkout.domain.repository.catalog import ProductLookup, PromotionLookup


class ListCatalogHandler:

    def __init__(
        self,
        product_lookup: ProductLookup,
        promotion_lookup: PromotionLookup,
    ) -> None:
        self._product_lookup = product_lookup
        self._promotion_lookup = promotion_lookup

    async def handle(self) -> list[CatalogEntryDTO]:
        products, promotions = await asyncio.gather(
            self._product_lookup.list_all(),
            self._promotion_lookup.list_all(),
        )
        return [
            CatalogEntryDTO(
                sku=product.sku,
                name=product.name,
                price=str(product.price),
                promotions=[
                    promo.description for promo in promotions if promo.sku == product.sku
                ],
            )
            for product in products
        ]
