"""Dict-backed catalog lookups."""

from __future__ import annotations

from checkout.domain.model.product import Product
from checkout.domain.model.promotion import Promotion
from checkout.domain.repository.catalog import ProductLookup, PromotionLookup


class InMemoryProductCatalog(ProductLookup):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.sku] = p

    async def fetch_product(self, sku: str) -> Product | None:
        return self._store.get(sku)

    async def list_all(self) -> list[Product]:
        return list(self._store.values())


class InMemoryPromotionCatalog(PromotionLookup):

    def __init__(self, promotions: list[Promotion] | None = None) -> None:
        self._store: dict[str, list[Promotion]] = {}
        for promo in promotions or []:
            self._store.setdefault(promo.sku, []).append(promo)

    async def fetch_promotions(self, sku: str) -> list[Promotion] | None:
        promos = self._store.get(sku)
        if not promos:
            return None
        return list(promos)

    async def list_all(self) -> list[Promotion]:
        return [promo for promos in self._store.values() for promo in promos]
