"""Abstract catalog lookups consumed by the Cart.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (sample data, JSON file)
live in the infrastructure layer.

Lookups never raise for unknown SKUs: a missing product resolves to
None and a SKU without promotions resolves to None or an empty list.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from checkout.domain.model.product import Product
from checkout.domain.model.promotion import Promotion


class ProductLookup(ABC):

    @abstractmethod
    async def fetch_product(self, sku: str) -> Product | None:
        """Return the product for a SKU, or None if the catalog lacks it."""

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product in the catalog."""


class PromotionLookup(ABC):

    @abstractmethod
    async def fetch_promotions(self, sku: str) -> list[Promotion] | None:
        """Return the promotions attached to a SKU, or None if there are none."""

    @abstractmethod
    async def list_all(self) -> list[Promotion]:
        """Return every promotion in the catalog."""
