"""Product value as served by the catalog.

Products are created once by a catalog lookup and never mutated by the
cart; a cart item keeps a reference to the product it was created with.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from checkout.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog, keyed by its SKU.

    The price is a ``Money`` so a negative price can never be constructed.
    """

    sku: str
    name: str
    price: Money

    @property
    def id(self) -> str:
        return self.sku

    @staticmethod
    def create(sku: str, name: str, price: str | float | int | Decimal) -> Product:
        """Build a product, coercing *price* to Money."""
        return Product(sku=sku, name=name, price=Money.of(price))

    def __str__(self) -> str:
        return f"SKU: {self.sku} | Name: {self.name} | Price: {self.price.amount}"
