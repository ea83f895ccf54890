"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ReceiptLineDTO:
    """Output: a single priced cart line."""

    sku: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$109.50"
    promotions: list[str]  # descriptions
    cost: str


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a priced cart."""

    cart_id: str
    lines: list[ReceiptLineDTO]
    total: str
    total_amount: Decimal


@dataclass(frozen=True)
class ScenarioResultDTO:
    """Output: one demonstration scenario and whether it hit its target."""

    description: str
    skus: list[str]
    expected_total: Decimal
    receipt: ReceiptDTO

    @property
    def as_expected(self) -> bool:
        return self.receipt.total_amount == self.expected_total


@dataclass(frozen=True)
class CatalogEntryDTO:
    """Output: a catalog product with its promotion descriptions."""

    sku: str
    name: str
    price: str
    promotions: list[str]
