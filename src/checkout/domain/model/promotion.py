"""Promotions and the pricing rule contract.

A promotion wraps a single pricing rule.  A rule receives a snapshot of
the item being priced and snapshots of every *other* item in the cart,
and returns a candidate total for the item being priced.

Rules are self-gating: when their condition is not met they must return
the plain ``price * quantity`` total.  The cart item takes the minimum of
all candidates, so there is no separate "is applicable" check.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Sequence

from checkout.domain.model.product import Product


@dataclass(frozen=True)
class PricedItem:
    """Read-only view of a product and its quantity handed to pricing rules."""

    sku: str
    name: str
    price: Decimal
    quantity: int

    @property
    def full_price(self) -> Decimal:
        """Undiscounted total for this item."""
        return self.price * self.quantity

    @staticmethod
    def of(product: Product, quantity: int) -> PricedItem:
        return PricedItem(
            sku=product.sku,
            name=product.name,
            price=product.price.amount,
            quantity=quantity,
        )


PricingRule = Callable[[PricedItem, Sequence[PricedItem]], Decimal]


@dataclass(frozen=True)
class Promotion:
    """A pricing rule attached to one SKU."""

    id: str
    sku: str
    description: str
    rule: PricingRule

    def apply(self, current: PricedItem, siblings: Sequence[PricedItem]) -> Decimal:
        """Return this promotion's candidate total for *current*.

        Float results are converted through their shortest repr, so a rule
        returning ``5 * 499.99`` prices at exactly 2499.95.
        """
        result = self.rule(current, siblings)
        if isinstance(result, float):
            return Decimal(str(result))
        return Decimal(result)

    def __str__(self) -> str:
        return (
            f"Promotion => ID:{self.id} | Product SKU:{self.sku} "
            f"| Description:{self.description}"
        )
