"""CartItem entity: one SKU's state inside a cart."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Sequence

from checkout.domain.exceptions import InvalidQuantity, SelfReferenceError
from checkout.domain.model.product import Product
from checkout.domain.model.promotion import PricedItem, Promotion

logger = logging.getLogger(__name__)


class CartItem:
    """A product, its quantity and the promotions fetched alongside it.

    Invariants:
    - ``quantity`` is never negative, on construction or any later mutation
    - ``promotions`` are fixed at creation; pricing never re-fetches them

    The item holds no reference to the cart that owns it.  Sibling state
    is passed in on every ``calculate_price`` call.
    """

    def __init__(
        self,
        id: str,
        product: Product,
        quantity: int,
        promotions: Iterable[Promotion] | None = None,
    ) -> None:
        self.id = id
        self.product = product
        self.promotions: tuple[Promotion, ...] = tuple(promotions or ())
        self._quantity = 0
        self.set_quantity(quantity)

    @property
    def quantity(self) -> int:
        return self._quantity

    def set_quantity(self, quantity: int) -> None:
        """Replace the quantity.

        Raises InvalidQuantity (leaving the current quantity untouched) if
        *quantity* is not a non-negative integer.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantity(
                f"Cannot set quantity of '{self.id}': expected an integer, "
                f"got {type(quantity).__name__}"
            )
        if quantity < 0:
            raise InvalidQuantity(
                f"Cannot set quantity of '{self.id}' to {quantity}: "
                f"quantity cannot be less than zero"
            )
        self._quantity = quantity

    def snapshot(self) -> PricedItem:
        return PricedItem.of(self.product, self._quantity)

    def calculate_price(self, siblings: Sequence[CartItem]) -> Decimal:
        """Price this item given the *other* items in the cart.

        Without promotions the result is ``price * quantity``.  Otherwise
        every promotion is evaluated and the lowest candidate wins.
        """
        if any(sibling.id == self.id for sibling in siblings):
            raise SelfReferenceError(
                f"Cannot price '{self.id}': sibling items must not include "
                f"the item itself"
            )

        if not self.promotions:
            return (self.product.price * self._quantity).amount

        current = self.snapshot()
        sibling_view = tuple(sibling.snapshot() for sibling in siblings)
        candidates = [
            promotion.apply(current, sibling_view) for promotion in self.promotions
        ]
        best = min(candidates)
        logger.debug(
            "Priced %s x%d at %s (candidates: %s)",
            self.id, self._quantity, best, ", ".join(str(c) for c in candidates),
        )
        return best

    def __repr__(self) -> str:
        return (
            f"CartItem(id={self.id!r}, quantity={self._quantity}, "
            f"promotions={len(self.promotions)})"
        )
