"""Cart aggregate: the core of the pricing engine.

The Cart owns its items, at most one per SKU, and is the only place
where items are created, mutated and removed.  Every operation either
fully succeeds or raises before touching the item map.

A cart is meant to be driven by one caller at a time; it does no
locking of its own.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterator

from checkout.domain.exceptions import DuplicateItem, ItemNotFound, ProductNotFound
from checkout.domain.model.cart_item import CartItem
from checkout.domain.model.product import Product
from checkout.domain.model.promotion import Promotion
from checkout.domain.repository.catalog import ProductLookup, PromotionLookup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLine:
    """Snapshot of one cart item and its computed cost."""

    id: str
    product: Product
    promotions: tuple[Promotion, ...]
    quantity: int
    cost: Decimal


class Cart:
    """Aggregate root for a shopping cart.

    Items are kept in insertion order, which is also the order of the
    receipt lines.
    """

    def __init__(
        self,
        id: str,
        products: ProductLookup,
        promotions: PromotionLookup,
    ) -> None:
        self.id = id
        self._products = products
        self._promotions = promotions
        self._items: dict[str, CartItem] = {}

    # --- Mutations ------------------------------------------------------------

    async def add(self, sku: str, quantity: int) -> None:
        """Add a new SKU to the cart.

        The product and its promotions are fetched concurrently.  Raises
        DuplicateItem if the SKU is already present and ProductNotFound if
        the catalog cannot resolve it.
        """
        if sku in self._items:
            raise DuplicateItem(
                f"Cannot add '{sku}': item already in the cart "
                f"(use update to change the quantity or delete to remove it)"
            )

        product, promotions = await asyncio.gather(
            self._products.fetch_product(sku),
            self._promotions.fetch_promotions(sku),
        )
        if product is None:
            logger.info("Cart %s: product lookup found nothing for '%s'", self.id, sku)
            raise ProductNotFound(f"Cannot add '{sku}': product does not exist")

        # Build first so an invalid quantity leaves the map untouched
        item = CartItem(id=sku, product=product, quantity=quantity, promotions=promotions)
        self._items[sku] = item
        logger.debug(
            "Cart %s: added %s x%d with %d promotion(s)",
            self.id, sku, quantity, len(item.promotions),
        )

    def delete(self, sku: str) -> None:
        """Remove a SKU from the cart; absent SKUs are ignored."""
        if self._items.pop(sku, None) is not None:
            logger.debug("Cart %s: deleted %s", self.id, sku)

    def update(self, sku: str, quantity: int) -> None:
        """Set the quantity of a SKU already in the cart."""
        if sku not in self._items:
            raise ItemNotFound(
                f"Cannot update '{sku}': item is not in the cart (use add first)"
            )
        self._items[sku].set_quantity(quantity)
        logger.debug("Cart %s: %s quantity set to %d", self.id, sku, quantity)

    async def scan(self, sku: str) -> None:
        """Add one unit of a SKU, adding the item if needed."""
        if sku not in self._items:
            await self.add(sku, 1)
        else:
            self.update(sku, self._items[sku].quantity + 1)

    def unscan(self, sku: str) -> None:
        """Remove one unit of a SKU, deleting the item once it reaches zero."""
        if sku not in self._items:
            return
        if self._items[sku].quantity > 0:
            self.update(sku, self._items[sku].quantity - 1)
        if self._items[sku].quantity <= 0:
            self.delete(sku)

    # --- Queries --------------------------------------------------------------

    def get_item(self, sku: str) -> CartItem:
        """Return the live item for a SKU.

        Callers must go through the cart's mutation methods rather than
        changing the item directly.
        """
        if sku not in self._items:
            raise ItemNotFound(f"Cannot get '{sku}': item is not in the cart")
        return self._items[sku]

    def in_cart(self, sku: str) -> bool:
        return sku in self._items

    def total_cost(self) -> Decimal:
        """Sum of every item's price, recomputed on each call."""
        return sum((self._price(item) for item in self._items.values()), Decimal("0"))

    def lines(self) -> list[CartLine]:
        return [
            CartLine(
                id=sku,
                product=item.product,
                promotions=item.promotions,
                quantity=item.quantity,
                cost=self._price(item),
            )
            for sku, item in self._items.items()
        ]

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Receipt records keyed by SKU, in insertion order."""
        return {
            line.id: {
                "id": line.id,
                "product": line.product,
                "promotions": list(line.promotions),
                "quantity": line.quantity,
                "cost": line.cost,
            }
            for line in self.lines()
        }

    def __contains__(self, sku: object) -> bool:
        return sku in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CartItem]:
        return iter(list(self._items.values()))

    # --- Internal helpers -----------------------------------------------------

    def _price(self, item: CartItem) -> Decimal:
        siblings = [other for other in self._items.values() if other.id != item.id]
        return item.calculate_price(siblings)
