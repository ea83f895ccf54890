"""Sample products and promotions used by the demo and the default CLI.

Every rule here is self-gating: when its condition is not met it
returns the plain ``price * quantity`` total.
"""

from __future__ import annotations

import uuid
from decimal import Decimal
from typing import Sequence

from checkout.domain.model.product import Product
from checkout.domain.model.promotion import PricedItem, Promotion
from checkout.infrastructure.catalog.in_memory_catalog import (
    InMemoryProductCatalog,
    InMemoryPromotionCatalog,
)

SAMPLE_PRODUCTS = [
    Product.create("ipd", "Super iPad", "549.99"),
    Product.create("mbp", "MacBook Pro", "1399.99"),
    Product.create("atv", "Apple TV", "109.50"),
    Product.create("vga", "VGA adapter", "30.00"),
    Product.create("del", "Dell Laptop", "300.00"),
]

IPAD_BULK_THRESHOLD = 4
IPAD_BULK_PRICE = Decimal("499.99")


def three_for_two(current: PricedItem, siblings: Sequence[PricedItem]) -> Decimal:
    """Every full group of three is charged as two."""
    if current.quantity < 3:
        return current.full_price
    groups, remainder = divmod(current.quantity, 3)
    return current.price * (groups * 2 + remainder)


def ipad_bulk_discount(current: PricedItem, siblings: Sequence[PricedItem]) -> Decimal:
    """Unit price drops to 499.99 when more than four are bought."""
    if current.quantity <= IPAD_BULK_THRESHOLD:
        return current.full_price
    return IPAD_BULK_PRICE * current.quantity


def vga_free_with_macbook(current: PricedItem, siblings: Sequence[PricedItem]) -> Decimal:
    """One VGA adapter is free for each MacBook Pro in the cart."""
    macbooks = sum(item.quantity for item in siblings if item.sku == "mbp")
    free = min(macbooks, current.quantity)
    return (current.quantity - free) * current.price


SAMPLE_PROMOTIONS = [
    Promotion(
        id=str(uuid.uuid4()),
        sku="atv",
        description=(
            "3 for 2 deal on Apple TVs: buy 3 Apple TVs and pay the price of 2"
        ),
        rule=three_for_two,
    ),
    Promotion(
        id=str(uuid.uuid4()),
        sku="ipd",
        description=(
            "Bulk discount on Super iPad: the price drops to $499.99 each "
            "when buying more than 4"
        ),
        rule=ipad_bulk_discount,
    ),
    Promotion(
        id=str(uuid.uuid4()),
        sku="vga",
        description="A free VGA adapter bundled with every MacBook Pro sold",
        rule=vga_free_with_macbook,
    ),
]


def sample_product_catalog() -> InMemoryProductCatalog:
    return InMemoryProductCatalog(SAMPLE_PRODUCTS)


def sample_promotion_catalog() -> InMemoryPromotionCatalog:
    return InMemoryPromotionCatalog(SAMPLE_PROMOTIONS)
