"""Composition root: wires concrete lookups to the domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from checkout.domain.repository.catalog import ProductLookup, PromotionLookup
from checkout.infrastructure.catalog.json_product_catalog import JsonProductCatalog
from checkout.infrastructure.catalog.sample_catalog import (
    sample_product_catalog,
    sample_promotion_catalog,
)
from checkout.infrastructure.config import Settings


def product_lookup(settings: Settings) -> ProductLookup:
    if settings.catalog_file is not None:
        return JsonProductCatalog(settings.catalog_file)
    return sample_product_catalog()


def promotion_lookup(settings: Settings) -> PromotionLookup:
    # Promotions are code, so they always come from the sample catalog
    return sample_promotion_catalog()
