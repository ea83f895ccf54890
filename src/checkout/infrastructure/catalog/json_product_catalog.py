"""JSON-file-backed implementation of ProductLookup.

The file holds a JSON array of ``{"sku", "name", "price"}`` records.
Prices are read as strings or numbers and coerced to Decimal.  The
catalog is read-only; the file is re-read on every lookup.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.product import Product
from checkout.domain.repository.catalog import ProductLookup

logger = logging.getLogger(__name__)


class JsonProductCatalog(ProductLookup):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductLookup interface ----------------------------------------------

    async def fetch_product(self, sku: str) -> Product | None:
        return self._load().get(sku)

    async def list_all(self) -> list[Product]:
        return list(self._load().values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ValidationError(
                f"Product catalog file not found: {self._file_path}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Product catalog file {self._file_path} is not valid JSON: {exc}"
            ) from exc

        if not isinstance(raw, list):
            raise ValidationError(
                f"Product catalog file {self._file_path} must hold a JSON array, "
                f"got {type(raw).__name__}"
            )

        products: dict[str, Product] = {}
        for item in raw:
            if not isinstance(item, dict):
                raise ValidationError(
                    f"Product record in {self._file_path} must be an object, "
                    f"got {type(item).__name__}"
                )
            try:
                product = Product.create(
                    sku=item["sku"], name=item["name"], price=item["price"]
                )
            except KeyError as exc:
                raise ValidationError(
                    f"Product record in {self._file_path} is missing {exc}"
                ) from exc
            except TypeError as exc:
                raise ValidationError(
                    f"Malformed product record in {self._file_path}: {item!r}"
                ) from exc
            if product.sku in products:
                raise ValidationError(
                    f"Duplicate SKU '{product.sku}' in {self._file_path}"
                )
            products[product.sku] = product
        logger.debug("Loaded %d product(s) from %s", len(products), self._file_path)
        return products
