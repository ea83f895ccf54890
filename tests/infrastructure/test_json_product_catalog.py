"""Tests for the JSON-file-backed product lookup."""

import json
from decimal import Decimal

import pytest

from checkout.domain.exceptions import ValidationError
from checkout.infrastructure.catalog.json_product_catalog import JsonProductCatalog


def _write(tmp_path, records):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


class TestJsonProductCatalog:

    @pytest.mark.asyncio
    async def test_fetch_product(self, tmp_path):
        path = _write(tmp_path, [{"sku": "atv", "name": "Apple TV", "price": "109.50"}])
        product = await JsonProductCatalog(path).fetch_product("atv")
        assert product.price.amount == Decimal("109.50")

    @pytest.mark.asyncio
    async def test_numeric_price(self, tmp_path):
        path = _write(tmp_path, [{"sku": "vga", "name": "VGA adapter", "price": 30}])
        product = await JsonProductCatalog(path).fetch_product("vga")
        assert product.price.amount == Decimal("30")

    @pytest.mark.asyncio
    async def test_unknown_sku(self, tmp_path):
        path = _write(tmp_path, [])
        assert await JsonProductCatalog(path).fetch_product("atv") is None

    @pytest.mark.asyncio
    async def test_list_all(self, tmp_path):
        path = _write(tmp_path, [
            {"sku": "atv", "name": "Apple TV", "price": "109.50"},
            {"sku": "del", "name": "Dell Laptop", "price": "300.00"},
        ])
        products = await JsonProductCatalog(path).list_all()
        assert [p.sku for p in products] == ["atv", "del"]

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        catalog = JsonProductCatalog(tmp_path / "missing.json")
        with pytest.raises(ValidationError, match="not found"):
            await catalog.fetch_product("atv")

    @pytest.mark.asyncio
    async def test_missing_field(self, tmp_path):
        path = _write(tmp_path, [{"sku": "atv", "name": "Apple TV"}])
        with pytest.raises(ValidationError, match="missing 'price'"):
            await JsonProductCatalog(path).fetch_product("atv")

    @pytest.mark.asyncio
    async def test_negative_price(self, tmp_path):
        path = _write(tmp_path, [{"sku": "atv", "name": "Apple TV", "price": "-1"}])
        with pytest.raises(ValidationError, match="cannot be negative"):
            await JsonProductCatalog(path).fetch_product("atv")

    @pytest.mark.asyncio
    async def test_object_root_rejected(self, tmp_path):
        path = _write(tmp_path, {"sku": "atv"})
        with pytest.raises(ValidationError, match="must hold a JSON array"):
            await JsonProductCatalog(path).fetch_product("atv")

    @pytest.mark.asyncio
    async def test_non_object_record_rejected(self, tmp_path):
        path = _write(tmp_path, ["atv"])
        with pytest.raises(ValidationError, match="must be an object"):
            await JsonProductCatalog(path).list_all()

    @pytest.mark.asyncio
    async def test_duplicate_sku_rejected(self, tmp_path):
        path = _write(tmp_path, [
            {"sku": "atv", "name": "Apple TV", "price": "109.50"},
            {"sku": "atv", "name": "Apple TV 4K", "price": "129.00"},
        ])
        with pytest.raises(ValidationError, match="Duplicate SKU 'atv'"):
            await JsonProductCatalog(path).fetch_product("atv")
