"""Unit tests for the CartItem entity and its pricing."""

import uuid
from decimal import Decimal

import pytest

from checkout.domain.exceptions import InvalidQuantity, SelfReferenceError
from checkout.domain.model.cart_item import CartItem
from checkout.domain.model.product import Product
from checkout.domain.model.promotion import Promotion
from tests.fakes import percent_off_from


MAC = Product.create("mac", "MacBook Pro", "1000")
MAC_PROMOS = [
    percent_off_from("mac", 3, "3", "3-off-mac"),
    percent_off_from("mac", 5, "10", "10-off-mac"),
]

HOMEPOD = Product.create("homepod", "Homepod", "100")


def _half_off_with_two_macs(current, siblings):
    macs = [item for item in siblings if item.sku == "mac"]
    if macs and macs[0].quantity >= 2:
        return current.full_price * Decimal("0.5")
    return current.full_price


HOMEPOD_PROMOS = [
    Promotion(
        id=str(uuid.uuid4()),
        sku="homepod",
        description="50% off with at least 2 MacBooks",
        rule=_half_off_with_two_macs,
    ),
    percent_off_from("homepod", 10, "75", "75-off-homepod"),
]


def _make_item(product=MAC, qty=1, promotions=None) -> CartItem:
    return CartItem(id=product.sku, product=product, quantity=qty, promotions=promotions)


class TestCartItemQuantity:

    def test_initial_quantity(self):
        assert _make_item(qty=3).quantity == 3

    def test_quantity_is_updatable(self):
        item = _make_item(qty=3)
        item.set_quantity(5)
        assert item.quantity == 5

    @pytest.mark.parametrize("qty", [0, 1, 7, 1000])
    def test_non_negative_quantities_round_trip(self, qty):
        item = _make_item()
        item.set_quantity(qty)
        assert item.quantity == qty

    def test_negative_quantity_rejected_and_prior_kept(self):
        item = _make_item(qty=3)
        with pytest.raises(InvalidQuantity, match="cannot be less than zero"):
            item.set_quantity(-1)
        assert item.quantity == 3

    def test_negative_initial_quantity_rejected(self):
        with pytest.raises(InvalidQuantity, match="'mac'"):
            _make_item(qty=-2)

    def test_non_integer_quantity_rejected(self):
        item = _make_item(qty=1)
        with pytest.raises(InvalidQuantity, match="expected an integer"):
            item.set_quantity(1.5)
        assert item.quantity == 1

    def test_promotions_default_to_empty(self):
        assert _make_item().promotions == ()


class TestCartItemPricingWithoutPromotions:

    @pytest.mark.parametrize("qty", [0, 1, 3, 10])
    def test_price_times_quantity(self, qty):
        assert _make_item(qty=qty).calculate_price([]) == Decimal("1000") * qty

    def test_self_in_siblings_rejected(self):
        item = _make_item(qty=1)
        with pytest.raises(SelfReferenceError, match="'mac'"):
            item.calculate_price([item])

    def test_same_id_other_instance_rejected(self):
        item = _make_item(qty=1)
        twin = _make_item(qty=4)
        with pytest.raises(SelfReferenceError):
            item.calculate_price([twin])


class TestCartItemPricingWithPromotions:

    def test_single_promotion(self):
        item = _make_item(qty=2, promotions=[MAC_PROMOS[0]])
        assert item.calculate_price([]) == Decimal("2000")
        item.set_quantity(3)
        assert item.calculate_price([]) == Decimal("2910")

    def test_best_of_multiple_promotions(self):
        item = _make_item(qty=2, promotions=MAC_PROMOS)
        assert item.calculate_price([]) == Decimal("2000")
        item.set_quantity(4)
        assert item.calculate_price([]) == Decimal("3880")
        item.set_quantity(5)
        assert item.calculate_price([]) == Decimal("4500")

    @pytest.mark.parametrize("qty", range(0, 12))
    def test_discount_only_promotions_never_raise_price(self, qty):
        item = _make_item(qty=qty, promotions=MAC_PROMOS)
        assert item.calculate_price([]) <= Decimal("1000") * qty

    def test_pricing_is_idempotent(self):
        item = _make_item(qty=5, promotions=MAC_PROMOS)
        assert item.calculate_price([]) == item.calculate_price([])

    def test_pricing_does_not_mutate_siblings(self):
        mac = _make_item(qty=2, promotions=MAC_PROMOS)
        homepod = _make_item(HOMEPOD, qty=1, promotions=HOMEPOD_PROMOS)
        homepod.calculate_price([mac])
        assert mac.quantity == 2

    def test_cross_item_promotions(self):
        items = [
            _make_item(qty=4, promotions=MAC_PROMOS),
            _make_item(HOMEPOD, qty=2, promotions=HOMEPOD_PROMOS),
        ]

        def total():
            return sum(
                item.calculate_price([i for i in items if i.id != item.id])
                for item in items
            )

        assert total() == Decimal("3980")
        items[0].set_quantity(1)
        assert total() == Decimal("1200")
        items[1].set_quantity(15)
        assert total() == Decimal("1375")
