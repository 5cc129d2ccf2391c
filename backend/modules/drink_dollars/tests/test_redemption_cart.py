# backend/modules/drink_dollars/tests/test_redemption_cart.py

"""
Tests for the in-memory redemption cart.
"""

import random
from decimal import Decimal

import pytest

from modules.venues.schemas import PricedItem
from ..exceptions import InsufficientBalance
from ..services import RedemptionCart


def price_list(*prices):
    return {
        index: PricedItem(id=index, name=f"Item {index}", unit_price=Decimal(price))
        for index, price in enumerate(prices, start=1)
    }


class TestRedemptionCart:

    def test_adds_until_balance_is_spent(self):
        # 100 balance, items A=30 and B=50
        cart = RedemptionCart(price_list("30", "50"), Decimal("100"))

        assert cart.add_item(1) is True
        assert cart.add_item(2) is True
        assert cart.total() == Decimal("80")

        assert cart.add_item(1) is False
        assert cart.total() == Decimal("80")
        assert cart.rejected_item_ids == [1]

        cart.remove_item(2)
        assert cart.total() == Decimal("30")
        assert cart.add_item(1) is True
        assert cart.total() == Decimal("60")

    def test_exact_balance_is_allowed(self):
        cart = RedemptionCart(price_list("50"), Decimal("100"))

        assert cart.add_item(1) and cart.add_item(1)
        assert cart.remaining() == Decimal("0")
        assert cart.add_item(1) is False

    def test_rejected_units_fail_coverage_check(self):
        # 10 balance, three units at 4
        cart = RedemptionCart(price_list("4"), Decimal("10"))
        for _ in range(3):
            cart.add_item(1)

        assert cart.total() == Decimal("8")
        assert cart.requested_total() == Decimal("12")
        with pytest.raises(InsufficientBalance) as exc_info:
            cart.ensure_covered()
        assert exc_info.value.available == Decimal("10")
        assert exc_info.value.requested == Decimal("12")

    def test_fully_covered_cart_passes_coverage_check(self):
        cart = RedemptionCart(price_list("4"), Decimal("10"))
        cart.add_item(1)

        cart.ensure_covered()
        assert cart.requested_total() == cart.total()

    def test_unknown_item_raises(self):
        cart = RedemptionCart(price_list("10"), Decimal("100"))

        with pytest.raises(ValueError):
            cart.add_item(99)

    def test_remove_unknown_or_absent_item_is_noop(self):
        cart = RedemptionCart(price_list("10"), Decimal("100"))
        cart.remove_item(1)
        cart.remove_item(42)

        assert cart.is_empty()
        assert cart.finalize() == ()

    def test_finalize_is_immutable_snapshot(self):
        cart = RedemptionCart(price_list("10", "20"), Decimal("100"))
        cart.add_item(2)
        cart.add_item(1)
        cart.add_item(1)

        lines = cart.finalize()
        cart.remove_item(1)

        assert isinstance(lines, tuple)
        assert [(l.item_id, l.quantity, l.unit_price) for l in lines] == [
            (1, 2, Decimal("10")),
            (2, 1, Decimal("20")),
        ]
        assert lines[0].amount == Decimal("20")

    def test_total_matches_selection_and_never_exceeds_balance(self):
        rng = random.Random(7)
        prices = price_list("3.50", "7", "12.25", "20")
        balance = Decimal("45")
        cart = RedemptionCart(prices, balance)

        for _ in range(500):
            item_id = rng.choice(list(prices))
            if rng.random() < 0.6:
                cart.add_item(item_id)
            else:
                cart.remove_item(item_id)

            expected = sum(
                (prices[i].unit_price * cart.quantity_of(i) for i in prices), Decimal("0")
            )
            assert cart.total() == expected
            assert cart.total() <= balance
