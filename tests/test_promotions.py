"""Tests for promotion rules."""
from decimal import Decimal

import pytest

from pricing_engine.errors import ValidationError
from pricing_engine.promotions import GetOneFree, NoPromotion, Package, Threshold, make_promotion


def test_no_promotion_never_discounts():
    assert NoPromotion().discount_for(Decimal("10"), 50) == 0


def test_get_one_free_every_nth_unit():
    promotion = GetOneFree(3)
    assert promotion.discount_for(Decimal("10"), 9) == Decimal("30")
    assert promotion.discount_for(Decimal("10"), 8) == Decimal("20")
    assert promotion.discount_for(Decimal("10"), 2) == 0


def test_get_one_free_requires_positive_count():
    with pytest.raises(ValidationError):
        GetOneFree(0)


def test_package_only_complete_packages():
    promotion = Package(3, Decimal("50"))
    assert promotion.discount_for(Decimal("10"), 7) == Decimal("30")
    assert promotion.discount_for(Decimal("10"), 2) == 0


def test_threshold_discounts_every_unit_after_threshold():
    promotion = Threshold(2, Decimal("10"))
    assert promotion.discount_for(Decimal("10"), 5) == Decimal("3")
    assert promotion.discount_for(Decimal("10"), 2) == 0
    assert promotion.discount_for(Decimal("10"), 0) == 0


def test_decimal_arithmetic_is_exact():
    """0.1 * 3 must not drift the way binary floats do."""
    promotion = Threshold(0, Decimal("100"))
    assert promotion.discount_for(Decimal("0.10"), 3) == Decimal("0.30")


@pytest.mark.parametrize(
    "spec, expected",
    [
        (None, NoPromotion()),
        ({"none": None}, NoPromotion()),
        ({"get_one_free": 4}, GetOneFree(4)),
        ({"package": {3: 20}}, Package(3, Decimal("20"))),
        ({"threshold": {10: "12.5"}}, Threshold(10, Decimal("12.5"))),
    ],
)
def test_make_promotion_from_spec(spec, expected):
    assert make_promotion(spec) == expected


@pytest.mark.parametrize(
    "spec",
    [
        {"bogus": 1},
        {"get_one_free": "three"},
        {"package": {3: 20, 4: 30}},
        {"threshold": 5},
        {"get_one_free": 2, "package": {3: 20}},
    ],
)
def test_make_promotion_rejects_bad_spec(spec):
    with pytest.raises(ValidationError):
        make_promotion(spec)
