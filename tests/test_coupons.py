"""Tests for coupon rules."""
from decimal import Decimal

import pytest

from pricing_engine.coupons import AmountCoupon, NoCoupon, PercentCoupon, make_coupon
from pricing_engine.errors import ValidationError


def test_no_coupon():
    coupon = NoCoupon()
    assert coupon.name == "NONE"
    assert coupon.discount_for(Decimal("12.34")) == 0


def test_percent_coupon():
    coupon = PercentCoupon("TEN", Decimal("10"))
    assert coupon.discount_for(Decimal("25.00")) == Decimal("2.5")


def test_amount_coupon_is_capped_at_subtotal():
    coupon = AmountCoupon("FIVE", Decimal("5"))
    assert coupon.discount_for(Decimal("3")) == Decimal("3")
    assert coupon.discount_for(Decimal("10")) == Decimal("5")


def test_make_coupon_from_spec():
    assert make_coupon("TEN", {"percent": 10}) == PercentCoupon("TEN", Decimal("10"))
    assert make_coupon("FIVE", {"amount": "5.00"}) == AmountCoupon("FIVE", Decimal("5.00"))


@pytest.mark.parametrize("spec", [{"free": 1}, {"amount": "lots"}, {}])
def test_make_coupon_rejects_bad_spec(spec):
    with pytest.raises(ValidationError):
        make_coupon("BAD", spec)
