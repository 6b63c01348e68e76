from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping, Union

from pricing_engine.errors import ValidationError
from pricing_engine.promotions import HUNDRED, to_decimal


@dataclass(frozen=True, slots=True)
class NoCoupon:
    kind = "none"

    name: str = "NONE"

    def discount_for(self, subtotal: Decimal) -> Decimal:
        return Decimal("0")


@dataclass(frozen=True, slots=True)
class PercentCoupon:
    kind = "percent"

    name: str
    percent: Decimal

    def discount_for(self, subtotal: Decimal) -> Decimal:
        return subtotal * self.percent / HUNDRED


@dataclass(frozen=True, slots=True)
class AmountCoupon:
    """Fixed amount off, never more than the subtotal itself."""

    kind = "amount"

    name: str
    amount: Decimal

    def discount_for(self, subtotal: Decimal) -> Decimal:
        return min(subtotal, self.amount)


Coupon = Union[NoCoupon, PercentCoupon, AmountCoupon]

COUPON_BUILDERS: Dict[str, Callable[[str, Any], Coupon]] = {
    "percent": lambda name, value: PercentCoupon(name, to_decimal(value, "coupon percent")),
    "amount": lambda name, value: AmountCoupon(name, to_decimal(value, "coupon amount")),
}


def make_coupon(name: str, spec: Mapping[str, Any]) -> Coupon:
    if not isinstance(spec, Mapping) or len(spec) != 1:
        raise ValidationError(f"Coupon spec must have exactly one entry, got {spec!r}")

    tag, value = next(iter(spec.items()))
    builder = COUPON_BUILDERS.get(tag)
    if builder is None:
        raise ValidationError(f"Unknown coupon type {tag!r}")
    return builder(name, value)
