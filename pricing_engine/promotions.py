from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Mapping, Tuple, Union

from pricing_engine.errors import ValidationError

HUNDRED = Decimal("100")


@dataclass(frozen=True, slots=True)
class NoPromotion:
    kind = "none"

    def discount_for(self, price: Decimal, count: int) -> Decimal:
        return Decimal("0")


@dataclass(frozen=True, slots=True)
class GetOneFree:
    """Every ``promotion_count``-th unit is free."""

    kind = "get_one_free"

    promotion_count: int

    def __post_init__(self) -> None:
        if self.promotion_count <= 0:
            raise ValidationError("get_one_free count must be > 0")

    def discount_for(self, price: Decimal, count: int) -> Decimal:
        return price * (count // self.promotion_count)


@dataclass(frozen=True, slots=True)
class Package:
    """``percent``% off every complete package of ``promotion_count`` units."""

    kind = "package"

    promotion_count: int
    percent: Decimal

    def __post_init__(self) -> None:
        if self.promotion_count <= 0:
            raise ValidationError("package size must be > 0")

    def discount_for(self, price: Decimal, count: int) -> Decimal:
        packages = count // self.promotion_count
        return price * self.promotion_count * packages * self.percent / HUNDRED


@dataclass(frozen=True, slots=True)
class Threshold:
    """``percent``% off every unit after the first ``threshold``."""

    kind = "threshold"

    threshold: int
    percent: Decimal

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise ValidationError("threshold must be >= 0")

    def discount_for(self, price: Decimal, count: int) -> Decimal:
        return price * max(count - self.threshold, 0) * self.percent / HUNDRED


Promotion = Union[NoPromotion, GetOneFree, Package, Threshold]


def to_decimal(value: Any, what: str) -> Decimal:
    # via str() so a float 0.1 becomes Decimal("0.1")
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{what} is not a number: {value!r}") from None
    if not number.is_finite():
        raise ValidationError(f"{what} must be finite, got {value!r}")
    return number


def _count_to_percent(value: Any, tag: str) -> Tuple[int, Decimal]:
    if not isinstance(value, Mapping) or len(value) != 1:
        raise ValidationError(f"{tag} expects a single {{count: percent}} pair, got {value!r}")
    count, percent = next(iter(value.items()))
    return _as_count(count, tag), to_decimal(percent, f"{tag} percent")


def _as_count(value: Any, tag: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{tag} count must be an integer, got {value!r}")
    return value


def _none(value: Any) -> Promotion:
    return NoPromotion()


def _get_one_free(value: Any) -> Promotion:
    return GetOneFree(_as_count(value, "get_one_free"))


def _package(value: Any) -> Promotion:
    return Package(*_count_to_percent(value, "package"))


def _threshold(value: Any) -> Promotion:
    return Threshold(*_count_to_percent(value, "threshold"))


PROMOTION_BUILDERS: Dict[str, Callable[[Any], Promotion]] = {
    "none": _none,
    "get_one_free": _get_one_free,
    "package": _package,
    "threshold": _threshold,
}


def make_promotion(spec: Mapping[str, Any] | None = None) -> Promotion:
    """
    Build a promotion from a one-entry mapping such as ``{"get_one_free": 3}``
    or ``{"package": {3: 20}}``. ``None`` means no promotion.
    """
    if spec is None:
        return NoPromotion()
    if not isinstance(spec, Mapping) or len(spec) != 1:
        raise ValidationError(f"Promotion spec must have exactly one entry, got {spec!r}")

    tag, value = next(iter(spec.items()))
    builder = PROMOTION_BUILDERS.get(tag)
    if builder is None:
        raise ValidationError(f"Unknown promotion type {tag!r}")
    return builder(value)
