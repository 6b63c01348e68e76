from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from pricing_engine.config import config
from pricing_engine.errors import ValidationError
from pricing_engine.promotions import NoPromotion, Promotion, to_decimal


@dataclass(frozen=True, slots=True)
class Product:
    name: str
    price: Decimal
    promotion: Promotion = field(default_factory=NoPromotion)

    def __post_init__(self) -> None:
        if len(self.name) > config.MAX_NAME_LENGTH:
            raise ValidationError(f"Product name must be at most {config.MAX_NAME_LENGTH} characters: {self.name!r}")

        price = to_decimal(self.price, "price")
        if not config.MIN_PRICE <= price <= config.MAX_PRICE:
            raise ValidationError(f"Price must be between {config.MIN_PRICE} and {config.MAX_PRICE}, got {price}")
        object.__setattr__(self, "price", price)

    def price_for(self, count: int) -> Decimal:
        return self.price_without_discount_for(count) - self.discount_for(count)

    def price_without_discount_for(self, count: int) -> Decimal:
        return self.price * count

    def discount_for(self, count: int) -> Decimal:
        return self.promotion.discount_for(self.price, count)


@dataclass(slots=True)
class CartItem:
    """
    One cart line. The product is borrowed from the inventory, only the
    quantity belongs to the line.
    """

    product: Product
    quantity: int = 0

    def __post_init__(self) -> None:
        self._check_quantity(self.quantity)

    def increase(self, count: int) -> None:
        new_quantity = self.quantity + count
        self._check_quantity(new_quantity)
        self.quantity = new_quantity

    def _check_quantity(self, quantity: int) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(f"Quantity of {self.product.name} must be an integer, got {quantity!r}")
        if not 0 <= quantity < config.LINE_QUANTITY_CEILING:
            raise ValidationError(
                f"Quantity of {self.product.name} must stay between 0 and "
                f"{config.LINE_QUANTITY_CEILING - 1}, got {quantity}"
            )

    @property
    def price(self) -> Decimal:
        return self.product.price_for(self.quantity)

    @property
    def price_without_discount(self) -> Decimal:
        return self.product.price_without_discount_for(self.quantity)

    @property
    def discount(self) -> Decimal:
        return self.product.discount_for(self.quantity)

    @property
    def discounted(self) -> bool:
        return self.discount != 0
