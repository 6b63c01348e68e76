from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Dict, List, Optional

from pricing_engine.coupons import Coupon, NoCoupon
from pricing_engine.errors import ValidationError
from pricing_engine.invoice import InvoiceMaker
from pricing_engine.models import CartItem

if TYPE_CHECKING:
    from pricing_engine.inventory import Inventory

logger = logging.getLogger(__name__)


class Cart:
    def __init__(self, inventory: Inventory) -> None:
        self.inventory = inventory
        self.used_coupon: Coupon = NoCoupon()
        # dicts keep insertion order, which is the order lines are invoiced in
        self._items: Dict[str, CartItem] = {}

    def items(self) -> List[CartItem]:
        return list(self._items.values())

    def add(self, product_name: str, count: int = 1) -> CartItem:
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValidationError(f"Count must be an integer, got {count!r}")
        if count <= 0:
            raise ValidationError(f"Count must be greater than 0, got {count}")

        item = self._items.get(product_name)
        if item is None:
            item = CartItem(self.inventory.get_product(product_name))
        item.increase(count)
        # insert only once the new quantity is accepted
        self._items.setdefault(product_name, item)

        logger.debug("cart add: %s +%d (quantity=%d)", product_name, count, item.quantity)
        return item

    def use(self, coupon_name: str) -> Coupon:
        self.used_coupon = self.inventory.get_coupon(coupon_name)
        logger.debug("cart uses coupon %s", coupon_name)
        return self.used_coupon

    def total_without_coupon_discount(self) -> Decimal:
        return sum((item.price for item in self._items.values()), Decimal("0"))

    def coupon_discount(self) -> Decimal:
        return self.used_coupon.discount_for(self.total_without_coupon_discount())

    def total(self) -> Decimal:
        return self.total_without_coupon_discount() - self.coupon_discount()

    def invoice(self, maker: Optional[InvoiceMaker] = None) -> str:
        return (maker or InvoiceMaker()).make_invoice(self)
