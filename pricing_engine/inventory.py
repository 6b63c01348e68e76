from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from pricing_engine.cart import Cart
from pricing_engine.coupons import Coupon, make_coupon
from pricing_engine.errors import NotFoundError
from pricing_engine.models import Product
from pricing_engine.promotions import make_promotion

logger = logging.getLogger(__name__)


class Inventory:
    """
    Registry of products and coupons.

    Filled once during setup, then only read: carts resolve names through it
    and hold references to the registered objects, never copies.
    """

    def __init__(self) -> None:
        self.products: Dict[str, Product] = {}
        self.coupons: Dict[str, Coupon] = {}

    def register(
        self,
        name: str,
        price: Decimal | str,
        promotion: Optional[Mapping[str, Any]] = None,
    ) -> Product:
        product = Product(name, price, make_promotion(promotion))
        if name in self.products:
            logger.debug("product %s re-registered, replacing previous entry", name)
        self.products[name] = product
        logger.info("product registered: %s price=%s promotion=%s", name, product.price, product.promotion.kind)
        return product

    def register_coupon(self, name: str, spec: Mapping[str, Any]) -> Coupon:
        coupon = make_coupon(name, spec)
        if name in self.coupons:
            logger.debug("coupon %s re-registered, replacing previous entry", name)
        self.coupons[name] = coupon
        logger.info("coupon registered: %s type=%s", name, coupon.kind)
        return coupon

    def get_product(self, name: str) -> Product:
        product = self.products.get(name)
        if product is None:
            raise NotFoundError(f"Unknown product {name!r}")
        return product

    def get_coupon(self, name: str) -> Coupon:
        coupon = self.coupons.get(name)
        if coupon is None:
            raise NotFoundError(f"Unknown coupon {name!r}")
        return coupon

    def new_cart(self) -> Cart:
        return Cart(self)
