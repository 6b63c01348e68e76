from __future__ import annotations


class PricingError(Exception):
    pass


class ValidationError(PricingError, ValueError):
    """Raised when a name, price, quantity or rule parameter is out of range."""


class NotFoundError(PricingError, LookupError):
    """Raised when a product or coupon name is not registered."""
