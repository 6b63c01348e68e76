from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class PricingConfig:
    # Product limits
    MAX_NAME_LENGTH: int = 40
    MIN_PRICE: Decimal = Decimal("0.01")
    MAX_PRICE: Decimal = Decimal("999.99")

    # A single cart line must stay strictly below this quantity
    LINE_QUANTITY_CEILING: int = 100

    # Invoice formatting
    MONEY_QUANTUM: Decimal = Decimal("0.01")
    NAME_COLUMN_WIDTH: int = 40
    QTY_COLUMN_WIDTH: int = 4
    PRICE_COLUMN_WIDTH: int = 8


config = PricingConfig()
