from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Sequence, Union

from pricing_engine.config import config

if TYPE_CHECKING:
    from pricing_engine.cart import Cart
    from pricing_engine.models import CartItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Column:
    width: int
    align: str = "left"

    def render_cell(self, value: Any) -> str:
        text = str(value)
        padded = text.ljust(self.width) if self.align == "left" else text.rjust(self.width)
        return f" {padded} "

    def render_separator(self) -> str:
        return "-" * (self.width + 2)


@dataclass(frozen=True, slots=True)
class VerticalSeparator:
    """Column boundary: "|" inside data rows, "+" inside separator rows."""

    def render_cell(self, value: Any = None) -> str:
        return "|"

    def render_separator(self) -> str:
        return "+"


VERTICAL = VerticalSeparator()

TableColumn = Union[Column, VerticalSeparator]


@dataclass(frozen=True, slots=True)
class SeparatorRow:
    def to_text(self, columns: Sequence[TableColumn]) -> str:
        return "".join(column.render_separator() for column in columns)


SEPARATOR = SeparatorRow()


@dataclass(frozen=True, slots=True)
class DataRow:
    cells: tuple

    def to_text(self, columns: Sequence[TableColumn]) -> str:
        values = iter(self.cells)
        parts = []
        for column in columns:
            if isinstance(column, VerticalSeparator):
                parts.append(column.render_cell())
            else:
                parts.append(column.render_cell(next(values, "")))
        return "".join(parts)


Row = Union[SeparatorRow, DataRow]


class SimpleTable:
    """
    Rows collected in order, rendered at the end. The outer border (a vertical
    separator on each side, a separator row above and below) is added here.
    """

    def __init__(self, columns: Sequence[TableColumn]) -> None:
        self.columns: List[TableColumn] = [VERTICAL, *columns, VERTICAL]
        self.rows: List[Row] = []

    def add_row(self, cells: Sequence[Any]) -> None:
        self.rows.append(DataRow(tuple(cells)))

    def add_separator(self) -> None:
        self.rows.append(SEPARATOR)

    def to_text(self) -> str:
        bordered = [SEPARATOR, *self.rows, SEPARATOR]
        return "\n".join(row.to_text(self.columns) for row in bordered) + "\n"


def ordinal_suffix(number: int) -> str:
    if 11 <= number <= 19:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def as_ordinal(number: int) -> str:
    return f"{number}{ordinal_suffix(number)}"


def format_money(value: Decimal) -> str:
    return f"{Decimal(value).quantize(config.MONEY_QUANTUM, rounding=ROUND_HALF_EVEN):f}"


PROMOTION_DESCRIPTIONS: Dict[str, Callable[[Any], str]] = {
    "get_one_free": lambda p: f"buy {p.promotion_count - 1}, get 1 free",
    "package": lambda p: f"get {p.percent}% off for every {p.promotion_count}",
    "threshold": lambda p: f"{p.percent}% off of every after the {as_ordinal(p.threshold)}",
}

COUPON_DESCRIPTIONS: Dict[str, Callable[[Any], str]] = {
    "percent": lambda c: f"{c.percent}% off",
    "amount": lambda c: f"{format_money(c.amount)} off",
}


class EnglishFormatter:
    """Turns cart figures into row cells. Holds no state."""

    def header_row(self) -> List[str]:
        return ["Name", "qty", "price"]

    def item_row(self, name: str, quantity: int, price: Decimal) -> List[Any]:
        return [name, quantity, format_money(price)]

    def promotion_row(self, promotion: Any, discount: Decimal) -> List[str]:
        return [f"  ({self.describe_promotion(promotion)})", "", f"-{format_money(discount)}"]

    def coupon_row(self, coupon: Any, discount: Decimal) -> List[str]:
        return [f"Coupon {coupon.name} - {self.describe_coupon(coupon)}", "", f"-{format_money(discount)}"]

    def total_row(self, total: Decimal) -> List[str]:
        return ["TOTAL", "", format_money(total)]

    def describe_promotion(self, promotion: Any) -> str:
        describe = PROMOTION_DESCRIPTIONS.get(getattr(promotion, "kind", None))
        if describe is None:
            return "unknown promotion"
        return describe(promotion)

    def describe_coupon(self, coupon: Any) -> str:
        describe = COUPON_DESCRIPTIONS.get(getattr(coupon, "kind", None))
        if describe is None:
            return "unknown coupon"
        return describe(coupon)


ENGLISH = EnglishFormatter()


class InvoiceMaker:
    def __init__(self, formatter: Optional[EnglishFormatter] = None) -> None:
        self.formatter = formatter or ENGLISH

    def make_invoice(self, cart: Cart) -> str:
        table = self._create_table()

        table.add_row(self.formatter.header_row())
        table.add_separator()
        for item in cart.items():
            self._add_item(table, item)
        self._add_coupon(table, cart)
        table.add_separator()
        table.add_row(self.formatter.total_row(cart.total()))

        logger.debug("invoice rendered: %d rows", len(table.rows))
        return table.to_text()

    @staticmethod
    def _create_table() -> SimpleTable:
        return SimpleTable(
            [
                Column(config.NAME_COLUMN_WIDTH, "left"),
                Column(config.QTY_COLUMN_WIDTH, "right"),
                VERTICAL,
                Column(config.PRICE_COLUMN_WIDTH, "right"),
            ]
        )

    def _add_item(self, table: SimpleTable, item: CartItem) -> None:
        table.add_row(self.formatter.item_row(item.product.name, item.quantity, item.price_without_discount))
        if item.discounted:
            table.add_row(self.formatter.promotion_row(item.product.promotion, item.discount))

    def _add_coupon(self, table: SimpleTable, cart: Cart) -> None:
        discount = cart.coupon_discount()
        if discount != 0:
            table.add_row(self.formatter.coupon_row(cart.used_coupon, discount))
