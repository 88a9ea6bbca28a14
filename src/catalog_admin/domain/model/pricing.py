"""Derived values shown in tables and summaries.

Pure functions over products and variants. Nothing here is stored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from catalog_admin.domain.model.product import Product

CURRENCY_SYMBOL = "₹"
LOW_STOCK_THRESHOLD = 10


def discount_percent(price: float, mrp: float) -> int:
    """Whole-number discount of *price* against *mrp*.

    Returns 0 when there is no meaningful discount (``mrp <= 0`` or
    ``price >= mrp``). Halves round up, so 12.5 becomes 13.
    """
    if mrp <= 0 or price >= mrp:
        return 0
    return math.floor((mrp - price) / mrp * 100 + 0.5)


def format_amount(amount: float) -> str:
    """Render an amount with the currency symbol, dropping a ``.0`` tail."""
    if float(amount).is_integer():
        return f"{CURRENCY_SYMBOL}{int(amount)}"
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


@dataclass(frozen=True)
class PriceRange:
    low: float
    high: float

    @property
    def is_single(self) -> bool:
        return self.low == self.high

    def __str__(self) -> str:
        if self.is_single:
            return format_amount(self.low)
        return f"{format_amount(self.low)} - {format_amount(self.high)}"


def price_range(product: Product) -> PriceRange:
    if not product.variants:
        return PriceRange(0, 0)
    prices = [v.price for v in product.variants]
    return PriceRange(min(prices), max(prices))


def total_stock(product: Product) -> int:
    return sum(v.stock or 0 for v in product.variants)


def is_low_stock(product: Product) -> bool:
    return total_stock(product) < LOW_STOCK_THRESHOLD
