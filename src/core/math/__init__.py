"""
Core math modules

Ценовая арифметика с гарантией диапазона цен.
"""

from src.core.math.pricing import (
    PRICE_MAX,
    PRICE_MIN,
    SubscriptionQuantityPolicy,
    clamp_price,
    compute_total_price,
    format_amount,
    format_price,
    to_decimal,
)

__all__ = [
    "PRICE_MIN",
    "PRICE_MAX",
    "SubscriptionQuantityPolicy",
    "clamp_price",
    "compute_total_price",
    "format_amount",
    "format_price",
    "to_decimal",
]
