"""Delivery fee tiers and their fee functions."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from food_delivery.config.constants import CURRENCY_SYMBOL, EXPRESS_RATE, STANDARD_RATE
from food_delivery.logging.order_log import get_order_logger

FeeFunction = Callable[[float], float]


class FeeTier(str, Enum):
    """Delivery-speed classification."""

    STANDARD = "standard"
    EXPRESS = "express"
    FREE = "free"

    @classmethod
    def parse(cls, value: str | None) -> "FeeTier":
        """Map raw input to a tier; unrecognized values fall back to FREE."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            get_order_logger().info("fallback tier=%r reason=unknown_tier default=free", value)
            return cls.FREE


def standard_fee(distance: float) -> float:
    return distance * STANDARD_RATE


def express_fee(distance: float) -> float:
    return distance * EXPRESS_RATE


def free_fee(distance: float) -> float:
    return 0


_FEE_FUNCTIONS: dict[FeeTier, FeeFunction] = {
    FeeTier.STANDARD: standard_fee,
    FeeTier.EXPRESS: express_fee,
    FeeTier.FREE: free_fee,
}


def fee_function(tier: FeeTier) -> FeeFunction:
    """Return the fee function for a tier."""
    return _FEE_FUNCTIONS[tier]


def compute_fee(tier: FeeTier | str | None, distance: float) -> float:
    """Fee for ``distance`` under ``tier``. Distance is expected to be >= 0."""
    return fee_function(FeeTier.parse(tier))(distance)


def format_fee(fee: float, currency: str = CURRENCY_SYMBOL) -> str:
    """Render the fee line shown next to the order form."""
    amount = int(fee) if float(fee).is_integer() else round(fee, 2)
    return f"Delivery Fee: {currency}{amount}"
