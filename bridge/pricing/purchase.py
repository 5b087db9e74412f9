"""Purchase price for scrap metal.

purchase_price = market_price * (1 + adjustment_factor) + operational_costs + hedging_impact

No rounding is applied; callers get full float precision.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..core.errors import ValidationError
from ..core.utils import is_number

PRICING_FIELDS = ("marketPrice", "adjustmentFactor", "operationalCosts", "hedgingImpact")

PRICING_ERROR = (
    "All inputs (marketPrice, adjustmentFactor, operationalCosts, hedgingImpact) "
    "must be numbers."
)

PRICE_OVERFLOW_ERROR = (
    "Purchase price for (marketPrice, adjustmentFactor, operationalCosts, hedgingImpact) "
    "is out of range."
)


def calculate_purchase_price(
    market_price: Any,
    adjustment_factor: Any,
    operational_costs: Any,
    hedging_impact: Any,
) -> float:
    if not all(
        is_number(x)
        for x in (market_price, adjustment_factor, operational_costs, hedging_impact)
    ):
        raise ValidationError(PRICING_ERROR, PRICING_FIELDS)
    price = market_price * (1 + adjustment_factor) + operational_costs + hedging_impact
    if not is_number(price):
        raise ValidationError(PRICE_OVERFLOW_ERROR, PRICING_FIELDS)
    return price


def purchase_price_from_payload(payload: Mapping[str, Any]) -> float:
    """Apply the formula to a request body keyed by the camelCase field names."""
    return calculate_purchase_price(*(payload.get(name) for name in PRICING_FIELDS))
