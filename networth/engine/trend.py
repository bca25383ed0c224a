"""
Trend Estimator

Estimates an average per-period change, an annualized growth rate and
a coarse direction from the trailing window of historical balances.
"""

from decimal import Decimal
from typing import Sequence

from networth.engine.rounding import round_money
from networth.models.results import Trend


TREND_WINDOW = 8

# A change smaller than 2% of the starting balance counts as "stable"
DIRECTION_THRESHOLD = Decimal("0.02")


def estimate_trend(
    balances: Sequence[Decimal],
    periods_per_year: int = 4,
) -> Trend:
    """
    Estimate the trend of an ordered per-period balance series.

    Fewer than two periods gives a zero, stable trend.
    """
    window = list(balances[-TREND_WINDOW:])
    if len(window) < 2:
        return Trend()

    first, last = window[0], window[-1]
    steps = len(window) - 1
    total_change = last - first
    delta = total_change / steps

    if first != 0:
        annual_rate = total_change / abs(first) * (Decimal(periods_per_year) / steps) * 100
    else:
        annual_rate = Decimal("0")

    threshold = abs(first) * DIRECTION_THRESHOLD
    if delta > threshold:
        direction = "up"
    elif delta < -threshold:
        direction = "down"
    else:
        direction = "stable"

    months_per_period = 12 // periods_per_year
    return Trend(
        period_change=round_money(delta),
        monthly_change=round_money(delta / months_per_period),
        annual_growth_rate=round_money(annual_rate),
        direction=direction,
    )
