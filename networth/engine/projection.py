"""
Projection Engine

Projects future balances per account category:

- growth (investment, real estate, banking, business):
      current x (1 + rate) ^ years
- decay (vehicles & property):
      max(current x floor, current x (1 - rate) ^ years)
- paydown (debts): period-by-period simulation of payments

DESIGN DECISION: Category dispatch is a table (PROJECTION_MODELS) of pure
functions. The resolved rates are an explicit argument, never state.
"""

import math
from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Union

from networth.engine.periods import DateLike, add_months
from networth.engine.rounding import round_money
from networth.models.account import AccountCategory
from networth.models.assumptions import ResolvedRates
from networth.models.period import Granularity


ZERO = Decimal("0")

# Payment assumed when no paydown trend has been observed
DEBT_FALLBACK_PAYMENT_RATE = Decimal("0.03")

PAYOFF_HORIZON_YEARS = 30

ProjectionModel = Callable[[Decimal, Decimal, int, ResolvedRates, int], list[Decimal]]


def _years(periods_ahead: int, periods_per_year: int) -> Decimal:
    return Decimal(periods_ahead) / Decimal(periods_per_year)


def compound(balance: Decimal, rate: Decimal, years: Decimal) -> Decimal:
    """balance x (1 + rate) ^ years."""
    return balance * (1 + rate) ** years


def _growth_model(
    rate_of: Callable[[ResolvedRates], Decimal],
    floor_at_zero: bool = False,
) -> ProjectionModel:
    def model(current, period_delta, periods, rates, periods_per_year):
        rate = rate_of(rates)
        projected = []
        for ahead in range(1, periods + 1):
            value = compound(current, rate, _years(ahead, periods_per_year))
            if floor_at_zero:
                value = max(ZERO, value)
            projected.append(value)
        return projected
    return model


def project_depreciation(
    current: Decimal,
    period_delta: Decimal,
    periods: int,
    rates: ResolvedRates,
    periods_per_year: int,
) -> list[Decimal]:
    """Compound decay that never drops below a residual fraction of today's value."""
    floor = current * rates.vehicle_floor
    return [
        max(floor, compound(current, -rates.vehicle_depreciation, _years(ahead, periods_per_year)))
        for ahead in range(1, periods + 1)
    ]


def project_paydown(
    current: Decimal,
    period_delta: Decimal,
    periods: int,
    rates: ResolvedRates,
    periods_per_year: int,
) -> list[Decimal]:
    """
    Simulate debt repayment one period at a time.

    The payment is the observed per-period change when it is negative,
    otherwise 3% of the remaining balance. The balance never goes below
    zero and stays at zero once paid off.
    """
    balance = max(ZERO, current)
    projected = []
    for _ in range(periods):
        if balance > 0:
            if period_delta < 0:
                payment = period_delta
            else:
                payment = -balance * DEBT_FALLBACK_PAYMENT_RATE
            balance = max(ZERO, balance + payment)
        projected.append(balance)
    return projected


def hold_flat(
    current: Decimal,
    period_delta: Decimal,
    periods: int,
    rates: ResolvedRates,
    periods_per_year: int,
) -> list[Decimal]:
    return [current] * periods


PROJECTION_MODELS: dict[AccountCategory, ProjectionModel] = {
    AccountCategory.INVESTMENT: _growth_model(lambda r: r.investment),
    AccountCategory.REAL_ESTATE: _growth_model(lambda r: r.real_estate),
    AccountCategory.BANKING: _growth_model(lambda r: r.banking, floor_at_zero=True),
    AccountCategory.BUSINESS: _growth_model(lambda r: r.business, floor_at_zero=True),
    AccountCategory.VEHICLES_AND_PROPERTY: project_depreciation,
    AccountCategory.SECURED_DEBT: project_paydown,
    AccountCategory.UNSECURED_DEBT: project_paydown,
    AccountCategory.OTHER_LIABILITIES: project_paydown,
}


def project(
    category: Union[AccountCategory, str],
    current_balance: Decimal,
    period_delta: Decimal,
    periods_ahead: int,
    rates: Optional[ResolvedRates] = None,
    periods_per_year: int = 4,
) -> list[Decimal]:
    """
    Project a balance `periods_ahead` periods into the future.

    Returns one value per period (1..N), rounded to cents. Categories
    outside the known set are held flat.
    """
    if periods_ahead <= 0:
        return []
    try:
        model = PROJECTION_MODELS[AccountCategory(category)]
    except ValueError:
        model = hold_flat
    projected = model(
        Decimal(current_balance),
        Decimal(period_delta),
        periods_ahead,
        rates or ResolvedRates(),
        periods_per_year,
    )
    return [round_money(value) for value in projected]


def periods_to_payoff(current_balance: Decimal, period_delta: Decimal) -> Optional[int]:
    """Periods until a debt shrinking by `period_delta` per period reaches zero."""
    if period_delta >= 0 or current_balance <= 0:
        return None
    return math.ceil(current_balance / abs(period_delta))


def payoff_date(
    is_liability: bool,
    current_balance: Decimal,
    period_delta: Decimal,
    as_of: DateLike,
    granularity: Granularity = Granularity.QUARTER,
) -> Optional[date]:
    """
    Projected date a liability reaches zero under its observed paydown trend.

    None for assets, for debts without a downward trend, and for debts
    that would take 30 years or more.
    """
    if not is_liability:
        return None
    periods = periods_to_payoff(Decimal(current_balance), Decimal(period_delta))
    if periods is None:
        return None
    cap = PAYOFF_HORIZON_YEARS * granularity.periods_per_year
    if not 0 < periods < cap:
        return None
    return add_months(as_of, periods * granularity.months_per_period)
