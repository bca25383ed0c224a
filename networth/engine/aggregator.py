"""
Net Worth Aggregator

Sums per-account balances into assets, liabilities and net worth for
each period, and computes period-over-period change.

INVARIANTS:
- net_worth == assets - liabilities, exactly (Decimal arithmetic)
- percent change is None for the first period of a series and whenever
  the prior period's net worth is exactly zero
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from networth.engine.rounding import round_money
from networth.models.results import AccountForecast, ForecastSummary, NetWorthPoint


ZERO = Decimal("0")

BalanceRow = tuple[bool, Sequence[Optional[Decimal]]]


def percent_change(current: Decimal, previous: Optional[Decimal]) -> Optional[Decimal]:
    """Percent change against `previous`, or None when there is no usable base."""
    if previous is None or previous == 0:
        return None
    return round_money((current - previous) / abs(previous) * 100)


def percent_changes(values: Sequence[Decimal]) -> list[Optional[Decimal]]:
    """Percent change of each value against the one before it."""
    return [
        percent_change(value, values[i - 1] if i > 0 else None)
        for i, value in enumerate(values)
    ]


def _value_at(values: Sequence[Optional[Decimal]], index: int) -> Decimal:
    if index < len(values) and values[index] is not None:
        return values[index]
    return ZERO


def aggregate(rows: Iterable[BalanceRow], period_ends: Sequence[date]) -> list[NetWorthPoint]:
    """
    Totals per period from `(is_liability, balances)` rows.

    Missing or None balances count as zero.
    """
    rows = list(rows)
    points: list[NetWorthPoint] = []
    previous: Optional[Decimal] = None

    for index, period in enumerate(period_ends):
        assets = ZERO
        liabilities = ZERO
        for is_liability, values in rows:
            if is_liability:
                liabilities += _value_at(values, index)
            else:
                assets += _value_at(values, index)

        net_worth = assets - liabilities
        points.append(NetWorthPoint(
            period_end=period,
            assets=assets,
            liabilities=liabilities,
            net_worth=net_worth,
            change=None if previous is None else net_worth - previous,
            percent_change=percent_change(net_worth, previous),
        ))
        previous = net_worth

    return points


def aggregate_forecast(
    accounts: Sequence[AccountForecast],
    historical_periods: Sequence[date],
    forecast_periods: Sequence[date],
) -> tuple[list[NetWorthPoint], list[NetWorthPoint]]:
    """Net worth series for the historical and the forecast horizon."""
    historical = aggregate(
        ((a.is_liability, a.historical_data) for a in accounts),
        historical_periods,
    )
    forecast = aggregate(
        ((a.is_liability, a.forecast_data) for a in accounts),
        forecast_periods,
    )
    return historical, forecast


def summarize(
    accounts: Sequence[AccountForecast],
    projection_date: Optional[date] = None,
) -> ForecastSummary:
    """Current vs projected totals across all accounts."""
    current_assets = sum((a.current_balance for a in accounts if not a.is_liability), ZERO)
    current_liabilities = sum((a.current_balance for a in accounts if a.is_liability), ZERO)
    projected_assets = sum((a.projected_balance for a in accounts if not a.is_liability), ZERO)
    projected_liabilities = sum((a.projected_balance for a in accounts if a.is_liability), ZERO)

    current_net_worth = current_assets - current_liabilities
    projected_net_worth = projected_assets - projected_liabilities

    return ForecastSummary(
        current_assets=current_assets,
        current_liabilities=current_liabilities,
        current_net_worth=current_net_worth,
        projected_assets=projected_assets,
        projected_liabilities=projected_liabilities,
        projected_net_worth=projected_net_worth,
        projected_change=projected_net_worth - current_net_worth,
        projected_change_percent=percent_change(projected_net_worth, current_net_worth),
        projection_date=projection_date,
    )
