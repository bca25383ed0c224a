"""
Forecast Assembly

Runs the full pipeline for one user:

    observations -> bucketize -> estimate_trend -> project -> aggregate

Pure function over already-fetched inputs. No I/O, no shared state.
"""

from datetime import date
from typing import Iterable, Optional, Sequence

from networth.engine.aggregator import aggregate_forecast, summarize
from networth.engine.bucketizer import bucketize, earliest_observation, group_by_account
from networth.engine.periods import (
    DateLike,
    add_months,
    add_periods,
    as_date,
    generate_periods,
    period_label,
)
from networth.engine.projection import payoff_date, project
from networth.engine.trend import estimate_trend
from networth.models.account import Account, BalanceObservation
from networth.models.assumptions import ResolvedRates
from networth.models.period import Granularity
from networth.models.results import AccountForecast, ForecastResult


DEFAULT_FORECAST_MONTHS = 60
MIN_HISTORICAL_PERIODS = 4


def order_accounts(accounts: Iterable[Account]) -> list[Account]:
    """Assets first, then liabilities, each alphabetically."""
    return sorted(accounts, key=lambda a: (a.is_liability, a.name))


def historical_periods(
    earliest: DateLike,
    as_of: DateLike,
    granularity: Granularity = Granularity.QUARTER,
    min_periods: int = MIN_HISTORICAL_PERIODS,
) -> list[date]:
    """Periods from the earliest observation through `as_of`, padded backwards to `min_periods`."""
    periods = generate_periods(earliest, as_of, granularity)
    if len(periods) < min_periods:
        start = add_periods(periods[0], len(periods) - min_periods, granularity)
        periods = generate_periods(start, as_of, granularity)
    return periods


def forecast_account(
    account: Account,
    observations: Sequence[BalanceObservation],
    periods: Sequence[date],
    forecast_periods: int,
    rates: ResolvedRates,
    as_of: DateLike,
    granularity: Granularity = Granularity.QUARTER,
) -> AccountForecast:
    """Reconstruct, estimate and project a single account."""
    history = bucketize(observations, periods)
    trend = estimate_trend(history, granularity.periods_per_year)
    projected = project(
        account.category,
        account.current_balance,
        trend.period_change,
        forecast_periods,
        rates,
        granularity.periods_per_year,
    )

    return AccountForecast(
        id=account.id,
        name=account.name,
        type=account.type_display_name,
        category=account.category,
        is_liability=account.is_liability,
        current_balance=account.current_balance,
        projected_balance=projected[-1] if projected else account.current_balance,
        trend=trend,
        payoff_date=payoff_date(
            account.is_liability,
            account.current_balance,
            trend.period_change,
            as_of,
            granularity,
        ),
        historical_data=history,
        forecast_data=projected,
    )


def build_forecast(
    accounts: Sequence[Account],
    observations: Sequence[BalanceObservation],
    rates: Optional[ResolvedRates] = None,
    as_of: Optional[DateLike] = None,
    forecast_months: int = DEFAULT_FORECAST_MONTHS,
    granularity: Granularity = Granularity.QUARTER,
    min_historical_periods: int = MIN_HISTORICAL_PERIODS,
) -> ForecastResult:
    """
    Build the complete forecast.

    Degrades to an empty ForecastResult when there are no accounts or
    no observations at all.
    """
    earliest = earliest_observation(observations)
    if not accounts or earliest is None:
        return ForecastResult(granularity=granularity)

    rates = rates or ResolvedRates()
    as_of = as_date(as_of) if as_of is not None else date.today()

    periods = historical_periods(earliest, as_of, granularity, min_historical_periods)
    forecast_count = forecast_months // granularity.months_per_period
    future = [add_periods(periods[-1], i, granularity) for i in range(1, forecast_count + 1)]

    by_account = group_by_account(observations)
    account_forecasts = [
        forecast_account(
            account,
            by_account.get(account.id, []),
            periods,
            forecast_count,
            rates,
            as_of,
            granularity,
        )
        for account in order_accounts(accounts)
    ]

    historical_points, forecast_points = aggregate_forecast(account_forecasts, periods, future)
    projection_date = add_months(as_of, forecast_count * granularity.months_per_period)

    return ForecastResult(
        granularity=granularity,
        labels=[period_label(p, granularity) for p in [*periods, *future]],
        historical_periods=periods,
        forecast_periods=future,
        forecast_months=forecast_count * granularity.months_per_period,
        accounts=account_forecasts,
        historical_net_worth=historical_points,
        forecast_net_worth=forecast_points,
        summary=summarize(account_forecasts, projection_date),
    )
