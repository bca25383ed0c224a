"""
Forecast Engine Package

Pure, synchronous computation over data already fetched from storage:
period arithmetic, forward-fill reconstruction, trend estimation,
category-specific projection and net worth aggregation.
"""

from networth.engine.aggregator import (
    aggregate,
    aggregate_forecast,
    percent_change,
    percent_changes,
    summarize,
)
from networth.engine.bucketizer import bucketize, earliest_observation, group_by_account
from networth.engine.forecast import build_forecast, historical_periods, order_accounts
from networth.engine.periods import (
    add_months,
    add_periods,
    generate_periods,
    period_end,
    period_label,
    period_start,
)
from networth.engine.projection import (
    PROJECTION_MODELS,
    payoff_date,
    periods_to_payoff,
    project,
)
from networth.engine.report import build_historical_report, build_net_worth_history
from networth.engine.trend import estimate_trend

__all__ = [
    # Periods
    "add_months",
    "add_periods",
    "generate_periods",
    "period_end",
    "period_label",
    "period_start",
    # Reconstruction
    "bucketize",
    "earliest_observation",
    "group_by_account",
    # Trend and projection
    "PROJECTION_MODELS",
    "estimate_trend",
    "payoff_date",
    "periods_to_payoff",
    "project",
    # Aggregation
    "aggregate",
    "aggregate_forecast",
    "percent_change",
    "percent_changes",
    "summarize",
    # Assembly
    "build_forecast",
    "build_historical_report",
    "build_net_worth_history",
    "historical_periods",
    "order_accounts",
]
