"""
Data Models Package

This package contains all Pydantic models used by the forecast engine.
All data flowing through the engine must conform to these schemas.
"""

from networth.models.account import (
    Account,
    AccountCategory,
    AccountType,
    BalanceObservation,
)
from networth.models.assumptions import (
    AssumptionDefaults,
    AssumptionsView,
    ForecastAssumptions,
    ResolvedRates,
)
from networth.models.period import Granularity
from networth.models.results import (
    AccountForecast,
    AccountPeriodBalances,
    ForecastResult,
    ForecastSummary,
    HistoricalReport,
    NetWorthHistory,
    NetWorthPoint,
    ReportTotals,
    Trend,
)

__all__ = [
    # Account models
    "Account",
    "AccountCategory",
    "AccountType",
    "BalanceObservation",
    # Assumption models
    "AssumptionDefaults",
    "AssumptionsView",
    "ForecastAssumptions",
    "ResolvedRates",
    # Periods
    "Granularity",
    # Result models
    "AccountForecast",
    "AccountPeriodBalances",
    "ForecastResult",
    "ForecastSummary",
    "HistoricalReport",
    "NetWorthHistory",
    "NetWorthPoint",
    "ReportTotals",
    "Trend",
]
