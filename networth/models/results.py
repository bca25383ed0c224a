"""
Result Models

What the engine hands back to presentation and export layers.

Every list here is index-aligned with a list of periods:
- historical lists have one entry per historical period
- forecast lists have one entry per forecast period
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from networth.models.account import AccountCategory
from networth.models.period import Granularity


ZERO = Decimal("0")


class Trend(BaseModel):
    """Trend estimated from the trailing historical periods."""
    model_config = ConfigDict(frozen=True)

    period_change: Decimal = ZERO
    monthly_change: Decimal = ZERO
    annual_growth_rate: Decimal = Field(
        default=ZERO,
        description="Annualized growth as a percentage"
    )
    direction: str = Field(
        default="stable",
        pattern="^(up|down|stable)$",
    )


class NetWorthPoint(BaseModel):
    """Totals for one period."""
    model_config = ConfigDict(frozen=True)

    period_end: date
    assets: Decimal = ZERO
    liabilities: Decimal = ZERO
    net_worth: Decimal = ZERO
    change: Optional[Decimal] = None
    percent_change: Optional[Decimal] = None


# =============================================================================
# FORECAST
# =============================================================================

class AccountForecast(BaseModel):
    """Historical reconstruction and projection for one account."""
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    type: str
    category: AccountCategory
    is_liability: bool
    current_balance: Decimal
    projected_balance: Decimal
    trend: Trend = Field(default_factory=Trend)
    payoff_date: Optional[date] = None
    historical_data: list[Decimal] = Field(default_factory=list)
    forecast_data: list[Optional[Decimal]] = Field(default_factory=list)


class ForecastSummary(BaseModel):
    """Current vs projected totals at the end of the forecast horizon."""
    model_config = ConfigDict(frozen=True)

    current_assets: Decimal = ZERO
    current_liabilities: Decimal = ZERO
    current_net_worth: Decimal = ZERO
    projected_assets: Decimal = ZERO
    projected_liabilities: Decimal = ZERO
    projected_net_worth: Decimal = ZERO
    projected_change: Decimal = ZERO
    projected_change_percent: Optional[Decimal] = None
    projection_date: Optional[date] = None


class ForecastResult(BaseModel):
    """
    Complete forecast for one user.

    `labels` covers historical periods followed by forecast periods.
    An empty result (no accounts, or no history) has every list empty.
    """
    model_config = ConfigDict(frozen=True)

    granularity: Granularity = Granularity.QUARTER
    labels: list[str] = Field(default_factory=list)
    historical_periods: list[date] = Field(default_factory=list)
    forecast_periods: list[date] = Field(default_factory=list)
    forecast_months: int = 0
    accounts: list[AccountForecast] = Field(default_factory=list)
    historical_net_worth: list[NetWorthPoint] = Field(default_factory=list)
    forecast_net_worth: list[NetWorthPoint] = Field(default_factory=list)
    summary: ForecastSummary = Field(default_factory=ForecastSummary)

    @property
    def is_empty(self) -> bool:
        return not self.accounts


# =============================================================================
# HISTORICAL REPORT
# =============================================================================

class AccountPeriodBalances(BaseModel):
    """One report row: an account's balance at each period end."""
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    type: str
    is_liability: bool
    balances: list[Decimal] = Field(default_factory=list)


class ReportTotals(BaseModel):
    """The "Net Worth" and "% Change" rows of the report."""
    model_config = ConfigDict(frozen=True)

    net_worth: list[Decimal] = Field(default_factory=list)
    percent_change: list[Optional[Decimal]] = Field(default_factory=list)


class HistoricalReport(BaseModel):
    """Account-by-period balance table, historical periods only."""
    model_config = ConfigDict(frozen=True)

    granularity: Granularity = Granularity.QUARTER
    periods: list[date] = Field(default_factory=list)
    labels: list[str] = Field(default_factory=list)
    accounts: list[AccountPeriodBalances] = Field(default_factory=list)
    totals: ReportTotals = Field(default_factory=ReportTotals)


class NetWorthHistory(BaseModel):
    """Month-by-month net worth with change from the prior month."""
    model_config = ConfigDict(frozen=True)

    months: list[NetWorthPoint] = Field(default_factory=list)
