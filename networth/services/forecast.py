"""
Forecast Service

Loads everything a forecast needs in one pass (accounts, balance
history, resolved assumptions), then hands it to the pure engine.

DESIGN DECISION: The resolved rates are a local variable passed to
build_forecast, never an attribute. One ForecastService instance can
serve concurrent requests for different users safely.
"""

from datetime import date, datetime, timezone
from typing import Optional
from uuid import UUID

from networth.config import ForecastSettings, StorageSettings, get_settings
from networth.engine.forecast import build_forecast
from networth.engine.periods import add_months
from networth.logger import get_logger
from networth.models.results import ForecastResult
from networth.services.assumptions import AssumptionsProvider
from networth.services.retry import read_with_retry
from networth.services.storage.interface import (
    AccountStorageInterface,
    BalanceHistoryStorageInterface,
)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class ForecastService:
    """Builds net worth forecasts for users."""

    def __init__(
        self,
        accounts: AccountStorageInterface,
        history: BalanceHistoryStorageInterface,
        assumptions: AssumptionsProvider,
        settings: Optional[ForecastSettings] = None,
        storage_settings: Optional[StorageSettings] = None,
    ):
        self._accounts = accounts
        self._history = history
        self._assumptions = assumptions
        self._settings = settings or get_settings().forecast
        self._storage_settings = storage_settings
        self._logger = get_logger("networth.forecast")

    async def get_forecast(
        self,
        user_id: UUID,
        forecast_months: Optional[int] = None,
        as_of: Optional[date] = None,
    ) -> ForecastResult:
        """
        Forecast a user's net worth.

        Args:
            user_id: The user to forecast for
            forecast_months: Horizon in months (defaults to settings)
            as_of: The "now" of the computation (defaults to today, UTC)

        Returns:
            The forecast; empty when the user has no accounts or no history
        """
        as_of = as_of or utc_today()
        if forecast_months is None:
            forecast_months = self._settings.forecast_months

        rates = await self._assumptions.resolve(user_id)
        accounts = await read_with_retry(
            self._accounts.get_active_accounts, user_id,
            settings=self._storage_settings,
        )
        if not accounts:
            self._logger.info("forecast_empty", user_id=str(user_id), reason="no_accounts")
            return ForecastResult(granularity=self._settings.granularity)

        start = add_months(as_of, -12 * self._settings.history_lookback_years)
        observations = await read_with_retry(
            self._history.get_observations_in_range, user_id, start, as_of,
            settings=self._storage_settings,
        )
        if not observations:
            self._logger.info("forecast_empty", user_id=str(user_id), reason="no_history")
            return ForecastResult(granularity=self._settings.granularity)

        result = build_forecast(
            accounts,
            observations,
            rates=rates,
            as_of=as_of,
            forecast_months=forecast_months,
            granularity=self._settings.granularity,
            min_historical_periods=self._settings.min_historical_periods,
        )

        self._logger.info(
            "forecast_built",
            user_id=str(user_id),
            accounts=len(result.accounts),
            historical_periods=len(result.historical_periods),
            forecast_periods=len(result.forecast_periods),
            projected_net_worth=str(result.summary.projected_net_worth),
        )
        return result
