"""
Report Service

Historical (non-projected) reports: the quarterly account-by-period
table and the month-by-month net worth history.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from networth.config import ReportSettings, StorageSettings, get_settings
from networth.engine.report import build_historical_report, build_net_worth_history
from networth.logger import get_logger
from networth.models.results import HistoricalReport, NetWorthHistory
from networth.services.forecast import utc_today
from networth.services.retry import read_with_retry
from networth.services.storage.interface import (
    AccountStorageInterface,
    BalanceHistoryStorageInterface,
)


class ReportService:
    """Builds historical net worth reports."""

    def __init__(
        self,
        accounts: AccountStorageInterface,
        history: BalanceHistoryStorageInterface,
        settings: Optional[ReportSettings] = None,
        storage_settings: Optional[StorageSettings] = None,
    ):
        self._accounts = accounts
        self._history = history
        self._settings = settings or get_settings().report
        self._storage_settings = storage_settings
        self._logger = get_logger("networth.report")

    async def _load(self, user_id: UUID, as_of: date):
        accounts = await read_with_retry(
            self._accounts.get_active_accounts, user_id,
            settings=self._storage_settings,
        )
        if not accounts:
            return [], []
        observations = await read_with_retry(
            self._history.get_observations_in_range,
            user_id, self._settings.history_start, as_of,
            settings=self._storage_settings,
        )
        return accounts, observations

    async def build_quarterly_report(
        self,
        user_id: UUID,
        as_of: Optional[date] = None,
    ) -> HistoricalReport:
        """Per-account balances at each period end, with net worth and % change rows."""
        as_of = as_of or utc_today()
        accounts, observations = await self._load(user_id, as_of)

        report = build_historical_report(
            accounts,
            observations,
            as_of=as_of,
            granularity=self._settings.granularity,
        )
        self._logger.info(
            "quarterly_report_built",
            user_id=str(user_id),
            accounts=len(report.accounts),
            periods=len(report.periods),
        )
        return report

    async def get_net_worth_history(
        self,
        user_id: UUID,
        as_of: Optional[date] = None,
    ) -> NetWorthHistory:
        """Monthly assets, liabilities and net worth."""
        as_of = as_of or utc_today()
        accounts, observations = await self._load(user_id, as_of)

        history = build_net_worth_history(accounts, observations, as_of=as_of)
        self._logger.info(
            "net_worth_history_built",
            user_id=str(user_id),
            months=len(history.months),
        )
        return history
