"""
In-Memory Storage

A dict-backed implementation of every storage interface. Used by the
tests and for wiring the services without a database.
"""

from datetime import date, datetime
from typing import Iterable, Optional
from uuid import UUID

from networth.models.account import Account, BalanceObservation
from networth.models.assumptions import ForecastAssumptions
from networth.services.storage.interface import (
    AccountStorageInterface,
    AssumptionsStorageInterface,
    BalanceHistoryStorageInterface,
    NotFoundError,
)


class InMemoryStorage(
    AccountStorageInterface,
    BalanceHistoryStorageInterface,
    AssumptionsStorageInterface,
):
    """Accounts, observations and assumptions held in process memory."""

    def __init__(
        self,
        accounts: Iterable[Account] = (),
        observations: Iterable[BalanceObservation] = (),
    ):
        self._accounts: dict[UUID, Account] = {}
        self._observations: list[BalanceObservation] = []
        self._assumptions: dict[UUID, ForecastAssumptions] = {}

        for account in accounts:
            self.add_account(account)
        for observation in observations:
            self.add_observation(observation)

    # -------------------------------------------------------------------------
    # Writes (test setup)
    # -------------------------------------------------------------------------

    def add_account(self, account: Account) -> None:
        self._accounts[account.id] = account

    def add_observation(self, observation: BalanceObservation) -> None:
        if observation.account_id not in self._accounts:
            raise NotFoundError(f"Unknown account {observation.account_id}")
        self._observations.append(observation)

    # -------------------------------------------------------------------------
    # AccountStorageInterface
    # -------------------------------------------------------------------------

    async def get_active_accounts(self, user_id: UUID) -> list[Account]:
        return [
            a for a in self._accounts.values()
            if a.user_id == user_id and a.is_active
        ]

    # -------------------------------------------------------------------------
    # BalanceHistoryStorageInterface
    # -------------------------------------------------------------------------

    async def get_observations(self, account_id: UUID) -> list[BalanceObservation]:
        return [o for o in self._observations if o.account_id == account_id]

    async def get_observations_in_range(
        self,
        user_id: UUID,
        start: date,
        end: date,
    ) -> list[BalanceObservation]:
        owned = {a.id for a in self._accounts.values() if a.user_id == user_id}
        return [
            o for o in self._observations
            if o.account_id in owned and start <= o.recorded_at.date() <= end
        ]

    # -------------------------------------------------------------------------
    # AssumptionsStorageInterface
    # -------------------------------------------------------------------------

    async def get_assumptions(self, user_id: UUID) -> Optional[ForecastAssumptions]:
        return self._assumptions.get(user_id)

    async def get_or_create_assumptions(self, user_id: UUID) -> ForecastAssumptions:
        if user_id not in self._assumptions:
            self._assumptions[user_id] = ForecastAssumptions(user_id=user_id)
        return self._assumptions[user_id]

    async def save_assumptions(self, assumptions: ForecastAssumptions) -> None:
        self._assumptions[assumptions.user_id] = assumptions.model_copy(
            update={"modified_at": datetime.utcnow()}
        )

    async def reset_to_defaults(self, user_id: UUID) -> None:
        existing = self._assumptions.get(user_id)
        if existing is not None:
            self._assumptions[user_id] = existing.reset_to_defaults()
