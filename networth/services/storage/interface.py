"""
Abstract Storage Interface

DESIGN DECISION: The engine never talks to a database. Accounts, balance
history and assumptions come from collaborators behind these interfaces.
This allows us to:
1. Plug in any persistence engine
2. Use in-memory storage for testing
3. Keep the projection math decoupled from I/O

The interface is intentionally narrow - just the reads the engine needs,
plus assumption writes.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional
from uuid import UUID

from networth.models.account import Account, BalanceObservation
from networth.models.assumptions import ForecastAssumptions


class AccountStorageInterface(ABC):
    """Read access to a user's accounts."""

    @abstractmethod
    async def get_active_accounts(self, user_id: UUID) -> list[Account]:
        """
        List the user's active accounts.

        Args:
            user_id: The owning user

        Returns:
            Active accounts (possibly empty)
        """
        pass


class BalanceHistoryStorageInterface(ABC):
    """Read access to balance observations."""

    @abstractmethod
    async def get_observations(self, account_id: UUID) -> list[BalanceObservation]:
        """
        All observations for one account, in insertion order.

        Args:
            account_id: The account's unique identifier

        Returns:
            List of observations (possibly empty)
        """
        pass

    @abstractmethod
    async def get_observations_in_range(
        self,
        user_id: UUID,
        start: date,
        end: date,
    ) -> list[BalanceObservation]:
        """
        Observations across all of a user's accounts within a date range.

        Args:
            user_id: The owning user
            start: First calendar day included
            end: Last calendar day included

        Returns:
            Observations whose recorded_at date falls in [start, end],
            in insertion order
        """
        pass


class AssumptionsStorageInterface(ABC):
    """
    Read/write access to per-user forecast assumptions.

    Rows are created lazily and only deleted by an account-wide purge,
    which is outside this interface.
    """

    @abstractmethod
    async def get_assumptions(self, user_id: UUID) -> Optional[ForecastAssumptions]:
        """Return the user's assumptions, or None if none were ever saved."""
        pass

    @abstractmethod
    async def get_or_create_assumptions(self, user_id: UUID) -> ForecastAssumptions:
        """Return the user's assumptions, creating an empty row if needed."""
        pass

    @abstractmethod
    async def save_assumptions(self, assumptions: ForecastAssumptions) -> None:
        """
        Persist assumptions.

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def reset_to_defaults(self, user_id: UUID) -> None:
        """Clear every override for the user. No-op if no row exists."""
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Entity not found in storage."""
    pass


class StorageConnectionError(StorageError):
    """Could not reach the storage backend. Safe to retry."""
    pass
