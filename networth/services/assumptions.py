"""
Assumptions Provider

Resolves the growth/depreciation rates for a user, preferring the
user's overrides over the system defaults, and handles explicit user
edits of those overrides.

A missing assumptions row is not an error: it means "use the defaults".
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from networth.config import StorageSettings
from networth.logger import get_logger
from networth.models.assumptions import AssumptionsView, ForecastAssumptions, ResolvedRates
from networth.services.retry import read_with_retry
from networth.services.storage.interface import AssumptionsStorageInterface


class AssumptionsProvider:
    """
    Per-user rate resolution backed by an assumptions store.

    Holds no per-request state: `resolve` returns the rates and the
    caller passes them on explicitly.
    """

    def __init__(
        self,
        storage: AssumptionsStorageInterface,
        storage_settings: Optional[StorageSettings] = None,
    ):
        self._storage = storage
        self._storage_settings = storage_settings
        self._logger = get_logger("networth.assumptions")

    async def resolve(self, user_id: UUID) -> ResolvedRates:
        """Rates to use for this user's forecast."""
        assumptions = await read_with_retry(
            self._storage.get_assumptions, user_id, settings=self._storage_settings
        )
        if assumptions is None:
            return ResolvedRates()
        return assumptions.resolve()

    async def get_assumptions(self, user_id: UUID) -> AssumptionsView:
        """Current rates as percentages, for display and editing."""
        assumptions = await read_with_retry(
            self._storage.get_assumptions, user_id, settings=self._storage_settings
        )
        if assumptions is None:
            return AssumptionsView.from_rates(ResolvedRates())
        return AssumptionsView.from_rates(
            assumptions.resolve(),
            has_custom_overrides=assumptions.has_custom_overrides,
        )

    async def save_assumptions(self, user_id: UUID, view: AssumptionsView) -> None:
        """Store the user's edited rates, converting percentages to fractions."""
        hundred = Decimal("100")
        existing = await self._storage.get_or_create_assumptions(user_id)
        updated = ForecastAssumptions.model_validate({
            **existing.model_dump(),
            "investment_growth_rate": view.investment_growth_rate / hundred,
            "real_estate_growth_rate": view.real_estate_growth_rate / hundred,
            "banking_growth_rate": view.banking_growth_rate / hundred,
            "business_growth_rate": view.business_growth_rate / hundred,
            "vehicle_depreciation_rate": view.vehicle_depreciation_rate / hundred,
        })
        await self._storage.save_assumptions(updated)

        self._logger.info(
            "assumptions_saved",
            user_id=str(user_id),
            has_custom_overrides=updated.has_custom_overrides,
        )

    async def reset_assumptions(self, user_id: UUID) -> None:
        """Drop every override for the user. Does nothing if none exist."""
        await self._storage.reset_to_defaults(user_id)
        self._logger.info("assumptions_reset", user_id=str(user_id))
