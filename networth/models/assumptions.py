"""
Forecast Assumption Models

Users may override the annual growth/depreciation rate used for each
asset category. Any rate left unset falls back to a system default.

Rates are stored as fractions (0.07 = 7%). The view model used for
editing exposes them as percentages.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class AssumptionDefaults:
    """System default rates (annual, as fractions)."""
    INVESTMENT_GROWTH_RATE = Decimal("0.07")
    REAL_ESTATE_GROWTH_RATE = Decimal("0.02")
    BANKING_GROWTH_RATE = Decimal("0.005")
    BUSINESS_GROWTH_RATE = Decimal("0.03")
    VEHICLE_DEPRECIATION_RATE = Decimal("0.15")
    VEHICLE_FLOOR_FRACTION = Decimal("0.10")


GrowthRate = Optional[Decimal]


class ResolvedRates(BaseModel):
    """
    The rates actually used for one forecast computation.

    This is what gets threaded through the projection call chain.
    It is never stored on a service.
    """
    model_config = ConfigDict(frozen=True)

    investment: Decimal = AssumptionDefaults.INVESTMENT_GROWTH_RATE
    real_estate: Decimal = AssumptionDefaults.REAL_ESTATE_GROWTH_RATE
    banking: Decimal = AssumptionDefaults.BANKING_GROWTH_RATE
    business: Decimal = AssumptionDefaults.BUSINESS_GROWTH_RATE
    vehicle_depreciation: Decimal = AssumptionDefaults.VEHICLE_DEPRECIATION_RATE
    vehicle_floor: Decimal = AssumptionDefaults.VEHICLE_FLOOR_FRACTION


class ForecastAssumptions(BaseModel):
    """
    Per-user rate overrides.

    Created lazily on first read/write and only changed by explicit
    user action. Mutations return a new copy.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    user_id: UUID

    investment_growth_rate: GrowthRate = Field(default=None, ge=-1, le=1)
    real_estate_growth_rate: GrowthRate = Field(default=None, ge=-1, le=1)
    banking_growth_rate: GrowthRate = Field(default=None, ge=-1, le=1)
    business_growth_rate: GrowthRate = Field(default=None, ge=-1, le=1)
    vehicle_depreciation_rate: GrowthRate = Field(default=None, ge=0, le=1)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    modified_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def has_custom_overrides(self) -> bool:
        return any(
            rate is not None
            for rate in (
                self.investment_growth_rate,
                self.real_estate_growth_rate,
                self.banking_growth_rate,
                self.business_growth_rate,
                self.vehicle_depreciation_rate,
            )
        )

    def resolve(self) -> ResolvedRates:
        """Merge the overrides with the system defaults."""
        overrides = {
            "investment": self.investment_growth_rate,
            "real_estate": self.real_estate_growth_rate,
            "banking": self.banking_growth_rate,
            "business": self.business_growth_rate,
            "vehicle_depreciation": self.vehicle_depreciation_rate,
        }
        return ResolvedRates(**{k: v for k, v in overrides.items() if v is not None})

    def reset_to_defaults(self) -> "ForecastAssumptions":
        return self.model_copy(update={
            "investment_growth_rate": None,
            "real_estate_growth_rate": None,
            "banking_growth_rate": None,
            "business_growth_rate": None,
            "vehicle_depreciation_rate": None,
            "modified_at": datetime.utcnow(),
        })


class AssumptionsView(BaseModel):
    """
    Assumptions as presented to and edited by the user.

    All rates are percentages (7 = 7%).
    """

    investment_growth_rate: Decimal = Field(..., ge=-100, le=100)
    real_estate_growth_rate: Decimal = Field(..., ge=-100, le=100)
    banking_growth_rate: Decimal = Field(..., ge=-100, le=100)
    business_growth_rate: Decimal = Field(..., ge=-100, le=100)
    vehicle_depreciation_rate: Decimal = Field(..., ge=0, le=100)
    has_custom_overrides: bool = False

    @classmethod
    def from_rates(
        cls,
        rates: ResolvedRates,
        has_custom_overrides: bool = False,
    ) -> "AssumptionsView":
        hundred = Decimal("100")
        return cls(
            investment_growth_rate=rates.investment * hundred,
            real_estate_growth_rate=rates.real_estate * hundred,
            banking_growth_rate=rates.banking * hundred,
            business_growth_rate=rates.business * hundred,
            vehicle_depreciation_rate=rates.vehicle_depreciation * hundred,
            has_custom_overrides=has_custom_overrides,
        )
