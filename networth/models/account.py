"""
Account and Balance History Models

These models describe the raw inputs to the forecast engine:
accounts (what the user owns or owes) and balance observations
(what the balance was at a point in time).

DESIGN DECISION: Every model is frozen. The engine works on immutable
snapshots fetched once per request, so nothing can be mutated mid-computation.
Money is always Decimal, never float.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class AccountCategory(str, Enum):
    """
    Account categories.

    The category decides which projection model applies
    (compound growth, depreciation, or debt paydown).
    """
    BANKING = "banking"
    INVESTMENT = "investment"
    REAL_ESTATE = "real_estate"
    VEHICLES_AND_PROPERTY = "vehicles_and_property"
    BUSINESS = "business"
    SECURED_DEBT = "secured_debt"
    UNSECURED_DEBT = "unsecured_debt"
    OTHER_LIABILITIES = "other_liabilities"

    @property
    def display_name(self) -> str:
        return _CATEGORY_DISPLAY_NAMES[self]

    @property
    def is_liability(self) -> bool:
        return self in LIABILITY_CATEGORIES

    @classmethod
    def asset_categories(cls) -> list["AccountCategory"]:
        return [c for c in cls if not c.is_liability]

    @classmethod
    def liability_categories(cls) -> list["AccountCategory"]:
        return [c for c in cls if c.is_liability]


_CATEGORY_DISPLAY_NAMES = {
    AccountCategory.BANKING: "Banking",
    AccountCategory.INVESTMENT: "Investment",
    AccountCategory.REAL_ESTATE: "Real Estate",
    AccountCategory.VEHICLES_AND_PROPERTY: "Vehicles & Property",
    AccountCategory.BUSINESS: "Business",
    AccountCategory.SECURED_DEBT: "Secured Debt",
    AccountCategory.UNSECURED_DEBT: "Unsecured Debt",
    AccountCategory.OTHER_LIABILITIES: "Other Liabilities",
}

LIABILITY_CATEGORIES = frozenset({
    AccountCategory.SECURED_DEBT,
    AccountCategory.UNSECURED_DEBT,
    AccountCategory.OTHER_LIABILITIES,
})


class AccountType(str, Enum):
    """
    Fine-grained account types.

    Each type belongs to exactly one AccountCategory.
    """
    # Banking
    CHECKING = "checking"
    SAVINGS = "savings"
    MONEY_MARKET = "money_market"
    CD = "cd"
    CASH = "cash"

    # Investment
    BROKERAGE = "brokerage"
    RETIREMENT_401K = "retirement_401k"
    RETIREMENT_401K_ROTH = "retirement_401k_roth"
    IRA_TRADITIONAL = "ira_traditional"
    IRA_ROTH = "ira_roth"
    SEP_IRA = "sep_ira"
    RETIREMENT_403B = "retirement_403b"
    RETIREMENT_457 = "retirement_457"
    EDUCATION_529 = "education_529"
    HSA = "hsa"
    PENSION = "pension"

    # Real estate
    PRIMARY_RESIDENCE = "primary_residence"
    RENTAL_PROPERTY = "rental_property"
    VACATION_HOME = "vacation_home"
    LAND = "land"

    # Vehicles & property
    VEHICLE = "vehicle"
    BOAT = "boat"
    RV = "rv"
    PERSONAL_PROPERTY = "personal_property"

    # Business
    BUSINESS_ASSET = "business_asset"
    BUSINESS_ACCOUNT = "business_account"

    # Secured debt
    MORTGAGE = "mortgage"
    AUTO_LOAN = "auto_loan"
    HOME_EQUITY_LOAN = "home_equity_loan"
    HELOC = "heloc"

    # Unsecured debt
    CREDIT_CARD = "credit_card"
    PERSONAL_LOAN = "personal_loan"
    STUDENT_LOAN = "student_loan"
    MEDICAL_DEBT = "medical_debt"

    # Other liabilities
    OTHER_LOAN = "other_loan"
    LIABILITY = "liability"

    @property
    def category(self) -> AccountCategory:
        return _TYPE_CATEGORIES[self]

    @property
    def display_name(self) -> str:
        return _TYPE_DISPLAY_NAMES.get(self, self.value.replace("_", " ").title())


_TYPE_CATEGORIES = {
    AccountType.CHECKING: AccountCategory.BANKING,
    AccountType.SAVINGS: AccountCategory.BANKING,
    AccountType.MONEY_MARKET: AccountCategory.BANKING,
    AccountType.CD: AccountCategory.BANKING,
    AccountType.CASH: AccountCategory.BANKING,
    AccountType.BROKERAGE: AccountCategory.INVESTMENT,
    AccountType.RETIREMENT_401K: AccountCategory.INVESTMENT,
    AccountType.RETIREMENT_401K_ROTH: AccountCategory.INVESTMENT,
    AccountType.IRA_TRADITIONAL: AccountCategory.INVESTMENT,
    AccountType.IRA_ROTH: AccountCategory.INVESTMENT,
    AccountType.SEP_IRA: AccountCategory.INVESTMENT,
    AccountType.RETIREMENT_403B: AccountCategory.INVESTMENT,
    AccountType.RETIREMENT_457: AccountCategory.INVESTMENT,
    AccountType.EDUCATION_529: AccountCategory.INVESTMENT,
    AccountType.HSA: AccountCategory.INVESTMENT,
    AccountType.PENSION: AccountCategory.INVESTMENT,
    AccountType.PRIMARY_RESIDENCE: AccountCategory.REAL_ESTATE,
    AccountType.RENTAL_PROPERTY: AccountCategory.REAL_ESTATE,
    AccountType.VACATION_HOME: AccountCategory.REAL_ESTATE,
    AccountType.LAND: AccountCategory.REAL_ESTATE,
    AccountType.VEHICLE: AccountCategory.VEHICLES_AND_PROPERTY,
    AccountType.BOAT: AccountCategory.VEHICLES_AND_PROPERTY,
    AccountType.RV: AccountCategory.VEHICLES_AND_PROPERTY,
    AccountType.PERSONAL_PROPERTY: AccountCategory.VEHICLES_AND_PROPERTY,
    AccountType.BUSINESS_ASSET: AccountCategory.BUSINESS,
    AccountType.BUSINESS_ACCOUNT: AccountCategory.BUSINESS,
    AccountType.MORTGAGE: AccountCategory.SECURED_DEBT,
    AccountType.AUTO_LOAN: AccountCategory.SECURED_DEBT,
    AccountType.HOME_EQUITY_LOAN: AccountCategory.SECURED_DEBT,
    AccountType.HELOC: AccountCategory.SECURED_DEBT,
    AccountType.CREDIT_CARD: AccountCategory.UNSECURED_DEBT,
    AccountType.PERSONAL_LOAN: AccountCategory.UNSECURED_DEBT,
    AccountType.STUDENT_LOAN: AccountCategory.UNSECURED_DEBT,
    AccountType.MEDICAL_DEBT: AccountCategory.UNSECURED_DEBT,
    AccountType.OTHER_LOAN: AccountCategory.OTHER_LIABILITIES,
    AccountType.LIABILITY: AccountCategory.OTHER_LIABILITIES,
}

# Only the names that differ from a title-cased value
_TYPE_DISPLAY_NAMES = {
    AccountType.CD: "Certificate of Deposit",
    AccountType.RETIREMENT_401K: "401(k)",
    AccountType.RETIREMENT_401K_ROTH: "Roth 401(k)",
    AccountType.IRA_TRADITIONAL: "Traditional IRA",
    AccountType.IRA_ROTH: "Roth IRA",
    AccountType.SEP_IRA: "SEP IRA",
    AccountType.RETIREMENT_403B: "403(b)",
    AccountType.RETIREMENT_457: "457",
    AccountType.EDUCATION_529: "529 Plan",
    AccountType.HSA: "HSA",
    AccountType.RV: "RV",
    AccountType.HELOC: "HELOC",
}


# =============================================================================
# CORE MODELS
# =============================================================================

class Account(BaseModel):
    """
    A tracked account.

    Either `category` or `account_type` must be given. When only the
    type is given, the category is derived from it.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique account ID"
    )
    user_id: UUID = Field(
        ...,
        description="Owning user"
    )
    name: str = Field(
        default="",
        max_length=200,
        description="Display name of the account"
    )
    account_type: Optional[AccountType] = Field(
        default=None,
        description="Fine-grained account type"
    )
    category: AccountCategory = Field(
        ...,
        description="Category driving the projection model"
    )
    current_balance: Decimal = Field(
        default=Decimal("0"),
        description="Balance as of now"
    )
    is_active: bool = True

    @model_validator(mode="before")
    @classmethod
    def derive_category(cls, data: Any) -> Any:
        """Fill in the category from the account type when it is missing."""
        if isinstance(data, dict) and data.get("category") is None:
            account_type = data.get("account_type")
            if account_type is not None:
                data = {**data, "category": AccountType(account_type).category}
        return data

    @model_validator(mode="after")
    def validate_type_matches_category(self) -> "Account":
        if self.account_type is not None and self.account_type.category != self.category:
            raise ValueError(
                f"Account type {self.account_type.value} does not belong "
                f"to category {self.category.value}"
            )
        return self

    @computed_field
    @property
    def is_liability(self) -> bool:
        return self.category.is_liability

    @property
    def type_display_name(self) -> str:
        if self.account_type is not None:
            return self.account_type.display_name
        return self.category.display_name


class BalanceObservation(BaseModel):
    """
    A balance recorded for an account at a point in time.

    Observations are sparse and irregular. Ties on `recorded_at`
    are resolved in favour of the one inserted last.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: UUID = Field(default_factory=uuid4)
    account_id: UUID
    balance: Decimal
    recorded_at: datetime
    notes: Optional[str] = Field(
        default=None,
        max_length=1000,
    )

    @field_validator("recorded_at")
    @classmethod
    def normalize_timezone(cls, v: datetime) -> datetime:
        """Store timestamps as naive UTC so aware and naive values compare."""
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v
