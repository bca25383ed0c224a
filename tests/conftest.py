"""Shared fixtures and builders for the engine tests."""

from datetime import date, datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from networth.config import StorageSettings
from networth.models import Account, AccountCategory, AccountType, BalanceObservation


AS_OF = date(2024, 6, 15)


def make_account(user_id, category=None, account_type=None, balance="0", name="Account", **kwargs):
    return Account(
        user_id=user_id,
        name=name,
        category=category,
        account_type=account_type,
        current_balance=Decimal(balance),
        **kwargs,
    )


def observe(account, balance, when, notes=None):
    if isinstance(when, date) and not isinstance(when, datetime):
        when = datetime(when.year, when.month, when.day, 12, 0)
    return BalanceObservation(
        account_id=account.id,
        balance=Decimal(balance),
        recorded_at=when,
        notes=notes,
    )


@pytest.fixture(name="make_account")
def make_account_fixture():
    return make_account


@pytest.fixture(name="observe")
def observe_fixture():
    return observe


@pytest.fixture
def user_id():
    return uuid4()


@pytest.fixture
def fast_retry():
    """Retry settings with no backoff so tests don't sleep."""
    return StorageSettings(
        retry_attempts=3,
        retry_wait_min_seconds=0,
        retry_wait_max_seconds=0,
    )


@pytest.fixture
def brokerage(user_id):
    return make_account(
        user_id,
        account_type=AccountType.BROKERAGE,
        balance="100000.00",
        name="Brokerage",
    )


@pytest.fixture
def credit_card(user_id):
    return make_account(
        user_id,
        category=AccountCategory.UNSECURED_DEBT,
        balance="5000.00",
        name="Credit Card",
    )
