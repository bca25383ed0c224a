"""Tests for the pure forecast pipeline."""

from datetime import date
from decimal import Decimal

from networth.engine.forecast import build_forecast, historical_periods
from networth.models import AccountCategory, AccountType, Granularity, ResolvedRates


AS_OF = date(2024, 6, 15)


class TestHistoricalPeriods:
    """Tests for the historical window."""

    def test_pads_to_minimum(self):
        periods = historical_periods(date(2024, 5, 1), AS_OF)
        assert periods == [
            date(2023, 9, 30),
            date(2023, 12, 31),
            date(2024, 3, 31),
            date(2024, 6, 30),
        ]

    def test_long_history_not_padded(self):
        periods = historical_periods(date(2022, 1, 10), AS_OF)
        assert periods[0] == date(2022, 3, 31)
        assert len(periods) == 10

    def test_no_minimum(self):
        assert historical_periods(date(2024, 5, 1), AS_OF, min_periods=0) == [date(2024, 6, 30)]


class TestBuildForecast:
    """Tests for build_forecast."""

    def test_no_accounts_is_empty(self):
        result = build_forecast([], [], as_of=AS_OF)

        assert result.accounts == []
        assert result.labels == []
        assert result.historical_net_worth == []
        assert result.forecast_net_worth == []
        assert result.is_empty

    def test_no_observations_is_empty(self, make_account, user_id):
        account = make_account(user_id, AccountCategory.BANKING, balance="5000")
        result = build_forecast([account], [], as_of=AS_OF)

        assert result.accounts == []
        assert result.labels == []

    def test_debt_payoff_scenario(self, make_account, observe, user_id):
        card = make_account(user_id, account_type=AccountType.CREDIT_CARD, balance="5000.00", name="Card")
        observations = [
            observe(card, "6500.00", date(2023, 8, 15)),
            observe(card, "6000.00", date(2023, 11, 15)),
            observe(card, "5500.00", date(2024, 2, 15)),
            observe(card, "5000.00", date(2024, 5, 15)),
        ]

        result = build_forecast([card], observations, as_of=AS_OF, forecast_months=60)
        forecast = result.accounts[0]

        assert forecast.historical_data == [
            Decimal("6500.00"), Decimal("6000.00"), Decimal("5500.00"), Decimal("5000.00"),
        ]
        assert forecast.trend.period_change == Decimal("-500.00")
        assert forecast.trend.direction == "down"
        assert forecast.payoff_date == date(2026, 12, 15)
        assert len(forecast.forecast_data) == 20
        assert forecast.forecast_data[9] == Decimal("0.00")
        assert all(value == 0 for value in forecast.forecast_data[9:])
        assert forecast.projected_balance == Decimal("0.00")

    def test_investment_projection_scenario(self, brokerage, observe):
        observations = [observe(brokerage, "100000.00", AS_OF)]

        result = build_forecast([brokerage], observations, as_of=AS_OF, forecast_months=48)

        assert result.accounts[0].projected_balance == Decimal("131079.60")
        assert result.summary.projected_assets == Decimal("131079.60")
        assert result.forecast_months == 48
        assert result.summary.projection_date == date(2028, 6, 15)

    def test_user_rates_flow_through(self, brokerage, observe):
        observations = [observe(brokerage, "100000.00", AS_OF)]
        rates = ResolvedRates(investment=Decimal("0"))

        result = build_forecast([brokerage], observations, rates=rates, as_of=AS_OF, forecast_months=12)

        assert result.accounts[0].forecast_data == [Decimal("100000.00")] * 4

    def test_series_shapes_and_labels(self, make_account, observe, user_id):
        savings = make_account(user_id, account_type=AccountType.SAVINGS, balance="20000", name="Savings")
        card = make_account(user_id, account_type=AccountType.CREDIT_CARD, balance="5000", name="Amex")
        observations = [
            observe(savings, "18000", date(2023, 1, 10)),
            observe(card, "6000", date(2023, 4, 10)),
            observe(savings, "20000", AS_OF),
            observe(card, "5000", AS_OF),
        ]

        result = build_forecast([card, savings], observations, as_of=AS_OF, forecast_months=12)

        assert len(result.historical_periods) == 6
        assert len(result.forecast_periods) == 4
        assert result.labels[0] == "Q1 2023"
        assert result.labels[-1] == "Q2 2025"
        assert len(result.labels) == 10
        for account in result.accounts:
            assert len(account.historical_data) == 6
            assert len(account.forecast_data) == 4
        # Assets come before liabilities
        assert [a.name for a in result.accounts] == ["Savings", "Amex"]

    def test_net_worth_identity_both_horizons(self, make_account, observe, user_id):
        house = make_account(user_id, account_type=AccountType.PRIMARY_RESIDENCE, balance="400000", name="House")
        mortgage = make_account(user_id, account_type=AccountType.MORTGAGE, balance="300000", name="Mortgage")
        car = make_account(user_id, account_type=AccountType.VEHICLE, balance="20000", name="Car")
        observations = [
            observe(house, "380000", date(2022, 6, 1)),
            observe(mortgage, "310000", date(2022, 6, 1)),
            observe(car, "25000", date(2022, 6, 1)),
            observe(house, "400000", date(2024, 4, 1)),
            observe(mortgage, "300000", date(2024, 4, 1)),
            observe(car, "20000", date(2024, 4, 1)),
        ]

        result = build_forecast([house, mortgage, car], observations, as_of=AS_OF)

        for index, point in enumerate(result.historical_net_worth):
            assets = sum(a.historical_data[index] for a in result.accounts if not a.is_liability)
            liabilities = sum(a.historical_data[index] for a in result.accounts if a.is_liability)
            assert point.net_worth == assets - liabilities
        for index, point in enumerate(result.forecast_net_worth):
            assets = sum(a.forecast_data[index] for a in result.accounts if not a.is_liability)
            liabilities = sum(a.forecast_data[index] for a in result.accounts if a.is_liability)
            assert point.net_worth == assets - liabilities

        assert result.historical_net_worth[0].percent_change is None
        assert result.forecast_net_worth[0].percent_change is None
        assert result.summary.projected_net_worth == result.forecast_net_worth[-1].net_worth

    def test_account_without_history_reconstructs_zeros(self, make_account, observe, user_id):
        tracked = make_account(user_id, AccountCategory.BANKING, balance="100", name="A")
        untracked = make_account(user_id, AccountCategory.BANKING, balance="50", name="B")
        observations = [observe(tracked, "100", AS_OF)]

        result = build_forecast([tracked, untracked], observations, as_of=AS_OF)

        assert result.accounts[1].historical_data == [Decimal("0")] * 4
        assert result.accounts[1].current_balance == Decimal("50")

    def test_monthly_granularity(self, brokerage, observe):
        observations = [observe(brokerage, "100000.00", date(2024, 1, 20))]

        result = build_forecast(
            [brokerage], observations, as_of=AS_OF,
            forecast_months=12, granularity=Granularity.MONTH,
        )

        assert result.labels[:6] == ["Jan 2024", "Feb 2024", "Mar 2024", "Apr 2024", "May 2024", "Jun 2024"]
        assert len(result.forecast_periods) == 12
        assert result.accounts[0].projected_balance == Decimal("107000.00")
