"""Tests for the historical report builder."""

from datetime import date
from decimal import Decimal

from networth.engine.report import build_historical_report, build_net_worth_history
from networth.models import AccountCategory, AccountType, Granularity


AS_OF = date(2024, 6, 15)


class TestHistoricalReport:
    """Tests for build_historical_report."""

    def test_no_accounts(self):
        report = build_historical_report([], [], as_of=AS_OF)
        assert report.periods == []
        assert report.accounts == []
        assert report.totals.net_worth == []

    def test_no_history(self, make_account, user_id):
        account = make_account(user_id, AccountCategory.BANKING)
        report = build_historical_report([account], [], as_of=AS_OF)
        assert report.accounts == []

    def test_zero_base_percent_change(self, make_account, observe, user_id):
        """Net worth 0 then 5000: both percent changes are None."""
        savings = make_account(user_id, AccountCategory.BANKING, name="Savings")
        loan = make_account(user_id, AccountCategory.OTHER_LIABILITIES, name="Loan")
        observations = [
            observe(savings, "1000", date(2024, 2, 1)),
            observe(loan, "1000", date(2024, 2, 1)),
            observe(savings, "5000", date(2024, 5, 1)),
            observe(loan, "0", date(2024, 5, 1)),
        ]

        report = build_historical_report([savings, loan], observations, as_of=AS_OF)

        assert report.labels == ["Q1 2024", "Q2 2024"]
        assert report.totals.net_worth == [Decimal("0"), Decimal("5000")]
        assert report.totals.percent_change == [None, None]

    def test_balances_and_totals(self, make_account, observe, user_id):
        checking = make_account(user_id, account_type=AccountType.CHECKING, name="Checking")
        card = make_account(user_id, account_type=AccountType.CREDIT_CARD, name="Card")
        observations = [
            observe(checking, "1000", date(2023, 11, 1)),
            observe(card, "200", date(2024, 1, 5)),
            observe(checking, "1500", date(2024, 4, 2)),
        ]

        report = build_historical_report([card, checking], observations, as_of=AS_OF)

        assert report.periods == [date(2023, 12, 31), date(2024, 3, 31), date(2024, 6, 30)]
        assert [row.name for row in report.accounts] == ["Checking", "Card"]
        assert report.accounts[0].balances == [Decimal("1000"), Decimal("1000"), Decimal("1500")]
        assert report.accounts[1].balances == [Decimal("0"), Decimal("200"), Decimal("200")]
        assert report.accounts[1].type == "Credit Card"
        assert report.totals.net_worth == [Decimal("1000"), Decimal("800"), Decimal("1300")]
        assert report.totals.percent_change == [None, Decimal("-20.00"), Decimal("62.50")]

    def test_single_boundary_observation_repeats(self, make_account, observe, user_id):
        account = make_account(user_id, AccountCategory.INVESTMENT, name="Fund")
        observations = [observe(account, "750", date(2023, 9, 30))]

        report = build_historical_report([account], observations, as_of=AS_OF)

        assert report.accounts[0].balances == [Decimal("750")] * 4

    def test_explicit_start_extends_table(self, make_account, observe, user_id):
        account = make_account(user_id, AccountCategory.BANKING)
        observations = [observe(account, "400", date(2024, 5, 1))]

        report = build_historical_report(
            [account], observations, as_of=AS_OF, earliest=date(2023, 11, 15)
        )

        assert report.labels == ["Q4 2023", "Q1 2024", "Q2 2024"]
        assert report.accounts[0].balances == [Decimal("0"), Decimal("0"), Decimal("400")]
        assert report.totals.percent_change == [None, None, None]

    def test_monthly_granularity(self, make_account, observe, user_id):
        account = make_account(user_id, AccountCategory.BANKING)
        observations = [observe(account, "10", date(2024, 4, 30))]

        report = build_historical_report(
            [account], observations, as_of=AS_OF, granularity=Granularity.MONTH
        )

        assert report.labels == ["Apr 2024", "May 2024", "Jun 2024"]


class TestNetWorthHistory:
    """Tests for build_net_worth_history."""

    def test_empty(self):
        assert build_net_worth_history([], [], as_of=AS_OF).months == []

    def test_monthly_points(self, make_account, observe, user_id):
        savings = make_account(user_id, AccountCategory.BANKING)
        card = make_account(user_id, AccountCategory.UNSECURED_DEBT)
        observations = [
            observe(savings, "1000", date(2024, 3, 10)),
            observe(card, "100", date(2024, 4, 10)),
            observe(savings, "1200", date(2024, 5, 10)),
        ]

        history = build_net_worth_history([savings, card], observations, as_of=AS_OF)

        assert [m.period_end for m in history.months] == [
            date(2024, 3, 31), date(2024, 4, 30), date(2024, 5, 31), date(2024, 6, 30),
        ]
        first, april, may, june = history.months
        assert first.change is None and first.percent_change is None
        assert april.assets == Decimal("1000")
        assert april.liabilities == Decimal("100")
        assert april.net_worth == Decimal("900")
        assert april.change == Decimal("-100")
        assert april.percent_change == Decimal("-10.00")
        assert may.net_worth == Decimal("1100")
        assert june.change == Decimal("0")
