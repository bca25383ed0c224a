"""
Report Builder

Historical-only view of the same reconstruction the forecast uses:
one forward-filled balance per account per period, plus a "Net Worth"
row and a "% Change" row. No projection math is involved.
"""

from datetime import date
from typing import Optional, Sequence

from networth.engine.aggregator import aggregate, percent_changes
from networth.engine.bucketizer import bucketize, earliest_observation, group_by_account
from networth.engine.forecast import order_accounts
from networth.engine.periods import DateLike, as_date, generate_periods, period_label
from networth.models.account import Account, BalanceObservation
from networth.models.period import Granularity
from networth.models.results import (
    AccountPeriodBalances,
    HistoricalReport,
    NetWorthHistory,
    ReportTotals,
)


def build_historical_report(
    accounts: Sequence[Account],
    observations: Sequence[BalanceObservation],
    as_of: Optional[DateLike] = None,
    granularity: Granularity = Granularity.QUARTER,
    earliest: Optional[DateLike] = None,
) -> HistoricalReport:
    """
    Account-by-period balance table through `as_of`.

    The table starts at `earliest` when given, otherwise at the first
    observation. Empty when there are no accounts or no observations.
    """
    first_seen = earliest_observation(observations)
    if not accounts or first_seen is None:
        return HistoricalReport(granularity=granularity)

    start = as_date(earliest) if earliest is not None else first_seen
    as_of = as_date(as_of) if as_of is not None else date.today()
    periods = generate_periods(start, as_of, granularity)
    by_account = group_by_account(observations)

    rows = [
        AccountPeriodBalances(
            id=account.id,
            name=account.name,
            type=account.type_display_name,
            is_liability=account.is_liability,
            balances=bucketize(by_account.get(account.id, []), periods),
        )
        for account in order_accounts(accounts)
    ]

    net_worth = [
        point.net_worth
        for point in aggregate(((r.is_liability, r.balances) for r in rows), periods)
    ]

    return HistoricalReport(
        granularity=granularity,
        periods=periods,
        labels=[period_label(p, granularity) for p in periods],
        accounts=rows,
        totals=ReportTotals(
            net_worth=net_worth,
            percent_change=percent_changes(net_worth),
        ),
    )


def build_net_worth_history(
    accounts: Sequence[Account],
    observations: Sequence[BalanceObservation],
    as_of: Optional[DateLike] = None,
) -> NetWorthHistory:
    """Monthly assets, liabilities and net worth with change from the prior month."""
    earliest = earliest_observation(observations)
    if not accounts or earliest is None:
        return NetWorthHistory()

    as_of = as_date(as_of) if as_of is not None else date.today()
    months = generate_periods(earliest, as_of, Granularity.MONTH)
    by_account = group_by_account(observations)

    rows = [
        (account.is_liability, bucketize(by_account.get(account.id, []), months))
        for account in accounts
    ]
    return NetWorthHistory(months=aggregate(rows, months))
