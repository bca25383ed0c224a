"""
Bucketizer

Turns an irregular sequence of balance observations into one balance
per period using forward fill:

- the value for a period is the latest observation dated on or before
  the period's end date
- a period with no new observation repeats the last known balance
- before the first observation the balance is zero

Observations dated after the final boundary do not affect the
reconstructed history. They only matter for the account's current balance.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence
from uuid import UUID

from networth.engine.periods import as_date
from networth.models.account import BalanceObservation


def bucketize(
    observations: Iterable[BalanceObservation],
    boundaries: Sequence[date],
) -> list[Decimal]:
    """
    Reconstruct one balance per period-end boundary.

    `observations` may be in any order. `boundaries` must be ascending.
    Equal timestamps resolve to the observation that comes later in the
    input, because the sort below is stable.
    """
    ordered = sorted(observations, key=lambda o: o.recorded_at)

    balances = []
    last_known = Decimal("0")
    position = 0
    for boundary in boundaries:
        while position < len(ordered) and as_date(ordered[position].recorded_at) <= boundary:
            last_known = ordered[position].balance
            position += 1
        balances.append(last_known)
    return balances


def group_by_account(
    observations: Iterable[BalanceObservation],
) -> dict[UUID, list[BalanceObservation]]:
    """Split observations per account, keeping input order within each."""
    grouped: dict[UUID, list[BalanceObservation]] = defaultdict(list)
    for observation in observations:
        grouped[observation.account_id].append(observation)
    return dict(grouped)


def earliest_observation(observations: Iterable[BalanceObservation]) -> Optional[date]:
    dates = [as_date(o.recorded_at) for o in observations]
    return min(dates) if dates else None
