"""Period granularity."""

from enum import Enum


class Granularity(str, Enum):
    """Calendar interval used as the unit of reconstruction and projection."""
    QUARTER = "quarter"
    MONTH = "month"

    @property
    def months_per_period(self) -> int:
        return 3 if self is Granularity.QUARTER else 1

    @property
    def periods_per_year(self) -> int:
        return 12 // self.months_per_period
