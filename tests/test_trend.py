"""Tests for the trend estimator."""

from decimal import Decimal

from networth.engine.trend import estimate_trend


def D(values):
    return [Decimal(v) for v in values]


class TestEstimateTrend:
    """Tests for estimate_trend."""

    def test_fewer_than_two_periods_is_stable(self):
        for series in ([], D(["1000"])):
            trend = estimate_trend(series)
            assert trend.period_change == Decimal("0")
            assert trend.annual_growth_rate == Decimal("0")
            assert trend.direction == "stable"

    def test_rising_series(self):
        trend = estimate_trend(D(["1000", "1100", "1200"]))

        assert trend.period_change == Decimal("100.00")
        # 20% over two quarters -> 40% annualized
        assert trend.annual_growth_rate == Decimal("40.00")
        assert trend.direction == "up"
        assert trend.monthly_change == Decimal("33.33")

    def test_falling_series(self):
        trend = estimate_trend(D(["6000", "5500", "5000"]))
        assert trend.period_change == Decimal("-500.00")
        assert trend.direction == "down"

    def test_small_change_is_stable(self):
        # 1% per period is under the 2% noise threshold
        trend = estimate_trend(D(["1000", "1010", "1020"]))
        assert trend.direction == "stable"
        assert trend.period_change == Decimal("10.00")

    def test_uses_trailing_eight_periods(self):
        series = D(["0", "0", "800", "900", "1000", "1100", "1200", "1300", "1400", "1500"])
        trend = estimate_trend(series)
        # window starts at 800
        assert trend.period_change == Decimal("100.00")

    def test_zero_first_balance_has_no_rate(self):
        trend = estimate_trend(D(["0", "0", "500"]))
        assert trend.annual_growth_rate == Decimal("0")
        assert trend.period_change == Decimal("250.00")
        assert trend.direction == "up"

    def test_monthly_granularity_annualizes_by_twelve(self):
        trend = estimate_trend(D(["1000", "1010"]), periods_per_year=12)
        assert trend.annual_growth_rate == Decimal("12.00")
        assert trend.monthly_change == Decimal("10.00")
