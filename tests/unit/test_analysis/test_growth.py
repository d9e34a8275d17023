#!/usr/bin/env python3
"""
Tests for net worth series building and growth rates.
"""

import math

import pytest

from networth.analysis.growth import (
    NOT_APPLICABLE,
    build_series,
    build_view,
    compute_growth,
    format_rate,
    view_from_store,
)
from networth.entries.validator import validate_entry


def _snapshot(day: str, assets: str, debts: str = "0"):
    return validate_entry(day, assets, debts, "")


class TestBuildSeries:
    """Test the ascending chart series."""

    def test_series_is_ascending(self, sample_entries):
        series = build_series(reversed(sample_entries))
        assert series.labels == ["01/01/2023", "07/01/2023", "01/01/2024"]
        assert series.assets == [1000.0, 1500.5, 2000.0]
        assert series.debts == [250.0, 200.0, 100.25]
        assert series.net_worth == [750.0, 1300.5, 1899.75]
        assert len(series) == 3

    def test_empty(self):
        assert len(build_series([])) == 0


class TestComputeGrowth:
    """Test compounded growth between the first and last entries."""

    def test_fewer_than_two_entries(self):
        assert compute_growth([]).is_applicable is False
        single = compute_growth([_snapshot("2024-01-01", "100")])
        assert single.monthly_rate is None
        assert single.yearly_rate is None

    def test_decline_over_a_year(self):
        stats = compute_growth([_snapshot("2023-01-01", "1000"), _snapshot("2024-01-01", "500")])
        assert stats.days == 365
        assert stats.yearly_rate == pytest.approx(-0.5)
        assert stats.monthly_rate == pytest.approx(0.5 ** (30 / 365) - 1)
        assert stats.monthly_rate < 0

    def test_swapped_endpoints_flip_sign(self):
        """Swapping begin and end turns a decline into growth."""
        stats = compute_growth([_snapshot("2023-01-01", "500"), _snapshot("2024-01-01", "1000")])
        assert stats.yearly_rate == pytest.approx(1.0)
        assert stats.monthly_rate > 0

    def test_entry_order_does_not_matter(self, sample_entries):
        assert compute_growth(sample_entries) == compute_growth(list(reversed(sample_entries)))

    def test_short_span_extrapolates_from_daily(self):
        stats = compute_growth([_snapshot("2024-01-01", "1000"), _snapshot("2024-01-11", "1100")])
        daily = 1.1 ** (1 / 10) - 1
        assert stats.daily_rate == pytest.approx(daily)
        assert stats.monthly_rate == pytest.approx(daily * 30)
        assert stats.yearly_rate == pytest.approx(daily * 30 * 12)

    def test_sub_year_span_extrapolates_from_monthly(self):
        stats = compute_growth([_snapshot("2024-01-01", "1000"), _snapshot("2024-03-31", "1200")])
        monthly = 1.2 ** (1 / (90 / 30)) - 1
        assert stats.monthly_rate == pytest.approx(monthly)
        assert stats.yearly_rate == pytest.approx(monthly * 12)

    def test_zero_start_not_applicable(self):
        stats = compute_growth([_snapshot("2023-01-01", "100", "100"), _snapshot("2024-01-01", "500")])
        assert stats.begin_net_worth.to_cents() == 0
        assert stats.monthly_rate is None
        assert stats.yearly_rate is None
        assert format_rate(stats.yearly_rate) == NOT_APPLICABLE

    def test_negative_net_worth_improving_is_positive(self):
        """Debt shrinking from 1000 to 500 is growth even though the ratio is below one."""
        stats = compute_growth([_snapshot("2023-01-01", "0", "1000"), _snapshot("2024-01-01", "0", "500")])
        assert stats.yearly_rate == pytest.approx(0.5)
        assert stats.monthly_rate > 0

    def test_negative_net_worth_worsening_is_negative(self):
        stats = compute_growth([_snapshot("2023-01-01", "0", "500"), _snapshot("2024-01-01", "0", "1000")])
        assert stats.yearly_rate == pytest.approx(-1.0)

    def test_zero_crossing_over_whole_year(self):
        """Crossing zero over exactly one year still has a real yearly rate."""
        stats = compute_growth([_snapshot("2023-01-01", "0", "1000"), _snapshot("2024-01-01", "500")])
        assert stats.yearly_rate == pytest.approx(1.5)
        assert stats.monthly_rate is None
        assert stats.is_applicable is False

    def test_zero_crossing_over_one_month(self):
        stats = compute_growth([_snapshot("2024-01-01", "100"), _snapshot("2024-01-31", "0", "100")])
        assert stats.days == 30
        assert stats.daily_rate is None
        assert stats.monthly_rate == pytest.approx(-2.0)
        assert stats.yearly_rate == pytest.approx(-24.0)
        assert format_rate(stats.monthly_rate) == "-200%"
        assert format_rate(stats.yearly_rate) == "-2,400%"

    def test_zero_crossing_over_fractional_periods_not_applicable(self):
        stats = compute_growth([_snapshot("2024-01-01", "100"), _snapshot("2024-02-15", "0", "100")])
        assert stats.monthly_rate is None
        assert stats.yearly_rate is None
        assert format_rate(stats.yearly_rate) == NOT_APPLICABLE

    def test_no_change(self):
        stats = compute_growth([_snapshot("2023-01-01", "1000"), _snapshot("2024-01-01", "1000")])
        assert stats.yearly_rate == 0
        assert format_rate(stats.yearly_rate) == "0%"


class TestFormatRate:
    """Test percentage display."""

    @pytest.mark.parametrize(
        "rate,expected",
        [
            (0.05, "5%"),
            (-0.5, "-50%"),
            (1.0, "100%"),
            (0.1234, "12.34%"),
            (0.125, "12.5%"),
            (None, "N/A"),
            (math.nan, "N/A"),
            (math.inf, "N/A"),
        ],
    )
    def test_format_rate(self, rate, expected):
        assert format_rate(rate) == expected


class TestBuildView:
    """Test the combined view."""

    def test_rows_newest_first(self, sample_entries):
        view = build_view(sample_entries)
        assert [row.key for row in view.rows] == ["2024-01-01", "2023-07-01", "2023-01-01"]
        assert view.latest.key == "2024-01-01"
        assert view.series.labels[0] == "01/01/2023"

    def test_empty_view(self):
        view = build_view([])
        assert view.rows == []
        assert view.latest is None
        assert view.growth.is_applicable is False

    def test_view_from_store(self, store, sample_entries):
        for entry in sample_entries:
            store.put(entry)
        view = view_from_store(store)
        assert view.growth.begin_net_worth.to_cents() == 75000
        assert view.growth.end_net_worth.to_cents() == 189975
