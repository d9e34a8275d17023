#!/usr/bin/env python3
"""
Net Worth Aggregation and Growth Rates

Derives the ascending chart series and compounded growth statistics from the
full entry set. Nothing here is stored; everything is recomputed after each
store mutation.

Growth is measured between the chronologically first and last entries:

    daily   = (end / begin) ** (1 / days) - 1
    monthly = (end / begin) ** (1 / (days / 30)) - 1    when days >= 30
            = daily * 30                                 otherwise
    yearly  = (end / begin) ** (1 / (days / 365)) - 1   when days >= 365
            = monthly * 12                               otherwise

The power form loses the direction of change when net worth is negative, so
the magnitude is kept and the sign is forced to match ``end - begin``. A zero
starting net worth has no rate. When net worth crosses zero the ratio is
negative and only a whole number of periods gives a real-valued power; any
rate that is undefined or non-finite is reported as None ("N/A").
"""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..core.money import Money
from ..entries.datastore import EntryStore
from ..entries.models import Entry, SortOrder

logger = logging.getLogger(__name__)

DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365
NOT_APPLICABLE = "N/A"


@dataclass
class ChartSeries:
    """Parallel ascending-by-date sequences for the trend chart."""

    labels: list[str] = field(default_factory=list)
    assets: list[float] = field(default_factory=list)
    debts: list[float] = field(default_factory=list)
    net_worth: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.labels)


@dataclass
class GrowthStats:
    """
    Growth between the first and last entries.

    Rates are fractions (0.05 == 5%). None means not applicable: fewer than
    two entries, a zero starting net worth, or a zero crossing spread over a
    fractional number of periods.
    """

    days: int = 0
    begin_net_worth: Money | None = None
    end_net_worth: Money | None = None
    daily_rate: float | None = None
    monthly_rate: float | None = None
    yearly_rate: float | None = None

    @property
    def is_applicable(self) -> bool:
        return self.monthly_rate is not None and self.yearly_rate is not None


@dataclass
class NetWorthView:
    """Everything the presentation layer needs after a reload."""

    rows: list[Entry]
    series: ChartSeries
    growth: GrowthStats

    @property
    def latest(self) -> Entry | None:
        return self.rows[0] if self.rows else None


def _ascending(entries: Iterable[Entry]) -> list[Entry]:
    return sorted(entries, key=lambda entry: entry.date)


def build_series(entries: Iterable[Entry]) -> ChartSeries:
    """Build the ascending label/assets/debts/net-worth series."""
    series = ChartSeries()
    for entry in _ascending(entries):
        series.labels.append(entry.date.to_display_string())
        series.assets.append(entry.assets.to_float())
        series.debts.append(entry.debts.to_float())
        series.net_worth.append(entry.net_worth.to_float())
    return series


def _compound_rate(ratio: float, periods: float) -> float | None:
    """
    (ratio ** (1 / periods)) - 1, or None when undefined over the reals.

    A negative ratio only has a real root when the exponent is integral.
    """
    if periods <= 0:
        return None
    try:
        rate = math.pow(ratio, 1 / periods) - 1
    except (ValueError, OverflowError):
        return None
    return rate if math.isfinite(rate) else None


def _signed(rate: float | None, direction: int) -> float | None:
    if rate is None or not math.isfinite(rate):
        return None
    if direction > 0:
        return abs(rate)
    if direction < 0:
        return -abs(rate)
    return rate


def compute_growth(entries: Iterable[Entry]) -> GrowthStats:
    """
    Compute growth statistics from the first and last entries by date.

    Args:
        entries: Entries in any order

    Returns:
        GrowthStats; rates are None when not applicable
    """
    ordered = _ascending(entries)
    if len(ordered) < 2:
        return GrowthStats()

    first, last = ordered[0], ordered[-1]
    days = first.date.days_until(last.date)
    begin = first.net_worth
    end = last.net_worth
    stats = GrowthStats(days=days, begin_net_worth=begin, end_net_worth=end)

    if days <= 0:
        return stats

    if begin.to_cents() == 0:
        logger.debug("Starting net worth is zero; growth rate not applicable")
        return stats

    ratio = end.to_cents() / begin.to_cents()
    daily = _compound_rate(ratio, days)

    if days >= DAYS_PER_MONTH:
        monthly = _compound_rate(ratio, days / DAYS_PER_MONTH)
    else:
        monthly = daily * DAYS_PER_MONTH if daily is not None else None

    if days >= DAYS_PER_YEAR:
        yearly = _compound_rate(ratio, days / DAYS_PER_YEAR)
    else:
        yearly = monthly * 12 if monthly is not None else None

    direction = (end.to_cents() > begin.to_cents()) - (end.to_cents() < begin.to_cents())
    stats.daily_rate = _signed(daily, direction)
    stats.monthly_rate = _signed(monthly, direction)
    stats.yearly_rate = _signed(yearly, direction)
    return stats


def format_rate(rate: float | None) -> str:
    """Format a growth rate as a percentage, or "N/A"."""
    if rate is None or not math.isfinite(rate):
        return NOT_APPLICABLE
    percent = f"{rate * 100:,.2f}".rstrip("0").rstrip(".")
    if percent in ("-0", ""):
        percent = "0"
    return f"{percent}%"


def build_view(entries: Iterable[Entry]) -> NetWorthView:
    """Build table rows (newest first), chart series and growth from a full scan."""
    ascending = _ascending(entries)
    return NetWorthView(
        rows=list(reversed(ascending)),
        series=build_series(ascending),
        growth=compute_growth(ascending),
    )


def view_from_store(store: EntryStore) -> NetWorthView:
    """Re-scan the store and rebuild the view."""
    return build_view(store.list_all(SortOrder.ASCENDING))
