#!/usr/bin/env python3
"""
Analysis Package

Chart series, growth-rate statistics and trend chart rendering derived from
the full entry set.
"""

from .growth import (
    ChartSeries,
    GrowthStats,
    NetWorthView,
    build_series,
    build_view,
    compute_growth,
    format_rate,
    view_from_store,
)

__all__ = [
    "ChartSeries",
    "GrowthStats",
    "NetWorthView",
    "build_series",
    "build_view",
    "compute_growth",
    "format_rate",
    "view_from_store",
]
