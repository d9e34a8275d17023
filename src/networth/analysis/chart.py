#!/usr/bin/env python3
"""
Net Worth Trend Chart

Renders the ascending chart series as a line chart (assets, debts, net worth)
to an image file using matplotlib's non-interactive backend.
"""

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # Use non-interactive backend
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.ticker import FuncFormatter  # noqa: E402

from .growth import ChartSeries, GrowthStats, format_rate  # noqa: E402

logger = logging.getLogger(__name__)

ASSETS_COLOR = "#198754"
DEBTS_COLOR = "#dc3545"
NET_WORTH_COLOR = "#36a2eb"


def _currency_tick(value: float, _position: int) -> str:
    if abs(value) >= 1000:
        return f"${value / 1000:,.0f}k"
    return f"${value:,.0f}"


def render_trend_chart(
    series: ChartSeries,
    output_file: Path,
    growth: GrowthStats | None = None,
    figure_size: tuple[int, int] = (12, 6),
    dpi: int = 150,
) -> Path:
    """
    Draw the trend chart and save it.

    Args:
        series: Ascending chart series
        output_file: Destination image path (format from the suffix)
        growth: Optional growth stats shown in the title
        figure_size: Figure size in inches
        dpi: Output resolution

    Returns:
        Path of the written image

    Raises:
        ValueError: If the series is empty
    """
    if len(series) == 0:
        raise ValueError("No entries to chart")

    output_file.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=figure_size)
    try:
        ax.plot(series.labels, series.assets, label="Assets", color=ASSETS_COLOR, marker="o")
        ax.plot(series.labels, series.debts, label="Debts", color=DEBTS_COLOR, marker="o")
        ax.plot(series.labels, series.net_worth, label="Net Worth", color=NET_WORTH_COLOR, marker="o", linewidth=2)

        title = "Net Worth"
        if growth is not None:
            title += (
                f"  (monthly {format_rate(growth.monthly_rate)},"
                f" yearly {format_rate(growth.yearly_rate)})"
            )
        ax.set_title(title, fontweight="bold")
        ax.yaxis.set_major_formatter(FuncFormatter(_currency_tick))
        ax.grid(True, alpha=0.3)
        ax.legend(loc="upper left")
        fig.autofmt_xdate()
        fig.tight_layout()
        fig.savefig(output_file, dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)

    logger.info(f"Wrote trend chart with {len(series)} points to {output_file}")
    return output_file
