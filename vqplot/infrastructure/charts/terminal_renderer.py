"""Terminal chart backend (plotext 5.x module API)."""
from __future__ import annotations

from typing import Optional

import plotext as plt

from vqplot.config import settings
from vqplot.domain.models import MetricChart


def render_text(
    chart: MetricChart,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> str:
    """Draw the chart on a fixed-size character canvas and return it as text.

    The canvas keeps the requested size even when the terminal is smaller.
    """
    plt.clear_figure()
    plt.limit_size(False, False)
    plt.plot_size(width or settings.terminal_width, height or settings.terminal_height)
    for entry in chart.entries:
        plt.plot(entry.series.frame_indices, entry.series.values, label=entry.caption)
    plt.title(chart.axis_label)
    plt.xlabel("Frames")
    plt.ylabel(chart.axis_label)
    canvas = plt.build()
    plt.clear_figure()
    return canvas
