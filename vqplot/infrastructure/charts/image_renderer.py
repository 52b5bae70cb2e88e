"""PNG chart backend (plotly, exported through kaleido)."""
from __future__ import annotations

import html
import logging
from pathlib import Path
from typing import Optional

import plotly.graph_objects as go

from vqplot.config import settings
from vqplot.domain.models import MetricChart

logger = logging.getLogger(__name__)

LEGEND_X = 0.02
LEGEND_TOP = 0.22
LEGEND_STEP = 0.05
LEGEND_FONT = "monospace"


def _legend_annotation(text: str, y: float, color: Optional[str] = None) -> dict:
    font = dict(family=LEGEND_FONT)
    if color:
        font["color"] = color
    return dict(
        text=html.escape(text),
        x=LEGEND_X,
        y=y,
        xref="paper",
        yref="paper",
        xanchor="left",
        yanchor="bottom",
        showarrow=False,
        font=font,
    )


def build_figure(chart: MetricChart) -> go.Figure:
    """
    Create the line chart of one metric.

    Each entry becomes a trace in its own colour; the header and the
    per-file summary lines are stacked in the lower-left corner.
    """
    fig = go.Figure()

    offset = LEGEND_TOP
    annotations = [_legend_annotation(chart.header, offset)]
    for entry in chart.entries:
        offset -= LEGEND_STEP
        annotations.append(_legend_annotation(entry.summary, offset, entry.color))
        fig.add_trace(go.Scatter(
            x=entry.series.frame_indices,
            y=entry.series.values,
            mode="lines",
            name=html.escape(entry.caption),
            line=dict(color=entry.color, width=1),
        ))

    fig.update_layout(
        xaxis_title="Frames",
        yaxis_title=html.escape(chart.axis_label),
        annotations=annotations,
        showlegend=True,
        template="plotly_white",
    )
    return fig


def output_path(chart: MetricChart, output_dir: Optional[Path] = None) -> Path:
    """Where write_png() puts the chart: <output_dir>/<chart.output_name>."""
    out_dir = Path(output_dir) if output_dir is not None else settings.output_dir
    return out_dir / chart.output_name


def write_png(
    chart: MetricChart,
    output_dir: Optional[Path] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Path:
    """Render the chart to <output_dir>/<chart.output_name> and return the path."""
    out_path = output_path(chart, output_dir)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig = build_figure(chart)
    fig.write_image(
        str(out_path),
        format="png",
        width=width or settings.image_width,
        height=height or settings.image_height,
    )
    logger.debug(f"Wrote {len(chart.entries)} series to {out_path}")
    return out_path
