"""Chart building use case: reports in, one MetricChart per metric out."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from vqplot.config import settings
from vqplot.domain.models import ChartEntry, Metric, MetricChart, MetricSeries, SummaryStats
from vqplot.domain.services import (
    assign_colors,
    extract_series,
    format_header,
    format_summary,
    load_report,
    output_filename,
    summarize,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileMetrics:
    """Series and statistics of every selected metric for one input file."""

    caption: str
    series: Dict[Metric, MetricSeries]
    stats: Dict[Metric, SummaryStats]


def analyze_file(path: Union[str, Path], metrics: Sequence[Metric]) -> FileMetrics:
    """Load one report and reduce each selected metric."""
    report = load_report(path)
    series: Dict[Metric, MetricSeries] = {}
    stats: Dict[Metric, SummaryStats] = {}
    for metric in metrics:
        series[metric] = extract_series(report, metric)
        stats[metric] = summarize(series[metric].values)
    return FileMetrics(caption=Path(path).name, series=series, stats=stats)


def build_charts(
    paths: Sequence[Union[str, Path]],
    metrics: Optional[Sequence[Metric]] = None,
    palette: Optional[Sequence[str]] = None,
    palette_overflow: Optional[str] = None,
) -> List[MetricChart]:
    """
    Build one chart per metric, each holding a line for every input file.

    Args:
        paths: Report files, charted in this order.
        metrics: Metrics to chart (default: all, in Metric order).
        palette: Line colours (default: settings.palette).
        palette_overflow: "wrap" or "error" (default: settings.palette_overflow).

    Returns:
        Charts in metric order.

    Raises:
        PaletteExhaustedError: Too many files for the palette under "error".
        PathError: An input path is missing or a directory.
        ReportParseError: An input file is not a valid report.
        ArithmeticDegeneracyError: Single-frame report or similarity value of 1.0.
    """
    selected = list(metrics) if metrics else list(Metric)
    colors = assign_colors(
        len(paths),
        palette or settings.palette,
        palette_overflow or settings.palette_overflow,
    )

    files: List[FileMetrics] = []
    for i, path in enumerate(paths, 1):
        logger.info(f"[{i}/{len(paths)}] {path}")
        files.append(analyze_file(path, selected))

    header = format_header()
    captions = [f.caption for f in files]
    charts: List[MetricChart] = []
    for metric in selected:
        entries = [
            ChartEntry(
                caption=f.caption,
                color=color,
                summary=format_summary(f.stats[metric]),
                series=f.series[metric],
                stats=f.stats[metric],
            )
            for f, color in zip(files, colors)
        ]
        charts.append(
            MetricChart(
                metric=metric,
                axis_label=metric.axis_label,
                header=header,
                output_name=output_filename(metric, captions),
                entries=entries,
            )
        )
    return charts
