"""Domain models."""
from vqplot.domain.models.chart import ChartEntry, MetricChart
from vqplot.domain.models.metrics import (
    FrameMetrics,
    FrameRecord,
    Metric,
    MetricSeries,
    Report,
    SummaryStats,
)

__all__ = [
    "ChartEntry",
    "FrameMetrics",
    "FrameRecord",
    "Metric",
    "MetricChart",
    "MetricSeries",
    "Report",
    "SummaryStats",
]
