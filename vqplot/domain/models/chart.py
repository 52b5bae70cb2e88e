"""Chart domain models (input of the renderers)."""
from typing import List

from pydantic import BaseModel, ConfigDict

from vqplot.domain.models.metrics import Metric, MetricSeries, SummaryStats


class ChartEntry(BaseModel):
    """One input file's line on a metric chart."""

    model_config = ConfigDict(frozen=True)

    caption: str
    color: str
    summary: str
    series: MetricSeries
    stats: SummaryStats


class MetricChart(BaseModel):
    """Everything a renderer needs to draw one metric across all files."""

    model_config = ConfigDict(frozen=True)

    metric: Metric
    axis_label: str
    header: str
    output_name: str
    entries: List[ChartEntry]
