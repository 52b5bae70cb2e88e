"""Per-metric series extraction."""
from vqplot.domain.errors import ArithmeticDegeneracyError
from vqplot.domain.models.metrics import Metric, MetricSeries, Report


def reciprocal_distance(value: float) -> float:
    """Map a similarity ratio to 1/(1-v) so values near 1.0 spread out."""
    if value == 1.0:
        raise ArithmeticDegeneracyError("similarity value 1.0 has no 1/(1-v) transform")
    return 1.0 / (1.0 - value)


def extract_series(report: Report, metric: Metric) -> MetricSeries:
    """Build the (frame index, value) series of one metric, in report order."""
    indices = [frame.frame_idx for frame in report.frames]
    raw = [frame.metrics.value(metric) for frame in report.frames]
    if metric.is_similarity:
        values = [reciprocal_distance(v) for v in raw]
    else:
        values = raw
    return MetricSeries(metric=metric, frame_indices=indices, values=values)
