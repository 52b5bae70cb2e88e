"""Summary statistics over a metric series (pure math, no I/O)."""
import math
from typing import Sequence

import numpy as np

from vqplot.domain.errors import ArithmeticDegeneracyError
from vqplot.domain.models.metrics import SummaryStats

# Values are ordered on four truncated decimals.
ORDER_SCALE = 10000.0
KEY_MIN = -(2 ** 63)
KEY_MAX = 2 ** 63 - 1


def order_key(value: float) -> int:
    """trunc(v * 10000) saturated to the int64 range."""
    scaled = value * ORDER_SCALE
    if math.isinf(scaled):
        return KEY_MAX if scaled > 0 else KEY_MIN
    return min(max(math.trunc(scaled), KEY_MIN), KEY_MAX)


def discretized_sort(values: Sequence[float]) -> np.ndarray:
    """Stable sort keyed on order_key()."""
    return np.asarray(sorted(values, key=order_key), dtype=np.float64)


def summarize(values: Sequence[float]) -> SummaryStats:
    """
    Compute min, max, mean and sample variance.

    Raises:
        ValueError: No values.
        ArithmeticDegeneracyError: A single value (n - 1 == 0).
    """
    if len(values) == 0:
        raise ValueError("cannot summarize an empty series")
    if len(values) == 1:
        raise ArithmeticDegeneracyError("sample variance of a single value divides by zero")

    ordered = discretized_sort(values)
    mean = float(np.mean(ordered))
    variance = float(np.sum((ordered - mean) ** 2) / (len(ordered) - 1))

    return SummaryStats(
        min=float(ordered[0]),
        max=float(ordered[-1]),
        mean=mean,
        variance=variance,
    )
