"""Metrics domain models."""
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, model_validator


class Metric(str, Enum):
    """Per-frame quality metric reported by libvmaf."""

    VMAF = "vmaf"
    PSNR = "psnr"
    MS_SSIM = "ms_ssim"

    @property
    def canonical_name(self) -> str:
        return self.value.upper()

    @property
    def is_similarity(self) -> bool:
        """Similarity ratios are bounded by 1.0 and get the 1/(1-x) transform."""
        return self.canonical_name.endswith("SSIM")

    @property
    def axis_label(self) -> str:
        if self.is_similarity:
            return f"1/(1-{self.canonical_name})"
        return self.canonical_name


class FrameMetrics(BaseModel):
    """Metric values of a single frame."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    vmaf: StrictFloat
    psnr: StrictFloat
    ms_ssim: StrictFloat

    def value(self, metric: Metric) -> float:
        return getattr(self, metric.value)


class FrameRecord(BaseModel):
    """One entry of the report's frame list."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    frame_idx: StrictInt = Field(alias="frameNum", ge=0)
    metrics: FrameMetrics


class Report(BaseModel):
    """Parsed metrics report, frames kept in file order."""

    model_config = ConfigDict(frozen=True)

    frames: List[FrameRecord] = Field(min_length=1)


class MetricSeries(BaseModel):
    """(frame index, value) pairs of one metric from one report."""

    model_config = ConfigDict(frozen=True)

    metric: Metric
    frame_indices: List[int]
    values: List[float]

    @model_validator(mode="after")
    def _check_lengths(self) -> "MetricSeries":
        if len(self.frame_indices) != len(self.values):
            raise ValueError("frame_indices and values must have the same length")
        return self


class SummaryStats(BaseModel):
    """Min / max / mean / sample variance over a series' values."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float
    mean: float
    variance: float
