"""Shared fixtures: libvmaf-style JSON reports written to tmp_path."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, List, Sequence

import pytest

TWO_FRAMES = {
    "frames": [
        {"frameNum": 0, "metrics": {"vmaf": 90.0, "psnr": 40.0, "ms_ssim": 0.98}},
        {"frameNum": 1, "metrics": {"vmaf": 92.0, "psnr": 41.0, "ms_ssim": 0.99}},
    ]
}


def make_frames(values: Sequence[Sequence[float]], start: int = 0) -> Dict[str, List[dict]]:
    """Build a report body from (vmaf, psnr, ms_ssim) tuples."""
    return {
        "frames": [
            {"frameNum": start + i, "metrics": {"vmaf": v, "psnr": p, "ms_ssim": s}}
            for i, (v, p, s) in enumerate(values)
        ]
    }


@pytest.fixture
def write_report(tmp_path: Path) -> Callable[..., Path]:
    """Write a report body (dict or raw text) and return its path."""

    def _write(body, name: str = "report.json") -> Path:
        path = tmp_path / name
        text = body if isinstance(body, str) else json.dumps(body)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def two_frame_report(write_report) -> Path:
    return write_report(TWO_FRAMES, "two_frames.json")
