"""Metrics report loading (whole file read, strict shape validation)."""
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from vqplot.domain.errors import (
    ReportIsDirectoryError,
    ReportNotFoundError,
    ReportParseError,
)
from vqplot.domain.models.metrics import Report

logger = logging.getLogger(__name__)


def check_report_path(path: Union[str, Path]) -> Path:
    """Return the path if it names an existing non-directory entry."""
    report_path = Path(path)
    if not report_path.exists():
        raise ReportNotFoundError(path)
    if report_path.is_dir():
        raise ReportIsDirectoryError(path)
    return report_path


def load_report(path: Union[str, Path]) -> Report:
    """
    Load a libvmaf JSON report.

    Args:
        path: Report file path.

    Returns:
        The parsed report, frames in file order.

    Raises:
        ReportNotFoundError: The path does not exist.
        ReportIsDirectoryError: The path is a directory.
        ReportParseError: Invalid JSON or a frame entry missing a required field.
    """
    report_path = check_report_path(path)
    raw = report_path.read_bytes()
    try:
        report = Report.model_validate_json(raw)
    except ValidationError as exc:
        raise ReportParseError(f"{report_path.name}: {exc}") from exc

    logger.debug(f"Loaded {len(report.frames)} frames from {report_path}")
    return report
