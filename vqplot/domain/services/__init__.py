"""Domain services."""
from vqplot.domain.services.metrics_extractor import extract_series, reciprocal_distance
from vqplot.domain.services.report_loader import check_report_path, load_report
from vqplot.domain.services.statistics import discretized_sort, order_key, summarize
from vqplot.domain.services.summary_formatter import (
    assign_colors,
    format_header,
    format_summary,
    output_filename,
)

__all__ = [
    "assign_colors",
    "check_report_path",
    "discretized_sort",
    "extract_series",
    "format_header",
    "format_summary",
    "load_report",
    "order_key",
    "output_filename",
    "reciprocal_distance",
    "summarize",
]
