"""Application layer - use cases and orchestration."""
from vqplot.application.chart_builder import FileMetrics, analyze_file, build_charts

__all__ = [
    "FileMetrics",
    "analyze_file",
    "build_charts",
]
