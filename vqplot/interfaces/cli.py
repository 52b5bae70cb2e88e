"""Command line interface.

Usage:
    vqplot <report.json> [report2.json ...]       one PNG per metric
    vqplot --terminal <report.json>               summaries + text charts

Examples:
    vqplot x264_crf23.json x265_crf28.json --output-dir charts/
    vqplot --terminal --metrics vmaf,ms_ssim x264_crf23.json
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from vqplot.application import build_charts
from vqplot.config import settings
from vqplot.domain.errors import PathError, UsageError
from vqplot.domain.models import Metric, MetricChart
from vqplot.infrastructure.charts import output_path, render_text, write_png

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors as UsageError instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def parse_metric_csv(csv_text: Optional[str]) -> List[Metric]:
    """Parse a comma-separated metric list such as "vmaf,ms_ssim"."""
    if not csv_text:
        return list(Metric)
    names = [x.strip().lower() for x in csv_text.split(",") if x.strip()]
    allowed = [m.value for m in Metric]
    unknown = [n for n in names if n not in allowed]
    if unknown:
        raise UsageError(
            f"unknown metrics: {', '.join(unknown)} (allowed: {', '.join(allowed)})"
        )
    selected = [Metric(n) for n in names]
    return [m for m in Metric if m in selected]


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="vqplot",
        description="Chart per-frame VMAF, PSNR and MS-SSIM from libvmaf JSON reports.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("files", nargs="*", metavar="FILE",
                        help="libvmaf JSON report(s)")
    parser.add_argument("--terminal", action="store_true",
                        help="Print summaries and text charts for a single report")
    parser.add_argument("--output-dir", type=Path, default=None,
                        help="Directory for PNG charts (default: %s)" % settings.output_dir)
    parser.add_argument("--metrics", default=None,
                        help="Comma-separated metrics to chart (default: vmaf,psnr,ms_ssim)")
    parser.add_argument("--palette-overflow", choices=["wrap", "error"], default=None,
                        help="More files than colours: wrap the palette or fail "
                             "(default: %s)" % settings.palette_overflow)
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    return parser


def _print_terminal(charts: Sequence[MetricChart]) -> None:
    for chart in charts:
        entry = chart.entries[0]
        print(chart.axis_label)
        print(chart.header)
        print(entry.summary)
        print(render_text(chart))


def _write_images(charts: Sequence[MetricChart], output_dir: Optional[Path]) -> None:
    for chart in charts:
        print(f'Writing "{output_path(chart, output_dir)}"')
        write_png(chart, output_dir=output_dir)


def run(argv: Optional[Sequence[str]] = None) -> None:
    """Parse arguments and produce the charts; errors propagate."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.files:
        raise UsageError("at least one report file is required")
    if args.terminal and len(args.files) != 1:
        raise UsageError("--terminal takes exactly one report file")
    metrics = parse_metric_csv(args.metrics)

    charts = build_charts(args.files, metrics, palette_overflow=args.palette_overflow)
    if args.terminal:
        _print_terminal(charts)
    else:
        _write_images(charts, args.output_dir)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point. Usage and path problems exit with status 1."""
    try:
        run(argv)
    except UsageError as exc:
        parser = build_parser()
        print(parser.format_usage().rstrip(), file=sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 1
    except PathError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
