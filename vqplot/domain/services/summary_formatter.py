"""Legend text, colour assignment and output naming for metric charts."""
import logging
from itertools import cycle, islice
from typing import List, Sequence

from vqplot.domain.errors import PaletteExhaustedError
from vqplot.domain.models.metrics import Metric, SummaryStats

logger = logging.getLogger(__name__)

COLUMNS = ("min", "max", "avg", "var")
COLUMN_WIDTH = 6
COLUMN_SEP = "  "


def format_header() -> str:
    """Column titles matching the layout of format_summary()."""
    return COLUMN_SEP.join(f"{name:^{COLUMN_WIDTH}}" for name in COLUMNS)


def format_summary(stats: SummaryStats) -> str:
    """Render min, max, mean and variance with three decimals."""
    values = (stats.min, stats.max, stats.mean, stats.variance)
    return COLUMN_SEP.join(f"{v:{COLUMN_WIDTH}.3f}" for v in values)


def assign_colors(count: int, palette: Sequence[str], overflow: str = "wrap") -> List[str]:
    """
    Pick one colour per input file.

    Args:
        count: Number of input files.
        palette: Available colours, used in order.
        overflow: "wrap" cycles the palette, "error" refuses more files than colours.

    Raises:
        PaletteExhaustedError: count exceeds the palette under the "error" policy.
    """
    if not palette:
        raise ValueError("palette must not be empty")
    if count > len(palette):
        if overflow == "error":
            raise PaletteExhaustedError(count, len(palette))
        logger.warning(
            f"{count} files share {len(palette)} colours, palette colours will repeat"
        )
    return list(islice(cycle(palette), count))


def output_filename(metric: Metric, captions: Sequence[str]) -> str:
    """<METRIC>-<file1>-<file2>...png"""
    return "-".join([metric.canonical_name, *captions]) + ".png"
