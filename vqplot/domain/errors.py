"""Domain errors."""
from pathlib import Path
from typing import Union


class VQPlotError(Exception):
    """Base class for all vqplot errors."""


class UsageError(VQPlotError):
    """Invalid command line usage."""


class PaletteExhaustedError(UsageError):
    """More input files than palette colours under the 'error' overflow policy."""

    def __init__(self, file_count: int, palette_size: int):
        self.file_count = file_count
        self.palette_size = palette_size
        super().__init__(
            f"{file_count} input files but only {palette_size} palette colours"
        )


class PathError(VQPlotError):
    """Input path is missing or not a regular file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"{path} is a dir or does not exist")


class ReportNotFoundError(PathError, FileNotFoundError):
    """Report path does not exist."""


class ReportIsDirectoryError(PathError, IsADirectoryError):
    """Report path is a directory."""


class ReportParseError(VQPlotError, ValueError):
    """Report content is not valid JSON or does not match the report shape."""


class ArithmeticDegeneracyError(VQPlotError, ZeroDivisionError):
    """Division by zero in a statistic or in the similarity transform."""
