"""Chart rendering backends."""
from vqplot.infrastructure.charts.image_renderer import build_figure, output_path, write_png
from vqplot.infrastructure.charts.terminal_renderer import render_text

__all__ = [
    "build_figure",
    "output_path",
    "render_text",
    "write_png",
]
