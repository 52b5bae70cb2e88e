"""Tests for the plotly and plotext chart backends."""
from __future__ import annotations

import re

import pytest

from vqplot.application import build_charts
from vqplot.domain.models import Metric
from vqplot.infrastructure.charts import build_figure, output_path, render_text
from vqplot.infrastructure.charts import image_renderer

from tests.conftest import make_frames


@pytest.fixture
def charts(write_report):
    a = write_report(make_frames([(90.0, 40.0, 0.98), (92.0, 41.0, 0.99)]), "a_b.json")
    b = write_report(make_frames([(70.0, 30.0, 0.9), (75.0, 31.0, 0.92), (72.0, 33.0, 0.91)]), "c.json")
    return build_charts([a, b], palette=["#990000", "#009900"])


class TestBuildFigure:
    def test_one_trace_per_file(self, charts) -> None:
        fig = build_figure(charts[0])
        assert len(fig.data) == 2
        assert fig.data[0].name == "a_b.json"
        assert fig.data[0].line.color == "#990000"
        assert fig.data[1].line.color == "#009900"
        assert list(fig.data[0].x) == [0, 1]
        assert list(fig.data[1].y) == [70.0, 75.0, 72.0]

    def test_axis_titles(self, charts) -> None:
        fig = build_figure(charts[2])
        assert charts[2].metric is Metric.MS_SSIM
        assert fig.layout.xaxis.title.text == "Frames"
        assert fig.layout.yaxis.title.text == "1/(1-MS_SSIM)"

    def test_legend_lines_stacked(self, charts) -> None:
        fig = build_figure(charts[0])
        annotations = fig.layout.annotations
        assert [a.text for a in annotations] == [
            charts[0].header,
            charts[0].entries[0].summary,
            charts[0].entries[1].summary,
        ]
        assert [a.y for a in annotations] == pytest.approx([0.22, 0.17, 0.12])
        assert annotations[1].font.color == "#990000"
        assert annotations[2].font.family == "monospace"

    def test_write_png_uses_output_name(self, charts, tmp_path, monkeypatch) -> None:
        written = {}

        def fake_write_image(self, path, **kwargs):
            written["path"] = path
            written.update(kwargs)

        monkeypatch.setattr(image_renderer.go.Figure, "write_image", fake_write_image)
        out = image_renderer.write_png(charts[1], output_dir=tmp_path / "out")
        assert out == tmp_path / "out" / "PSNR-a_b.json-c.json.png"
        assert written["path"] == str(out)
        assert written["width"] == 800
        assert written["height"] == 600
        assert (tmp_path / "out").is_dir()

    def test_output_path(self, charts, tmp_path) -> None:
        assert output_path(charts[0], tmp_path) == tmp_path / "VMAF-a_b.json-c.json.png"


ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class TestRenderText:
    def test_canvas_keeps_requested_size(self, charts) -> None:
        text = ANSI_ESCAPE.sub("", render_text(charts[0], width=80, height=40))
        lines = text.splitlines()
        assert len(lines) == 40
        assert max(len(line) for line in lines) <= 80

    def test_caption_and_title_drawn(self, charts) -> None:
        text = ANSI_ESCAPE.sub("", render_text(charts[2], width=80, height=40))
        assert "a_b.json" in text
        assert "c.json" in text
        assert "1/(1-MS_SSIM)" in text
