"""Tests for rendering normalized chart tables into Chart.js payloads."""

from __future__ import annotations

import pytest

from core.charting.render import render_chart, render_charts

pytestmark = pytest.mark.unit

PALETTE = ("#111111", "#222222", "#333333")


def test_single_series_uses_config_color_and_generic_caption() -> None:
    """A lone `value` series takes the chart color and a generic caption."""

    chart = render_chart(
        {"type": "bar", "title": "T", "color": "#10b981", "data": [{"label": "Jan", "value": 6}]},
        palette=PALETTE,
    )
    assert chart.chart_type == "bar"
    assert chart.data["labels"] == ["Jan"]
    [dataset] = chart.data["datasets"]
    assert dataset["label"] == "Quantidade"
    assert dataset["backgroundColor"] == "#10b981"
    assert dataset["data"] == [6]

    line = render_chart({"type": "line", "data": [{"label": "Jan", "value": 6}]}, palette=PALETTE)
    assert line.data["datasets"][0]["label"] == "Valor"
    assert line.data["datasets"][0]["backgroundColor"] == PALETTE[0]


def test_multi_series_colors_come_from_palette() -> None:
    """Series are colored by position, wrapping around the palette."""

    chart = render_chart(
        {"type": "bar", "color": "#ffffff", "data": [{"label": "A", "a": 1, "b": 2, "c": 3, "d": 4}]},
        palette=PALETTE,
    )
    colors = [dataset["backgroundColor"] for dataset in chart.data["datasets"]]
    assert colors == ["#111111", "#222222", "#333333", "#111111"]


def test_pie_uses_one_color_per_slice() -> None:
    """Pie charts draw the first key with a palette color per category."""

    chart = render_chart(
        {"type": "pie", "data": [{"label": "A", "v": 1}, {"label": "B", "v": 2}]},
        palette=PALETTE,
    )
    [dataset] = chart.data["datasets"]
    assert dataset["data"] == [1, 2]
    assert dataset["backgroundColor"] == ["#111111", "#222222"]


def test_composite_renders_mixed_datasets_on_two_axes() -> None:
    """Composite payloads render bar/line datasets bound to left/right axes."""

    chart = render_chart(
        {
            "type": "line",
            "data": {
                "labels": ["2023", "2024"],
                "series": [
                    {"name": "Receita", "type": "bar", "data": [10, 12]},
                    {"name": "Execução", "type": "line", "yAxis": "right", "color": "#ef4444", "data": [80, None]},
                ],
                "yAxes": {"left": {"title": "R$"}, "right": {"title": "%"}},
            },
        },
        palette=PALETTE,
    )
    assert chart.chart_type == "bar"
    bar, line = chart.data["datasets"]
    assert (bar["type"], bar["yAxisID"], bar["backgroundColor"]) == ("bar", "left", "#111111")
    assert (line["type"], line["yAxisID"], line["borderColor"]) == ("line", "right", "#ef4444")
    assert line["data"] == [80, None]
    assert chart.axes["left"]["title"] == "R$"
    assert chart.axes["right"] == {"position": "right", "display": True, "title": "%"}


def test_composite_without_right_axis_hides_it() -> None:
    """The right axis is only displayed when configured."""

    chart = render_chart({"data": {"labels": ["A"], "series": [{"name": "x", "data": [1]}]}}, palette=PALETTE)
    assert chart.axes["right"]["display"] is False


def test_malformed_config_renders_empty_panel() -> None:
    """Broken configs render as empty panels carrying the error."""

    chart = render_chart({"type": "bar", "title": "T", "data": "not-an-array"}, palette=PALETTE)
    assert chart.is_empty
    assert chart.error is not None
    assert chart.error.kind == "empty"
    assert chart.as_json() == {"type": "bar", "title": "T", "data": {"labels": [], "datasets": []}, "axes": {}}


def test_empty_palette_and_batch_rendering() -> None:
    """An empty palette falls back to gray and batches keep input order."""

    first, second = render_charts(
        [
            {"type": "bar", "data": [{"label": "A", "a": 1, "b": 2}]},
            {"type": "unknown", "title": "X", "data": [{"label": "A", "value": 1}]},
        ],
        palette=(),
    )
    assert first.data["datasets"][0]["backgroundColor"] == "#94a3b8"
    assert second.chart_type == "bar"
    assert second.title == "X"
