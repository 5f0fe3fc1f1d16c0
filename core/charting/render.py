"""Generic rendering for normalized chart tables into Chart.js payloads."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, TypedDict

from analysis.dto import NormalizationError, NormalizedTable
from analysis.normalizer import normalize_chart_config

from .schema import CHART_TYPES


class ChartDataset(TypedDict, total=False):
    """A Chart.js dataset payload for one series."""

    label: str
    seriesKey: str
    type: str
    data: list[float | int | None]
    borderColor: str | list[str]
    backgroundColor: str | list[str]
    borderWidth: int
    yAxisID: str
    tension: float
    spanGaps: bool
    pointRadius: int
    order: int


class ChartData(TypedDict):
    """The full Chart.js payload (labels + datasets) for a chart panel."""

    labels: list[str]
    datasets: list[ChartDataset]


class ChartAxis(TypedDict, total=False):
    """Y-axis hints for composite charts."""

    position: str
    display: bool
    title: str | None


@dataclass(frozen=True, slots=True)
class RenderedChart:
    """A rendered chart panel produced from a stored chart config.

    Args:
        chart_type: Chart.js base type ("bar", "line" or "pie").
        title: Chart title displayed in the UI.
        data: Chart.js payload.
        axes: Y-axis configuration keyed by axis id (composite charts only).
        error: Normalization error when there is nothing to draw.
    """

    chart_type: str
    title: str
    data: ChartData
    axes: dict[str, ChartAxis]
    error: NormalizationError | None = None

    @property
    def is_empty(self) -> bool:
        """Return True when the panel has no datasets to draw."""

        return not self.data["datasets"] or not self.data["labels"]

    def as_json(self) -> dict[str, Any]:
        """Return the client payload consumed by the chart bootstrap script."""

        return {
            "type": self.chart_type,
            "title": self.title,
            "data": self.data,
            "axes": self.axes,
        }


# Generic captions shown instead of the implicit `value` key.
VALUE_CAPTIONS: Final[dict[str, str]] = {"line": "Valor", "bar": "Quantidade"}


def render_charts(configs: Iterable[object], *, palette: Sequence[str]) -> tuple[RenderedChart, ...]:
    """Render a set of stored chart configs in order."""

    return tuple(render_chart(config, palette=palette) for config in configs)


def render_chart(config: object, *, palette: Sequence[str]) -> RenderedChart:
    """Render a single chart panel from a stored chart config.

    Args:
        config: Stored chart config (untrusted JSON value).
        palette: Colors assigned to series/slices by position.

    Returns:
        RenderedChart containing labels and datasets. Malformed configs render
        as an empty panel carrying the normalization error.
    """

    raw = config if isinstance(config, Mapping) else {}
    chart_type = _chart_type(raw.get("type"))
    main_color = raw.get("color") if isinstance(raw.get("color"), str) else None

    result = normalize_chart_config(config)
    table = result.table
    title = _title(raw.get("title"), table)

    if table.is_composite:
        data, axes = _render_composite(table, palette=palette)
        return RenderedChart(chart_type="bar", title=title, data=data, axes=axes, error=result.error)

    if chart_type == "pie":
        data = _render_pie(table, palette=palette)
    else:
        data = _render_series(table, chart_type=chart_type, main_color=main_color, palette=palette)
    return RenderedChart(chart_type=chart_type, title=title, data=data, axes={}, error=result.error)


def _chart_type(value: object) -> str:
    """Return a supported chart type, defaulting to bar."""

    return value if isinstance(value, str) and value in CHART_TYPES else "bar"


def _title(value: object, table: NormalizedTable) -> str:
    """Prefer the stored title, falling back to one embedded in the payload."""

    if isinstance(value, str) and value.strip():
        return value
    return table.title or ""


def _palette_color(palette: Sequence[str], idx: int) -> str:
    """Return the palette entry for a position (gray when the palette is empty)."""

    if not palette:
        return "#94a3b8"
    return palette[idx % len(palette)]


def _render_series(
    table: NormalizedTable,
    *,
    chart_type: str,
    main_color: str | None,
    palette: Sequence[str],
) -> ChartData:
    """Render one bar/line dataset per series key."""

    datasets: list[ChartDataset] = []
    single = len(table.keys) == 1
    for idx, key in enumerate(table.keys):
        color = main_color if single and main_color else _palette_color(palette, idx)
        dataset: ChartDataset = {
            "label": VALUE_CAPTIONS.get(chart_type, key) if key == "value" else key,
            "seriesKey": key,
            "data": table.column(key),
            "borderColor": color,
            "backgroundColor": color,
            "borderWidth": 3 if chart_type == "line" else 0,
        }
        if chart_type == "line":
            dataset["tension"] = 0.35
            dataset["spanGaps"] = False
            dataset["pointRadius"] = 4
        datasets.append(dataset)
    return {"labels": table.labels(), "datasets": datasets}


def _render_pie(table: NormalizedTable, *, palette: Sequence[str]) -> ChartData:
    """Render a single pie dataset from the first series key."""

    if not table.rows:
        return {"labels": [], "datasets": []}

    key = table.keys[0] if table.keys else "value"
    colors = [_palette_color(palette, idx) for idx in range(len(table.rows))]
    dataset: ChartDataset = {
        "label": key,
        "seriesKey": key,
        "data": table.column(key),
        "backgroundColor": colors,
        "borderColor": "rgba(0,0,0,0.2)",
        "borderWidth": 1,
    }
    return {"labels": table.labels(), "datasets": [dataset]}


def _render_composite(
    table: NormalizedTable,
    *,
    palette: Sequence[str],
) -> tuple[ChartData, dict[str, ChartAxis]]:
    """Render mixed bar/line datasets on independent left/right axes."""

    datasets: list[ChartDataset] = []
    for idx, meta in enumerate(table.series_meta):
        color = meta.color or _palette_color(palette, idx)
        mark = "line" if meta.chart_type == "line" else "bar"
        dataset: ChartDataset = {
            "label": meta.key,
            "seriesKey": meta.key,
            "type": mark,
            "data": table.column(meta.key),
            "borderColor": color,
            "backgroundColor": color,
            "yAxisID": "right" if meta.y_axis == "right" else "left",
        }
        if mark == "line":
            dataset["borderWidth"] = 3
            dataset["tension"] = 0.35
            dataset["pointRadius"] = 4
            dataset["order"] = 0
        else:
            dataset["borderWidth"] = 0
            dataset["order"] = 1
        datasets.append(dataset)

    y_axes = table.y_axes or {}
    axes: dict[str, ChartAxis] = {
        "left": {"position": "left", "display": True, "title": _axis_title(y_axes.get("left"))},
        "right": {
            "position": "right",
            "display": bool(y_axes.get("right")),
            "title": _axis_title(y_axes.get("right")),
        },
    }
    return {"labels": table.labels(), "datasets": datasets}, axes


def _axis_title(axis: object) -> str | None:
    """Return an axis title from a `yAxes` entry, if present."""

    if isinstance(axis, Mapping):
        title = axis.get("title")
        if isinstance(title, str) and title:
            return title
    return None
