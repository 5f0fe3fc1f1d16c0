"""Schema types for operator-authored chart configuration.

Chart configs are hand-written JSON stored alongside each published indicator.
These TypedDicts document the accepted vocabulary; stored values are untrusted
and are always passed through `analysis.normalizer` before rendering.
"""

from __future__ import annotations

import re
from typing import Any, Final, Literal, TypedDict

ChartType = Literal["bar", "line", "pie"]
SeriesMark = Literal["bar", "line"]
SeriesAxis = Literal["left", "right"]

CHART_TYPES: Final[tuple[ChartType, ...]] = ("bar", "line", "pie")
DEFAULT_CHART_COLOR: Final[str] = "#0ea5e9"
HEX_COLOR_RE: Final = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class LegacyPoint(TypedDict):
    """A `{label, value}` point of a legacy series."""

    label: str
    value: float


class LegacySeriesConfig(TypedDict, total=False):
    """Legacy series entry (`config.series`)."""

    name: str
    data: list[LegacyPoint]
    color: str


class NestedPoint(TypedDict, total=False):
    """A point of a nested series, tagged by `city` or `label`."""

    city: str
    label: str
    value: float


class NestedSeriesConfig(TypedDict, total=False):
    """Nested series entry (`config.data[i]` with `values`)."""

    label: str
    name: str
    values: list[NestedPoint]
    color: str


class AxisConfig(TypedDict, total=False):
    """Title/format for one y-axis of a composite chart."""

    title: str
    format: str


class YAxesConfig(TypedDict, total=False):
    """Left/right axis configuration of a composite chart."""

    left: AxisConfig
    right: AxisConfig


class CompositeSeriesConfig(TypedDict, total=False):
    """Series entry of a composite payload; values are parallel to `labels`."""

    label: str
    name: str
    data: list[float | None]
    type: SeriesMark
    yAxis: SeriesAxis
    color: str


class CompositeData(TypedDict, total=False):
    """Composite `data` object mixing bar and line series."""

    title: str
    labels: list[str]
    series: list[CompositeSeriesConfig]
    yAxes: YAxesConfig


class ChartConfig(TypedDict, total=False):
    """Stored chart configuration for one indicator."""

    type: ChartType
    title: str
    color: str
    data: list[dict[str, Any]] | list[NestedSeriesConfig] | CompositeData
    series: list[LegacySeriesConfig]
    options: dict[str, Any]
