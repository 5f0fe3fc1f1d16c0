"""Shape detection for loosely-specified chart payloads.

Hand-authored chart payloads arrive in several partially-overlapping shapes.
`detect_shape` classifies a payload once into a closed set of tagged variants so
converters never have to re-check structure.

Detection order (first match wins):

1. Composite: `data` is an object with `labels` and/or `series`.
2. NestedValues: `data` is a non-empty list whose first entry has a list `values`.
3. LegacySeries: top-level `series` is a list.
4. FlatRows: `data` is a non-empty list whose first entry is an object.
5. Unrecognized: anything else (including empty lists).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Composite:
    """Parallel `labels`/`series` arrays, possibly mixing bar and line series."""

    labels: tuple[Any, ...]
    series: tuple[Any, ...]
    y_axes: Mapping[str, Any] | None = None
    title: str | None = None


@dataclass(frozen=True, slots=True)
class NestedValues:
    """Series entries that each carry their own category-tagged `values`."""

    series: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class LegacySeries:
    """Legacy `series: [{name, data: [{label, value}]}]` payloads."""

    series: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class FlatRows:
    """Rows carrying the category and one field per implicit series."""

    rows: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """Nothing renderable was found."""

    reason: str


ChartShape = Composite | NestedValues | LegacySeries | FlatRows | Unrecognized


def detect_shape(config: object) -> ChartShape:
    """Classify a chart config into exactly one recognized shape.

    Args:
        config: Parsed chart config (untrusted JSON value).

    Returns:
        One ChartShape variant. Never raises.
    """

    if not isinstance(config, Mapping):
        return Unrecognized(reason=f"chart config must be an object, got {type(config).__name__}")

    data = config.get("data")

    if isinstance(data, Mapping) and ("labels" in data or "series" in data):
        labels = data.get("labels")
        series = data.get("series")
        y_axes = data.get("yAxes")
        if y_axes is None:
            options = config.get("options")
            if isinstance(options, Mapping):
                y_axes = options.get("yAxes")
        title = data.get("title")
        return Composite(
            labels=tuple(labels) if isinstance(labels, list) else (),
            series=tuple(series) if isinstance(series, list) else (),
            y_axes=y_axes if isinstance(y_axes, Mapping) else None,
            title=title if isinstance(title, str) else None,
        )

    if isinstance(data, list) and data:
        first = data[0]
        if isinstance(first, Mapping) and isinstance(first.get("values"), list):
            return NestedValues(series=tuple(data))

    series = config.get("series")
    if isinstance(series, list):
        return LegacySeries(series=tuple(series))

    if isinstance(data, list) and data and isinstance(data[0], Mapping):
        return FlatRows(rows=tuple(data))

    if isinstance(data, list):
        return Unrecognized(reason="data is an empty list" if not data else "data rows are not objects")
    if data is None:
        return Unrecognized(reason="chart config has neither data nor series")
    return Unrecognized(reason=f"unsupported data of type {type(data).__name__}")
