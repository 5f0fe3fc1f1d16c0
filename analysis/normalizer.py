"""Reduce hand-authored chart payloads to a single uniform table.

`normalize_chart_config` is the only entry point used by the render surface. It
detects the payload shape once (see `analysis.shapes`), converts it into rows
keyed by the categorical axis label, and resolves the ordered list of series
keys.

The normalizer never raises past its boundary: unrecognized payloads and
payloads with nothing to render yield an empty table with an `empty` error, and conversion failures are logged and
yield an empty table with a `malformed` error.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping
from typing import Any, Final

from .dto import AXIS_KEY, CellValue, NormalizationError, NormalizationResult, NormalizedTable, Row, SeriesMeta
from .months import all_month_names, month_index
from .shapes import ChartShape, Composite, FlatRows, LegacySeries, NestedValues, Unrecognized, detect_shape

logger = logging.getLogger(__name__)

UNKNOWN_LABEL: Final[str] = "Unknown"

# Flat rows carry their category in `label`, falling back to `name`.
FLAT_AXIS_FIELDS: Final[tuple[str, ...]] = ("label", "name")

# Nested points identify their category by `city`, falling back to `label`.
NESTED_CATEGORY_FIELDS: Final[tuple[str, ...]] = ("city", "label")

SERIES_KEY_FIELDS: Final[tuple[str, ...]] = ("name", "label")

# Plain JSON-style decimals only (no digit separators, no non-ASCII digits).
_INT_RE: Final = re.compile(r"^[+-]?[0-9]+\Z")
_FLOAT_RE: Final = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z")


class MalformedChartData(ValueError):
    """Raised inside conversion when a payload cannot be reduced to a table."""


def normalize_chart_config(config: object) -> NormalizationResult:
    """Normalize a chart config into a uniform table.

    Args:
        config: Parsed chart config (untrusted JSON value).

    Returns:
        NormalizationResult whose table is always well-formed. `error` is set
        when there is nothing to render (`empty`) or conversion failed
        (`malformed`).
    """

    shape = detect_shape(config)
    if isinstance(shape, Unrecognized):
        return NormalizationResult(error=NormalizationError(kind="empty", message=shape.reason))

    try:
        table = _convert(shape)
    except Exception as exc:  # noqa: BLE001 - a broken chart must not break the page
        message = f"{type(shape).__name__} payload could not be normalized: {exc}"
        logger.warning(message)
        return NormalizationResult(error=NormalizationError(kind="malformed", message=message))
    if table.is_empty:
        message = f"{type(shape).__name__} payload has no rows or series to render"
        return NormalizationResult(table=table, error=NormalizationError(kind="empty", message=message))
    return NormalizationResult(table=table)


def resolve_series_key(entry: Mapping[str, Any], index: int) -> str:
    """Resolve a series key: explicit `name`, then `label`, then `series_<index>`.

    Args:
        entry: Series entry mapping.
        index: Position of the entry in its declaring list.

    Returns:
        The resolved key.
    """

    for field_name in SERIES_KEY_FIELDS:
        value = entry.get(field_name)
        if value is None or value == "":
            continue
        return str(value)
    return f"series_{index}"


def _convert(shape: ChartShape) -> NormalizedTable:
    """Dispatch a detected shape to its converter."""

    if isinstance(shape, Composite):
        return _convert_composite(shape)
    if isinstance(shape, NestedValues):
        return _convert_nested(shape)
    if isinstance(shape, LegacySeries):
        return _convert_legacy(shape)
    if isinstance(shape, FlatRows):
        return _convert_flat(shape)
    raise MalformedChartData(f"unsupported shape: {type(shape).__name__}")


def _convert_composite(shape: Composite) -> NormalizedTable:
    """Stitch parallel `labels`/`series` arrays into rows.

    Series resolving to the same key share one column: the later series
    overwrites both the cell values and the presentation metadata.
    """

    rows: list[Row] = [{AXIS_KEY: _axis_label(label)} for label in shape.labels]
    meta: dict[str, SeriesMeta] = {}

    for s_index, entry in enumerate(shape.series):
        if not isinstance(entry, Mapping):
            continue
        key = resolve_series_key(entry, s_index)
        values = entry.get("data")
        if not isinstance(values, list):
            values = []
        for idx, row in enumerate(rows):
            raw = values[idx] if idx < len(values) else None
            row[key] = _coerce_number(raw, where=f"series {key!r} at index {idx}")
        meta[key] = SeriesMeta(
            key=key,
            chart_type=_optional_str(entry.get("type")),
            y_axis=_optional_str(entry.get("yAxis")),
            color=_optional_str(entry.get("color")),
        )

    return NormalizedTable(
        rows=tuple(rows),
        keys=tuple(meta),
        shape="composite",
        series_meta=tuple(meta.values()),
        y_axes=dict(shape.y_axes) if shape.y_axes is not None else None,
        title=shape.title,
    )


def _convert_nested(shape: NestedValues) -> NormalizedTable:
    """Pivot series that carry their own category-tagged `values`."""

    keys: list[str] = []
    categories: dict[str, None] = {}
    series_points: list[tuple[str, dict[str, CellValue]]] = []

    for index, entry in enumerate(shape.series):
        if not isinstance(entry, Mapping) or not isinstance(entry.get("values"), list):
            continue
        key = resolve_series_key(entry, index)
        points = _collect_points(
            entry["values"],
            category_fields=NESTED_CATEGORY_FIELDS,
            categories=categories,
            key=key,
        )
        series_points.append((key, points))
        if key not in keys:
            keys.append(key)

    rows = _pivot(categories, keys=keys, series_points=series_points)
    return NormalizedTable(rows=tuple(rows), keys=tuple(keys), shape="nested_values")


def _convert_legacy(shape: LegacySeries) -> NormalizedTable:
    """Pivot legacy `{name, data: [{label, value}]}` series.

    Month-named categories are reordered into calendar order.
    """

    keys: list[str] = []
    categories: dict[str, None] = {}
    series_points: list[tuple[str, dict[str, CellValue]]] = []

    for index, entry in enumerate(shape.series):
        if not isinstance(entry, Mapping) or not isinstance(entry.get("data"), list):
            continue
        key = resolve_series_key(entry, index)
        points = _collect_points(
            entry["data"],
            category_fields=("label",),
            categories=categories,
            key=key,
        )
        series_points.append((key, points))
        if key not in keys:
            keys.append(key)

    ordered = list(categories)
    if all_month_names(ordered):
        ordered.sort(key=lambda label: month_index(label) or 0)

    rows = _pivot(ordered, keys=keys, series_points=series_points)
    return NormalizedTable(rows=tuple(rows), keys=tuple(keys), shape="legacy_series")


def _convert_flat(shape: FlatRows) -> NormalizedTable:
    """Project flat rows onto the first row's key set."""

    first = shape.rows[0]
    keys = [str(name) for name in first if name not in FLAT_AXIS_FIELDS]

    rows: list[Row] = []
    for idx, raw in enumerate(shape.rows):
        if not isinstance(raw, Mapping):
            continue
        row: Row = {AXIS_KEY: _flat_axis_label(raw)}
        for key in keys:
            row[key] = _coerce_number(raw.get(key), where=f"row {idx} field {key!r}")
        rows.append(row)

    return NormalizedTable(rows=tuple(rows), keys=tuple(keys), shape="flat_rows")


def _collect_points(
    points: Iterable[object],
    *,
    category_fields: tuple[str, ...],
    categories: dict[str, None],
    key: str,
) -> dict[str, CellValue]:
    """Map category -> value for one series, registering categories by first sight.

    The first point for a category wins; points without a category are skipped.
    """

    by_category: dict[str, CellValue] = {}
    for point in points:
        if not isinstance(point, Mapping):
            continue
        raw_category = _first_present(point, category_fields)
        if raw_category is None:
            continue
        category = _axis_label(raw_category)
        categories.setdefault(category, None)
        if category in by_category:
            continue
        by_category[category] = _coerce_number(point.get("value"), where=f"series {key!r} category {category!r}")
    return by_category


def _pivot(
    categories: Iterable[str],
    *,
    keys: list[str],
    series_points: list[tuple[str, dict[str, CellValue]]],
) -> list[Row]:
    """Build one row per category with every key present (None when missing)."""

    rows: list[Row] = []
    for category in categories:
        row: Row = {AXIS_KEY: category}
        for key in keys:
            row[key] = None
        for key, points in series_points:
            if category in points:
                row[key] = points[category]
        rows.append(row)
    return rows


def _first_present(mapping: Mapping[str, Any], fields: tuple[str, ...]) -> object | None:
    """Return the first non-empty value among `fields`."""

    for field_name in fields:
        value = mapping.get(field_name)
        if value is not None and value != "":
            return value
    return None


def _flat_axis_label(raw: Mapping[str, Any]) -> str:
    """Return the axis label for a flat row (never raises)."""

    value = _first_present(raw, FLAT_AXIS_FIELDS)
    return _axis_label(value)


def _axis_label(value: object) -> str:
    """Coerce a category identifier to its display string."""

    if value is None:
        return UNKNOWN_LABEL
    if isinstance(value, str):
        return value
    return str(value)


def _optional_str(value: object) -> str | None:
    """Return `value` when it is a non-empty string, else None."""

    return value if isinstance(value, str) and value else None


def _coerce_number(value: object, *, where: str) -> int | float | None:
    """Coerce a cell value to a number.

    Args:
        value: Raw JSON value.
        where: Location used in the error message.

    Returns:
        The numeric value, or None for missing/blank/non-finite values.

    Raises:
        MalformedChartData: When the value is present but not numeric.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        raise MalformedChartData(f"{where}: expected a number, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if _INT_RE.match(text):
            return int(text)
        if not _FLOAT_RE.match(text):
            raise MalformedChartData(f"{where}: expected a number, got {value!r}")
        number = float(text)
        return number if math.isfinite(number) else None
    raise MalformedChartData(f"{where}: expected a number, got {type(value).__name__}")
