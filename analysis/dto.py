"""DTO types returned by the chart normalizer.

DTOs are plain data containers used to transport normalized chart data to the
render surface. They intentionally avoid any Django/ORM dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

AXIS_KEY = "label"

CellValue = str | float | int | None
Row = dict[str, CellValue]

ShapeKind = Literal["composite", "nested_values", "legacy_series", "flat_rows", "unrecognized"]
ErrorKind = Literal["empty", "malformed"]


@dataclass(frozen=True, slots=True)
class SeriesMeta:
    """Per-series presentation metadata carried alongside a resolved key.

    Only composite payloads declare `chart_type` and `y_axis`; the normalizer
    does not interpret them.

    Args:
        key: Resolved series key (as used in table rows).
        chart_type: Optional per-series mark type ("bar" or "line").
        y_axis: Optional axis assignment ("left" or "right").
        color: Optional per-series color.
    """

    key: str
    chart_type: str | None = None
    y_axis: str | None = None
    color: str | None = None


@dataclass(frozen=True, slots=True)
class NormalizedTable:
    """Uniform row-oriented chart table.

    Args:
        rows: Ordered rows. Each row holds the axis key plus every key in `keys`.
        keys: Resolved series keys in first-appearance order (deduplicated).
        shape: Input shape the table was derived from.
        series_meta: Metadata aligned to the declared series (composite shape only).
        y_axes: Raw `yAxes` block for composite payloads, passed through untouched.
        title: Optional title embedded in a composite payload.
        axis_key: Row key that holds the categorical axis label.
    """

    rows: tuple[Row, ...] = ()
    keys: tuple[str, ...] = ()
    shape: ShapeKind = "unrecognized"
    series_meta: tuple[SeriesMeta, ...] = ()
    y_axes: dict[str, Any] | None = None
    title: str | None = None
    axis_key: str = AXIS_KEY

    @property
    def is_empty(self) -> bool:
        """Return True when there is nothing to render."""

        return not self.rows or not self.keys

    @property
    def is_composite(self) -> bool:
        """Return True when the table came from a mixed-axis payload."""

        return self.shape == "composite"

    def labels(self) -> list[str]:
        """Return the categorical axis labels in row order."""

        return [str(row.get(self.axis_key, "")) for row in self.rows]

    def column(self, key: str) -> list[CellValue]:
        """Return the values for one series key aligned to `labels()`."""

        return [row.get(key) for row in self.rows]


@dataclass(frozen=True, slots=True)
class NormalizationError:
    """Why a normalization produced nothing to render.

    Args:
        kind: "empty" for unrecognized/empty input, "malformed" when conversion failed.
        message: Diagnostic message intended for logs and tests.
    """

    kind: ErrorKind
    message: str


@dataclass(frozen=True, slots=True)
class NormalizationResult:
    """Outcome of normalizing a chart config.

    `table` is always well-formed; it is empty whenever `error` is set.
    """

    table: NormalizedTable = field(default_factory=NormalizedTable)
    error: NormalizationError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the config normalized without error."""

        return self.error is None
