"""Calendar month names used to repair out-of-order monthly series.

Operators frequently author month series in the order they were collected
rather than calendar order. Month names follow the pt-BR convention used by the
published indicators.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

MONTH_NAMES: Final[tuple[str, ...]] = (
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)

_MONTH_INDEX: Final[dict[str, int]] = {name.casefold(): idx for idx, name in enumerate(MONTH_NAMES)}


def month_index(label: object) -> int | None:
    """Return the zero-based calendar index for a month name, or None."""

    if not isinstance(label, str):
        return None
    return _MONTH_INDEX.get(label.strip().casefold())


def all_month_names(labels: Iterable[object]) -> bool:
    """Return True when every label is a recognized month name.

    An empty iterable is not considered a month series.
    """

    seen = False
    for label in labels:
        if month_index(label) is None:
            return False
        seen = True
    return seen
