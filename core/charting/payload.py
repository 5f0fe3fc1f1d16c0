"""Encoding/decoding helpers for chart JSON edited in the management panel."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Final

from .validator import ValidationResult, validate_chart_config

DEFAULT_JSON_TEMPLATE: Final[str] = json.dumps(
    {
        "chart": {
            "type": "bar",
            "title": "Novo Gráfico",
            "data": [
                {"label": "Janeiro", "value": 10},
                {"label": "Fevereiro", "value": 20},
            ],
        }
    },
    indent=2,
    ensure_ascii=False,
)

# Keys reproduced when a stored config is re-opened for editing.
_EDITABLE_KEYS: Final[tuple[str, ...]] = ("type", "title", "color", "data", "series", "options")


class ChartPayloadError(ValueError):
    """Raised when submitted chart JSON cannot be accepted."""


def decode_chart_payload(text: str) -> dict[str, Any]:
    """Parse chart JSON typed by an operator.

    A top-level `{"chart": {...}}` wrapper is unwrapped.

    Args:
        text: Raw JSON text.

    Returns:
        The chart config dict.

    Raises:
        ChartPayloadError: When the text is not valid JSON or not an object.
    """

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ChartPayloadError(
            f"Erro ao processar JSON. Verifique a sintaxe (linha {exc.lineno}, coluna {exc.colno})."
        ) from exc

    if isinstance(parsed, Mapping) and isinstance(parsed.get("chart"), Mapping):
        parsed = parsed["chart"]
    if not isinstance(parsed, Mapping):
        raise ChartPayloadError("O JSON deve ser um objeto com a configuração do gráfico.")
    return dict(parsed)


def encode_chart_payload(config: Mapping[str, Any]) -> str:
    """Encode a stored config back into the editable `{"chart": ...}` JSON."""

    chart = {key: config[key] for key in _EDITABLE_KEYS if config.get(key) is not None}
    return json.dumps({"chart": chart}, indent=2, ensure_ascii=False)


def resolve_title(config: Mapping[str, Any], *, form_title: str = "") -> str:
    """Resolve the chart title: form field, then composite `data.title`, then `title`."""

    title = (form_title or "").strip()
    if title:
        return title
    data = config.get("data")
    if isinstance(data, Mapping):
        embedded = data.get("title")
        if isinstance(embedded, str) and embedded.strip():
            return embedded.strip()
    stored = config.get("title")
    if isinstance(stored, str):
        return stored.strip()
    return ""


def prepare_chart_config(
    config: Mapping[str, Any],
    *,
    form_title: str = "",
    color: str | None = None,
) -> tuple[dict[str, Any], ValidationResult]:
    """Apply panel overrides to a decoded config and validate the result.

    Args:
        config: Decoded chart config.
        form_title: Title typed in the panel (wins over JSON titles).
        color: Color picked in the panel (overrides `config.color`).

    Returns:
        Tuple of (config ready for storage, validation result).
    """

    prepared = dict(config)
    title = resolve_title(prepared, form_title=form_title)
    if title:
        prepared["title"] = title
    if color:
        prepared["color"] = color
    return prepared, validate_chart_config(prepared)
