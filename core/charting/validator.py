"""Submission-time validation for chart configs.

Chart configs are operator-authored JSON. Validation here is input hygiene
applied before a record is stored; the normalizer still tolerates configs that
slipped past it or were stored before these checks existed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from analysis.normalizer import normalize_chart_config

from .schema import CHART_TYPES, HEX_COLOR_RE


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a chart config."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_chart_config(config: object) -> ValidationResult:
    """Validate a chart config before it is accepted for storage.

    Args:
        config: Parsed chart config (after title/color overrides are applied).

    Returns:
        ValidationResult containing human-readable errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []

    if not isinstance(config, Mapping):
        return ValidationResult(is_valid=False, errors=("A configuração do gráfico deve ser um objeto JSON.",))

    chart_type = config.get("type")
    if not chart_type:
        errors.append("O JSON deve conter a propriedade 'type'.")
    elif chart_type not in CHART_TYPES:
        errors.append(f"Tipo de gráfico não suportado: {chart_type!r}. Use 'bar', 'line' ou 'pie'.")

    title = config.get("title")
    if not isinstance(title, str) or not title.strip():
        errors.append("Por favor, adicione um título ao gráfico (no campo acima ou no JSON).")

    color = config.get("color")
    if color is not None and not (isinstance(color, str) and HEX_COLOR_RE.match(color)):
        errors.append(f"Cor inválida: {color!r}. Use o formato hexadecimal (#RRGGBB).")

    data = config.get("data")
    has_data_array = isinstance(data, list)
    has_data_object = isinstance(data, Mapping)
    has_series = isinstance(config.get("series"), list)
    if not has_data_array and not has_data_object and not has_series:
        errors.append("O JSON deve conter dados (propriedade 'data' ou 'series').")

    if has_data_array:
        _validate_nested_values(data, errors=errors)
    if has_data_object and "labels" not in data and "series" not in data:
        warnings.append("O objeto 'data' não contém 'labels' nem 'series'; nada será exibido.")

    if not errors:
        result = normalize_chart_config(config)
        if result.error is not None and result.error.kind == "malformed":
            errors.append(f"Os dados não puderam ser interpretados: {result.error.message}")
        elif result.table.is_empty:
            warnings.append("O gráfico não possui dados para exibir.")

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def _validate_nested_values(data: list[object], *, errors: list[str]) -> None:
    """Require nested series entries to carry list `values`."""

    for idx, entry in enumerate(data):
        if isinstance(entry, Mapping) and "values" in entry and not isinstance(entry["values"], list):
            errors.append(f"Formato inválido: 'values' deve ser um array (série {idx}).")
