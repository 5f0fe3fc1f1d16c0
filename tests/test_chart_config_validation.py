"""Tests for submission-time chart config validation and JSON payload handling."""

from __future__ import annotations

import json

import pytest

from core.charting.payload import (
    DEFAULT_JSON_TEMPLATE,
    ChartPayloadError,
    decode_chart_payload,
    encode_chart_payload,
    prepare_chart_config,
    resolve_title,
)
from core.charting.validator import validate_chart_config

pytestmark = pytest.mark.unit


def test_valid_flat_config_passes() -> None:
    """A typed, titled config with flat rows validates without warnings."""

    result = validate_chart_config({"type": "line", "title": "T", "data": [{"label": "A", "value": 1}]})
    assert result.is_valid is True
    assert result.errors == ()
    assert result.warnings == ()


def test_validation_rejects_missing_type_title_and_data() -> None:
    """Report every missing required field at once."""

    result = validate_chart_config({"title": " "})
    assert result.is_valid is False
    assert "O JSON deve conter a propriedade 'type'." in result.errors
    assert any("título" in error for error in result.errors)
    assert "O JSON deve conter dados (propriedade 'data' ou 'series')." in result.errors


def test_validation_rejects_unsupported_type_and_bad_color() -> None:
    """Only bar/line/pie and hex colors are accepted."""

    result = validate_chart_config({"type": "radar", "title": "T", "color": "green", "data": []})
    assert result.is_valid is False
    assert any("radar" in error for error in result.errors)
    assert any("Cor inválida" in error for error in result.errors)


def test_validation_requires_array_values_for_nested_series() -> None:
    """A nested entry whose `values` is not a list is rejected with its index."""

    config = {
        "type": "bar",
        "title": "T",
        "data": [{"label": "ok", "values": []}, {"label": "bad", "values": {"city": "A"}}],
    }
    result = validate_chart_config(config)
    assert result.is_valid is False
    assert "Formato inválido: 'values' deve ser um array (série 1)." in result.errors


def test_validation_rejects_unparseable_values() -> None:
    """Configs the normalizer reports as malformed are rejected."""

    result = validate_chart_config({"type": "bar", "title": "T", "data": [{"label": "A", "value": "dez"}]})
    assert result.is_valid is False
    assert any(error.startswith("Os dados não puderam ser interpretados") for error in result.errors)


def test_validation_warns_on_empty_tables() -> None:
    """Configs with nothing to draw are accepted with a warning."""

    empty = validate_chart_config({"type": "bar", "title": "T", "data": []})
    assert empty.is_valid is True
    assert "O gráfico não possui dados para exibir." in empty.warnings

    no_labels = validate_chart_config({"type": "bar", "title": "T", "data": {"title": "x"}})
    assert no_labels.is_valid is True
    assert any("labels" in warning for warning in no_labels.warnings)


def test_validation_rejects_non_object_configs() -> None:
    """A config must be a JSON object."""

    result = validate_chart_config(["bar"])
    assert result.is_valid is False
    assert len(result.errors) == 1


def test_decode_unwraps_chart_envelope() -> None:
    """`{"chart": {...}}` and bare configs decode to the same dict."""

    wrapped = decode_chart_payload('{"chart": {"type": "pie", "data": []}}')
    bare = decode_chart_payload('{"type": "pie", "data": []}')
    assert wrapped == bare == {"type": "pie", "data": []}
    assert decode_chart_payload(DEFAULT_JSON_TEMPLATE)["title"] == "Novo Gráfico"


def test_decode_reports_syntax_position() -> None:
    """Syntax errors mention the line and column."""

    with pytest.raises(ChartPayloadError, match="linha 2"):
        decode_chart_payload('{\n  "type": }')
    with pytest.raises(ChartPayloadError):
        decode_chart_payload("[1, 2]")


def test_encode_keeps_only_editable_keys() -> None:
    """Re-opened configs are wrapped in `chart` and drop unknown keys."""

    encoded = json.loads(encode_chart_payload({"type": "bar", "title": "T", "data": [], "extra": 1, "color": None}))
    assert encoded == {"chart": {"type": "bar", "title": "T", "data": []}}


def test_title_resolution_order() -> None:
    """The panel title wins, then the composite `data.title`, then `title`."""

    config = {"title": "Stored", "data": {"title": "Embedded", "labels": []}}
    assert resolve_title(config, form_title="  Typed ") == "Typed"
    assert resolve_title(config) == "Embedded"
    assert resolve_title({"title": "Stored", "data": []}) == "Stored"
    assert resolve_title({"data": []}) == ""


def test_prepare_applies_overrides_before_validating() -> None:
    """Title and color overrides are written into the stored config."""

    config, result = prepare_chart_config(
        {"type": "bar", "data": [{"label": "A", "value": 1}]},
        form_title="Casos",
        color="#123456",
    )
    assert config["title"] == "Casos"
    assert config["color"] == "#123456"
    assert result.is_valid is True

    _, untitled = prepare_chart_config({"type": "bar", "data": [{"label": "A", "value": 1}]})
    assert untitled.is_valid is False
