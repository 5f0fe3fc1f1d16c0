"""Forms for the management panel.

The panel requires:
- a shared-password unlock form,
- a create/edit form for indicators whose chart data is pasted as JSON.
"""

from __future__ import annotations

from typing import Any

from django import forms

from core.charting.payload import DEFAULT_JSON_TEMPLATE, ChartPayloadError, decode_chart_payload, prepare_chart_config
from core.charting.schema import DEFAULT_CHART_COLOR, HEX_COLOR_RE
from core.panel_access import check_panel_password
from core.topics import TopicId


class PanelLoginForm(forms.Form):
    """Validate the shared management password."""

    password = forms.CharField(
        label="Senha de Acesso",
        strip=False,
        widget=forms.PasswordInput(attrs={"placeholder": "Digite a senha...", "autofocus": True}),
    )

    def clean_password(self) -> str:
        """Reject passwords that do not match the configured one."""

        password = self.cleaned_data.get("password") or ""
        if not check_panel_password(password):
            raise forms.ValidationError("Senha incorreta.")
        return password


class PostForm(forms.Form):
    """Validate an indicator submitted from the management panel.

    `clean()` decodes the chart JSON, applies the title/color overrides and
    stores the prepared config in `cleaned_data["chart_config"]`.
    """

    topic_id = forms.ChoiceField(
        choices=TopicId.choices,
        initial=TopicId.SAUDE,
        label="Área / Tópico",
    )
    title = forms.CharField(
        required=False,
        max_length=200,
        label="Título do Indicador",
        help_text="Se deixar vazio, tentaremos usar o título do JSON.",
    )
    description = forms.CharField(
        label="Descrição e Análise",
        widget=forms.Textarea(attrs={"rows": 3}),
        help_text="Descreva o contexto, a fonte dos dados e a análise dos resultados.",
    )
    color = forms.CharField(
        required=False,
        initial=DEFAULT_CHART_COLOR,
        label="Cor do Gráfico (Opcional)",
        widget=forms.TextInput(attrs={"type": "color"}),
    )
    chart_json = forms.CharField(
        initial=DEFAULT_JSON_TEMPLATE,
        label="Dados (JSON)",
        widget=forms.Textarea(attrs={"rows": 14, "spellcheck": "false", "class": "json-editor"}),
    )

    def clean_color(self) -> str:
        """Validate the optional hex color."""

        color = (self.cleaned_data.get("color") or "").strip()
        if color and not HEX_COLOR_RE.match(color):
            raise forms.ValidationError("Use uma cor hexadecimal (#RRGGBB).")
        return color

    def clean(self) -> dict[str, Any]:
        """Decode and validate the chart JSON with panel overrides applied."""

        cleaned = super().clean()
        raw_json = cleaned.get("chart_json")
        if not raw_json:
            return cleaned

        try:
            decoded = decode_chart_payload(raw_json)
        except ChartPayloadError as exc:
            self.add_error("chart_json", str(exc))
            return cleaned

        config, result = prepare_chart_config(
            decoded,
            form_title=cleaned.get("title") or "",
            color=cleaned.get("color") or None,
        )
        for error in result.errors:
            self.add_error("chart_json", error)
        cleaned["chart_config"] = config
        cleaned["chart_warnings"] = result.warnings
        return cleaned
