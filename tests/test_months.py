"""Tests for calendar month recognition."""

from __future__ import annotations

import pytest

from analysis.months import MONTH_NAMES, all_month_names, month_index

pytestmark = pytest.mark.unit


def test_month_index_is_case_and_whitespace_insensitive() -> None:
    """Match full month names regardless of case and surrounding spaces."""

    assert month_index("Janeiro") == 0
    assert month_index("  março ") == 2
    assert month_index("DEZEMBRO") == 11
    assert month_index("Jan") is None
    assert month_index(3) is None


def test_all_month_names_requires_every_label() -> None:
    """Only a fully month-named, non-empty label set counts as a month series."""

    assert all_month_names(MONTH_NAMES) is True
    assert all_month_names(["Março", "Zona A"]) is False
    assert all_month_names([]) is False
