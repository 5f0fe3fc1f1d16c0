"""Template context processors for the indicator board."""

from __future__ import annotations

from django.conf import settings
from django.http import HttpRequest

from core.panel_access import panel_unlocked
from core.topics import TOPICS


def board(request: HttpRequest) -> dict[str, object]:
    """Expose site name, topics and panel state to all templates.

    Args:
        request: Current request object.

    Returns:
        Context dict with `site_name`, `topics` and `panel_unlocked`.
    """

    return {
        "site_name": getattr(settings, "INDICATORS_SITE_NAME", ""),
        "topics": TOPICS,
        "panel_unlocked": panel_unlocked(request),
    }
