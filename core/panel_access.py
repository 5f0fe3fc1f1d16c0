"""Shared-password gate for the management panel.

The panel is protected by a single operator password configured through
`settings.INDICATORS_PANEL_PASSWORD`. Unlocking stores a flag in the session;
API writes and panel views require it.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Callable, Final

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect
from django.utils.crypto import constant_time_compare

logger = logging.getLogger(__name__)

PANEL_SESSION_KEY: Final[str] = "indicators_panel_unlocked"


def panel_unlocked(request: HttpRequest) -> bool:
    """Return True when the management panel is unlocked for this session."""

    return bool(getattr(request, "session", {}).get(PANEL_SESSION_KEY, False))


def check_panel_password(candidate: str | None) -> bool:
    """Compare a submitted password with the configured one in constant time."""

    expected = getattr(settings, "INDICATORS_PANEL_PASSWORD", "") or ""
    if not expected or not candidate:
        return False
    return constant_time_compare(candidate, expected)


def set_panel_unlocked(request: HttpRequest, *, unlocked: bool) -> None:
    """Lock or unlock the management panel in the current session.

    Args:
        request: Incoming request whose session will be updated.
        unlocked: Desired state.
    """

    if unlocked:
        request.session.cycle_key()
    request.session[PANEL_SESSION_KEY] = bool(unlocked)
    request.session.modified = True
    logger.info("Management panel %s", "unlocked" if unlocked else "locked")


def panel_required(view: Callable[..., HttpResponse]) -> Callable[..., HttpResponse]:
    """Redirect to the panel unlock form when the session is locked."""

    @wraps(view)
    def _wrapped(request: HttpRequest, *args, **kwargs) -> HttpResponse:
        if not panel_unlocked(request):
            return redirect("core:panel_login")
        return view(request, *args, **kwargs)

    return _wrapped


def panel_required_json(view: Callable[..., HttpResponse]) -> Callable[..., HttpResponse]:
    """Reject API writes with HTTP 403 when the session is locked.

    Safe methods (GET/HEAD/OPTIONS) pass through.
    """

    @wraps(view)
    def _wrapped(request: HttpRequest, *args, **kwargs) -> HttpResponse:
        if request.method not in ("GET", "HEAD", "OPTIONS") and not panel_unlocked(request):
            return JsonResponse({"error": "Acesso restrito: desbloqueie o painel de gestão."}, status=403)
        return view(request, *args, **kwargs)

    return _wrapped
