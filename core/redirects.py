"""Safe redirect helpers for the management panel.

The unlock form accepts a `next` target. Only targets on this host are
followed; anything else falls back to the panel.
"""

from __future__ import annotations

from django.http import HttpRequest, HttpResponseRedirect
from django.shortcuts import redirect
from django.utils.http import url_has_allowed_host_and_scheme


def safe_redirect(request: HttpRequest, *, candidate: str | None, fallback: str) -> HttpResponseRedirect:
    """Redirect to `candidate` when it is safe for this host, else to `fallback`.

    Args:
        request: Incoming request used for host + scheme validation.
        candidate: Requested redirect target (typically the `next` parameter).
        fallback: Safe default URL.

    Returns:
        An HttpResponseRedirect to a safe URL.
    """

    value = (candidate or "").strip()
    if value and url_has_allowed_host_and_scheme(
        url=value,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return redirect(value)
    return redirect(fallback)
