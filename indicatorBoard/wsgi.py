"""WSGI entry point for serving the indicator board.

Production deployments point their WSGI server at `indicatorBoard.wsgi:application`.
Static assets are served by WhiteNoise when `DJANGO_DEBUG` is off.
"""

from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "indicatorBoard.settings")

application = get_wsgi_application()
