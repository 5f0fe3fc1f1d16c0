"""Pytest fixtures shared across Django integration tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest


@pytest.fixture
def panel_client(client, db):
    """Return a Django test client whose session has the management panel unlocked."""

    from core.panel_access import PANEL_SESSION_KEY

    session = client.session
    session[PANEL_SESSION_KEY] = True
    session.save()
    return client


@pytest.fixture
def dengue_post(db):
    """Return a stored flat-rows indicator under the health topic."""

    from core.models import Post
    from core.topics import TopicId

    return Post.objects.create(
        id="dengue",
        topic_id=TopicId.SAUDE,
        description="Casos notificados por mês.",
        chart_config={
            "type": "bar",
            "title": "Casos de Dengue",
            "color": "#10b981",
            "data": [{"label": "Jan", "value": 6}, {"label": "Fev", "value": 1}],
        },
    )


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django, database, views, commands, or IO.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
