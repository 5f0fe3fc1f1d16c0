"""Sample indicators loaded into an empty store.

These mirror the two indicators the board shipped with so a fresh deployment
has something to browse.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Final

from django.db import transaction
from django.utils import timezone

from core.models import Post
from core.topics import TopicId

SAMPLE_POSTS: Final[tuple[dict[str, Any], ...]] = (
    {
        "id": "1",
        "topic_id": TopicId.SAUDE,
        "age": timedelta(0),
        "description": "Acompanhamento mensal dos casos notificados de Dengue no município.",
        "chart_config": {
            "type": "bar",
            "title": "Casos de Dengue em São Gonçalo dos Campos (Jan-Nov 2025)",
            "data": [
                {"label": "Jan", "value": 6},
                {"label": "Fev", "value": 1},
                {"label": "Mar", "value": 2},
                {"label": "Abr", "value": 1},
                {"label": "Mai", "value": 2},
                {"label": "Jun", "value": 4},
                {"label": "Jul", "value": 1},
                {"label": "Ago", "value": 1},
                {"label": "Set", "value": 2},
                {"label": "Out", "value": 1},
                {"label": "Nov", "value": 2},
            ],
            "color": "#10b981",
        },
    },
    {
        "id": "2",
        "topic_id": TopicId.FINANCAS,
        "age": timedelta(seconds=100),
        "description": "Comparativo de arrecadação de impostos no primeiro trimestre.",
        "chart_config": {
            "type": "bar",
            "title": "Arrecadação de IPTU (em Milhares de R$)",
            "data": [
                {"label": "Jan", "value": 450},
                {"label": "Fev", "value": 320},
                {"label": "Mar", "value": 280},
            ],
            "color": "#059669",
        },
    },
)


@dataclass(frozen=True, slots=True)
class SeedResult:
    """Outcome for sample seeding."""

    seeded: bool
    created: int
    skipped: int


def seed_sample_posts(*, force: bool = False) -> SeedResult:
    """Create the sample posts.

    Args:
        force: Seed even when the store already holds posts. Existing sample
            ids are never overwritten.

    Returns:
        SeedResult describing what was written.
    """

    if not force and Post.objects.exists():
        return SeedResult(seeded=False, created=0, skipped=len(SAMPLE_POSTS))

    now = timezone.now()
    created = 0
    skipped = 0
    with transaction.atomic():
        for sample in SAMPLE_POSTS:
            _, was_created = Post.objects.get_or_create(
                id=sample["id"],
                defaults={
                    "topic_id": sample["topic_id"],
                    "description": sample["description"],
                    "chart_config": sample["chart_config"],
                    "created_at": now - sample["age"],
                },
            )
            if was_created:
                created += 1
            else:
                skipped += 1
    return SeedResult(seeded=created > 0, created=created, skipped=skipped)
