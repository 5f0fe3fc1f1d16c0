"""Database models for the core app.

Each published indicator is stored as a Post holding the operator's
description and the chart config JSON exactly as submitted. Chart configs are
never normalized at write time; rendering derives the table on every request.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone as dt_timezone
from typing import Any

from django.db import models
from django.utils import timezone

from core.topics import TopicId, get_topic


def new_post_id() -> str:
    """Return a fresh Post identifier."""

    return uuid.uuid4().hex


class PostQuerySet(models.QuerySet["Post"]):
    """QuerySet helpers for Post."""

    def for_topic(self, topic_id: str) -> "PostQuerySet":
        """Return posts for a topic, newest first."""

        return self.filter(topic_id=topic_id).order_by("-created_at")


class Post(models.Model):
    """A published indicator: a chart plus free-text analysis.

    Attributes:
        id: Stable string identifier (client-supplied or generated).
        topic_id: Topic the indicator is published under.
        description: Operator-authored context and analysis.
        chart_config: Chart config JSON as submitted (see `core.charting.schema`).
        created_at: Publication timestamp.
    """

    id = models.CharField(primary_key=True, max_length=64, default=new_post_id, editable=False)
    topic_id = models.CharField(max_length=32, choices=TopicId.choices, db_index=True)
    description = models.TextField()
    chart_config = models.JSONField(default=dict)
    created_at = models.DateTimeField(default=timezone.now)

    objects = PostQuerySet.as_manager()

    class Meta:
        ordering = ("-created_at",)
        verbose_name = "Indicador"
        verbose_name_plural = "Indicadores"

    def __str__(self) -> str:
        """Return the chart title for admin/debug usage."""

        return self.title or f"Post({self.id})"

    @property
    def title(self) -> str:
        """Return the chart title stored in the config."""

        title = (self.chart_config or {}).get("title") if isinstance(self.chart_config, dict) else None
        return title if isinstance(title, str) else ""

    @property
    def topic(self):
        """Return the TopicDefinition for this post (None when unknown)."""

        return get_topic(self.topic_id)

    @property
    def created_at_ms(self) -> int:
        """Return `created_at` as epoch milliseconds."""

        return int(self.created_at.timestamp() * 1000)

    def as_json(self) -> dict[str, Any]:
        """Return the API representation of this post."""

        return {
            "id": self.id,
            "topicId": self.topic_id,
            "description": self.description,
            "chartConfig": self.chart_config,
            "createdAt": self.created_at_ms,
        }


def datetime_from_ms(value: object) -> datetime | None:
    """Parse epoch milliseconds into an aware datetime (None when invalid)."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(value / 1000, tz=dt_timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
