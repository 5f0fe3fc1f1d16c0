"""Integration tests for the sample seeding command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from core.models import Post
from core.samples import SAMPLE_POSTS

pytestmark = pytest.mark.integration


@pytest.mark.django_db
def test_seed_posts_populates_empty_store() -> None:
    """An empty store receives every sample indicator."""

    out = StringIO()
    call_command("seed_posts", stdout=out)

    assert Post.objects.count() == len(SAMPLE_POSTS)
    assert set(Post.objects.values_list("id", flat=True)) == {"1", "2"}
    assert "Created 2 sample indicator(s)." in out.getvalue()

    newest = Post.objects.first()
    assert newest is not None
    assert newest.id == "1"


@pytest.mark.django_db
def test_seed_posts_skips_populated_store(dengue_post) -> None:
    """Existing data is left alone unless forced."""

    out = StringIO()
    call_command("seed_posts", stdout=out)
    assert Post.objects.count() == 1
    assert "store already populated" in out.getvalue()


@pytest.mark.django_db
def test_seed_posts_force_never_overwrites_sample_ids() -> None:
    """`--force` adds missing samples without touching existing ids."""

    Post.objects.create(id="1", topic_id="saude", description="Editado.", chart_config={})

    out = StringIO()
    call_command("seed_posts", "--force", stdout=out)

    assert Post.objects.count() == 2
    assert Post.objects.get(pk="1").description == "Editado."
    assert "Created 1 sample indicator(s)." in out.getvalue()
