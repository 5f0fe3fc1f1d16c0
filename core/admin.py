"""Admin registrations for the core app."""

from __future__ import annotations

from django.contrib import admin

from core.models import Post


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    """Admin configuration for Post."""

    list_display = ("title", "topic_id", "created_at")
    list_filter = ("topic_id",)
    search_fields = ("id", "description")
    readonly_fields = ("id",)
    ordering = ("-created_at",)
