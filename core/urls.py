"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.dashboard, name="dashboard"),
    path("topic/<slug:topic_id>/", views.topic_detail, name="topic_detail"),
    path("gestao/", views.panel, name="panel"),
    path("gestao/entrar/", views.panel_login, name="panel_login"),
    path("gestao/sair/", views.panel_logout, name="panel_logout"),
    path("gestao/<str:post_id>/editar/", views.panel_edit, name="panel_edit"),
    path("gestao/<str:post_id>/excluir/", views.panel_delete, name="panel_delete"),
    path("api/posts", views.posts_api, name="posts_api"),
    path("api/posts/<str:post_id>", views.post_detail_api, name="post_detail_api"),
]
