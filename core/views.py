"""Views for the public topic pages, the management panel and the posts API."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any

from django.conf import settings
from django.contrib import messages
from django.db import transaction
from django.db.models import Count
from django.http import Http404, HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse
from django.utils import timezone
from django.views.decorators.http import require_http_methods, require_POST

from analysis.months import MONTH_NAMES
from core.charting.payload import encode_chart_payload
from core.charting.render import render_charts
from core.charting.schema import DEFAULT_CHART_COLOR
from core.charting.validator import validate_chart_config
from core.forms import PanelLoginForm, PostForm
from core.models import Post, datetime_from_ms
from core.panel_access import panel_required, panel_required_json, panel_unlocked, set_panel_unlocked
from core.redirects import safe_redirect
from core.topics import TOPICS, TopicId, get_topic

logger = logging.getLogger(__name__)


def _chart_palette() -> tuple[str, ...]:
    """Return the configured chart palette."""

    return tuple(getattr(settings, "CHART_PALETTE", ()) or ())


def format_date_pt_br(value: datetime) -> str:
    """Format a datetime as a long pt-BR date (e.g. "05 de março de 2025")."""

    local = timezone.localtime(value) if timezone.is_aware(value) else value
    return f"{local.day:02d} de {MONTH_NAMES[local.month - 1].lower()} de {local.year}"


def dashboard(request: HttpRequest) -> HttpResponse:
    """Render the topic grid with per-topic indicator counts."""

    counts = dict(Post.objects.values_list("topic_id").annotate(total=Count("id")).order_by())
    cards = [{"topic": topic, "count": counts.get(str(topic.id), 0)} for topic in TOPICS]
    return render(request, "core/dashboard.html", {"topic_cards": cards})


def topic_detail(request: HttpRequest, topic_id: str) -> HttpResponse:
    """Render every indicator published under a topic, newest first."""

    topic = get_topic(topic_id)
    if topic is None:
        raise Http404("Tópico não encontrado.")

    posts = list(Post.objects.for_topic(topic_id))
    charts = render_charts((post.chart_config for post in posts), palette=_chart_palette())
    panels: list[dict[str, Any]] = []
    for post, chart in zip(posts, charts):
        panels.append(
            {
                "post": post,
                "chart": chart,
                "payload": chart.as_json(),
                "dom_id": f"chart-{post.id}",
                "payload_id": f"chart-{post.id}-data",
                "created_label": format_date_pt_br(post.created_at),
            }
        )

    return render(
        request,
        "core/topic_detail.html",
        {"topic": topic, "panels": panels, "post_count": len(panels)},
    )


def panel_login(request: HttpRequest) -> HttpResponse:
    """Render and process the management password form."""

    if panel_unlocked(request):
        return redirect("core:panel")

    form = PanelLoginForm(request.POST if request.method == "POST" else None)
    if request.method == "POST" and form.is_valid():
        set_panel_unlocked(request, unlocked=True)
        return safe_redirect(
            request,
            candidate=request.POST.get("next"),
            fallback=reverse("core:panel"),
        )
    if request.method == "POST":
        logger.warning("Rejected management panel password attempt")
    return render(request, "core/panel_login.html", {"form": form, "next": request.GET.get("next", "")})


@require_POST
def panel_logout(request: HttpRequest) -> HttpResponse:
    """Lock the management panel for the current session."""

    set_panel_unlocked(request, unlocked=False)
    return redirect("core:dashboard")


@panel_required
def panel(request: HttpRequest) -> HttpResponse:
    """List indicators and publish new ones."""

    form = PostForm(request.POST if request.method == "POST" else None)
    if request.method == "POST" and form.is_valid():
        post = Post.objects.create(
            topic_id=form.cleaned_data["topic_id"],
            description=form.cleaned_data["description"],
            chart_config=form.cleaned_data["chart_config"],
        )
        logger.info("Published indicator %s under topic %s", post.id, post.topic_id)
        _flash_warnings(request, form)
        messages.success(request, "Gráfico adicionado com sucesso!")
        return redirect("core:panel")

    return render(
        request,
        "core/panel.html",
        {"form": form, "posts": Post.objects.all(), "editing": None},
    )


@panel_required
def panel_edit(request: HttpRequest, post_id: str) -> HttpResponse:
    """Edit an existing indicator, re-opening its stored chart JSON."""

    post = get_object_or_404(Post, pk=post_id)
    if request.method == "POST":
        form = PostForm(request.POST)
        if form.is_valid():
            post.topic_id = form.cleaned_data["topic_id"]
            post.description = form.cleaned_data["description"]
            post.chart_config = form.cleaned_data["chart_config"]
            post.save(update_fields=["topic_id", "description", "chart_config"])
            logger.info("Updated indicator %s", post.id)
            _flash_warnings(request, form)
            messages.success(request, "Gráfico atualizado com sucesso!")
            return redirect("core:panel")
    else:
        config = post.chart_config if isinstance(post.chart_config, dict) else {}
        form = PostForm(
            initial={
                "topic_id": post.topic_id,
                "title": post.title,
                "description": post.description,
                "color": config.get("color") or DEFAULT_CHART_COLOR,
                "chart_json": encode_chart_payload(config),
            }
        )

    return render(
        request,
        "core/panel.html",
        {"form": form, "posts": Post.objects.all(), "editing": post},
    )


@require_POST
@panel_required
def panel_delete(request: HttpRequest, post_id: str) -> HttpResponse:
    """Delete an indicator permanently."""

    deleted, _ = Post.objects.filter(pk=post_id).delete()
    if deleted:
        logger.info("Deleted indicator %s", post_id)
        messages.success(request, "Gráfico excluído.")
    else:
        messages.error(request, "Gráfico não encontrado.")
    return redirect("core:panel")


def _flash_warnings(request: HttpRequest, form: PostForm) -> None:
    """Surface non-fatal chart validation warnings as messages."""

    for warning in form.cleaned_data.get("chart_warnings") or ():
        messages.warning(request, warning)


@require_http_methods(["GET", "POST"])
@panel_required_json
def posts_api(request: HttpRequest) -> JsonResponse:
    """List posts (GET) or create one (POST)."""

    if request.method == "GET":
        return JsonResponse({"data": [post.as_json() for post in Post.objects.all()]})

    try:
        body = _json_body(request)
    except ValueError as exc:
        return JsonResponse({"error": str(exc)}, status=400)

    errors = _validate_post_body(body)
    if errors:
        return JsonResponse({"error": " ".join(errors), "errors": errors}, status=400)

    post_id = body.get("id")
    if post_id is not None and (not isinstance(post_id, (str, int)) or isinstance(post_id, bool) or not str(post_id)):
        return JsonResponse({"error": "Identificador inválido."}, status=400)

    fields: dict[str, Any] = {
        "topic_id": body["topicId"],
        "description": body["description"],
        "chart_config": body["chartConfig"],
    }
    created_at = datetime_from_ms(body.get("createdAt"))
    if created_at is not None:
        fields["created_at"] = created_at

    with transaction.atomic():
        if post_id is not None:
            post_id = str(post_id)
            if Post.objects.filter(pk=post_id).exists():
                return JsonResponse({"error": f"Já existe um post com id {post_id!r}."}, status=409)
            fields["id"] = post_id
        post = Post.objects.create(**fields)

    logger.info("Created indicator %s via API", post.id)
    return JsonResponse({"message": "Post criado com sucesso", "id": post.id}, status=201)


@require_http_methods(["PUT", "DELETE"])
@panel_required_json
def post_detail_api(request: HttpRequest, post_id: str) -> JsonResponse:
    """Update (PUT) or delete (DELETE) a single post."""

    if request.method == "DELETE":
        deleted, _ = Post.objects.filter(pk=post_id).delete()
        logger.info("Deleted indicator %s via API (changes=%s)", post_id, deleted)
        return JsonResponse({"message": "Post deletado", "changes": deleted})

    try:
        body = _json_body(request)
    except ValueError as exc:
        return JsonResponse({"error": str(exc)}, status=400)

    errors = _validate_post_body(body)
    if errors:
        return JsonResponse({"error": " ".join(errors), "errors": errors}, status=400)

    updated = Post.objects.filter(pk=post_id).update(
        topic_id=body["topicId"],
        description=body["description"],
        chart_config=body["chartConfig"],
    )
    if not updated:
        return JsonResponse({"error": "Post não encontrado."}, status=404)

    logger.info("Updated indicator %s via API", post_id)
    return JsonResponse({"message": "Post atualizado com sucesso", "id": post_id})


def _json_body(request: HttpRequest) -> dict[str, Any]:
    """Decode a JSON object request body.

    Raises:
        ValueError: When the body is not a JSON object.
    """

    try:
        body = json.loads(request.body or b"null")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError("Corpo da requisição não é um JSON válido.") from exc
    if not isinstance(body, dict):
        raise ValueError("Corpo da requisição deve ser um objeto JSON.")
    return body


def _validate_post_body(body: dict[str, Any]) -> list[str]:
    """Validate the API fields shared by create and update."""

    errors: list[str] = []
    if body.get("topicId") not in TopicId.values:
        errors.append(f"Tópico inválido: {body.get('topicId')!r}.")
    if not isinstance(body.get("description"), str):
        errors.append("A descrição deve ser um texto.")
    result = validate_chart_config(body.get("chartConfig"))
    errors.extend(result.errors)
    return errors
