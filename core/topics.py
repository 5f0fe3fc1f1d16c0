"""Fixed topical categories under which indicators are published.

Topic ids are stable identifiers stored on each Post and used in URLs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from django.db import models


class TopicId(models.TextChoices):
    """Stable topic identifiers (stored on Post.topic_id)."""

    SAUDE = "saude", "Saúde"
    EDUCACAO = "educacao", "Educação"
    DESENVOLVIMENTO_SOCIAL = "social", "Desenvolvimento Social"
    FINANCAS = "financas", "Finanças"
    ESPORTE_CULTURA_LAZER = "esporte", "Esporte, Cultura e Lazer"
    AGRICULTURA = "agricultura", "Agricultura"
    INFRAESTRUTURA = "infraestrutura", "Infraestrutura"
    PLANEJAMENTO = "planejamento", "Planejamento"


@dataclass(frozen=True, slots=True)
class TopicDefinition:
    """Display definition for a topic card.

    Attributes:
        id: Stable topic id.
        label: Human-readable topic name.
        icon_name: Icon identifier used by the topic card.
        color: CSS color class for badges and cards.
        description: Short description shown on the dashboard.
    """

    id: str
    label: str
    icon_name: str
    color: str
    description: str


TOPICS: Final[tuple[TopicDefinition, ...]] = (
    TopicDefinition(
        id=TopicId.SAUDE,
        label="Saúde",
        icon_name="HeartPulse",
        color="bg-emerald-500",
        description="Indicadores de saúde pública, campanhas e atendimentos.",
    ),
    TopicDefinition(
        id=TopicId.EDUCACAO,
        label="Educação",
        icon_name="GraduationCap",
        color="bg-sky-500",
        description="Dados sobre escolas, alunos, desempenho e infraestrutura escolar.",
    ),
    TopicDefinition(
        id=TopicId.DESENVOLVIMENTO_SOCIAL,
        label="Desenvolvimento Social",
        icon_name="Users",
        color="bg-amber-400",
        description="Programas sociais, assistência e inclusão comunitária.",
    ),
    TopicDefinition(
        id=TopicId.FINANCAS,
        label="Finanças",
        icon_name="BadgeDollarSign",
        color="bg-emerald-600",
        description="Orçamento, arrecadação e despesas municipais.",
    ),
    TopicDefinition(
        id=TopicId.ESPORTE_CULTURA_LAZER,
        label="Esporte, Cultura e Lazer",
        icon_name="Trophy",
        color="bg-amber-500",
        description="Eventos esportivos, culturais e áreas de lazer.",
    ),
    TopicDefinition(
        id=TopicId.AGRICULTURA,
        label="Agricultura",
        icon_name="Sprout",
        color="bg-green-600",
        description="Produção rural, apoio ao agricultor e safras.",
    ),
    TopicDefinition(
        id=TopicId.INFRAESTRUTURA,
        label="Infraestrutura",
        icon_name="HardHat",
        color="bg-cyan-600",
        description="Obras, pavimentação e manutenção urbana.",
    ),
    TopicDefinition(
        id=TopicId.PLANEJAMENTO,
        label="Planejamento",
        icon_name="ClipboardList",
        color="bg-sky-600",
        description="Metas, diretrizes e projetos futuros.",
    ),
)

TOPIC_BY_ID: Final[dict[str, TopicDefinition]] = {str(topic.id): topic for topic in TOPICS}


def get_topic(topic_id: str | None) -> TopicDefinition | None:
    """Return the TopicDefinition for an id, or None when unknown."""

    if not topic_id:
        return None
    return TOPIC_BY_ID.get(topic_id)
