"""Initial schema for published indicators."""

from __future__ import annotations

import django.utils.timezone
from django.db import migrations, models

import core.models


class Migration(migrations.Migration):
    """Create the Post table."""

    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Post",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=core.models.new_post_id,
                        editable=False,
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "topic_id",
                    models.CharField(
                        choices=[
                            ("saude", "Saúde"),
                            ("educacao", "Educação"),
                            ("social", "Desenvolvimento Social"),
                            ("financas", "Finanças"),
                            ("esporte", "Esporte, Cultura e Lazer"),
                            ("agricultura", "Agricultura"),
                            ("infraestrutura", "Infraestrutura"),
                            ("planejamento", "Planejamento"),
                        ],
                        db_index=True,
                        max_length=32,
                    ),
                ),
                ("description", models.TextField()),
                ("chart_config", models.JSONField(default=dict)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "verbose_name": "Indicador",
                "verbose_name_plural": "Indicadores",
                "ordering": ("-created_at",),
            },
        ),
    ]
