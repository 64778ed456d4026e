from __future__ import annotations

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("location", "0001_initial"),
        ("department", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Job",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "code",
                    models.CharField(editable=False, max_length=12, unique=True),
                ),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                (
                    "posted_date",
                    models.DateTimeField(
                        help_text="등록 시각 (UTC, 생성 시 1회 설정)"
                    ),
                ),
                (
                    "closing_date",
                    models.DateTimeField(help_text="마감 시각 (UTC)"),
                ),
                (
                    "location",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="jobs",
                        to="location.location",
                    ),
                ),
                (
                    "department",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="jobs",
                        to="department.department",
                    ),
                ),
            ],
            options={
                "db_table": "catalog_job",
                "indexes": [
                    models.Index(
                        fields=["-posted_date", "-id"], name="job_posted_desc_idx"
                    )
                ],
            },
        ),
    ]
