from __future__ import annotations

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Department",
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
                ("title", models.CharField(max_length=255)),
            ],
            options={
                "db_table": "catalog_department",
                "ordering": ["id"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("title",), name="uniq_department_title"
                    )
                ],
            },
        ),
    ]
