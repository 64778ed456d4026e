from django.db import models


class Department(models.Model):
    title = models.CharField(max_length=255)

    class Meta:
        db_table = "catalog_department"
        ordering = ["id"]
        constraints = [
            # 애플리케이션 검사(IntegrityGuard)와 별개로 동시 생성 경합을 막는 최종 방어선
            models.UniqueConstraint(fields=["title"], name="uniq_department_title"),
        ]

    def __str__(self):
        return self.title
