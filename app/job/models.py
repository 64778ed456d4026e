from django.db import models


class Job(models.Model):
    code = models.CharField(max_length=12, unique=True, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField()
    location = models.ForeignKey(
        "location.Location", on_delete=models.PROTECT, related_name="jobs"
    )
    department = models.ForeignKey(
        "department.Department", on_delete=models.PROTECT, related_name="jobs"
    )
    posted_date = models.DateTimeField(help_text="등록 시각 (UTC, 생성 시 1회 설정)")
    closing_date = models.DateTimeField(help_text="마감 시각 (UTC)")

    class Meta:
        db_table = "catalog_job"
        indexes = [
            models.Index(fields=["-posted_date", "-id"], name="job_posted_desc_idx"),
        ]

    def __str__(self):
        return f"{self.code} - {self.title}"
