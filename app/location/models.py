from django.db import models


class Location(models.Model):
    title = models.CharField(max_length=255)
    city = models.CharField(max_length=255)
    state = models.CharField(max_length=255)
    country = models.CharField(max_length=255)
    zip_code = models.CharField(max_length=32, help_text="우편번호")

    class Meta:
        db_table = "catalog_location"
        ordering = ["id"]

    def __str__(self):
        return f"{self.title} ({self.city}, {self.country})"
