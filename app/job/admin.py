from django.contrib import admin
from job.models import Job


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ["id", "code", "title", "location", "department", "posted_date"]
    search_fields = ["code", "title", "description"]
    list_filter = ["department", "location"]
    list_select_related = ["location", "department"]
    ordering = ["-posted_date", "-id"]
    readonly_fields = ["code", "posted_date"]
    list_per_page = 100
