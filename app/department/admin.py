from department.models import Department
from django.contrib import admin


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ["id", "title"]
    search_fields = ["title"]
