from django.contrib import admin
from location.models import Location


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "city", "state", "country", "zip_code"]
    search_fields = ["title", "city", "country"]
