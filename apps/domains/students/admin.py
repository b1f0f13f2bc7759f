from django.contrib import admin
from .models import Student


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "name",
        "username",
        "school_class",
        "status",
        "created_at",
    )
    list_filter = (
        "status",
        "school_class",
    )
    search_fields = ("name", "username")
