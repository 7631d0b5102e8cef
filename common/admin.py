from django.contrib import admin

from .models import ActivityLog, ErrorLog


@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    list_display = ("created_at", "method", "path", "status_code", "duration_ms", "user")
    list_filter = ("method", "status_code")
    search_fields = ("path",)


@admin.register(ErrorLog)
class ErrorLogAdmin(admin.ModelAdmin):
    list_display = ("created_at", "path", "status_code", "resolved")
    list_filter = ("resolved",)
    search_fields = ("path", "message")
