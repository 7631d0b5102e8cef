from django.contrib import admin

from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "theme", "customer_name", "customer_email", "status", "license_type", "created_at")
    list_filter = ("status", "license_type")
    search_fields = ("customer_name", "customer_email", "theme__name")
    readonly_fields = ("download_token",)
