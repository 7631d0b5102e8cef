from django.contrib import admin

from .models import DemoProduct, Theme, ThemeBanner, ThemeCss, ThemeWidget


class ThemeCssInline(admin.TabularInline):
    model = ThemeCss
    extra = 0


class ThemeWidgetInline(admin.StackedInline):
    model = ThemeWidget
    extra = 0
    fields = ("name", "widget_type", "display_order", "is_active", "html_content", "config")


class ThemeBannerInline(admin.TabularInline):
    model = ThemeBanner
    extra = 0


@admin.register(Theme)
class ThemeAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "status", "price", "created_at")
    list_filter = ("status",)
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}
    inlines = [ThemeCssInline, ThemeWidgetInline, ThemeBannerInline]


@admin.register(ThemeWidget)
class ThemeWidgetAdmin(admin.ModelAdmin):
    list_display = ("name", "theme", "widget_type", "display_order", "is_active")
    list_filter = ("widget_type", "is_active")
    search_fields = ("name", "theme__name")


@admin.register(DemoProduct)
class DemoProductAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "price", "original_price", "badge", "theme", "is_active")
    list_filter = ("category", "badge", "is_active")
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}
