"""Data access for themes and the pieces a preview page is composed from."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from django.db import DatabaseError, transaction
from django.db.models import Q

from .colors import ColorConfig
from .models import DemoProduct, Theme, ThemeBanner, ThemeCss, ThemeWidget
from .theme_css import apply_generated_css, compose_page_css

logger = logging.getLogger(__name__)

PAGE_TYPES = tuple(ThemeCss.PageType.values)


def list_themes():
    return list(Theme.objects.all().order_by("-created_at"))


def list_published_themes():
    return list(
        Theme.objects.filter(status=Theme.Status.PUBLISHED).order_by("-created_at")
    )


def get_theme_by_slug(slug: str) -> Optional[Theme]:
    return Theme.objects.filter(slug=slug).first()


def get_theme_by_id(theme_id) -> Optional[Theme]:
    try:
        return Theme.objects.filter(pk=int(theme_id)).first()
    except (TypeError, ValueError):
        return None


def update_theme_colors(theme: Theme, colors: ColorConfig) -> Theme:
    """Overwrite the whole color configuration."""
    theme.color_config = colors.as_dict()
    theme.save(update_fields=["color_config", "updated_at"])
    return theme


# Page CSS


def css_by_page(theme: Theme) -> Dict[str, str]:
    """Custom CSS of every known page; pages without a row map to ""."""
    data = {page: "" for page in PAGE_TYPES}
    for row in theme.css_pages.all():
        if row.page_type in data:
            data[row.page_type] = row.css_code or ""
    return data


def get_page_css(theme: Theme, page_type: str) -> str:
    if page_type not in PAGE_TYPES:
        return ""
    row = theme.css_pages.filter(page_type=page_type).first()
    return row.css_code if row and row.css_code else ""


def upsert_page_css(theme: Theme, page_type: str, css_code: str) -> ThemeCss:
    if page_type not in PAGE_TYPES:
        raise ValueError(f"Unknown page type: {page_type!r}")
    row, _ = ThemeCss.objects.update_or_create(
        theme=theme,
        page_type=page_type,
        defaults={"css_code": css_code or ""},
    )
    return row


def regenerate_page_css(theme: Theme, page_type: str, css_code: Optional[str] = None) -> ThemeCss:
    """Refresh the color-generated section of a page's CSS.

    ``css_code`` is the text being edited; the stored CSS is used when omitted.
    """
    current = get_page_css(theme, page_type) if css_code is None else css_code
    return upsert_page_css(theme, page_type, apply_generated_css(current, theme.colors))


# Widgets


def get_widgets(theme: Theme) -> List[ThemeWidget]:
    return list(theme.widgets.all().order_by("display_order", "id"))


def get_active_widgets(theme: Theme) -> List[ThemeWidget]:
    return list(
        theme.widgets.filter(is_active=True).order_by("display_order", "id")
    )


def reorder_widgets(theme: Theme, ordered_ids) -> int:
    """Assign display_order 0..n following ``ordered_ids``; returns rows updated."""
    by_id = {w.pk: w for w in theme.widgets.all()}
    updated = 0
    with transaction.atomic():
        for position, widget_id in enumerate(ordered_ids):
            try:
                widget = by_id.get(int(widget_id))
            except (TypeError, ValueError):
                widget = None
            if widget is None:
                logger.warning("Skipping unknown widget id %r for theme %s", widget_id, theme.slug)
                continue
            if widget.display_order != position:
                widget.display_order = position
                widget.save(update_fields=["display_order", "updated_at"])
                updated += 1
    return updated


# Banners and demo catalogue


def get_active_banners(theme: Theme) -> List[ThemeBanner]:
    return list(theme.banners.filter(is_active=True).order_by("display_order", "id"))


def get_demo_products(theme: Optional[Theme] = None, category: Optional[str] = None):
    qs = DemoProduct.objects.filter(is_active=True)
    if theme is not None:
        qs = qs.filter(Q(theme=theme) | Q(theme__isnull=True))
    else:
        qs = qs.filter(theme__isnull=True)
    if category:
        qs = qs.filter(category=category)
    return list(qs.order_by("display_order", "id"))


@dataclass
class PreviewContext:
    theme: Theme
    colors: ColorConfig
    page_type: str
    page_css: str
    widgets: List[ThemeWidget] = field(default_factory=list)
    banners: List[ThemeBanner] = field(default_factory=list)
    products: List[DemoProduct] = field(default_factory=list)


def build_preview(slug: str, page_type: str = ThemeCss.PageType.HOME) -> Optional[PreviewContext]:
    """Load everything the preview page needs, or None when the theme is missing."""
    try:
        theme = get_theme_by_slug(slug)
    except DatabaseError as exc:
        logger.error("Failed to load theme %r: %s", slug, exc)
        return None
    if theme is None:
        return None
    colors = theme.colors
    return PreviewContext(
        theme=theme,
        colors=colors,
        page_type=page_type,
        page_css=compose_page_css(colors, get_page_css(theme, page_type)),
        widgets=get_active_widgets(theme),
        banners=get_active_banners(theme),
        products=get_demo_products(theme),
    )
