from django import template
from django.utils.html import format_html, format_html_join
from django.utils.safestring import mark_safe

from themes.renderer import render_widgets_html
from themes.theme_css import css_variables

register = template.Library()


@register.simple_tag
def theme_widgets(widgets, colors):
    """Render the widget list, each slot inside its own failure boundary."""
    return render_widgets_html(widgets or [], colors)


@register.simple_tag
def theme_style(css, element_id="theme-custom-css"):
    """Inline <style> tag for already composed theme CSS."""
    if not css:
        return ""
    # a literal </style> in author CSS would close the tag early
    return format_html('<style id="{}">{}</style>', element_id, mark_safe(css.replace("</", "<\\/")))


@register.simple_tag
def color_swatches(colors):
    return format_html_join(
        "",
        '<span class="swatch" title="{}" style="background:{}"></span>',
        css_variables(colors),
    )
