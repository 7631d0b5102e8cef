"""Render theme widgets with per-widget failure isolation.

Each widget goes through normalize -> sanitize -> mount on its own. A widget
that blows up only replaces its own slot with a placeholder; the rest of the
page keeps rendering.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from .colors import ColorConfig
from .normalizer import normalize_widget_html
from .sanitizer import sanitize_widget_html
from .theme_css import css_variables

logger = logging.getLogger(__name__)


class WidgetState(str, Enum):
    PENDING = "pending"
    SANITIZING = "sanitizing"
    MOUNTED = "mounted"
    FAILED = "failed"


_TRANSITIONS = {
    WidgetState.PENDING: {WidgetState.SANITIZING},
    WidgetState.SANITIZING: {WidgetState.MOUNTED, WidgetState.FAILED},
    WidgetState.MOUNTED: set(),
    WidgetState.FAILED: set(),
}


class InvalidWidgetTransition(Exception):
    """Raised when a widget slot is moved outside its lifecycle."""


@dataclass
class RenderedWidget:
    widget: Any
    state: WidgetState = WidgetState.PENDING
    html: SafeString = field(default_factory=lambda: mark_safe(""))
    error: Optional[BaseException] = None

    def advance(self, state: WidgetState):
        if state not in _TRANSITIONS[self.state]:
            raise InvalidWidgetTransition(f"{self.state.value} -> {state.value}")
        self.state = state

    @property
    def ok(self):
        return self.state is WidgetState.MOUNTED


def order_widgets(widgets: Iterable[Any]) -> List[Any]:
    """Active widgets by display_order; ties keep the order they came in."""
    active = [w for w in widgets if getattr(w, "is_active", True)]
    return sorted(active, key=lambda w: getattr(w, "display_order", 0) or 0)


def _widget_id(widget):
    pk = getattr(widget, "pk", None)
    return pk if pk is not None else getattr(widget, "id", "")


# Short names older widget CSS refers to, mapped onto the color slots.
ALIAS_VARIABLES = (
    ("--cor-primaria", "cor_detalhes_gerais"),
    ("--cor-secundaria", "cor_demais_botoes"),
    ("--cor-destaque", "cor_botao_enviar_pedido"),
    ("--cor-fundo", "cor_fundo_pagina"),
)
TEXT_COLOR = "#333333"


def container_style(colors: ColorConfig) -> str:
    declarations = [f"{name}: {value}" for name, value in css_variables(colors)]
    declarations += [f"{alias}: {getattr(colors, field)}" for alias, field in ALIAS_VARIABLES]
    declarations.append(f"--cor-texto: {TEXT_COLOR}")
    declarations += ["position: relative", "isolation: isolate", "width: 100%", "box-sizing: border-box"]
    return "; ".join(declarations)


def mount_widget(widget, sanitized_html: str, colors: ColorConfig) -> SafeString:
    """Wrap sanitized markup in the widget's own container."""
    return format_html(
        '<div class="widget widget-container" data-widget-id="{}" data-widget-name="{}" '
        'data-widget-type="{}" style="{}">{}</div>',
        _widget_id(widget),
        widget.name,
        getattr(widget, "widget_type", ""),
        container_style(colors),
        mark_safe(sanitized_html),
    )


def fallback_html(widget) -> SafeString:
    return format_html(
        '<div class="widget-error" role="alert" data-widget-id="{}">'
        'Widget "{}" não pôde ser carregado</div>',
        _widget_id(widget),
        getattr(widget, "name", ""),
    )


def render_widget(
    widget,
    colors: ColorConfig,
    mount: Callable[[Any, str, ColorConfig], str] = mount_widget,
    on_error: Optional[Callable[[BaseException, Any], None]] = None,
) -> RenderedWidget:
    rendered = RenderedWidget(widget=widget)
    rendered.advance(WidgetState.SANITIZING)
    try:
        normalized = normalize_widget_html(getattr(widget, "html_content", "") or "")
        sanitized = sanitize_widget_html(normalized)
        rendered.html = mark_safe(mount(widget, sanitized, colors))
        rendered.advance(WidgetState.MOUNTED)
    except Exception as exc:
        logger.exception("Widget %r failed to render", getattr(widget, "name", widget))
        rendered.error = exc
        rendered.html = fallback_html(widget)
        rendered.advance(WidgetState.FAILED)
        if on_error is not None:
            try:
                on_error(exc, widget)
            except Exception:
                logger.exception("Widget error callback failed")
    return rendered


def render_widgets(
    widgets: Iterable[Any],
    colors: ColorConfig,
    mount: Callable[[Any, str, ColorConfig], str] = mount_widget,
    on_error: Optional[Callable[[BaseException, Any], None]] = None,
) -> List[RenderedWidget]:
    """Render every active widget in display order, one boundary per widget."""
    return [
        render_widget(widget, colors, mount=mount, on_error=on_error)
        for widget in order_widgets(widgets)
    ]


def render_widgets_html(widgets: Iterable[Any], colors: ColorConfig) -> SafeString:
    rendered = render_widgets(widgets, colors)
    return mark_safe("\n".join(str(item.html) for item in rendered))


def render_summary(rendered: List[RenderedWidget]) -> Dict[str, int]:
    """Counts per final state, handy for the preview debug bar."""
    summary = {WidgetState.MOUNTED.value: 0, WidgetState.FAILED.value: 0}
    for item in rendered:
        summary[item.state.value] = summary.get(item.state.value, 0) + 1
    return summary
