"""
Tests for the widget render pipeline and its per-widget failure boundary.
"""

from types import SimpleNamespace

import pytest

from themes import renderer
from themes.colors import ColorConfig
from themes.theme_css import css_variables
from themes.renderer import (
    InvalidWidgetTransition,
    RenderedWidget,
    WidgetState,
    container_style,
    mount_widget,
    order_widgets,
    render_summary,
    render_widget,
    render_widgets,
    render_widgets_html,
)


def make_widget(pk, name, html="", order=0, active=True):
    return SimpleNamespace(
        pk=pk,
        name=name,
        widget_type="html",
        html_content=html,
        display_order=order,
        is_active=active,
    )


@pytest.fixture
def three_widgets():
    return [
        make_widget(1, "Primeiro", "<p>um</p>", order=0),
        make_widget(2, "Segundo", "<p>dois</p>", order=1),
        make_widget(3, "Terceiro", "<p>três</p>", order=2),
    ]


def failing_mount(widget, sanitized_html, colors):
    if widget.name == "Segundo":
        raise ValueError("mount failed")
    return mount_widget(widget, sanitized_html, colors)


class TestFailureIsolation:
    """A failing widget only replaces its own slot."""

    def test_siblings_render_when_middle_widget_fails(self, three_widgets):
        rendered = render_widgets(three_widgets, ColorConfig(), mount=failing_mount)

        assert [item.state for item in rendered] == [
            WidgetState.MOUNTED,
            WidgetState.FAILED,
            WidgetState.MOUNTED,
        ]
        assert "<p>um</p>" in rendered[0].html
        assert "<p>três</p>" in rendered[2].html
        assert "não pôde ser carregado" in rendered[1].html
        assert isinstance(rendered[1].error, ValueError)

    def test_sanitize_failure_is_isolated(self, three_widgets, monkeypatch):
        original = renderer.sanitize_widget_html

        def flaky(html):
            if "dois" in html:
                raise RuntimeError("bad markup")
            return original(html)

        monkeypatch.setattr(renderer, "sanitize_widget_html", flaky)
        html = render_widgets_html(three_widgets, ColorConfig())

        assert "<p>um</p>" in html
        assert "<p>três</p>" in html
        assert 'Widget "Segundo" não pôde ser carregado' in html

    def test_on_error_callback(self, three_widgets):
        errors = []
        render_widgets(
            three_widgets,
            ColorConfig(),
            mount=failing_mount,
            on_error=lambda exc, widget: errors.append((str(exc), widget.name)),
        )
        assert errors == [("mount failed", "Segundo")]

    def test_on_error_callback_failure_does_not_propagate(self, three_widgets):
        def broken_callback(exc, widget):
            raise RuntimeError("callback failed")

        rendered = render_widgets(
            three_widgets, ColorConfig(), mount=failing_mount, on_error=broken_callback
        )
        assert render_summary(rendered) == {"mounted": 2, "failed": 1}

    def test_fallback_escapes_name(self):
        widget = make_widget(9, "<b>x</b>")
        rendered = render_widget(widget, ColorConfig(), mount=failing_mount_all)
        assert "<b>" not in rendered.html
        assert "&lt;b&gt;" in rendered.html


def failing_mount_all(widget, sanitized_html, colors):
    raise ValueError("nope")


class TestOrdering:

    def test_display_order_with_stable_ties(self):
        widgets = [
            make_widget(1, "c", order=2),
            make_widget(2, "a", order=1),
            make_widget(3, "b", order=1),
        ]
        assert [w.pk for w in order_widgets(widgets)] == [2, 3, 1]

    def test_inactive_skipped(self):
        widgets = [make_widget(1, "on"), make_widget(2, "off", active=False)]
        rendered = render_widgets(widgets, ColorConfig())
        assert [item.widget.pk for item in rendered] == [1]


class TestMount:

    def test_container_carries_theme_variables(self):
        html = mount_widget(make_widget(4, "Banner"), "<p>x</p>", ColorConfig())
        assert 'data-widget-id="4"' in html
        assert "widget-container" in html
        assert "--cor-fundo-pagina: #ffffff" in html
        assert html.endswith("<p>x</p></div>")

    def test_container_style_lists_every_color(self):
        style = container_style(ColorConfig())
        names = [part.split(":")[0] for part in style.split("; ") if part.startswith("--")]
        assert len(names) == 18
        for name, _ in css_variables(ColorConfig()):
            assert name in names

    def test_container_style_aliases(self):
        colors = ColorConfig.from_mapping({
            "cor_detalhes_gerais": "#111111",
            "cor_demais_botoes": "#222222",
            "cor_botao_enviar_pedido": "#333333",
            "cor_fundo_pagina": "#444444",
        })
        style = container_style(colors)
        assert "--cor-primaria: #111111" in style
        assert "--cor-secundaria: #222222" in style
        assert "--cor-destaque: #333333" in style
        assert "--cor-fundo: #444444" in style
        assert "--cor-texto: #333333" in style

    def test_render_strips_scripts_before_mount(self):
        widget = make_widget(5, "Script", "<div>ok</div><script>alert(1)</script>")
        rendered = render_widget(widget, ColorConfig())
        assert rendered.ok
        assert "<script" not in rendered.html

    def test_full_document_widget(self):
        widget = make_widget(
            6,
            "Documento",
            "<!DOCTYPE html><html><head><style>:root{--x:red}.a{color:red}</style></head>"
            "<body><div class='a'>Hi</div></body></html>",
        )
        rendered = render_widget(widget, ColorConfig())
        assert rendered.ok
        assert "--x:red" not in rendered.html
        assert '<div class="a">Hi</div>' in rendered.html


class TestWidgetState:

    def test_lifecycle(self):
        slot = RenderedWidget(widget=None)
        slot.advance(WidgetState.SANITIZING)
        slot.advance(WidgetState.MOUNTED)
        assert slot.ok

    def test_cannot_skip_sanitizing(self):
        with pytest.raises(InvalidWidgetTransition):
            RenderedWidget(widget=None).advance(WidgetState.MOUNTED)

    def test_terminal_states(self):
        slot = RenderedWidget(widget=None)
        slot.advance(WidgetState.SANITIZING)
        slot.advance(WidgetState.FAILED)
        with pytest.raises(InvalidWidgetTransition):
            slot.advance(WidgetState.MOUNTED)


class TestThemeVariablesProtected:

    def test_root_override_never_mounted(self):
        widget = make_widget(
            7,
            "Sobrescrita",
            "<style>:root{ .a{}</style><style>:root{--cor-fundo-pagina:red}</style><p>x</p>",
        )
        rendered = render_widget(widget, ColorConfig())
        assert rendered.ok
        assert "--cor-fundo-pagina:red" not in rendered.html
        assert ":root{" not in rendered.html
