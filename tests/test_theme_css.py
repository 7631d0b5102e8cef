"""
Tests for theme color configuration and generated CSS.
"""

import re

from themes.colors import COLOR_FIELDS, ColorConfig, is_css_color
from themes.theme_css import (
    GENERATED_BEGIN,
    GENERATED_END,
    apply_generated_css,
    compose_page_css,
    css_variable_name,
    css_variables,
    generate_theme_css,
)

DECLARATION_RE = re.compile(r"^\s*(--[a-z-]+):\s*([^;]+);$", re.MULTILINE)


def _root_block(css):
    start = css.index(":root {")
    return css[start: css.index("}", start) + 1]


class TestColorConfig:
    """Tests for ColorConfig merging and validation."""

    def test_thirteen_slots(self):
        assert len(COLOR_FIELDS) == 13

    def test_from_mapping_merges_over_defaults(self):
        colors = ColorConfig.from_mapping({"cor_fundo_pagina": " #000 "})
        assert colors.cor_fundo_pagina == "#000"
        assert colors.cor_fundo_rodape == ColorConfig().cor_fundo_rodape

    def test_from_mapping_ignores_unknown_and_blank(self):
        colors = ColorConfig.from_mapping({"cor_inexistente": "#111", "cor_demais_botoes": "  "})
        assert colors == ColorConfig()

    def test_from_mapping_none(self):
        assert ColorConfig.from_mapping(None) == ColorConfig()

    def test_is_css_color(self):
        assert is_css_color("#fff")
        assert is_css_color("#E94560")
        assert is_css_color("rgb(10, 20, 30)")
        assert is_css_color("hsla(120, 50%, 50%, .5)")
        assert is_css_color("tomato")
        assert not is_css_color("#zzzzzz")
        assert not is_css_color("red; background: url(x)")
        assert not is_css_color(None)


class TestCssVariableName:

    def test_snake_case(self):
        assert css_variable_name("cor_fundo_pagina") == "--cor-fundo-pagina"

    def test_camel_case(self):
        assert css_variable_name("corBotaoEnviarPedido") == "--cor-botao-enviar-pedido"


class TestGenerateThemeCss:
    """Tests for generate_theme_css."""

    def test_exactly_thirteen_declarations(self):
        css = generate_theme_css(ColorConfig())
        names = [name for name, _ in DECLARATION_RE.findall(css)]
        assert len(names) == 13
        assert len(set(names)) == 13
        assert names == [name for name, _ in css_variables(ColorConfig())]

    def test_values_inside_root_block(self):
        colors = ColorConfig.from_mapping({"cor_fundo_pagina": "#fff"})
        block = _root_block(generate_theme_css(colors))
        assert "--cor-fundo-pagina: #fff;" in block

    def test_deterministic(self):
        colors = ColorConfig.from_mapping({"cor_detalhes_gerais": "#123456"})
        assert generate_theme_css(colors) == generate_theme_css(colors)

    def test_rules_only_reference_variables(self):
        css = generate_theme_css(ColorConfig())
        after_root = css[css.index("}", css.index(":root {")) + 1:]
        assert "--cor-" not in after_root.replace("var(--cor-", "")


class TestApplyGeneratedCss:
    """Tests for refreshing the generated section inside page CSS."""

    def test_empty_page_css(self):
        result = apply_generated_css("", ColorConfig())
        assert result.startswith(GENERATED_BEGIN)
        assert result.endswith(GENERATED_END)

    def test_appends_after_author_css(self):
        result = apply_generated_css(".promo { color: red; }\n", ColorConfig())
        assert result.startswith(".promo { color: red; }\n\n" + GENERATED_BEGIN)

    def test_idempotent(self):
        colors = ColorConfig()
        once = apply_generated_css(".promo{}", colors)
        assert apply_generated_css(once, colors) == once

    def test_replaces_previous_section(self):
        first = apply_generated_css(".promo{}", ColorConfig())
        second = apply_generated_css(
            first + "\n.footer{}", ColorConfig.from_mapping({"cor_fundo_rodape": "#abcdef"})
        )
        assert second.count(GENERATED_BEGIN) == 1
        assert "--cor-fundo-rodape: #abcdef;" in second
        assert second.startswith(".promo{}")
        assert second.endswith(".footer{}")


class TestComposePageCss:

    def test_variables_first(self):
        css = compose_page_css(ColorConfig(), ".home-banner{}")
        assert css.startswith(generate_theme_css(ColorConfig()))
        assert css.endswith(".home-banner{}")

    def test_without_page_css(self):
        assert compose_page_css(ColorConfig(), "") == generate_theme_css(ColorConfig())
