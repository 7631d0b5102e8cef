"""
Tests for the theme and formatting template tags.
"""

from django.template import Context, Template

from themes.colors import ColorConfig
from themes.templatetags.theme_tags import color_swatches, theme_style


class TestThemeStyle:

    def test_wraps_css(self):
        assert theme_style(".a{}", "x") == '<style id="x">.a{}</style>'

    def test_closing_tag_cannot_break_out(self):
        html = theme_style(".a{}</style><script>alert(1)</script>")
        assert html.count("</style>") == 1
        assert html.endswith("</style>")

    def test_empty(self):
        assert theme_style("") == ""


class TestColorSwatches:

    def test_one_swatch_per_color(self):
        html = color_swatches(ColorConfig())
        assert html.count('class="swatch"') == 13
        assert 'title="--cor-fundo-pagina"' in html


class TestCommonFilters:

    def test_currency_filters(self):
        template = Template("{% load common_tags %}{{ price|currency }} / {{ price|installment:5 }}")
        assert template.render(Context({"price": "100"})) == "R$ 100,00 / R$ 20,00"

    def test_dict_get(self):
        template = Template("{% load common_tags %}{{ data|dict_get:'cor' }}|{{ other|dict_get:'cor' }}")
        assert template.render(Context({"data": {"cor": "azul"}, "other": 3})) == "azul|None"
