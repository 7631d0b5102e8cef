"""
Tests for widget HTML normalization.

Covers:
- Full documents reduced to head styles plus body markup
- Document scaffolding tags removed
- :root blocks replaced with the placeholder comment
- Idempotence and degenerate input
"""

from themes import normalizer
from themes.normalizer import ROOT_PLACEHOLDER, neutralize_root_blocks, normalize_widget_html


FULL_DOCUMENT = (
    "<!DOCTYPE html><html><head><style>:root{--x:red}.a{color:red}</style></head>"
    "<body><div class='a'>Hi</div></body></html>"
)


class TestNormalizeWidgetHtml:
    """Tests for normalize_widget_html."""

    def test_full_document(self):
        expected = (
            "<style>/* :root removido - usando variáveis do tema */\n"
            ".a{color:red}</style><div class='a'>Hi</div>"
        )
        assert normalize_widget_html(FULL_DOCUMENT) == expected

    def test_idempotent(self):
        once = normalize_widget_html(FULL_DOCUMENT)
        assert normalize_widget_html(once) == once

    def test_plain_fragment_untouched(self):
        html = "<section class='promo'><p>Oferta</p></section>"
        assert normalize_widget_html(html) == html

    def test_document_tags_removed(self):
        html = (
            "<html><head><title>Widget</title><meta charset='utf-8'>"
            "<link rel='stylesheet' href='x.css'><style>.b{margin:0}</style></head>"
            "<body class='x'><p>Texto</p></body></html>"
        )
        assert normalize_widget_html(html) == "<style>.b{margin:0}</style><p>Texto</p>"

    def test_head_styles_keep_order(self):
        html = (
            "<html><head><style>.one{}</style><style>.two{}</style></head>"
            "<body><p>x</p></body></html>"
        )
        result = normalize_widget_html(html)
        assert result.index(".one{}") < result.index(".two{}") < result.index("<p>x</p>")

    def test_body_without_head(self):
        assert normalize_widget_html("<body><p>Oi</p></body>") == "<p>Oi</p>"

    def test_empty_input(self):
        assert normalize_widget_html("") == ""
        assert normalize_widget_html(None) == ""

    def test_spliced_document_tags_removed(self):
        result = normalize_widget_html("<ht<me<link>ta>ml><p>x</p>")
        assert result == "<p>x</p>"
        assert normalize_widget_html(result) == result

    def test_failure_falls_back_to_trimmed_input(self, monkeypatch):
        def boom(html):
            raise RuntimeError("parser exploded")

        monkeypatch.setattr(normalizer, "_split_document", boom)
        assert normalize_widget_html("  <p>cru</p>  ") == "<p>cru</p>"


class TestNeutralizeRootBlocks:
    """Tests for :root block replacement."""

    def test_uppercase_selector(self):
        css = "<style>:ROOT { --cor: blue; } .a{}</style>"
        result = neutralize_root_blocks(css)
        assert "--cor" not in result
        assert ROOT_PLACEHOLDER in result
        assert ".a{}" in result

    def test_every_block_replaced(self):
        css = ":root{--a:1} .x{} :root { --b: 2 }"
        result = neutralize_root_blocks(css)
        assert result.count(ROOT_PLACEHOLDER) == 2
        assert "--a" not in result and "--b" not in result

    def test_nested_braces(self):
        css = ":root{--a:1; @supports (x: y) { --b: 2 }} .after{}"
        result = neutralize_root_blocks(css)
        assert result == ROOT_PLACEHOLDER + " .after{}"

    def test_unbalanced_block_left_alone(self):
        css = ".a{} :root { --x: red;"
        assert neutralize_root_blocks(css) == css

    def test_root_outside_style(self):
        result = normalize_widget_html("<p>:root{--x:1}</p>")
        assert result == "<p>" + ROOT_PLACEHOLDER + "</p>"

    def test_unterminated_block_does_not_shield_later_blocks(self):
        html = "<style>:root{ .a{}</style><style>:root{--cor-fundo-pagina:red}</style><p>x</p>"
        expected = (
            "<style>" + ROOT_PLACEHOLDER + "</style>"
            "<style>" + ROOT_PLACEHOLDER + "</style><p>x</p>"
        )
        result = normalize_widget_html(html)
        assert result == expected
        assert normalize_widget_html(result) == result

    def test_brace_scan_stays_inside_style_body(self):
        html = "<style>:root{--a:1</style><p>}</p>"
        assert neutralize_root_blocks(html) == "<style>" + ROOT_PLACEHOLDER + "</style><p>}</p>"

    def test_unbalanced_text_does_not_hide_later_block(self):
        html = "<p>:root{</p><style>:root{--x:1}</style>"
        assert neutralize_root_blocks(html) == "<p>:root{</p><style>" + ROOT_PLACEHOLDER + "</style>"
