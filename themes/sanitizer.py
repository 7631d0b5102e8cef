"""Allow-list sanitization of normalized widget HTML.

``<style>`` blocks are pulled out and cleaned as CSS text, the remaining
markup goes through bleach, and the cleaned styles are put back in front.
"""

import logging
import re

import bleach
from bleach.css_sanitizer import ALLOWED_CSS_PROPERTIES, CSSSanitizer
from django.conf import settings

logger = logging.getLogger(__name__)

ALLOWED_TAGS = frozenset([
    # structure
    "div", "span", "section", "article", "header", "footer", "nav", "aside", "main",
    # text
    "p", "h1", "h2", "h3", "h4", "h5", "h6", "strong", "b", "i", "em", "u", "small",
    "mark", "del", "ins", "sub", "sup",
    # lists
    "ul", "ol", "li", "dl", "dt", "dd",
    # links and media
    "a", "img", "picture", "source", "video", "audio", "iframe", "figure", "figcaption",
    # tables
    "table", "thead", "tbody", "tfoot", "tr", "th", "td", "caption", "colgroup", "col",
    # display-only forms
    "form", "input", "textarea", "select", "option", "optgroup", "button", "label",
    "fieldset", "legend",
    # misc
    "br", "hr", "blockquote", "pre", "code",
    "svg", "path", "circle", "rect", "line", "polyline", "polygon", "g", "defs", "use", "symbol",
    # carousel custom elements used by widget authors
    "swiper-container", "swiper-slide", "swiper-wrapper",
])

ALLOWED_ATTRIBUTES = frozenset([
    "id", "class", "style", "title", "lang", "dir", "tabindex", "role",
    "href", "target", "rel",
    "src", "srcset", "alt", "width", "height", "loading", "decoding", "poster", "preload",
    "autoplay", "muted", "loop", "controls", "playsinline",
    "frameborder", "allowfullscreen", "allow", "sandbox",
    "type", "name", "value", "placeholder", "required", "disabled", "readonly", "checked",
    "selected", "maxlength", "minlength", "min", "max", "step", "pattern", "for", "method",
    "viewbox", "fill", "stroke", "stroke-width", "stroke-linecap", "stroke-linejoin", "d",
    "cx", "cy", "r", "rx", "ry", "x", "y", "x1", "y1", "x2", "y2", "points", "transform",
    "xmlns",
])

# "data" stays listed for inline images; _allow_attribute decides which data: URIs survive
ALLOWED_PROTOCOLS = frozenset(["http", "https", "mailto", "tel", "data"])

SAFE_DATA_IMAGE_TYPES = frozenset(["image/png", "image/jpeg", "image/gif", "image/webp"])
DATA_URI_MAX_SIZE = 500_000

_URI_ATTRIBUTES = frozenset(["href", "src", "srcset", "poster"])
_DATA_URI_TAGS = frozenset(["img", "source"])
_URI_IGNORED_CHARS_RE = re.compile(r"[\x00-\x20]")

_CSS_SANITIZER = CSSSanitizer(
    allowed_css_properties=ALLOWED_CSS_PROPERTIES | {"gap", "object-fit", "isolation"},
)

_SCRIPT_BLOCK_RE = re.compile(r"<script\b[^>]*>.*?(?:</script\s*>|$)", re.IGNORECASE | re.DOTALL)
_STYLE_BLOCK_RE = re.compile(r"<style\b[^>]*>(.*?)</style\s*>", re.IGNORECASE | re.DOTALL)

_STYLE_BREAKOUT_RE = re.compile(r"<\s*/\s*style\b", re.IGNORECASE)
_HTML_IN_CSS_RE = re.compile(r"<!|<[a-zA-Z][^>]*>")
_CSS_IMPORT_RE = re.compile(r"@import\b[^;]*;?", re.IGNORECASE)
_CSS_EXPRESSION_RE = re.compile(r"\bexpression\s*\(", re.IGNORECASE)
_CSS_BEHAVIOR_RE = re.compile(r"\bbehavior\s*:", re.IGNORECASE)
_CSS_MOZ_BINDING_RE = re.compile(r"-moz-binding\s*:", re.IGNORECASE)
_CSS_JAVASCRIPT_RE = re.compile(r"javascript\s*:", re.IGNORECASE)


def is_safe_data_image(uri):
    """True for a ``data:`` URI carrying one of SAFE_DATA_IMAGE_TYPES."""
    if not uri.lower().startswith("data:"):
        return False
    header_end = uri.find(",")
    if header_end < 0 or len(uri) - header_end - 1 > DATA_URI_MAX_SIZE:
        return False
    media_type = uri[5:header_end].lower().split(";")[0].strip()
    return media_type in SAFE_DATA_IMAGE_TYPES


def _allow_attribute(tag, name, value):
    name = name.lower()
    if name.startswith("on"):
        return False
    if name in _URI_ATTRIBUTES and value:
        # browsers ignore whitespace and control characters inside the scheme
        uri = _URI_IGNORED_CHARS_RE.sub("", value)
        if uri.lower().startswith("data:"):
            return tag in _DATA_URI_TAGS and name == "src" and is_safe_data_image(uri)
    return name in ALLOWED_ATTRIBUTES or name.startswith("data-") or name.startswith("aria-")


def sanitize_css_block(css):
    """Clean the text of one <style> block; returns "" when it is rejected."""
    if not css or not css.strip():
        return ""
    max_size = getattr(settings, "WIDGET_CSS_MAX_SIZE", 100_000)
    if len(css) > max_size:
        logger.warning("Widget CSS block of %s chars truncated to %s", len(css), max_size)
        css = css[:max_size]
    if _STYLE_BREAKOUT_RE.search(css) or _HTML_IN_CSS_RE.search(css):
        logger.warning("Widget CSS block rejected: markup inside <style>")
        return ""
    css = _CSS_IMPORT_RE.sub("", css)
    css = _CSS_EXPRESSION_RE.sub("/* expression-stripped */ (", css)
    css = _CSS_BEHAVIOR_RE.sub("/* behavior-stripped */:", css)
    css = _CSS_MOZ_BINDING_RE.sub("/* moz-binding-stripped */:", css)
    css = _CSS_JAVASCRIPT_RE.sub("/* javascript-stripped */", css)
    return css


def sanitize_widget_html(html):
    """Return markup safe to mount: no scripts, handlers or javascript: URLs."""
    if not html:
        return ""
    html = _SCRIPT_BLOCK_RE.sub("", html)
    styles = []

    def _collect(match):
        css = sanitize_css_block(match.group(1))
        if css:
            styles.append(f"<style>{css}</style>")
        return ""

    markup = _STYLE_BLOCK_RE.sub(_collect, html)
    cleaned = bleach.clean(
        markup,
        tags=ALLOWED_TAGS,
        attributes=_allow_attribute,
        protocols=ALLOWED_PROTOCOLS,
        css_sanitizer=_CSS_SANITIZER,
        strip=True,
        strip_comments=True,
    )
    return "".join(styles) + cleaned
