"""Turn pasted widget HTML (often a full document) into an inline fragment.

Only ``<style>`` blocks and body-level markup survive, and any ``:root``
block is replaced with a visible comment so a widget can never override the
theme's CSS variables.
"""

import logging
import re

logger = logging.getLogger(__name__)

ROOT_PLACEHOLDER = "/* :root removido - usando variáveis do tema */\n"

_HEAD_RE = re.compile(r"<head\b[^>]*>(.*?)</head\s*>", re.IGNORECASE | re.DOTALL)
_BODY_RE = re.compile(r"<body\b[^>]*>(.*?)(?:</body\s*>|$)", re.IGNORECASE | re.DOTALL)
_STYLE_RE = re.compile(r"<style\b[^>]*>.*?</style\s*>", re.IGNORECASE | re.DOTALL)
_STYLE_PARTS_RE = re.compile(r"(<style\b[^>]*>)(.*?)(</style\s*>)", re.IGNORECASE | re.DOTALL)
_ROOT_RE = re.compile(r":root\s*\{", re.IGNORECASE)

_DOCUMENT_TAG_PATTERNS = [
    re.compile(r"<!DOCTYPE[^>]*>", re.IGNORECASE),
    re.compile(r"<title\b[^>]*>.*?</title\s*>", re.IGNORECASE | re.DOTALL),
    re.compile(r"</?html\b[^>]*>", re.IGNORECASE),
    re.compile(r"</?head\b[^>]*>", re.IGNORECASE),
    re.compile(r"</?body\b[^>]*>", re.IGNORECASE),
    re.compile(r"<meta\b[^>]*>", re.IGNORECASE),
    re.compile(r"<link\b[^>]*>", re.IGNORECASE),
]


def _split_document(html):
    """Return (head styles, body markup) for documents that carry a <head>."""
    head = _HEAD_RE.search(html)
    if not head:
        return [], html
    styles = _STYLE_RE.findall(head.group(1))
    rest = html[: head.start()] + html[head.end():]
    body = _BODY_RE.search(rest)
    return styles, body.group(1) if body else rest


def _strip_document_tags(html):
    # removing one tag can splice its neighbours into a new one
    previous = None
    while html != previous:
        previous = html
        for pattern in _DOCUMENT_TAG_PATTERNS:
            html = pattern.sub("", html)
    return html


def _block_end(text, open_brace):
    """Index just past the brace matching ``text[open_brace]``, or -1."""
    depth = 0
    for index in range(open_brace, len(text)):
        char = text[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index + 1
    return -1


def _neutralize_segment(text, in_style):
    pieces = []
    position = 0
    while True:
        match = _ROOT_RE.search(text, position)
        if not match:
            break
        pieces.append(text[position: match.start()])
        end = _block_end(text, match.end() - 1)
        if end != -1:
            pieces.append(ROOT_PLACEHOLDER)
            position = end
        elif in_style:
            # the browser closes the rule at the end of the sheet
            logger.warning("Unterminated :root block dropped from widget <style>")
            pieces.append(ROOT_PLACEHOLDER)
            position = len(text)
            break
        else:
            logger.warning("Unbalanced :root text left in widget markup at offset %s", match.start())
            pieces.append(text[match.start(): match.end()])
            position = match.end()
    pieces.append(text[position:])
    return "".join(pieces)


def neutralize_root_blocks(text):
    """Replace every ``:root { ... }`` block with ROOT_PLACEHOLDER.

    Braces are matched inside each ``<style>`` body on its own, so a block
    can never swallow markup or a later stylesheet. An unterminated block
    inside ``<style>`` is dropped up to the end of that stylesheet.
    """
    pieces = []
    position = 0
    for match in _STYLE_PARTS_RE.finditer(text):
        pieces.append(_neutralize_segment(text[position: match.start()], in_style=False))
        pieces.append(
            match.group(1) + _neutralize_segment(match.group(2), in_style=True) + match.group(3)
        )
        position = match.end()
    pieces.append(_neutralize_segment(text[position:], in_style=False))
    return "".join(pieces)


def normalize_widget_html(raw):
    """Normalize widget HTML for inline mounting next to sibling widgets."""
    if not raw:
        return ""
    try:
        styles, body = _split_document(raw)
        fragment = "".join(styles) + _strip_document_tags(body).strip()
        return neutralize_root_blocks(_strip_document_tags(fragment)).strip()
    except Exception:
        logger.exception("Widget HTML normalization failed; using raw markup")
        return str(raw).strip()
