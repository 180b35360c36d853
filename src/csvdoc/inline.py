"""Expand lightweight inline markup (emphasis, links, images, code spans) to HTML."""

from __future__ import annotations

import re

_ESCAPABLE = "*_`[]()~"
# Each escaped character is parked on its own private-use code point.
_ESCAPE_TO_PLACEHOLDER = {char: chr(0xE000 + index) for index, char in enumerate(_ESCAPABLE)}
_PLACEHOLDER_TO_CHAR = str.maketrans({v: k for k, v in _ESCAPE_TO_PLACEHOLDER.items()})

_CODE_OPEN = "\ue100"
_CODE_CLOSE = "\ue101"

_ESCAPE_RE = re.compile(r"\\([*_`\[\]()~])")
_CODE_SPAN_RE = re.compile(r"`(.*?)`", re.DOTALL)
_CODE_PLACEHOLDER_RE = re.compile(f"{_CODE_OPEN}(\\d+){_CODE_CLOSE}")

_IMAGE_RE = re.compile(r'!\[(.*?)\]\((.*?)(?:\s+"(.*?)")?\)')
_LINK_RE = re.compile(r'\[(.*?)\]\((.*?)(?:\s+"(.*?)")?\)')

_STRIKE_RE = re.compile(r"(?<!~)~{2,}(?![\s~])(.*?[^\s~])~{2,}(?!~)", re.DOTALL)
_BOLD_ITALIC_RE = re.compile(r"(\*{3}|_{3})(?![\s*_])(.*?[^\s*_])\1")
_BOLD_STAR_RE = re.compile(r"(?<!\*)\*\*(?![\s*])(.*?[^\s*])\*\*(?!\*)", re.DOTALL)
_BOLD_UNDERSCORE_RE = re.compile(r"(?<!_)__(?![\s_])(.*?[^\s_])__(?!_)", re.DOTALL)
# ASCII word characters only, so emphasis works next to CJK text.
_ITALIC_STAR_RE = re.compile(
    r"(?<![A-Za-z0-9_*])\*(?![\s*])(.*?[^\s*])\*(?![A-Za-z0-9_*])", re.DOTALL
)
_ITALIC_UNDERSCORE_RE = re.compile(
    r"(?<![A-Za-z0-9_])_(?![\s_])(.*?[^\s_])_(?![A-Za-z0-9_])", re.DOTALL
)


def expand_inline(text: str) -> str:
    """Convert inline markup in ``text`` to HTML.

    Passes run in a fixed order: escapes, code spans, images, links,
    strikethrough, bold-italic, bold, italic. Code spans and escaped
    characters are parked behind placeholders so later passes never see
    them. Unterminated constructs are left as literal text.
    """
    if not text:
        return ""

    result = _ESCAPE_RE.sub(lambda m: _ESCAPE_TO_PLACEHOLDER[m.group(1)], text)

    code_fragments: list[str] = []

    def _park_code(match: re.Match[str]) -> str:
        code_fragments.append(f"<code>{escape_code(match.group(1))}</code>")
        return f"{_CODE_OPEN}{len(code_fragments) - 1}{_CODE_CLOSE}"

    result = _CODE_SPAN_RE.sub(_park_code, result)

    result = _IMAGE_RE.sub(_render_image, result)
    result = _LINK_RE.sub(_render_link, result)

    result = _STRIKE_RE.sub(r"<del>\1</del>", result)
    result = _BOLD_ITALIC_RE.sub(r"<strong><em>\2</em></strong>", result)
    result = _BOLD_STAR_RE.sub(r"<strong>\1</strong>", result)
    result = _BOLD_UNDERSCORE_RE.sub(r"<strong>\1</strong>", result)
    result = _ITALIC_STAR_RE.sub(r"<em>\1</em>", result)
    result = _ITALIC_UNDERSCORE_RE.sub(r"<em>\1</em>", result)

    result = _CODE_PLACEHOLDER_RE.sub(lambda m: code_fragments[int(m.group(1))], result)
    return result.translate(_PLACEHOLDER_TO_CHAR)


def escape_code(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for code content."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _title_attribute(title: str | None) -> str:
    return f' title="{title}"' if title else ""


def _render_image(match: re.Match[str]) -> str:
    alt, url, title = match.groups()
    return f'<img src="{url}" alt="{alt}"{_title_attribute(title)} />'


def _render_link(match: re.Match[str]) -> str:
    label, url, title = match.groups()
    return f'<a href="{url}"{_title_attribute(title)}>{label}</a>'
