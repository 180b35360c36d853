"""Turn raw field lists into typed rows."""

from __future__ import annotations

import re
from typing import Sequence

from csvdoc.schemas import Row
from csvdoc.tags import BLANK, PARAGRAPH, TAG_ALIASES

DEPTH_MARKER = "_"
COMMENT_MARKER = "//"

_BLANK_RE = re.compile(r"^\.+$")
_HEADING_FORM_RE = re.compile(r"^(?:h[1-6]|#{1,6})$")
_SUFFIX_RE = re.compile(r"^([A-Za-z\[\]|]+)(\d+)$")
_ATTRIBUTE_PAIR_RE = re.compile(r"[^=]+=")

# Private-use code points standing in for escaped separators.
_ESCAPED_SEMICOLON = "\ue000"
_ESCAPED_EQUALS = "\ue001"


def parse_row(fields: Sequence[str]) -> Row | None:
    """Parse one tokenized row.

    Returns ``None`` for comment rows, which are dropped from the document.
    Never raises: anything unrecognized degrades to a paragraph.
    """
    if not fields:
        return Row(tag=PARAGRAPH)

    head = fields[0]
    stripped = head.lstrip(DEPTH_MARKER)
    depth = len(head) - len(stripped)
    candidate = stripped.strip()

    if candidate.startswith(COMMENT_MARKER):
        return None
    if depth == 0 and _BLANK_RE.match(candidate):
        return Row.blank()

    raw_tag, suffix = split_suffix(candidate)
    value = fields[1] if len(fields) > 1 else None
    attributes = parse_attributes(fields[2]) if len(fields) > 2 else {}

    return Row(
        tag=resolve_tag(raw_tag),
        raw_tag=raw_tag,
        suffix=suffix,
        value=value,
        attributes=attributes,
        depth=depth,
    )


def split_suffix(tag: str) -> tuple[str, str | None]:
    """Split ``table16`` into ``("table", "16")``; headings are left whole."""
    if _HEADING_FORM_RE.match(tag):
        return tag, None
    match = _SUFFIX_RE.match(tag)
    if not match:
        return tag, None
    return match.group(1), match.group(2)


def resolve_tag(tag: str) -> str:
    """Map an alias to its canonical tag; empty tags become paragraphs."""
    if not tag:
        return PARAGRAPH
    resolved = TAG_ALIASES.get(tag, tag)
    if resolved == BLANK:
        # "blank" is reserved for separator rows.
        return PARAGRAPH
    return resolved


def parse_attributes(text: str) -> dict[str, str]:
    """Parse ``key=value;key2=value2`` into a dict.

    ``\\;`` and ``\\=`` are literal separators inside values. Pairs without
    ``=`` or with an empty key are dropped, and the last duplicate key wins.
    """
    if not text:
        return {}

    processed = text.replace("\\;", _ESCAPED_SEMICOLON).replace("\\=", _ESCAPED_EQUALS)
    if not _ATTRIBUTE_PAIR_RE.search(processed):
        return {}

    attributes: dict[str, str] = {}
    for pair in processed.split(";"):
        if not pair.strip():
            continue
        key, sep, value = pair.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key:
            continue
        attributes[_restore_escapes(key)] = _restore_escapes(value)
    return attributes


def _restore_escapes(text: str) -> str:
    return text.replace(_ESCAPED_SEMICOLON, ";").replace(_ESCAPED_EQUALS, "=")
