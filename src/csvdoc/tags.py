"""Tag vocabulary shared by the row parser, tree builder and renderer."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

BLANK: Final = "blank"
PARAGRAPH: Final = "p"
LINK: Final = "a"
IMAGE: Final = "img"
UNORDERED_LIST: Final = "ul"
ORDERED_LIST: Final = "ol"
LIST_ITEM: Final = "li"
TABLE: Final = "table"
TABLE_HEAD: Final = "thead"
TABLE_BODY: Final = "tbody"
TABLE_ROW: Final = "tr"
HEADER_CELL: Final = "th"
DATA_CELL: Final = "td"
CODE: Final = "code"
PRE: Final = "pre"
BLOCKQUOTE: Final = "blockquote"
RULE: Final = "hr"

HEADING_TAGS: Final[frozenset[str]] = frozenset(f"h{level}" for level in range(1, 7))
LIST_TAGS: Final[frozenset[str]] = frozenset({UNORDERED_LIST, ORDERED_LIST})
TABLE_TAGS: Final[frozenset[str]] = frozenset({TABLE_BODY, TABLE_HEAD})
# Raw tags that only describe a cell; they never contribute table attributes.
CELL_RAW_TAGS: Final[frozenset[str]] = frozenset({DATA_CELL, HEADER_CELL})
VOID_TAGS: Final[frozenset[str]] = frozenset({RULE, IMAGE})
# Attribute values that carry URLs keep &, < and > intact.
URL_ATTRIBUTES: Final[frozenset[str]] = frozenset({"src", "href", "srcset", "data"})

TAG_ALIASES: Final = MappingProxyType(
    {
        "#": "h1",
        "##": "h2",
        "###": "h3",
        "####": "h4",
        "#####": "h5",
        "######": "h6",
        "-": UNORDERED_LIST,
        "*": UNORDERED_LIST,
        "+": UNORDERED_LIST,
        LIST_ITEM: UNORDERED_LIST,
        "1": ORDERED_LIST,
        "|": TABLE_BODY,
        TABLE: TABLE_BODY,
        DATA_CELL: TABLE_BODY,
        HEADER_CELL: TABLE_BODY,
        "[": TABLE_HEAD,
        "```": CODE,
        ">": BLOCKQUOTE,
    }
)


def is_heading_tag(tag: str) -> bool:
    """Check if the tag is one of h1-h6."""
    return tag in HEADING_TAGS
