"""Serialize node trees to HTML."""

from __future__ import annotations

from typing import Iterable, Mapping

from csvdoc.inline import escape_code, expand_inline
from csvdoc.schemas import Document, Node
from csvdoc.tags import CODE, URL_ATTRIBUTES
from csvdoc.tree_builder import build_tree


def render(doc: Document) -> str:
    """Build the tree for ``doc`` and serialize it."""
    return render_nodes(build_tree(doc))


def render_nodes(nodes: Iterable[Node]) -> str:
    """Serialize top-level nodes, one per line."""
    return "\n".join(_render_node(node) for node in nodes)


def _render_node(node: Node, *, in_code: bool = False) -> str:
    in_code = in_code or node.tag == CODE
    attributes = attributes_to_string(node.attributes)

    if node.is_void:
        return f"<{node.tag}{attributes} />"

    if isinstance(node.content, str):
        inner = _render_text(node.content, in_code=in_code)
    else:
        inner = "".join(
            _render_text(child, in_code=in_code)
            if isinstance(child, str)
            else _render_node(child, in_code=in_code)
            for child in node.content
        )
    return f"<{node.tag}{attributes}>{inner}</{node.tag}>"


def _render_text(text: str, *, in_code: bool) -> str:
    return escape_code(text) if in_code else expand_inline(text)


def attributes_to_string(attributes: Mapping[str, str]) -> str:
    """Format attributes as ``' key="value"'`` pairs in insertion order."""
    return "".join(
        f' {key}="{escape_attribute_value(key, value)}"' for key, value in attributes.items()
    )


def escape_attribute_value(name: str, value: str) -> str:
    """Escape an attribute value; URL-carrying attributes only escape quotes."""
    if name in URL_ATTRIBUTES:
        return value.replace('"', "&quot;")
    return escape_html(value)


def escape_html(text: str) -> str:
    """Escape ``& < > " '``."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )
