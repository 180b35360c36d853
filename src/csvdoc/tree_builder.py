"""Group a flat row sequence into a tree of nodes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from csvdoc.schemas import Document, Node, Row
from csvdoc.tags import (
    BLANK,
    BLOCKQUOTE,
    CELL_RAW_TAGS,
    CODE,
    DATA_CELL,
    HEADER_CELL,
    IMAGE,
    LINK,
    LIST_ITEM,
    LIST_TAGS,
    PARAGRAPH,
    PRE,
    RULE,
    TABLE,
    TABLE_BODY,
    TABLE_HEAD,
    TABLE_ROW,
    TABLE_TAGS,
    is_heading_tag,
)

logger = logging.getLogger(__name__)

LINE_BREAK = "<br />"


def build_tree(doc: Document) -> list[Node]:
    """Convert a document into top-level nodes.

    The rows are scanned once with a cursor. Every block processor consumes
    one or more rows and returns the index of the first row it did not
    consume.
    """
    nodes: list[Node] = []
    index = 0

    while index < len(doc):
        row = doc[index]
        tag = row.tag

        if tag == BLANK:
            index += 1
        elif is_heading_tag(tag):
            nodes.append(Node(tag=tag, content=row.value or "", attributes=row.attributes))
            index += 1
        elif tag == PARAGRAPH:
            paragraphs, index = _process_paragraphs(doc, index)
            nodes.extend(paragraphs)
        elif tag == LINK:
            nodes.append(_process_link(row))
            index += 1
        elif tag == IMAGE:
            nodes.append(_process_image(row))
            index += 1
        elif tag in LIST_TAGS:
            node, index = _process_list(doc, index)
            nodes.append(node)
        elif tag in TABLE_TAGS:
            node, index = _process_table(doc, index)
            nodes.append(node)
        elif tag == CODE:
            node, index = _process_code(doc, index)
            nodes.append(node)
        elif tag == BLOCKQUOTE:
            node, index = _process_blockquote(doc, index)
            nodes.append(node)
        elif tag == RULE:
            nodes.append(Node(tag=RULE, content="", attributes=row.attributes))
            index += 1
        else:
            # Unknown tags degrade to a plain paragraph.
            nodes.append(Node(tag=PARAGRAPH, content=row.value or "", attributes=row.attributes))
            index += 1

    logger.debug("Built %d top-level nodes from %d rows", len(nodes), len(doc))
    return nodes


def _process_paragraphs(doc: Document, start: int) -> tuple[list[Node], int]:
    """Merge runs of paragraph rows; blank rows split the runs."""
    nodes: list[Node] = []
    segment: list[Row] = []

    def _flush() -> None:
        if not segment:
            return
        attributes: dict[str, str] = {}
        for row in segment:
            attributes.update(row.attributes)
        content = LINE_BREAK.join(row.value or "" for row in segment)
        nodes.append(Node(tag=PARAGRAPH, content=content, attributes=attributes))
        segment.clear()

    index = start
    while index < len(doc) and doc[index].tag in (PARAGRAPH, BLANK):
        row = doc[index]
        if row.is_blank:
            _flush()
        else:
            segment.append(row)
        index += 1
    _flush()

    return nodes, index


def _process_link(row: Row) -> Node:
    attributes = dict(row.attributes)
    if not attributes.get("href"):
        attributes["href"] = ""
    link = Node(tag=LINK, content=row.value or "", attributes=attributes)
    return Node(tag=PARAGRAPH, content=[link])


def _process_image(row: Row) -> Node:
    attributes = dict(row.attributes)
    if not attributes.get("src"):
        attributes["src"] = ""
    attributes["alt"] = row.value or ""
    image = Node(tag=IMAGE, content="", attributes=attributes)
    return Node(tag=PARAGRAPH, content=[image])


@dataclass
class _ListLevel:
    """An open list at one depth."""

    node: Node
    tag: str
    last_item: Node | None = None

    def host_item(self) -> Node:
        """Return the item that receives a nested list, creating an empty one if needed."""
        if self.last_item is None:
            self.last_item = Node(tag=LIST_ITEM, content="")
            self.node.append(self.last_item)
        return self.last_item


def _process_list(doc: Document, start: int) -> tuple[Node, int]:
    """Build a (possibly nested) list from a run of ul/ol rows.

    ``levels[d]`` is the list currently open at depth ``d``. Going deeper
    opens new lists inside the parent level's last item (synthesizing any
    skipped levels); a different list tag at an open depth starts a sibling
    list, except at depth 0 where it ends this list.
    """
    first = doc[start]
    root = Node(tag=first.tag, content=[], attributes=dict(first.attributes))
    levels: list[_ListLevel] = [_ListLevel(node=root, tag=first.tag)]

    index = start
    while index < len(doc) and doc[index].tag in LIST_TAGS:
        row = doc[index]
        depth = row.depth

        if depth == 0 and row.tag != levels[0].tag:
            break

        if depth < len(levels):
            level = levels[depth]
            if level.tag == row.tag:
                level.node.attributes.update(row.attributes)
            else:
                sibling = Node(tag=row.tag, content=[], attributes=dict(row.attributes))
                levels[depth - 1].host_item().append(sibling)
                levels[depth] = _ListLevel(node=sibling, tag=row.tag)
        else:
            while len(levels) <= depth:
                opens_row_level = len(levels) == depth
                sublist = Node(
                    tag=row.tag,
                    content=[],
                    attributes=dict(row.attributes) if opens_row_level else {},
                )
                levels[-1].host_item().append(sublist)
                levels.append(_ListLevel(node=sublist, tag=row.tag))

        item = Node(tag=LIST_ITEM, content=row.value or "")
        levels[depth].node.append(item)
        levels[depth].last_item = item
        # Deeper lists belonged to the previous item.
        del levels[depth + 1 :]
        index += 1

    return root, index


@dataclass
class _RowGroup:
    """Cells that end up in one table row."""

    section: str
    cells: list[Node] = field(default_factory=list)


def _process_table(doc: Document, start: int) -> tuple[Node, int]:
    """Build a table from a run of table rows.

    Rows join the previous table row while their canonical tag and suffix
    both stay the same.
    """
    end = start
    while end < len(doc) and doc[end].tag in TABLE_TAGS:
        end += 1
    rows = doc[start:end]

    attributes: dict[str, str] = {}
    groups: list[_RowGroup] = []
    previous_key: tuple[str, str] | None = None

    for row in rows:
        if row.raw_tag not in CELL_RAW_TAGS:
            attributes.update(row.attributes)

        is_head = row.tag == TABLE_HEAD
        cell_tag = HEADER_CELL if is_head or row.raw_tag == HEADER_CELL else DATA_CELL
        cell = Node(tag=cell_tag, content=row.value or "")

        key = (row.tag, row.suffix or "")
        if key != previous_key:
            groups.append(_RowGroup(section=TABLE_HEAD if is_head else TABLE_BODY))
        groups[-1].cells.append(cell)
        previous_key = key

    column_count = max(len(group.cells) for group in groups)
    head = Node(tag=TABLE_HEAD, content=[])
    body = Node(tag=TABLE_BODY, content=[])

    for group in groups:
        padding = [Node(tag=DATA_CELL, content="") for _ in range(column_count - len(group.cells))]
        table_row = Node(tag=TABLE_ROW, content=[*group.cells, *padding])
        (head if group.section == TABLE_HEAD else body).append(table_row)

    table = Node(tag=TABLE, content=[], attributes=attributes)
    for section in (head, body):
        if section.children:
            table.append(section)

    return table, end


def _process_code(doc: Document, start: int) -> tuple[Node, int]:
    """Join a run of code rows into one ``pre > code`` block."""
    lines: list[str] = []
    attributes: dict[str, str] = {}

    index = start
    while index < len(doc) and doc[index].tag == CODE:
        row = doc[index]
        lines.append(row.value or "")
        attributes.update(row.attributes)
        index += 1

    language = attributes.pop("language", None)
    if language:
        attributes["data-language"] = language

    code = Node(tag=CODE, content="\n".join(lines), attributes=attributes)
    return Node(tag=PRE, content=[code]), index


def _process_blockquote(doc: Document, start: int) -> tuple[Node, int]:
    """Build nested blockquotes from a run of quote rows.

    The stack holds ``(depth, node)`` pairs with the root at the bottom.
    A row deeper than the open quote opens one nested quote. A shallower row
    closes quotes while it is shallower than the open one, never closing the
    root, and lands in the quote it stops at. Rows shallower than the root
    are dropped.
    """
    first = doc[start]
    root = Node(tag=BLOCKQUOTE, content=[], attributes=first.attributes)
    stack: list[tuple[int, Node]] = [(first.depth, root)]

    index = start
    while index < len(doc) and doc[index].tag == BLOCKQUOTE:
        row = doc[index]

        top_depth, top = stack[-1]
        if row.depth > top_depth:
            nested = Node(tag=BLOCKQUOTE, content=[], attributes=row.attributes)
            top.append(nested)
            stack.append((row.depth, nested))

        while len(stack) > 1 and row.depth < stack[-1][0]:
            stack.pop()

        top_depth, top = stack[-1]
        if row.depth >= top_depth:
            top.append(Node(tag=PARAGRAPH, content=row.value or ""))
        else:
            logger.debug("Dropped quote row shallower than the first quote row")
        index += 1

    return root, index
