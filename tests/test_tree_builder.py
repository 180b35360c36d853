"""Tests for grouping rows into a node tree."""

from __future__ import annotations

from csvdoc.row_parser import parse_row
from csvdoc.schemas import Document, Node, Row
from csvdoc.tree_builder import build_tree


def _doc(*records: list[str]) -> Document:
    rows = [parse_row(fields) for fields in records]
    return [row for row in rows if row is not None]


def _li(content: str | list[Node | str]) -> Node:
    return Node(tag="li", content=content)


class TestSimpleBlocks:
    """Headings, links, images, rules and unknown tags."""

    def test_empty_document(self) -> None:
        assert build_tree([]) == []

    def test_heading(self) -> None:
        nodes = build_tree(_doc(["#", "Title", "id=top"]))

        assert nodes == [Node(tag="h1", content="Title", attributes={"id": "top"})]

    def test_heading_without_value(self) -> None:
        assert build_tree(_doc(["h3"])) == [Node(tag="h3", content="")]

    def test_link_is_wrapped_in_paragraph(self) -> None:
        nodes = build_tree(_doc(["a", "Example", "href=https://example.com;target=_blank"]))

        assert nodes == [
            Node(
                tag="p",
                content=[
                    Node(
                        tag="a",
                        content="Example",
                        attributes={"href": "https://example.com", "target": "_blank"},
                    )
                ],
            )
        ]

    def test_link_href_defaults_to_empty(self) -> None:
        (paragraph,) = build_tree(_doc(["a", "Nowhere"]))

        assert paragraph.children[0].attributes == {"href": ""}

    def test_image_takes_alt_from_value(self) -> None:
        (paragraph,) = build_tree(_doc(["img", "Logo", "src=logo.png;width=20"]))

        image = paragraph.children[0]
        assert image.tag == "img"
        assert image.content == ""
        assert image.attributes == {"src": "logo.png", "width": "20", "alt": "Logo"}

    def test_image_defaults(self) -> None:
        (paragraph,) = build_tree(_doc(["img"]))

        assert paragraph.children[0].attributes == {"src": "", "alt": ""}

    def test_horizontal_rule(self) -> None:
        assert build_tree(_doc(["hr", "", "class=thick"])) == [
            Node(tag="hr", content="", attributes={"class": "thick"})
        ]

    def test_unknown_tag_becomes_paragraph(self) -> None:
        assert build_tree(_doc(["section", "text", "id=s"])) == [
            Node(tag="p", content="text", attributes={"id": "s"})
        ]

    def test_h7_becomes_paragraph(self) -> None:
        assert build_tree(_doc(["h7", "too deep"])) == [Node(tag="p", content="too deep")]


class TestParagraphs:
    """Paragraph runs and blank separators."""

    def test_consecutive_rows_merge(self) -> None:
        nodes = build_tree(_doc(["p", "one"], ["p", "two"], ["", "three"]))

        assert nodes == [Node(tag="p", content="one<br />two<br />three")]

    def test_blank_rows_split_runs(self) -> None:
        nodes = build_tree(_doc(["p", "one"], ["."], ["p", "two"]))

        assert nodes == [Node(tag="p", content="one"), Node(tag="p", content="two")]

    def test_repeated_blank_rows_produce_no_empty_paragraphs(self) -> None:
        nodes = build_tree(_doc(["."], ["p", "one"], ["."], ["."], ["p", "two"], ["."]))

        assert [node.content for node in nodes] == ["one", "two"]

    def test_attributes_merge_left_to_right(self) -> None:
        (node,) = build_tree(_doc(["p", "one", "id=a;class=x"], ["p", "two", "class=y"]))

        assert node.attributes == {"id": "a", "class": "y"}

    def test_missing_values_join_as_empty(self) -> None:
        (node,) = build_tree(_doc(["p", "one"], ["p"], ["p", "three"]))

        assert node.content == "one<br /><br />three"

    def test_other_blocks_end_the_run(self) -> None:
        nodes = build_tree(_doc(["p", "one"], ["h2", "Heading"], ["p", "two"]))

        assert [node.tag for node in nodes] == ["p", "h2", "p"]


class TestLists:
    """Flat and nested lists."""

    def test_flat_list(self) -> None:
        (node,) = build_tree(_doc(["-", "a", "class=menu"], ["*", "b"], ["+", "c"]))

        assert node == Node(
            tag="ul",
            content=[_li("a"), _li("b"), _li("c")],
            attributes={"class": "menu"},
        )

    def test_nested_list_item_keeps_text(self) -> None:
        (node,) = build_tree(_doc(["-", "parent"], ["_-", "child"], ["-", "sibling"]))

        assert node == Node(
            tag="ul",
            content=[
                _li(["parent", Node(tag="ul", content=[_li("child")])]),
                _li("sibling"),
            ],
        )

    def test_mixed_list_kinds_under_one_item(self) -> None:
        (node,) = build_tree(
            _doc(
                ["-", "L1"],
                ["_-", "L2"],
                ["_+", "L2 plus"],
                ["__*", "L3"],
                ["_1", "L2 ordered"],
            )
        )

        first = node.children[0]
        assert first.children[0] == "L1"
        unordered, ordered = first.children[1:]
        assert unordered.tag == "ul"
        assert [item.children[0] if not item.is_leaf else item.content for item in unordered.children] == [
            "L2",
            "L2 plus",
        ]
        assert unordered.children[1].children[1] == Node(tag="ul", content=[_li("L3")])
        assert ordered == Node(tag="ol", content=[_li("L2 ordered")])

    def test_return_from_deep_nesting(self) -> None:
        (node,) = build_tree(_doc(["1", "a"], ["_1", "a.1"], ["__1", "a.1.1"], ["1", "b"]))

        assert [child.tag for child in node.children] == ["li", "li"]
        assert node.children[1] == _li("b")
        deepest = node.children[0].children[1].children[0].children[1]
        assert deepest == Node(tag="ol", content=[_li("a.1.1")])

    def test_family_break_at_top_level(self) -> None:
        nodes = build_tree(_doc(["-", "a"], ["1", "one"], ["-", "b"]))

        assert [node.tag for node in nodes] == ["ul", "ol", "ul"]
        assert all(len(node.children) == 1 for node in nodes)

    def test_skipped_levels_are_synthesized(self) -> None:
        (node,) = build_tree(_doc(["-", "top"], ["___-", "deep", "class=d"]))

        level1 = node.children[0].children[1]
        level2 = level1.children[0].children[0]
        level3 = level2.children[0].children[0]
        assert level1.attributes == {}
        assert level2.attributes == {}
        assert level3 == Node(tag="ul", content=[_li("deep")], attributes={"class": "d"})

    def test_list_starting_deep_keeps_first_row_attributes(self) -> None:
        (node,) = build_tree(_doc(["_-", "nested first", "id=x"]))

        assert node == Node(
            tag="ul",
            content=[_li([Node(tag="ul", content=[_li("nested first")], attributes={"id": "x"})])],
            attributes={"id": "x"},
        )

    def test_outer_list_takes_attributes_of_nested_first_row(self) -> None:
        (node,) = build_tree(_doc(["__1", "x", "class=c"], ["1", "y"]))

        assert node.attributes == {"class": "c"}
        assert node.children[1] == _li("y")

    def test_sublist_attributes_merge(self) -> None:
        (node,) = build_tree(_doc(["-", "a"], ["_-", "b", "class=sub"], ["_-", "c", "id=s"]))

        sublist = node.children[0].children[1]
        assert sublist.attributes == {"class": "sub", "id": "s"}

    def test_deeper_levels_close_after_item(self) -> None:
        (node,) = build_tree(
            _doc(["-", "a"], ["_-", "a1"], ["__-", "a1x"], ["_-", "a2"], ["__-", "a2x"])
        )

        sublist = node.children[0].children[1]
        a1, a2 = sublist.children
        assert a1.children[1] == Node(tag="ul", content=[_li("a1x")])
        assert a2.children[1] == Node(tag="ul", content=[_li("a2x")])

    def test_blank_row_ends_list(self) -> None:
        nodes = build_tree(_doc(["-", "a"], ["."], ["-", "b"]))

        assert [node.tag for node in nodes] == ["ul", "ul"]


class TestTables:
    """Row grouping, header sections and padding."""

    def test_rows_grouped_by_suffix(self) -> None:
        (table,) = build_tree(
            _doc(
                ["table0", "A"],
                ["table0", "B"],
                ["table0", "C"],
                ["table1", "1"],
                ["table1", "2"],
            )
        )

        (body,) = table.children
        assert body.tag == "tbody"
        first, second = body.children
        assert [cell.content for cell in first.children] == ["A", "B", "C"]
        assert [(cell.tag, cell.content) for cell in second.children] == [
            ("td", "1"),
            ("td", "2"),
            ("td", ""),
        ]

    def test_header_section(self) -> None:
        (table,) = build_tree(_doc(["[", "Name"], ["[", "Age"], ["|", "Ann"], ["|", "31"]))

        head, body = table.children
        assert head.tag == "thead"
        assert [cell.tag for cell in head.children[0].children] == ["th", "th"]
        assert [cell.tag for cell in body.children[0].children] == ["td", "td"]

    def test_raw_th_makes_header_cell_in_body(self) -> None:
        (table,) = build_tree(_doc(["th0", "John"], ["td0", "27"]))

        (body,) = table.children
        (row,) = body.children
        assert [(cell.tag, cell.content) for cell in row.children] == [("th", "John"), ("td", "27")]

    def test_unsuffixed_rows_share_a_group(self) -> None:
        (table,) = build_tree(_doc(["table", "John"], ["table", "Doe"], ["th0", "x"], ["th0", "y"], ["td1", "1"]))

        (body,) = table.children
        assert len(body.children) == 3
        assert len(body.children[2].children) == 2

    def test_recurring_suffix_starts_new_group(self) -> None:
        (table,) = build_tree(_doc(["|1", "a"], ["|2", "b"], ["|1", "c"]))

        assert len(table.children[0].children) == 3

    def test_table_attributes_ignore_cell_rows(self) -> None:
        (table,) = build_tree(
            _doc(["table", "a", "class=grid"], ["td", "b", "class=cell"], ["|", "c", "id=t"])
        )

        assert table.attributes == {"class": "grid", "id": "t"}

    def test_table_ends_at_other_block(self) -> None:
        nodes = build_tree(_doc(["|", "a"], ["p", "after"]))

        assert [node.tag for node in nodes] == ["table", "p"]


class TestCodeBlocks:
    """Code runs become one pre > code block."""

    def test_lines_are_joined(self) -> None:
        (pre,) = build_tree(_doc(["```", "def f():"], ["```", "    return 1"]))

        assert pre == Node(tag="pre", content=[Node(tag="code", content="def f():\n    return 1")])

    def test_language_becomes_data_attribute(self) -> None:
        (pre,) = build_tree(_doc(["code", "x = 1", "language=python;class=hl"], ["code", "y = 2"]))

        assert pre.children[0].attributes == {"class": "hl", "data-language": "python"}

    def test_empty_language_is_dropped(self) -> None:
        (pre,) = build_tree(_doc(["code", "x", "language="]))

        assert pre.children[0].attributes == {}

    def test_blank_row_separates_blocks(self) -> None:
        nodes = build_tree(_doc(["```", "a"], ["."], ["```", "b"]))

        assert len(nodes) == 2


class TestBlockquotes:
    """Nested quotes driven by depth."""

    def test_single_level(self) -> None:
        (quote,) = build_tree(_doc([">", "one", "cite=x"], [">", "two"]))

        assert quote == Node(
            tag="blockquote",
            content=[Node(tag="p", content="one"), Node(tag="p", content="two")],
            attributes={"cite": "x"},
        )

    def test_deep_then_shallow(self) -> None:
        (quote,) = build_tree(_doc([">", "p0"], ["_>", "p1"], ["__>", "p2"], [">", "p3"]))

        assert quote == Node(
            tag="blockquote",
            content=[
                Node(tag="p", content="p0"),
                Node(
                    tag="blockquote",
                    content=[
                        Node(tag="p", content="p1"),
                        Node(tag="blockquote", content=[Node(tag="p", content="p2")]),
                    ],
                ),
                Node(tag="p", content="p3"),
            ],
        )

    def test_rows_shallower_than_first_row_are_dropped(self) -> None:
        (quote,) = build_tree(_doc(["_>", "nested start"], [">", "shallower"], ["_>", "back"]))

        assert quote.children == [Node(tag="p", content="nested start"), Node(tag="p", content="back")]

    def test_row_between_levels_lands_in_outer_quote(self) -> None:
        (quote,) = build_tree(_doc([">", "a"], ["__>", "b"], ["_>", "c"]))

        assert quote == Node(
            tag="blockquote",
            content=[
                Node(tag="p", content="a"),
                Node(tag="blockquote", content=[Node(tag="p", content="b")]),
                Node(tag="p", content="c"),
            ],
        )

    def test_return_to_root_after_jump(self) -> None:
        (quote,) = build_tree(_doc([">", "a"], ["__>", "b"], [">", "c"]))

        assert [child.tag for child in quote.children] == ["p", "blockquote", "p"]
        assert quote.children[2] == Node(tag="p", content="c")

    def test_jump_opens_one_quote(self) -> None:
        (quote,) = build_tree(_doc([">", "a"], ["___>", "b", "class=deep"]))

        nested = quote.children[1]
        assert nested == Node(tag="blockquote", content=[Node(tag="p", content="b")], attributes={"class": "deep"})


def test_blank_only_document() -> None:
    assert build_tree([Row.blank(), Row.blank()]) == []
