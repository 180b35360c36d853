"""csvdoc: convert tagged CSV/TSV documents into HTML."""

__version__ = "0.1.0"

from csvdoc.conversion import ConversionOptions, convert, prettify_html, transform  # noqa: E402
from csvdoc.exceptions import (  # noqa: E402
    CsvdocError,
    InputTooLargeError,
    ParseError,
    UnsupportedFileTypeError,
)
from csvdoc.renderer import render, render_nodes  # noqa: E402
from csvdoc.row_parser import parse_attributes, parse_row  # noqa: E402
from csvdoc.schemas import ConversionResult, Document, Node, Row  # noqa: E402
from csvdoc.tokenizer import parse_document, tokenize  # noqa: E402
from csvdoc.tree_builder import build_tree  # noqa: E402

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "CsvdocError",
    "Document",
    "InputTooLargeError",
    "Node",
    "ParseError",
    "Row",
    "UnsupportedFileTypeError",
    "build_tree",
    "convert",
    "parse_attributes",
    "parse_document",
    "parse_row",
    "prettify_html",
    "render",
    "render_nodes",
    "tokenize",
    "transform",
]
