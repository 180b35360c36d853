"""Conversion pipeline for CSVDoc/TSVDoc text -> HTML."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup

from csvdoc.config import CSVDOC_DEFAULT_FILE_TYPE
from csvdoc.renderer import render_nodes
from csvdoc.schemas import ConversionResult
from csvdoc.tokenizer import normalize_file_type, parse_document
from csvdoc.tree_builder import build_tree

logger = logging.getLogger(__name__)


@dataclass
class ConversionOptions:
    """Options for a conversion.

    Attributes:
        file_type: Input format, ``"csv"`` or ``"tsv"``.
        pretty: If True, re-indent the generated HTML.
    """

    file_type: str = CSVDOC_DEFAULT_FILE_TYPE
    pretty: bool = False


def convert(text: str, options: ConversionOptions | None = None) -> ConversionResult:
    """Parse ``text`` and render it to HTML.

    Args:
        text: Raw CSV or TSV document.
        options: Conversion options. Uses defaults if None.

    Returns:
        The HTML together with row and node counts.

    Raises:
        UnsupportedFileTypeError: If the file type is not csv or tsv.
    """
    opts = options or ConversionOptions()
    file_type = normalize_file_type(opts.file_type)

    doc = parse_document(text, file_type)
    nodes = build_tree(doc)
    html = render_nodes(nodes)
    if opts.pretty and html:
        html = prettify_html(html)

    logger.debug(
        "Converted %s input",
        file_type,
        extra={"row_count": len(doc), "node_count": len(nodes)},
    )
    return ConversionResult(html=html, row_count=len(doc), node_count=len(nodes))


def transform(text: str, file_type: str = "csv", *, pretty: bool = False) -> str:
    """Convert CSVDoc/TSVDoc text to an HTML string."""
    return convert(text, ConversionOptions(file_type=file_type, pretty=pretty)).html


def prettify_html(html: str) -> str:
    """Re-indent an HTML fragment; whitespace inside ``pre`` is kept as is.

    The result is not whitespace-identical to the plain output: prettify puts
    every tag and text run on its own indented line, which adds whitespace
    inside inline text (around ``<br/>`` or ``<strong>``, for example).
    Only the element structure and the stripped text are preserved.
    """
    soup = BeautifulSoup(html, "html.parser")
    return soup.prettify().rstrip("\n")
