"""Split CSV/TSV text into field lists and parse them into a document."""

from __future__ import annotations

import csv
import io
import logging

from csvdoc.config import SUPPORTED_FILE_TYPES
from csvdoc.exceptions import ParseError, UnsupportedFileTypeError
from csvdoc.row_parser import parse_row
from csvdoc.schemas import Document

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def tokenize(text: str, file_type: str = "csv") -> list[list[str]]:
    """Split ``text`` into rows of fields.

    CSV uses commas and double-quote quoting (``""`` is a literal quote);
    TSV uses tabs and treats quotes as ordinary characters. Empty lines
    are skipped, rows may have any number of fields.

    Raises:
        UnsupportedFileTypeError: ``file_type`` is not ``csv`` or ``tsv``.
        ParseError: The text has malformed quoting.
    """
    file_type = normalize_file_type(file_type)
    if file_type == "tsv":
        reader = csv.reader(io.StringIO(text), delimiter="\t", quoting=csv.QUOTE_NONE, strict=True)
    else:
        reader = csv.reader(io.StringIO(text), delimiter=",", quotechar='"', strict=True)

    rows: list[list[str]] = []
    try:
        for fields in reader:
            if not fields:
                continue
            if not rows and fields[0].startswith(_BOM):
                fields[0] = fields[0][len(_BOM) :]
            rows.append(fields)
    except csv.Error as exc:
        raise ParseError(f"Malformed {file_type.upper()} near line {reader.line_num}: {exc}") from exc
    return rows


def parse_document(text: str, file_type: str = "csv") -> Document:
    """Tokenize ``text`` and parse every row, dropping comment rows.

    A malformed input is logged and yields an empty document.
    """
    try:
        records = tokenize(text, file_type)
    except ParseError as exc:
        logger.warning("Could not tokenize input: %s", exc)
        return []

    doc: Document = []
    for fields in records:
        row = parse_row(fields)
        if row is not None:
            doc.append(row)

    logger.debug("Parsed %d rows from %d records", len(doc), len(records))
    return doc


def normalize_file_type(file_type: str) -> str:
    """Lower-case and validate a file type name."""
    normalized = (file_type or "").strip().lower()
    if normalized not in SUPPORTED_FILE_TYPES:
        raise UnsupportedFileTypeError(
            f"Invalid file type: {file_type}. Supported types are: {', '.join(SUPPORTED_FILE_TYPES)}"
        )
    return normalized
