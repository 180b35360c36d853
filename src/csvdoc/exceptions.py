"""Custom exceptions for csvdoc."""


class CsvdocError(Exception):
    """Base exception for csvdoc operations."""


class ParseError(CsvdocError):
    """Error while splitting raw text into rows (malformed quoting)."""


class UnsupportedFileTypeError(CsvdocError):
    """Requested input format is neither CSV nor TSV."""


class InputTooLargeError(CsvdocError):
    """Input exceeds the configured size limit."""
