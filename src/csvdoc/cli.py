"""Command-line interface: convert a CSVDoc/TSVDoc file to HTML."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from csvdoc import __version__
from csvdoc.config import CSVDOC_DEFAULT_FILE_TYPE, SUPPORTED_FILE_TYPES
from csvdoc.conversion import ConversionOptions, convert
from csvdoc.exceptions import UnsupportedFileTypeError
from csvdoc.tokenizer import normalize_file_type
from csvdoc.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_EPILOG = """examples:
  csvd input.csv output.html
  csvd --verbose input.csv output.html
  csvd --type tsv input.tsv output.html
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="csvd",
        description="CSVDoc/TSVDoc Parser - generate HTML documents from CSV/TSV",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input_file", help="CSV or TSV document to convert")
    parser.add_argument("output_file", help="HTML file to write")
    parser.add_argument(
        "-t",
        "--type",
        dest="file_type",
        default=CSVDOC_DEFAULT_FILE_TYPE,
        help=f"File type ({' or '.join(SUPPORTED_FILE_TYPES)}), defaults to {CSVDOC_DEFAULT_FILE_TYPE}",
    )
    parser.add_argument("--verbose", action="store_true", help="Show detailed information")
    parser.add_argument("--pretty", action="store_true", help="Indent the generated HTML")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"CSVDoc/TSVDoc Parser version {__version__}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    try:
        file_type = normalize_file_type(args.file_type)
    except UnsupportedFileTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    input_path = Path(args.input_file)
    output_path = Path(args.output_file)
    if not input_path.is_file():
        print(f"error: Input file '{input_path}' not found.", file=sys.stderr)
        return 1

    try:
        logger.info("Reading input file...", extra={"path": str(input_path)})
        text = input_path.read_text(encoding="utf-8")

        logger.info("Converting %s to HTML...", file_type.upper())
        logger.debug("Processing %d lines of %s", len(text.split("\n")), file_type.upper())
        result = convert(text, ConversionOptions(file_type=file_type, pretty=args.pretty))

        if not output_path.parent.exists():
            logger.info("Creating output directory...", extra={"path": str(output_path.parent)})
            output_path.parent.mkdir(parents=True, exist_ok=True)

        logger.info("Writing to output file...", extra={"path": str(output_path)})
        output_path.write_text(result.html, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: An error occurred: {exc}", file=sys.stderr)
        logger.debug("Conversion failed", exc_info=True)
        return 1

    size_kb = len(result.html) / 1024
    logger.info(
        "Conversion complete: %s -> %s (%.2f KB)",
        input_path,
        output_path,
        size_kb,
        extra={"row_count": result.row_count, "node_count": result.node_count},
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
