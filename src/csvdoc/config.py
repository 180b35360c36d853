"""Local configuration for csvdoc."""

from __future__ import annotations

import os


DEFAULT_FILE_TYPE = "csv"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_INPUT_KB = 1024

SUPPORTED_FILE_TYPES = ("csv", "tsv")

CSVDOC_DEFAULT_FILE_TYPE = os.getenv("CSVDOC_DEFAULT_FILE_TYPE", DEFAULT_FILE_TYPE).lower()
CSVDOC_LOG_LEVEL = os.getenv("CSVDOC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
# Upper bound for request bodies accepted by the render API.
CSVDOC_MAX_INPUT_KB = int(os.getenv("CSVDOC_MAX_INPUT_KB", str(DEFAULT_MAX_INPUT_KB)))
