"""Configuration for the server."""

from csvdoc.config import CSVDOC_MAX_INPUT_KB

MAX_INPUT_KB: int = CSVDOC_MAX_INPUT_KB  # Largest request text accepted by /api/render
MAX_INPUT_BYTES: int = MAX_INPUT_KB * 1024
