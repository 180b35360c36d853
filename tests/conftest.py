"""Test setup for csvdoc."""

from __future__ import annotations

import re
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

_BETWEEN_TAGS_RE = re.compile(r">\s+<")


def normalize_html(html: str) -> str:
    """Drop whitespace between tags so expected HTML can be written indented."""
    return _BETWEEN_TAGS_RE.sub("><", html.strip())


@pytest.fixture
def normalize():
    """Expose :func:`normalize_html` to tests."""
    return normalize_html


@pytest.fixture
def write_input(tmp_path: Path):
    """Write a document under ``tmp_path`` and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
