"""Conversion output model."""

from __future__ import annotations

from pydantic import BaseModel


class ConversionResult(BaseModel):
    """Final conversion output."""

    html: str
    row_count: int
    node_count: int
