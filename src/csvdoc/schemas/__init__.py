"""Shared schemas for csvdoc."""

from csvdoc.schemas.conversion import ConversionResult
from csvdoc.schemas.node import Node
from csvdoc.schemas.row import Document, Row

__all__ = ["ConversionResult", "Document", "Node", "Row"]
