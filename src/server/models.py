"""Pydantic models for the render API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, field_validator

from csvdoc.config import CSVDOC_DEFAULT_FILE_TYPE


class RenderRequest(BaseModel):
    """Request model for the /api/render endpoint.

    Attributes
    ----------
    text : str
        The CSVDoc or TSVDoc document.
    file_type : str
        Input format, ``csv`` or ``tsv``.
    pretty : bool
        Indent the generated HTML.

    """

    text: str = Field(..., description="CSVDoc/TSVDoc document text")
    file_type: str = Field(default=CSVDOC_DEFAULT_FILE_TYPE, description="Input format (csv or tsv)")
    pretty: bool = Field(default=False, description="Indent the generated HTML")

    @field_validator("file_type")
    @classmethod
    def normalize_file_type(cls, v: str) -> str:
        """Lower-case ``file_type``; unsupported values are rejected by the route."""
        return v.strip().lower()


class RenderSuccessResponse(BaseModel):
    """Success response model for the /api/render endpoint.

    Attributes
    ----------
    html : str
        The generated HTML.
    row_count : int
        Number of parsed rows.
    node_count : int
        Number of top-level nodes in the document tree.

    """

    html: str = Field(..., description="Generated HTML")
    row_count: int = Field(..., description="Number of parsed rows")
    node_count: int = Field(..., description="Number of top-level nodes")


class RenderErrorResponse(BaseModel):
    """Error response model for the /api/render endpoint.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")


RenderResponse = Union[RenderSuccessResponse, RenderErrorResponse]
