"""Parsed input row model."""

from __future__ import annotations

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from csvdoc.tags import BLANK


class Row(BaseModel):
    """One parsed record of the tabular input.

    Attributes:
        tag: Canonical tag after alias resolution (``"p"`` when empty).
        raw_tag: Tag text before alias resolution, without depth markers or
            group suffix.
        suffix: Trailing digit group of the tag, used to split table rows.
        value: Primary text (field 1); ``None`` when the field is missing.
        attributes: Attributes parsed from field 2.
        depth: Number of leading nesting markers.
    """

    model_config = ConfigDict(frozen=True)

    tag: str
    raw_tag: str = ""
    suffix: str | None = None
    value: str | None = None
    attributes: dict[str, str] = Field(default_factory=dict)
    depth: int = Field(default=0, ge=0)

    @classmethod
    def blank(cls) -> Row:
        """Create a blank separator row."""
        return cls(tag=BLANK, raw_tag=".")

    @property
    def is_blank(self) -> bool:
        return self.tag == BLANK


Document: TypeAlias = list[Row]
