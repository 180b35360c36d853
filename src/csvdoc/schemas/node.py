"""Output document tree model."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field

from csvdoc.tags import VOID_TAGS


class Node(BaseModel):
    """An element of the output tree.

    ``content`` is either leaf text or an ordered list of children. A child
    is usually another node; a plain string child is inline text sitting
    next to element children (a list item hosting a nested list).
    """

    tag: str
    content: Union[str, list[Union["Node", str]]] = ""
    attributes: dict[str, str] = Field(default_factory=dict)

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.content, str)

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_TAGS

    @property
    def children(self) -> list[Node | str]:
        """Children of a branch node, empty for leaves."""
        if isinstance(self.content, str):
            return []
        return self.content

    def append(self, child: Node | str) -> None:
        """Append a child, turning a leaf into a branch that keeps its text."""
        if isinstance(self.content, str):
            self.content = [self.content, child] if self.content else [child]
        else:
            self.content.append(child)
