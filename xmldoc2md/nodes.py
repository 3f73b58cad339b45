"""Immutable node tree for parsed XML documentation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class SourcePosition:
    """1-based line and column of a node in its source document."""

    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class Text:
    """Character data between elements."""

    content: str
    position: SourcePosition = field(default_factory=SourcePosition)


@dataclass(frozen=True)
class Element:
    """An XML element with its attributes and ordered children."""

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["Node", ...] = ()
    position: SourcePosition = field(default_factory=SourcePosition)

    def get(self, attribute: str) -> Optional[str]:
        return self.attributes.get(attribute)

    def elements(self, name: str | None = None) -> Iterator["Element"]:
        """Yield child elements, optionally filtered by name."""
        for child in self.children:
            if isinstance(child, Element) and (name is None or child.name == name):
                yield child

    def find(self, name: str) -> Optional["Element"]:
        return next(self.elements(name), None)

    def text_content(self) -> str:
        """Concatenated text of every descendant text node."""
        parts = []
        for child in self.children:
            if isinstance(child, Text):
                parts.append(child.content)
            else:
                parts.append(child.text_content())
        return "".join(parts)


@dataclass(frozen=True)
class Document:
    """Wrapper around the single root element of a parsed document."""

    root: Element


Node = Union[Element, Text]

__all__ = ["Document", "Element", "Node", "SourcePosition", "Text"]
