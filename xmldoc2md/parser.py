"""Parse XML documentation text into an immutable node tree."""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Optional, Tuple, Union
from xml.parsers import expat

from .errors import DocumentParseError
from .nodes import Document, Element, Node, SourcePosition, Text


class _TreeBuilder:
    """Collects expat callbacks into :mod:`xmldoc2md.nodes` objects.

    Whitespace-only character data between elements is dropped, matching the
    way documentation exporters treat insignificant whitespace. Comments and
    processing instructions are never reported by expat here, so they do not
    appear in the tree.
    """

    def __init__(self, parser: "expat.XMLParserType") -> None:
        self._parser = parser
        self._stack: List[Tuple[str, dict, SourcePosition, List[Node]]] = []
        self._text: List[str] = []
        self._text_position: Optional[SourcePosition] = None
        self.root: Optional[Element] = None

        parser.StartElementHandler = self.start
        parser.EndElementHandler = self.end
        parser.CharacterDataHandler = self.data

    def _position(self) -> SourcePosition:
        return SourcePosition(
            line=self._parser.CurrentLineNumber,
            column=self._parser.CurrentColumnNumber + 1,
        )

    def start(self, name: str, attributes: dict) -> None:
        self._flush_text()
        self._stack.append((name, dict(attributes), self._position(), []))

    def end(self, name: str) -> None:
        self._flush_text()
        tag, attributes, position, children = self._stack.pop()
        element = Element(
            name=tag,
            attributes=MappingProxyType(attributes),
            children=tuple(children),
            position=position,
        )
        if self._stack:
            self._stack[-1][3].append(element)
        else:
            self.root = element

    def data(self, content: str) -> None:
        if self._text_position is None:
            self._text_position = self._position()
        self._text.append(content)

    def _flush_text(self) -> None:
        content = "".join(self._text)
        position = self._text_position
        self._text = []
        self._text_position = None
        if not content or not content.strip() or not self._stack:
            return
        self._stack[-1][3].append(Text(content=content, position=position or SourcePosition()))


def parse_document(source: Union[str, bytes]) -> Document:
    """Parse XML text and return the document wrapper around its root element."""
    parser = expat.ParserCreate()
    parser.buffer_text = True
    builder = _TreeBuilder(parser)
    try:
        parser.Parse(source, True)
    except expat.ExpatError as exc:
        raise DocumentParseError(
            expat.ErrorString(exc.code), line=exc.lineno, column=exc.offset + 1
        ) from exc
    if builder.root is None:  # pragma: no cover - expat reports this first
        raise DocumentParseError("no element found")
    return Document(root=builder.root)


__all__ = ["parse_document"]
