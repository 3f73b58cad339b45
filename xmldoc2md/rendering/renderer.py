"""Recursive conversion of documentation nodes into Markdown."""

from __future__ import annotations

import re
from typing import Mapping, Optional, Sequence, Union

from ..errors import UnknownTagError
from ..nodes import Document, Element, Node, Text
from ..parser import parse_document
from .names import member_kind
from .rules import (
    FIRST_PARAM,
    NO_MEMBER_KIND,
    SEE_ANCHOR,
    SEE_LANGWORD,
    SEE_PAGE,
    TAG_RULES,
    TagRule,
)

_WHITESPACE = re.compile(r"\s+")
_REDUNDANT_LINE_BREAKS = re.compile(r"\n\n\n+")
_ANCHOR_PREFIX = "!:#"


def effective_tag_name(element: Element, previous: Optional[Element] = None) -> str:
    """Return the rule key for ``element``.

    ``previous`` is the nearest preceding sibling element, used to decide
    whether a ``param``/``typeparam`` opens a new parameter table.
    """
    name = element.name
    if name == "member":
        name = (member_kind(element.get("name")) or NO_MEMBER_KIND).lower()
    elif name == "see":
        if element.get("langword") is not None:
            name = SEE_LANGWORD
        else:
            cref = element.get("cref")
            name = SEE_ANCHOR if cref is not None and cref.startswith(_ANCHOR_PREFIX) else SEE_PAGE
    elif name.endswith("param") and (previous is None or previous.name != "param"):
        name = FIRST_PARAM
    return name


def render_node(
    node: Union[Document, Node],
    assembly_name: Optional[str] = None,
    *,
    previous: Optional[Element] = None,
    rules: Mapping[str, TagRule] = TAG_RULES,
) -> str:
    """Render one node without the final line-break normalisation."""
    if isinstance(node, Document):
        node = node.root
    if isinstance(node, Text):
        return _WHITESPACE.sub(" ", node.content.replace("\n", " "))

    name = effective_tag_name(node, previous)
    rule = rules.get(name)
    if rule is None:
        raise UnknownTagError(name, line=node.position.line, column=node.position.column)

    def render(nodes: Sequence[Node], context: Optional[str]) -> str:
        return render_nodes(nodes, context, rules=rules)

    return rule.apply(node, assembly_name, render)


def render_nodes(
    nodes: Sequence[Node],
    assembly_name: Optional[str] = None,
    *,
    rules: Mapping[str, TagRule] = TAG_RULES,
) -> str:
    """Render sibling nodes in order and concatenate the results."""
    parts = []
    previous: Optional[Element] = None
    for node in nodes:
        parts.append(render_node(node, assembly_name, previous=previous, rules=rules))
        if isinstance(node, Element):
            previous = node
    return "".join(parts)


def normalize_line_breaks(markdown: str) -> str:
    """Collapse three or more consecutive newlines into a paragraph break."""
    return _REDUNDANT_LINE_BREAKS.sub("\n\n", markdown)


def render_markdown(
    node: Union[Document, Node],
    assembly_name: Optional[str] = None,
    *,
    rules: Mapping[str, TagRule] = TAG_RULES,
) -> str:
    """Render a document or subtree into finished Markdown."""
    return normalize_line_breaks(render_node(node, assembly_name, rules=rules))


def xml_to_markdown(xml: Union[str, bytes]) -> str:
    """Parse XML documentation text and render it as Markdown."""
    return render_markdown(parse_document(xml))


__all__ = [
    "effective_tag_name",
    "normalize_line_breaks",
    "render_markdown",
    "render_node",
    "render_nodes",
    "xml_to_markdown",
]
