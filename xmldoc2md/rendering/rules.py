"""Rendering rules keyed by effective tag name.

Each :class:`TagRule` pairs a ``str.format`` template with an extractor that
returns the positional values for it. Extractors receive the element, the
assembly name of the document being rendered, and a callable that renders a
sequence of nodes; the recursion itself lives in
:mod:`xmldoc2md.rendering.renderer`.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Sequence

from ..nodes import Element, Node
from .names import last_reference_segment, normalize_member_name

NodesRenderer = Callable[[Sequence[Node], Optional[str]], str]
Extractor = Callable[[Element, Optional[str], NodesRenderer], Sequence[str]]

# Effective names synthesised by the renderer; never literal element names.
SEE_PAGE = "see-page"
SEE_ANCHOR = "see-anchor"
SEE_LANGWORD = "see-langword"
FIRST_PARAM = "first-param"
NO_MEMBER_KIND = "none"


@dataclass(frozen=True)
class TagRule:
    """Format template plus the extractor that fills its placeholders."""

    template: str
    extract: Extractor

    def apply(self, element: Element, assembly_name: Optional[str], render: NodesRenderer) -> str:
        values = list(self.extract(element, assembly_name, render))
        return self.template.format(*values)


def to_code_block(text: str) -> str:
    """Dedent code so the first line keeps four spaces of indentation.

    Empty lines are dropped, the strip width is taken from the first
    remaining line, and trailing whitespace is trimmed from the result.
    """
    lines = [line for line in text.split("\n") if line]
    if not lines:
        return text
    first = lines[0]
    width = len(first) - len(first.lstrip(" ")) - 4
    if width > 0:
        lines = [line[width:] for line in lines]
    return "\n".join(lines).rstrip()


def _body(element: Element, assembly_name: Optional[str], render: NodesRenderer) -> List[str]:
    return [render(element.children, assembly_name)]


def _name_and_body(attribute: str) -> Extractor:
    def extract(element: Element, assembly_name: Optional[str], render: NodesRenderer) -> List[str]:
        return [element.get(attribute) or "", render(element.children, assembly_name)]

    return extract


def _member(element: Element, assembly_name: Optional[str], render: NodesRenderer) -> List[str]:
    label = normalize_member_name(element.get("name") or "", assembly_name)
    return [label, render(element.children, assembly_name)]


def _document(element: Element, assembly_name: Optional[str], render: NodesRenderer) -> List[str]:
    # The document's own assembly name replaces whatever context was passed in.
    assembly = element.find("assembly")
    name_element = assembly.find("name") if assembly is not None else None
    document_assembly = name_element.text_content() if name_element is not None else ""
    members = element.find("members")
    rendered = ""
    if members is not None:
        rendered = render(list(members.elements("member")), document_assembly)
    return [document_assembly, rendered]


def _anchor(element: Element, assembly_name: Optional[str], render: NodesRenderer) -> List[str]:
    target, body = _name_and_body("cref")(element, assembly_name, render)
    return [target.lower(), body]


def _reference_label(element: Element, assembly_name: Optional[str], render: NodesRenderer) -> List[str]:
    cref = element.get("cref")
    if cref is not None:
        return [last_reference_segment(cref)]
    href = element.get("href")
    if href is not None:
        return [href]
    return [element.text_content()]


def _attribute(name: str) -> Extractor:
    def extract(element: Element, assembly_name: Optional[str], render: NodesRenderer) -> List[str]:
        return [element.get(name) or ""]

    return extract


def _langword(element: Element, assembly_name: Optional[str], render: NodesRenderer) -> List[str]:
    cref = element.get("cref")
    return [cref if cref is not None else element.text_content()]


def _code(element: Element, assembly_name: Optional[str], render: NodesRenderer) -> List[str]:
    return [element.get("lang") or "", to_code_block(element.text_content())]


def _nothing(element: Element, assembly_name: Optional[str], render: NodesRenderer) -> List[str]:
    return []


_MEMBER_TEMPLATE = "#### {0}\n\n{1}\n\n---\n"
_ROW_TEMPLATE = "|{0}: |{1}|\n"

TAG_RULES: Mapping[str, TagRule] = MappingProxyType(
    {
        "doc": TagRule("# {0} #\n\n{1}\n\n", _document),
        "type": TagRule("## {0}\n\n{1}\n\n---\n", _member),
        "field": TagRule(_MEMBER_TEMPLATE, _member),
        "property": TagRule(_MEMBER_TEMPLATE, _member),
        "method": TagRule(_MEMBER_TEMPLATE, _member),
        "event": TagRule(_MEMBER_TEMPLATE, _member),
        "summary": TagRule("{0}\n\n", _body),
        "value": TagRule("**Value**: {0}\n\n", _body),
        "remarks": TagRule("\n\n>{0}\n\n", _body),
        "example": TagRule("##### Example: {0}\n\n", _body),
        "para": TagRule("{0}\n\n", _body),
        "code": TagRule("\n\n###### {0} code\n\n```\n{1}\n```\n\n", _code),
        SEE_PAGE: TagRule("[[{1}|{0}]]", _name_and_body("cref")),
        SEE_ANCHOR: TagRule("[{1}]({0})]", _anchor),
        FIRST_PARAM: TagRule("|Name | Description |\n|-----|------|\n" + _ROW_TEMPLATE, _name_and_body("name")),
        "typeparam": TagRule(_ROW_TEMPLATE, _name_and_body("name")),
        "param": TagRule(_ROW_TEMPLATE, _name_and_body("name")),
        "paramref": TagRule("`{0}`", _name_and_body("name")),
        "exception": TagRule("[[{0}|{0}]]: {1}\n\n", _name_and_body("cref")),
        "returns": TagRule("**Returns**: {0}\n\n", _body),
        "c": TagRule(" `{0}` ", _body),
        "inheritdoc": TagRule("*Inherits documentation from base.*\n\n", _nothing),
        "see": TagRule("[`{0}`]({0})", _reference_label),
        SEE_LANGWORD: TagRule("`{0}`", _attribute("langword")),
        "seealso": TagRule("**See also**: [`{0}`]({0})\n\n", _reference_label),
        "list": TagRule("{0}\n\n", _body),
        "item": TagRule("- {0}\n", _body),
        "term": TagRule("**{0}**: ", _body),
        "description": TagRule("{0}", _body),
        "listheader": TagRule("{0}\n", _body),
        "typeparamref": TagRule("`{0}`", _attribute("name")),
        "langword": TagRule("`{0}`", _langword),
        NO_MEMBER_KIND: TagRule("", _nothing),
    }
)


__all__ = [
    "FIRST_PARAM",
    "NO_MEMBER_KIND",
    "SEE_ANCHOR",
    "SEE_LANGWORD",
    "SEE_PAGE",
    "TAG_RULES",
    "TagRule",
    "to_code_block",
]
