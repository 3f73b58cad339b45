"""Tests for the tag rule table."""

from __future__ import annotations

import pytest

from xmldoc2md.parser import parse_document
from xmldoc2md.rendering.renderer import render_nodes
from xmldoc2md.rendering.rules import (
    FIRST_PARAM,
    NO_MEMBER_KIND,
    SEE_ANCHOR,
    SEE_LANGWORD,
    SEE_PAGE,
    TAG_RULES,
    to_code_block,
)


def test_tag_rules_cover_synthesised_names() -> None:
    synthesised = {
        FIRST_PARAM,
        NO_MEMBER_KIND,
        SEE_ANCHOR,
        SEE_LANGWORD,
        SEE_PAGE,
        "type",
        "field",
        "property",
        "method",
        "event",
    }
    assert synthesised <= set(TAG_RULES)


def test_tag_rules_cover_documentation_vocabulary() -> None:
    vocabulary = {
        "doc", "summary", "value", "remarks", "example", "para", "code", "param",
        "typeparam", "paramref", "exception", "returns", "c", "inheritdoc", "see",
        "seealso", "list", "item", "term", "description", "listheader",
        "typeparamref", "langword",
    }
    assert vocabulary <= set(TAG_RULES)


def test_tag_rules_are_read_only() -> None:
    with pytest.raises(TypeError):
        TAG_RULES["custom"] = TAG_RULES["para"]  # type: ignore[index]


def test_generic_see_rule_prefers_cref_then_href_then_text() -> None:
    rule = TAG_RULES["see"]
    cref = parse_document('<see cref="T:Foo.Bar" href="https://example.com"/>').root
    href = parse_document('<see href="https://example.com"/>').root
    text = parse_document("<see>Plain</see>").root

    assert rule.apply(cref, None, render_nodes) == "[`Bar`](Bar)"
    assert rule.apply(href, None, render_nodes) == "[`https://example.com`](https://example.com)"
    assert rule.apply(text, None, render_nodes) == "[`Plain`](Plain)"


def test_inheritdoc_rule_ignores_content() -> None:
    element = parse_document("<inheritdoc cref=\"T:Foo\"/>").root
    assert TAG_RULES["inheritdoc"].apply(element, None, render_nodes) == (
        "*Inherits documentation from base.*\n\n"
    )


def test_to_code_block_keeps_four_spaces_on_first_line() -> None:
    text = "\n      var x = 1;\n        return x;\n    "
    assert to_code_block(text) == "    var x = 1;\n      return x;"


def test_to_code_block_does_not_strip_shallow_indentation() -> None:
    assert to_code_block("\n  a\n  b\n") == "  a\n  b"


def test_to_code_block_returns_blank_text_unchanged() -> None:
    assert to_code_block("\n\n") == "\n\n"
