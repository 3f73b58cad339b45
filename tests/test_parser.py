"""Tests for xmldoc2md.parser."""

from __future__ import annotations

import pytest

from xmldoc2md.errors import DocumentParseError
from xmldoc2md.nodes import Document, Element, Text
from xmldoc2md.parser import parse_document


def test_parse_document_wraps_root_element() -> None:
    document = parse_document('<doc><assembly><name>Lib</name></assembly></doc>')

    assert isinstance(document, Document)
    assert document.root.name == "doc"
    name = document.root.find("assembly").find("name")
    assert name.text_content() == "Lib"


def test_parse_document_drops_whitespace_only_text() -> None:
    document = parse_document("<summary>\n    <para>One</para>\n    <para>Two</para>\n</summary>")

    children = document.root.children
    assert [type(child) for child in children] == [Element, Element]


def test_parse_document_keeps_mixed_text_whitespace() -> None:
    document = parse_document("<summary>Use <c>x</c> here\n  please</summary>")

    children = document.root.children
    assert isinstance(children[0], Text)
    assert children[0].content == "Use "
    assert children[2].content == " here\n  please"


def test_parse_document_records_positions() -> None:
    document = parse_document("<doc>\n  <members>\n    <member name=\"T:A\"/>\n  </members>\n</doc>")

    member = document.root.find("members").find("member")
    assert member.position.line == 3
    assert member.position.column == 5
    assert member.get("name") == "T:A"


def test_parse_document_treats_cdata_as_text() -> None:
    document = parse_document("<code><![CDATA[if (a < b) { }]]></code>")

    assert document.root.text_content() == "if (a < b) { }"


def test_parse_document_reports_malformed_xml() -> None:
    with pytest.raises(DocumentParseError) as excinfo:
        parse_document("<doc>\n<members></doc>")

    assert excinfo.value.line == 2


def test_parse_document_rejects_empty_input() -> None:
    with pytest.raises(DocumentParseError):
        parse_document("")
