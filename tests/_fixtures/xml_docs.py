"""Sample XML documentation used across the test-suite."""

from __future__ import annotations

from pathlib import Path

_DOC_TEMPLATE = """<?xml version="1.0"?>
<doc>
    <assembly>
        <name>{assembly}</name>
    </assembly>
    <members>
{members}
    </members>
</doc>
"""

SIMPLE_MEMBERS = """
        <member name="T:TestNamespace.TestClass">
            <summary>A test class for unit testing.</summary>
        </member>
        <member name="M:TestNamespace.TestClass.TestMethod(System.String)">
            <summary>A test method.</summary>
            <param name="input">The input string.</param>
            <returns>The processed result.</returns>
        </member>
"""

UNKNOWN_TAG_MEMBERS = """
        <member name="T:TestNamespace.TestClass">
            <summary>A test class.</summary>
            <completelyunknowntag>Unknown content</completelyunknowntag>
        </member>
"""


def build_doc(members: str, assembly: str = "TestAssembly") -> str:
    """Wrap member XML in a complete documentation document."""
    return _DOC_TEMPLATE.format(assembly=assembly, members=members)


class XmlDocWriter:
    """Writes documentation XML files into a scratch directory."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)

    def write(self, name: str, members: str = SIMPLE_MEMBERS, *, assembly: str = "TestAssembly") -> Path:
        path = self.root / name
        path.write_text(build_doc(members, assembly), encoding="utf-8")
        return path


__all__ = ["SIMPLE_MEMBERS", "UNKNOWN_TAG_MEMBERS", "XmlDocWriter", "build_doc"]
