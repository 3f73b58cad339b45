"""Convert compiler-generated XML documentation into Markdown."""

from .rendering.renderer import render_markdown, xml_to_markdown

__all__ = ["render_markdown", "xml_to_markdown"]

__version__ = "0.1.0"
