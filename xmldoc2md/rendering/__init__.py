"""Tag-driven rendering of documentation trees into Markdown."""

from .renderer import effective_tag_name, normalize_line_breaks, render_markdown, xml_to_markdown
from .rules import TAG_RULES, TagRule

__all__ = [
    "TAG_RULES",
    "TagRule",
    "effective_tag_name",
    "normalize_line_breaks",
    "render_markdown",
    "xml_to_markdown",
]
