"""Post-generation helpers: front matter discovery and output merging."""

from .frontmatter import (
    AllowedTags,
    FrontMatter,
    FrontMatterOptions,
    find_front_matter,
    parse_front_matter_options,
    read_front_matter,
)
from .merge import discover_markdown_files, merge_markdown

__all__ = [
    "AllowedTags",
    "FrontMatter",
    "FrontMatterOptions",
    "discover_markdown_files",
    "find_front_matter",
    "merge_markdown",
    "parse_front_matter_options",
    "read_front_matter",
]
