"""Front matter detection for existing Markdown files."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

import yaml

from ..config import as_bool
from ..errors import ConfigError
from ..logging import get_logger
from .merge import discover_markdown_files

DELIMITER = "---"

logger = get_logger("frontmatter")


class AllowedTags(enum.Enum):
    """How elements without a rendering rule are treated."""

    ALL = "All"
    NONE = "None"

    @classmethod
    def parse(cls, value: Any) -> Optional["AllowedTags"]:
        if not isinstance(value, str):
            return None
        lowered = value.strip().lower()
        for option in cls:
            if option.value.lower() == lowered:
                return option
        return None


@dataclass
class FrontMatter:
    """Raw front matter block, including the opening delimiter line."""

    content: str
    empty: bool


@dataclass
class FrontMatterOptions:
    """Generation settings carried in a front matter block."""

    merge_xml_comments: bool = False
    allowed_custom_tags: Optional[AllowedTags] = None


def read_front_matter(path: Path) -> Optional[FrontMatter]:
    """Return the front matter at the top of ``path`` or ``None`` when absent.

    Lines are read lazily, so only the block itself is consumed. Bytes that
    are not valid UTF-8 are replaced rather than rejected.
    """
    with path.open("r", encoding="utf-8-sig", errors="replace") as handle:
        lines = (line.rstrip("\r\n") for line in handle)
        first = next(lines, "")
        if not first.startswith(DELIMITER):
            return None
        collected = _take_until_delimiter(lines)
    if not collected:
        return FrontMatter(content=first, empty=True)
    return FrontMatter(content=os.linesep.join([first, *collected]), empty=False)


def _take_until_delimiter(lines: Iterable[str]) -> List[str]:
    collected: List[str] = []
    for line in lines:
        if line.startswith(DELIMITER):
            break
        collected.append(line)
    return collected


def find_front_matter(documentation_path: Path) -> Optional[Tuple[Path, FrontMatter]]:
    """Locate the first non-empty front matter for a documentation path.

    A file path is inspected directly; a directory is searched recursively
    for ``*.md`` files and the first match wins.
    """
    if not documentation_path.exists():
        return None
    candidates = discover_markdown_files(documentation_path)
    for candidate in candidates:
        front_matter = read_front_matter(candidate)
        if front_matter is not None and not front_matter.empty:
            return candidate, front_matter
    return None


def parse_front_matter_options(content: str) -> FrontMatterOptions:
    """Deserialize a front matter block into :class:`FrontMatterOptions`."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse front matter: {exc}") from exc
    if data is None:
        return FrontMatterOptions()
    if not isinstance(data, dict):
        raise ConfigError("Front matter must contain a mapping")

    unknown = sorted(str(key) for key in data if key not in {"MergeXmlComments", "AllowedCustomTags"})
    if unknown:
        logger.debug("Ignoring unrecognised front matter keys: %s", ", ".join(unknown))

    return FrontMatterOptions(
        merge_xml_comments=as_bool(data.get("MergeXmlComments")) or False,
        allowed_custom_tags=AllowedTags.parse(data.get("AllowedCustomTags")),
    )


__all__ = [
    "AllowedTags",
    "FrontMatter",
    "FrontMatterOptions",
    "find_front_matter",
    "parse_front_matter_options",
    "read_front_matter",
]
