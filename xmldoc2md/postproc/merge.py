"""Combine generated and existing Markdown files into one output."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Sequence

from ..errors import MergeError
from ..logging import get_logger

logger = get_logger("merge")


def discover_markdown_files(documentation_path: Path) -> List[Path]:
    """Return every ``*.md`` file under ``documentation_path`` in sorted order."""
    if documentation_path.is_file():
        return [documentation_path]
    if not documentation_path.is_dir():
        raise FileNotFoundError(f"Documentation directory not found: {documentation_path}")
    return sorted(path for path in documentation_path.rglob("*.md") if path.is_file())


def merge_markdown(
    documentation_path: Path,
    generated: Sequence[Path],
    output_file: Path,
) -> Path:
    """Write ``output_file`` from existing Markdown followed by generated Markdown.

    Files that existed before the run come first, in discovery order, and
    the generated files follow in generation order. Without existing files the
    generated files alone are concatenated. Each appended file is preceded by
    a line separator. The write is not transactional.
    """
    generated_keys = {_key(path) for path in generated}
    output_key = _key(output_file)
    existing = [
        path
        for path in discover_markdown_files(documentation_path)
        # The output of an earlier merge inside the docs tree is not a source.
        if _key(path) not in generated_keys and _key(path) != output_key
    ]
    sources = [*existing, *generated]
    if not sources:
        raise MergeError("No Markdown files available to merge")

    logger.debug(
        "Merging %d existing and %d generated file(s) into %s",
        len(existing),
        len(generated),
        output_file,
    )
    # Sources are read up front because the output may overwrite one of them.
    contents = [source.read_bytes() for source in sources]
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with output_file.open("wb") as handle:
        handle.write(os.linesep.encode("utf-8").join(contents))
    return output_file


def _key(path: Path) -> Path:
    return path.resolve()


__all__ = ["discover_markdown_files", "merge_markdown"]
