"""Error taxonomy for xmldoc2md."""

from __future__ import annotations

from typing import Optional


class XmlDocMarkdownError(RuntimeError):
    """Base class for all errors raised by xmldoc2md."""


class DocumentParseError(XmlDocMarkdownError):
    """Raised when an input document is not well-formed XML."""

    def __init__(self, message: str, *, line: int = 0, column: int = 0) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.line = line
        self.column = column


class UnknownTagError(XmlDocMarkdownError):
    """Raised when an element has no rendering rule."""

    def __init__(
        self,
        tag: str,
        *,
        line: int = 0,
        column: int = 0,
        source: Optional[str] = None,
    ) -> None:
        self.tag = tag
        self.line = line
        self.column = column
        self.source = source
        super().__init__(self._format())

    def with_source(self, source: str) -> "UnknownTagError":
        """Return a copy of this error attributed to ``source``."""
        return UnknownTagError(self.tag, line=self.line, column=self.column, source=source)

    def _format(self) -> str:
        location = f"line {self.line}, column {self.column}"
        if self.source:
            location = f"{self.source}: {location}"
        return f'Unknown element type "{self.tag}" ({location})'


class ConfigError(XmlDocMarkdownError):
    """Raised when configuration cannot be loaded or is inconsistent."""


class MergeError(XmlDocMarkdownError):
    """Raised when a merge is requested but there is nothing to merge."""


__all__ = [
    "ConfigError",
    "DocumentParseError",
    "MergeError",
    "UnknownTagError",
    "XmlDocMarkdownError",
]
