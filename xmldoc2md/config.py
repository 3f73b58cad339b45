"""Run configuration and project config loading (.xmldoc2md.yml)."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".xmldoc2md.yml"


class TagPolicy(enum.Enum):
    """What happens when an element has no rendering rule."""

    ERROR = "error"
    WARN = "warn"


@dataclass
class GenerationConfig:
    """Settings for a single generation run.

    Built fresh for every run: first from the caller's defaults, then
    adjusted by front matter found in existing Markdown.
    """

    input_files: List[Path] = field(default_factory=list)
    documentation_path: Optional[Path] = None
    merge_files: bool = False
    output_file: Optional[Path] = None
    tag_policy: TagPolicy = TagPolicy.ERROR

    @property
    def documentation_path_is_file(self) -> bool:
        return self.documentation_path is not None and self.documentation_path.is_file()

    def input_errors(self) -> List[str]:
        """Problems that prevent the run from even inspecting front matter."""
        if self.documentation_path is None:
            return ["DocumentationPath must be specified"]
        if not self.input_files:
            return ["InputXml cannot be empty"]
        return []

    def output_errors(self) -> List[str]:
        """Problems with the output layout, checked after front matter is applied."""
        if self.merge_files and self.output_file is None:
            return ["OutputFile must be specified if input files are merged"]
        if self.documentation_path_is_file and len(self.input_files) != 1:
            return [
                "DocumentationPath must specify a directory if more than one input XML value is supplied"
            ]
        return []


def load_config(config_path: Path) -> GenerationConfig:
    """Load a project configuration from disk.

    Missing files yield an empty configuration. Relative paths are resolved
    against the directory holding the config file.
    """
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.exists():
        return GenerationConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    documentation_path = _as_str(data.get("documentation_path"))
    output_file = _as_str(data.get("output_file"))
    warn = as_bool(data.get("warn_on_unexpected_tag"))

    return GenerationConfig(
        input_files=[root / item for item in _as_str_list(data.get("inputs"))],
        documentation_path=root / documentation_path if documentation_path else None,
        merge_files=as_bool(data.get("merge_files")) or False,
        output_file=root / output_file if output_file else None,
        tag_policy=TagPolicy.WARN if warn else TagPolicy.ERROR,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CONFIG_FILENAME", "GenerationConfig", "TagPolicy", "as_bool", "load_config"]
