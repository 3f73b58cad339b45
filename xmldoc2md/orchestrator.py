"""Generation runs: XML inputs to Markdown files, with optional merging."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional

from .config import GenerationConfig, TagPolicy
from .errors import ConfigError, UnknownTagError, XmlDocMarkdownError
from .logging import get_logger
from .postproc.frontmatter import AllowedTags, find_front_matter, parse_front_matter_options
from .postproc.merge import merge_markdown
from .rendering import xml_to_markdown


@dataclass
class FileOutcome:
    """Result of rendering one input document."""

    source: Path
    output: Optional[Path] = None
    error: Optional[UnknownTagError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunResult:
    """Summary of a generation run."""

    success: bool
    config: GenerationConfig
    generated_files: List[Path] = field(default_factory=list)
    warnings: List[UnknownTagError] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    merged_file: Optional[Path] = None
    exception: Optional[Exception] = None


class Orchestrator:
    """Runs the generate-then-merge pipeline for a set of XML inputs."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("orchestrator")

    def run(self, config: GenerationConfig) -> RunResult:
        """Execute one run; ``config`` is copied and never mutated."""
        config = replace(config, input_files=list(config.input_files))
        self.logger.info("Starting generation run for %d input file(s)", len(config.input_files))

        problems = config.input_errors()
        if problems:
            return self._fail_configuration(config, problems)

        try:
            config = self.apply_front_matter(config)
        except ConfigError as exc:
            return self._fail_configuration(config, [str(exc)])
        problems = config.output_errors()
        if problems:
            return self._fail_configuration(config, problems)

        result = RunResult(success=False, config=config)
        try:
            documentation_is_file = config.documentation_path_is_file
            if not documentation_is_file:
                config.documentation_path.mkdir(parents=True, exist_ok=True)
            for source in config.input_files:
                outcome = self.generate_file(source, self._output_path(config, source, documentation_is_file))
                if outcome.ok:
                    result.generated_files.append(outcome.output)
                    continue
                if config.tag_policy is TagPolicy.WARN:
                    self.logger.warning("%s; file skipped", outcome.error)
                    result.warnings.append(outcome.error)
                    continue
                raise outcome.error
            if config.merge_files:
                result.merged_file = merge_markdown(
                    config.documentation_path, result.generated_files, config.output_file
                )
                self.logger.info("Merged Markdown written to %s", result.merged_file)
        except (XmlDocMarkdownError, OSError, UnicodeError) as exc:
            self._log_exception("Markdown generation failed", exc)
            result.exception = exc
            result.errors.append(str(exc))
            return result

        result.success = True
        return result

    def apply_front_matter(self, config: GenerationConfig) -> GenerationConfig:
        """Return ``config`` with overrides from the first non-empty front matter."""
        found = find_front_matter(config.documentation_path)
        if found is None:
            self.logger.debug("No front matter found under %s", config.documentation_path)
            return config
        path, front_matter = found
        options = parse_front_matter_options(front_matter.content)
        self.logger.info("Applying front matter options from %s", path)
        tag_policy = config.tag_policy
        if options.allowed_custom_tags is not None:
            tag_policy = TagPolicy.WARN if options.allowed_custom_tags is AllowedTags.ALL else TagPolicy.ERROR
        return replace(config, merge_files=options.merge_xml_comments, tag_policy=tag_policy)

    def generate_file(self, source: Path, output: Path) -> FileOutcome:
        """Render ``source`` into ``output``.

        An unknown tag is reported through the outcome and nothing is written;
        parse and I/O errors propagate.
        """
        # Bytes go straight to expat so the encoding declaration and BOM apply.
        xml = source.read_bytes()
        try:
            markdown = xml_to_markdown(xml)
        except UnknownTagError as exc:
            return FileOutcome(source=source, error=exc.with_source(str(source)))
        output.write_text(markdown, encoding="utf-8")
        self.logger.info("Generated %s from %s", output, source)
        return FileOutcome(source=source, output=output)

    @staticmethod
    def _output_path(config: GenerationConfig, source: Path, documentation_is_file: bool) -> Path:
        if documentation_is_file:
            return config.documentation_path
        return config.documentation_path / f"{source.stem}.md"

    def _fail_configuration(self, config: GenerationConfig, problems: List[str]) -> RunResult:
        for problem in problems:
            self.logger.error(problem)
        return RunResult(success=False, config=config, errors=list(problems))

    def _log_exception(self, message: str, exc: Exception) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.exception("%s: %s", message, exc)
        else:
            self.logger.error("%s: %s", message, exc)


__all__ = ["FileOutcome", "Orchestrator", "RunResult"]
