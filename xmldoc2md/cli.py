"""CLI entrypoints for xmldoc2md commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import GenerationConfig, TagPolicy, load_config
from .errors import ConfigError, XmlDocMarkdownError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .rendering import xml_to_markdown


def _add_logging_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )
    parser.add_argument(
        "--log-file",
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write detailed logs to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xmldoc2md",
        description="Convert XML documentation comments into Markdown.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a single XML documentation file.",
    )
    _add_logging_options(convert_parser, suppress_default=True)
    convert_parser.add_argument("-i", "--inputfile", help="Input xml file to read.")
    convert_parser.add_argument(
        "--cin",
        action="store_true",
        help="Read input from console instead of file.",
    )
    convert_parser.add_argument("-o", "--outputfile", help="Output md file to write.")
    convert_parser.add_argument(
        "--cout",
        action="store_true",
        help="Write output to console instead of file.",
    )

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate Markdown for several XML files and optionally merge the results.",
    )
    _add_logging_options(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "inputs",
        nargs="*",
        help="XML documentation files to convert (defaults to `inputs` from the config file).",
    )
    generate_parser.add_argument(
        "-d",
        "--documentation-path",
        help="Directory that receives generated files, or a single Markdown file.",
    )
    generate_parser.add_argument(
        "--merge",
        action="store_true",
        default=None,
        help="Merge existing and generated Markdown into --output.",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        help="File written by the merge step.",
    )
    generate_parser.add_argument(
        "--warn-on-unexpected-tag",
        action="store_true",
        default=None,
        help="Log unknown tags as warnings and skip the affected file instead of failing.",
    )
    generate_parser.add_argument(
        "--config",
        default=".",
        help="Path to .xmldoc2md.yml or the directory holding it (defaults to current directory).",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for xmldoc2md commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    if args.command == "convert":
        _run_convert(parser, args)
    elif args.command == "generate":
        _run_generate(parser, args)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_convert(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if (not args.cin and args.inputfile is None) or (not args.cout and args.outputfile is None):
        parser.exit(1, "Error: Must specify input and output (file or console).\n")

    try:
        if args.cin:
            xml = sys.stdin.read()
        else:
            xml = Path(args.inputfile).read_bytes()
        markdown = xml_to_markdown(xml)
        if args.cout:
            sys.stdout.write(markdown)
        else:
            Path(args.outputfile).write_text(markdown, encoding="utf-8")
    except (XmlDocMarkdownError, OSError) as exc:
        parser.exit(1, f"xmldoc2md convert failed: {exc}\n")


def _run_generate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        config = _resolve_generate_config(args)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    result = Orchestrator().run(config)
    if not result.success:
        details = "; ".join(result.errors) or "unknown error"
        parser.exit(1, f"xmldoc2md generate failed: {details}\nRun with --verbose for more details.\n")

    for path in result.generated_files:
        print(f"Markdown generated at {_relativize(path)}")
    if result.merged_file is not None:
        print(f"Merged Markdown written to {_relativize(result.merged_file)}")


def _resolve_generate_config(args: argparse.Namespace) -> GenerationConfig:
    """Combine the project config file with command-line overrides."""
    config = load_config(Path(args.config))
    overrides: dict[str, object] = {}
    if args.inputs:
        overrides["input_files"] = [Path(item) for item in args.inputs]
    if args.documentation_path:
        overrides["documentation_path"] = Path(args.documentation_path)
    if args.merge is not None:
        overrides["merge_files"] = args.merge
    if args.output:
        overrides["output_file"] = Path(args.output)
    if args.warn_on_unexpected_tag is not None:
        overrides["tag_policy"] = TagPolicy.WARN
    return replace(config, **overrides)


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
