"""Command-line interface for jsxparse."""

from __future__ import annotations

import argparse
import io
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsxparse.errors import JsxError

FORMATS = ("tree", "json", "tokens")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    format: str
    indent: int


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="jsxparse",
        description="Parse JSX markup embedded in source files",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: tree)",
    )
    p.add_argument("--json", action="store_true", help="Shorthand for --format json")
    p.add_argument("--tokens", action="store_true", help="Shorthand for --format tokens")
    p.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help="JSON indentation (default: 2)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover jsxparse.toml)",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "jsxparse.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    fmt = "tree"
    indent = 2
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config: {cfg_format!r} "
                    f"(expected one of {', '.join(FORMATS)})"
                )
            fmt = cfg_format
        cfg_indent = cfg_output.get("indent")
        if isinstance(cfg_indent, int):
            indent = cfg_indent

    if args.format is not None:
        fmt = args.format
    elif args.json:
        fmt = "json"
    elif args.tokens:
        fmt = "tokens"
    if args.indent is not None:
        indent = args.indent

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        indent=indent,
    )


def render_file(options: CliOptions) -> str:
    """Read and parse a source file, returning the requested rendering."""
    from jsxparse.debug import dump_ast, dump_tokens, to_dict
    from jsxparse.parser import parse

    source = options.input_file.read_text(encoding="utf-8")
    out = io.StringIO()

    if options.format == "tokens":
        dump_tokens(source, file=out, filename=str(options.input_file))
        return out.getvalue()

    program = parse(source, str(options.input_file))
    if options.format == "json":
        return json.dumps(to_dict(program, source), indent=options.indent) + "\n"

    dump_ast(program, source, file=out)
    return out.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        text = render_file(options)
    except JsxError as exc:
        print(exc.format(), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)

    return 0
