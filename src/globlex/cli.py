"""Command-line interface: tokenize patterns and dump the result."""

from __future__ import annotations

import argparse
import io
import json
import sys
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from globlex.errors import LexError
from globlex.options import Options


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    patterns: list[str]
    options: Options
    as_json: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="globlex",
        description="Tokenize glob patterns and print the node sequence",
    )
    p.add_argument("patterns", nargs="+", metavar="PATTERN", help="Glob pattern to tokenize")
    p.add_argument(
        "--strict-open",
        action="store_true",
        default=None,
        help="Match a leading ./ literally",
    )
    p.add_argument(
        "--nonegate",
        action="store_true",
        default=None,
        help="Treat a leading ! as literal text",
    )
    p.add_argument(
        "--noglobstar",
        action="store_true",
        default=None,
        help="Treat ** as a plain star",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover globlex.toml)",
    )
    p.add_argument("--json", action="store_true", help="Print nodes as JSON")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / "globlex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace, search_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, search_dir or Path("."))
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    table = config.get("options")
    options = Options.from_mapping(table if isinstance(table, dict) else {})

    flags = {
        "strict_open": args.strict_open,
        "nonegate": args.nonegate,
        "noglobstar": args.noglobstar,
    }
    options = replace(options, **{k: v for k, v in flags.items() if v is not None})

    return CliOptions(patterns=list(args.patterns), options=options, as_json=args.json)


def run(options: CliOptions) -> str:
    """Tokenize every pattern and return the rendered output."""
    from globlex.debug import ast_to_dict, dump_ast
    from globlex.lexer import tokenize

    asts = [tokenize(pattern, options.options) for pattern in options.patterns]

    if options.as_json:
        return json.dumps([ast_to_dict(ast) for ast in asts], indent=2) + "\n"

    out = io.StringIO()
    for ast in asts:
        dump_ast(ast, file=out)
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
        output = run(options)
    except LexError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0
