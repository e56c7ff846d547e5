# Copyright 2026 Vilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the vilex command-line interface."""

import argparse
import json
import sys
from pathlib import Path

from vilex.config.settings import ConfigError, LexerConfig, find_config, load_config
from vilex.lexer.errors import VilexError
from vilex.lexer.lexer import Lexer
from vilex.lexer.tokens import Token

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the vilex CLI."""
    parser = argparse.ArgumentParser(
        prog="vilex",
        description="vilex - lexical scanner for .vi source files",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # tokens subcommand
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the tokens of a source file",
        description="Scan a .vi source file and print its tokens in order.",
    )
    tokens_parser.add_argument("file", help="The .vi source file to scan")
    tokens_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=None,
        help="Output format (default: from settings file, otherwise text)",
    )
    _add_config_argument(tokens_parser)

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that source files scan without errors",
        description="Scan each .vi source file and report the first lexical error in each.",
    )
    check_parser.add_argument("files", nargs="+", help="The .vi source files to check")
    _add_config_argument(check_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_config_argument(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--config",
        default=None,
        help="Settings file to use (default: .vilex.yaml in the current directory, if present)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        config = _resolve_config(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "tokens":
        return _cmd_tokens(args, config)
    return _cmd_check(args, config)


def _resolve_config(explicit: str | None) -> LexerConfig:
    """Load the settings named on the command line, or discover them in the cwd."""
    if explicit is not None:
        return load_config(Path(explicit))
    discovered = find_config(Path.cwd())
    if discovered is None:
        return LexerConfig()
    return load_config(discovered)


def _cmd_tokens(args: argparse.Namespace, config: LexerConfig) -> int:
    """Handle the tokens subcommand."""
    output_format = args.format or config.output_format
    try:
        tokens = Lexer.from_file(args.file, encoding=config.encoding).analyze()
    except VilexError as exc:
        print(f"Error: {args.file}: {exc}", file=sys.stderr)
        return 1

    if output_format == "json":
        print(json.dumps([_token_to_dict(token) for token in tokens], indent=2))
    else:
        for token in tokens:
            print(token)
    return 0


def _cmd_check(args: argparse.Namespace, config: LexerConfig) -> int:
    """Handle the check subcommand."""
    failures = 0
    for file in args.files:
        try:
            Lexer.from_file(file, encoding=config.encoding).analyze()
        except VilexError as exc:
            print(f"Error: {file}: {exc}", file=sys.stderr)
            failures += 1
        else:
            print(f"OK {file}")

    if failures:
        print(f"{failures} of {len(args.files)} file(s) failed.", file=sys.stderr)
        return 1
    return 0


def _token_to_dict(token: Token) -> dict[str, object]:
    return {
        "kind": token.kind.value,
        "lexeme": token.lexeme,
        "line": token.line,
        "column": token.column,
    }
