#!/usr/bin/env python3
"""
GROS command-line driver

Usage:
    gros tokens <input> [--no-trivia] [--json]
    gros parse <input> [--json] [--keep-trivia]
    gros --version
    gros --help

Options:
    --no-trivia      Hide whitespace and comment tokens
    --keep-trivia    Feed whitespace and comments to the parser
    --json           JSON output
    -v, --verbose    Debug logging
"""

import argparse
import json
import logging
import sys

from .version import __version__
from .lexer import Lexer, strip_trivia
from .parser import Parser, ParseError, format_tree, to_dict


logger = logging.getLogger(__name__)


def _read_source(path):
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _token_record(token):
    record = {
        "kind": token.kind.name,
        "length": token.length,
        "literal": token.literal,
        "line": token.location.line,
        "column": token.location.column,
    }
    if token.info is not None:
        record["literal_kind"] = token.info.kind.name
        record["terminated"] = token.info.terminated
        if token.info.base is not None:
            record["base"] = int(token.info.base)
        if token.info.suffix_start < token.length:
            record["suffix"] = token.info.suffix(token.literal)
    return record


def cmd_tokens(args):
    """Dump the token stream of a file."""
    lexer = Lexer(_read_source(args.input), args.input)
    tokens = lexer.tokenize()
    if args.no_trivia:
        tokens = strip_trivia(tokens)

    for warning in lexer.warnings:
        print(warning, file=sys.stderr)

    if args.json:
        print(json.dumps([_token_record(token) for token in tokens], indent=2))
    else:
        for token in tokens:
            print(f"{token.location.line}:{token.location.column}\t{token.kind.name}\t{token.literal!r}")
    return 0


def cmd_parse(args):
    """Parse a file and print its tree."""
    lexer = Lexer(_read_source(args.input), args.input)
    tokens = lexer.tokenize()

    try:
        program = Parser(tokens, skip_trivia=not args.keep_trivia).parse()
    except ParseError as e:
        print(e, file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(to_dict(program), indent=2))
    else:
        print(format_tree(program))
    return 0


def build_arg_parser():
    parser = argparse.ArgumentParser(prog="gros", description="GROS tokenizer and parser")
    parser.add_argument("--version", action="version", version=f"gros {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    tokens_parser = subparsers.add_parser("tokens", help="Dump tokens")
    tokens_parser.add_argument("input", help="Source file")
    tokens_parser.add_argument("--no-trivia", action="store_true", help="Hide whitespace and comments")
    tokens_parser.add_argument("--json", action="store_true", help="JSON output")
    tokens_parser.set_defaults(func=cmd_tokens)

    parse_parser = subparsers.add_parser("parse", help="Parse and print the syntax tree")
    parse_parser.add_argument("input", help="Source file")
    parse_parser.add_argument("--json", action="store_true", help="JSON output")
    parse_parser.add_argument("--keep-trivia", action="store_true",
                              help="Do not filter whitespace and comments")
    parse_parser.set_defaults(func=cmd_parse)

    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except OSError as e:
        logger.debug("Reading %s failed", args.input, exc_info=True)
        print(f"error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        logger.debug("Decoding %s failed", args.input, exc_info=True)
        print(f"error: cannot decode {args.input} as UTF-8: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
