"""
GROS Front End Package

A from-scratch tokenizer and recursive descent parser for a Rust-flavoured
source language.

Architecture:
    gros/
    ├── lexer/           # Cursor, tokens and the located lexer driver
    ├── parser/          # Function-declaration grammar and AST
    └── cli.py           # Command-line driver
"""

from .version import __version__

from .lexer import Lexer, Token, TokenKind, tokenize, strip_trivia
from .parser import Parser, ParseError, Program, parse, parse_string

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenKind",
    "Program",
    "ParseError",

    # Entry points
    "tokenize",
    "strip_trivia",
    "parse",
    "parse_string",

    # Version info
    "__version__",
]
