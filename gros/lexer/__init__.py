"""
GROS Lexer Package

Implements a from-scratch lexical analyzer (tokenizer) for GROS source text.

Key Features:
- Total over Unicode input: unknown characters become UNKNOWN tokens
- Nested block comments and documentation comment styles
- Identifier, raw identifier and lifetime forms
- Numeric, char, byte, string, raw string and C string literals
- Source location tracking and warnings for malformed input
"""

from .tokens import (
    Token, TokenKind, LiteralKind, LiteralInfo, Base, DocStyle, SourceLocation
)
from .cursor import Cursor, tokenize
from .lexer import Lexer, strip_trivia, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerWarning

__all__ = [
    "Cursor",
    "Lexer",
    "Token",
    "TokenKind",
    "LiteralKind",
    "LiteralInfo",
    "Base",
    "DocStyle",
    "SourceLocation",
    "Diagnostic",
    "LexerWarning",
    "tokenize",
    "tokenize_string",
    "tokenize_file",
    "strip_trivia",
]
