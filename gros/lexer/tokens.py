"""
Token definitions for the GROS lexer.

This module defines the closed set of token kinds produced by the cursor:
- Trivia (whitespace, line comments, nested block comments)
- Identifiers (plain, raw, invalid, unknown-prefixed)
- Lifetimes (plain, raw, unknown-prefixed)
- A single unified literal kind, refined by LiteralInfo metadata
- Single-character punctuation and operator symbols
"""

from enum import Enum, IntEnum, auto
from dataclasses import dataclass, field
from typing import Optional


class TokenKind(Enum):
    """
    Enumeration of all token kinds.

    Multi-character operators (``==``, ``->``, ``::``) are not glued here;
    they arrive as runs of single-character symbols.
    """

    # ========================================================================
    # Trivia
    # ========================================================================
    LINE_COMMENT = auto()           # // ... (newline included)
    BLOCK_COMMENT = auto()          # /* ... /* nested */ ... */
    WHITESPACE = auto()             # maximal run of whitespace

    # ========================================================================
    # Identifiers and lifetimes
    # ========================================================================
    IDENT = auto()                  # foo, _bar, café
    INVALID_IDENT = auto()          # identifiers running into emoji
    RAW_IDENT = auto()              # r#match
    UNKNOWN_PREFIX = auto()         # foo"bar", foo#, foo'x
    LIFETIME = auto()               # 'a, 'static
    UNKNOWN_PREFIX_LIFETIME = auto()  # 'foo#
    RAW_LIFETIME = auto()           # 'r#a

    # ========================================================================
    # Literals (sub-form lives in Token.info)
    # ========================================================================
    LITERAL = auto()

    # ========================================================================
    # Single-character symbols
    # ========================================================================
    SEMI = auto()                   # ;
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )
    OPEN_BRACE = auto()             # {
    CLOSE_BRACE = auto()            # }
    OPEN_BRACKET = auto()           # [
    CLOSE_BRACKET = auto()          # ]
    AT = auto()                     # @
    POUND = auto()                  # #
    TILDE = auto()                  # ~
    QUESTION = auto()               # ?
    COLON = auto()                  # :
    DOLLAR = auto()                 # $
    EQ = auto()                     # =
    BANG = auto()                   # !
    LT = auto()                     # <
    GT = auto()                     # >
    MINUS = auto()                  # -
    AND = auto()                    # &
    OR = auto()                     # |
    PLUS = auto()                   # +
    STAR = auto()                   # *
    SLASH = auto()                  # /
    CARET = auto()                  # ^
    PERCENT = auto()                # %

    # ========================================================================
    # Catch-all and end marker
    # ========================================================================
    UNKNOWN = auto()                # any other single character
    EOF = auto()                    # end of input (length 0)


class LiteralKind(Enum):
    """Sub-form of a LITERAL token."""
    INT = auto()                    # 42, 0x2A, 1_000u32
    FLOAT = auto()                  # 3.14, 1e10, 2.5f64
    CHAR = auto()                   # 'a', '\n'
    BYTE = auto()                   # b'a'
    STR = auto()                    # "hello"
    BYTE_STR = auto()               # b"hello"
    C_STR = auto()                  # c"hello"
    RAW_STR = auto()                # r"raw", r#"raw"#
    RAW_BYTE_STR = auto()           # br"raw"
    RAW_C_STR = auto()              # cr"raw"


class Base(IntEnum):
    """Base of a numeric literal, selected by its prefix."""
    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16


class DocStyle(Enum):
    """Documentation comment style."""
    OUTER = auto()                  # /// or /** */
    INNER = auto()                  # //! or /*! */


@dataclass(frozen=True)
class LiteralInfo:
    """
    Metadata describing the sub-form of a LITERAL token.

    ``suffix_start`` is the offset inside the literal where a trailing suffix
    (``u8``, ``f32``, ``_km``) begins; it equals the literal length when there
    is no suffix.
    """
    kind: LiteralKind
    suffix_start: int
    terminated: bool = True
    base: Optional[Base] = None
    empty_int: bool = False
    empty_exponent: bool = False
    n_hashes: Optional[int] = None

    def suffix(self, literal: str) -> str:
        """Return the suffix part of ``literal``."""
        return literal[self.suffix_start:]


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and token dumps.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of text

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    ``kind``, ``length`` and ``literal`` define the token; ``info`` and
    ``location`` are extra metadata and are ignored by equality.
    """
    kind: TokenKind
    length: int
    literal: str
    info: Optional[LiteralInfo] = field(default=None, compare=False)
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.kind.name}({self.literal!r})"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.length}, {self.literal!r})"

    @property
    def is_trivia(self) -> bool:
        """Check if this token is whitespace or a comment."""
        return self.kind in TRIVIA_KINDS

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.kind == TokenKind.LITERAL

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.kind == TokenKind.IDENT

    @property
    def doc_style(self) -> Optional[DocStyle]:
        """Documentation style of a comment token, or None."""
        if self.kind == TokenKind.LINE_COMMENT:
            if self.literal.startswith("//!"):
                return DocStyle.INNER
            if self.literal.startswith("///") and not self.literal.startswith("////"):
                return DocStyle.OUTER
        elif self.kind == TokenKind.BLOCK_COMMENT:
            if self.literal.startswith("/*!"):
                return DocStyle.INNER
            if (self.literal.startswith("/**") and not self.literal.startswith("/***")
                    and self.literal != "/**/"):
                return DocStyle.OUTER
        return None


# Lookup tables used by the cursor

SINGLE_CHAR_TOKENS = {
    ";": TokenKind.SEMI,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "{": TokenKind.OPEN_BRACE,
    "}": TokenKind.CLOSE_BRACE,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
    "@": TokenKind.AT,
    "#": TokenKind.POUND,
    "~": TokenKind.TILDE,
    "?": TokenKind.QUESTION,
    ":": TokenKind.COLON,
    "$": TokenKind.DOLLAR,
    "=": TokenKind.EQ,
    "!": TokenKind.BANG,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    "-": TokenKind.MINUS,
    "&": TokenKind.AND,
    "|": TokenKind.OR,
    "+": TokenKind.PLUS,
    "*": TokenKind.STAR,
    "^": TokenKind.CARET,
    "%": TokenKind.PERCENT,
}

TRIVIA_KINDS = frozenset({
    TokenKind.WHITESPACE,
    TokenKind.LINE_COMMENT,
    TokenKind.BLOCK_COMMENT,
})

# Raw string delimiters are capped at 255 hashes
MAX_RAW_STR_HASHES = 255
