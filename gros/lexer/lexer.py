"""
GROS Lexer - drives the cursor over a whole source text

The cursor does the character-level work; this module adds what a driver
needs on top: line/column locations, warnings for suspicious input and a
few convenience entry points.
"""

import logging
from dataclasses import replace
from typing import Iterable, List

from .cursor import Cursor
from .tokens import Token, TokenKind, LiteralKind, SourceLocation
from .errors import (
    LexerWarning, create_unknown_character_warning,
    create_unterminated_literal_warning, create_unterminated_comment_warning,
    create_malformed_raw_string_warning, create_invalid_identifier_warning,
    create_empty_number_warning
)


logger = logging.getLogger(__name__)

RAW_STRING_KINDS = {LiteralKind.RAW_STR, LiteralKind.RAW_BYTE_STR, LiteralKind.RAW_C_STR}


class Lexer:
    """
    GROS lexical analyzer.

    Converts source text into a list of located tokens. Whitespace and
    comments are kept; use ``strip_trivia`` before handing the tokens to a
    grammar that does not expect them.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for diagnostics
        """
        self.source = source
        self.filename = filename
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.warnings: List[LexerWarning] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens, without the EOF marker
        """
        self.line = 1
        self.column = 1
        self.tokens = []
        self.warnings = []

        cursor = Cursor(self.source)
        while True:
            offset = cursor.pos
            token = cursor.next_token()
            if token.kind == TokenKind.EOF:
                break

            location = SourceLocation(self.filename, self.line, self.column, offset)
            token = replace(token, location=location)
            self._check_token(token, cursor.unclosed_comment)
            self.tokens.append(token)
            self._advance_location(token.literal)

        logger.debug("Tokenized %s: %d tokens, %d warnings",
                     self.filename, len(self.tokens), len(self.warnings))
        return self.tokens

    def _check_token(self, token: Token, unclosed_comment: bool):
        """Record warnings for tokens the cursor accepted but flagged."""
        location = token.location
        warning = None

        if token.kind == TokenKind.UNKNOWN:
            warning = create_unknown_character_warning(token.literal, location)
        elif token.kind == TokenKind.INVALID_IDENT:
            warning = create_invalid_identifier_warning(token.literal, location)
        elif token.kind == TokenKind.BLOCK_COMMENT and unclosed_comment:
            warning = create_unterminated_comment_warning(location)
        elif token.kind == TokenKind.LITERAL and token.info is not None:
            info = token.info
            if info.kind in RAW_STRING_KINDS and info.n_hashes is None:
                if info.terminated:
                    reason = "Raw strings support at most 255 '#' delimiters."
                else:
                    reason = "The opening quote or the closing delimiter is missing."
                warning = create_malformed_raw_string_warning(location, reason)
            elif not info.terminated:
                warning = create_unterminated_literal_warning(token.literal, location)
            elif info.empty_int:
                warning = create_empty_number_warning(
                    token.literal, location, "A base prefix must be followed by digits."
                )
            elif info.empty_exponent:
                warning = create_empty_number_warning(
                    token.literal, location, "An exponent must contain digits."
                )

        if warning is not None:
            logger.debug("Lexer warning at %s: %s", location, warning.diagnostic.message)
            self.warnings.append(warning)

    def _advance_location(self, literal: str):
        """Move line/column past ``literal``."""
        newlines = literal.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(literal) - literal.rfind("\n")
        else:
            self.column += len(literal)

    def has_warnings(self) -> bool:
        """Check if lexer recorded any warnings."""
        return len(self.warnings) > 0


def strip_trivia(tokens: Iterable[Token]) -> List[Token]:
    """Drop whitespace and comment tokens."""
    return [token for token in tokens if not token.is_trivia]


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for locations

    Returns:
        List of located tokens
    """
    lexer = Lexer(source, filename)
    return lexer.tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of located tokens

    Raises:
        OSError: If file cannot be read
        UnicodeDecodeError: If file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
