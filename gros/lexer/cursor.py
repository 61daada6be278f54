"""
Cursor-driven scanner for GROS source text.

The cursor walks an immutable string one character at a time and classifies
runs of characters into tokens. It never fails: anything it does not
recognize becomes an UNKNOWN token one character long, and malformed
literals are reported through LiteralInfo flags instead of exceptions.
"""

import string
import unicodedata
from typing import Callable, Iterator, Optional, Tuple

from .tokens import (
    Token, TokenKind, LiteralKind, LiteralInfo, Base,
    SINGLE_CHAR_TOKENS, MAX_RAW_STR_HASHES
)


ZERO_WIDTH_JOINER = "\u200d"

# Byte and C string openers: first char -> (quoted kind, raw kind)
PREFIXED_STRING_KINDS = {
    "b": (LiteralKind.BYTE_STR, LiteralKind.RAW_BYTE_STR),
    "c": (LiteralKind.C_STR, LiteralKind.RAW_C_STR),
}

BASE_PREFIXES = {
    "b": Base.BINARY,
    "o": Base.OCTAL,
    "x": Base.HEXADECIMAL,
}


def is_ascii_digit(char: Optional[str]) -> bool:
    return char is not None and "0" <= char <= "9"


def is_id_start(char: Optional[str]) -> bool:
    """Check if character can start an identifier (XID_Start or '_')."""
    return char is not None and (char == "_" or char.isidentifier())


def is_id_continue(char: Optional[str]) -> bool:
    """Check if character can continue an identifier (XID_Continue)."""
    return char is not None and ("a" + char).isidentifier()


def is_emoji_like(char: Optional[str]) -> bool:
    """Non-ASCII pictographic symbols, which never belong in identifiers."""
    return (char is not None and not char.isascii()
            and unicodedata.category(char) == "So")


class Cursor:
    """
    Scanning state over an immutable text buffer.

    ``pos`` only ever moves forward. Each call to ``next_token`` consumes at
    least one character until the end of input, where it returns the EOF
    token forever.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self._token_start = 0
        # Set when the last block comment ran into the end of input
        self.unclosed_comment = False

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.text)

    def _char_at(self, offset: int) -> Optional[str]:
        index = self.pos + offset
        if index < len(self.text):
            return self.text[index]
        return None

    def peek(self) -> Optional[str]:
        """Return the next character without advancing, or None at the end."""
        return self._char_at(0)

    def peek_second(self) -> Optional[str]:
        return self._char_at(1)

    def peek_third(self) -> Optional[str]:
        return self._char_at(2)

    def advance(self) -> Optional[str]:
        """Consume and return the next character, or None at the end."""
        if self.pos >= len(self.text):
            return None
        char = self.text[self.pos]
        self.pos += 1
        return char

    def pos_within_token(self) -> int:
        return self.pos - self._token_start

    def eat_while(self, predicate: Callable[[str], bool]):
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1

    def next_token(self) -> Token:
        """Scan one token starting at the current position."""
        self._token_start = self.pos
        self.unclosed_comment = False

        first = self.advance()
        if first is None:
            return Token(TokenKind.EOF, 0, "")

        kind = TokenKind.LITERAL
        info: Optional[LiteralInfo] = None

        if first == "/":
            kind = self._slash()
        elif first.isspace():
            self.eat_while(str.isspace)
            kind = TokenKind.WHITESPACE
        elif first == "r" and self.peek() == "#" and is_id_start(self.peek_second()):
            kind = self._raw_ident()
        elif first == "r" and self.peek() in ("#", '"'):
            info = self._raw_double_quoted_string(LiteralKind.RAW_STR)
        elif first in PREFIXED_STRING_KINDS and self._starts_prefixed_literal(first):
            info = self._prefixed_literal(first)
        elif is_ascii_digit(first):
            info = self._number(first)
        elif first == "'":
            kind, info = self._lifetime_or_char()
        elif first == '"':
            info = self._double_quoted_string(LiteralKind.STR)
        elif first in SINGLE_CHAR_TOKENS:
            kind = SINGLE_CHAR_TOKENS[first]
        elif is_id_start(first):
            kind = self._ident_or_unknown_prefix()
        elif is_emoji_like(first):
            kind = self._invalid_ident()
        else:
            kind = TokenKind.UNKNOWN

        literal = self.text[self._token_start:self.pos]
        return Token(kind, len(literal), literal, info)

    # Comments and identifiers

    def _slash(self) -> TokenKind:
        following = self.peek()
        if following == "/":
            return self._line_comment()
        if following == "*":
            return self._block_comment()
        return TokenKind.SLASH

    def _line_comment(self) -> TokenKind:
        # The terminating newline belongs to the comment
        while True:
            char = self.advance()
            if char is None or char == "\n":
                break
        return TokenKind.LINE_COMMENT

    def _block_comment(self) -> TokenKind:
        self.advance()  # Skip '*' of the opener
        depth = 1
        while depth > 0:
            char = self.advance()
            if char is None:
                break
            if char == "*" and self.peek() == "/":
                self.advance()
                depth -= 1
            elif char == "/" and self.peek() == "*":
                self.advance()
                depth += 1
        self.unclosed_comment = depth > 0
        return TokenKind.BLOCK_COMMENT

    def _raw_ident(self) -> TokenKind:
        self.advance()  # Skip '#'
        self.advance()  # Identifier start, checked by the caller
        self.eat_while(is_id_continue)
        return TokenKind.RAW_IDENT

    def _ident_or_unknown_prefix(self) -> TokenKind:
        self.eat_while(is_id_continue)
        following = self.peek()
        if following in ("#", '"', "'"):
            return TokenKind.UNKNOWN_PREFIX
        if following == ZERO_WIDTH_JOINER or is_emoji_like(following):
            return self._invalid_ident()
        return TokenKind.IDENT

    def _invalid_ident(self) -> TokenKind:
        self.eat_while(lambda c: is_id_continue(c) or is_emoji_like(c) or c == ZERO_WIDTH_JOINER)
        if self.peek() in ("#", '"', "'"):
            return TokenKind.UNKNOWN_PREFIX
        return TokenKind.INVALID_IDENT

    def _lifetime_or_char(self) -> Tuple[TokenKind, Optional[LiteralInfo]]:
        """Disambiguate 'a (lifetime) from 'a' (char literal)."""
        if self.peek_second() == "'":
            can_be_lifetime = False
        else:
            # Digits are accepted so '1 reads as a bad lifetime, not an open char
            can_be_lifetime = is_id_start(self.peek()) or is_ascii_digit(self.peek())

        if not can_be_lifetime:
            return TokenKind.LITERAL, self._single_quoted_literal(LiteralKind.CHAR)

        if self.peek() == "r" and self.peek_second() == "#" and is_id_start(self.peek_third()):
            self.advance()
            self.advance()
            self.advance()
            self.eat_while(is_id_continue)
            return TokenKind.RAW_LIFETIME, None

        starts_with_number = is_ascii_digit(self.peek())
        self.advance()
        self.eat_while(is_id_continue)

        following = self.peek()
        if following == "'":
            # Multi-character char literal such as 'ab'
            self.advance()
            return TokenKind.LITERAL, LiteralInfo(LiteralKind.CHAR, self.pos_within_token())
        if following == "#" and not starts_with_number:
            return TokenKind.UNKNOWN_PREFIX_LIFETIME, None
        return TokenKind.LIFETIME, None

    # Quoted literals

    def _starts_prefixed_literal(self, first: str) -> bool:
        following = self.peek()
        if following == '"' or (first == "b" and following == "'"):
            return True
        return following == "r" and self.peek_second() in ('"', "#")

    def _prefixed_literal(self, first: str) -> LiteralInfo:
        quoted_kind, raw_kind = PREFIXED_STRING_KINDS[first]
        opener = self.advance()
        if opener == "'":
            return self._single_quoted_literal(LiteralKind.BYTE)
        if opener == '"':
            return self._double_quoted_string(quoted_kind)
        return self._raw_double_quoted_string(raw_kind)

    def _single_quoted_literal(self, kind: LiteralKind) -> LiteralInfo:
        terminated = self._single_quoted_string()
        suffix_start = self.pos_within_token()
        if terminated:
            self._eat_literal_suffix()
        return LiteralInfo(kind, suffix_start, terminated=terminated)

    def _single_quoted_string(self) -> bool:
        """Scan a char body after the opening quote; True if closed."""
        if self.peek_second() == "'" and self.peek() != "\\":
            self.advance()
            self.advance()
            return True

        while True:
            char = self.peek()
            if char is None:
                return False
            if char == "'":
                self.advance()
                return True
            # Likely the start of a comment, keep it out of the literal
            if char == "/":
                return False
            if char == "\n" and self.peek_second() != "'":
                return False
            if char == "\\":
                self.advance()
            self.advance()

    def _double_quoted_string(self, kind: LiteralKind) -> LiteralInfo:
        terminated = False
        while True:
            char = self.advance()
            if char is None:
                break
            if char == '"':
                terminated = True
                break
            if char == "\\":
                self.advance()  # Escaped character, whatever it is

        suffix_start = self.pos_within_token()
        if terminated:
            self._eat_literal_suffix()
        return LiteralInfo(kind, suffix_start, terminated=terminated)

    def _raw_double_quoted_string(self, kind: LiteralKind) -> LiteralInfo:
        n_hashes = self._raw_string_hashes()
        terminated = n_hashes is not None
        if n_hashes is not None and n_hashes > MAX_RAW_STR_HASHES:
            n_hashes = None

        suffix_start = self.pos_within_token()
        if terminated:
            self._eat_literal_suffix()
        return LiteralInfo(kind, suffix_start, terminated=terminated, n_hashes=n_hashes)

    def _raw_string_hashes(self) -> Optional[int]:
        """Scan r#"..."# after the prefix letters; None if malformed."""
        n_start_hashes = 0
        while self.peek() == "#":
            n_start_hashes += 1
            self.advance()

        if self.advance() != '"':
            return None

        while True:
            quote = self.text.find('"', self.pos)
            if quote < 0:
                self.pos = len(self.text)
                return None
            self.pos = quote + 1

            n_end_hashes = 0
            while self.peek() == "#" and n_end_hashes < n_start_hashes:
                n_end_hashes += 1
                self.advance()
            if n_end_hashes == n_start_hashes:
                return n_start_hashes

    # Numbers

    def _number(self, first_digit: str) -> LiteralInfo:
        base = Base.DECIMAL
        if first_digit == "0":
            following = self.peek()
            if following in BASE_PREFIXES:
                base = BASE_PREFIXES[following]
                self.advance()
                if base == Base.HEXADECIMAL:
                    has_digits = self._eat_hexadecimal_digits()
                else:
                    has_digits = self._eat_decimal_digits()
                if not has_digits:
                    return self._number_info(LiteralKind.INT, base, empty_int=True)
            elif is_ascii_digit(following) or following == "_":
                self._eat_decimal_digits()
        else:
            self._eat_decimal_digits()

        following = self.peek()
        if following == "." and is_ascii_digit(self.peek_second()):
            self.advance()
            self._eat_decimal_digits()
            empty_exponent = False
            if self.peek() in ("e", "E"):
                self.advance()
                empty_exponent = not self._eat_float_exponent()
            return self._number_info(LiteralKind.FLOAT, base, empty_exponent=empty_exponent)

        if following in ("e", "E"):
            self.advance()
            empty_exponent = not self._eat_float_exponent()
            return self._number_info(LiteralKind.FLOAT, base, empty_exponent=empty_exponent)

        return self._number_info(LiteralKind.INT, base)

    def _number_info(self, kind: LiteralKind, base: Base, **flags) -> LiteralInfo:
        suffix_start = self.pos_within_token()
        self._eat_literal_suffix()
        return LiteralInfo(kind, suffix_start, base=base, **flags)

    def _eat_decimal_digits(self) -> bool:
        has_digits = False
        while True:
            char = self.peek()
            if char == "_":
                self.advance()
            elif is_ascii_digit(char):
                has_digits = True
                self.advance()
            else:
                return has_digits

    def _eat_hexadecimal_digits(self) -> bool:
        has_digits = False
        while True:
            char = self.peek()
            if char == "_":
                self.advance()
            elif char is not None and char in string.hexdigits:
                has_digits = True
                self.advance()
            else:
                return has_digits

    def _eat_float_exponent(self) -> bool:
        if self.peek() in ("-", "+"):
            self.advance()
        return self._eat_decimal_digits()

    def _eat_literal_suffix(self):
        if not is_id_start(self.peek()):
            return
        self.advance()
        self.eat_while(is_id_continue)


def tokenize(text: str) -> Iterator[Token]:
    """
    Lazily tokenize ``text``.

    Yields every token up to, but not including, the EOF marker. The
    literals of the yielded tokens concatenate back to ``text``.
    """
    cursor = Cursor(text)
    while True:
        token = cursor.next_token()
        if token.kind == TokenKind.EOF:
            return
        yield token
