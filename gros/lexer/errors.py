"""
Diagnostics for the GROS lexer.

Tokenization never fails, so the lexer has no exception type. Suspicious
input (unterminated literals, stray characters) is recorded as warnings with
source location information while the token stream stays complete.
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerWarning:
    """
    Represents a lexer warning. The offending text is still tokenized.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"LexerWarning({self.diagnostic.code}, {self.diagnostic.message!r})"


# Warning codes for categorization
WARNING_CODES = {
    "L001": "Unknown character",
    "L002": "Unterminated quoted literal",
    "L003": "Unterminated block comment",
    "L004": "Malformed raw string",
    "L005": "Invalid character in identifier",
    "L006": "Missing digits in numeric literal",
}


# Helper functions for creating common warnings

def create_unknown_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a character no rule recognizes."""
    if char.isprintable():
        help_text = f"The character '{char}' does not start any token."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) does not start any token."

    return LexerWarning(
        message=f"Unknown character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text
    )


def create_unterminated_literal_warning(literal: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a quoted literal missing its closing quote."""
    quote = "'" if "'" in literal[:2] else '"'
    return LexerWarning(
        message="Unterminated literal",
        location=location,
        code="L002",
        help_text=f"Quoted literals must be closed with a matching {quote} quote.",
        suggestions=[f"Add a closing {quote} quote", "Check for a stray backslash before the quote"]
    )


def create_unterminated_comment_warning(location: SourceLocation) -> LexerWarning:
    """Create a warning for a block comment that runs to the end of input."""
    return LexerWarning(
        message="Unterminated block comment",
        location=location,
        code="L003",
        help_text="Block comments nest; every '/*' needs its own '*/'.",
        suggestions=["Add the missing '*/'"]
    )


def create_malformed_raw_string_warning(location: SourceLocation, reason: str) -> LexerWarning:
    """Create a warning for a raw string with bad delimiters."""
    return LexerWarning(
        message="Malformed raw string",
        location=location,
        code="L004",
        help_text=reason,
        suggestions=["Use the same number of '#' on both sides of the quotes"]
    )


def create_invalid_identifier_warning(lexeme: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for an identifier containing symbols."""
    return LexerWarning(
        message=f"Invalid identifier: {lexeme!r}",
        location=location,
        code="L005",
        help_text="Identifiers may only contain letters, digits and underscores."
    )


def create_empty_number_warning(lexeme: str, location: SourceLocation, reason: str) -> LexerWarning:
    """Create a warning for a numeric literal missing its digits."""
    return LexerWarning(
        message=f"Invalid numeric literal: {lexeme!r}",
        location=location,
        code="L006",
        help_text=reason
    )
