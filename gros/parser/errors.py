"""
Error handling for the GROS parser.

The parser stops at the first grammar violation. The raised ParseError
carries the offending token, what the grammar expected at that point and a
diagnostic ready for reporting.
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenKind, SourceLocation
from ..lexer.errors import Diagnostic


# Used when a token carries no location (e.g. tokens straight from a Cursor)
UNKNOWN_LOCATION = SourceLocation("<tokens>", 0, 0, 0)


class ParseError(Exception):
    """
    Exception raised when the parser meets a token the grammar does not allow.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        expected: Optional[str] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token
        self.expected = expected

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P010": "Unexpected end of input",
    "P020": "Nesting too deep",
}

MISSING_TOKEN_SUGGESTIONS = {
    TokenKind.OPEN_PAREN: ["Add '(' after the function name"],
    TokenKind.CLOSE_PAREN: ["Add a closing parenthesis ')'"],
    TokenKind.OPEN_BRACE: ["Add an opening brace '{' to start the function body"],
    TokenKind.CLOSE_BRACE: ["Add a closing brace '}'"],
    TokenKind.IDENT: ["Use a plain identifier here"],
}


def _describe(expected) -> str:
    return expected.name if isinstance(expected, TokenKind) else expected


def create_unexpected_token_error(expected, found: Token) -> ParseError:
    """Create an error for an unexpected token."""
    expected_str = _describe(expected)
    found_str = f"{found.kind.name} {found.literal!r}"
    suggestions = MISSING_TOKEN_SUGGESTIONS.get(expected, []) if isinstance(expected, TokenKind) else []

    return ParseError(
        message=f"Unexpected token: expected {expected_str}, found {found_str}",
        location=found.location or UNKNOWN_LOCATION,
        token=found,
        expected=expected_str,
        code="P001",
        help_text=f"The parser expected to see {expected_str} at this position, but found {found_str} instead.",
        suggestions=suggestions
    )


def create_unexpected_eof_error(expected, found: Token) -> ParseError:
    """Create an error for running out of tokens mid-construct."""
    expected_str = _describe(expected)

    return ParseError(
        message=f"Unexpected end of input, expected {expected_str}",
        location=found.location or UNKNOWN_LOCATION,
        token=found,
        expected=expected_str,
        code="P010",
        help_text=f"The parser reached the end of the input while expecting {expected_str}.",
        suggestions=[f"Add the missing {expected_str}", "Check for an unclosed '(' or '{'"]
    )


def create_nesting_too_deep_error(max_depth: int, found: Token) -> ParseError:
    """Create an error for function declarations nested past the parser's limit."""
    return ParseError(
        message=f"Function declarations nested more than {max_depth} levels deep",
        location=found.location or UNKNOWN_LOCATION,
        token=found,
        expected=None,
        code="P020",
        help_text=f"The parser accepts at most {max_depth} levels of nested functions.",
        suggestions=["Move inner functions to an outer level"]
    )
