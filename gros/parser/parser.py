"""
GROS Recursive Descent Parser

Walks the token list by index and builds a Program of function declarations:

    program   := statement*
    statement := function
    function  := IDENT '(' (IDENT (',' IDENT)*)? ')' '{' statement* '}'

The first grammar violation aborts the parse; there is no recovery and no
partial tree.
"""

import logging
from typing import Iterable, List

from ..lexer.tokens import Token, TokenKind
from .ast_nodes import Program, Function, Node
from .errors import (
    create_unexpected_token_error, create_unexpected_eof_error, create_nesting_too_deep_error
)


logger = logging.getLogger(__name__)

# Each nesting level costs three interpreter frames (parse_statement and
# the two parse_function methods), so this stays below the default
# recursion limit.
MAX_NESTING_DEPTH = 200


class Parser:
    """
    GROS recursive descent parser.

    Each grammar rule is one method; nested functions recurse through
    ``parse_statement``.
    """

    def __init__(self, tokens: Iterable[Token], skip_trivia: bool = True,
                 max_depth: int = MAX_NESTING_DEPTH):
        """
        Initialize parser with a sequence of tokens.

        Args:
            tokens: Tokens from the lexer. A trailing EOF token is optional.
            skip_trivia: Drop whitespace and comment tokens before parsing.
                With False they reach the grammar and are rejected as
                unexpected tokens.
            max_depth: Deepest function nesting accepted before the parse
                is aborted with a ParseError.
        """
        self.tokens: List[Token] = [
            token for token in tokens
            if token.kind != TokenKind.EOF and not (skip_trivia and token.is_trivia)
        ]
        self.current = 0
        self.depth = 0
        self.max_depth = max_depth

    def parse(self) -> Program:
        """
        Parse the token stream into an AST.

        Returns:
            Program AST node holding every top-level statement

        Raises:
            ParseError: On the first grammar violation
        """
        statements = []
        while not self._is_at_end():
            statements.append(self.parse_statement())

        logger.debug("Parsed program with %d top-level statements", len(statements))
        return Program(statements)

    def parse_statement(self) -> Node:
        """Parse one statement; only function declarations exist so far."""
        token = self._peek()
        if token.kind == TokenKind.IDENT:
            return self.parse_function()
        if self._is_at_end():
            raise create_unexpected_eof_error("a statement", token)
        raise create_unexpected_token_error("a statement (function declaration)", token)

    def parse_function(self) -> Function:
        """Parse a function declaration with its parameters and body."""
        if self.depth >= self.max_depth:
            raise create_nesting_too_deep_error(self.max_depth, self._peek())
        self.depth += 1
        try:
            return self._parse_function_declaration()
        finally:
            self.depth -= 1

    def _parse_function_declaration(self) -> Function:
        name = self._consume(TokenKind.IDENT, "function name").literal

        self._consume(TokenKind.OPEN_PAREN, "'(' after function name")

        parameters = []
        while not self._check(TokenKind.CLOSE_PAREN):
            parameters.append(self._consume(TokenKind.IDENT, "parameter name").literal)
            self._match(TokenKind.COMMA)
        self._advance()  # ')'

        self._consume(TokenKind.OPEN_BRACE, "'{' before function body")

        body = []
        while not self._check(TokenKind.CLOSE_BRACE):
            if self._is_at_end():
                raise create_unexpected_eof_error("'}' after function body", self._peek())
            body.append(self.parse_statement())
        self._advance()  # '}'

        logger.debug("Parsed function %s(%s) with %d body statements",
                     name, ", ".join(parameters), len(body))
        return Function(name, parameters, body)

    # Utility methods

    def _match(self, kind: TokenKind) -> bool:
        """Check if current token matches kind and consume if so."""
        if self._check(kind):
            self._advance()
            return True
        return False

    def _check(self, kind: TokenKind) -> bool:
        """Check if current token matches kind without consuming."""
        if self._is_at_end():
            return False
        return self._peek().kind == kind

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._peek()
        if not self._is_at_end():
            self.current += 1
        return token

    def _is_at_end(self) -> bool:
        """Check if we've run out of tokens."""
        return self.current >= len(self.tokens)

    def _peek(self) -> Token:
        """Return current token, or a synthetic EOF token past the end."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        location = self.tokens[-1].location if self.tokens else None
        return Token(TokenKind.EOF, 0, "", location=location)

    def _consume(self, kind: TokenKind, expected: str) -> Token:
        """Consume token of expected kind or raise error."""
        if self._check(kind):
            return self._advance()
        if self._is_at_end():
            raise create_unexpected_eof_error(expected, self._peek())
        raise create_unexpected_token_error(expected, self._peek())


def parse(tokens: Iterable[Token], skip_trivia: bool = True) -> Program:
    """
    Parse a token sequence into a Program.

    Raises:
        ParseError: If parsing fails
    """
    return Parser(tokens, skip_trivia=skip_trivia).parse()


def parse_string(source: str, filename: str = "<string>") -> Program:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        Program AST

    Raises:
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename)
    return Parser(tokens).parse()


def parse_file(filepath: str) -> Program:
    """
    Convenience function to parse a source file.

    Args:
        filepath: Path to source file

    Returns:
        Program AST

    Raises:
        ParseError: If parsing fails
        OSError: If file cannot be read
        UnicodeDecodeError: If file is not valid UTF-8
    """
    from ..lexer import tokenize_file

    tokens = tokenize_file(filepath)
    return Parser(tokens).parse()
