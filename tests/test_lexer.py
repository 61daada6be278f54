"""
Test suite for the GROS lexer.

Tests cover:
- Totality and exact source coverage
- Comments (line, nested block, unterminated, doc styles)
- Identifiers, raw identifiers, lifetimes and prefixes
- Literal sub-forms and their metadata
- Source locations and warnings
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from gros.lexer import (
    Lexer, Token, TokenKind, LiteralKind, Base, DocStyle, tokenize, strip_trivia
)
from gros.lexer.tokens import SINGLE_CHAR_TOKENS


def kinds(source):
    return [token.kind for token in tokenize(source)]


def single(test, source):
    """Tokenize ``source`` and assert it yields exactly one token."""
    tokens = list(tokenize(source))
    test.assertEqual(len(tokens), 1, tokens)
    return tokens[0]


class TestTotality(unittest.TestCase):
    """Every input tokenizes and is covered exactly."""

    SAMPLES = [
        "",
        "   \n\t ",
        "/* never closed",
        "/* a /* b */",
        "// only a comment",
        "foo(a, b) { bar() {} }",
        "'a 'b' \"unterminated",
        "r#\"raw\"# br##\"x\"## c\"c\" cr\"y\"",
        "😀abc €€ \x00\x01\x7f",
        "0x 0b 1e 1.5e+3f32 1..2 7.foo",
        "a\u0301b",
        "'\\",
        "\\",
        "r#",
        "b'",
        "cr#\"",
        "\"\\",
        "'",
        "\ufeffx",
        "/*/",
    ]

    def test_literals_concatenate_to_source(self):
        for source in self.SAMPLES:
            with self.subTest(source=source):
                tokens = list(tokenize(source))
                self.assertEqual("".join(token.literal for token in tokens), source)

    def test_every_token_is_nonempty_and_sized(self):
        for source in self.SAMPLES:
            with self.subTest(source=source):
                for token in tokenize(source):
                    self.assertGreater(token.length, 0)
                    self.assertEqual(token.length, len(token.literal))
                    self.assertNotEqual(token.kind, TokenKind.EOF)

    def test_empty_input_yields_nothing(self):
        self.assertEqual(list(tokenize("")), [])

    def test_tokenize_is_lazy_and_single_use(self):
        stream = tokenize("a b")
        self.assertEqual(next(stream), Token(TokenKind.IDENT, 1, "a"))
        self.assertEqual(len(list(stream)), 2)
        self.assertEqual(list(stream), [])

    def test_fragment_concatenation_keeps_kinds(self):
        left, right = "foo(", "bar)"
        self.assertEqual(kinds(left + right), kinds(left) + kinds(right))

    def test_fragment_boundary_may_merge(self):
        # Identifiers on both sides of the seam fuse into one token
        self.assertEqual(kinds("fo") + kinds("o"), [TokenKind.IDENT, TokenKind.IDENT])
        self.assertEqual(kinds("fo" + "o"), [TokenKind.IDENT])


class TestComments(unittest.TestCase):
    """Line and block comments."""

    def test_line_comment_includes_newline(self):
        tokens = list(tokenize("// hi\nx"))
        self.assertEqual(tokens[0], Token(TokenKind.LINE_COMMENT, 6, "// hi\n"))
        self.assertEqual(tokens[1], Token(TokenKind.IDENT, 1, "x"))

    def test_line_comment_at_end_of_input(self):
        token = single(self, "// trailing")
        self.assertEqual(token.kind, TokenKind.LINE_COMMENT)

    def test_nested_block_comment(self):
        source = "/* a /* b */ c */"
        token = single(self, source)
        self.assertEqual(token.kind, TokenKind.BLOCK_COMMENT)
        self.assertEqual(token.literal, source)

    def test_nested_block_comment_followed_by_code(self):
        tokens = list(tokenize("/* /* */ */x"))
        self.assertEqual(tokens[0].literal, "/* /* */ */")
        self.assertEqual(tokens[1], Token(TokenKind.IDENT, 1, "x"))

    def test_unterminated_block_comment(self):
        source = "/* never closed"
        token = single(self, source)
        self.assertEqual(token.kind, TokenKind.BLOCK_COMMENT)
        self.assertEqual(token.literal, source)

    def test_unbalanced_nesting_runs_to_end(self):
        token = single(self, "/* a /* b */")
        self.assertEqual(token.kind, TokenKind.BLOCK_COMMENT)

    def test_opener_star_does_not_close(self):
        token = single(self, "/*/")
        self.assertEqual(token.kind, TokenKind.BLOCK_COMMENT)

    def test_lone_slash(self):
        self.assertEqual(kinds("a/b"), [TokenKind.IDENT, TokenKind.SLASH, TokenKind.IDENT])

    def test_doc_styles(self):
        cases = {
            "/// outer\n": DocStyle.OUTER,
            "//! inner\n": DocStyle.INNER,
            "//// plain\n": None,
            "// plain\n": None,
            "/** outer */": DocStyle.OUTER,
            "/*! inner */": DocStyle.INNER,
            "/**/": None,
            "/*** plain */": None,
            "/* plain */": None,
        }
        for source, style in cases.items():
            with self.subTest(source=source):
                self.assertEqual(single(self, source).doc_style, style)

    def test_doc_style_of_non_comment(self):
        self.assertIsNone(single(self, "x").doc_style)


class TestSymbolsAndWhitespace(unittest.TestCase):
    """Single-character tokens, whitespace and the catch-all."""

    def test_each_symbol_in_isolation(self):
        symbols = dict(SINGLE_CHAR_TOKENS)
        symbols["/"] = TokenKind.SLASH
        for char, kind in symbols.items():
            with self.subTest(char=char):
                self.assertEqual(single(self, char), Token(kind, 1, char))

    def test_operators_are_not_glued(self):
        self.assertEqual(kinds("=="), [TokenKind.EQ, TokenKind.EQ])
        self.assertEqual(kinds("->"), [TokenKind.MINUS, TokenKind.GT])

    def test_whitespace_run(self):
        tokens = list(tokenize(" \t\n\r\u00a0x"))
        self.assertEqual(tokens[0], Token(TokenKind.WHITESPACE, 5, " \t\n\r\u00a0"))
        self.assertEqual(tokens[1].kind, TokenKind.IDENT)

    def test_unknown_characters(self):
        for char in ("€", "\\", "`", "\x00"):
            with self.subTest(char=char):
                self.assertEqual(single(self, char), Token(TokenKind.UNKNOWN, 1, char))

    def test_unknown_is_one_character_each(self):
        self.assertEqual(kinds("€€"), [TokenKind.UNKNOWN, TokenKind.UNKNOWN])


class TestIdentifiers(unittest.TestCase):
    """Identifier forms."""

    def test_plain_identifiers(self):
        tokens = strip_trivia(tokenize("foo_bar1 _x café rust raw b c"))
        self.assertEqual([t.literal for t in tokens], ["foo_bar1", "_x", "café", "rust", "raw", "b", "c"])
        self.assertTrue(all(t.kind == TokenKind.IDENT for t in tokens))

    def test_digits_continue_identifiers(self):
        self.assertEqual(single(self, "x2y3").kind, TokenKind.IDENT)

    def test_raw_identifier(self):
        self.assertEqual(single(self, "r#match"), Token(TokenKind.RAW_IDENT, 7, "r#match"))

    def test_unknown_prefix(self):
        tokens = list(tokenize('foo"bar"'))
        self.assertEqual(tokens[0], Token(TokenKind.UNKNOWN_PREFIX, 3, "foo"))
        self.assertEqual(tokens[1].kind, TokenKind.LITERAL)
        self.assertEqual(kinds("foo#"), [TokenKind.UNKNOWN_PREFIX, TokenKind.POUND])

    def test_invalid_identifier(self):
        self.assertEqual(single(self, "ab😀c"), Token(TokenKind.INVALID_IDENT, 4, "ab😀c"))
        self.assertEqual(single(self, "😀").kind, TokenKind.INVALID_IDENT)


class TestLifetimesAndChars(unittest.TestCase):
    """Apostrophe disambiguation."""

    def assertChar(self, source, terminated=True):
        token = single(self, source)
        self.assertEqual(token.kind, TokenKind.LITERAL)
        self.assertEqual(token.info.kind, LiteralKind.CHAR)
        self.assertEqual(token.info.terminated, terminated)

    def test_char_literals(self):
        for source in ("'a'", "' '", "'\\n'", "'\\''", "'\\\\'", "'é'"):
            with self.subTest(source=source):
                self.assertChar(source)

    def test_multi_character_char_literal(self):
        self.assertChar("'ab'")

    def test_unterminated_char(self):
        self.assertChar("'", terminated=False)
        self.assertChar("'\\", terminated=False)

    def test_unterminated_char_stops_at_comment(self):
        tokens = list(tokenize("'\\n// c"))
        self.assertEqual(tokens[0].literal, "'\\n")
        self.assertFalse(tokens[0].info.terminated)
        self.assertEqual(tokens[1].kind, TokenKind.LINE_COMMENT)

    def test_lifetimes(self):
        self.assertEqual(single(self, "'a"), Token(TokenKind.LIFETIME, 2, "'a"))
        self.assertEqual(single(self, "'static").kind, TokenKind.LIFETIME)
        self.assertEqual(single(self, "'1").kind, TokenKind.LIFETIME)

    def test_lifetime_in_context(self):
        self.assertEqual(
            kinds("<'a>"),
            [TokenKind.LT, TokenKind.LIFETIME, TokenKind.GT]
        )

    def test_raw_lifetime(self):
        self.assertEqual(single(self, "'r#a"), Token(TokenKind.RAW_LIFETIME, 4, "'r#a"))

    def test_unknown_prefix_lifetime(self):
        tokens = list(tokenize("'foo#"))
        self.assertEqual(tokens[0], Token(TokenKind.UNKNOWN_PREFIX_LIFETIME, 4, "'foo"))
        self.assertEqual(tokens[1].kind, TokenKind.POUND)


class TestNumbers(unittest.TestCase):
    """Numeric literals, bases and suffixes."""

    def number(self, source):
        token = single(self, source)
        self.assertEqual(token.kind, TokenKind.LITERAL)
        return token.info

    def test_decimal_integer(self):
        info = self.number("42")
        self.assertEqual(info.kind, LiteralKind.INT)
        self.assertEqual(info.base, Base.DECIMAL)
        self.assertEqual(info.suffix("42"), "")

    def test_base_prefixes(self):
        cases = {"0x2A": Base.HEXADECIMAL, "0b1010": Base.BINARY, "0o17": Base.OCTAL, "007": Base.DECIMAL}
        for source, base in cases.items():
            with self.subTest(source=source):
                info = self.number(source)
                self.assertEqual(info.kind, LiteralKind.INT)
                self.assertEqual(info.base, base)
                self.assertEqual(int(info.base), {"x": 16, "b": 2, "o": 8}.get(source[1], 10))

    def test_empty_int(self):
        info = self.number("0x")
        self.assertTrue(info.empty_int)
        self.assertEqual(info.base, Base.HEXADECIMAL)

    def test_integer_suffix(self):
        info = self.number("1_000u32")
        self.assertEqual(info.suffix_start, 5)
        self.assertEqual(info.suffix("1_000u32"), "u32")

    def test_floats(self):
        for source in ("3.14", "1e10", "1E+5", "0.5e-3"):
            with self.subTest(source=source):
                info = self.number(source)
                self.assertEqual(info.kind, LiteralKind.FLOAT)
                self.assertFalse(info.empty_exponent)

    def test_float_suffix(self):
        info = self.number("2.5e-3f64")
        self.assertEqual(info.kind, LiteralKind.FLOAT)
        self.assertEqual(info.suffix("2.5e-3f64"), "f64")

    def test_empty_exponent(self):
        info = self.number("1e")
        self.assertEqual(info.kind, LiteralKind.FLOAT)
        self.assertTrue(info.empty_exponent)

    def test_dot_without_digit_is_not_a_float(self):
        self.assertEqual(kinds("1.foo"), [TokenKind.LITERAL, TokenKind.DOT, TokenKind.IDENT])
        self.assertEqual(
            kinds("1..2"),
            [TokenKind.LITERAL, TokenKind.DOT, TokenKind.DOT, TokenKind.LITERAL]
        )
        tokens = list(tokenize("1."))
        self.assertEqual(tokens[0].info.kind, LiteralKind.INT)
        self.assertEqual(tokens[1].kind, TokenKind.DOT)


class TestStrings(unittest.TestCase):
    """Quoted and raw string literals."""

    def literal(self, source):
        token = single(self, source)
        self.assertEqual(token.kind, TokenKind.LITERAL)
        return token.info

    def test_plain_string(self):
        info = self.literal('"hello"')
        self.assertEqual(info.kind, LiteralKind.STR)
        self.assertTrue(info.terminated)

    def test_escaped_quote_is_skipped(self):
        info = self.literal('"a\\"b"')
        self.assertTrue(info.terminated)

    def test_escaped_backslash_before_quote(self):
        tokens = list(tokenize('"a\\\\"b'))
        self.assertEqual(tokens[0].literal, '"a\\\\"b')
        self.assertEqual(tokens[0].info.suffix(tokens[0].literal), "b")

    def test_multiline_string(self):
        self.assertTrue(self.literal('"line\nline"').terminated)

    def test_unterminated_string(self):
        info = self.literal('"never closed')
        self.assertFalse(info.terminated)

    def test_byte_and_c_forms(self):
        cases = {
            "b'a'": LiteralKind.BYTE,
            'b"ab"': LiteralKind.BYTE_STR,
            'c"ab"': LiteralKind.C_STR,
            'br"x"': LiteralKind.RAW_BYTE_STR,
            'cr#"x"#': LiteralKind.RAW_C_STR,
            'r"x"': LiteralKind.RAW_STR,
        }
        for source, kind in cases.items():
            with self.subTest(source=source):
                self.assertEqual(self.literal(source).kind, kind)

    def test_raw_string_hashes(self):
        info = self.literal('r#"a"b"#')
        self.assertEqual(info.kind, LiteralKind.RAW_STR)
        self.assertEqual(info.n_hashes, 1)
        self.assertEqual(self.literal('r"a\\b"').n_hashes, 0)

    def test_raw_string_needs_matching_hashes(self):
        tokens = list(tokenize('r##"a"#"## x'))
        self.assertEqual(tokens[0].literal, 'r##"a"#"##')
        self.assertEqual(tokens[0].info.n_hashes, 2)

    def test_unterminated_raw_string(self):
        info = self.literal('r#"never')
        self.assertIsNone(info.n_hashes)
        self.assertFalse(info.terminated)

    def test_raw_string_bad_starter(self):
        token = single(self, "r#1")
        self.assertEqual(token.info.kind, LiteralKind.RAW_STR)
        self.assertIsNone(token.info.n_hashes)

    def test_string_suffix(self):
        token = single(self, '"x"suf')
        self.assertEqual(token.info.suffix(token.literal), "suf")


class TestLexerDriver(unittest.TestCase):
    """Locations, warnings and helpers of the Lexer class."""

    def test_locations(self):
        lexer = Lexer("foo(\n  bar)", "t.rs")
        tokens = lexer.tokenize()
        positions = [(t.literal, t.location.line, t.location.column, t.location.offset) for t in tokens]
        self.assertEqual(positions, [
            ("foo", 1, 1, 0),
            ("(", 1, 4, 3),
            ("\n  ", 1, 5, 4),
            ("bar", 2, 3, 7),
            (")", 2, 6, 10),
        ])
        self.assertEqual(str(tokens[3].location), "t.rs:2:3")

    def test_tokens_match_bare_cursor(self):
        source = "foo(a) { /* c */ 'x' }"
        self.assertEqual(Lexer(source).tokenize(), list(tokenize(source)))

    def test_clean_source_has_no_warnings(self):
        lexer = Lexer("foo(a, b) { bar() {} } // done")
        lexer.tokenize()
        self.assertFalse(lexer.has_warnings())

    def test_warning_codes(self):
        cases = {
            "€": "L001",
            '"open': "L002",
            "'\\": "L002",
            "/* open": "L003",
            'r#"open': "L004",
            "a😀": "L005",
            "0b": "L006",
            "1e+": "L006",
        }
        for source, code in cases.items():
            with self.subTest(source=source):
                lexer = Lexer(source)
                lexer.tokenize()
                self.assertEqual([w.code for w in lexer.warnings], [code])

    def test_warning_location_and_text(self):
        lexer = Lexer("x\n  €", "w.rs")
        lexer.tokenize()
        warning = lexer.warnings[0]
        self.assertEqual((warning.location.line, warning.location.column), (2, 3))
        self.assertIn("WARNING: Unknown character", str(warning))
        self.assertIn("w.rs:2:3", str(warning))

    def test_retokenize_resets_state(self):
        lexer = Lexer("€")
        lexer.tokenize()
        tokens = lexer.tokenize()
        self.assertEqual(len(tokens), 1)
        self.assertEqual(len(lexer.warnings), 1)

    def test_retokenize_keeps_earlier_results(self):
        lexer = Lexer("a b")
        first = lexer.tokenize()
        second = lexer.tokenize()
        self.assertIsNot(first, second)
        self.assertEqual([t.literal for t in first], ["a", " ", "b"])
        self.assertEqual(first, second)

    def test_strip_trivia(self):
        tokens = strip_trivia(tokenize("a /* c */ b // d\n"))
        self.assertEqual([t.literal for t in tokens], ["a", "b"])


if __name__ == '__main__':
    unittest.main()
