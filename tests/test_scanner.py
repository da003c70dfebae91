"""
Test suite for the Lox scanner.

Tests cover:
- Punctuation and one/two character operators
- Comments, whitespace and line tracking
- Number, string and identifier/keyword literals
- Lexical error recovery and reporting

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer import Scanner, Token, TokenType, KEYWORDS, LexerError, scan, tokenize_string
from lox.reporter import ErrorReporter


class ScannerTestCase(unittest.TestCase):
    """Shared helpers for scanner tests."""

    def _scan(self, source: str):
        scanner = Scanner(source)
        tokens = scanner.scan_tokens()
        return tokens, scanner.errors

    def _types(self, source: str):
        tokens, _ = self._scan(source)
        return [token.type for token in tokens]


class TestPunctuationAndOperators(ScannerTestCase):
    """Single and double character tokens."""

    def test_empty_source_yields_only_eof(self):
        tokens, errors = self._scan("")
        self.assertEqual(tokens, [Token(TokenType.EOF, "", None, 1)])
        self.assertEqual(errors, [])

    def test_single_character_tokens(self):
        self.assertEqual(self._types("(){},.-+;*"), [
            TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
            TokenType.COMMA, TokenType.DOT, TokenType.MINUS,
            TokenType.PLUS, TokenType.SEMICOLON, TokenType.MULTIPLY,
            TokenType.EOF,
        ])

    def test_one_or_two_character_operators(self):
        self.assertEqual(self._types("! != = == < <= > >="), [
            TokenType.LOGICAL_NOT, TokenType.NOT_EQUAL,
            TokenType.ASSIGN, TokenType.EQUAL,
            TokenType.LESS_THAN, TokenType.LESS_EQUAL,
            TokenType.GREATER_THAN, TokenType.GREATER_EQUAL,
            TokenType.EOF,
        ])

    def test_lexemes_are_exact_source_text(self):
        tokens, _ = self._scan("<= !")
        self.assertEqual([t.lexeme for t in tokens], ["<=", "!", ""])

    def test_bang_does_not_run_into_following_token(self):
        # '!' followed by something other than '=' must stay a single token
        self.assertEqual(self._types("!a"), [
            TokenType.LOGICAL_NOT, TokenType.IDENTIFIER, TokenType.EOF,
        ])
        self.assertEqual(self._types("!=="), [
            TokenType.NOT_EQUAL, TokenType.ASSIGN, TokenType.EOF,
        ])

    def test_single_slash_is_division(self):
        self.assertEqual(self._types("a / 1"), [
            TokenType.IDENTIFIER, TokenType.DIVIDE, TokenType.NUMBER, TokenType.EOF,
        ])

    def test_operator_tokens_have_no_literal(self):
        tokens, _ = self._scan("+ ==")
        self.assertIsNone(tokens[0].literal)
        self.assertTrue(tokens[0].is_operator)
        self.assertTrue(tokens[1].is_operator)
        self.assertFalse(tokens[2].is_operator)


class TestCommentsAndWhitespace(ScannerTestCase):
    """Skipped text and line counting."""

    def test_comment_then_number_on_next_line(self):
        tokens, errors = self._scan("// comment\n123")
        self.assertEqual(errors, [])
        self.assertEqual(tokens, [
            Token(TokenType.NUMBER, "123", 123.0, 2),
            Token(TokenType.EOF, "", None, 2),
        ])

    def test_comment_at_end_of_input(self):
        self.assertEqual(self._types("1 // trailing"), [TokenType.NUMBER, TokenType.EOF])

    def test_whitespace_is_skipped(self):
        self.assertEqual(self._types(" \t\r1\t+ \r2 "), [
            TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER, TokenType.EOF,
        ])

    def test_newlines_advance_line_numbers(self):
        tokens, _ = self._scan("1\n2\n\n3")
        self.assertEqual([t.line for t in tokens], [1, 2, 4, 4])

    def test_lines_never_decrease(self):
        tokens, _ = self._scan('a\n"b\nc"\n// d\ne + 1.5\n')
        lines = [t.line for t in tokens]
        self.assertEqual(lines, sorted(lines))
        self.assertEqual(tokens[-1].line, 6)


class TestLiterals(ScannerTestCase):
    """Numbers, strings, identifiers and keywords."""

    def test_integer_number(self):
        tokens, _ = self._scan("123")
        self.assertEqual(tokens[0], Token(TokenType.NUMBER, "123", 123.0, 1))
        self.assertIsInstance(tokens[0].literal, float)

    def test_decimal_number(self):
        tokens, _ = self._scan("3.14")
        self.assertEqual(tokens[0].lexeme, "3.14")
        self.assertEqual(tokens[0].literal, 3.14)

    def test_trailing_dot_is_a_separate_token(self):
        tokens, _ = self._scan("123.")
        self.assertEqual(tokens, [
            Token(TokenType.NUMBER, "123", 123.0, 1),
            Token(TokenType.DOT, ".", None, 1),
            Token(TokenType.EOF, "", None, 1),
        ])

    def test_leading_dot_is_a_separate_token(self):
        self.assertEqual(self._types(".5"), [TokenType.DOT, TokenType.NUMBER, TokenType.EOF])

    def test_second_decimal_point_starts_new_tokens(self):
        tokens, _ = self._scan("1.2.3")
        self.assertEqual([t.lexeme for t in tokens], ["1.2", ".", "3", ""])
        self.assertEqual(tokens[0].literal, 1.2)
        self.assertEqual(tokens[2].literal, 3.0)

    def test_string_literal_strips_quotes(self):
        tokens, _ = self._scan('"hello world"')
        self.assertEqual(tokens[0], Token(TokenType.STRING, '"hello world"', "hello world", 1))

    def test_empty_string(self):
        tokens, _ = self._scan('""')
        self.assertEqual(tokens[0].literal, "")

    def test_string_content_is_not_unescaped(self):
        tokens, _ = self._scan('"a\\nb"')
        self.assertEqual(tokens[0].literal, "a\\nb")

    def test_multiline_string(self):
        tokens, errors = self._scan('"one\ntwo"\nx')
        self.assertEqual(errors, [])
        self.assertEqual(tokens[0].literal, "one\ntwo")
        self.assertEqual(tokens[0].line, 1)
        self.assertEqual(tokens[1], Token(TokenType.IDENTIFIER, "x", None, 3))

    def test_every_keyword_is_reserved(self):
        for word, token_type in KEYWORDS.items():
            with self.subTest(word=word):
                tokens, _ = self._scan(word)
                self.assertEqual(tokens[0].type, token_type)
                self.assertTrue(tokens[0].is_keyword)
                self.assertIsNone(tokens[0].literal)

    def test_keyword_lookup_is_exact_and_case_sensitive(self):
        for text in ("orchid", "And", "NIL", "classy", "_while", "true1"):
            with self.subTest(text=text):
                tokens, _ = self._scan(text)
                self.assertEqual(tokens[0].type, TokenType.IDENTIFIER)
                self.assertEqual(tokens[0].lexeme, text)

    def test_identifier_with_underscores_and_digits(self):
        tokens, _ = self._scan("_foo1 bar_2")
        self.assertEqual(tokens[0], Token(TokenType.IDENTIFIER, "_foo1", None, 1))
        self.assertEqual(tokens[1], Token(TokenType.IDENTIFIER, "bar_2", None, 1))

    def test_number_directly_followed_by_identifier(self):
        self.assertEqual(self._types("12ab"), [
            TokenType.NUMBER, TokenType.IDENTIFIER, TokenType.EOF,
        ])


class TestLexicalErrors(ScannerTestCase):
    """Error recovery and diagnostics."""

    def test_unexpected_character(self):
        tokens, errors = self._scan("@")
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].line, 1)
        self.assertEqual(errors[0].message, "Unexpected character.")
        self.assertEqual(errors[0].diagnostic.code, "L001")
        self.assertEqual(tokens, [Token(TokenType.EOF, "", None, 1)])

    def test_scanning_resumes_after_unexpected_character(self):
        tokens, errors = self._scan("1 @ 2")
        self.assertEqual(len(errors), 1)
        self.assertEqual([t.type for t in tokens], [
            TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF,
        ])

    def test_every_bad_character_is_reported(self):
        _, errors = self._scan("#\n@\n$")
        self.assertEqual([e.line for e in errors], [1, 2, 3])

    def test_non_ascii_digits_and_letters_are_rejected(self):
        _, errors = self._scan("² é")
        self.assertEqual(len(errors), 2)

    def test_unterminated_string(self):
        tokens, errors = self._scan('"abc')
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].message, "Unterminated string.")
        self.assertEqual(errors[0].diagnostic.code, "L002")
        self.assertEqual(tokens, [Token(TokenType.EOF, "", None, 1)])

    def test_unterminated_string_reported_where_detected(self):
        tokens, errors = self._scan('1 "a\nb')
        self.assertEqual(errors[0].line, 2)
        self.assertEqual([t.type for t in tokens], [TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(tokens[-1].line, 2)

    def test_errors_go_to_reporter(self):
        reporter = ErrorReporter()
        scanner = Scanner("@ #", reporter=reporter)
        scanner.scan_tokens()
        self.assertTrue(reporter.had_error)
        self.assertEqual(len(reporter), 2)
        self.assertEqual(scanner.get_diagnostics(), reporter.diagnostics)

    def test_has_errors(self):
        scanner = Scanner("1 + 2")
        scanner.scan_tokens()
        self.assertFalse(scanner.has_errors())


class TestScanFunctions(unittest.TestCase):
    """Module level convenience functions."""

    def test_scan_returns_tokens_and_errors(self):
        tokens, errors = scan("1 ~")
        self.assertEqual(tokens[0].type, TokenType.NUMBER)
        self.assertEqual(len(errors), 1)

    def test_eof_is_last_and_unique(self):
        for source in ("", "1", "(a)", "@", '"x', "// c\n", "a\n\nb"):
            with self.subTest(source=source):
                tokens, _ = scan(source)
                self.assertEqual(tokens[-1].type, TokenType.EOF)
                self.assertEqual(sum(t.type == TokenType.EOF for t in tokens), 1)

    def test_tokenize_string_raises_first_error(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("1 @ #")
        self.assertEqual(ctx.exception.message, "Unexpected character.")

    def test_tokenize_string_returns_tokens(self):
        tokens = tokenize_string("true")
        self.assertEqual(tokens[0].type, TokenType.TRUE)

    def test_token_display(self):
        self.assertEqual(str(Token(TokenType.NUMBER, "1", 1.0, 1)), "NUMBER('1' -> 1.0)")
        self.assertEqual(str(Token(TokenType.PLUS, "+", None, 1)), "PLUS('+')")
        self.assertEqual(repr(Token(TokenType.EOF, "", None, 3)), "Token(EOF, '', None, 3)")


if __name__ == '__main__':
    unittest.main()
