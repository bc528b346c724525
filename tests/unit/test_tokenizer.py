"""Tests for the scicalc tokenizer.

Covers:
- Token kinds for every operator and punctuation mark
- Number forms, including leading and trailing decimal points
- Literal round trip and token immutability
- Malformed numbers and unexpected characters, with positions
"""

from __future__ import annotations

import dataclasses

import pytest

from scicalc.core.errors import ErrorKind, MalformedNumberError, UnexpectedCharacterError
from scicalc.core.expression_lang.tokenizer import TokenKind, tokenize


class TestTokenizer:
    """Tokenizer produces correct token sequences."""

    def test_integer(self) -> None:
        tokens = tokenize("42")
        assert tokens[0].kind == TokenKind.NUMBER
        assert tokens[0].value == "42"
        assert tokens[0].number == 42.0

    def test_float(self) -> None:
        tokens = tokenize("3.14")
        assert tokens[0].kind == TokenKind.NUMBER
        assert tokens[0].value == "3.14"

    def test_leading_dot(self) -> None:
        tokens = tokenize(".5")
        assert tokens[0].kind == TokenKind.NUMBER
        assert tokens[0].number == 0.5

    def test_trailing_dot(self) -> None:
        tokens = tokenize("5.")
        assert tokens[0].number == 5.0

    def test_operators(self) -> None:
        tokens = tokenize("+ - * / ^")
        assert [t.kind for t in tokens] == [
            TokenKind.PLUS,
            TokenKind.MINUS,
            TokenKind.STAR,
            TokenKind.SLASH,
            TokenKind.CARET,
            TokenKind.EOF,
        ]

    def test_punctuation(self) -> None:
        tokens = tokenize("(),")
        assert [t.kind for t in tokens] == [
            TokenKind.LPAREN,
            TokenKind.RPAREN,
            TokenKind.COMMA,
            TokenKind.EOF,
        ]

    def test_identifier_any_letter_run(self) -> None:
        # Names are validated by the parser, not the tokenizer
        tokens = tokenize("foo")
        assert tokens[0].kind == TokenKind.IDENT
        assert tokens[0].value == "foo"

    def test_function_call(self) -> None:
        tokens = tokenize("pow(2, 10)")
        assert [t.kind for t in tokens] == [
            TokenKind.IDENT,
            TokenKind.LPAREN,
            TokenKind.NUMBER,
            TokenKind.COMMA,
            TokenKind.NUMBER,
            TokenKind.RPAREN,
            TokenKind.EOF,
        ]

    def test_positions(self) -> None:
        tokens = tokenize("12 + sqrt(3)")
        assert [t.pos for t in tokens] == [0, 3, 5, 9, 10, 11, 12]

    def test_whitespace_handling(self) -> None:
        tokens = tokenize("\t2 +\n3 ")
        kinds = [t.kind for t in tokens if t.kind != TokenKind.EOF]
        assert kinds == [TokenKind.NUMBER, TokenKind.PLUS, TokenKind.NUMBER]


class TestTokenStream:
    """Structural guarantees of the token list."""

    def test_empty_input_is_just_eof(self) -> None:
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.EOF
        assert tokens[0].pos == 0

    def test_always_ends_with_single_eof(self) -> None:
        source = "1 + 2 * (3 - 4)"
        tokens = tokenize(source)
        assert tokens[-1].kind == TokenKind.EOF
        assert tokens[-1].pos == len(source)
        assert sum(1 for t in tokens if t.kind == TokenKind.EOF) == 1

    def test_literals_round_trip(self) -> None:
        source = "12 + 3.14159265358979 * .5 - 007 / 0.1"
        numbers = [t for t in tokenize(source) if t.kind == TokenKind.NUMBER]
        assert [t.value for t in numbers] == ["12", "3.14159265358979", ".5", "007", "0.1"]
        for tok in numbers:
            assert source[tok.pos : tok.pos + len(tok.value)] == tok.value
            assert tok.number == float(tok.value)

    def test_tokens_are_immutable(self) -> None:
        tok = tokenize("1")[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            tok.value = "2"  # type: ignore[misc]

    def test_source_is_not_modified(self) -> None:
        source = " 1 + 2 "
        tokenize(source)
        assert source == " 1 + 2 "


class TestTokenizerErrors:
    """Tokenizer rejects malformed input with a position."""

    def test_second_decimal_point(self) -> None:
        with pytest.raises(MalformedNumberError, match="second decimal point") as exc_info:
            tokenize("1.2.3")
        assert exc_info.value.pos == 3
        assert exc_info.value.kind == ErrorKind.MALFORMED_NUMBER

    def test_lone_dot(self) -> None:
        with pytest.raises(MalformedNumberError) as exc_info:
            tokenize("2 + .")
        assert exc_info.value.pos == 4

    def test_unsupported_symbol(self) -> None:
        with pytest.raises(UnexpectedCharacterError, match="Unexpected character") as exc_info:
            tokenize("2 % 3")
        assert exc_info.value.pos == 2
        assert exc_info.value.kind == ErrorKind.UNEXPECTED_CHARACTER

    def test_letter_after_number(self) -> None:
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            tokenize("2x")
        assert exc_info.value.pos == 1

    def test_digit_after_name(self) -> None:
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            tokenize("log10(5)")
        assert exc_info.value.pos == 3

    def test_uppercase_letters(self) -> None:
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            tokenize("Sin(1)")
        assert exc_info.value.pos == 0

    def test_non_ascii_digit(self) -> None:
        with pytest.raises(UnexpectedCharacterError):
            tokenize("٣")
