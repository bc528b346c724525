"""
Tokenizer for scicalc expressions.

Converts an expression string into a sequence of typed tokens.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import StrEnum, auto

from scicalc.core.errors import MalformedNumberError, UnexpectedCharacterError

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals
    NUMBER = auto()

    # Function and constant names
    IDENT = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()

    # End of input
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the expression tokenizer.

    ``value`` is the exact source text of the token and ``pos`` its offset.
    """

    kind: TokenKind
    value: str
    pos: int

    @property
    def number(self) -> float:
        """The double value of a NUMBER token."""
        return float(self.value)

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


# Number: digits with at most one decimal point, leading or trailing dot allowed
_NUMBER_RE = re.compile(r"[0-9]*\.?[0-9]*")
# Identifier: a run of lowercase letters
_IDENT_RE = re.compile(r"[a-z]+")

_WHITESPACE = " \t\n\r"

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
}


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    The returned list always ends with a single EOF token positioned at
    ``len(source)``.

    Raises:
        UnexpectedCharacterError: For characters outside the language, and for
            letters glued to numbers (``2x``) or digits glued to names (``log10``).
        MalformedNumberError: For a lone ``.`` or a second decimal point.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        # Skip whitespace
        if c in _WHITESPACE:
            i += 1
            continue

        # Numbers
        if c in "0123456789.":
            i = _read_number(source, i, tokens)
            continue

        # Function and constant names
        if "a" <= c <= "z":
            m = _IDENT_RE.match(source, i)
            assert m is not None
            end = m.end()
            if end < n and (source[end].isdigit() or source[end] == "."):
                raise UnexpectedCharacterError(
                    f"Unexpected character after name {m.group(0)!r}: {source[end]!r}", end
                )
            tokens.append(Token(TokenKind.IDENT, m.group(0), i))
            i = end
            continue

        # Single-character operators and punctuation
        if c in _SINGLE_CHAR:
            tokens.append(Token(_SINGLE_CHAR[c], c, i))
            i += 1
            continue

        raise UnexpectedCharacterError(f"Unexpected character: {c!r}", i)

    tokens.append(Token(TokenKind.EOF, "", n))
    logger.debug(f"Tokenized {source!r} into {len(tokens)} tokens")
    return tokens


def _read_number(source: str, start: int, tokens: list[Token]) -> int:
    """Read a numeric literal starting at ``start`` and return the next offset."""
    m = _NUMBER_RE.match(source, start)
    assert m is not None
    text = m.group(0)
    end = m.end()

    if text == ".":
        raise MalformedNumberError("Malformed number: '.' has no digits", start)
    if end < len(source):
        follower = source[end]
        if follower == ".":
            raise MalformedNumberError(
                f"Malformed number: second decimal point in {text + follower!r}", end
            )
        if follower.isalpha():
            raise UnexpectedCharacterError(
                f"Unexpected character after number {text!r}: {follower!r}", end
            )

    tokens.append(Token(TokenKind.NUMBER, text, start))
    return end
