"""
Error types for scicalc tokenizing, parsing, evaluation and configuration.

Every failure an evaluation can produce is a ``CalcError`` subclass with a
stable ``kind`` so callers can tell the failures apart without parsing
messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class ScicalcError(Exception):
    """Base exception for all scicalc errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(ScicalcError):
    """
    Raised when an engine configuration file cannot be used.

    Examples:
    - Malformed TOML
    - Unknown angle unit
    - Nesting limit out of range
    """

    pass


class ErrorKind(StrEnum):
    """Stable identifiers for every failure an evaluation can report."""

    # Tokenizer
    UNEXPECTED_CHARACTER = "unexpected_character"
    MALFORMED_NUMBER = "malformed_number"
    # Parser
    EMPTY_EXPRESSION = "empty_expression"
    UNMATCHED_PAREN = "unmatched_paren"
    TRAILING_INPUT = "trailing_input"
    UNKNOWN_FUNCTION = "unknown_function"
    ARITY_MISMATCH = "arity_mismatch"
    INCOMPLETE_EXPRESSION = "incomplete_expression"
    UNEXPECTED_TOKEN = "unexpected_token"
    TOO_DEEPLY_NESTED = "too_deeply_nested"
    # Evaluator
    DOMAIN_ERROR = "domain_error"
    DIVISION_BY_ZERO = "division_by_zero"
    # Service only: the request mapping itself was unusable
    INVALID_REQUEST = "invalid_request"


class CalcError(ScicalcError):
    """Base class for failures of a single evaluation.

    ``pos`` is the 0-based offset into the source string when the failure can
    be pinned to one; evaluation-time errors leave it as ``None``.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, pos: int | None = None) -> None:
        super().__init__(message)
        self.pos = pos


class LexError(CalcError):
    """Raised while splitting the source string into tokens."""


class UnexpectedCharacterError(LexError):
    kind = ErrorKind.UNEXPECTED_CHARACTER


class MalformedNumberError(LexError):
    kind = ErrorKind.MALFORMED_NUMBER


class EvalError(CalcError):
    """Raised while parsing or folding a token sequence."""


class EmptyExpressionError(EvalError):
    kind = ErrorKind.EMPTY_EXPRESSION

    def __init__(self) -> None:
        super().__init__("Expression is empty")


class UnmatchedParenError(EvalError):
    kind = ErrorKind.UNMATCHED_PAREN


class TrailingInputError(EvalError):
    kind = ErrorKind.TRAILING_INPUT


class IncompleteExpressionError(EvalError):
    kind = ErrorKind.INCOMPLETE_EXPRESSION


class UnexpectedTokenError(EvalError):
    kind = ErrorKind.UNEXPECTED_TOKEN


class UnknownFunctionError(EvalError):
    kind = ErrorKind.UNKNOWN_FUNCTION

    def __init__(self, name: str, pos: int | None = None) -> None:
        super().__init__(f"Unknown function: {name}", pos)
        self.name = name


class ArityMismatchError(EvalError):
    kind = ErrorKind.ARITY_MISMATCH

    def __init__(self, name: str, expected: int, got: int, pos: int | None = None) -> None:
        plural = "argument" if expected == 1 else "arguments"
        super().__init__(f"{name}() takes exactly {expected} {plural} ({got} given)", pos)
        self.name = name
        self.expected = expected
        self.got = got


class TooDeeplyNestedError(EvalError):
    kind = ErrorKind.TOO_DEEPLY_NESTED

    def __init__(self, limit: int, pos: int | None = None) -> None:
        super().__init__(f"Expression nesting exceeds the limit of {limit}", pos)
        self.limit = limit


class DomainError(EvalError):
    kind = ErrorKind.DOMAIN_ERROR

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class DivisionByZeroError(EvalError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self) -> None:
        super().__init__("Division by zero")


@dataclass
class ErrorContext:
    """
    Location of an error inside an expression string.

    Attributes:
        source: The full expression text
        column: 0-based offset of the offending character
    """

    source: str
    column: int

    def format(self) -> str:
        """
        Format the expression with a marker under the error column.

        Returns:
            Two lines: the expression, then a ``^`` under the offending column
        """
        column = max(0, min(self.column, len(self.source)))
        prefix = "  "
        return f"{prefix}{self.source}\n{' ' * (len(prefix) + column)}^"
