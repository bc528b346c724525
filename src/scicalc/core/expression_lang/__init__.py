"""
scicalc expression language.

Tokenizer, parser and evaluator for scientific calculator expressions.

Usage:
    from scicalc.core.expression_lang import calculate, parse_expr, evaluate

    calculate("2 + 3 * 4")
    # 14.0

    expr = parse_expr("sqrt(16) + fact(3)")
    evaluate(expr)
    # 10.0
"""

from scicalc.core.expression_lang.evaluator import calculate, evaluate, evaluate_tokens
from scicalc.core.expression_lang.formatting import format_result
from scicalc.core.expression_lang.functions import CONSTANTS, FUNCTIONS, FunctionSpec
from scicalc.core.expression_lang.parser import parse_expr, parse_tokens
from scicalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize

__all__ = [
    "CONSTANTS",
    "FUNCTIONS",
    "FunctionSpec",
    "Token",
    "TokenKind",
    "calculate",
    "evaluate",
    "evaluate_tokens",
    "format_result",
    "parse_expr",
    "parse_tokens",
    "tokenize",
]
