"""
Expression evaluator for scicalc.

Folds an expression AST into a float. Evaluation is pure: no I/O, no side
effects, no Python eval(). Domain checks run as soon as each sub-expression
resolves, and the first failure propagates unchanged.
"""

from __future__ import annotations

import logging
import math

from scicalc.core.config import EngineConfig
from scicalc.core.errors import (
    ArityMismatchError,
    DivisionByZeroError,
    DomainError,
    UnknownFunctionError,
)
from scicalc.core.expression_lang.functions import FUNCTIONS, power
from scicalc.core.expression_lang.parser import parse_expr, parse_tokens
from scicalc.core.expression_lang.tokenizer import Token
from scicalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Constant,
    Expr,
    FuncCall,
    Number,
    UnaryExpr,
    UnaryOp,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = EngineConfig()


def evaluate(expr: Expr, config: EngineConfig | None = None) -> float:
    """Evaluate an expression AST.

    Args:
        expr: Parsed expression AST.
        config: Engine configuration; defaults apply when omitted.

    Returns:
        The computed value. Never NaN; may be an infinity on overflow.

    Raises:
        DomainError: If a function argument or operation has no real result.
        DivisionByZeroError: If a divisor evaluates to zero.
    """
    return _interpret(expr, config or _DEFAULT_CONFIG)


def evaluate_tokens(tokens: list[Token], config: EngineConfig | None = None) -> float:
    """Parse and evaluate a token list produced by the tokenizer."""
    config = config or _DEFAULT_CONFIG
    return evaluate(parse_tokens(tokens, config.max_depth), config)


def calculate(source: str, config: EngineConfig | None = None) -> float:
    """Tokenize, parse and evaluate an expression string.

    Usage:
        calculate("2 + 3 * 4")      # 14.0
        calculate("pow(2, 10)")     # 1024.0
    """
    config = config or _DEFAULT_CONFIG
    result = evaluate(parse_expr(source, config.max_depth), config)
    logger.debug(f"{source!r} = {result!r}")
    return result


def _interpret(expr: Expr, config: EngineConfig) -> float:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Number):
        return expr.value

    if isinstance(expr, Constant):
        return expr.value

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr, config)

    if isinstance(expr, UnaryExpr):
        return _interpret_unary(expr, config)

    if isinstance(expr, FuncCall):
        return _interpret_func_call(expr, config)

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_binary(expr: BinaryExpr, config: EngineConfig) -> float:
    """Evaluate a binary expression.

    Left-associative chains (``1 + 2 + 3 ...``) are folded iteratively along
    the left spine, so only the nesting the parser already bounds recurses.
    """
    chain: list[BinaryExpr] = []
    node: Expr = expr
    while isinstance(node, BinaryExpr):
        chain.append(node)
        node = node.left

    value = _interpret(node, config)
    for link in reversed(chain):
        value = _apply(link.op, value, _interpret(link.right, config))
    return value


def _apply(op: BinaryOp, left: float, right: float) -> float:
    """Apply one binary operator to already evaluated operands."""
    if op == BinaryOp.ADD:
        result = left + right
    elif op == BinaryOp.SUB:
        result = left - right
    elif op == BinaryOp.MUL:
        result = left * right
    elif op == BinaryOp.DIV:
        if right == 0:
            raise DivisionByZeroError()
        result = left / right
    elif op == BinaryOp.POW:
        result = power(left, right)
    else:
        raise ValueError(f"Unknown binary op: {op}")

    return _real(result, f"{op.value} has no real result for these operands")


def _interpret_unary(expr: UnaryExpr, config: EngineConfig) -> float:
    """Evaluate a unary expression."""
    val = _interpret(expr.operand, config)
    if expr.op == UnaryOp.NEG:
        return -val
    raise ValueError(f"Unknown unary op: {expr.op}")


def _interpret_func_call(expr: FuncCall, config: EngineConfig) -> float:
    """Evaluate a built-in function call (closed set, no user-defined functions)."""
    spec = FUNCTIONS.get(expr.name)
    if spec is None:
        raise UnknownFunctionError(expr.name)
    if len(expr.args) != spec.arity:
        raise ArityMismatchError(spec.name, spec.arity, len(expr.args))

    args = [_interpret(a, config) for a in expr.args]
    return _real(spec(args, config), f"{expr.name}() has no real result for these arguments")


def _real(value: float, detail: str) -> float:
    """NaN never leaves the evaluator; it becomes a DomainError."""
    if math.isnan(value):
        raise DomainError(detail)
    return value
