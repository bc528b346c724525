"""
Recursive descent parser for scicalc expressions.

Grammar (precedence low to high):
    expression  → term (("+"|"-") term)*
    term        → unary (("*"|"/") unary)*
    unary       → "-" unary | power
    power       → primary ("^" unary)?
    primary     → NUMBER | constant | func_call | "(" expression ")"
    func_call   → FUNCTION "(" expression ("," expression)* ")"

Unary minus binds tighter than "*" and "/" but looser than "^", so "-2^2"
is -(2^2) = -4 while "2^-1" is 0.5. "^" is right-associative.

The parser owns a single cursor into the token list and only ever moves it
forward; one token of lookahead decides every rule.
"""

from __future__ import annotations

import logging

from scicalc.core.config import DEFAULT_MAX_DEPTH
from scicalc.core.errors import (
    ArityMismatchError,
    EmptyExpressionError,
    IncompleteExpressionError,
    TooDeeplyNestedError,
    TrailingInputError,
    UnexpectedTokenError,
    UnknownFunctionError,
    UnmatchedParenError,
)
from scicalc.core.expression_lang.functions import CONSTANTS, FUNCTIONS
from scicalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
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

_ADDITIVE: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}

_MULTIPLICATIVE: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}


class _Parser:
    """Recursive descent parser for expressions."""

    def __init__(self, tokens: list[Token], max_depth: int) -> None:
        self.tokens = tokens
        self.pos = 0
        self.max_depth = max_depth
        self.depth = 0
        self.open_parens = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def match(self, *kinds: TokenKind) -> Token | None:
        if self.current.kind in kinds:
            return self.advance()
        return None

    def expect_lparen(self, after: str) -> Token:
        if self.current.kind == TokenKind.LPAREN:
            return self.advance()
        raise self._unexpected(f"Expected '(' after {after}")

    def expect_rparen(self, opened_at: int) -> Token:
        tok = self.current
        if tok.kind == TokenKind.RPAREN:
            return self.advance()
        if tok.kind == TokenKind.EOF:
            raise UnmatchedParenError(f"Missing ')' for '(' at position {opened_at}", opened_at)
        raise UnexpectedTokenError(f"Expected ')', got {tok.value!r}", tok.pos)

    def _unexpected(self, what: str) -> Exception:
        """Error for a token that cannot appear where an operand is required."""
        tok = self.current
        if tok.kind == TokenKind.EOF:
            if self.open_parens:
                return UnmatchedParenError(f"{what}: missing ')'", tok.pos)
            return IncompleteExpressionError(f"{what}: unexpected end of input", tok.pos)
        if tok.kind == TokenKind.RPAREN and not self.open_parens:
            return UnmatchedParenError(f"Unmatched ')' at position {tok.pos}", tok.pos)
        return UnexpectedTokenError(f"{what}, got {tok.value!r}", tok.pos)

    def enter(self) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise TooDeeplyNestedError(self.max_depth, self.current.pos)

    def leave(self) -> None:
        self.depth -= 1

    # -- Grammar rules --

    def parse_expression(self) -> Expr:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        while self.current.kind in _ADDITIVE:
            op = _ADDITIVE[self.advance().kind]
            right = self.parse_term()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_term(self) -> Expr:
        """unary (('*' | '/') unary)*"""
        left = self.parse_unary()
        while self.current.kind in _MULTIPLICATIVE:
            op = _MULTIPLICATIVE[self.advance().kind]
            right = self.parse_unary()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_unary(self) -> Expr:
        """'-' unary | power"""
        if self.match(TokenKind.MINUS):
            self.enter()
            operand = self.parse_unary()
            self.leave()
            return UnaryExpr(op=UnaryOp.NEG, operand=operand)
        return self.parse_power()

    def parse_power(self) -> Expr:
        """primary ('^' unary)?"""
        base = self.parse_primary()
        if self.match(TokenKind.CARET):
            self.enter()
            exponent = self.parse_unary()
            self.leave()
            return BinaryExpr(op=BinaryOp.POW, left=base, right=exponent)
        return base

    def parse_primary(self) -> Expr:
        """NUMBER | constant | func_call | '(' expression ')'"""
        tok = self.current

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return Number(value=tok.number)

        # Parenthesized expression
        if tok.kind == TokenKind.LPAREN:
            self.advance()
            self.enter()
            self.open_parens += 1
            expr = self.parse_expression()
            self.expect_rparen(tok.pos)
            self.open_parens -= 1
            self.leave()
            return expr

        # Identifier: function call or constant
        if tok.kind == TokenKind.IDENT:
            if tok.value in FUNCTIONS:
                return self._parse_func_call()
            if tok.value in CONSTANTS:
                self.advance()
                return Constant(name=tok.value, value=CONSTANTS[tok.value])
            raise UnknownFunctionError(tok.value, tok.pos)

        raise self._unexpected("Expected a number, function or '('")

    def _parse_func_call(self) -> FuncCall:
        """FUNCTION '(' expression (',' expression)* ')'"""
        name_tok = self.advance()
        spec = FUNCTIONS[name_tok.value]
        lparen = self.expect_lparen(name_tok.value)
        self.enter()
        self.open_parens += 1

        args: list[Expr] = []
        if self.current.kind != TokenKind.RPAREN:
            args.append(self.parse_expression())
            while self.match(TokenKind.COMMA):
                args.append(self.parse_expression())

        self.expect_rparen(lparen.pos)
        self.open_parens -= 1
        self.leave()

        if len(args) != spec.arity:
            raise ArityMismatchError(spec.name, spec.arity, len(args), name_tok.pos)
        return FuncCall(name=spec.name, args=args)


def parse_tokens(tokens: list[Token], max_depth: int = DEFAULT_MAX_DEPTH) -> Expr:
    """Parse a token list produced by :func:`tokenize` into an AST.

    Args:
        tokens: Token list ending with an EOF token.
        max_depth: Maximum nesting of groups, calls, signs and exponents.

    Returns:
        Parsed expression AST.

    Raises:
        EvalError: If the tokens do not form a single well-formed expression.
    """
    if not tokens or tokens[-1].kind != TokenKind.EOF:
        raise ValueError("Token list must end with an EOF token")
    if tokens[0].kind == TokenKind.EOF:
        raise EmptyExpressionError()

    parser = _Parser(tokens, max_depth)
    expr = parser.parse_expression()

    # Ensure all tokens consumed
    tok = parser.current
    if tok.kind != TokenKind.EOF:
        if tok.kind == TokenKind.RPAREN:
            raise UnmatchedParenError(f"Unmatched ')' at position {tok.pos}", tok.pos)
        raise TrailingInputError(f"Unexpected input after expression: {tok.value!r}", tok.pos)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Parsed expression: {expr}")
    return expr


def parse_expr(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "2 + sqrt(16) * 3")
        max_depth: Maximum nesting of groups, calls, signs and exponents.

    Returns:
        Parsed expression AST.

    Raises:
        LexError: If tokenization fails.
        EvalError: If the expression is malformed.
    """
    return parse_tokens(tokenize(source), max_depth)
