"""
Expression types for the scicalc IR.

The parser produces a small typed AST that the evaluator folds into a float.

Supports:
- Arithmetic: +, -, *, /, ^
- Unary negation: -x
- Named constants: pi, e
- Function calls: sqrt(x), fact(x), sin(x), cos(x), tan(x), log(x), ln(x),
  exp(x), pow(a, b)
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


class UnaryOp(StrEnum):
    """Unary operators for expressions."""

    NEG = "-"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """A numeric literal exactly as written in the source."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        if self.value.is_integer() and abs(self.value) < 1e16:
            return str(int(self.value))
        return repr(self.value)


class Constant(BaseModel):
    """A named constant such as ``pi``."""

    name: str = Field(description="Constant name")
    value: float = Field(description="Resolved value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        # Walk the left spine iteratively; long sums are left-deep
        spine: list[BinaryExpr] = []
        node: Expr = self
        while isinstance(node, BinaryExpr):
            spine.append(node)
            node = node.left
        text = str(node)
        for link in reversed(spine):
            text = f"({text} {link.op.value} {link.right})"
        return text


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOp
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"(-{self.operand})"


class FuncCall(BaseModel):
    """
    Function call: name(arg1, ...).

    Only names from the built-in function table reach this node; the parser
    rejects anything else.
    """

    name: str = Field(description="Function name")
    args: list[Expr] = Field(default_factory=list, description="Arguments")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        args_str = ", ".join(str(a) for a in self.args)
        return f"{self.name}({args_str})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Number | Constant | BinaryExpr | UnaryExpr | FuncCall

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
UnaryExpr.model_rebuild()
FuncCall.model_rebuild()
