"""
scicalc Intermediate Representation (IR) types.

The expression AST shared by the parser and the evaluator.
"""

from .expressions import (
    BinaryExpr,
    BinaryOp,
    Constant,
    Expr,
    FuncCall,
    Number,
    UnaryExpr,
    UnaryOp,
)

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Constant",
    "Expr",
    "FuncCall",
    "Number",
    "UnaryExpr",
    "UnaryOp",
]
