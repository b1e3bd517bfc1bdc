"""Typed syntax model over tree-sitter Go trees."""

from nitme.ast.inspect import Inspector
from nitme.ast.lower import lower_assignment, lower_expression, lower_node
from nitme.ast.model import (
    GoArrayType,
    GoAssignStmt,
    GoCompositeLit,
    GoExpr,
    GoIdent,
    GoNode,
    GoOther,
)

__all__ = [
    "GoArrayType",
    "GoAssignStmt",
    "GoCompositeLit",
    "GoExpr",
    "GoIdent",
    "GoNode",
    "GoOther",
    "Inspector",
    "lower_assignment",
    "lower_expression",
    "lower_node",
]
