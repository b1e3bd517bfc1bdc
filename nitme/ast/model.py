"""Syntax model for the Go shapes the analyzer inspects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from nitme.text import TextRange


@dataclass(frozen=True, slots=True)
class GoIdent:
    """Plain identifier, in expression or type position."""

    name: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class GoArrayType:
    """`[]T`, `[N]T` or `[...]T`; `length` is None only for the slice form."""

    element: GoExpr
    length: GoExpr | None
    range: TextRange

    @property
    def is_slice(self) -> bool:
        return self.length is None


@dataclass(frozen=True, slots=True)
class GoCompositeLit:
    """Composite literal `T{...}`.

    `elements` is None when the body was written as `{}`, as opposed to a
    body holding one or more elements.
    """

    type: GoExpr
    elements: tuple[GoExpr, ...] | None
    range: TextRange


@dataclass(frozen=True, slots=True)
class GoAssignStmt:
    """Assignment or short variable declaration.

    `in_clause_header` marks the init statement of an `if`, `for` or `switch`,
    where a `var` declaration is not allowed. `in_error_recovery` marks a
    statement the parser recovered inside or right after an ERROR node, so
    its context is unknown.
    """

    lhs: tuple[GoExpr, ...]
    rhs: tuple[GoExpr, ...]
    operator: str
    range: TextRange
    in_clause_header: bool = False
    in_error_recovery: bool = False

    @property
    def is_short_var_decl(self) -> bool:
        return self.operator == ":="


@dataclass(frozen=True, slots=True)
class GoOther:
    """Any shape outside the set above, kept with its tree-sitter kind and source text."""

    kind: str
    text: str
    range: TextRange


GoExpr: TypeAlias = GoIdent | GoArrayType | GoCompositeLit | GoOther
GoNode: TypeAlias = GoAssignStmt | GoExpr


__all__ = [
    "GoArrayType",
    "GoAssignStmt",
    "GoCompositeLit",
    "GoExpr",
    "GoIdent",
    "GoNode",
    "GoOther",
]
