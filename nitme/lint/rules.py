"""Empty slice declaration rule: shape matcher and diagnostic/fix builder."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias, cast

from nitme.ast import GoArrayType, GoAssignStmt, GoCompositeLit, GoIdent, GoNode
from nitme.diagnostics import (
    LINT_STYLE_EMPTY_SLICE_DECLARATION,
    Diagnostic,
    SuggestedFix,
    TextEdit,
)
from nitme.text import TextRange

Report: TypeAlias = Callable[[Diagnostic], None]

USE_VAR_FIX_MESSAGE = "use var"


class RuleContractError(RuntimeError):
    """A node passed every shape filter but still broke an assumption those filters imply."""

    def __init__(self, message: str, range: TextRange) -> None:
        super().__init__(message)
        self.range = range


@dataclass(frozen=True, slots=True)
class EmptySliceMatch:
    """What the fix needs from a matched `name := []T{}` statement."""

    target_name: str
    element_type_name: str
    range: TextRange


def match_empty_slice_declaration(node: GoAssignStmt) -> EmptySliceMatch | None:
    """Return the match for `name := []T{}`, or None for any other statement.

    Only single-target, single-value short variable declarations standing as
    statements are in scope. Past the shape filters, a target or element type
    that is not a plain identifier raises RuleContractError.
    """
    if not node.is_short_var_decl or node.in_clause_header or node.in_error_recovery:
        return None
    if len(node.lhs) != 1 or len(node.rhs) != 1:
        return None

    composite = node.rhs[0]
    if not isinstance(composite, GoCompositeLit):
        return None

    # `{}` lowers to None; any element at all keeps the literal.
    if composite.elements is not None:
        return None

    array_type = composite.type
    if not isinstance(array_type, GoArrayType) or not array_type.is_slice:
        return None

    target = node.lhs[0]
    if not isinstance(target, GoIdent):
        raise RuleContractError(
            f"Empty slice declaration target is `{type(target).__name__}`, expected an identifier",
            node.range,
        )

    element = array_type.element
    if not isinstance(element, GoIdent):
        raise RuleContractError(
            f"Empty slice element type is `{type(element).__name__}`, expected an identifier",
            node.range,
        )

    return EmptySliceMatch(
        target_name=target.name,
        element_type_name=element.name,
        range=node.range,
    )


def build_empty_slice_diagnostic(match: EmptySliceMatch) -> Diagnostic:
    replacement = f"var {match.target_name} []{match.element_type_name}"
    return Diagnostic(
        code=LINT_STYLE_EMPTY_SLICE_DECLARATION.code,
        message=LINT_STYLE_EMPTY_SLICE_DECLARATION.message,
        range=match.range,
        severity=LINT_STYLE_EMPTY_SLICE_DECLARATION.severity,
        hint=f"Replace with `{replacement}`.",
        category=LINT_STYLE_EMPTY_SLICE_DECLARATION.category,
        fixes=(
            SuggestedFix(
                message=USE_VAR_FIX_MESSAGE,
                edits=(TextEdit(range=match.range, new_text=replacement),),
            ),
        ),
    )


def run_empty_slice_declaration(node: GoNode, report: Report) -> None:
    # The inspector only hands over assignment nodes.
    match = match_empty_slice_declaration(cast(GoAssignStmt, node))
    if match is None:
        return
    report(build_empty_slice_diagnostic(match))
