"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from nitme.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_SYNTAX_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_SYNTAX_ERROR",
    message="Syntax error.",
    hint="The analyzer still ran over the recovered tree; fix the syntax to trust its output.",
    severity="error",
    category="parser",
)

PARSER_MISSING_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_TOKEN",
    message="Missing token.",
    severity="error",
    category="parser",
)

LINT_STYLE_EMPTY_SLICE_DECLARATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_STYLE_EMPTY_SLICE_DECLARATION",
    message="incorrect empty slice declaration",
    hint="Declare the empty slice with `var`.",
    severity="warning",
    category="style",
)

LINT_INTERNAL_RULE_DEFECT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_INTERNAL_RULE_DEFECT",
    message="Internal analyzer error.",
    hint="This is a bug in the analyzer, not in the analyzed source.",
    severity="error",
    category="internal",
)
