"""Diagnostics."""

from nitme.diagnostics.codes import (
    LINT_INTERNAL_RULE_DEFECT,
    LINT_STYLE_EMPTY_SLICE_DECLARATION,
    PARSER_MISSING_TOKEN,
    PARSER_SYNTAX_ERROR,
    DiagnosticSpec,
)
from nitme.diagnostics.diagnostic import Diagnostic, Severity, SuggestedFix, TextEdit
from nitme.diagnostics.report import (
    dedupe_diagnostics,
    has_errors,
    sort_diagnostics,
)

__all__ = [
    "LINT_INTERNAL_RULE_DEFECT",
    "LINT_STYLE_EMPTY_SLICE_DECLARATION",
    "PARSER_MISSING_TOKEN",
    "PARSER_SYNTAX_ERROR",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "SuggestedFix",
    "TextEdit",
    "dedupe_diagnostics",
    "has_errors",
    "sort_diagnostics",
]
