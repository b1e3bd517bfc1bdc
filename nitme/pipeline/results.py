"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from nitme.diagnostics import Diagnostic
from nitme.pipeline.result import GoParseResult


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running the analyzer from a shared parse result."""

    parse: GoParseResult
    diagnostics: list[Diagnostic]


@dataclass(frozen=True, slots=True)
class FixRunResult:
    """Result of applying suggested fixes from a shared parse result."""

    parse: GoParseResult
    fixed_text: str
    applied: list[Diagnostic]
    diagnostics: list[Diagnostic]
    changed: bool


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of unified parser/lint checks from a shared parse result."""

    parse: GoParseResult
    diagnostics: list[Diagnostic]
    has_errors: bool
