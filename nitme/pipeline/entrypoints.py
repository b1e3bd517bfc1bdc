"""Unified entrypoints that orchestrate parse/lint/fix with one parse lifecycle."""

from __future__ import annotations

from nitme.diagnostics import dedupe_diagnostics, has_errors
from nitme.fix import run_fix as _run_fix
from nitme.lint import run_lint
from nitme.parser import ParseMode, ParserOptions, parse_result
from nitme.pipeline.result import GoParseResult
from nitme.pipeline.results import CheckRunResult, FixRunResult, LintRunResult

__all__ = ["run_check", "run_fix", "run_lint"]


def run_fix(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: GoParseResult | None = None,
    lint: LintRunResult | None = None,
) -> FixRunResult:
    """Lint and apply suggested fixes over one Go parse lifecycle."""
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    return _run_fix(resolved_parse.source_text, parse=resolved_parse, lint=lint)


def run_check(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: GoParseResult | None = None,
) -> CheckRunResult:
    """Run parse + lint checks over one Go parse lifecycle."""
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    lint_result = run_lint(resolved_parse.source_text, parse=resolved_parse)
    diagnostics = dedupe_diagnostics([*resolved_parse.diagnostics, *lint_result.diagnostics])
    return CheckRunResult(
        parse=resolved_parse,
        diagnostics=diagnostics,
        has_errors=has_errors(diagnostics),
    )


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse: GoParseResult | None,
) -> GoParseResult:
    if parse is not None:
        if options is not None or mode is not None:
            raise ValueError("Pass either parse or options/mode, not both")
        return parse
    return parse_result(text, options=options, mode=mode)
