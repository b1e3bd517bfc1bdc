"""Fix runner: applies suggested fixes from one lint pass onto the parsed source."""

from __future__ import annotations

import logging

from nitme.diagnostics import Diagnostic, TextEdit
from nitme.fix.edits import apply_text_edits, conflicts_with
from nitme.lint.runner import run_lint as _run_lint
from nitme.parser import ParseMode, ParserOptions, parse_result
from nitme.pipeline.result import GoParseResult
from nitme.pipeline.results import FixRunResult, LintRunResult

logger = logging.getLogger(__name__)


def run_fix(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: GoParseResult | None = None,
    lint: LintRunResult | None = None,
) -> FixRunResult:
    """Apply the first suggested fix of every diagnostic that carries one."""
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    lint_result = lint if lint is not None else _run_lint(resolved_parse.source_text, parse=resolved_parse)
    if lint_result.parse is not resolved_parse:
        raise ValueError("Provided lint result must reuse the same parse result")

    accepted: list[TextEdit] = []
    applied: list[Diagnostic] = []
    for diagnostic in lint_result.diagnostics:
        if not diagnostic.fixes:
            continue
        fix = diagnostic.fixes[0]
        if conflicts_with(fix.edits, accepted):
            logger.warning(
                "Skipping fix %r for %s at bytes %d-%d: it overlaps an earlier fix",
                fix.message,
                diagnostic.code,
                diagnostic.range.start.value,
                diagnostic.range.end.value,
            )
            continue
        accepted.extend(fix.edits)
        applied.append(diagnostic)

    fixed_text = apply_text_edits(resolved_parse.source_text, accepted)
    logger.debug("Applied %d of %d diagnostics' fixes", len(applied), len(lint_result.diagnostics))

    return FixRunResult(
        parse=resolved_parse,
        fixed_text=fixed_text,
        applied=applied,
        diagnostics=lint_result.diagnostics,
        changed=fixed_text != resolved_parse.source_text,
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
