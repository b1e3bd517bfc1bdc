"""Lint driver: runs the analyzer over every requested node of one parse result."""

from __future__ import annotations

import logging

from nitme.diagnostics import (
    LINT_INTERNAL_RULE_DEFECT,
    Diagnostic,
    sort_diagnostics,
)
from nitme.lint.analyzer import Analyzer, default_analyzer, validate_analyzer
from nitme.lint.rules import RuleContractError
from nitme.parser import ParseMode, ParserOptions, parse_result
from nitme.pipeline.result import GoParseResult
from nitme.pipeline.results import LintRunResult

logger = logging.getLogger(__name__)


def run_lint(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: GoParseResult | None = None,
    analyzer: Analyzer | None = None,
) -> LintRunResult:
    """Run the analyzer from a single parse lifecycle."""
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    resolved_analyzer = analyzer if analyzer is not None else default_analyzer()
    validate_analyzer(resolved_analyzer)

    diagnostics = list(resolved_parse.diagnostics)
    for node in resolved_parse.inspector().lowered(resolved_analyzer.node_kinds):
        reported: list[Diagnostic] = []
        try:
            resolved_analyzer.run(node, reported.append)
        except RuleContractError as exc:
            logger.error(
                "Analyzer `%s` aborted the node at bytes %d-%d: %s",
                resolved_analyzer.name,
                exc.range.start.value,
                exc.range.end.value,
                exc,
            )
            diagnostics.append(_internal_defect(resolved_analyzer, exc))
            continue
        diagnostics.extend(reported)

    return LintRunResult(
        parse=resolved_parse,
        diagnostics=sort_diagnostics(diagnostics),
    )


def _internal_defect(analyzer: Analyzer, exc: RuleContractError) -> Diagnostic:
    return Diagnostic(
        code=LINT_INTERNAL_RULE_DEFECT.code,
        message=f"{LINT_INTERNAL_RULE_DEFECT.message} `{analyzer.name}`: {exc}",
        range=exc.range,
        severity=LINT_INTERNAL_RULE_DEFECT.severity,
        hint=LINT_INTERNAL_RULE_DEFECT.hint,
        category=LINT_INTERNAL_RULE_DEFECT.category,
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
