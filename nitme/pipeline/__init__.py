"""Shared parse carrier and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nitme.parser.options import ParseMode, ParserOptions
from nitme.pipeline.result import GoParseResult
from nitme.pipeline.results import CheckRunResult, FixRunResult, LintRunResult

if TYPE_CHECKING:
    from nitme.lint import Analyzer


def run_lint(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: GoParseResult | None = None,
    analyzer: Analyzer | None = None,
) -> LintRunResult:
    from nitme.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(text, options=options, mode=mode, parse=parse, analyzer=analyzer)


def run_fix(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: GoParseResult | None = None,
    lint: LintRunResult | None = None,
) -> FixRunResult:
    from nitme.pipeline.entrypoints import run_fix as _run_fix

    return _run_fix(text, options=options, mode=mode, parse=parse, lint=lint)


def run_check(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: GoParseResult | None = None,
) -> CheckRunResult:
    from nitme.pipeline.entrypoints import run_check as _run_check

    return _run_check(text, options=options, mode=mode, parse=parse)


__all__ = [
    "CheckRunResult",
    "FixRunResult",
    "GoParseResult",
    "LintRunResult",
    "run_check",
    "run_fix",
    "run_lint",
]
