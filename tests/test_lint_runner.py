import logging
from dataclasses import replace

import pytest

from nitme.diagnostics import Diagnostic
from nitme.fix import run_fix
from nitme.lint import Analyzer, default_analyzer, run_lint
from nitme.parser import ParseMode, parse_result
from tests._shared_cases import (
    MATCHING_CASES,
    NON_MATCHING_CASES,
    GoCase,
    case_id,
    in_function,
)


@pytest.mark.parametrize("case", NON_MATCHING_CASES, ids=case_id)
def test_non_matching_statements_report_nothing(case: GoCase) -> None:
    result = run_lint(case.source)

    assert result.diagnostics == []


@pytest.mark.parametrize("case", MATCHING_CASES, ids=case_id)
def test_empty_slice_declaration_reports_one_fixable_diagnostic(case: GoCase) -> None:
    source = case.source
    start = source.index(case.statement)

    result = run_lint(source)

    [diagnostic] = result.diagnostics
    assert diagnostic.message == "incorrect empty slice declaration"
    assert diagnostic.range.as_tuple() == (start, start + len(case.statement))
    [fix] = diagnostic.fixes
    assert fix.message == "use var"
    [edit] = fix.edits
    assert edit.range == diagnostic.range
    assert edit.new_text == case.expected_fix


def test_non_matching_statements_log_nothing(caplog: pytest.LogCaptureFixture) -> None:
    source = in_function(*(case.statement for case in NON_MATCHING_CASES))

    with caplog.at_level(logging.DEBUG, logger="nitme.lint"):
        result = run_lint(source)

    assert result.diagnostics == []
    assert [record for record in caplog.records if record.name.startswith("nitme.lint")] == []


def test_lint_is_idempotent_over_the_same_parse() -> None:
    parsed = parse_result(in_function("incorrect := []int{}"))

    first = run_lint("ignored", parse=parsed)
    second = run_lint("ignored", parse=parsed)

    assert first.parse is parsed
    assert first.diagnostics == second.diagnostics


def test_contract_violation_aborts_only_that_node(caplog: pytest.LogCaptureFixture) -> None:
    source = in_function("ptrs := []*int{}", "incorrect := []int{}")

    with caplog.at_level(logging.ERROR, logger="nitme.lint.runner"):
        result = run_lint(source)

    codes = [diagnostic.code for diagnostic in result.diagnostics]
    assert codes == ["LINT_INTERNAL_RULE_DEFECT", "LINT_STYLE_EMPTY_SLICE_DECLARATION"]

    defect = result.diagnostics[0]
    assert defect.severity == "error"
    assert defect.fixes == ()
    assert "`nitme`" in defect.message
    start = source.index("ptrs")
    assert defect.range.as_tuple() == (start, start + len("ptrs := []*int{}"))

    assert len(caplog.records) == 1
    assert "aborted the node" in caplog.records[0].getMessage()


@pytest.mark.parametrize("statement", ["names := []pkg.Name{}", "grid := [][]int{}"])
def test_non_identifier_element_types_are_defects(statement: str) -> None:
    result = run_lint(in_function(statement))

    assert [diagnostic.code for diagnostic in result.diagnostics] == ["LINT_INTERNAL_RULE_DEFECT"]


def test_diagnostics_are_sorted_by_position() -> None:
    source = in_function("b := []string{}", "a := []int{}")

    result = run_lint(source)

    starts = [diagnostic.range.start.value for diagnostic in result.diagnostics]
    assert starts == sorted(starts)
    assert [diagnostic.fixes[0].edits[0].new_text for diagnostic in result.diagnostics] == [
        "var b []string",
        "var a []int",
    ]


def test_syntax_errors_are_reported_and_analysis_still_runs() -> None:
    source = "package p\n\nfunc f() {\n\tincorrect := []int{}\n\tx := \n}\n"

    result = run_lint(source)

    codes = {diagnostic.code for diagnostic in result.diagnostics}
    assert "LINT_STYLE_EMPTY_SLICE_DECLARATION" in codes
    assert codes & {"PARSER_SYNTAX_ERROR", "PARSER_MISSING_TOKEN"}
    assert result.parse.has_errors is True


def test_broken_if_header_is_neither_reported_nor_fixed() -> None:
    source = "package p\n\nfunc f() {\n\tif s := []int{}; len(s) == 0\n}\n"

    lint = run_lint(source)
    fixed = run_fix(source)

    assert "LINT_STYLE_EMPTY_SLICE_DECLARATION" not in {d.code for d in lint.diagnostics}
    assert lint.parse.has_errors is True
    assert fixed.changed is False
    assert "if var" not in fixed.fixed_text


def test_permissive_mode_downgrades_syntax_errors_to_warnings() -> None:
    source = "package p\n\nfunc f() {\n\tx := \n}\n"

    result = run_lint(source, mode=ParseMode.PERMISSIVE)

    parser_diagnostics = [d for d in result.diagnostics if d.category == "parser"]
    assert parser_diagnostics
    assert all(diagnostic.severity == "warning" for diagnostic in parser_diagnostics)
    assert result.parse.has_errors is False


def test_custom_analyzer_is_passed_explicitly() -> None:
    seen: list[str] = []

    def run(node, report) -> None:
        seen.append(type(node).__name__)

    analyzer = replace(default_analyzer(), name="counting", run=run)

    result = run_lint(in_function("a := 1", "b = 2"), analyzer=analyzer)

    assert result.diagnostics == []
    assert seen == ["GoAssignStmt", "GoAssignStmt"]


def test_lint_rejects_analyzer_without_node_kinds() -> None:
    analyzer = Analyzer(name="empty", doc="", node_kinds=(), run=lambda node, report: None)

    try:
        run_lint("package p\n", analyzer=analyzer)
    except ValueError as exc:
        assert "requests no node kinds" in str(exc)
    else:
        raise AssertionError("Expected ValueError for analyzer without node kinds")


def test_lint_rejects_parse_with_mode() -> None:
    parsed = parse_result("package p\n")

    with pytest.raises(ValueError, match="Pass either parse or options/mode, not both"):
        run_lint("package p\n", parse=parsed, mode=ParseMode.STRICT)


def test_default_analyzer_descriptor() -> None:
    analyzer = default_analyzer()

    assert analyzer.name == "nitme"
    assert analyzer.doc == "This analyzer catches nits before your reviewer does."
    assert analyzer == default_analyzer()


def test_reports_are_plain_diagnostics() -> None:
    result = run_lint(in_function("incorrect := []int{}"))

    assert all(isinstance(diagnostic, Diagnostic) for diagnostic in result.diagnostics)
