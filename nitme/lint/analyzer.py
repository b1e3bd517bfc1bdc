"""Analyzer descriptor passed explicitly to the lint driver."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from nitme.ast import GoAssignStmt, GoNode
from nitme.lint.rules import Report, run_empty_slice_declaration

AnalyzerRun: TypeAlias = Callable[[GoNode, Report], None]

NITME_DOC = "This analyzer catches nits before your reviewer does."


@dataclass(frozen=True, slots=True)
class Analyzer:
    """Name, documentation, requested node kinds and per-node run function."""

    name: str
    doc: str
    node_kinds: tuple[type, ...]
    run: AnalyzerRun


def default_analyzer() -> Analyzer:
    return Analyzer(
        name="nitme",
        doc=NITME_DOC,
        node_kinds=(GoAssignStmt,),
        run=run_empty_slice_declaration,
    )


def validate_analyzer(analyzer: Analyzer) -> None:
    if not analyzer.name:
        raise ValueError("Analyzer has an empty name.")
    if not analyzer.node_kinds:
        raise ValueError(f"Analyzer `{analyzer.name}` requests no node kinds.")
    if not callable(analyzer.run):
        raise ValueError(f"Analyzer `{analyzer.name}` has a run function that is not callable.")
