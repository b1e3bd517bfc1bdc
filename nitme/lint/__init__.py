"""Empty slice declaration analyzer and its lint driver."""

from nitme.lint.analyzer import Analyzer, default_analyzer, validate_analyzer
from nitme.lint.rules import (
    EmptySliceMatch,
    RuleContractError,
    build_empty_slice_diagnostic,
    match_empty_slice_declaration,
    run_empty_slice_declaration,
)
from nitme.lint.runner import run_lint

__all__ = [
    "Analyzer",
    "EmptySliceMatch",
    "RuleContractError",
    "build_empty_slice_diagnostic",
    "default_analyzer",
    "match_empty_slice_declaration",
    "run_empty_slice_declaration",
    "run_lint",
    "validate_analyzer",
]
