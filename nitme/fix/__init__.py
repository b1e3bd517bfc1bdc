"""Suggested-fix application."""

from nitme.fix.edits import (
    OverlappingEditsError,
    apply_text_edits,
    conflicts_with,
    edits_overlap,
)
from nitme.fix.runner import run_fix

__all__ = [
    "OverlappingEditsError",
    "apply_text_edits",
    "conflicts_with",
    "edits_overlap",
    "run_fix",
]
