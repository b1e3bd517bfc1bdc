"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from nitme.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace the source bytes in `range` with `new_text`."""

    range: TextRange
    new_text: str


@dataclass(frozen=True, slots=True)
class SuggestedFix:
    """A labelled remediation made of ordered, non-overlapping text edits."""

    message: str
    edits: tuple[TextEdit, ...]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the parser front-end and the analyzer."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    fixes: tuple[SuggestedFix, ...] = ()
