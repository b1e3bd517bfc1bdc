"""Parse carrier shared by the lint, fix and check entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nitme.diagnostics import has_errors
from nitme.parser.go import ParsedGoTree
from nitme.parser.options import ParserOptions

if TYPE_CHECKING:
    from nitme.ast import Inspector
    from nitme.diagnostics import Diagnostic


@dataclass(slots=True)
class GoParseResult:
    """Go parse result for parse-once/consume-many workflows."""

    source_text: str
    parsed: ParsedGoTree
    options: ParserOptions
    _inspector: Inspector | None = field(default=None, init=False, repr=False)

    @property
    def source_bytes(self) -> bytes:
        return self.parsed.source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics)

    def inspector(self) -> Inspector:
        if self._inspector is None:
            from nitme.ast import Inspector

            self._inspector = Inspector(self.parsed)
        return self._inspector
