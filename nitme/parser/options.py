"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum

from nitme.diagnostics import Severity


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Controls how syntax errors in the analyzed source are surfaced."""

    mode: ParseMode = ParseMode.STRICT
    syntax_error_severity: Severity = "error"

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(mode=mode, syntax_error_severity="warning")

        return ParserOptions(mode=mode, syntax_error_severity="error")
