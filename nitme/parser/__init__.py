"""Go parser front-end over tree-sitter."""

from nitme.parser.go import GO_LANGUAGE, ParsedGoTree, parse, parse_result
from nitme.parser.options import ParseMode, ParserOptions

__all__ = [
    "GO_LANGUAGE",
    "ParseMode",
    "ParsedGoTree",
    "ParserOptions",
    "parse",
    "parse_result",
]
