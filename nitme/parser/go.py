"""High-level parse entrypoint for Go source text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from nitme.diagnostics import (
    PARSER_MISSING_TOKEN,
    PARSER_SYNTAX_ERROR,
    Diagnostic,
    sort_diagnostics,
)
from nitme.parser.options import ParseMode, ParserOptions
from nitme.text import TextRange, TextSize

if TYPE_CHECKING:
    from nitme.pipeline import GoParseResult

logger = logging.getLogger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())


@dataclass(frozen=True, slots=True)
class ParsedGoTree:
    """A tree-sitter tree plus the exact bytes it was parsed from."""

    tree: Tree
    source: bytes
    diagnostics: list[Diagnostic]

    @property
    def root(self) -> Node:
        return self.tree.root_node


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedGoTree:
    resolved_options = _resolve_options(options=options, mode=mode)

    source = text.encode("utf-8")
    tree = Parser(GO_LANGUAGE).parse(source)
    diagnostics = _syntax_diagnostics(tree.root_node, resolved_options)
    logger.debug("Parsed %d bytes of Go source with %d syntax diagnostics", len(source), len(diagnostics))

    return ParsedGoTree(tree=tree, source=source, diagnostics=diagnostics)


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> GoParseResult:
    from nitme.pipeline import GoParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    parsed = parse(text, options=resolved_options)
    return GoParseResult(
        source_text=text,
        parsed=parsed,
        options=resolved_options,
    )


def _syntax_diagnostics(root: Node, options: ParserOptions) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    if not root.has_error:
        return diagnostics

    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_missing:
            diagnostics.append(
                Diagnostic(
                    code=PARSER_MISSING_TOKEN.code,
                    message=f"{PARSER_MISSING_TOKEN.message} Expected `{node.type}`.",
                    range=TextRange.empty(TextSize(node.start_byte)),
                    severity=options.syntax_error_severity,
                    hint=PARSER_MISSING_TOKEN.hint,
                    category=PARSER_MISSING_TOKEN.category,
                )
            )
            continue
        if node.type == "ERROR":
            diagnostics.append(
                Diagnostic(
                    code=PARSER_SYNTAX_ERROR.code,
                    message=PARSER_SYNTAX_ERROR.message,
                    range=TextRange.from_bytes(node.start_byte, node.end_byte),
                    severity=options.syntax_error_severity,
                    hint=PARSER_SYNTAX_ERROR.hint,
                    category=PARSER_SYNTAX_ERROR.category,
                )
            )
            continue
        if node.has_error:
            stack.extend(reversed(node.children))

    return sort_diagnostics(diagnostics)
