"""Preorder inspection of a parsed Go tree, filtered by syntax-model node kind."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from tree_sitter import Node

from nitme.ast.lower import (
    ARRAY_TYPE_KINDS,
    ASSIGNMENT_KINDS,
    COMPOSITE_LITERAL_KINDS,
    IDENT_KINDS,
    lower_node,
)
from nitme.ast.model import GoArrayType, GoAssignStmt, GoCompositeLit, GoIdent, GoNode
from nitme.parser import ParsedGoTree

_SYNTAX_KINDS: dict[type, frozenset[str]] = {
    GoAssignStmt: ASSIGNMENT_KINDS,
    GoCompositeLit: COMPOSITE_LITERAL_KINDS,
    GoArrayType: ARRAY_TYPE_KINDS,
    GoIdent: IDENT_KINDS,
}


class Inspector:
    """Walks a parsed tree in document order and lowers the nodes a caller asked for."""

    def __init__(self, parsed: ParsedGoTree) -> None:
        self._parsed = parsed

    def syntax_nodes(self, node_kinds: Iterable[type]) -> Iterator[Node]:
        wanted = _syntax_kinds(node_kinds)
        stack = [self._parsed.root]
        while stack:
            node = stack.pop()
            if node.type in wanted:
                yield node
            stack.extend(reversed(node.children))

    def lowered(self, node_kinds: Iterable[type]) -> Iterator[GoNode]:
        for node in self.syntax_nodes(node_kinds):
            yield lower_node(node, self._parsed.source)

    def preorder(self, node_kinds: Iterable[type], visit: Callable[[GoNode], None]) -> None:
        for lowered in self.lowered(node_kinds):
            visit(lowered)


def _syntax_kinds(node_kinds: Iterable[type]) -> frozenset[str]:
    wanted: set[str] = set()
    for kind in node_kinds:
        syntax_kinds = _SYNTAX_KINDS.get(kind)
        if syntax_kinds is None:
            raise ValueError(f"Cannot inspect nodes of kind `{kind.__name__}`")
        wanted.update(syntax_kinds)
    if not wanted:
        raise ValueError("Inspector needs at least one node kind")
    return frozenset(wanted)
