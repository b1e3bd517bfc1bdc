"""Lower tree-sitter Go nodes into the syntax model."""

from __future__ import annotations

from tree_sitter import Node

from nitme.ast.model import (
    GoArrayType,
    GoAssignStmt,
    GoCompositeLit,
    GoExpr,
    GoIdent,
    GoNode,
    GoOther,
)
from nitme.text import TextRange

ASSIGNMENT_KINDS: frozenset[str] = frozenset({"short_var_declaration", "assignment_statement"})
IDENT_KINDS: frozenset[str] = frozenset({"identifier", "type_identifier"})
ARRAY_TYPE_KINDS: frozenset[str] = frozenset({"slice_type", "array_type", "implicit_length_array_type"})
COMPOSITE_LITERAL_KINDS: frozenset[str] = frozenset({"composite_literal"})

_CLAUSE_HEADER_KINDS: frozenset[str] = frozenset(
    {"if_statement", "for_clause", "expression_switch_statement", "type_switch_statement"}
)


def lower_node(node: Node, source: bytes) -> GoNode:
    if node.type in ASSIGNMENT_KINDS:
        return lower_assignment(node, source)
    return lower_expression(node, source)


def lower_assignment(node: Node, source: bytes) -> GoAssignStmt:
    if node.type not in ASSIGNMENT_KINDS:
        raise ValueError(f"Expected an assignment node, got `{node.type}`")

    if node.type == "short_var_declaration":
        operator = ":="
    else:
        operator_node = node.child_by_field_name("operator")
        operator = operator_node.type if operator_node is not None else "="

    parent = node.parent
    return GoAssignStmt(
        lhs=_lower_expression_list(node.child_by_field_name("left"), source),
        rhs=_lower_expression_list(node.child_by_field_name("right"), source),
        operator=operator,
        range=_range(node),
        in_clause_header=parent is not None and parent.type in _CLAUSE_HEADER_KINDS,
        in_error_recovery=_in_error_recovery(node),
    )


def lower_expression(node: Node, source: bytes) -> GoExpr:
    if node.type in IDENT_KINDS:
        return GoIdent(name=_text(node, source), range=_range(node))

    if node.type in COMPOSITE_LITERAL_KINDS:
        return _lower_composite_literal(node, source)

    if node.type in ARRAY_TYPE_KINDS:
        return _lower_array_type(node, source)

    return _other(node, source)


def _lower_expression_list(node: Node | None, source: bytes) -> tuple[GoExpr, ...]:
    if node is None:
        return ()
    if node.type != "expression_list":
        return (lower_expression(node, source),)
    return tuple(lower_expression(child, source) for child in _significant_children(node))


def _lower_composite_literal(node: Node, source: bytes) -> GoCompositeLit:
    type_node = node.child_by_field_name("type")
    body = node.child_by_field_name("body")

    literal_type: GoExpr
    if type_node is None:
        literal_type = GoOther(kind="missing_type", text="", range=TextRange.from_bytes(node.start_byte, node.start_byte))
    else:
        literal_type = lower_expression(type_node, source)

    elements: tuple[GoExpr, ...] | None = None
    if body is not None:
        element_nodes = _significant_children(body)
        if element_nodes:
            elements = tuple(_lower_element(child, source) for child in element_nodes)

    return GoCompositeLit(type=literal_type, elements=elements, range=_range(node))


def _lower_element(node: Node, source: bytes) -> GoExpr:
    if node.type == "literal_element":
        inner = _significant_children(node)
        if len(inner) == 1:
            return lower_expression(inner[0], source)
    return _other(node, source)


def _lower_array_type(node: Node, source: bytes) -> GoArrayType:
    element_node = node.child_by_field_name("element")
    element: GoExpr
    if element_node is None:
        element = GoOther(kind="missing_element", text="", range=TextRange.from_bytes(node.end_byte, node.end_byte))
    else:
        element = lower_expression(element_node, source)

    length: GoExpr | None = None
    if node.type == "array_type":
        length_node = node.child_by_field_name("length")
        if length_node is not None:
            length = lower_expression(length_node, source)
        else:
            length = GoOther(kind="missing_length", text="", range=_range(node))
    elif node.type == "implicit_length_array_type":
        length = GoOther(kind="implicit_length", text="...", range=_range(node))

    return GoArrayType(element=element, length=length, range=_range(node))


def _significant_children(node: Node) -> list[Node]:
    return [child for child in node.named_children if child.type != "comment"]


def _other(node: Node, source: bytes) -> GoOther:
    return GoOther(kind=node.type, text=_text(node, source), range=_range(node))


def _text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _range(node: Node) -> TextRange:
    return TextRange.from_bytes(node.start_byte, node.end_byte)


def _in_error_recovery(node: Node) -> bool:
    previous = node.prev_sibling
    if previous is not None and previous.type == "ERROR":
        return True
    parent = node.parent
    while parent is not None:
        if parent.type == "ERROR":
            return True
        parent = parent.parent
    return False
