"""Apply text edits onto source text."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from nitme.diagnostics import TextEdit


class OverlappingEditsError(ValueError):
    """Two edits touch the same bytes, so there is no single order to apply them in."""

    def __init__(self, first: TextEdit, second: TextEdit) -> None:
        super().__init__(
            f"Edits overlap: {first.range.as_tuple()} -> {first.new_text!r} "
            f"and {second.range.as_tuple()} -> {second.new_text!r}"
        )
        self.first = first
        self.second = second


def edits_overlap(first: TextEdit, second: TextEdit) -> bool:
    """True when both edits cannot be applied together.

    Identical edits do not conflict. Two insertions at the same offset do,
    since their relative order would be arbitrary.
    """
    if first == second:
        return False
    if first.range.is_empty() and second.range.is_empty():
        return first.range == second.range
    return first.range.ordering(second.range) == 0


def conflicts_with(edits: Iterable[TextEdit], accepted: Sequence[TextEdit]) -> bool:
    return any(edits_overlap(edit, other) for edit in edits for other in accepted)


def apply_text_edits(source: str, edits: Iterable[TextEdit]) -> str:
    """Replace byte ranges of the UTF-8 encoded source and decode the result."""
    data = source.encode("utf-8")
    ordered = sorted(set(edits), key=lambda edit: (edit.range, edit.new_text))

    for previous, current in zip(ordered, ordered[1:]):
        if edits_overlap(previous, current):
            raise OverlappingEditsError(previous, current)
    for edit in ordered:
        if edit.range.end.value > len(data):
            raise ValueError(
                f"Edit {edit.range.as_tuple()} is past the end of the source ({len(data)} bytes)"
            )

    chunks: list[bytes] = []
    cursor = 0
    for edit in ordered:
        chunks.append(data[cursor : edit.range.start.value])
        chunks.append(edit.new_text.encode("utf-8"))
        cursor = edit.range.end.value
    chunks.append(data[cursor:])
    return b"".join(chunks).decode("utf-8")
