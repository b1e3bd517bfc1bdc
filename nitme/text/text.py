from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Byte offset into UTF-8 encoded source, or a byte length."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open byte range [start, end) in UTF-8 encoded source.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset.value, offset.value)

    @staticmethod
    def from_bytes(start_byte: int, end_byte: int) -> "TextRange":
        """Create a TextRange from raw byte offsets, as reported by a parser."""
        return TextRange(start_byte, end_byte)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def ordering(self, other: "TextRange") -> Literal[-1, 0, 1]:
        """Compare this range to another range for ordering.

        Returns:
        - -1 if this range is before the other range
        - 0 if the ranges overlap
        - 1 if this range is after the other range
        """
        if self._end <= other._start:
            return -1
        elif other._end <= self._start:
            return 1
        else:
            return 0

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


@dataclass(frozen=True, slots=True)
class LineColumn:
    """One-based line and byte column, the way Go tools print positions."""

    line: int
    column: int


def line_column(source: bytes, offset: TextSize) -> LineColumn:
    """Resolve a byte offset into a one-based line/column pair."""
    if offset.value > len(source):
        raise ValueError(f"Offset {offset.value} is past the end of the source ({len(source)} bytes)")
    prefix = source[: offset.value]
    line_start = prefix.rfind(b"\n") + 1
    return LineColumn(line=prefix.count(b"\n") + 1, column=offset.value - line_start + 1)
