"""Byte-offset text model."""

from nitme.text.text import (
    LineColumn,
    TextRange,
    TextSize,
    line_column,
)

__all__ = [
    "LineColumn",
    "TextRange",
    "TextSize",
    "line_column",
]
