"""Core type definitions for sketch-py."""

from __future__ import annotations

from enum import StrEnum


class ItemKind(StrEnum):
    """Enumeration of the built-in item kinds a sketch can hold."""

    LINE = "line"
    RECT = "rect"
    SQUARE = "square"
    FILL = "fill"
    TRANSLATE = "translate"


SHAPE_KINDS = frozenset({ItemKind.LINE, ItemKind.RECT, ItemKind.SQUARE})
STATE_KINDS = frozenset({ItemKind.FILL, ItemKind.TRANSLATE})
