"""Core domain models for sketch-py."""

from sketch_py.core.color import BLACK, WHITE, Color
from sketch_py.core.ids import next_id
from sketch_py.core.models import Fill, Item, Line, Point, Rect, Renderable, Square, Translate
from sketch_py.core.sketch import (
    Sketch,
    add_item,
    add_line,
    add_rect,
    add_square,
    new,
    set_fill,
    translate,
)
from sketch_py.core.types import ItemKind

__all__ = [
    "BLACK",
    "WHITE",
    "Color",
    "Fill",
    "Item",
    "ItemKind",
    "Line",
    "Point",
    "Rect",
    "Renderable",
    "Sketch",
    "Square",
    "Translate",
    "add_item",
    "add_line",
    "add_rect",
    "add_square",
    "new",
    "next_id",
    "set_fill",
    "translate",
]
