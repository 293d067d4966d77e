"""Sketch-py: a declarative 2-D scene builder.

A sketch is an immutable, ordered list of drawing items: shapes, fill color
changes and translations. Builder functions return a new sketch on every
call; rendering replays the items oldest first against a backend, carrying
the active fill and offset from one item to the next.

Key Components:
    - Core: Sketch, Color, Point, Line, Rect, Square, Fill, Translate
    - Builder: new, add_line, add_rect, add_square, add_item, set_fill, translate
    - Rendering: render, PillowBackend, MagickBackend, SvgBackend, RecordingBackend
    - Live view: LiveBackend, LiveView (Litestar app served with uvicorn)

Quick Start:
    >>> from sketch_py import PillowBackend, new
    >>>
    >>> sketch = (
    ...     new(title="Demo")
    ...     .add_line(start=(0, 0), finish=(100, 100))
    ...     .set_fill((200, 120, 0))
    ...     .add_rect(origin=(40, 40), width=30, height=30)
    ... )
    >>> sketch.render(PillowBackend("out"))  # doctest: +SKIP
    PosixPath('out/Demo.png')

Custom Shapes:
    Anything with an integer ``id`` and a ``render(context)`` method can be
    added with ``add_item``. The method draws through ``context.draw_line``,
    ``context.draw_rect`` or ``context.draw_polygon`` and returns the context.
"""

from __future__ import annotations

from sketch_py.config import SketchConfig
from sketch_py.core import (
    BLACK,
    WHITE,
    Color,
    Fill,
    Item,
    ItemKind,
    Line,
    Point,
    Rect,
    Renderable,
    Sketch,
    Square,
    Translate,
    add_item,
    add_line,
    add_rect,
    add_square,
    new,
    next_id,
    set_fill,
    translate,
)
from sketch_py.exceptions import (
    BackendError,
    BackendIOError,
    InvalidColorError,
    InvalidItemError,
    InvalidSketchError,
    MissingDependencyError,
    SketchError,
    UnsupportedItemError,
    ValidationError,
)
from sketch_py.live import LiveBackend, LiveView
from sketch_py.render import (
    Backend,
    DrawCall,
    DrawContext,
    MagickBackend,
    PillowBackend,
    RecordingBackend,
    SvgBackend,
    render,
)

__all__ = [
    "BLACK",
    "WHITE",
    "Backend",
    "BackendError",
    "BackendIOError",
    "Color",
    "DrawCall",
    "DrawContext",
    "Fill",
    "InvalidColorError",
    "InvalidItemError",
    "InvalidSketchError",
    "Item",
    "ItemKind",
    "Line",
    "LiveBackend",
    "LiveView",
    "MagickBackend",
    "MissingDependencyError",
    "PillowBackend",
    "Point",
    "RecordingBackend",
    "Rect",
    "Renderable",
    "Sketch",
    "SketchConfig",
    "SketchError",
    "Square",
    "SvgBackend",
    "Translate",
    "UnsupportedItemError",
    "ValidationError",
    "add_item",
    "add_line",
    "add_rect",
    "add_square",
    "new",
    "next_id",
    "render",
    "set_fill",
    "translate",
]

__version__ = "0.1.0"
