"""Backend protocol and shared draw context state for sketch rendering."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Protocol, Self, TypeVar, runtime_checkable

from sketch_py.core.color import BLACK, Color
from sketch_py.core.models import Point
from sketch_py.core.types import SHAPE_KINDS, STATE_KINDS, ItemKind
from sketch_py.exceptions import InvalidItemError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sketch_py.core.sketch import Sketch

T_co = TypeVar("T_co", covariant=True)

DEFAULT_FILL = BLACK
STROKE_COLOR = BLACK
MIN_POLYGON_POINTS = 3

_UNSAFE_FILENAME = re.compile(r"[\\/\x00]")


def output_filename(title: str, suffix: str) -> str:
    """Return a file name for a sketch titled ``title``.

    Path separators are replaced so the file always lands in the output
    directory, whatever the title says.
    """
    stem = _UNSAFE_FILENAME.sub("_", title).strip(". ")
    return f"{stem or 'sketch'}{suffix}"


class DrawContext(ABC):
    """Accumulator threaded through a render.

    Holds the active fill color and the accumulated translation. Shapes call
    the public ``draw_*`` primitives with canvas coordinates; the context
    applies the active offset and hands the placed geometry to the backend
    specific ``emit_*`` hooks.

    A context belongs to a single render call and must not be shared.
    """

    name: ClassVar[str] = "context"
    supported_kinds: ClassVar[frozenset[ItemKind]] = SHAPE_KINDS | STATE_KINDS

    def __init__(self, sketch: Sketch) -> None:
        """Initialize the context for ``sketch``.

        Args:
            sketch: The sketch being rendered; supplies canvas size and background.
        """
        self.sketch = sketch
        self.fill: Color = DEFAULT_FILL
        self.stroke: Color = STROKE_COLOR
        self.offset: tuple[float, float] = (0, 0)

    def set_fill(self, color: Color) -> Self:
        """Make ``color`` the fill for every following shape."""
        self.fill = color
        return self

    def translate(self, dx: float, dy: float) -> Self:
        """Add ``(dx, dy)`` to the active offset."""
        self.offset = (self.offset[0] + dx, self.offset[1] + dy)
        return self

    def place(self, point: Point) -> Point:
        """Return ``point`` moved by the active offset."""
        return point.shifted(*self.offset)

    def draw_line(self, start: Point | tuple[float, float], finish: Point | tuple[float, float]) -> Self:
        start = Point.coerce(start, "start")
        finish = Point.coerce(finish, "finish")
        self.emit_line(self.place(start), self.place(finish))
        return self

    def draw_rect(self, origin: Point | tuple[float, float], width: float, height: float) -> Self:
        origin = Point.coerce(origin, "origin")
        self.emit_rect(self.place(origin), width, height)
        return self

    def draw_polygon(self, points: Iterable[Point | tuple[float, float]]) -> Self:
        """Draw a closed, filled polygon through ``points``.

        Raises:
            InvalidItemError: If fewer than three points are given.
        """
        placed = [self.place(Point.coerce(point)) for point in points]
        if len(placed) < MIN_POLYGON_POINTS:
            msg = f"a polygon needs at least {MIN_POLYGON_POINTS} points, got {len(placed)}"
            raise InvalidItemError(msg)
        self.emit_polygon(placed)
        return self

    @abstractmethod
    def emit_line(self, start: Point, finish: Point) -> None: ...

    @abstractmethod
    def emit_rect(self, origin: Point, width: float, height: float) -> None: ...

    @abstractmethod
    def emit_polygon(self, points: list[Point]) -> None: ...


@runtime_checkable
class Backend(Protocol[T_co]):
    """Protocol defining what a rendering backend must provide.

    ``open`` creates a context sized to the sketch canvas and filled with its
    background; ``finalize`` turns the context left after the last item into
    the backend result (a file path, markup, a live view handle).
    """

    name: str

    def open(self, sketch: Sketch) -> DrawContext:
        """Create the initial draw context for ``sketch``."""
        ...

    def finalize(self, context: DrawContext) -> T_co:
        """Produce the backend result from the final context.

        Raises:
            MissingDependencyError: If an external rendering tool is missing.
            BackendIOError: If the output cannot be produced.
        """
        ...
