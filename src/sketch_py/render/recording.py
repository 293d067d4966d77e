"""Backend that records draw calls instead of drawing them.

Useful for inspecting what a render would produce: every call carries the
geometry after translation and the fill that was active when it was made.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from sketch_py.exceptions import BackendIOError
from sketch_py.render.base import DrawContext

if TYPE_CHECKING:
    from sketch_py.core.color import Color
    from sketch_py.core.models import Point
    from sketch_py.core.sketch import Sketch


@dataclass(frozen=True)
class DrawCall:
    """A single primitive drawn during a render.

    Attributes:
        operation: One of ``line``, ``rect`` or ``polygon``.
        points: Placed points (line ends, rectangle origin, polygon vertices).
        fill: Fill color active when the call was made.
        offset: Accumulated translation active when the call was made.
        size: ``(width, height)`` for rectangles, otherwise ``None``.
    """

    operation: str
    points: tuple[Point, ...]
    fill: Color
    offset: tuple[float, float]
    size: tuple[float, float] | None = None


class RecordingContext(DrawContext):
    """Draw context that keeps a list of :class:`DrawCall` records."""

    name: ClassVar[str] = "recording"

    def __init__(self, sketch: Sketch) -> None:
        super().__init__(sketch)
        self.calls: list[DrawCall] = []

    def _record(self, operation: str, points: tuple[Point, ...], size: tuple[float, float] | None = None) -> None:
        self.calls.append(DrawCall(operation, points, self.fill, self.offset, size))

    def emit_line(self, start: Point, finish: Point) -> None:
        self._record("line", (start, finish))

    def emit_rect(self, origin: Point, width: float, height: float) -> None:
        self._record("rect", (origin,), (width, height))

    def emit_polygon(self, points: list[Point]) -> None:
        self._record("polygon", tuple(points))


class RecordingBackend:
    """Backend whose result is the list of recorded draw calls."""

    name = "recording"

    def open(self, sketch: Sketch) -> RecordingContext:
        return RecordingContext(sketch)

    def finalize(self, context: DrawContext) -> list[DrawCall]:
        if not isinstance(context, RecordingContext):
            msg = f"{self.name} backend cannot finalize a {context.name} context"
            raise BackendIOError(msg)
        return list(context.calls)
