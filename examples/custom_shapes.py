"""Example showing custom shapes and the live view.

A custom shape only needs an integer ``id`` and a ``render(context)``
method; it draws through the same primitives as the built-in shapes and
picks up whatever fill and translation are active where it was added.

Running the Example:
    python examples/custom_shapes.py

Then visit http://127.0.0.1:8000/ to see the sketch. The same module also
works with the CLI:

    sketch render examples.custom_shapes:poster --backend svg --output out
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sketch_py import LiveBackend, Sketch, SketchConfig, new, next_id

if TYPE_CHECKING:
    from sketch_py.render.base import DrawContext


@dataclass(frozen=True)
class Triangle:
    """An isosceles triangle standing on its base."""

    id: int
    origin: tuple[float, float]
    base: float
    height: float

    def render(self, context: DrawContext) -> DrawContext:
        x, y = self.origin
        return context.draw_polygon([(x + self.base / 2, y), (x, y + self.height), (x + self.base, y + self.height)])


def add_triangle(sketch: Sketch, origin: tuple[float, float], base: float, height: float) -> Sketch:
    """Builder helper in the style of the built-in ones."""
    return sketch.add_item(Triangle(next_id(sketch), origin, base, height))


def poster() -> Sketch:
    """Three rows of shapes, each row shifted down and recolored."""
    sketch = new(title="Poster", width=400, height=300, background=(245, 240, 230))
    colors = [(200, 120, 0), (0, 120, 255), (90, 170, 90)]
    for color in colors:
        sketch = sketch.set_fill(color).add_square(origin=(20, 20), size=60)
        sketch = add_triangle(sketch, (120, 20), 70, 60)
        sketch = sketch.add_line(start=(220, 20), finish=(360, 80)).translate(0, 90)
    return sketch


if __name__ == "__main__":
    from sketch_py.core.logging import configure_logging

    configure_logging(debug=True)
    view = poster().render(LiveBackend(SketchConfig(debug=True)))
    view.serve()
