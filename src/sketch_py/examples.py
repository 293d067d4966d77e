"""Ready-made sketches, used by ``sketch example`` and the docs."""

from __future__ import annotations

from sketch_py.core.sketch import Sketch, new


def example() -> Sketch:
    """A small sketch exercising every built-in item kind."""
    return (
        new(background=(165, 122, 222))
        .add_line(start=(0, 0), finish=(100, 100))
        .set_fill((200, 120, 0))
        .add_rect(origin=(40, 40), width=30, height=30)
        .translate(500, 500)
        .set_fill((0, 120, 255))
        .add_square(origin=(100, 100), size=50)
    )
