"""Vector rendering of sketches as SVG markup."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from sketch_py.exceptions import BackendIOError
from sketch_py.render.base import DrawContext

if TYPE_CHECKING:
    from sketch_py.core.models import Point
    from sketch_py.core.sketch import Sketch


def escape_xml(text: str) -> str:
    """Escape special XML characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def _fmt(value: float) -> str:
    return f"{value:g}"


class SvgContext(DrawContext):
    """Draw context that collects SVG elements in replay order."""

    name: ClassVar[str] = "svg"

    def __init__(self, sketch: Sketch) -> None:
        super().__init__(sketch)
        self.elements: list[str] = []

    def emit_line(self, start: Point, finish: Point) -> None:
        self.elements.append(
            f'  <line x1="{_fmt(start.x)}" y1="{_fmt(start.y)}" '
            f'x2="{_fmt(finish.x)}" y2="{_fmt(finish.y)}" '
            f'stroke="{self.stroke.to_hex()}"/>'
        )

    def emit_rect(self, origin: Point, width: float, height: float) -> None:
        self.elements.append(
            f'  <rect x="{_fmt(origin.x)}" y="{_fmt(origin.y)}" '
            f'width="{_fmt(width)}" height="{_fmt(height)}" '
            f'fill="{self.fill.to_hex()}" stroke="{self.stroke.to_hex()}"/>'
        )

    def emit_polygon(self, points: list[Point]) -> None:
        coords = " ".join(f"{_fmt(point.x)},{_fmt(point.y)}" for point in points)
        self.elements.append(
            f'  <polygon points="{coords}" fill="{self.fill.to_hex()}" stroke="{self.stroke.to_hex()}"/>'
        )

    def to_svg(self) -> str:
        """Return the complete SVG document."""
        sketch = self.sketch
        width, height = _fmt(sketch.width), _fmt(sketch.height)
        body = "\n".join(self.elements)
        return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg"
     width="{width}"
     height="{height}"
     viewBox="0 0 {width} {height}">
  <title>{escape_xml(sketch.title)}</title>
  <rect width="100%" height="100%" fill="{sketch.background.to_hex()}"/>
{body}
</svg>"""


class SvgBackend:
    """Backend that returns the sketch as SVG markup."""

    name = "svg"

    def open(self, sketch: Sketch) -> SvgContext:
        return SvgContext(sketch)

    def finalize(self, context: DrawContext) -> str:
        if not isinstance(context, SvgContext):
            msg = f"{self.name} backend cannot finalize a {context.name} context"
            raise BackendIOError(msg)
        return context.to_svg()
