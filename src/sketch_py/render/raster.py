"""Raster rendering of sketches with Pillow."""

from __future__ import annotations

import io
import math
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import structlog
from PIL import Image, ImageDraw

from sketch_py.exceptions import BackendIOError
from sketch_py.render.base import DrawContext, output_filename

if TYPE_CHECKING:
    from sketch_py.core.models import Point
    from sketch_py.core.sketch import Sketch

logger = structlog.get_logger(__name__)


class PillowContext(DrawContext):
    """Draw context backed by an in-memory Pillow image."""

    name: ClassVar[str] = "pillow"

    def __init__(self, sketch: Sketch) -> None:
        super().__init__(sketch)
        size = (max(1, math.ceil(sketch.width)), max(1, math.ceil(sketch.height)))
        self.image = Image.new("RGB", size, sketch.background.as_tuple())
        self.draw = ImageDraw.Draw(self.image)

    def emit_line(self, start: Point, finish: Point) -> None:
        self.draw.line([start.as_tuple(), finish.as_tuple()], fill=self.stroke.as_tuple(), width=1)

    def emit_rect(self, origin: Point, width: float, height: float) -> None:
        self.draw.rectangle(
            [origin.x, origin.y, origin.x + width, origin.y + height],
            fill=self.fill.as_tuple(),
            outline=self.stroke.as_tuple(),
        )

    def emit_polygon(self, points: list[Point]) -> None:
        self.draw.polygon(
            [point.as_tuple() for point in points],
            fill=self.fill.as_tuple(),
            outline=self.stroke.as_tuple(),
        )

    def to_png(self) -> bytes:
        """Encode the current image as PNG bytes."""
        buffer = io.BytesIO()
        self.image.save(buffer, format="PNG")
        return buffer.getvalue()


class PillowBackend:
    """Backend that writes a PNG file using Pillow.

    Attributes:
        directory: Directory the image is written to.
        filename: Output file name; defaults to ``<title>.png``.
    """

    name = "pillow"

    def __init__(self, directory: str | Path = ".", filename: str | None = None) -> None:
        self.directory = Path(directory)
        self.filename = filename

    def open(self, sketch: Sketch) -> PillowContext:
        return PillowContext(sketch)

    def output_path(self, sketch: Sketch) -> Path:
        """Return where the image for ``sketch`` will be written."""
        return self.directory / (self.filename or output_filename(sketch.title, ".png"))

    def finalize(self, context: DrawContext) -> Path:
        """Write the image and return its path.

        Raises:
            BackendIOError: If the file cannot be written.
        """
        if not isinstance(context, PillowContext):
            msg = f"{self.name} backend cannot finalize a {context.name} context"
            raise BackendIOError(msg)
        path = self.output_path(context.sketch)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            context.image.save(path, format="PNG")
        except (OSError, ValueError) as exc:
            msg = f"Failed to write {path}: {exc}"
            raise BackendIOError(msg) from exc
        logger.debug("PNG written", path=str(path), size=context.image.size)
        return path
