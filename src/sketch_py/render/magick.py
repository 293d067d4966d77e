"""Raster rendering of sketches through the ImageMagick command line."""

from __future__ import annotations

import math
import shutil
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import structlog

from sketch_py.exceptions import BackendIOError, MissingDependencyError
from sketch_py.render.base import DrawContext, output_filename

if TYPE_CHECKING:
    from sketch_py.core.models import Point
    from sketch_py.core.sketch import Sketch

logger = structlog.get_logger(__name__)

INSTALL_HINT = (
    "Try installing it with `brew install imagemagick` on macOS "
    "or `apt install imagemagick` on Debian and Ubuntu."
)
EXECUTABLES = ("magick", "convert")


def _fmt(value: float) -> str:
    return f"{value:g}"


def _coords(point: Point) -> str:
    return f"{_fmt(point.x)},{_fmt(point.y)}"


class MagickContext(DrawContext):
    """Draw context that accumulates ImageMagick command line arguments.

    Fill changes are emitted lazily, right before the next shape that uses
    them, so consecutive fill items collapse into one ``-fill`` argument.
    """

    name: ClassVar[str] = "magick"

    def __init__(self, sketch: Sketch) -> None:
        super().__init__(sketch)
        self.arguments: list[str] = [
            "-size",
            f"{max(1, math.ceil(sketch.width))}x{max(1, math.ceil(sketch.height))}",
            f"xc:{sketch.background.to_hex()}",
            "-stroke",
            self.stroke.to_hex(),
        ]
        self._emitted_fill: str | None = None

    def _draw(self, primitive: str) -> None:
        fill = self.fill.to_hex()
        if fill != self._emitted_fill:
            self.arguments.extend(["-fill", fill])
            self._emitted_fill = fill
        self.arguments.extend(["-draw", primitive])

    def emit_line(self, start: Point, finish: Point) -> None:
        self._draw(f"line {_coords(start)} {_coords(finish)}")

    def emit_rect(self, origin: Point, width: float, height: float) -> None:
        corner = origin.shifted(width, height)
        self._draw(f"rectangle {_coords(origin)} {_coords(corner)}")

    def emit_polygon(self, points: list[Point]) -> None:
        self._draw("polygon " + " ".join(_coords(point) for point in points))


class MagickBackend:
    """Backend that shells out to ImageMagick to write a PNG file.

    Attributes:
        directory: Directory the image is written to.
        filename: Output file name; defaults to ``<title>.png``.
        executable: Explicit path to the ImageMagick binary; looked up on
            ``PATH`` when omitted.
    """

    name = "magick"

    def __init__(
        self,
        directory: str | Path = ".",
        filename: str | None = None,
        executable: str | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.filename = filename
        self.executable = executable

    def open(self, sketch: Sketch) -> MagickContext:
        return MagickContext(sketch)

    def find_executable(self) -> str:
        """Locate the ImageMagick binary.

        Raises:
            MissingDependencyError: If ImageMagick is not installed.
        """
        candidates = (self.executable,) if self.executable else EXECUTABLES
        for candidate in candidates:
            found = shutil.which(candidate)
            if found:
                return found
        raise MissingDependencyError("ImageMagick", INSTALL_HINT)

    def command(self, context: MagickContext) -> list[str]:
        """Build the full command line for ``context``."""
        path = self.directory / (self.filename or output_filename(context.sketch.title, ".png"))
        return [self.find_executable(), *context.arguments, str(path)]

    def finalize(self, context: DrawContext) -> Path:
        """Run ImageMagick and return the written path.

        Raises:
            MissingDependencyError: If ImageMagick is not installed.
            BackendIOError: If ImageMagick fails or the file cannot be written.
        """
        if not isinstance(context, MagickContext):
            msg = f"{self.name} backend cannot finalize a {context.name} context"
            raise BackendIOError(msg)
        command = self.command(context)
        path = Path(command[-1])
        logger.debug("Running ImageMagick", command=command)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            completed = subprocess.run(command, capture_output=True, text=True, check=False)  # noqa: S603
        except FileNotFoundError as exc:
            raise MissingDependencyError("ImageMagick", INSTALL_HINT) from exc
        except OSError as exc:
            msg = f"Failed to run ImageMagick: {exc}"
            raise BackendIOError(msg) from exc
        if completed.returncode != 0:
            msg = f"ImageMagick exited with status {completed.returncode}: {completed.stderr.strip()}"
            raise BackendIOError(msg)
        return path
