"""Configuration for sketch-py."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from sketch_py.core.color import WHITE, Color
from sketch_py.exceptions import InvalidColorError, ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_PREFIX = "SKETCH_"
BACKENDS = ("pillow", "magick", "svg")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def _parse_number(value: str, name: str) -> int | float:
    try:
        number = float(value)
    except ValueError as exc:
        msg = f"{ENV_PREFIX}{name} must be a number, got {value!r}"
        raise ValidationError(msg) from exc
    return int(number) if number.is_integer() else number


def parse_color(value: str) -> Color:
    """Parse ``#RRGGBB`` or ``r,g,b`` into a color.

    Raises:
        InvalidColorError: If the text is neither form.
    """
    value = value.strip()
    if value.startswith("#"):
        return Color.from_hex(value)
    parts = [part.strip() for part in value.split(",")]
    try:
        channels = [int(part) for part in parts]
    except ValueError as exc:
        raise InvalidColorError(value, "expected r,g,b or #RRGGBB") from exc
    return Color.coerce(channels)


@dataclass
class SketchConfig:
    """Configuration for building and rendering sketches.

    Attributes:
        title: Default sketch title, also used as the output file stem.
        width: Default canvas width.
        height: Default canvas height.
        background: Default background color.
        output_dir: Directory raster and vector output is written to.
        backend: Default static backend used by the CLI (pillow, magick, or svg).
        host: Interface the live view binds to.
        port: Port the live view listens on.
        debug: Enable debug level logging.
        json_logs: Output logs as JSON instead of colored console lines.

    Example:
        >>> config = SketchConfig(title="Poster", width=1024, height=768)
        >>> config.backend
        'pillow'
    """

    title: str = "Sketch"
    width: int | float = 800
    height: int | float = 600
    background: Color = field(default_factory=lambda: WHITE)
    output_dir: Path = field(default_factory=Path.cwd)
    backend: str = "pillow"
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    json_logs: bool = False

    def __post_init__(self) -> None:
        """Normalize colors and paths, and check the backend name."""
        self.background = Color.coerce(self.background)
        self.output_dir = Path(self.output_dir)
        if self.backend not in BACKENDS:
            msg = f"Unknown backend {self.backend!r}; expected one of {', '.join(BACKENDS)}"
            raise ValidationError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SketchConfig:
        """Build a configuration from ``SKETCH_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            The configuration, with unset variables left at their defaults.

        Raises:
            ValidationError: If a variable holds an unusable value.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(f"{ENV_PREFIX}{name}")
            return value if value else None

        kwargs: dict[str, object] = {}
        if (title := get("TITLE")) is not None:
            kwargs["title"] = title
        if (width := get("WIDTH")) is not None:
            kwargs["width"] = _parse_number(width, "WIDTH")
        if (height := get("HEIGHT")) is not None:
            kwargs["height"] = _parse_number(height, "HEIGHT")
        if (background := get("BACKGROUND")) is not None:
            kwargs["background"] = parse_color(background)
        if (output_dir := get("OUTPUT_DIR")) is not None:
            kwargs["output_dir"] = Path(output_dir)
        if (backend := get("BACKEND")) is not None:
            kwargs["backend"] = backend.lower()
        if (host := get("HOST")) is not None:
            kwargs["host"] = host
        if (port := get("PORT")) is not None:
            kwargs["port"] = int(_parse_number(port, "PORT"))
        if (debug := get("DEBUG")) is not None:
            kwargs["debug"] = _parse_bool(debug)
        if (json_logs := get("JSON_LOGS")) is not None:
            kwargs["json_logs"] = _parse_bool(json_logs)
        return cls(**kwargs)  # type: ignore[arg-type]
