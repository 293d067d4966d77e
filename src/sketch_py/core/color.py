"""Color values for sketches."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from sketch_py.exceptions import InvalidColorError


@dataclass(frozen=True)
class Color:
    """An immutable RGB color.

    Channels outside ``0..255`` are rejected rather than clamped.

    Attributes:
        red: Red channel (0 to 255).
        green: Green channel (0 to 255).
        blue: Blue channel (0 to 255).
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        """Validate every channel."""
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidColorError(self.as_tuple(), f"{name} channel must be an integer")
            if not 0 <= value <= 255:
                raise InvalidColorError(self.as_tuple(), f"{name} channel must be between 0 and 255")

    @classmethod
    def coerce(cls, value: Any) -> Color:
        """Build a color from a ``Color`` or an RGB triple.

        Args:
            value: A color or a sequence of three channel values.

        Returns:
            The corresponding color.

        Raises:
            InvalidColorError: If the value is not a valid RGB triple.
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, str) or not isinstance(value, Sequence) or len(value) != 3:
            raise InvalidColorError(value, "expected an (r, g, b) triple")
        red, green, blue = value
        return cls(red, green, blue)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse a ``#RRGGBB`` string."""
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise InvalidColorError(value, "expected #RRGGBB")
        try:
            return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
        except ValueError as exc:
            raise InvalidColorError(value, "expected hexadecimal digits") from exc

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the color as an ``(r, g, b)`` tuple."""
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Return the color as an uppercase ``#RRGGBB`` string."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def __str__(self) -> str:
        return self.to_hex()


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
