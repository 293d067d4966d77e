"""Core domain models for sketch-py items."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from numbers import Real
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, Self, runtime_checkable

from sketch_py.core.color import Color
from sketch_py.core.types import ItemKind
from sketch_py.exceptions import InvalidItemError

if TYPE_CHECKING:
    from sketch_py.render.base import DrawContext


def _number(value: Any, name: str) -> float | int:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidItemError(f"{name} must be a number, got {value!r}")
    return value


def _size(value: Any, name: str) -> float | int:
    value = _number(value, name)
    if value < 0:
        raise InvalidItemError(f"{name} must not be negative, got {value!r}")
    return value


@dataclass(frozen=True)
class Point:
    """A coordinate pair in canvas space.

    Attributes:
        x: X-coordinate position.
        y: Y-coordinate position.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        _number(self.x, "x")
        _number(self.y, "y")

    @classmethod
    def coerce(cls, value: Any, name: str = "point") -> Point:
        """Build a point from a ``Point`` or an ``(x, y)`` pair.

        Raises:
            InvalidItemError: If the value is not a pair of numbers.
        """
        if isinstance(value, Point):
            return value
        if isinstance(value, str) or not isinstance(value, Sequence) or len(value) != 2:
            raise InvalidItemError(f"{name} must be an (x, y) pair, got {value!r}")
        x, y = value
        return cls(_number(x, f"{name}.x"), _number(y, f"{name}.y"))

    def shifted(self, dx: float, dy: float) -> Point:
        """Return this point moved by ``(dx, dy)``."""
        return Point(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[float, float]:
        """Return the point as an ``(x, y)`` tuple."""
        return (self.x, self.y)


@runtime_checkable
class Renderable(Protocol):
    """Protocol every shape must satisfy to take part in a render.

    Built-in shapes implement it directly; custom shapes passed to
    ``add_item`` implement the same method using the draw context primitives.
    """

    id: int

    def render(self, context: DrawContext) -> DrawContext:
        """Draw this shape onto ``context`` and return the context."""
        ...


@dataclass(frozen=True)
class Item:
    """Base class for everything stored in a sketch.

    Attributes:
        id: Identifier assigned when the item was added.
    """

    id: int
    kind: ClassVar[ItemKind]

    @classmethod
    def from_params(cls, item_id: int, params: Mapping[str, Any]) -> Self:
        """Build an item from a parameter mapping.

        Args:
            item_id: Identifier to assign.
            params: Field values, keyed by field name (``id`` excluded).

        Returns:
            The new item.

        Raises:
            InvalidItemError: If fields are missing or unknown.
        """
        expected = [f.name for f in fields(cls) if f.name != "id"]
        missing = [name for name in expected if name not in params]
        if missing:
            raise InvalidItemError(f"{cls.__name__} requires {', '.join(missing)}")
        unknown = sorted(set(params) - set(expected))
        if unknown:
            raise InvalidItemError(f"{cls.__name__} does not accept {', '.join(unknown)}")
        return cls(item_id, **{name: params[name] for name in expected})


@dataclass(frozen=True)
class Line(Item):
    """A straight line between two points.

    Attributes:
        start: Where the line begins.
        finish: Where the line ends.
    """

    start: Point
    finish: Point
    kind: ClassVar[ItemKind] = ItemKind.LINE

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", Point.coerce(self.start, "start"))
        object.__setattr__(self, "finish", Point.coerce(self.finish, "finish"))

    def render(self, context: DrawContext) -> DrawContext:
        return context.draw_line(self.start, self.finish)


@dataclass(frozen=True)
class Rect(Item):
    """An axis-aligned rectangle.

    Attributes:
        origin: Top-left corner.
        width: Width in canvas units.
        height: Height in canvas units.
    """

    origin: Point
    width: float
    height: float
    kind: ClassVar[ItemKind] = ItemKind.RECT

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", Point.coerce(self.origin, "origin"))
        _size(self.width, "width")
        _size(self.height, "height")

    def render(self, context: DrawContext) -> DrawContext:
        return context.draw_rect(self.origin, self.width, self.height)


@dataclass(frozen=True)
class Square(Item):
    """A rectangle whose width and height are both ``size``.

    Attributes:
        origin: Top-left corner.
        size: Length of each side.
    """

    origin: Point
    size: float
    kind: ClassVar[ItemKind] = ItemKind.SQUARE

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", Point.coerce(self.origin, "origin"))
        _size(self.size, "size")

    @property
    def width(self) -> float:
        return self.size

    @property
    def height(self) -> float:
        return self.size

    def render(self, context: DrawContext) -> DrawContext:
        return context.draw_rect(self.origin, self.size, self.size)


@dataclass(frozen=True)
class Fill(Item):
    """Changes the fill color of every shape added after it.

    Attributes:
        color: The new fill color.
    """

    color: Color
    kind: ClassVar[ItemKind] = ItemKind.FILL

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", Color.coerce(self.color))


@dataclass(frozen=True)
class Translate(Item):
    """Moves the origin for every shape added after it.

    Offsets accumulate: two translations of ``(10, 0)`` shift later shapes
    by ``(20, 0)``.

    Attributes:
        dx: Horizontal offset.
        dy: Vertical offset.
    """

    dx: float
    dy: float
    kind: ClassVar[ItemKind] = ItemKind.TRANSLATE

    def __post_init__(self) -> None:
        _number(self.dx, "dx")
        _number(self.dy, "dy")

