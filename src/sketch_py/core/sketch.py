"""The sketch document and its builder functions.

Every builder function takes a sketch and returns a new one with exactly one
more entry in ``order``. Sketches are never mutated in place, so a base sketch
can be shared and extended along several independent chains.

Example:
    >>> sketch = new().add_line(start=(0, 0), finish=(100, 100)).set_fill((200, 120, 0))
    >>> sketch.order
    (2, 1)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from numbers import Real
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

import structlog

from sketch_py.core.color import WHITE, Color
from sketch_py.core.ids import next_id
from sketch_py.core.models import Fill, Line, Rect, Renderable, Square, Translate
from sketch_py.exceptions import InvalidItemError, InvalidSketchError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sketch_py.config import SketchConfig
    from sketch_py.render.base import Backend

T = TypeVar("T")

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Sketch:
    """An ordered collection of drawing items on a fixed-size canvas.

    Attributes:
        title: Display name, also used as the default output file stem.
        width: Canvas width.
        height: Canvas height.
        background: Canvas background color.
        items: Read-only mapping of identifier to item.
        order: Item identifiers, most recently added first.
    """

    title: str = "Sketch"
    width: int | float = 800
    height: int | float = 600
    background: Color = WHITE
    items: Mapping[int, Any] = field(default_factory=lambda: MappingProxyType({}))
    order: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Validate the canvas options and freeze the containers."""
        if not isinstance(self.title, str):
            msg = f"title must be a string, got {self.title!r}"
            raise InvalidSketchError(msg)
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real) or value <= 0:
                msg = f"{name} must be a positive number, got {value!r}"
                raise InvalidSketchError(msg)
        object.__setattr__(self, "background", Color.coerce(self.background))
        if not isinstance(self.items, MappingProxyType):
            object.__setattr__(self, "items", MappingProxyType(dict(self.items)))
        object.__setattr__(self, "order", tuple(self.order))
        missing = sorted(set(self.order) - set(self.items))
        if missing:
            msg = f"order refers to ids with no item: {missing}"
            raise InvalidSketchError(msg)

    def add_line(self, params: Mapping[str, Any] | None = None, /, **fields: Any) -> Sketch:
        """Return a copy with a line added. See :func:`add_line`."""
        return add_line(self, params, **fields)

    def add_rect(self, params: Mapping[str, Any] | None = None, /, **fields: Any) -> Sketch:
        """Return a copy with a rectangle added. See :func:`add_rect`."""
        return add_rect(self, params, **fields)

    def add_square(self, params: Mapping[str, Any] | None = None, /, **fields: Any) -> Sketch:
        """Return a copy with a square added. See :func:`add_square`."""
        return add_square(self, params, **fields)

    def add_item(self, item: Any) -> Sketch:
        """Return a copy with ``item`` added. See :func:`add_item`."""
        return add_item(self, item)

    def set_fill(self, color: Color | tuple[int, int, int]) -> Sketch:
        """Return a copy with a fill change added. See :func:`set_fill`."""
        return set_fill(self, color)

    def translate(self, dx: float, dy: float) -> Sketch:
        """Return a copy with a translation added. See :func:`translate`."""
        return translate(self, dx, dy)

    def render(self, backend: Backend[T]) -> T:
        """Replay this sketch against ``backend``. See :func:`sketch_py.render.render`."""
        from sketch_py.render.pipeline import render

        return render(self, backend)


def new(
    *,
    title: str | None = None,
    width: int | float | None = None,
    height: int | float | None = None,
    background: Color | tuple[int, int, int] | None = None,
    config: SketchConfig | None = None,
) -> Sketch:
    """Create an empty sketch.

    Options left as ``None`` fall back to ``config`` (or to the
    :class:`SketchConfig` defaults: "Sketch", 800x600, white).

    Raises:
        InvalidSketchError: If the canvas options are invalid.
        InvalidColorError: If the background is not an RGB triple.
    """
    from sketch_py.config import SketchConfig

    config = config or SketchConfig()
    return Sketch(
        title=config.title if title is None else title,
        width=config.width if width is None else width,
        height=config.height if height is None else height,
        background=Color.coerce(config.background if background is None else background),
    )


def add_item(sketch: Sketch, item: Any) -> Sketch:
    """Add any item to a sketch.

    This is the extension point for custom shapes: anything with an integer
    ``id`` that implements :class:`~sketch_py.core.models.Renderable` can be
    added. The helper functions for the built-in primitives are usually
    easier to use.

    If ``item.id`` is already present the stored item is kept, but the id is
    still prepended to ``order``, so it is replayed once per entry.

    Raises:
        InvalidItemError: If the item has no integer id or cannot be rendered.
    """
    item_id = getattr(item, "id", None)
    if isinstance(item_id, bool) or not isinstance(item_id, int):
        msg = f"{type(item).__name__} must have an integer id, got {item_id!r}"
        raise InvalidItemError(msg)
    if not isinstance(item, (Fill, Translate, Renderable)):
        msg = f"{type(item).__name__} does not implement render(context)"
        raise InvalidItemError(msg)

    if item_id in sketch.items:
        logger.warning("Item id already present, keeping existing item", item_id=item_id, title=sketch.title)
        items = sketch.items
    else:
        items = MappingProxyType({**sketch.items, item_id: item})
    return replace(sketch, items=items, order=(item_id, *sketch.order))


def _collect(params: Mapping[str, Any] | None, fields: Mapping[str, Any]) -> dict[str, Any]:
    return {**(params or {}), **fields}


def add_line(sketch: Sketch, params: Mapping[str, Any] | None = None, /, **fields: Any) -> Sketch:
    """Add a line from ``start`` to ``finish``.

    Raises:
        InvalidItemError: If a coordinate is missing or malformed.
    """
    line = Line.from_params(next_id(sketch), _collect(params, fields))
    return add_item(sketch, line)


def add_rect(sketch: Sketch, params: Mapping[str, Any] | None = None, /, **fields: Any) -> Sketch:
    """Add a rectangle with top-left ``origin`` and the given ``width`` and ``height``.

    Raises:
        InvalidItemError: If a field is missing or malformed.
    """
    rect = Rect.from_params(next_id(sketch), _collect(params, fields))
    return add_item(sketch, rect)


def add_square(sketch: Sketch, params: Mapping[str, Any] | None = None, /, **fields: Any) -> Sketch:
    """Add a square with top-left ``origin`` and side ``size``.

    Not meaningfully different from a rectangle with equal sides, but reads
    better.
    """
    square = Square.from_params(next_id(sketch), _collect(params, fields))
    return add_item(sketch, square)


def set_fill(sketch: Sketch, color: Color | tuple[int, int, int]) -> Sketch:
    """Change the fill color of every shape added after this call."""
    return add_item(sketch, Fill(next_id(sketch), Color.coerce(color)))


def translate(sketch: Sketch, dx: float, dy: float) -> Sketch:
    """Shift every shape added after this call by ``(dx, dy)``."""
    return add_item(sketch, Translate(next_id(sketch), dx, dy))
