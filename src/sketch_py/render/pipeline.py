"""Replay of a sketch against a rendering backend."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, TypeVar

import structlog

from sketch_py.core.models import Fill, Renderable, Translate
from sketch_py.core.types import ItemKind
from sketch_py.exceptions import InvalidItemError, SketchError, UnsupportedItemError
from sketch_py.render.base import DrawContext

if TYPE_CHECKING:
    from sketch_py.core.sketch import Sketch
    from sketch_py.render.base import Backend

T = TypeVar("T")

logger = structlog.get_logger(__name__)


def replay_order(sketch: Sketch) -> list[int]:
    """Return the sketch's item ids oldest first."""
    return list(reversed(sketch.order))


def apply_item(item: Any, context: DrawContext) -> DrawContext:
    """Apply one item to the draw context.

    Fill and translate items change the context state; shapes draw
    themselves with whatever state is active at this point of the replay.

    Raises:
        UnsupportedItemError: If the context cannot handle the item.
        InvalidItemError: If a shape does not return the draw context.
    """
    kind = getattr(item, "kind", None)
    if isinstance(kind, ItemKind) and kind not in context.supported_kinds:
        raise UnsupportedItemError(item, context.name)

    if isinstance(item, Fill):
        return context.set_fill(item.color)
    if isinstance(item, Translate):
        return context.translate(item.dx, item.dy)
    if isinstance(item, Renderable):
        result = item.render(context)
        if not isinstance(result, DrawContext):
            msg = f"{type(item).__name__} {item.id!r} returned {result!r} from render() instead of the draw context"
            raise InvalidItemError(msg)
        return result
    raise UnsupportedItemError(item, context.name)


def render(sketch: Sketch, backend: Backend[T]) -> T:
    """Replay ``sketch`` against ``backend`` and return the backend result.

    Items are applied in the order they were added, so a fill or translate
    only affects shapes added after it.

    Args:
        sketch: The sketch to render.
        backend: The backend that draws the items and produces the result.

    Returns:
        Whatever the backend's ``finalize`` returns.

    Raises:
        UnsupportedItemError: If an item cannot be handled by the backend.
        MissingDependencyError: If the backend's external tool is missing.
        BackendIOError: If the backend fails to produce its output.
    """
    start_time = time.perf_counter()

    with structlog.contextvars.bound_contextvars(sketch=sketch.title, backend=backend.name):
        try:
            context = backend.open(sketch)
            for item_id in replay_order(sketch):
                context = apply_item(sketch.items[item_id], context)
            result = backend.finalize(context)
        except SketchError as exc:
            logger.error("Sketch render failed", error=str(exc), error_type=type(exc).__name__)
            raise

        logger.info(
            "Sketch rendered",
            items=len(sketch.order),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
    return result
