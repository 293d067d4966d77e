"""Identifier allocation for sketch items."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sketch_py.core.sketch import Sketch


def next_id(sketch: Sketch) -> int:
    """Return the identifier the next added item will receive.

    The result depends only on the head of ``sketch.order``: ``1`` for an
    empty sketch, otherwise one more than the most recently added id. Ids
    stay gap-free and unique only while every item goes through the builder
    functions; inserting items with hand-picked ids is not guarded.

    Args:
        sketch: The sketch to allocate for.

    Returns:
        The next identifier.
    """
    if not sketch.order:
        return 1
    return sketch.order[0] + 1
