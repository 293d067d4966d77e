"""Rendering backends and the replay pipeline for sketch-py."""

from sketch_py.render.base import Backend, DrawContext
from sketch_py.render.magick import MagickBackend
from sketch_py.render.pipeline import apply_item, render, replay_order
from sketch_py.render.raster import PillowBackend
from sketch_py.render.recording import DrawCall, RecordingBackend
from sketch_py.render.svg import SvgBackend

__all__ = [
    "Backend",
    "DrawCall",
    "DrawContext",
    "MagickBackend",
    "PillowBackend",
    "RecordingBackend",
    "SvgBackend",
    "apply_item",
    "render",
    "replay_order",
]
