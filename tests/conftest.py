"""Pytest configuration and fixtures for sketch-py tests."""

from __future__ import annotations

import pytest

from sketch_py.core.sketch import Sketch, new
from sketch_py.render.recording import RecordingBackend

# Sketch fixtures


@pytest.fixture
def empty_sketch() -> Sketch:
    """Create a sketch with default options."""
    return new()


@pytest.fixture
def scenario_sketch() -> Sketch:
    """Create the line, fill, rectangle sketch used throughout the tests."""
    return (
        new()
        .add_line(start=(0, 0), finish=(100, 100))
        .set_fill((200, 120, 0))
        .add_rect(origin=(40, 40), width=30, height=30)
    )


# Backend fixtures


@pytest.fixture
def recorder() -> RecordingBackend:
    """Create a backend that records draw calls."""
    return RecordingBackend()
