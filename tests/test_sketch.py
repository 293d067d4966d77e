"""Tests for the sketch document, identifier allocation and builder functions."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

import pytest

from sketch_py import (
    Color,
    Fill,
    Line,
    Point,
    Rect,
    Sketch,
    SketchConfig,
    Square,
    Translate,
    add_item,
    add_line,
    add_rect,
    add_square,
    new,
    next_id,
    set_fill,
    translate,
)
from sketch_py.exceptions import InvalidItemError, InvalidSketchError


@dataclass(frozen=True)
class Blob:
    """An item with an id but no render method."""

    id: int


@dataclass(frozen=True)
class Dot:
    """A minimal custom shape."""

    id: int
    at: tuple[float, float]

    def render(self, context):  # noqa: ANN001, ANN201
        return context.draw_rect(Point.coerce(self.at), 1, 1)


class TestNew:
    """Tests for creating sketches."""

    def test_defaults(self, empty_sketch: Sketch) -> None:
        """Test the default sketch options."""
        assert empty_sketch.title == "Sketch"
        assert empty_sketch.width == 800
        assert empty_sketch.height == 600
        assert empty_sketch.background == Color(255, 255, 255)
        assert dict(empty_sketch.items) == {}
        assert empty_sketch.order == ()

    def test_custom_options(self) -> None:
        """Test overriding every option."""
        sketch = new(title="Poster", width=1024, height=768, background=(165, 122, 222))
        assert sketch.title == "Poster"
        assert (sketch.width, sketch.height) == (1024, 768)
        assert sketch.background == Color(165, 122, 222)

    def test_options_from_config(self) -> None:
        """Test that unset options fall back to the configuration."""
        config = SketchConfig(title="Configured", width=320, background=Color(0, 0, 0))
        sketch = new(height=240, config=config)
        assert sketch.title == "Configured"
        assert (sketch.width, sketch.height) == (320, 240)
        assert sketch.background == Color(0, 0, 0)

    @pytest.mark.parametrize("size", [0, -10, "800", True])
    def test_invalid_canvas_size(self, size: object) -> None:
        """Test that canvas dimensions must be positive numbers."""
        with pytest.raises(InvalidSketchError):
            new(width=size)  # type: ignore[arg-type]

    def test_invalid_title(self) -> None:
        """Test that the title must be text."""
        with pytest.raises(InvalidSketchError):
            new(title=42)  # type: ignore[arg-type]

    def test_order_must_refer_to_items(self) -> None:
        """Test that every id in the order needs a stored item."""
        with pytest.raises(InvalidSketchError, match=r"\[1\]"):
            Sketch(items={}, order=(1,))

    def test_fractional_canvas_is_valid(self) -> None:
        """Test that any positive size is accepted."""
        sketch = new(width=0.4, height=0.4)
        assert (sketch.width, sketch.height) == (0.4, 0.4)


class TestNextId:
    """Tests for identifier allocation."""

    def test_empty_sketch_starts_at_one(self, empty_sketch: Sketch) -> None:
        """Test the first identifier."""
        assert next_id(empty_sketch) == 1

    def test_follows_most_recent_id(self, scenario_sketch: Sketch) -> None:
        """Test that the next id is one past the head of the order."""
        assert next_id(scenario_sketch) == 4

    def test_is_pure(self, scenario_sketch: Sketch) -> None:
        """Test that allocation does not change the sketch."""
        assert next_id(scenario_sketch) == next_id(scenario_sketch)
        assert scenario_sketch.order == (3, 2, 1)


class TestBuilder:
    """Tests for the builder functions."""

    def test_scenario_order(self, scenario_sketch: Sketch) -> None:
        """Test that order is most recent first."""
        assert scenario_sketch.order == (3, 2, 1)
        assert scenario_sketch.items[1] == Line(1, Point(0, 0), Point(100, 100))
        assert scenario_sketch.items[2] == Fill(2, Color(200, 120, 0))
        assert scenario_sketch.items[3] == Rect(3, Point(40, 40), 30, 30)

    def test_ids_are_unique_and_increasing(self) -> None:
        """Test that every add call yields the next id without gaps."""
        sketch = new()
        calls = [
            lambda s: s.add_line(start=(0, 0), finish=(1, 1)),
            lambda s: s.set_fill((1, 2, 3)),
            lambda s: s.translate(5, 5),
            lambda s: s.add_square(origin=(0, 0), size=3),
            lambda s: s.add_rect(origin=(0, 0), width=1, height=2),
            lambda s: s.add_item(Dot(next_id(s), (4, 4))),
        ]
        for call in calls * 3:
            sketch = call(sketch)
        assert len(sketch.order) == len(calls) * 3
        assert list(reversed(sketch.order)) == list(range(1, len(calls) * 3 + 1))
        assert set(sketch.items) == set(sketch.order)

    def test_functions_and_methods_agree(self) -> None:
        """Test that the functional and chaining forms build the same sketch."""
        functional = translate(set_fill(add_square(new(), origin=(1, 1), size=2), (9, 9, 9)), 3, 4)
        chained = new().add_square(origin=(1, 1), size=2).set_fill((9, 9, 9)).translate(3, 4)
        assert functional == chained

    def test_params_mapping(self) -> None:
        """Test passing parameters as a mapping."""
        sketch = add_line(new(), {"start": (0, 0), "finish": (10, 5)})
        assert sketch.items[1] == Line(1, Point(0, 0), Point(10, 5))

    def test_square(self) -> None:
        """Test adding a square."""
        sketch = add_square(new(), origin=(100, 100), size=50)
        assert sketch.items[1] == Square(1, Point(100, 100), 50)

    def test_translate_item(self) -> None:
        """Test adding a translation."""
        sketch = translate(new(), 500, 500)
        assert sketch.items[1] == Translate(1, 500, 500)

    def test_builder_never_mutates(self, scenario_sketch: Sketch) -> None:
        """Test that the original sketch is left untouched."""
        before_order = scenario_sketch.order
        before_items = dict(scenario_sketch.items)

        extended = scenario_sketch.add_square(origin=(0, 0), size=5)

        assert scenario_sketch.order == before_order
        assert dict(scenario_sketch.items) == before_items
        assert extended.order == (4, 3, 2, 1)
        assert extended.title == scenario_sketch.title

    def test_branches_share_a_base(self, scenario_sketch: Sketch) -> None:
        """Test that two chains from one base are independent."""
        left = scenario_sketch.set_fill((0, 0, 0))
        right = scenario_sketch.translate(1, 1)
        assert left.items[4] == Fill(4, Color(0, 0, 0))
        assert right.items[4] == Translate(4, 1, 1)

    def test_items_are_read_only(self, scenario_sketch: Sketch) -> None:
        """Test that the items mapping cannot be modified directly."""
        with pytest.raises(TypeError):
            scenario_sketch.items[99] = Line(99, (0, 0), (1, 1))  # type: ignore[index]
        with pytest.raises(dataclasses.FrozenInstanceError):
            scenario_sketch.order = ()  # type: ignore[misc]

    def test_missing_field_is_rejected(self) -> None:
        """Test that malformed shapes never enter the sketch."""
        with pytest.raises(InvalidItemError, match="height"):
            add_rect(new(), origin=(0, 0), width=10)

    def test_malformed_coordinate_is_rejected(self) -> None:
        """Test that coordinates must be pairs."""
        with pytest.raises(InvalidItemError):
            add_line(new(), start=(0, 0, 0), finish=(1, 1))

    def test_invalid_fill_is_rejected(self) -> None:
        """Test that fill colors are validated."""
        with pytest.raises(ValueError):
            set_fill(new(), (0, 0, 256))


class TestAddItem:
    """Tests for the add_item extension point."""

    def test_custom_shape(self, empty_sketch: Sketch) -> None:
        """Test adding a user-defined shape."""
        sketch = add_item(empty_sketch, Dot(1, (5, 5)))
        assert sketch.order == (1,)
        assert sketch.items[1] == Dot(1, (5, 5))

    def test_item_without_render_is_rejected(self, empty_sketch: Sketch) -> None:
        """Test that items must be renderable."""
        with pytest.raises(InvalidItemError, match="render"):
            add_item(empty_sketch, Blob(1))

    def test_item_without_integer_id_is_rejected(self, empty_sketch: Sketch) -> None:
        """Test that items need an integer id."""
        with pytest.raises(InvalidItemError, match="id"):
            add_item(empty_sketch, Dot("one", (0, 0)))  # type: ignore[arg-type]

    def test_duplicate_id_keeps_first_item(self, scenario_sketch: Sketch) -> None:
        """Test that re-adding an id keeps the stored item but still records the id."""
        duplicate = Line(1, (5, 5), (6, 6))

        sketch = add_item(scenario_sketch, duplicate)

        assert sketch.items[1] == Line(1, Point(0, 0), Point(100, 100))
        assert sketch.order == (1, 3, 2, 1)
        assert len(sketch.items) == 3
