"""Tests for colors, points and the built-in items."""

from __future__ import annotations

import dataclasses

import pytest

from sketch_py.core.color import BLACK, WHITE, Color
from sketch_py.core.models import Fill, Line, Point, Rect, Renderable, Square, Translate
from sketch_py.core.types import ItemKind
from sketch_py.exceptions import InvalidColorError, InvalidItemError, ValidationError


class TestColor:
    """Tests for the Color value."""

    def test_to_hex(self) -> None:
        """Test hex encoding of a primary color."""
        assert Color(255, 0, 0).to_hex() == "#FF0000"

    def test_to_hex_zero_pads_channels(self) -> None:
        """Test that single-digit channels are zero padded."""
        assert Color(1, 10, 200).to_hex() == "#010AC8"

    def test_constants(self) -> None:
        """Test the named colors."""
        assert WHITE.to_hex() == "#FFFFFF"
        assert BLACK.to_hex() == "#000000"

    def test_coerce_triple(self) -> None:
        """Test building a color from a tuple."""
        assert Color.coerce((200, 120, 0)) == Color(200, 120, 0)

    def test_coerce_color_is_identity(self) -> None:
        """Test that coercing a color returns it unchanged."""
        color = Color(1, 2, 3)
        assert Color.coerce(color) is color

    def test_from_hex(self) -> None:
        """Test parsing a hex string."""
        assert Color.from_hex("#a57ade") == Color(165, 122, 222)

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
    def test_out_of_range_is_rejected(self, channels: tuple[int, int, int]) -> None:
        """Test that channels outside 0-255 are rejected, not clamped."""
        with pytest.raises(InvalidColorError):
            Color.coerce(channels)

    @pytest.mark.parametrize("value", [(1, 2), "#FFFFFF", (1.5, 0, 0), (True, 0, 0), None])
    def test_malformed_values_are_rejected(self, value: object) -> None:
        """Test that anything but an integer triple is rejected."""
        with pytest.raises(InvalidColorError):
            Color.coerce(value)

    def test_invalid_color_is_a_validation_error(self) -> None:
        """Test the error hierarchy."""
        with pytest.raises(ValidationError):
            Color(300, 0, 0)

    def test_color_is_immutable(self) -> None:
        """Test that colors cannot be changed after creation."""
        color = Color(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            color.red = 4  # type: ignore[misc]


class TestPoint:
    """Tests for the Point model."""

    def test_coerce_pair(self) -> None:
        """Test building a point from a tuple."""
        assert Point.coerce((10, 20)) == Point(10, 20)

    def test_shifted(self) -> None:
        """Test moving a point."""
        assert Point(1, 2).shifted(10, -5) == Point(11, -3)

    def test_negative_and_float_coordinates(self) -> None:
        """Test that canvas coordinates may be negative or fractional."""
        point = Point.coerce((-10.5, 0.25))
        assert point.as_tuple() == (-10.5, 0.25)

    @pytest.mark.parametrize("value", [(1,), (1, 2, 3), ("a", 1), "xy", None])
    def test_malformed_pairs_are_rejected(self, value: object) -> None:
        """Test that non-pairs are rejected."""
        with pytest.raises(InvalidItemError):
            Point.coerce(value)


class TestItems:
    """Tests for the built-in item records."""

    def test_line_coerces_points(self) -> None:
        """Test that line endpoints become points."""
        line = Line(1, (0, 0), (100, 100))
        assert line.start == Point(0, 0)
        assert line.finish == Point(100, 100)
        assert line.kind is ItemKind.LINE

    def test_rect_fields(self) -> None:
        """Test rectangle fields."""
        rect = Rect(2, (40, 40), 30, 20)
        assert rect.origin == Point(40, 40)
        assert (rect.width, rect.height) == (30, 20)
        assert rect.kind is ItemKind.RECT

    def test_square_is_rect_with_equal_sides(self) -> None:
        """Test that a square exposes its size as width and height."""
        square = Square(3, (100, 100), 50)
        assert square.width == 50
        assert square.height == 50
        assert square.kind is ItemKind.SQUARE

    def test_negative_size_is_rejected(self) -> None:
        """Test that sizes must not be negative."""
        with pytest.raises(InvalidItemError, match="width"):
            Rect(1, (0, 0), -1, 10)

    def test_from_params_reports_missing_fields(self) -> None:
        """Test that missing parameters are named in the error."""
        with pytest.raises(InvalidItemError, match="finish"):
            Line.from_params(1, {"start": (0, 0)})

    def test_from_params_reports_unknown_fields(self) -> None:
        """Test that unexpected parameters are rejected."""
        with pytest.raises(InvalidItemError, match="colour"):
            Square.from_params(1, {"origin": (0, 0), "size": 5, "colour": "red"})

    def test_fill_coerces_color(self) -> None:
        """Test that fill items hold a Color."""
        fill = Fill(4, (0, 120, 255))
        assert fill.color == Color(0, 120, 255)
        assert fill.kind is ItemKind.FILL

    def test_translate_requires_numbers(self) -> None:
        """Test that translate offsets must be numeric."""
        assert Translate(5, 500, 500).kind is ItemKind.TRANSLATE
        with pytest.raises(InvalidItemError):
            Translate(5, "left", 0)

    def test_shapes_are_renderable(self) -> None:
        """Test that built-in shapes satisfy the render protocol and state items do not."""
        assert isinstance(Line(1, (0, 0), (1, 1)), Renderable)
        assert isinstance(Rect(1, (0, 0), 1, 1), Renderable)
        assert isinstance(Square(1, (0, 0), 1), Renderable)
        assert not isinstance(Fill(1, (0, 0, 0)), Renderable)
        assert not isinstance(Translate(1, 0, 0), Renderable)

    def test_items_are_immutable(self) -> None:
        """Test that items cannot be changed after creation."""
        line = Line(1, (0, 0), (1, 1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            line.start = Point(5, 5)  # type: ignore[misc]
