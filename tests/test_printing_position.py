"""Tests for printing positions."""

import pytest
from screen_printer import (
    TerminalSize,
    XAlignment,
    YAlignment,
    XPrintingPosition,
    YPrintingPosition,
    PrintingPosition,
)


TERMINAL = TerminalSize(80, 24)


class TestXPrintingPosition:
    """Tests for horizontal placement."""

    def test_default_is_left(self):
        """Test that the default horizontal placement is left."""
        assert XPrintingPosition() == XPrintingPosition.left()

    def test_resolve(self):
        """Test every preset against an 80 column terminal."""
        assert XPrintingPosition.left().resolve(10, 80) == 0
        assert XPrintingPosition.middle().resolve(10, 80) == 35
        assert XPrintingPosition.right().resolve(10, 80) == 70
        assert XPrintingPosition.custom(12).resolve(10, 80) == 12

    def test_middle_truncates(self):
        """Test that an odd leftover rounds toward the left."""
        assert XPrintingPosition.middle().resolve(3, 80) == 38

    def test_negative_custom(self):
        """Test that a negative column is rejected."""
        with pytest.raises(ValueError):
            XPrintingPosition.custom(-1)

    def test_offset_without_custom(self):
        """Test that presets do not take an offset."""
        with pytest.raises(ValueError):
            XPrintingPosition(XAlignment.LEFT, 3)

    def test_parse(self):
        """Test parsing names and numbers."""
        assert XPrintingPosition.parse("Middle") == XPrintingPosition.middle()
        assert XPrintingPosition.parse("right") == XPrintingPosition.right()
        assert XPrintingPosition.parse("7") == XPrintingPosition.custom(7)

    def test_parse_invalid(self):
        """Test that unknown names are rejected."""
        with pytest.raises(ValueError):
            XPrintingPosition.parse("top")
        with pytest.raises(ValueError):
            XPrintingPosition.parse("custom")


class TestYPrintingPosition:
    """Tests for vertical placement."""

    def test_default_is_bottom(self):
        """Test that the default vertical placement is bottom."""
        assert YPrintingPosition() == YPrintingPosition.bottom()

    def test_resolve(self):
        """Test every preset against a 24 row terminal."""
        assert YPrintingPosition.top().resolve(2, 24) == 0
        assert YPrintingPosition.middle().resolve(2, 24) == 11
        assert YPrintingPosition.bottom().resolve(2, 24) == 22
        assert YPrintingPosition.custom(5).resolve(2, 24) == 5

    def test_custom_requires_int(self):
        """Test that custom rows must be integers."""
        with pytest.raises(TypeError):
            YPrintingPosition(YAlignment.CUSTOM, None)

    def test_parse(self):
        """Test parsing names and numbers."""
        assert YPrintingPosition.parse(" top ") == YPrintingPosition.top()
        assert YPrintingPosition.parse("0") == YPrintingPosition.custom(0)


class TestPrintingPosition:
    """Tests for combined placement."""

    def test_default_is_bottom_left(self):
        """Test that the default placement is bottom-left."""
        position = PrintingPosition()

        assert position.x == XPrintingPosition.left()
        assert position.y == YPrintingPosition.bottom()
        assert position.resolve(10, 2, TERMINAL) == (0, 22)

    def test_middle_middle(self):
        """Test that a 10x2 grid is centered on an 80x24 terminal."""
        position = PrintingPosition(XPrintingPosition.middle(), YPrintingPosition.middle())

        assert position.resolve(10, 2, TERMINAL) == (35, 11)

    def test_resolution_follows_terminal(self):
        """Test that presets are resolved against the size given at print time."""
        position = PrintingPosition(XPrintingPosition.right(), YPrintingPosition.bottom())

        assert position.resolve(10, 2, TERMINAL) == (70, 22)
        assert position.resolve(10, 2, TerminalSize(100, 30)) == (90, 28)

    def test_with_single_axis(self):
        """Test constructors that default the other axis."""
        assert PrintingPosition.with_x_printing_position(
            XPrintingPosition.right()
        ) == PrintingPosition(XPrintingPosition.right(), YPrintingPosition.bottom())
        assert PrintingPosition.with_y_printing_position(
            YPrintingPosition.top()
        ) == PrintingPosition(XPrintingPosition.left(), YPrintingPosition.top())

    def test_replace_axis(self):
        """Test that replacing one axis keeps the other."""
        position = PrintingPosition(XPrintingPosition.middle(), YPrintingPosition.top())

        replaced = position.replace_y(YPrintingPosition.custom(3))

        assert replaced.x == XPrintingPosition.middle()
        assert replaced.y == YPrintingPosition.custom(3)
        assert position.y == YPrintingPosition.top()
