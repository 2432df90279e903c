"""
Where on the terminal a grid is printed.

A :class:`PrintingPosition` pairs a horizontal and a vertical placement. Preset
placements (left/middle/right, top/middle/bottom) are resolved against the
terminal and grid size every time a grid is printed, so they follow the
terminal when it is resized. Custom placements are absolute, 0-based cell
coordinates of the grid's top-left corner.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions in character cells."""
    columns: int
    rows: int


class XAlignment(Enum):
    LEFT = 'left'
    MIDDLE = 'middle'
    RIGHT = 'right'
    CUSTOM = 'custom'


class YAlignment(Enum):
    TOP = 'top'
    MIDDLE = 'middle'
    BOTTOM = 'bottom'
    CUSTOM = 'custom'


def _check_offset(alignment: Enum, custom: Enum, offset: Optional[int]):
    if alignment is custom:
        if not isinstance(offset, int) or isinstance(offset, bool):
            raise TypeError(f"custom offset must be an int, got {offset!r}")
        if offset < 0:
            raise ValueError(f"custom offset must not be negative, got {offset}")
    elif offset is not None:
        raise ValueError(f"{alignment.value} position does not take an offset")


@dataclass(frozen=True)
class XPrintingPosition:
    """Horizontal placement of a grid."""
    alignment: XAlignment = XAlignment.LEFT
    offset: Optional[int] = None

    def __post_init__(self):
        _check_offset(self.alignment, XAlignment.CUSTOM, self.offset)

    @classmethod
    def left(cls) -> 'XPrintingPosition':
        return cls(XAlignment.LEFT)

    @classmethod
    def middle(cls) -> 'XPrintingPosition':
        return cls(XAlignment.MIDDLE)

    @classmethod
    def right(cls) -> 'XPrintingPosition':
        return cls(XAlignment.RIGHT)

    @classmethod
    def custom(cls, column: int) -> 'XPrintingPosition':
        return cls(XAlignment.CUSTOM, column)

    @classmethod
    def parse(cls, text: str) -> 'XPrintingPosition':
        """Parse ``left``, ``middle``, ``right`` or a column number."""
        return cls(*_parse(XAlignment, text))

    def resolve(self, grid_width: int, terminal_columns: int) -> int:
        """Return the absolute column of the grid's left edge."""
        match self.alignment:
            case XAlignment.LEFT:
                return 0
            case XAlignment.MIDDLE:
                return (terminal_columns - grid_width) // 2
            case XAlignment.RIGHT:
                return terminal_columns - grid_width
            case XAlignment.CUSTOM:
                return self.offset


@dataclass(frozen=True)
class YPrintingPosition:
    """Vertical placement of a grid."""
    alignment: YAlignment = YAlignment.BOTTOM
    offset: Optional[int] = None

    def __post_init__(self):
        _check_offset(self.alignment, YAlignment.CUSTOM, self.offset)

    @classmethod
    def top(cls) -> 'YPrintingPosition':
        return cls(YAlignment.TOP)

    @classmethod
    def middle(cls) -> 'YPrintingPosition':
        return cls(YAlignment.MIDDLE)

    @classmethod
    def bottom(cls) -> 'YPrintingPosition':
        return cls(YAlignment.BOTTOM)

    @classmethod
    def custom(cls, row: int) -> 'YPrintingPosition':
        return cls(YAlignment.CUSTOM, row)

    @classmethod
    def parse(cls, text: str) -> 'YPrintingPosition':
        """Parse ``top``, ``middle``, ``bottom`` or a row number."""
        return cls(*_parse(YAlignment, text))

    def resolve(self, grid_height: int, terminal_rows: int) -> int:
        """Return the absolute row of the grid's top edge."""
        match self.alignment:
            case YAlignment.TOP:
                return 0
            case YAlignment.MIDDLE:
                return (terminal_rows - grid_height) // 2
            case YAlignment.BOTTOM:
                return terminal_rows - grid_height
            case YAlignment.CUSTOM:
                return self.offset


def _parse(alignments, text: str):
    value = text.strip().lower()
    if value.isdigit():
        return alignments.CUSTOM, int(value)
    for alignment in alignments:
        if alignment is not alignments.CUSTOM and alignment.value == value:
            return alignment, None
    choices = ', '.join(a.value for a in alignments if a is not alignments.CUSTOM)
    raise ValueError(f"expected one of {choices} or a number, got {text!r}")


@dataclass(frozen=True)
class PrintingPosition:
    """Horizontal and vertical placement, bottom-left by default."""
    x: XPrintingPosition = field(default_factory=XPrintingPosition)
    y: YPrintingPosition = field(default_factory=YPrintingPosition)

    @classmethod
    def with_x_printing_position(cls, x: XPrintingPosition) -> 'PrintingPosition':
        return cls(x=x)

    @classmethod
    def with_y_printing_position(cls, y: YPrintingPosition) -> 'PrintingPosition':
        return cls(y=y)

    def replace_x(self, x: XPrintingPosition) -> 'PrintingPosition':
        return replace(self, x=x)

    def replace_y(self, y: YPrintingPosition) -> 'PrintingPosition':
        return replace(self, y=y)

    def resolve(self, grid_width: int, grid_height: int,
                terminal: TerminalSize) -> Tuple[int, int]:
        """Return the absolute ``(column, row)`` of the grid's top-left cell."""
        return (
            self.x.resolve(grid_width, terminal.columns),
            self.y.resolve(grid_height, terminal.rows),
        )
