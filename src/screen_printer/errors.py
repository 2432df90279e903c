"""
Exceptions raised while building or printing grids.

Every error derives from :class:`PrintingError` so callers can catch the whole
family in one place. A failed call never leaves a :class:`~screen_printer.Printer`
half-updated, so it is always safe to retry after handling one of these.
"""

from typing import Optional, Tuple


class PrintingError(Exception):
    """Base class for all errors raised by screen_printer."""


class NonRectangularGrid(PrintingError, ValueError):
    """A grid's rows are not all the same length.

    Attributes:
        row_index: Index of the first row whose length differs from row 0
        expected_width: Length of row 0
        actual_width: Length of the offending row
    """

    def __init__(self, row_index: int, expected_width: int, actual_width: int):
        self.row_index = row_index
        self.expected_width = expected_width
        self.actual_width = actual_width
        super().__init__(
            f"row {row_index} has {actual_width} characters, "
            f"expected {expected_width}"
        )


class DimensionMismatch(PrintingError, ValueError):
    """A flat character list does not fill ``width * height`` cells exactly."""

    def __init__(self, expected_count: int, actual_count: int):
        self.expected_count = expected_count
        self.actual_count = actual_count
        super().__init__(
            f"expected {expected_count} characters, got {actual_count}"
        )

    @property
    def too_many(self) -> bool:
        return self.actual_count > self.expected_count

    @property
    def too_few(self) -> bool:
        return self.actual_count < self.expected_count


class InvalidCharacter(PrintingError, ValueError):
    """A cell value is not exactly one printable character.

    Attributes:
        index: Position of the value in a flat list, or its column when
            ``row`` is set
        value: The rejected value
        row: Row of the value, if it was found inside a row
    """

    def __init__(self, index: int, value: object, row: Optional[int] = None):
        self.index = index
        self.value = value
        self.row = row
        where = f"item {index}" if row is None else f"row {row}, column {index}"
        super().__init__(
            f"{where} ({value!r}) is not a single printable character"
        )


class GridLargerThanTerminal(PrintingError):
    """The grid cannot fit on the terminal as currently sized."""

    def __init__(self, grid_width: int, grid_height: int,
                 terminal_columns: int, terminal_rows: int,
                 message: Optional[str] = None):
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.terminal_columns = terminal_columns
        self.terminal_rows = terminal_rows
        super().__init__(
            message or
            f"grid of {grid_width}x{grid_height} does not fit on a "
            f"{terminal_columns}x{terminal_rows} terminal"
        )


class GridOutOfBounds(GridLargerThanTerminal):
    """The grid fits the terminal, but not at the resolved origin.

    Only custom printing positions can produce this.
    """

    def __init__(self, grid_width: int, grid_height: int,
                 terminal_columns: int, terminal_rows: int,
                 origin: Tuple[int, int]):
        self.origin = origin
        super().__init__(
            grid_width, grid_height, terminal_columns, terminal_rows,
            f"grid of {grid_width}x{grid_height} at column {origin[0]}, "
            f"row {origin[1]} extends past a "
            f"{terminal_columns}x{terminal_rows} terminal",
        )


class TerminalSizeUnavailable(PrintingError, OSError):
    """The terminal's dimensions could not be determined."""
