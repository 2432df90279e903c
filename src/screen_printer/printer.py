"""
The dynamic printer.

:class:`Printer` remembers the last grid it printed and where. Printing a new
grid of the same size at the same place only rewrites the cells that changed,
batched into one write per contiguous run of changed cells in a row. Any
change of size or position repaints the whole grid and blanks out whatever
the previous grid left behind.
"""

import logging
from typing import List, Optional, Tuple, Union

from blessed import Terminal

from .errors import GridLargerThanTerminal, GridOutOfBounds
from .grid import EMPTY_GRID, Grid
from .printing_position import (
    PrintingPosition,
    TerminalSize,
    XPrintingPosition,
    YPrintingPosition,
)
from .screen import Screen, Write

logger = logging.getLogger(__name__)

Origin = Tuple[int, int]


def diff_grids(previous: Grid, new: Grid) -> List[Write]:
    """Return the runs of cells that differ between two same-sized grids.

    Coordinates are relative to the grids' top-left cell. Each write covers
    one maximal run of adjacent changed cells within a row and carries the
    new characters for that run.
    """
    if (previous.width, previous.height) != (new.width, new.height):
        raise ValueError(
            f"cannot diff a {previous.width}x{previous.height} grid "
            f"against a {new.width}x{new.height} grid"
        )

    writes = []
    for row, (old_line, new_line) in enumerate(zip(previous.rows, new.rows)):
        if old_line == new_line:
            continue
        start = None
        for column, (old_char, new_char) in enumerate(zip(old_line, new_line)):
            if old_char != new_char:
                if start is None:
                    start = column
            elif start is not None:
                writes.append(Write(start, row, new_line[start:column]))
                start = None
        if start is not None:
            writes.append(Write(start, row, new_line[start:]))
    return writes


def _uncovered(start: int, end: int, cover_start: int, cover_end: int):
    """Yield the parts of ``[start, end)`` outside ``[cover_start, cover_end)``."""
    if cover_end <= start or cover_start >= end:
        yield start, end
        return
    if start < cover_start:
        yield start, cover_start
    if cover_end < end:
        yield cover_end, end


class Printer:
    """Prints grids to the terminal, rewriting only what changed.

    The printer is not thread-safe; one printer should own the terminal.

    Attributes:
        screen: Terminal query and output sink
        previous_grid: Last grid printed, or the empty grid
        previous_origin: Absolute (column, row) of previous_grid's top-left cell
    """

    def __init__(self, printing_position: Optional[PrintingPosition] = None,
                 *, term: Optional[Terminal] = None,
                 screen: Optional[Screen] = None):
        self.screen = screen or Screen(term)
        self._printing_position = printing_position or PrintingPosition()
        self.previous_grid: Grid = EMPTY_GRID
        self.previous_origin: Optional[Origin] = None

    @property
    def printing_position(self) -> PrintingPosition:
        return self._printing_position

    def replace_printing_position(self, printing_position: PrintingPosition):
        """Use ``printing_position`` from the next print on."""
        self._printing_position = printing_position

    def replace_x_printing_position(self, x: XPrintingPosition):
        self._printing_position = self._printing_position.replace_x(x)

    def replace_y_printing_position(self, y: YPrintingPosition):
        self._printing_position = self._printing_position.replace_y(y)

    def get_terminal_dimensions(self) -> TerminalSize:
        return self.screen.size()

    def dynamic_print(self, new_grid: Union[Grid, str]) -> List[Write]:
        """Print ``new_grid``, writing as little as possible.

        Args:
            new_grid: A Grid, or newline-delimited grid text

        Returns:
            The writes sent to the terminal, empty if nothing changed.

        Raises:
            NonRectangularGrid: ``new_grid`` is text with uneven rows.
            GridLargerThanTerminal: The grid does not fit on the terminal.
            GridOutOfBounds: The grid fits, but not at its custom position.
            TerminalSizeUnavailable: The terminal size cannot be read.

        Nothing is written and no state changes when an error is raised.
        """
        grid = new_grid if isinstance(new_grid, Grid) else Grid.from_text(new_grid)
        terminal = self.screen.size()

        if grid.width > terminal.columns or grid.height > terminal.rows:
            raise GridLargerThanTerminal(
                grid.width, grid.height, terminal.columns, terminal.rows
            )

        if grid.is_empty:
            writes = self._erase_writes(None, grid, terminal)
            if writes:
                self.screen.write(writes)
            self.reset_and_retain_printing_position()
            return writes

        origin = self._printing_position.resolve(grid.width, grid.height, terminal)
        column, row = origin
        if column + grid.width > terminal.columns or row + grid.height > terminal.rows:
            raise GridOutOfBounds(
                grid.width, grid.height, terminal.columns, terminal.rows, origin
            )

        previous = self.previous_grid
        if (
            previous.is_empty
            or previous.width != grid.width
            or previous.height != grid.height
            or origin != self.previous_origin
        ):
            logger.debug(
                "full repaint of %dx%d grid at %s (previously %dx%d at %s)",
                grid.width, grid.height, origin,
                previous.width, previous.height, self.previous_origin,
            )
            writes = self._erase_writes(origin, grid, terminal)
            writes.extend(
                Write(column, row + index, line) for index, line in enumerate(grid.rows)
            )
        else:
            writes = [
                Write(column + write.column, row + write.row, write.text)
                for write in diff_grids(previous, grid)
            ]
            logger.debug("%d changed runs in %dx%d grid", len(writes),
                         grid.width, grid.height)

        if writes:
            self.screen.write(writes)

        self.previous_grid = grid
        self.previous_origin = origin
        return writes

    def clear_grid(self) -> List[Write]:
        """Blank out the printed grid with spaces.

        The blank grid becomes the previous grid, so the next print at the
        same size and place only writes non-blank cells.
        """
        previous = self.previous_grid
        if previous.is_empty:
            return []

        writes = self._erase_writes(None, EMPTY_GRID, self.screen.size())
        if writes:
            self.screen.write(writes)
        self.previous_grid = Grid.filled(' ', previous.width, previous.height)
        return writes

    def reset(self):
        """Forget the printed grid and restore the default position."""
        self._printing_position = PrintingPosition()
        self.reset_and_retain_printing_position()

    def reset_and_retain_printing_position(self):
        """Forget the printed grid, keeping the current position."""
        self.previous_grid = EMPTY_GRID
        self.previous_origin = None

    def reset_with_position(self, printing_position: PrintingPosition):
        """Forget the printed grid and switch to ``printing_position``."""
        self._printing_position = printing_position
        self.reset_and_retain_printing_position()

    def _erase_writes(self, origin: Optional[Origin], grid: Grid,
                      terminal: TerminalSize) -> List[Write]:
        """Blank the cells of the previous grid that ``grid`` at ``origin`` won't cover.

        Cells that fell off the terminal after a resize are skipped.
        """
        previous = self.previous_grid
        if previous.is_empty:
            return []

        old_column, old_row = self.previous_origin
        new_column, new_row = origin or (0, 0)
        old_end = min(old_column + previous.width, terminal.columns)

        writes = []
        for row in range(old_row, min(old_row + previous.height, terminal.rows)):
            if new_row <= row < new_row + grid.height:
                spans = _uncovered(old_column, old_end,
                                   new_column, new_column + grid.width)
            else:
                spans = [(old_column, old_end)]
            writes.extend(
                Write(start, row, ' ' * (end - start))
                for start, end in spans if end > start
            )
        return writes
