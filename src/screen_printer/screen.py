"""
Terminal access for the printer, using the Blessed library.

:class:`Screen` is the only place that talks to the terminal: it answers
"how big is the terminal" and turns a batch of positioned writes into cursor
movements and text.
"""

import logging
from typing import Iterable, NamedTuple, Optional

from blessed import Terminal

from .errors import TerminalSizeUnavailable
from .grid import Grid
from .printing_position import TerminalSize

logger = logging.getLogger(__name__)


class Write(NamedTuple):
    """Text to print starting at an absolute, 0-based terminal cell."""
    column: int
    row: int
    text: str


class Screen:
    """Dimension query and output sink backed by a Blessed Terminal.

    Attributes:
        term: Blessed Terminal instance
    """

    def __init__(self, term: Optional[Terminal] = None):
        self.term = term or Terminal()

    def size(self) -> TerminalSize:
        """Return the current terminal size.

        Raises:
            TerminalSizeUnavailable: The output stream is not a terminal, or
                the terminal reports no usable size.
        """
        if not self.term.is_a_tty:
            raise TerminalSizeUnavailable("output is not attached to a terminal")
        columns, rows = self.term.width, self.term.height
        if columns <= 0 or rows <= 0:
            raise TerminalSizeUnavailable(
                f"terminal reported a size of {columns}x{rows}"
            )
        return TerminalSize(columns, rows)

    def write(self, writes: Iterable[Write]):
        """Move to each write's cell and print its text, then flush once."""
        count = 0
        for write in writes:
            print(self.term.move_xy(write.column, write.row) + write.text,
                  end='', file=self.term.stream)
            count += 1
        print('', end='', file=self.term.stream, flush=True)
        logger.debug("flushed %d writes", count)

    def print_over_previous_grid(self, grid: Grid):
        """Print ``grid`` over the one printed just above the cursor.

        Moves up ``height - 1`` rows and back to the first column before
        printing, so repeated calls redraw in place. Leave some blank lines
        before the first call so earlier output is not overwritten.
        """
        if grid.is_empty:
            return
        up = self.term.move_up(grid.height - 1) if grid.height > 1 else ''
        print(up + '\r' + str(grid), end='', file=self.term.stream, flush=True)
