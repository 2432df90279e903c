"""
Screen Printer

Prints rectangular grids of characters to the terminal using the Blessed library.
On repeated prints only the cells that changed are rewritten, so live displays
update without flicker.
"""

from .errors import (
    PrintingError,
    NonRectangularGrid,
    DimensionMismatch,
    InvalidCharacter,
    GridLargerThanTerminal,
    GridOutOfBounds,
    TerminalSizeUnavailable,
)
from .grid import (
    Grid,
    EMPTY_GRID,
    create_grid_from_single_character,
    create_grid_from_full_character_list,
    create_grid_from_multiple_rows,
)
from .printing_position import (
    TerminalSize,
    XAlignment,
    YAlignment,
    XPrintingPosition,
    YPrintingPosition,
    PrintingPosition,
)
from .screen import Screen, Write
from .printer import Printer, diff_grids

__all__ = [
    'PrintingError',
    'NonRectangularGrid',
    'DimensionMismatch',
    'InvalidCharacter',
    'GridLargerThanTerminal',
    'GridOutOfBounds',
    'TerminalSizeUnavailable',
    'Grid',
    'EMPTY_GRID',
    'create_grid_from_single_character',
    'create_grid_from_full_character_list',
    'create_grid_from_multiple_rows',
    'TerminalSize',
    'XAlignment',
    'YAlignment',
    'XPrintingPosition',
    'YPrintingPosition',
    'PrintingPosition',
    'Screen',
    'Write',
    'Printer',
    'diff_grids',
]

__version__ = '0.1.0'
