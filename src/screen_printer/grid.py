"""
Rectangular blocks of single characters.

A :class:`Grid` is the unit handed to :meth:`Printer.dynamic_print`. Its text
form is a newline-delimited string, one line per row, which is also what the
``create_grid_from_*`` helpers return.

Every cell must be one printable character. Control characters such as
``\\r``, ``\\t`` or ``\\x1b`` would move the cursor instead of filling a cell,
so they are rejected. Wide characters are not measured and should be avoided.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

from .errors import DimensionMismatch, InvalidCharacter, NonRectangularGrid

ROW_DELIMITER = '\n'

Row = Union[str, Sequence[object]]


def _check_rectangular(rows: Sequence[Sequence[object]]) -> int:
    """Return the common row length, raising if any row differs from row 0."""
    width = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != width:
            raise NonRectangularGrid(index, width, len(row))
    return width


def _format_cell(item: object, index: int, row=None) -> str:
    cell = str(item)
    if len(cell) != 1 or not cell.isprintable():
        raise InvalidCharacter(index, item, row)
    return cell


@dataclass(frozen=True)
class Grid:
    """An immutable rectangular table of characters.

    Attributes:
        rows: One string per row, all of identical length

    A grid without rows is the empty sentinel, used to mean that nothing has
    been printed yet.
    """
    rows: Tuple[str, ...] = ()

    def __post_init__(self):
        rows = tuple(self.rows)
        if rows:
            if _check_rectangular(rows) == 0:
                rows = ()
        for row_index, row in enumerate(rows):
            if not row.isprintable():
                column = next(i for i, c in enumerate(row) if not c.isprintable())
                raise InvalidCharacter(column, row[column], row_index)
        object.__setattr__(self, 'rows', rows)

    @classmethod
    def empty(cls) -> 'Grid':
        return EMPTY_GRID

    @classmethod
    def from_text(cls, text: str) -> 'Grid':
        """Parse newline-delimited text, one row per line."""
        if not text:
            return EMPTY_GRID
        return cls(tuple(text.split(ROW_DELIMITER)))

    @classmethod
    def from_rows(cls, rows: Iterable[Row]) -> 'Grid':
        """Build a grid from rows given as strings or sequences of cells.

        Cells in a sequence are formatted with ``str()`` like
        :meth:`from_characters`, and rows are compared by their cell count.
        """
        rows = [row if isinstance(row, str) else list(row) for row in rows]
        if rows:
            _check_rectangular(rows)
        return cls(tuple(
            row if isinstance(row, str) else
            ''.join(_format_cell(item, column, index) for column, item in enumerate(row))
            for index, row in enumerate(rows)
        ))

    @classmethod
    def from_characters(cls, characters: Sequence[object],
                        width: int, height: int) -> 'Grid':
        """Partition a flat, row-major list into ``height`` rows of ``width``.

        Each item is formatted with ``str()`` and must come out as exactly
        one character, so lists of single digits work as well as strings.
        """
        if width < 0 or height < 0:
            raise ValueError(f"grid dimensions must not be negative: {width}x{height}")
        expected = width * height
        if len(characters) != expected:
            raise DimensionMismatch(expected, len(characters))

        flat = ''.join(_format_cell(item, index) for index, item in enumerate(characters))
        return cls(tuple(flat[row * width:(row + 1) * width] for row in range(height)))

    @classmethod
    def filled(cls, character: str, width: int, height: int) -> 'Grid':
        """A ``width`` by ``height`` grid where every cell is ``character``."""
        _format_cell(character, 0)
        if width < 0 or height < 0:
            raise ValueError(f"grid dimensions must not be negative: {width}x{height}")
        return cls((character * width,) * height)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def cell(self, row: int, column: int) -> str:
        return self.rows[row][column]

    def __getitem__(self, row: int) -> str:
        return self.rows[row]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def __str__(self) -> str:
        return ROW_DELIMITER.join(self.rows)


EMPTY_GRID = Grid()


def create_grid_from_single_character(character: str, width: int, height: int) -> str:
    """Return the text of a grid filled with ``character``.

    >>> create_grid_from_single_character('a', 3, 2)
    'aaa\\naaa'
    """
    return str(Grid.filled(character, width, height))


def create_grid_from_full_character_list(characters: Sequence[object],
                                         width: int, height: int) -> str:
    """Return the text of a grid built from a flat, row-major list.

    >>> create_grid_from_full_character_list(list('abcdef'), 3, 2)
    'abc\\ndef'
    """
    return str(Grid.from_characters(characters, width, height))


def create_grid_from_multiple_rows(rows: Iterable[Row]) -> str:
    """Return the text of a grid built from explicit rows."""
    return str(Grid.from_rows(rows))
