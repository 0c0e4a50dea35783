from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .errors import OutOfBounds

Coord = Tuple[int, int]

BOARD_SIZE = 8

EMPTY = 0
BLACK = 1
WHITE = 2

CELL_VALUES = (EMPTY, BLACK, WHITE)
PLAYER_NAMES = {BLACK: 'black', WHITE: 'white'}
_SYMBOLS = {EMPTY: '.', BLACK: 'B', WHITE: 'W'}


def opponent(player: int) -> int:
    """Returns the other color."""
    return WHITE if player == BLACK else BLACK


def player_name(player: Optional[int]) -> Optional[str]:
    return PLAYER_NAMES.get(player) if player is not None else None


def parse_player(value) -> int:
    """Accepts 'black'/'white' (any case) or the numeric constants."""
    if isinstance(value, str):
        key = value.strip().lower()
        for color, name in PLAYER_NAMES.items():
            if key == name:
                return color
        if key.isdigit():
            value = int(key)
    if value in (BLACK, WHITE):
        return int(value)
    raise ValueError(f'Unknown player: {value!r}')


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


def _empty_grid() -> List[List[int]]:
    return [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


@dataclass
class Board:
    """The 8x8 grid of cells. Owned by a single game session and mutated in place."""
    grid: List[List[int]] = field(default_factory=_empty_grid)

    def __post_init__(self) -> None:
        if len(self.grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.grid):
            raise ValueError(f'Board must be {BOARD_SIZE}x{BOARD_SIZE}')
        for row in self.grid:
            for cell in row:
                if cell not in CELL_VALUES:
                    raise ValueError(f'Invalid cell value: {cell!r}')

    @classmethod
    def standard(cls) -> 'Board':
        """Creates the standard four-disc opening position."""
        board = cls()
        board.grid[3][3] = WHITE
        board.grid[3][4] = BLACK
        board.grid[4][3] = BLACK
        board.grid[4][4] = WHITE
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> 'Board':
        """
        Builds a board from 8 rows of cell values. Rows may be lists of the
        numeric constants or strings using 'B', 'W' and '.'.
        """
        lookup = {sym: val for val, sym in _SYMBOLS.items()}
        grid: List[List[int]] = []
        for row in rows:
            if isinstance(row, str):
                row = row.replace(' ', '')
                try:
                    grid.append([lookup[ch.upper()] for ch in row])
                except KeyError as e:
                    raise ValueError(f'Invalid cell symbol: {e.args[0]!r}') from None
            elif isinstance(row, (list, tuple)):
                if not all(isinstance(v, int) and not isinstance(v, bool) for v in row):
                    raise ValueError(f'Invalid row: {row!r}')
                grid.append(list(row))
            else:
                raise ValueError(f'Invalid row: {row!r}')
        return cls(grid=grid)

    def at(self, r: int, c: int) -> int:
        """Gets the occupant of a cell."""
        if not in_bounds(r, c):
            raise OutOfBounds(r, c)
        return self.grid[r][c]

    def set(self, r: int, c: int, value: int) -> None:
        if not in_bounds(r, c):
            raise OutOfBounds(r, c)
        if value not in CELL_VALUES:
            raise ValueError(f'Invalid cell value: {value!r}')
        self.grid[r][c] = value

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates in row-major order."""
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                yield (r, c)

    def empty_cells(self) -> Iterable[Coord]:
        for r, c in self.coords():
            if self.grid[r][c] == EMPTY:
                yield (r, c)

    def count(self, color: int) -> int:
        return sum(row.count(color) for row in self.grid)

    def copy(self) -> 'Board':
        return Board(grid=[list(row) for row in self.grid])

    def rows(self) -> List[List[int]]:
        return [list(row) for row in self.grid]

    def pretty(self, highlight: Optional[Iterable[Coord]] = None) -> str:
        """Generates a human-readable board with row/column indices."""
        marks: Set[Coord] = set(highlight or ())
        lines: List[str] = ['  ' + ' '.join(str(c) for c in range(BOARD_SIZE))]
        for r in range(BOARD_SIZE):
            row: List[str] = []
            for c in range(BOARD_SIZE):
                cell = self.grid[r][c]
                if cell == EMPTY and (r, c) in marks:
                    row.append('*')
                else:
                    row.append(_SYMBOLS[cell])
            lines.append(f'{r} ' + ' '.join(row))
        return '\n'.join(lines)
