from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

Player = int  # PLAYER_ONE or PLAYER_TWO
Cell = int  # EMPTY, or the Player occupying the cell
Coord = Tuple[int, int]  # (x, y), x rightward, y downward

EMPTY: Cell = 0
PLAYER_ONE: Player = 1
PLAYER_TWO: Player = 2

WIDTH = 8
HEIGHT = 8
SIZE = WIDTH * HEIGHT

CELL_CHARS = {EMPTY: '-', PLAYER_ONE: 'X', PLAYER_TWO: 'O'}


def opponent(player: Player) -> Player:
    """Returns the other player. opponent(opponent(p)) == p."""
    if player == PLAYER_ONE:
        return PLAYER_TWO
    if player == PLAYER_TWO:
        return PLAYER_ONE
    raise ValueError(f"Invalid player: {player!r}")


def player_char(player: Optional[Player]) -> str:
    if player is None:
        return '-'
    return CELL_CHARS[player]


def at_pos(x: int, y: int, width: int = WIDTH) -> int:
    """Linear index of (x, y) on a board `width` cells wide."""
    return x + y * width


@dataclass
class Board:
    """Rectangular grid of cells, stored row-major. Holds no notion of turn or legality."""
    width: int = WIDTH
    height: int = HEIGHT
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Invalid board size {self.width}x{self.height}")
        if not self.cells:
            self.cells = [EMPTY] * (self.width * self.height)
        elif len(self.cells) != self.width * self.height:
            raise ValueError('cells must hold exactly width * height values')

    @property
    def size(self) -> int:
        return self.width * self.height

    def index(self, x: int, y: int) -> int:
        return at_pos(x, y, self.width)

    def coord(self, index: int) -> Coord:
        """Inverse of index()."""
        return index % self.width, index // self.width

    def on_board(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        if not self.on_board(x, y):
            raise IndexError(f"Out of bounds: {(x, y)}")
        return self.cells[self.index(x, y)]

    def set(self, x: int, y: int, cell: Cell) -> None:
        if not self.on_board(x, y):
            raise IndexError(f"Out of bounds: {(x, y)}")
        self.cells[self.index(x, y)] = cell

    def get_idx(self, index: int) -> Cell:
        if not 0 <= index < self.size:
            raise IndexError(f"Out of bounds: index {index}")
        return self.cells[index]

    def set_idx(self, index: int, cell: Cell) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"Out of bounds: index {index}")
        self.cells[index] = cell

    def count(self, player: Player) -> int:
        return sum(1 for cell in self.cells if cell == player)

    def total_occupied(self) -> int:
        """Number of non-empty cells; tracks how many plies have been made."""
        return sum(1 for cell in self.cells if cell != EMPTY)

    def coords(self) -> Iterator[Coord]:
        """Iterates over all coordinates, left to right then top to bottom."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def __iter__(self) -> Iterator[Cell]:
        for x, y in self.coords():
            yield self.cells[self.index(x, y)]

    def copy(self) -> 'Board':
        return Board(self.width, self.height, list(self.cells))

    def pretty(self) -> str:
        """Generates a human-readable string representation of the board."""
        lines: List[str] = []
        for y in range(self.height):
            lines.append(''.join(CELL_CHARS[self.get(x, y)] for x in range(self.width)))
        return '\n'.join(lines)
