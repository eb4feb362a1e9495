from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .board import Board, Player, PLAYER_ONE, PLAYER_TWO, WIDTH, HEIGHT, CELL_CHARS, player_char
from .errors import MalformedLayoutError, MovesMismatchError
from .moves import legal_moves
from .state import Game

MOVE_MARK = '*'
HEADER_PREFIX = 'Current player:'
CHAR_CELLS = {ch: cell for cell, ch in CELL_CHARS.items()}


def format_board(board: Board) -> str:
    return board.pretty()


def format_game(game: Game, show_moves: bool = True, header: bool = False) -> str:
    """Renders the grid row by row, marking the side to move's legal moves with '*'."""
    board = game.board
    marks = set(legal_moves(game)) if show_moves else set()
    lines: List[str] = []
    if header:
        lines.append(f"{HEADER_PREFIX} {player_char(game.current_player)}")
    for y in range(board.height):
        row: List[str] = []
        for x in range(board.width):
            idx = board.index(x, y)
            row.append(MOVE_MARK if idx in marks else CELL_CHARS[board.cells[idx]])
        lines.append(''.join(row))
    return '\n'.join(lines)


def _parse_header(line: str) -> Player:
    ch = line[len(HEADER_PREFIX):].strip()
    if ch == CELL_CHARS[PLAYER_ONE]:
        return PLAYER_ONE
    if ch == CELL_CHARS[PLAYER_TWO]:
        return PLAYER_TWO
    raise MalformedLayoutError(f"Unknown player in header: {ch!r}")


def parse_game(
    text: str,
    current_player: Optional[Player] = None,
    validate: bool = True,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> Game:
    """
    Builds a Game from a text layout ('X', 'O', '-' and the '*' move marker).

    Rows and columns beyond the board are rejected, as is any other character.
    Missing rows and short rows leave the remaining cells empty. An optional
    'Current player: X' first line sets the side to move; an explicit
    current_player wins over it, and with neither the side to move is taken
    from the parity of the occupied cells.

    With validate=True the '*' markers must match the recomputed legal moves
    exactly, otherwise MovesMismatchError is raised.
    """
    rows = text.replace('\r\n', '\n').rstrip('\n').split('\n') if text.strip() else []
    header_player: Optional[Player] = None
    if rows and rows[0].startswith(HEADER_PREFIX):
        header_player = _parse_header(rows[0])
        rows = rows[1:]

    board = Board(width, height)
    recorded: List[int] = []
    for y, row in enumerate(rows):
        if y >= height:
            raise MalformedLayoutError(f"Too many rows: expected at most {height}")
        for x, ch in enumerate(row):
            if x >= width:
                raise MalformedLayoutError(f"Too many columns in row {y}: expected at most {width}")
            if ch == MOVE_MARK:
                recorded.append(board.index(x, y))
            elif ch in CHAR_CELLS:
                board.set(x, y, CHAR_CELLS[ch])
            else:
                raise MalformedLayoutError(f"Unrecognised character {ch!r} at {(x, y)}")

    if current_player is None:
        current_player = header_player
    if current_player is None:
        current_player = PLAYER_ONE if board.total_occupied() % 2 == 0 else PLAYER_TWO
    game = Game(board, current_player)

    if validate:
        expected = sorted(legal_moves(game))
        if expected != sorted(recorded):
            raise MovesMismatchError(expected, sorted(recorded))
    return game


def iter_layout_cases(text: str, height: int = HEIGHT) -> Iterator[Tuple[bool, str]]:
    """
    Yields (should_fail, layout) pairs from a fixture file made of chunks of
    height + 1 lines: a 'nofail' or 'fail' line followed by the grid.
    """
    lines = text.replace('\r\n', '\n').split('\n')
    while lines and lines[-1] == '':
        lines.pop()
    chunk = height + 1
    for start in range(0, len(lines), chunk):
        case = lines[start:start + chunk]
        if len(case) != chunk:
            raise ValueError(f"Incomplete test case at line {start + 1}")
        if case[0] == 'nofail':
            should_fail = False
        elif case[0] == 'fail':
            should_fail = True
        else:
            raise ValueError(f"Invalid test case header {case[0]!r} at line {start + 1}")
        yield should_fail, '\n'.join(case[1:])
