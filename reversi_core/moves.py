from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Board, Coord, EMPTY, Player, opponent
from .errors import InvalidMoveError
from .state import Game

# N, NE, E, SE, S, SW, W, NW with y growing downward
DIRECTIONS: Tuple[Coord, ...] = (
    (0, -1), (1, -1), (1, 0), (1, 1),
    (0, 1), (-1, 1), (-1, 0), (-1, -1),
)


def flips_in_direction(board: Board, player: Player, x: int, y: int, dx: int, dy: int) -> List[int]:
    """
    Walks from (x, y) along (dx, dy) over the opponent's tiles.
    Returns their indices if the run is closed by one of `player`'s tiles, else [].
    """
    opp = opponent(player)
    cx, cy = x + dx, y + dy
    if not board.on_board(cx, cy) or board.get(cx, cy) != opp:
        return []
    walked: List[int] = []
    while board.on_board(cx, cy) and board.get(cx, cy) == opp:
        walked.append(board.index(cx, cy))
        cx += dx
        cy += dy
    if not board.on_board(cx, cy):
        return []  # ran off the board without a sandwich
    if board.get(cx, cy) == player:
        return walked
    return []


def flip_set(board: Board, player: Player, x: int, y: int) -> List[int]:
    """All opponent tiles that flip if `player` takes (x, y); empty means the move is illegal."""
    if board.get(x, y) != EMPTY:
        return []
    flips: List[int] = []
    for dx, dy in DIRECTIONS:
        flips.extend(flips_in_direction(board, player, x, y, dx, dy))
    return flips


def is_valid_move(game: Game, x: int, y: int) -> bool:
    if not game.board.on_board(x, y):
        return False
    return len(flip_set(game.board, game.current_player, x, y)) > 0


def legal_moves(game: Game, player: Optional[Player] = None) -> List[int]:
    """Indices of every legal move for `player` (default: the side to move), in row-major order."""
    board = game.board
    who = game.current_player if player is None else player
    return [board.index(x, y) for x, y in board.coords() if flip_set(board, who, x, y)]


def play(game: Game, x: int, y: int) -> List[int]:
    """
    Places the current player's tile at (x, y), flips the sandwiched tiles and
    hands the turn to the opponent. Returns the flipped indices.
    The game is left untouched when the move is illegal.
    """
    board = game.board
    player = game.current_player
    flips = flip_set(board, player, x, y) if board.on_board(x, y) else []
    if not flips:
        raise InvalidMoveError(f"Invalid move for player {player} at {(x, y)}")
    board.set(x, y, player)
    for idx in flips:
        board.set_idx(idx, player)
    game.current_player = opponent(player)
    return flips


def play_idx(game: Game, index: int) -> List[int]:
    if not 0 <= index < game.board.size:
        raise InvalidMoveError(f"Invalid move for player {game.current_player} at index {index}")
    return play(game, *game.board.coord(index))


def apply_move(game: Game, index: int) -> Game:
    """Applies a move to a copy of the game and returns the copy."""
    successor = game.clone()
    play_idx(successor, index)
    return successor


@dataclass(frozen=True)
class Turn:
    """Either the player due to move next, or game_over with no player."""
    player: Optional[Player]
    game_over: bool = False


def game_status(game: Game) -> Turn:
    """
    Resolves the pass rule without mutating the game: the side to move keeps the
    turn if it has a move, the opponent gets it if only they can move, and the
    game is over when neither can.
    """
    if legal_moves(game):
        return Turn(game.current_player)
    other = game.other_player()
    if legal_moves(game, other):
        return Turn(other)
    return Turn(None, game_over=True)


def advance_turn(game: Game) -> bool:
    """Applies a pass when one is due. Returns False once the game is over."""
    status = game_status(game)
    if status.game_over:
        return False
    if status.player != game.current_player:
        game.swap_players()
    return True
