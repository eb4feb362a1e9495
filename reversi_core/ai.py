from __future__ import annotations

import random
from typing import List, Optional, Set

from .board import Player, PLAYER_ONE
from .debug import debug_enabled
from .moves import advance_turn, apply_move, flip_set, legal_moves, play_idx
from .state import Game


def _corners(game: Game) -> Set[int]:
    b = game.board
    return {b.index(0, 0), b.index(b.width - 1, 0), b.index(0, b.height - 1), b.index(b.width - 1, b.height - 1)}


def greedy_move(game: Game, moves: List[int]) -> int:
    """Corner first, then the move flipping the most tiles, then the lowest index."""
    board = game.board
    corners = _corners(game)

    def _key(move: int):
        flips = flip_set(board, game.current_player, *board.coord(move))
        return (move in corners, len(flips), -move)

    return max(moves, key=_key)


def playout(game: Game, rng: random.Random, greed: float) -> Game:
    """Plays a copy of the game to the end, passing when required."""
    sim = game.clone()
    while advance_turn(sim):
        moves = legal_moves(sim)
        if rng.random() < greed:
            move = greedy_move(sim, moves)
        else:
            move = moves[rng.randrange(len(moves))]
        play_idx(sim, move)
    return sim


def tile_differential(game: Game, player: Player) -> int:
    ones, twos = game.score()
    return ones - twos if player == PLAYER_ONE else twos - ones


def pick_move(
    game: Game,
    difficulty: int = 5,
    playouts: Optional[int] = None,
    seed: Optional[int] = None,
) -> Optional[int]:
    """
    Monte Carlo move choice: every legal move is followed by `playouts` simulated
    games and the move with the best mean final tile differential wins.
    Higher difficulty means more playouts and greedier simulated play.
    Returns None when the side to move has no legal move.
    """
    if not 1 <= difficulty <= 10:
        raise ValueError(f"difficulty must be between 1 and 10, got {difficulty}")
    n = playouts if playouts is not None else difficulty * 8
    if n < 1:
        raise ValueError(f"playouts must be positive, got {n}")

    moves = legal_moves(game)
    if not moves:
        return None
    if len(moves) == 1:
        return moves[0]

    rng = random.Random(seed)
    greed = difficulty / 10
    mover = game.current_player
    debug = debug_enabled()
    best: Optional[int] = None
    best_mean = 0.0
    for move in moves:
        child = apply_move(game, move)
        total = sum(tile_differential(playout(child, rng, greed), mover) for _ in range(n))
        mean = total / n
        if debug:
            print(f"[ai] move={move} mean={mean:.2f} playouts={n}")
        if best is None or mean > best_mean:
            best, best_mean = move, mean
    return best
