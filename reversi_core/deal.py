from __future__ import annotations

import random
from typing import Callable, List, Optional, Tuple

from .board import WIDTH, HEIGHT
from .moves import advance_turn, legal_moves, play_idx
from .state import Game


def random_game(
    seed: Optional[int] = None,
    backtrack: int = 0,
    on_move: Optional[Callable[[Game], None]] = None,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> Tuple[Game, List[int]]:
    """
    Plays uniformly random legal moves from the opening until neither side can
    move, then replays all but the last `backtrack` moves. Returns the replayed
    position and its move list; handy for building endgame puzzles.
    """
    rng = random.Random(seed)
    game = Game.new(width, height)
    played: List[int] = []
    while advance_turn(game):
        if on_move is not None:
            on_move(game)
        moves = legal_moves(game)
        move = moves[rng.randrange(len(moves))]
        play_idx(game, move)
        played.append(move)

    if backtrack < 0 or backtrack > len(played):
        raise ValueError(f"Cannot backtrack {backtrack} moves in a game of {len(played)}")
    kept = played[:len(played) - backtrack]

    # Passes are re-applied between moves, as during the random playthrough.
    final = Game.new(width, height)
    for move in kept:
        advance_turn(final)
        play_idx(final, move)
    advance_turn(final)
    return final, kept
