from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .debug import debug_enabled
from .moves import apply_move, legal_moves
from .state import Game


def win_score(game: Game) -> int:
    """Forced-win value after a ply: fewer occupied cells (a faster win) scores higher."""
    return (game.board.size + 1 - game.board.total_occupied()) // 2


def _is_immediate_win(child: Game, mover: int) -> bool:
    return not legal_moves(child) and child.winning_player() == mover


def _negamax(game: Game, follow_passes: bool, stats: Dict[str, int]) -> int:
    stats['nodes'] += 1
    moves = legal_moves(game)

    if not moves:
        if follow_passes and legal_moves(game, game.other_player()):
            passed = game.clone()
            passed.swap_players()
            return -_negamax(passed, follow_passes, stats)
        return 0

    mover = game.current_player
    children: List[Game] = []
    for move in moves:
        child = apply_move(game, move)
        if _is_immediate_win(child, mover):
            return win_score(child)
        children.append(child)

    return max(-_negamax(child, follow_passes, stats) for child in children)


def negamax(game: Game, follow_passes: bool = True) -> int:
    """
    Exhaustive negamax value of the position for the side to move, in tile units.

    A move that leaves the opponent without a reply while the mover holds more
    tiles short-circuits to win_score(). With no legal move the value is 0,
    unless follow_passes is set and the opponent can still move, in which case
    the turn passes and the search carries on from the opponent's side.

    follow_passes=False gives the plain rule where any position with no legal
    move for the side to move scores 0, even when the opponent could go on.
    The caller's game is never mutated.
    """
    return _negamax(game, follow_passes, {'nodes': 0})


def solve(game: Game, follow_passes: bool = True) -> List[Tuple[int, int]]:
    """Per-move breakdown: (score, move_index) for every legal move, scored for the mover."""
    debug = debug_enabled()
    stats = {'nodes': 0}
    results: List[Tuple[int, int]] = []
    for move in legal_moves(game):
        child = apply_move(game, move)
        score = -_negamax(child, follow_passes, stats)
        if debug:
            print(f"[solve] move={move} {game.board.coord(move)} score={score}")
        results.append((score, move))
    if debug:
        print(f"[solve] nodes={stats['nodes']}")
    return results


@dataclass
class SolveResult:
    """Outcome of solving a position from the side to move's point of view."""
    score: int
    best_move: Optional[int]
    move_scores: List[Tuple[int, int]] = field(default_factory=list)


def solve_position(game: Game, follow_passes: bool = True) -> SolveResult:
    """
    Solves the position and picks a move.

    score is always negamax(game). move_scores is the solve() breakdown.
    A move that wins on the spot ranks ahead of every other move, so best_move
    always plays the line negamax() scores. Otherwise the breakdown score
    decides, lowest index on ties. best_move is None when the side to move
    must pass.
    """
    scores = solve(game, follow_passes)
    value = negamax(game, follow_passes)
    if not scores:
        return SolveResult(score=value, best_move=None)

    mover = game.current_player

    def _rank(item: Tuple[int, int]):
        score, move = item
        child = apply_move(game, move)
        if _is_immediate_win(child, mover):
            return (True, win_score(child), -move)
        return (False, score, -move)

    _, best = max(scores, key=_rank)
    return SolveResult(score=value, best_move=best, move_scores=scores)


def best_move(game: Game, follow_passes: bool = True) -> Optional[int]:
    return solve_position(game, follow_passes).best_move
