from __future__ import annotations

# Facade module that re-exports the Reversi core API.
# Single-responsibility modules live under reversi_core/*.

from reversi_core.board import (  # noqa: F401
    Board,
    Cell,
    Coord,
    Player,
    EMPTY,
    PLAYER_ONE,
    PLAYER_TWO,
    WIDTH,
    HEIGHT,
    SIZE,
    at_pos,
    opponent,
)
from reversi_core.state import Game  # noqa: F401
from reversi_core.errors import (  # noqa: F401
    ReversiError,
    InvalidMoveError,
    MalformedLayoutError,
    MovesMismatchError,
)
from reversi_core.moves import (  # noqa: F401
    DIRECTIONS,
    Turn,
    flips_in_direction,
    flip_set,
    is_valid_move,
    legal_moves,
    play,
    play_idx,
    apply_move,
    game_status,
    advance_turn,
)
from reversi_core.layout import (  # noqa: F401
    format_board,
    format_game,
    parse_game,
    iter_layout_cases,
)
from reversi_core.solver import (  # noqa: F401
    SolveResult,
    win_score,
    negamax,
    solve,
    solve_position,
    best_move,
)
from reversi_core.deal import random_game  # noqa: F401
from reversi_core.ai import greedy_move, playout, pick_move  # noqa: F401


def main() -> None:
    # CLI driver delegated to reversi_core.cli
    from reversi_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
