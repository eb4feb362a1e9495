from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from .ai import pick_move
from .board import CELL_CHARS, PLAYER_ONE, PLAYER_TWO, Player, player_char
from .deal import random_game
from .errors import ReversiError
from .layout import format_game, parse_game
from .moves import advance_turn, legal_moves, play_idx
from .solver import negamax, solve
from .state import Game

PUZZLE = (
    "--OOOOOO\n"
    "-**OOXXO\n"
    "*-OOOOOO\n"
    "XO*OXOOO\n"
    "XOOOXOOO\n"
    "XOXOXOOO\n"
    "XOOXXOOO\n"
    "*OXXXXO*"
)

PLAYER_CHOICES = {CELL_CHARS[PLAYER_ONE]: PLAYER_ONE, CELL_CHARS[PLAYER_TWO]: PLAYER_TWO}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Solve and generate Reversi puzzles')
    sub = parser.add_subparsers(dest='command', required=True)

    p_random = sub.add_parser('random', help='Make a random game')
    p_random.add_argument('--seed', type=int, default=None, help='RNG seed')
    p_random.add_argument('-b', '--backtrack', type=int, default=0, help='Undo this many final moves')
    p_random.add_argument('-s', '--slow', action='store_true', help='Show every ply as it is played')

    p_solve = sub.add_parser('solve', help='Solve a position')
    p_solve.add_argument('--file', default=None, help='Layout file (default: built-in puzzle, "-" for stdin)')
    p_solve.add_argument('--player', choices=sorted(PLAYER_CHOICES), default=None,
                         help='Side to move (default: header line or tile parity)')
    p_solve.add_argument('--no-validate', action='store_true', help='Skip the move-marker check')
    p_solve.add_argument('--moves', action='store_true', help='Print the score of every move')

    p_play = sub.add_parser('play', help='Play against the Monte Carlo AI')
    p_play.add_argument('--human', choices=sorted(PLAYER_CHOICES), default='X', help='Your side')
    p_play.add_argument('--difficulty', type=int, default=5, help='AI strength, 1-10')
    p_play.add_argument('--playouts', type=int, default=None, help='Playouts per candidate move')
    p_play.add_argument('--seed', type=int, default=None, help='AI RNG seed')
    return parser


def _show_slow(game: Game) -> None:
    time.sleep(0.5)
    print("\x1b[2J", end='')
    print(format_game(game, header=True))


def _cmd_random(args: argparse.Namespace) -> None:
    on_move = _show_slow if args.slow else None
    game, _ = random_game(seed=args.seed, backtrack=args.backtrack, on_move=on_move)
    print(format_game(game, header=True))


def _read_layout(path: Optional[str]) -> str:
    if path is None:
        return PUZZLE
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as fh:
        return fh.read()


def _cmd_solve(args: argparse.Namespace) -> None:
    player = PLAYER_CHOICES[args.player] if args.player else None
    game = parse_game(_read_layout(args.file), current_player=player, validate=not args.no_validate)
    print(format_game(game, header=True))
    if args.moves:
        for score, move in solve(game):
            print(f"{game.board.coord(move)} {score}")
    print(negamax(game))


def _prompt_human_move(game: Game) -> int:
    board = game.board
    moves = legal_moves(game)
    print('Your legal moves:', [board.coord(m) for m in moves])
    while True:
        text = input('Enter your move as x,y or x y: ').strip()
        sep = ',' if ',' in text else ' '
        try:
            x_s, y_s = [t for t in text.split(sep) if t != '']
            x, y = int(x_s), int(y_s)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        if board.on_board(x, y) and board.index(x, y) in moves:
            return board.index(x, y)
        print('Illegal move. Try again.')


def _announce_result(game: Game) -> None:
    ones, twos = game.score()
    winner: Optional[Player] = game.winning_player()
    print(f"Final score: X={ones} O={twos}")
    print('Draw!' if winner is None else f"Player {player_char(winner)} wins!")


def _cmd_play(args: argparse.Namespace) -> None:
    if not 1 <= args.difficulty <= 10:
        raise ReversiError(f"difficulty must be between 1 and 10, got {args.difficulty}")
    human = PLAYER_CHOICES[args.human]
    game = Game.new()
    ply = 0
    print(f"You play {args.human}. Player X moves first.")
    while True:
        before = game.current_player
        if not advance_turn(game):
            break
        if game.current_player != before:
            print(f"Player {player_char(before)} has no move and passes.")
        print(format_game(game, header=True))
        if game.current_player == human:
            move = _prompt_human_move(game)
        else:
            seed = None if args.seed is None else args.seed + ply
            move = pick_move(game, difficulty=args.difficulty, playouts=args.playouts, seed=seed)
            print(f"AI plays {game.board.coord(move)}")
        play_idx(game, move)
        ply += 1
    print(format_game(game, show_moves=False, header=True))
    _announce_result(game)


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    handlers = {'random': _cmd_random, 'solve': _cmd_solve, 'play': _cmd_play}
    try:
        handlers[args.command](args)
    except (ReversiError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1)
