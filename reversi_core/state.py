from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, Player, PLAYER_ONE, PLAYER_TWO, WIDTH, HEIGHT, opponent


@dataclass
class Game:
    """A board plus the player whose move is validated and applied next."""
    board: Board
    current_player: Player = PLAYER_ONE

    @classmethod
    def new(cls, width: int = WIDTH, height: int = HEIGHT) -> 'Game':
        """
        Canonical starting position: four centre tiles, diagonally opposed, One to move.
        On 8x8 One holds (4,3) and (3,4), Two holds (3,3) and (4,4), so One opens
        with (3,2), (2,3), (5,4) or (4,5).
        """
        if width < 2 or height < 2:
            raise ValueError(f"Board too small for the opening: {width}x{height}")
        board = Board(width, height)
        cx, cy = width // 2, height // 2
        board.set(cx - 1, cy - 1, PLAYER_TWO)
        board.set(cx, cy, PLAYER_TWO)
        board.set(cx, cy - 1, PLAYER_ONE)
        board.set(cx - 1, cy, PLAYER_ONE)
        return cls(board, PLAYER_ONE)

    def other_player(self) -> Player:
        return opponent(self.current_player)

    def clone(self) -> 'Game':
        # Copies share no mutable state, so search branches can play freely.
        return Game(self.board.copy(), self.current_player)

    def swap_players(self) -> None:
        """Passes the turn without touching the board."""
        self.current_player = opponent(self.current_player)

    def score(self) -> Tuple[int, int]:
        """Returns (player_one_tiles, player_two_tiles)."""
        return self.board.count(PLAYER_ONE), self.board.count(PLAYER_TWO)

    def winning_player(self) -> Optional[Player]:
        """Player with strictly more tiles, or None on a tie."""
        ones, twos = self.score()
        if ones > twos:
            return PLAYER_ONE
        if twos > ones:
            return PLAYER_TWO
        return None
