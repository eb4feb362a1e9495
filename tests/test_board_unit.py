import unittest

from game import (
    Board,
    Game,
    EMPTY,
    PLAYER_ONE,
    PLAYER_TWO,
    at_pos,
    opponent,
)


class TestPlayers(unittest.TestCase):
    def test_given_each_player_when_taking_opponent_twice_then_same_player(self):
        for p in (PLAYER_ONE, PLAYER_TWO):
            self.assertNotEqual(opponent(p), p)
            self.assertEqual(opponent(opponent(p)), p)

    def test_given_non_player_when_taking_opponent_then_raises(self):
        with self.assertRaises(ValueError):
            opponent(EMPTY)


class TestBoard(unittest.TestCase):
    def test_given_new_board_when_inspecting_then_all_empty(self):
        board = Board()
        self.assertEqual((board.width, board.height, board.size), (8, 8, 64))
        self.assertEqual(board.total_occupied(), 0)
        self.assertTrue(all(cell == EMPTY for cell in board))

    def test_given_coords_when_indexing_then_row_major(self):
        board = Board()
        self.assertEqual(board.index(3, 2), 19)
        self.assertEqual(at_pos(2, 3), 26)
        self.assertEqual(board.coord(19), (3, 2))
        self.assertEqual(board.coord(63), (7, 7))

    def test_given_rectangular_board_when_indexing_then_uses_width(self):
        board = Board(5, 3)
        self.assertEqual(board.size, 15)
        self.assertEqual(board.index(4, 2), 14)
        self.assertEqual(board.coord(14), (4, 2))
        self.assertTrue(board.on_board(4, 2))
        self.assertFalse(board.on_board(5, 0))
        self.assertFalse(board.on_board(0, 3))

    def test_given_negative_or_large_coords_when_checking_then_off_board(self):
        board = Board()
        self.assertFalse(board.on_board(-1, 0))
        self.assertFalse(board.on_board(0, -1))
        self.assertFalse(board.on_board(8, 0))
        self.assertTrue(board.on_board(7, 7))

    def test_given_out_of_range_access_when_get_or_set_then_index_error(self):
        board = Board()
        with self.assertRaises(IndexError):
            board.get(-1, 0)
        with self.assertRaises(IndexError):
            board.set(0, 8, PLAYER_ONE)
        with self.assertRaises(IndexError):
            board.get_idx(64)

    def test_given_writes_when_iterating_then_row_major_and_restartable(self):
        board = Board()
        board.set(1, 0, PLAYER_ONE)
        board.set(0, 1, PLAYER_TWO)
        board.set_idx(63, PLAYER_TWO)
        cells = list(board)
        self.assertEqual(len(cells), 64)
        self.assertEqual(cells[1], PLAYER_ONE)
        self.assertEqual(cells[8], PLAYER_TWO)
        self.assertEqual(cells[63], PLAYER_TWO)
        self.assertEqual(list(board), cells)
        self.assertEqual(board.total_occupied(), 3)
        self.assertEqual(board.count(PLAYER_TWO), 2)

    def test_given_board_when_copying_then_independent(self):
        board = Board()
        board.set(0, 0, PLAYER_ONE)
        dup = board.copy()
        dup.set(0, 0, PLAYER_TWO)
        self.assertEqual(board.get(0, 0), PLAYER_ONE)
        self.assertEqual(dup.get(0, 0), PLAYER_TWO)

    def test_given_wrong_cell_count_when_constructing_then_raises(self):
        with self.assertRaises(ValueError):
            Board(2, 2, cells=[EMPTY] * 3)

    def test_given_board_when_pretty_then_symbols_rendered(self):
        board = Board(3, 2)
        board.set(0, 0, PLAYER_ONE)
        board.set(2, 1, PLAYER_TWO)
        self.assertEqual(board.pretty(), "X--\n--O")


class TestGameState(unittest.TestCase):
    def test_given_new_game_when_inspecting_then_canonical_opening(self):
        game = Game.new()
        b = game.board
        self.assertEqual(game.current_player, PLAYER_ONE)
        self.assertEqual(b.get(4, 3), PLAYER_ONE)
        self.assertEqual(b.get(3, 4), PLAYER_ONE)
        self.assertEqual(b.get(3, 3), PLAYER_TWO)
        self.assertEqual(b.get(4, 4), PLAYER_TWO)
        self.assertEqual(b.total_occupied(), 4)
        self.assertIsNone(game.winning_player())

    def test_given_rectangular_size_when_new_game_then_opening_centred(self):
        game = Game.new(6, 4)
        b = game.board
        self.assertEqual(b.get(2, 1), PLAYER_TWO)
        self.assertEqual(b.get(3, 2), PLAYER_TWO)
        self.assertEqual(b.get(3, 1), PLAYER_ONE)
        self.assertEqual(b.get(2, 2), PLAYER_ONE)

    def test_given_tiny_size_when_new_game_then_raises(self):
        with self.assertRaises(ValueError):
            Game.new(1, 8)

    def test_given_game_when_cloning_then_no_shared_state(self):
        game = Game.new()
        dup = game.clone()
        dup.board.set(0, 0, PLAYER_TWO)
        dup.swap_players()
        self.assertEqual(game.board.get(0, 0), EMPTY)
        self.assertEqual(game.current_player, PLAYER_ONE)
        self.assertEqual(dup.current_player, PLAYER_TWO)

    def test_given_game_when_swapping_then_turn_flips_and_board_untouched(self):
        game = Game.new()
        before = list(game.board.cells)
        game.swap_players()
        self.assertEqual(game.current_player, PLAYER_TWO)
        self.assertEqual(game.other_player(), PLAYER_ONE)
        self.assertEqual(game.board.cells, before)

    def test_given_more_tiles_when_scoring_then_winner_reported(self):
        game = Game.new()
        game.board.set(0, 0, PLAYER_TWO)
        self.assertEqual(game.score(), (2, 3))
        self.assertEqual(game.winning_player(), PLAYER_TWO)


if __name__ == '__main__':
    unittest.main(verbosity=2)
