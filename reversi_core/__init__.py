"""
Reversi core Python package.

Pure-logic modules for the Reversi (Othello) rules engine and exact solver.
Modules:
- board.py: Player, Cell, Board
- state.py: Game
- moves.py: flip sets, legal moves, play, pass handling
- layout.py: text layout format
- solver.py: negamax search
- deal.py: random games
- ai.py: Monte Carlo player
- debug.py: REVERSI_DEBUG switch
"""
