"""tictactoe package.

Board state with bitmask win detection, and a minimax/alpha-beta engine
that picks the optimal move. A small CLI wraps an interactive game.
"""

from .board import Board, Cell
from .config import GameConfig
from .game import play_game, self_play
from .search import best_move, minimax, score_moves

__all__ = [
    "Board",
    "Cell",
    "GameConfig",
    "best_move",
    "minimax",
    "score_moves",
    "play_game",
    "self_play",
]
