"""
Interactive human-vs-engine loop and engine self play.
Teaching notes:
- X always moves first; the side to move follows from the piece counts.
- Bad human input is rejected and re-prompted, never passed to the board.
"""
import logging
from typing import Callable, Optional

from .board import Board, Cell
from .config import GameConfig
from .render import render_board
from .search import best_move

logger = logging.getLogger(__name__)

PROMPT = "Choose a cell [0-8]: "


def side_to_move(board: Board) -> Cell:
    return Cell.X if board.count(Cell.X) == board.count(Cell.O) else Cell.O


def parse_move(raw: str, board: Board) -> Optional[int]:
    try:
        idx = int(raw.strip())
    except ValueError:
        return None
    if not 0 <= idx <= 8 or board.get(idx) is not None:
        return None
    return idx


def read_move(board: Board, read: Callable[[str], str], write: Callable[[str], None]) -> int:
    while True:
        idx = parse_move(read(PROMPT), board)
        if idx is not None:
            return idx
        write("Invalid value. Try again")


def result_message(winner: Optional[Cell]) -> str:
    if winner is None:
        return "It's a draw"
    return f"Player {winner.value} wins"


def play_game(
    config: Optional[GameConfig] = None,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> Optional[Cell]:
    if config is None:
        config = GameConfig()
    board = Board()
    turn = Cell.X
    while not board.is_terminal():
        write(render_board(board))
        if turn is config.human:
            idx = read_move(board, read, write)
        else:
            idx = best_move(board, config.engine)
            write(f"Engine ({config.engine.value}) plays {idx}")
        board.place(idx, turn)
        logger.debug("%s -> %d board=%s", turn.value, idx, board)
        turn = turn.opponent()

    write(render_board(board))
    winner = board.winner()
    write(result_message(winner))
    return winner


def self_play(board: Optional[Board] = None) -> Board:
    """Let the engine play both sides until the game ends; returns the final board."""
    board = Board() if board is None else board.copy()
    while not board.is_terminal():
        turn = side_to_move(board)
        board.place(best_move(board, turn), turn)
    return board
