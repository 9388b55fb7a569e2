"""
Exhaustive minimax with alpha-beta pruning, scored from the engine's perspective.
Scoring policy:
- Engine win: 10 - depth (prefer the fastest forced win).
- Engine loss: depth - 10 (prefer the slowest forced loss).
- Draw: 0.
Moves are generated in ascending index order; the first move reaching the
maximum is kept. The board is probed in place and restored after every probe.
"""
import logging
import math
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from .board import Board, Cell

logger = logging.getLogger(__name__)

WIN_SCORE = 10


@dataclass
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


@contextmanager
def probe(board: Board, index: int, mark: Cell) -> Iterator[None]:
    board.place(index, mark)
    try:
        yield None
    finally:
        board.clear(index)


def terminal_score(board: Board, depth: int, player: Cell) -> int:
    w = board.winner()
    if w is None:
        return 0
    if w is player:
        return WIN_SCORE - depth
    return depth - WIN_SCORE


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    player: Cell = Cell.O,
    stats: Optional[SearchStats] = None,
) -> int:
    if stats is not None:
        stats.nodes += 1
    if board.is_terminal():
        return terminal_score(board, depth, player)

    mark = player if maximizing else player.opponent()
    best = -WIN_SCORE - 1 if maximizing else WIN_SCORE + 1
    for idx in board.empty_cells():
        with probe(board, idx, mark):
            value = minimax(board, depth + 1, alpha, beta, not maximizing, player, stats)
        if maximizing:
            best = max(best, value)
            alpha = max(alpha, best)
        else:
            best = min(best, value)
            beta = min(beta, best)
        if beta <= alpha:
            if stats is not None:
                stats.cutoffs += 1
            break
    return best


def best_move(board: Board, player: Cell = Cell.O, stats: Optional[SearchStats] = None) -> int:
    """Return the optimal empty cell for `player`, who is assumed to move next."""
    assert player is not Cell.EMPTY, "search needs a mark to play"
    assert not board.is_terminal(), "no legal move on a finished board"
    if stats is None:
        stats = SearchStats()

    best_idx = -1
    best_val = -math.inf
    for idx in board.empty_cells():
        with probe(board, idx, player):
            value = minimax(board, 1, best_val, math.inf, False, player, stats)
        if value > best_val:
            best_val = value
            best_idx = idx
    logger.debug("best_move player=%s move=%d score=%s nodes=%d cutoffs=%d",
                 player.value, best_idx, best_val, stats.nodes, stats.cutoffs)
    return best_idx


def score_moves(board: Board, player: Cell = Cell.O, stats: Optional[SearchStats] = None) -> Dict[int, int]:
    """Exact score of every legal first move (full window, no root pruning)."""
    assert player is not Cell.EMPTY, "search needs a mark to play"
    assert not board.is_terminal(), "no legal move on a finished board"
    scores: Dict[int, int] = {}
    for idx in board.empty_cells():
        with probe(board, idx, player):
            scores[idx] = minimax(board, 1, -math.inf, math.inf, False, player, stats)
    return scores
