"""
Board state: cell tags, winning-line masks, placement and terminal checks.
Teaching notes:
- Cells are indexed 0..8 row-major: 0-2 top row, 3-5 middle, 6-8 bottom.
- A player's stones form a 9-bit mask (bit i set iff cell i is theirs).
- A line is won when (mask & line_mask) == line_mask, so the win check is 8 ANDs.
"""
from enum import Enum
from typing import List, Optional, Tuple


class Cell(Enum):
    X = 'X'
    O = 'O'
    EMPTY = '.'

    def opponent(self) -> "Cell":
        assert self is not Cell.EMPTY, "empty cell has no opponent"
        return Cell.O if self is Cell.X else Cell.X

    @classmethod
    def from_symbol(cls, symbol: str) -> "Cell":
        s = symbol.upper()
        if s in ('X', 'O'):
            return cls(s)
        if s in EMPTY_SYMBOLS:
            return cls.EMPTY
        raise ValueError(f"Unknown cell symbol: {symbol!r}")


EMPTY_SYMBOLS = ('.', '_', '-', ' ')

SIZE = 9

WINNING_MASKS = [
    0b000_000_111, 0b000_111_000, 0b111_000_000,  # rows
    0b001_001_001, 0b010_010_010, 0b100_100_100,  # columns
    0b100_010_001, 0b001_010_100,                 # diagonals
]


class Board:
    """Nine cells, mutated in place; terminal state is always derived."""

    def __init__(self, cells: Optional[List[Cell]] = None):
        if cells is None:
            cells = [Cell.EMPTY] * SIZE
        assert len(cells) == SIZE
        self._cells = list(cells)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        if len(text) != SIZE:
            raise ValueError(f"Board string must have {SIZE} cells, got {len(text)}")
        return cls([Cell.from_symbol(c) for c in text])

    def to_string(self) -> str:
        return ''.join(c.value for c in self._cells)

    def place(self, index: int, value: Cell) -> None:
        assert 0 <= index < SIZE, f"cell index out of range: {index}"
        assert value is not Cell.EMPTY, "cannot place an empty mark"
        self._cells[index] = value

    def clear(self, index: int) -> None:
        assert 0 <= index < SIZE, f"cell index out of range: {index}"
        self._cells[index] = Cell.EMPTY

    def get(self, index: int) -> Optional[Cell]:
        if not 0 <= index < SIZE:
            return None
        v = self._cells[index]
        return None if v is Cell.EMPTY else v

    def empty_cells(self) -> List[int]:
        return [i for i, v in enumerate(self._cells) if v is Cell.EMPTY]

    def is_full(self) -> bool:
        return Cell.EMPTY not in self._cells

    def masks(self) -> Tuple[int, int]:
        x_bits = 0
        o_bits = 0
        for i, v in enumerate(self._cells):
            if v is Cell.X:
                x_bits |= 1 << i
            elif v is Cell.O:
                o_bits |= 1 << i
        return x_bits, o_bits

    def winner(self) -> Optional[Cell]:
        x_bits, o_bits = self.masks()
        for line in WINNING_MASKS:
            if x_bits & line == line:
                return Cell.X
            if o_bits & line == line:
                return Cell.O
        return None

    def is_terminal(self) -> bool:
        return self.winner() is not None or self.is_full()

    def count(self, value: Cell) -> int:
        return self._cells.count(value)

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    def copy(self) -> "Board":
        return Board(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    # mutable, so unhashable
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"


def is_valid_state(board: Board) -> bool:
    """True if the position can arise in a game where X moves first."""
    x_count, o_count = board.count(Cell.X), board.count(Cell.O)
    if not (x_count == o_count or x_count == o_count + 1):
        return False
    x_bits, o_bits = board.masks()
    x_won = any(x_bits & line == line for line in WINNING_MASKS)
    o_won = any(o_bits & line == line for line in WINNING_MASKS)
    if x_won and o_won:
        return False
    if x_won and x_count != o_count + 1:
        return False
    if o_won and x_count != o_count:
        return False
    return True
