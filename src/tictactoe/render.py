"""Plain-text board rendering."""
from .board import Board, Cell


def render_board(board: Board, show_indices: bool = True) -> str:
    cells = board.cells()
    rows = []
    for r in range(3):
        symbols = []
        for i in range(r * 3, r * 3 + 3):
            if cells[i] is Cell.EMPTY:
                symbols.append(str(i) if show_indices else ' ')
            else:
                symbols.append(cells[i].value)
        rows.append("|".join(symbols))
    return "\n-+-+-\n".join(rows)
