import numpy as np

from queensat.config import EMPTY_MARK, QUEEN_MARK
from queensat.indexing import cell_index


# read the board back from a satisfiable engine, 1 = queen
def decode_solution(engine, n):
    board = np.zeros((n, n), dtype=np.int8)
    for row in range(n):
        for col in range(n):
            if engine.model_value(cell_index(row, col, n)) is True:
                board[row][col] = 1
    return board


def render_board(board):
    return "\n".join(
        "".join(QUEEN_MARK if cell else EMPTY_MARK for cell in row) for row in board
    )


def queen_positions(board):
    return [(int(row), int(col)) for row, col in np.argwhere(np.asarray(board) > 0)]


def is_valid_placement(board):
    """
    Check a decoded board: exactly one queen in every row and column and
    at most one queen on every diagonal of both directions.
    """
    board = np.asarray(board)
    n = board.shape[0]
    if board.shape != (n, n):
        return False
    if not (board.sum(axis=1) == 1).all() or not (board.sum(axis=0) == 1).all():
        return False

    flipped = np.fliplr(board)
    for offset in range(-(n - 1), n):
        if np.trace(board, offset) > 1 or np.trace(flipped, offset) > 1:
            return False
    return True
