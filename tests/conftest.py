import matplotlib

matplotlib.use("Agg")

import pytest


# the two placements of the 4-queens problem, as (row, col) positions
FOUR_QUEENS_SOLUTIONS = [
    [(0, 1), (1, 3), (2, 0), (3, 2)],
    [(0, 2), (1, 0), (2, 3), (3, 1)],
]


@pytest.fixture
def four_queens_board():
    import numpy as np

    board = np.zeros((4, 4), dtype=np.int8)
    for row, col in FOUR_QUEENS_SOLUTIONS[0]:
        board[row][col] = 1
    return board
