from queensat.indexing import cell_index, cell_of
from queensat.encoding import (
    at_least_one,
    at_most_one,
    exactly_one,
    encode_board,
    expected_clause_count,
)
from queensat.engine import Engine
from queensat.decoding import decode_solution, render_board, is_valid_placement
from queensat.solver import solve_board, iter_solutions, count_solutions

__version__ = "0.1.0"
