import logging
import math
from typing import List

from pysat.formula import CNF

from queensat.indexing import cell_index, literal

logger = logging.getLogger(__name__)

# the two diagonal families of the board, cells (x, j) with x = i + d * j
MAIN_DIAGONAL = 1   # row - col is constant
ANTI_DIAGONAL = -1  # row + col is constant
DIAGONAL_DIRECTIONS = (MAIN_DIAGONAL, ANTI_DIAGONAL)


# at most one function
# A = x1,x2,x3,...,xn
# return: (-x1 v -x2) ^ (-x1 v -x3) ^ ... ^ (-x1 v -xn)
#         (-x2 v -x3) ^ ... ^ (-x2 v -xn)
#         ...
def at_most_one(literals: List[int], cnf=None):
    if cnf is None:
        cnf = CNF()
    n = len(literals)
    for i in range(n):
        for j in range(i + 1, n):
            cnf.append([-literals[i], -literals[j]])
    return cnf


# at least one function
# A = x1 v x2 v x3 v x4 v ... v xn
def at_least_one(literals: List[int], cnf=None):
    if cnf is None:
        cnf = CNF()
    if not literals:
        raise ValueError("at least one of an empty group is unsatisfiable")
    cnf.append(list(literals))
    return cnf


# exactly one function = at least + at most
def exactly_one(literals: List[int], cnf=None):
    cnf = at_least_one(literals, cnf)
    return at_most_one(literals, cnf)


def row_groups(n):
    return [[literal(cell_index(row, col, n)) for col in range(n)] for row in range(n)]


def column_groups(n):
    return [[literal(cell_index(row, col, n)) for row in range(n)] for col in range(n)]


def diagonal_groups(n):
    """
    Literal groups of every diagonal holding at least two cells.

    Offsets run over -n .. 2n-1 for both directions; each diagonal line of
    the board is produced by exactly one (offset, direction) pair, offsets
    that miss the board give empty groups and are dropped with the
    single-cell corners.
    """
    groups = []
    for i in range(-n, 2 * n):
        for direction in DIAGONAL_DIRECTIONS:
            group = []
            for j in range(n):
                x = i + direction * j
                if 0 <= x < n:
                    group.append(literal(cell_index(x, j, n)))
            if len(group) > 1:
                groups.append(group)
    return groups


# Exactly 1 queen per row
def add_row_constraints(n, cnf):
    for group in row_groups(n):
        exactly_one(group, cnf)
    return cnf


# Exactly 1 queen per column
def add_column_constraints(n, cnf):
    for group in column_groups(n):
        exactly_one(group, cnf)
    return cnf


# At most 1 queen per diagonal, a diagonal may stay empty
def add_diagonal_constraints(n, cnf):
    for group in diagonal_groups(n):
        at_most_one(group, cnf)
    return cnf


def encode_board(n):
    if n < 1:
        raise ValueError(f"board size must be at least 1, got {n}")

    cnf = CNF()
    add_row_constraints(n, cnf)
    add_column_constraints(n, cnf)
    add_diagonal_constraints(n, cnf)

    logger.debug("encoded %dx%d board: %d variables, %d clauses", n, n, n * n, len(cnf.clauses))
    return cnf


# closed form of len(encode_board(n).clauses)
def expected_clause_count(n):
    lines = 2 * n * (1 + math.comb(n, 2))
    # per direction: two diagonals of each length 2..n-1 plus the long one
    diagonals = 2 * (2 * math.comb(n, 3) + math.comb(n, 2))
    return lines + diagonals
