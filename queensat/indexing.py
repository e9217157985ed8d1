# mapping position (row, col) to a variable index from 0.
# index = row + col * n, so variables run down each column first.
def cell_index(row, col, n):
    return row + col * n


# inverse of cell_index: variable index to (row, col)
def cell_of(index, n):
    return index % n, index // n


# engine literal for a variable, DIMACS ids start from 1
def literal(var, negated=False):
    lit = var + 1
    return -lit if negated else lit
