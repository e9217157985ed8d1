import logging

from queensat import config
from queensat.decoding import decode_solution
from queensat.encoding import encode_board
from queensat.engine import Engine
from queensat.indexing import cell_index, literal

logger = logging.getLogger(__name__)


def _prepare_engine(engine, n):
    # Init solver variables, one per cell
    for _ in range(n * n):
        engine.new_variable()
    cnf = encode_board(n)
    engine.add_formula(cnf)
    return cnf


def solve_board(n, solver_name=None, time_budget=None):
    """
    Encode and solve one n x n board on a fresh engine.

    Returns a result record: size, result ("sat", "unsat" or "timeout"),
    the decoded board (None unless sat), the variable count, the number of
    encoded clauses and the solver time in seconds.
    """
    if n < 1:
        raise ValueError(f"board size must be at least 1, got {n}")
    solver_name = solver_name or config.SOLVER_NAME

    with Engine(solver_name, time_budget) as engine:
        cnf = _prepare_engine(engine, n)

        sat_status = engine.solve()
        board = None
        if sat_status is None:
            result = "timeout"
            elapsed_time = time_budget
        elif sat_status is False:
            result = "unsat"
            elapsed_time = engine.time()
        else:
            result = "sat"
            elapsed_time = engine.time()
            # read the model before the engine goes away
            board = decode_solution(engine, n)

        logger.debug("%dx%d board: %s in %s seconds", n, n, result, elapsed_time)
        return {
            "size": n,
            "result": result,
            "board": board,
            "variables": engine.nof_vars(),
            # encoded clauses, not the engine's internal count
            "clauses": len(cnf.clauses),
            "time": elapsed_time,
        }


def iter_solutions(n, solver_name=None, limit=None):
    # yield every placement, blocking each one found before solving again
    if n < 1:
        raise ValueError(f"board size must be at least 1, got {n}")
    solver_name = solver_name or config.SOLVER_NAME

    with Engine(solver_name) as engine:
        _prepare_engine(engine, n)
        found = 0
        while limit is None or found < limit:
            if not engine.solve():
                break
            board = decode_solution(engine, n)
            found += 1
            yield board

            # Block the current solution
            blocking_clause = [
                literal(cell_index(row, col, n), negated=True)
                for row in range(n)
                for col in range(n)
                if board[row][col]
            ]
            engine.add_clause(blocking_clause)


def count_solutions(n, solver_name=None):
    return sum(1 for _ in iter_solutions(n, solver_name))
