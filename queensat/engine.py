import logging
from threading import Timer

from pysat.solvers import Solver

logger = logging.getLogger(__name__)


def interrupt(s): s.interrupt()


class Engine:
    """
    Boolean satisfiability engine used by the board encoder.

    Thin wrapper over a pysat solver exposing the minimal contract the
    orchestrator needs: allocate variables, add clauses, solve and read
    the model. Variables are 0-based, clauses hold DIMACS literals
    (variable v is literal v + 1). One engine serves one solve and is
    deleted afterwards; use it as a context manager.
    """

    def __init__(self, solver_name="glucose3", time_budget=None):
        self.solver_name = solver_name
        self.time_budget = time_budget
        self._solver = Solver(name=solver_name, use_timer=True)
        self._num_vars = 0
        self._status = None
        self._model = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.delete()

    def new_variable(self):
        var = self._num_vars
        self._num_vars += 1
        return var

    def add_clause(self, literals):
        clause = list(literals)
        if not clause:
            raise ValueError("empty clause")
        for lit in clause:
            if lit == 0 or abs(lit) > self._num_vars:
                raise ValueError(f"literal {lit} does not reference an allocated variable")
        self._solver.add_clause(clause)

    def add_formula(self, cnf):
        for clause in cnf.clauses:
            self.add_clause(clause)

    def solve(self):
        # True = sat, False = unsat, None = interrupted by the time budget
        self._model = None
        if self.time_budget is None:
            self._status = self._solver.solve()
        else:
            timer = Timer(self.time_budget, interrupt, [self._solver])
            timer.start()
            try:
                self._status = self._solver.solve_limited(expect_interrupt=True)
            finally:
                timer.cancel()
            if self._status is None:
                logger.info("%s interrupted after %s seconds", self.solver_name, self.time_budget)

        if self._status:
            self._model = self._solver.get_model()
        return self._status

    def model_value(self, var):
        # True / False, or None when the engine left the variable undetermined
        if not self._status:
            raise RuntimeError("model is only available after a satisfiable solve")
        if var < 0 or var >= self._num_vars:
            raise ValueError(f"variable {var} was not allocated")
        if var >= len(self._model):
            return None
        return self._model[var] > 0

    def nof_vars(self):
        return self._num_vars

    def nof_clauses(self):
        return self._solver.nof_clauses()

    def time(self):
        return self._solver.time()

    def delete(self):
        if self._solver is not None:
            self._solver.delete()
            self._solver = None
