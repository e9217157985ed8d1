import os


def parse_time_budget(value):
    # seconds per board, empty = no limit
    if not value:
        return None
    try:
        budget = float(value)
    except ValueError:
        raise ValueError(f"QUEENSAT_TIME_BUDGET must be a number of seconds, got {value!r}") from None
    if budget <= 0:
        raise ValueError(f"QUEENSAT_TIME_BUDGET must be positive, got {value!r}")
    return budget


def parse_log_level(value):
    return (value or "WARNING").strip().upper()


# Solver settings, override from the environment.
# solver names are the pysat ones: glucose3, glucose4, minisat22, cadical153, ...
SOLVER_NAME = os.environ.get("QUEENSAT_SOLVER", "glucose3")

TIME_BUDGET = parse_time_budget(os.environ.get("QUEENSAT_TIME_BUDGET"))

# directory of the results workbook, empty = no export
RESULTS_DIR = os.environ.get("QUEENSAT_RESULTS_DIR") or None

LOG_LEVEL = parse_log_level(os.environ.get("QUEENSAT_LOG_LEVEL"))

DEFAULT_START = 5

QUEEN_MARK = "x"
EMPTY_MARK = "-"
