import logging
import re
import sys
import time

from queensat import config
from queensat.decoding import render_board
from queensat.report import export_result
from queensat.solver import solve_board

logger = logging.getLogger(__name__)


# leading integer of a string, 0 when there is none (C atoi)
def atoi(text):
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def parse_args(argv):
    start = atoi(argv[0]) if len(argv) > 0 else config.DEFAULT_START
    end = atoi(argv[1]) if len(argv) > 1 else start + 1
    print_boards = atoi(argv[2]) > 0 if len(argv) > 2 else True
    return start, end, print_boards


def run(start, end, print_boards, solver_name=None, time_budget=None, results_dir=None):
    solver_name = solver_name or config.SOLVER_NAME
    mode = "Print boards" if print_boards else "Calculate times"
    print(f"{mode} starting at {start} and ending at {end}")

    results = []
    for n in range(start, end):
        if n < 1:
            logger.warning("skipping board size %d, sizes start at 1", n)
            continue

        begin = time.perf_counter()
        result = solve_board(n, solver_name, time_budget)
        elapsed_ms = int((time.perf_counter() - begin) * 1000)

        if print_boards:
            if result["result"] == "sat":
                print(render_board(result["board"]))
        else:
            print(f"Solved a {n}x{n} board in {elapsed_ms} milliseconds")

        if results_dir:
            export_result(result, results_dir, solver_name)
        results.append(result)
    return results


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    logging.basicConfig(level=config.LOG_LEVEL,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    start, end, print_boards = parse_args(argv)
    run(start, end, print_boards, config.SOLVER_NAME, config.TIME_BUDGET, config.RESULTS_DIR)
    return 0
