#!/usr/bin/env python3
"""Solve reference boards repeatedly with A* and IDA* and report mean solve time."""
from __future__ import annotations
import argparse
import logging
from time import perf_counter
from typing import List, Tuple

from astar_search.domains.sliding_puzzle import HEURISTICS, SlidingPuzzleProblem
from astar_search.search.problem import Problem
from astar_search.search.solution import SearchResult
from astar_search.search.solution_finder import find_solution

REFERENCE_BOARDS = [
    "1,4,8;6,3,0;5,2,7",
    "7,2,4;5,0,6;8,3,1",
]


def parse_board(text: str) -> List[List[int]]:
    """'1,4,8;6,3,0;5,2,7' -> [[1,4,8],[6,3,0],[5,2,7]]"""
    try:
        return [[int(x) for x in row.split(",")] for row in text.strip().split(";")]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"bad board {text!r}: {e}") from None


def time_solution(problem: Problem, limited_memory: bool, budget_sec: float = 1.0) -> Tuple[SearchResult, float, int]:
    """
    Solve once, then keep re-solving until budget_sec of wall time has passed.
    Returns (result of the first solve, mean ms per solve, number of timed solves).
    """
    result = find_solution(problem, limited_memory)
    total = 0.0
    trials = 0
    t_start = perf_counter()
    while trials == 0 or perf_counter() - t_start < budget_sec:
        t0 = perf_counter()
        find_solution(problem, limited_memory)
        total += perf_counter() - t0
        trials += 1
    return result, 1000.0 * total / trials, trials


def main(argv=None):
    ap = argparse.ArgumentParser(description="Time A* and IDA* on sliding-puzzle boards")
    ap.add_argument("boards", nargs="*", type=parse_board,
                    default=[parse_board(b) for b in REFERENCE_BOARDS],
                    help="Rows separated by ';', cells by ',' (default: two 8-puzzle reference boards)")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    ap.add_argument("--algo", choices=["a", "ida", "both"], default="both")
    ap.add_argument("--budget_sec", type=float, default=1.0, help="Wall time spent re-solving each board")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")

    modes = {"a": [False], "ida": [True], "both": [False, True]}[args.algo]
    for rows in args.boards:
        problem = SlidingPuzzleProblem.from_rows(rows, heuristic=args.heuristic)
        for limited_memory in modes:
            result, ms, trials = time_solution(problem, limited_memory, args.budget_sec)
            name = "iterative deepening A*" if limited_memory else "A*"
            print(f"{result} to {problem} took {ms:.3f}ms to find with {name} ({trials} runs)\n")


if __name__ == "__main__":
    main()
