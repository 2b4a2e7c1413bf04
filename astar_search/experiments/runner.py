from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
from typing import List

from astar_search.domains.sliding_puzzle import HEURISTICS, Board, SlidingPuzzle, SlidingPuzzleProblem
from astar_search.search.a_star import TIE_BREAKS
from astar_search.search.solution_finder import Strategy, solve

HEADER = [
    "algorithm", "heuristic", "depth", "seed",
    "expanded", "generated", "duplicates", "g", "time_sec",
    "peak_open", "peak_closed", "peak_recursion", "bound_final", "tie_break",
    "termination", "solvable",
]

ALGOS = {
    "a":    [Strategy.A_STAR],
    "ida":  [Strategy.IDA_STAR],
    "bfs":  [Strategy.BFS],
    "both": [Strategy.A_STAR, Strategy.IDA_STAR],
    "all":  [Strategy.A_STAR, Strategy.IDA_STAR, Strategy.BFS],
}


@dataclass
class Instance:
    seed: int
    depth: int
    state: Board


def generate_instances(puzzle: SlidingPuzzle, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = puzzle.scramble(d, seed)
            attempts += 1
            if puzzle.is_solvable(s):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out


def choose_puzzle(args) -> SlidingPuzzle:
    """
    Board selection precedence:
    --rows/--cols  >  --n  >  --domain (p8|p15).
    """
    if args.rows is not None and args.cols is not None:
        return SlidingPuzzle(args.rows, args.cols)
    if args.n is not None:
        return SlidingPuzzle(args.n, args.n)
    if args.domain == "p15":
        return SlidingPuzzle(4, 4)
    return SlidingPuzzle(3, 3)


def run_one(problem: SlidingPuzzleProblem, strategy: Strategy, tie_break: str, inst: Instance, solvable: int) -> list:
    t0 = perf_counter()
    res = solve(problem, strategy, tie_break=tie_break)
    elapsed = perf_counter() - t0
    st = res.stats.as_dict()
    return [
        st["algorithm"], problem.heuristic_name, inst.depth, inst.seed,
        st["expanded"], st["generated"], st["duplicates"], res.cost if res.found else "",
        f"{elapsed:.6f}",
        _blank(st["peak_open"]), _blank(st["peak_closed"]), _blank(st["peak_recursion"]), _blank(st["bound_final"]),
        st["tie_break"], "ok" if res.found else "exhausted", solvable,
    ]


def _blank(v):
    return "" if v is None else v


def main(argv=None):
    ap = argparse.ArgumentParser(description="A*/IDA* (+BFS) sliding-puzzle experiment runner")
    ap.add_argument("--algo", choices=sorted(ALGOS), default="both",
                    help="'both' = A*+IDA*, 'all' = A*+IDA*+BFS")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--tie_break", choices=sorted(TIE_BREAKS), default="g")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))

    # board selection
    ap.add_argument("--domain", choices=["p8", "p15"], default="p8", help="3x3 or 4x4 shortcut")
    ap.add_argument("--n", type=int, default=None, help="Square board size (N×N)")
    ap.add_argument("--rows", type=int, default=None, help="Rows for rectangular board")
    ap.add_argument("--cols", type=int, default=None, help="Cols for rectangular board")

    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run A*/BFS on swapped-tile (unsolvable) variants; IDA* is skipped for these")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")

    puzzle = choose_puzzle(args)
    strategies = ALGOS[args.algo]
    insts = generate_instances(puzzle, args.depths, args.per_depth, args.start_seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            problem = SlidingPuzzleProblem(puzzle, inst.state, args.heuristic)
            for strategy in strategies:
                w.writerow(run_one(problem, strategy, args.tie_break, inst, 1))

            # unsolvable variants: A*/BFS only, IDA* has no cross-branch duplicate detection
            if args.include_unsolvable:
                u = SlidingPuzzleProblem(puzzle, puzzle.unsolvable_variant(inst.state), args.heuristic)
                for strategy in strategies:
                    if strategy is not Strategy.IDA_STAR:
                        w.writerow(run_one(u, strategy, args.tie_break, inst, 0))

    print(f"Wrote {args.out} ({len(insts)} instances, {puzzle})")


if __name__ == "__main__":
    main()
