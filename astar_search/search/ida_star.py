from __future__ import annotations
from typing import Iterator, List, Optional, Set, Tuple
import logging
import math

from astar_search.search.problem import Action, Problem, S
from astar_search.search.solution import NotFound, SearchResult, SearchStats, from_path

logger = logging.getLogger(__name__)

FOUND = object()


def ida_star(problem: Problem[S]) -> SearchResult:
    """
    Iterative-deepening A*.

    Repeats a depth-first search bounded by f = g + h, raising the bound each
    round to the smallest f that exceeded it. Only the current path is kept in
    memory: states already on the path are skipped, but nothing is
    deduplicated across branches. Same optimality guarantee as a_star() under
    an admissible heuristic.
    """
    stats = SearchStats(algorithm="IDA*", peak_recursion=0)

    start = problem.initial_state
    path: List[Action[S]] = []
    on_path: Set[S] = {start}
    solution_g: Optional[float] = None

    def dfs(bound: float):
        """
        One bounded pass, driven by an explicit stack of (state, g, actions) frames.
        returns:
          FOUND       terminal reached; `path` holds the actions leading to it
          min f       smallest f that exceeded `bound` (inf if nothing was pruned)
        """
        nonlocal solution_g

        f_root = problem.heuristic(start)
        if f_root > bound:
            return f_root
        if problem.is_terminal(start):
            solution_g = 0
            return FOUND

        stats.expanded += 1
        stack: List[Tuple[S, float, Iterator[Action[S]]]] = [(start, 0, iter(problem.actions(start)))]
        min_next = math.inf

        while stack:
            state, g, actions = stack[-1]
            action = next(actions, None)
            if action is None:
                stack.pop()
                # the root frame owns no path entry
                if stack:
                    path.pop()
                    on_path.remove(state)
                continue

            s2 = action.enact(state)
            if s2 in on_path:
                stats.duplicates += 1
                continue
            stats.generated += 1
            stats.peak_recursion = max(stats.peak_recursion, len(stack))

            g2 = g + action.cost
            f2 = g2 + problem.heuristic(s2)
            if f2 > bound:
                if f2 < min_next:
                    min_next = f2
                continue

            path.append(action)
            if problem.is_terminal(s2):
                solution_g = g2
                return FOUND

            stats.expanded += 1
            on_path.add(s2)
            stack.append((s2, g2, iter(problem.actions(s2))))

        return min_next

    bound = problem.heuristic(start)
    logger.debug("IDA* start: bound=%s", bound)

    while True:
        stats.iterations += 1
        stats.bound_final = bound
        t = dfs(bound)

        if t is FOUND:
            logger.debug("IDA* solved: cost=%s iterations=%d expanded=%d",
                         solution_g, stats.iterations, stats.expanded)
            return from_path(path, solution_g, stats)
        if t == math.inf:
            logger.debug("IDA* exhausted after %d iterations", stats.iterations)
            return NotFound(stats=stats)

        logger.debug("IDA* bound %s -> %s (expanded so far %d)", bound, t, stats.expanded)
        bound = t
