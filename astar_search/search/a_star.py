from __future__ import annotations
from typing import Callable, Dict, List, Tuple
import heapq
import itertools
import logging

from astar_search.search.node import ROOT, SearchNode
from astar_search.search.problem import Problem, S
from astar_search.search.solution import NotFound, SearchResult, SearchStats, reconstruct

logger = logging.getLogger(__name__)

# Heap keys; f always comes first, the rest only orders equal-f nodes.
TIE_BREAKS: Dict[str, Callable[[float, float, float, int], Tuple]] = {
    "g":    lambda f, g, h, ctr: (f, -g, ctr),
    "h":    lambda f, g, h, ctr: (f, h, ctr),
    "fifo": lambda f, g, h, ctr: (f, ctr),
    "lifo": lambda f, g, h, ctr: (f, -ctr),
}


def a_star(problem: Problem[S], tie_break: str = "g") -> SearchResult:
    """
    Best-first search on f = g + h with duplicate detection.
    Returns an optimal Solution when the heuristic is admissible, NotFound when
    the reachable state space holds no terminal state.

    tie_break orders nodes of equal f:
      "g"    deeper node first (default)
      "h"    smaller heuristic first
      "fifo" / "lifo" by insertion order
    The open set is a heap with lazy deletion: improved paths are pushed again
    and stale entries are dropped when popped.
    """
    try:
        priority = TIE_BREAKS[tie_break]
    except KeyError:
        raise ValueError(f"Unknown tie_break {tie_break!r}; expected one of {sorted(TIE_BREAKS)}") from None

    stats = SearchStats(algorithm="A*", tie_break=tie_break)
    counter = itertools.count()

    start = problem.initial_state
    h0 = problem.heuristic(start)
    nodes: List[SearchNode] = [SearchNode(state=start, g=0, h=h0, parent=ROOT)]
    open_heap: List[Tuple[Tuple, int]] = [(priority(h0, 0, h0, next(counter)), 0)]
    open_g: Dict[S, float] = {start: 0}
    closed: Dict[S, float] = {}

    stats.peak_open = 1
    stats.peak_closed = 0
    logger.debug("A* start: h0=%s tie_break=%s", h0, tie_break)

    while open_heap:
        stats.peak_open = max(stats.peak_open, len(open_heap))
        _, handle = heapq.heappop(open_heap)
        node = nodes[handle]
        state = node.state

        # stale: a cheaper copy was pushed later, or the state was already expanded
        best = open_g.get(state)
        if best is None or node.g > best:
            continue
        del open_g[state]

        if problem.is_terminal(state):
            logger.debug("A* solved: cost=%s expanded=%d generated=%d",
                         node.g, stats.expanded, stats.generated)
            return reconstruct(nodes, handle, stats)

        closed[state] = node.g
        stats.expanded += 1
        stats.peak_closed = max(stats.peak_closed, len(closed))

        for action in problem.actions(state):
            s2 = action.enact(state)
            g2 = node.g + action.cost
            stats.generated += 1

            known = closed.get(s2)
            if known is not None and known <= g2:
                stats.duplicates += 1
                continue
            known = open_g.get(s2)
            if known is not None and known <= g2:
                stats.duplicates += 1
                continue

            h2 = problem.heuristic(s2)
            nodes.append(SearchNode(state=s2, g=g2, h=h2, parent=handle, action=action))
            open_g[s2] = g2
            heapq.heappush(open_heap, (priority(g2 + h2, g2, h2, next(counter)), len(nodes) - 1))

    logger.debug("A* exhausted: expanded=%d generated=%d", stats.expanded, stats.generated)
    return NotFound(stats=stats)
