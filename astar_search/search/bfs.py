from __future__ import annotations
from collections import deque
from typing import Dict, List, Optional, Tuple
import logging

from astar_search.search.problem import Action, Problem, S
from astar_search.search.solution import NotFound, SearchResult, SearchStats, Solution

logger = logging.getLogger(__name__)


def bfs(problem: Problem[S]) -> SearchResult:
    """
    Breadth-first search; ignores the heuristic.
    Returns the solution with the fewest actions, which is the optimal one only
    when every action costs the same. Used as the exhaustive baseline.
    """
    stats = SearchStats(algorithm="BFS", peak_open=1)
    start = problem.initial_state
    q = deque([start])
    parent: Dict[S, Optional[Tuple[S, Action[S]]]] = {start: None}

    while q:
        stats.peak_open = max(stats.peak_open, len(q))
        s = q.popleft()
        if problem.is_terminal(s):
            actions: List[Action[S]] = []
            link = parent[s]
            while link is not None:
                prev, action = link
                actions.append(action)
                link = parent[prev]
            actions.reverse()
            cost = 0
            for a in actions:
                cost += a.cost
            stats.peak_closed = len(parent)
            logger.debug("BFS solved: %d actions, expanded=%d", len(actions), stats.expanded)
            return Solution(actions=tuple(actions), cost=cost, stats=stats)

        stats.expanded += 1
        for action in problem.actions(s):
            s2 = action.enact(s)
            stats.generated += 1
            if s2 in parent:
                stats.duplicates += 1
                continue
            parent[s2] = (s, action)
            q.append(s2)

    stats.peak_closed = len(parent)
    logger.debug("BFS exhausted: %d states", len(parent))
    return NotFound(stats=stats)
