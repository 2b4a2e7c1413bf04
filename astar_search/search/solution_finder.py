from __future__ import annotations
from enum import Enum
from typing import Union

from astar_search.search.a_star import a_star
from astar_search.search.bfs import bfs
from astar_search.search.ida_star import ida_star
from astar_search.search.problem import Problem, S
from astar_search.search.solution import SearchResult


class Strategy(str, Enum):
    A_STAR = "a"
    IDA_STAR = "ida"
    BFS = "bfs"


def find_solution(problem: Problem[S], limited_memory: bool = False, tie_break: str = "g") -> SearchResult:
    """
    Solve `problem` with A* (default) or, when limited_memory is set, with IDA*.
    Both return a Solution of the same optimal cost, or NotFound.
    tie_break only applies to A*.
    """
    if limited_memory:
        return ida_star(problem)
    return a_star(problem, tie_break=tie_break)


def solve(problem: Problem[S], strategy: Union[Strategy, str], tie_break: str = "g") -> SearchResult:
    """Dispatch by Strategy (or its string value, as used on the command line)."""
    strategy = Strategy(strategy)
    if strategy is Strategy.A_STAR:
        return a_star(problem, tie_break=tie_break)
    if strategy is Strategy.IDA_STAR:
        return ida_star(problem)
    return bfs(problem)
