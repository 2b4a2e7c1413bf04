from collections import deque

import pytest

from astar_search.domains.sliding_puzzle import SlidingPuzzleProblem
from astar_search.search.problem import FunctionProblem, StepAction

# Small weighted digraph with a cycle (C -> A) and an unreachable pair F <-> G.
# Cheapest A -> E is A-B-C-D-E with cost 1 + 2 + 1 + 3 = 7.
GRAPH = {
    "A": [("B", 1), ("C", 4)],
    "B": [("C", 2), ("D", 5)],
    "C": [("D", 1), ("A", 1)],
    "D": [("E", 3)],
    "E": [],
    "F": [("G", 1)],
    "G": [("F", 1)],
}
TRUE_DIST = {"A": 7, "B": 6, "C": 4, "D": 3, "E": 0}

SCENARIO = [[1, 4, 8], [6, 3, 0], [5, 2, 7]]
AIMA_BOARD = [[7, 2, 4], [5, 0, 6], [8, 3, 1]]
GOAL_3x3 = [[0, 1, 2], [3, 4, 5], [6, 7, 8]]


def graph_actions(node):
    return [StepAction(f"{node}->{nxt}", lambda _s, nxt=nxt: nxt, cost) for nxt, cost in GRAPH[node]]


def graph_problem(start="A", goal="E", h=None):
    return FunctionProblem(start, graph_actions, lambda s: s == goal, h)


@pytest.fixture
def scenario_problem():
    return SlidingPuzzleProblem.from_rows(SCENARIO)


def true_distances(puzzle):
    """Distance to the goal for every reachable board (moves are reversible)."""
    dist = {puzzle.goal: 0}
    q = deque([puzzle.goal])
    while q:
        s = q.popleft()
        for a in puzzle.actions(s):
            s2 = a.enact(s)
            if s2 not in dist:
                dist[s2] = dist[s] + 1
                q.append(s2)
    return dist
