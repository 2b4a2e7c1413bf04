from bisect import bisect_left
from typing import List, Sequence

from astar_search.heuristics.manhattan import GoalPos, manhattan


def _longest_increasing(seq: List[int]) -> int:
    tails: List[int] = []
    for x in seq:
        i = bisect_left(tails, x)
        if i == len(tails):
            tails.append(x)
        else:
            tails[i] = x
    return len(tails)


def _line_penalty(goal_coords: List[int]) -> int:
    # tiles that must leave the line so the rest keep their relative order
    return 2 * (len(goal_coords) - _longest_increasing(goal_coords))


def linear_conflict(tiles: Sequence[int], rows: int, cols: int, goal_pos: GoalPos) -> int:
    """
    Manhattan + 2 for every tile that has to step out of its goal row (or
    column) to let tiles in that line pass each other.
    Only the minimum number of tiles leaving each line is charged, never one
    per inverted pair.
    """
    h = manhattan(tiles, cols, goal_pos)
    # Row conflicts
    for r in range(rows):
        row = tiles[r * cols:(r + 1) * cols]
        h += _line_penalty([goal_pos[t][1] for t in row if t != 0 and goal_pos[t][0] == r])
    # Column conflicts
    for c in range(cols):
        col = [tiles[c + r * cols] for r in range(rows)]
        h += _line_penalty([goal_pos[t][0] for t in col if t != 0 and goal_pos[t][1] == c])
    return h
