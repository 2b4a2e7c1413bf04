from typing import Dict, Sequence, Tuple

GoalPos = Dict[int, Tuple[int, int]]


def manhattan(tiles: Sequence[int], cols: int, goal_pos: GoalPos) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(tiles):
        if tile == 0:
            continue
        r, c = divmod(idx, cols)
        gr, gc = goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist


def misplaced(tiles: Sequence[int], cols: int, goal_pos: GoalPos) -> int:
    """Number of tiles (blank ignored) not on their goal cell."""
    count = 0
    for idx, tile in enumerate(tiles):
        if tile != 0 and divmod(idx, cols) != goal_pos[tile]:
            count += 1
    return count
