from __future__ import annotations
from dataclasses import dataclass
from numbers import Integral
from typing import Callable, Dict, List, Optional, Sequence, Tuple
import random

from astar_search.heuristics.linear_conflict import linear_conflict
from astar_search.heuristics.manhattan import manhattan, misplaced
from astar_search.search.problem import Action, Problem


@dataclass(frozen=True)
class Board:
    """Row-major R×C tile layout, 0 is the blank."""
    tiles: Tuple[int, ...]
    cols: int

    def __post_init__(self):
        n = len(self.tiles)
        if self.cols < 1 or n % self.cols != 0:
            raise ValueError(f"{n} tiles do not fill rows of width {self.cols}")
        for t in self.tiles:
            if isinstance(t, bool) or not isinstance(t, Integral):
                raise ValueError(f"Board cells must be integers, got {t!r}")
        if sorted(self.tiles) != list(range(n)):
            raise ValueError(f"Board must hold each of 0..{n - 1} exactly once, got {self.tiles}")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        if not rows or not rows[0]:
            raise ValueError("Board must have at least one row and one column")
        cols = len(rows[0])
        for r in rows:
            if len(r) != cols:
                raise ValueError(f"Board rows must all have {cols} cells, got {list(map(len, rows))}")
        return cls(tuple(t for r in rows for t in r), cols)

    @property
    def rows(self) -> int:
        return len(self.tiles) // self.cols

    def as_rows(self) -> List[List[int]]:
        return [list(self.tiles[r * self.cols:(r + 1) * self.cols]) for r in range(self.rows)]

    def swapped(self, i: int, j: int) -> "Board":
        lst = list(self.tiles)
        lst[i], lst[j] = lst[j], lst[i]
        return Board(tuple(lst), self.cols)

    def __str__(self) -> str:
        width = len(str(len(self.tiles) - 1))
        return "\n".join(" ".join(f"{t:>{width}}" for t in row) for row in self.as_rows())


class SlideAction(Action[Board]):
    """Move the blank from `blank` to the adjacent cell `target` (unit cost)."""
    def __init__(self, blank: int, target: int, cols: int):
        super().__init__(1)
        self.blank = blank
        self.target = target
        self.cols = cols

    def enact(self, state: Board) -> Board:
        return state.swapped(self.blank, self.target)

    def __repr__(self) -> str:
        return f"SlideAction({self.blank} -> {self.target})"

    def __str__(self) -> str:
        r, c = divmod(self.target, self.cols)
        return f"move to ({r}, {c})"


class SlidingPuzzle:
    """
    Generic R×C sliding-tile puzzle (0 is blank).
    Works for 2×2, 3×3 (8-puzzle), 3×4, 4×4 (15-puzzle), etc.
    The default goal has the blank in the top-left corner:
        0 1 2
        3 4 5
        6 7 8
    """
    def __init__(self, rows: int, cols: int, goal: Optional[Board] = None):
        if rows < 2 or cols < 2:
            raise ValueError(f"Puzzle needs at least 2x2 cells, got {rows}x{cols}")
        self.R = rows
        self.C = cols
        self.size = rows * cols
        if goal is None:
            goal = Board(tuple(range(self.size)), cols)
        if goal.cols != cols or goal.rows != rows:
            raise ValueError(f"Goal is {goal.rows}x{goal.cols}, puzzle is {rows}x{cols}")
        self.goal = goal

        # Precompute neighbor indices for the blank
        self._nei: Dict[int, Tuple[int, ...]] = {}
        for i in range(self.size):
            r, c = divmod(i, self.C)
            moves = []
            if c > 0:             moves.append(i - 1)
            if c < self.C - 1:    moves.append(i + 1)
            if r > 0:             moves.append(i - self.C)
            if r < self.R - 1:    moves.append(i + self.C)
            self._nei[i] = tuple(moves)

        # Goal positions for each tile
        self._goal_pos: Dict[int, Tuple[int, int]] = {
            t: divmod(idx, self.C) for idx, t in enumerate(goal.tiles) if t != 0
        }

    @classmethod
    def for_board(cls, board: Board, goal: Optional[Board] = None) -> "SlidingPuzzle":
        return cls(board.rows, board.cols, goal)

    def __repr__(self) -> str:
        return f"SlidingPuzzle({self.R}x{self.C})"

    # ---------- transitions ----------
    def actions(self, s: Board) -> List[SlideAction]:
        z = s.tiles.index(0)
        return [SlideAction(z, j, self.C) for j in self._nei[z]]

    # ---------- instance generation ----------
    def scramble(self, depth: int, seed: int) -> Board:
        """Random walk of `depth` blank moves from the goal, no immediate backtracks."""
        rng = random.Random(seed)
        s = self.goal
        last_blank = None
        for _ in range(depth):
            z = s.tiles.index(0)
            cand = list(self._nei[z])
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            last_blank = z
            s = s.swapped(z, j)
        return s

    def unsolvable_variant(self, s: Board) -> Board:
        """Swap the first two non-blank tiles, which flips solvability."""
        i, j = [k for k, t in enumerate(s.tiles) if t != 0][:2]
        return s.swapped(i, j)

    # ---------- solvability ----------
    def _parity(self, s: Board) -> int:
        """
        Move invariant:
        - width odd  -> inversions mod 2
        - width even -> (inversions + blank row counted from the bottom) mod 2
        """
        arr = [x for x in s.tiles if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.C % 2 == 1:
            return inv % 2
        blank_row_from_bottom = self.R - s.tiles.index(0) // self.C
        return (inv + blank_row_from_bottom) % 2

    def is_solvable(self, s: Board) -> bool:
        return self._parity(s) == self._parity(self.goal)

    # ---------- heuristics ----------
    def manhattan(self, s: Board) -> int:
        return manhattan(s.tiles, self.C, self._goal_pos)

    def linear_conflict(self, s: Board) -> int:
        return linear_conflict(s.tiles, self.R, self.C, self._goal_pos)

    def misplaced(self, s: Board) -> int:
        return misplaced(s.tiles, self.C, self._goal_pos)

    def heuristic(self, name: str) -> Callable[[Board], int]:
        try:
            return getattr(self, HEURISTICS[name])
        except KeyError:
            raise ValueError(f"Unknown heuristic {name!r}; expected one of {sorted(HEURISTICS)}") from None


HEURISTICS: Dict[str, str] = {
    "manhattan": "manhattan",
    "linear_conflict": "linear_conflict",
    "misplaced": "misplaced",
}


class SlidingPuzzleProblem(Problem[Board]):
    """Reach the puzzle's goal layout from `initial` with as few slides as possible."""
    def __init__(self, puzzle: SlidingPuzzle, initial: Board, heuristic: str = "manhattan"):
        if initial.rows != puzzle.R or initial.cols != puzzle.C:
            raise ValueError(f"Board is {initial.rows}x{initial.cols}, puzzle is {puzzle.R}x{puzzle.C}")
        super().__init__(initial)
        self.puzzle = puzzle
        self.heuristic_name = heuristic
        self._h = puzzle.heuristic(heuristic)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], heuristic: str = "manhattan",
                  goal: Optional[Sequence[Sequence[int]]] = None) -> "SlidingPuzzleProblem":
        board = Board.from_rows(rows)
        goal_board = Board.from_rows(goal) if goal is not None else None
        return cls(SlidingPuzzle.for_board(board, goal_board), board, heuristic)

    def actions(self, state: Board) -> List[SlideAction]:
        return self.puzzle.actions(state)

    def is_terminal(self, state: Board) -> bool:
        return state == self.puzzle.goal

    def heuristic(self, state: Board) -> int:
        return self._h(state)

    def __str__(self) -> str:
        return "\n" + str(self.initial_state) + "\n"
