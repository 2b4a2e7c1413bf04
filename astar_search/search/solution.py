from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, ClassVar, Dict, Generic, List, Optional, Sequence, Tuple, Union

from astar_search.search.node import ROOT, SearchNode
from astar_search.search.problem import Action, S


@dataclass
class SearchStats:
    """Counters filled in by one search call (column names match the runner CSV)."""
    algorithm: str = ""
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    peak_open: Optional[int] = None
    peak_closed: Optional[int] = None
    peak_recursion: Optional[int] = None
    bound_final: Optional[float] = None
    iterations: int = 0
    tie_break: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Solution(Generic[S]):
    """Ordered actions from the initial state to a terminal state, and their total cost."""
    actions: Tuple[Action[S], ...]
    cost: float
    stats: SearchStats = field(default_factory=SearchStats, compare=False, repr=False)

    found: ClassVar[bool] = True

    def __len__(self) -> int:
        return len(self.actions)

    def __iter__(self):
        return iter(self.actions)

    def __bool__(self) -> bool:
        return True

    def replay(self, initial_state: S) -> List[S]:
        """States visited when applying the actions in order, initial state included."""
        states = [initial_state]
        for action in self.actions:
            states.append(action.enact(states[-1]))
        return states

    def __str__(self) -> str:
        steps = ", ".join(str(a) for a in self.actions) or "(no moves)"
        return f"Solution[{len(self.actions)} actions, cost {self.cost:g}]: {steps}"


@dataclass(frozen=True)
class NotFound:
    """No terminal state is reachable from the initial state."""
    stats: SearchStats = field(default_factory=SearchStats, compare=False, repr=False)

    found: ClassVar[bool] = False

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "No solution"


SearchResult = Union[Solution, NotFound]


def reconstruct(nodes: Sequence[SearchNode], handle: int, stats: SearchStats) -> Solution:
    """Walk parent handles from nodes[handle] back to the root and reverse."""
    actions: List[Action] = []
    cost = nodes[handle].g
    while handle != ROOT:
        node = nodes[handle]
        if node.action is not None:
            actions.append(node.action)
        handle = node.parent
    actions.reverse()
    return Solution(actions=tuple(actions), cost=cost, stats=stats)


def from_path(actions: Sequence[Action], g: float, stats: SearchStats) -> Solution:
    """Solution from an action stack already in root-to-goal order."""
    return Solution(actions=tuple(actions), cost=g, stats=stats)
