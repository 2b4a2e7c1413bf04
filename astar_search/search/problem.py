from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, Optional, Sequence, TypeVar

# Any immutable value with equality and a stable hash can be a state.
S = TypeVar("S", bound=Hashable)


class Action(ABC, Generic[S]):
    """
    A cost-bearing transformation of a state.
    cost: non-negative step cost, fixed at construction.
    enact(state) must return a new state and leave the input untouched.
    """
    def __init__(self, cost: float = 1):
        if cost < 0:
            raise ValueError(f"Action cost must be non-negative, got {cost!r}")
        self.cost = cost

    @abstractmethod
    def enact(self, state: S) -> S: ...


class StepAction(Action[S]):
    """Action built from a plain function; `name` is used for display only."""
    def __init__(self, name: str, fn: Callable[[S], S], cost: float = 1):
        super().__init__(cost)
        self.name = name
        self.fn = fn

    def enact(self, state: S) -> S:
        return self.fn(state)

    def __repr__(self) -> str:
        return f"StepAction({self.name!r}, cost={self.cost})"

    def __str__(self) -> str:
        return self.name


class Problem(ABC, Generic[S]):
    """
    Binds an initial state to a domain.
    The engines only ever call actions / is_terminal / heuristic, and may call
    them many times with the same state, so answers must not depend on call order.
    heuristic() must never overestimate the remaining cost for the returned
    solutions to be optimal; this is not checked.
    """
    def __init__(self, initial_state: S):
        try:
            hash(initial_state)
        except TypeError as e:
            raise ValueError(f"Initial state must be hashable: {initial_state!r}") from e
        self.initial_state = initial_state

    @abstractmethod
    def actions(self, state: S) -> Sequence[Action[S]]: ...

    @abstractmethod
    def is_terminal(self, state: S) -> bool: ...

    def heuristic(self, state: S) -> float:
        return 0


class FunctionProblem(Problem[S]):
    """Problem assembled from plain callables."""
    def __init__(
        self,
        initial_state: S,
        actions: Callable[[S], Sequence[Action[S]]],
        is_terminal: Callable[[S], bool],
        heuristic: Optional[Callable[[S], float]] = None,
    ):
        super().__init__(initial_state)
        self._actions = actions
        self._is_terminal = is_terminal
        self._heuristic = heuristic

    def actions(self, state: S) -> Sequence[Action[S]]:
        return self._actions(state)

    def is_terminal(self, state: S) -> bool:
        return self._is_terminal(state)

    def heuristic(self, state: S) -> float:
        if self._heuristic is None:
            return 0
        return self._heuristic(state)

    def __repr__(self) -> str:
        return f"FunctionProblem(initial_state={self.initial_state!r})"
