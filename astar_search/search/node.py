from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

ROOT = -1


@dataclass
class SearchNode:
    """
    One entry of the A* node arena.
    parent is the arena index of the predecessor (ROOT for the initial state);
    action is the action that led here from the parent.
    """
    state: Any
    g: float
    h: float
    parent: int = ROOT
    action: Optional[Any] = None

    @property
    def f(self) -> float:
        return self.g + self.h
