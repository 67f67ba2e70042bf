from typing import Callable, Dict

from eightpuzzle.heuristics.linear_conflict import linear_conflict
from eightpuzzle.heuristics.manhattan import manhattan

Heuristic = Callable[..., int]

HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "linear_conflict": linear_conflict,
}

def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(f"unknown heuristic {name!r}; choose from {sorted(HEURISTICS)}") from None
