'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Objectives the local search can minimise.

'''

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Dict

from ndcube.cube import Cube


def _unsolvedness(cube: Cube) -> int:
    return cube.unsolvedness()


def _displacement(cube: Cube) -> int:
    """Total Manhattan displacement, ignoring orientation."""
    return sum(p.dist_from_original() for p in cube.points)


def _misplaced(cube: Cube) -> int:
    """Number of points that are not home, or home but visibly twisted."""
    return sum(
        1 for p in cube.points
        if not (p.is_in_original_position() and (p.is_in_original_orientation() or p.is_center()))
    )


class ScoringOption(Enum):
    UNSOLVEDNESS = auto()
    DISPLACEMENT = auto()
    MISPLACED = auto()


_SCORERS: Dict[ScoringOption, Callable[[Cube], int]] = {
    ScoringOption.UNSOLVEDNESS: _unsolvedness,
    ScoringOption.DISPLACEMENT: _displacement,
    ScoringOption.MISPLACED: _misplaced,
}


class Scorer:
    """
    Callable wrapper around one scoring option. Lower is better; every
    option is 0 on a solved cube.

    Example:
        >>> Scorer(ScoringOption.MISPLACED)(Cube(3))
        0
    """

    def __init__(self, option: ScoringOption = ScoringOption.UNSOLVEDNESS):
        self.option = option
        self._fn = _SCORERS[option]

    def __call__(self, cube: Cube) -> int:
        return self._fn(cube)

    def __repr__(self) -> str:
        return f"Scorer({self.option.name})"
