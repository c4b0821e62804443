"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: The N-dimensional 3×…×3 cube, built on explicit Point objects.

"""
from __future__ import annotations

import copy
import random
from collections import Counter
from contextlib import contextmanager
from functools import wraps
from typing import Callable, Any, Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from ndcube.point import Point
from ndcube.rotation import Rotation, axis_name

HISTORY_COLUMNS = ["step", "axis", "from_axis", "to_axis", "side", "phase"]


def _history_row(step: int, r: Rotation, phase: str) -> dict:
    return {
        "step": step,
        "axis": r.axis,
        "from_axis": r.from_axis,
        "to_axis": r.to_axis,
        "side": int(r.side),
        "phase": phase,
    }


def track_history(method: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for Cube.rotate: logs every quarter-turn into `self._history`,
    unless history is disabled. Phase is taken from `self._phase` ("scramble"/"solve"/"manual").
    """
    @wraps(method)
    def wrapper(self, r: Rotation) -> Any:
        result = method(self, r)

        if self._history_enabled:
            step = int(self._history.shape[0])
            self._history.loc[step] = _history_row(step, r, self._phase)
        return result
    return wrapper


class Cube:
    """
    State container for a DIMS-dimensional cube built from 3^DIMS points.

    Design principles
    -----------------
    • The points are the only mutable state. Arrays, strings and plots are
      derived from them on demand.

    • `points[i]` always holds the point whose home is index i read in base 3
      (axis 0 least significant). Rotations change what a point knows about
      itself, never where it sits in the list.

    • Randomness comes from `self.rng` unless a generator is passed in, so a
      seeded cube scrambles and solves reproducibly.

    Attributes
    ----------
    dims : int
        Number of axes (>= 3).
    points : list[Point]
        All 3^dims points in base-3 enumeration order.
    rng : random.Random
        Default random source for shuffle/solve.
    last_result : SolveResult | None
        Outcome of the most recent `solve()`.

    Example
    -------
        c = Cube(3, seed=7)
        c.shuffle(5)
        moves = c.solve()
        c.show()
    """

    def __init__(self, dims: int = 3, seed: int | None = None):
        assert dims >= 3, f"a rotation needs three distinct axes, got dims={dims}"
        self.dims = dims
        self.num_points = 3 ** dims
        self.points: List[Point] = [Point.from_index(i, dims) for i in range(self.num_points)]
        self.rng = random.Random(seed)
        self.last_result = None

        self._history = pd.DataFrame(columns=HISTORY_COLUMNS)
        self._history_enabled = True
        self._phase = "manual"
        self._scramble_len = 0

    # ---------- history ----------
    @contextmanager
    def history_phase(self, phase: str):
        """
        Temporarily set the history 'phase' for recorded moves.
        Usage:
            with cube.history_phase('scramble'):
                cube.rotate(r)
        """
        prev = self._phase
        self._phase = phase
        try:
            yield
        finally:
            self._phase = prev

    @contextmanager
    def no_history(self):
        """Temporarily disable history recording (the solver's trial moves)."""
        prev = self._history_enabled
        self._history_enabled = False
        try:
            yield
        finally:
            self._history_enabled = prev

    def record_moves(self, moves: Iterable[Rotation], phase: str) -> None:
        """Append already-applied rotations to the history in one go."""
        if not self._history_enabled:
            return
        start = int(self._history.shape[0])
        rows = [_history_row(start + i, r, phase) for i, r in enumerate(moves)]
        if rows:
            frame = pd.DataFrame(rows, columns=HISTORY_COLUMNS)
            self._history = frame if start == 0 else pd.concat([self._history, frame], ignore_index=True)

    def clear_history(self) -> None:
        """Clear the history DataFrame and reset the scramble checkpoint."""
        self._history = pd.DataFrame(columns=HISTORY_COLUMNS)
        self._scramble_len = 0

    def moves_since_scramble(self) -> int:
        """Number of moves logged after the scramble checkpoint."""
        return max(0, int(self._history.shape[0]) - int(self._scramble_len))

    def get_history(self) -> pd.DataFrame:
        """
        Return a copy of the move history DataFrame.

        Columns:
            step (int)       : 0-based move index
            axis (int)       : axis turned around
            from_axis (int)  : first axis of the rotation plane
            to_axis (int)    : second axis of the rotation plane
            side (int)       : 0 or 2
            phase (str)      : 'manual', 'scramble' or 'solve'
        """
        return self._history.copy()

    def history_rotations(self) -> List[Rotation]:
        return [Rotation(int(row.axis), int(row.from_axis), int(row.to_axis), int(row.side))
                for row in self._history.itertuples(index=False)]

    # ---------- moves ----------
    @track_history
    def rotate(self, r: Rotation) -> None:
        """
        Apply a rotation to every point; only the addressed layer moves.

        Args:
            r: Rotation with distinct axes < dims.
        """
        for p in self.points:
            p.rotate(r)

    def rotate_n(self, r: Rotation, n: int) -> None:
        for _ in range(n):
            self.rotate(r)

    def undo_rotation(self, r: Rotation) -> None:
        # four quarter turns are the identity
        self.rotate_n(r, 3)

    def shuffle(self, times: int, rng: random.Random | None = None) -> None:
        """
        Apply `times` independent random rotations and mark the scramble checkpoint.

        Args:
            times: Number of quarter-turns to apply.
            rng: Random source; defaults to the cube's own generator.
        """
        if times < 0:
            raise ValueError(f"times must be non-negative, got {times}")
        rng = rng or self.rng
        with self.history_phase("scramble"):
            for _ in range(times):
                self.rotate(Rotation.random(self.dims, rng))
        self._scramble_len = int(self._history.shape[0])

    def solve(self, config=None, rng: random.Random | None = None) -> int:
        """
        Run the randomized local search until solved (or the configured cap).

        The full SolveResult is kept on `self.last_result`.

        Returns:
            Number of rotations in the kept move list.
        """
        from ndcube.solvers.local_search import LocalSearchSolver

        result = LocalSearchSolver(config).solve(self, rng=rng)
        self.last_result = result
        return result.num_moves

    # ---------- queries ----------
    def is_solved(self) -> bool:
        return all(
            p.is_in_original_position() and (p.is_in_original_orientation() or p.is_center())
            for p in self.points
        )

    def unsolvedness(self, penalty: int | None = None) -> int:
        return sum(p.incorrectness(penalty) for p in self.points)

    # ---------- views ----------
    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Convert the point state into numeric arrays.

        Returns:
            (original, coords, orientation), each int8 of shape (3^dims, dims);
            row i belongs to points[i].
        """
        original = np.array([p.original_coords for p in self.points], dtype=np.int8)
        coords = np.array([p.coords for p in self.points], dtype=np.int8)
        orientation = np.array([p.orientation for p in self.points], dtype=np.int8)
        return original, coords, orientation

    def state_key(self) -> tuple:
        """Hashable snapshot of every point's (coords, orientation)."""
        return tuple((tuple(p.coords), tuple(p.orientation)) for p in self.points)

    def copy(self) -> "Cube":
        return copy.deepcopy(self)

    def assert_invariants(self) -> None:
        """
        Verify that rotations kept the state consistent.

        Raises:
            AssertionError: If a coordinate left {0, 1, 2}, an orientation is
                            not a permutation, or the coordinate multiset changed.
        """
        original, coords, orientation = self.to_arrays()
        assert ((coords >= 0) & (coords <= 2)).all(), "coordinate out of range"
        expected = np.arange(self.dims)
        assert (np.sort(orientation, axis=1) == expected).all(), "orientation is not a permutation"
        assert Counter(map(tuple, coords.tolist())) == Counter(map(tuple, original.tolist())), \
            "coordinate multiset changed"

    def to_string(self, use_color: bool = True) -> str:
        lines = ["Current state: "]
        lines += [p.to_string(use_color) for p in self.points]
        lines.append(f"Solved? {'Yes' if self.is_solved() else 'No'}")
        lines.append(f"Unsolvedness: {self.unsolvedness()}")
        return "\n".join(lines)

    def show(self, use_color: bool = True) -> None:
        print(self.to_string(use_color))

    def plot_3d(self, ax: plt.Axes | None = None, axes: Sequence[int] = (0, 1, 2),
                fixed: dict[int, int] | None = None, figsize: tuple[int, int] = (6, 6)) -> plt.Axes:
        """
        Scatter the points of one 3D slice of the cube.

        Points are drawn at their current coordinates along `axes`; green if
        home and correctly oriented, red otherwise. For dims > 3 only points
        whose other current coordinates match `fixed` are drawn (default 0).

        Args:
            ax: Optional matplotlib 3D axis to plot on. If None, creates a new figure.
            axes: The three axes to draw.
            fixed: Mapping axis -> coordinate for the axes not drawn.
            figsize: Size of the figure (if created internally).
        """
        assert len(set(axes)) == 3 and max(axes) < self.dims, f"bad plot axes {axes}"
        fixed = fixed or {}
        others = {a: fixed.get(a, 0) for a in range(self.dims) if a not in axes}

        fig = None
        if ax is None:
            fig = plt.figure(figsize=figsize)
            ax = fig.add_subplot(111, projection="3d")

        xs, ys, zs, colors = [], [], [], []
        for p in self.points:
            if any(p.coords[a] != v for a, v in others.items()):
                continue
            ok = p.is_in_original_position() and (p.is_in_original_orientation() or p.is_center())
            xs.append(p.coords[axes[0]])
            ys.append(p.coords[axes[1]])
            zs.append(p.coords[axes[2]])
            colors.append("green" if ok else "red")

        ax.scatter(xs, ys, zs, c=colors, s=200, depthshade=False, edgecolors="k")
        ax.set_xlabel(axis_name(axes[0]))
        ax.set_ylabel(axis_name(axes[1]))
        ax.set_zlabel(axis_name(axes[2]))
        for setter in (ax.set_xlim, ax.set_ylim, ax.set_zlim):
            setter(-0.5, 2.5)
        ax.set_title(f"Unsolvedness: {self.unsolvedness()}")
        if fig is not None:
            plt.show()
        return ax
