'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: A single point (sub-cell) of the N-dimensional cube.

'''

from dataclasses import dataclass
from typing import Dict, List, Tuple, ClassVar

from ndcube.rotation import Rotation

RED = "\033[31m"
GREEN = "\033[32m"
RESET = "\033[0m"

# Quarter turn of a 3×3 layer, keyed on (coords[from_axis], coords[to_axis]).
# new_from = 2 - to, new_to = from
ROTATION_TABLE: Dict[Tuple[int, int], Tuple[int, int]] = {
    (0, 0): (2, 0),
    (0, 1): (1, 0),
    (0, 2): (0, 0),
    (1, 0): (2, 1),
    (1, 1): (1, 1),
    (1, 2): (0, 1),
    (2, 0): (2, 2),
    (2, 1): (1, 2),
    (2, 2): (0, 2),
}


@dataclass
class Point:
    """
    One sub-cell of the cube.

    A point is identified by the coordinates it starts at. Rotations move it
    (`coords`) and twist it (`orientation`); `original_coords` never changes
    and is the point's home in the solved cube.

    Attributes:
        original_coords: Home coordinates, one value in {0, 1, 2} per axis.
        coords: Current coordinates.
        orientation: Permutation of axis labels; slot i holds the axis that
            currently sits where axis i started. Identity when untwisted.
    """
    original_coords: Tuple[int, ...]
    coords: List[int]
    orientation: List[int]

    ORIENTATION_PENALTY: ClassVar[int] = 10

    @classmethod
    def create(cls, coords) -> "Point":
        coords = tuple(int(c) for c in coords)
        return cls(original_coords=coords, coords=list(coords), orientation=list(range(len(coords))))

    @classmethod
    def from_index(cls, index: int, dims: int) -> "Point":
        """Point whose coordinates are `index` written in base 3, axis 0 least significant."""
        return cls.create((index // 3 ** axis) % 3 for axis in range(dims))

    @property
    def dims(self) -> int:
        return len(self.coords)

    def rotate(self, r: Rotation) -> None:
        """
        Apply a rotation in place if this point lies on the turned layer.

        Args:
            r: The rotation. Its axes must be distinct and < dims.
        """
        assert r.axis != r.from_axis and r.from_axis != r.to_axis and r.to_axis != r.axis
        assert r.axis < self.dims and r.from_axis < self.dims and r.to_axis < self.dims, \
            f"{r} out of range for {self.dims} dimensions"

        if self.coords[r.axis] != r.side:
            return

        o = self.orientation
        o[r.from_axis], o[r.to_axis] = o[r.to_axis], o[r.from_axis]

        pair = (self.coords[r.from_axis], self.coords[r.to_axis])
        assert pair in ROTATION_TABLE, f"corrupted coordinates {self.coords}"
        self.coords[r.from_axis], self.coords[r.to_axis] = ROTATION_TABLE[pair]

    # --- queries ---
    def is_in_original_position(self) -> bool:
        return tuple(self.coords) == self.original_coords

    def is_in_original_orientation(self) -> bool:
        return all(a < b for a, b in zip(self.orientation, self.orientation[1:]))

    def is_center(self) -> bool:
        # orientation of a face center can't be observed
        return self.coords.count(1) == self.dims - 1

    def dist_from_original(self) -> int:
        return sum(abs(c - o) for c, o in zip(self.coords, self.original_coords))

    def incorrectness(self, penalty: int | None = None) -> int:
        """
        Manhattan displacement plus a flat penalty when the point is twisted.

        Args:
            penalty: Orientation penalty, defaults to ORIENTATION_PENALTY.
        """
        if penalty is None:
            penalty = self.ORIENTATION_PENALTY
        twisted = 0 if self.is_in_original_orientation() else 1
        return self.dist_from_original() + twisted * penalty

    def to_string(self, use_color: bool = True) -> str:
        def paint(values, ok: bool) -> str:
            text = " ".join(str(v) for v in values)
            if not use_color:
                return text
            return f"{GREEN if ok else RED}{text}{RESET}"

        return (f"Current coordinates: {paint(self.coords, self.is_in_original_position())} "
                f"Orientation: {paint(self.orientation, self.is_in_original_orientation())} "
                f"Original coordinates: {' '.join(str(v) for v in self.original_coords)}")

    def __repr__(self) -> str:
        return f"Point: home={self.original_coords} coords={tuple(self.coords)} ori={tuple(self.orientation)}"
