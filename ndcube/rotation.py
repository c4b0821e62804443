'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Rotation value type for the N-dimensional cube.

'''
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

# names used when rendering axes; axis 4+ falls back to its index
AXIS_NAMES = "XYZW"


class Side(IntEnum):
    """Which outer layer along the rotation axis is turned."""
    FRONT = 0
    BACK = 2


def axis_name(axis: int) -> str:
    return AXIS_NAMES[axis] if axis < len(AXIS_NAMES) else str(axis)


@dataclass(frozen=True)
class Rotation:
    """
    One quarter-turn of a single layer of the cube.

    The layer is the set of points whose coordinate along `axis` equals
    `side`. Inside that layer the 3×3 plane spanned by `from_axis` and
    `to_axis` is turned by 90°, carrying `from_axis` towards `to_axis`.

    Attributes:
        axis: Axis the layer is turned around.
        from_axis: First axis of the rotation plane.
        to_axis: Second axis of the rotation plane.
        side: Side.FRONT (layer 0) or Side.BACK (layer 2).

    Example:
        Rotation(1, 2, 0, Side.BACK) turns the "top" layer (Y == 2) from Z to X,
        which is the command "1202" in the interactive player.
    """
    axis: int
    from_axis: int
    to_axis: int
    side: Side

    def __post_init__(self):
        assert self.axis != self.from_axis and self.from_axis != self.to_axis and self.to_axis != self.axis, \
            f"rotation axes must be distinct: {self}"
        assert min(self.axis, self.from_axis, self.to_axis) >= 0, f"negative axis in {self}"
        assert self.side in (Side.FRONT, Side.BACK), f"illegal side {self.side!r}"
        # normalise raw ints (0/2) to the enum
        object.__setattr__(self, "side", Side(self.side))

    @staticmethod
    def random(dims: int, rng: random.Random | None = None) -> "Rotation":
        """
        Draw a uniformly random legal rotation for a `dims`-dimensional cube.

        Draw order is side, axis, from_axis, to_axis, each through
        `rng.randrange`, so a scripted generator reproduces any rotation.

        Args:
            dims: Number of axes (>= 3).
            rng: Random source; defaults to the `random` module.
        """
        rng = rng or random
        side = Side(rng.randrange(2) * 2)
        axis = rng.randrange(dims)
        from_choices = [a for a in range(dims) if a != axis]
        from_axis = from_choices[rng.randrange(len(from_choices))]
        to_choices = [a for a in range(dims) if a != axis and a != from_axis]
        to_axis = to_choices[rng.randrange(len(to_choices))]
        return Rotation(axis, from_axis, to_axis, side)

    def is_valid(self, dims: int) -> bool:
        return max(self.axis, self.from_axis, self.to_axis) < dims

    def inverse(self) -> "Rotation":
        """The rotation that undoes this one in a single application."""
        return Rotation(self.axis, self.to_axis, self.from_axis, self.side)

    def to_command(self) -> str:
        """Four-digit command as typed in the player, e.g. "1202"."""
        return f"{self.axis}{self.from_axis}{self.to_axis}{int(self.side)}"

    def describe(self) -> str:
        return (f"around {axis_name(self.axis)} from {axis_name(self.from_axis)} "
                f"to {axis_name(self.to_axis)} on side {int(self.side)}")
