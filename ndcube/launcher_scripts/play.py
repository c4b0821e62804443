'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Interactive player for the N-D cube. Reads rotations typed as four digits.

'''
#!/usr/bin/env python3
import argparse
from typing import Callable, List

from ndcube.cube import Cube
from ndcube.rotation import Rotation, Side
from ndcube.solvers.local_search import SearchConfig


class RotationParseError(ValueError):
    """Raised when typed rotation text can't be turned into a legal Rotation."""


def intro(dims: int) -> str:
    return "\n".join([
        f"The N-D Cube (where N is currently {dims})",
        "Enter rotations in the form of four digits (like 1230), where",
        " - the first digit is the axis to rotate around",
        " - the second digit is the axis to rotate from",
        " - the third digit is the axis to rotate to",
        " - the fourth digit is the side to rotate [either 0 or 2]",
        "For example, to rotate the top face clockwise",
        " - we would be rotating around the Y axis (axis 1), ",
        " - from the Z axis (2), ",
        " - to the X axis (0), ",
        ' - and we would be rotating the face "further in the Y direction" (higher up) (2). ',
        "So our command would be 1202.",
        "Several rotations can be separated by commas (1202,0120).",
        "Other commands: show, solve, shuffle N, help, q",
    ])


def parse_rotation(text: str, dims: int) -> Rotation:
    """
    Parse one four-digit command such as "1202".

    Raises:
        RotationParseError: On anything that isn't a legal rotation for `dims`.
    """
    token = text.strip()
    if len(token) != 4 or not token.isdigit():
        raise RotationParseError(f"'{token}' is not four digits")
    axis, from_axis, to_axis, side = (int(c) for c in token)
    if max(axis, from_axis, to_axis) >= dims:
        raise RotationParseError(f"'{token}': axes must be below {dims}")
    if len({axis, from_axis, to_axis}) != 3:
        raise RotationParseError(f"'{token}': the three axes must be different")
    if side not in (Side.FRONT, Side.BACK):
        raise RotationParseError(f"'{token}': side must be 0 or 2")
    return Rotation(axis, from_axis, to_axis, Side(side))


def parse_rotations(text: str, dims: int) -> List[Rotation]:
    """Parse a comma separated list of four-digit commands."""
    parts = [part for part in text.split(",") if part.strip()]
    if not parts:
        raise RotationParseError("no rotation given")
    return [parse_rotation(part, dims) for part in parts]


def run_repl(cube: Cube,
             read: Callable[[str], str] = input,
             write: Callable[[str], None] = print,
             use_color: bool = True,
             solve_config: SearchConfig | None = None) -> None:
    """
    Read commands until 'q' (or end of input), applying rotations to `cube`.

    Malformed input is reported through `write` and the loop continues.
    """
    while True:
        try:
            value = read("Enter a rotation: ").strip()
        except EOFError:
            break
        command = value.lower()

        if command in ("q", "quit", "exit"):
            break
        if not command:
            continue
        if command == "help":
            write(intro(cube.dims))
            continue
        if command == "show":
            write(cube.to_string(use_color))
            continue
        if command == "solve":
            moves = cube.solve(solve_config)
            if cube.last_result.solved:
                write(f"solved in {moves} rotations.")
            else:
                write(f"gave up after {cube.last_result.iterations} iterations.")
            write(cube.to_string(use_color))
            continue
        if command.startswith("shuffle"):
            arg = command[len("shuffle"):].strip() or "100"
            if not arg.isdigit():
                write(f"Invalid shuffle count: '{arg}'")
                continue
            cube.shuffle(int(arg))
            write(cube.to_string(use_color))
            continue

        try:
            rotations = parse_rotations(value, cube.dims)
        except RotationParseError as e:
            write(f"Invalid rotation: {e}")
            continue

        with cube.history_phase("manual"):
            for r in rotations:
                cube.rotate(r)
        write(cube.to_string(use_color))


def main():
    p = argparse.ArgumentParser("Play the N-D cube")
    p.add_argument("--dims", type=int, default=3)
    p.add_argument("--shuffle", type=int, default=100, help="random rotations applied before play")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--no-color", action="store_true", dest="no_color")
    p.add_argument("--max-iterations", type=int, default=None, dest="max_iterations",
                   help="cap for the 'solve' command (default: until solved)")
    p.add_argument("--verbose", action="store_true", help="print the score while solving")
    args = p.parse_args()

    if args.dims < 3:
        p.error("--dims must be at least 3")

    print(intro(args.dims))
    cube = Cube(args.dims, seed=args.seed)
    cube.shuffle(args.shuffle)
    cube.show(use_color=not args.no_color)

    cfg = SearchConfig(max_iterations=args.max_iterations, verbose=args.verbose)
    run_repl(cube, use_color=not args.no_color, solve_config=cfg)


if __name__ == "__main__":
    main()
