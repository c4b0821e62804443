'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Randomized local search (hill climbing with occasional uphill moves) for the N-D cube.

'''
from __future__ import annotations

import csv
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from ndcube.cube import Cube
from ndcube.rotation import Rotation
from ndcube.scorer import Scorer, ScoringOption


@dataclass
class SearchConfig:
    """
    Configuration for the randomized local search.

    Each iteration applies a random rotation and draws an integer in [0, 100).
    Moves that make the score worse are kept with probability
    `keep_worse_pct`%, which lets the walk climb out of local optima; moves
    that don't make it worse are kept with probability `keep_better_pct`%.
    Rejected moves are undone.

    Tuning tips:
    - keep_worse_pct=0 turns the walk into a strict descent that can get stuck.
    - Higher keep_worse_pct explores more but drifts away from solved faster.
    """

    keep_worse_pct: int = 10
    # Chance (in %) of keeping a move that increased the score.

    keep_better_pct: int = 90
    # Chance (in %) of keeping a move that did not increase the score.

    scoring: ScoringOption = ScoringOption.UNSOLVEDNESS
    # Objective to minimise. UNSOLVEDNESS = Σ displacement + orientation penalty.

    max_iterations: Optional[int] = None
    # Give up after this many iterations. None runs until solved.

    verbose: bool = False
    # Print the score while searching.

    print_every: int = 1
    # With verbose, print every N iterations.

    log_path: Optional[str] = None
    # Optional CSV file receiving one row per iteration.

    def __post_init__(self):
        for name in ("keep_worse_pct", "keep_better_pct"):
            value = getattr(self, name)
            if not (0 <= value <= 100):
                raise ValueError(f"{name} must be between 0 and 100, got {value}")
        if self.max_iterations is not None and self.max_iterations < 0:
            raise ValueError(f"max_iterations must be non-negative, got {self.max_iterations}")
        if self.print_every < 1:
            raise ValueError(f"print_every must be positive, got {self.print_every}")


def keep_move(last_score: int, current_score: int, draw: int, cfg: SearchConfig) -> bool:
    """
    Decide whether a tentative move stays.

    Args:
        last_score: Score before the move.
        current_score: Score after the move.
        draw: Uniform integer in [0, 100).
        cfg: Supplies the two acceptance percentages.

    Returns:
        True to keep the move, False to undo it.

    Examples:
        >>> cfg = SearchConfig()
        >>> keep_move(10, 12, 5, cfg), keep_move(10, 12, 50, cfg)
        (True, False)
        >>> keep_move(10, 8, 5, cfg), keep_move(10, 8, 50, cfg)
        (False, True)
    """
    if current_score > last_score:
        return draw < cfg.keep_worse_pct
    return draw >= 100 - cfg.keep_better_pct


@dataclass
class SolveResult:
    """
    Outcome of one local search run.

    Attributes:
        solved: Whether the cube ended solved (False only when the cap was hit).
        moves: Kept rotations, in the order they were applied.
        iterations: Number of tentative moves tried.
        reverted: How many tentative moves were undone.
        accepted_worse: How many kept moves increased the score.
        trace: Score after each iteration.
        elapsed: Wall time in seconds.
    """
    solved: bool
    moves: List[Rotation] = field(default_factory=list)
    iterations: int = 0
    reverted: int = 0
    accepted_worse: int = 0
    trace: List[int] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def num_moves(self) -> int:
        return len(self.moves)

    def trace_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"iteration": range(1, len(self.trace) + 1), "score": self.trace})


class LocalSearchSolver:
    """
    Random-walk solver biased towards lower scores.

    Loop, until the cube is solved:
      1. Remember the current score.
      2. Apply a uniformly random rotation and append it to the kept moves.
      3. Draw an integer in [0, 100).
      4. Score again; if `keep_move` says no, undo the rotation (three more
         quarter turns) and drop it from the kept moves.

    There is no convergence guarantee; `SearchConfig.max_iterations` bounds
    the walk when needed.

    Parameters
    ----------
    config : SearchConfig, optional
        Defaults to SearchConfig().

    Example
    -------
        cube = Cube(3, seed=1)
        cube.shuffle(2)
        result = LocalSearchSolver(SearchConfig(max_iterations=10_000)).solve(cube)
        result.solved, result.num_moves
    """

    LOG_HEADER = ["iteration", "score", "kept_moves", "reverted", "accepted_worse"]

    def __init__(self, config: SearchConfig | None = None):
        self.cfg = config or SearchConfig()
        self.scorer = Scorer(self.cfg.scoring)

    def solve(self, cube: Cube, rng: random.Random | None = None) -> SolveResult:
        """
        Search in place on `cube`.

        Trial moves are not written to the cube history; the kept moves are
        appended afterwards with phase "solve".

        Args:
            cube: The cube to solve; mutated.
            rng: Random source; defaults to `cube.rng`.
        """
        rng = rng or cube.rng
        cfg = self.cfg
        result = SolveResult(solved=False)
        start = time.time()

        log_file = None
        writer = None
        if cfg.log_path:
            log_file = open(cfg.log_path, "w", newline="")
            writer = csv.writer(log_file)
            writer.writerow(self.LOG_HEADER)

        try:
            with cube.no_history():
                while not cube.is_solved():
                    if cfg.max_iterations is not None and result.iterations >= cfg.max_iterations:
                        break
                    last_score = self.scorer(cube)
                    r = Rotation.random(cube.dims, rng)
                    cube.rotate(r)
                    result.moves.append(r)
                    draw = rng.randrange(100)
                    current_score = self.scorer(cube)

                    if keep_move(last_score, current_score, draw, cfg):
                        if current_score > last_score:
                            result.accepted_worse += 1
                    else:
                        cube.undo_rotation(r)
                        result.moves.pop()
                        result.reverted += 1
                        current_score = last_score

                    result.iterations += 1
                    result.trace.append(current_score)
                    if writer is not None:
                        writer.writerow([result.iterations, current_score, len(result.moves),
                                         result.reverted, result.accepted_worse])
                    if cfg.verbose and result.iterations % cfg.print_every == 0:
                        print(current_score)
        finally:
            if log_file is not None:
                log_file.close()

        result.solved = cube.is_solved()
        result.elapsed = time.time() - start
        cube.record_moves(result.moves, phase="solve")

        if cfg.verbose:
            if result.solved:
                print(f"solved in {result.num_moves} rotations.")
            else:
                print(f"gave up after {result.iterations} iterations "
                      f"({result.num_moves} rotations kept, score {self.scorer(cube)}).")
        return result
