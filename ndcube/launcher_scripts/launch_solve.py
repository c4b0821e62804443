'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Scramble cubes and run the local search on them, logging a CSV per experiment.

'''
#!/usr/bin/env python3
import argparse
import csv
import os
import random
import time
from dataclasses import replace

from ndcube.cube import Cube
from ndcube.scorer import ScoringOption
from ndcube.solvers.local_search import SearchConfig, LocalSearchSolver

SUMMARY_HEADER = ["run", "dims", "scramble", "solved", "moves", "iterations", "reverted",
                  "accepted_worse", "elapsed_s"]


def run_experiment(dims: int, scramble: int, runs: int, cfg: SearchConfig, seed: int,
                   exp_dir: str, trace_logs: bool = False) -> list:
    """
    Scramble `runs` fresh cubes and solve each one.

    Every run gets its own generator seeded from `seed`, so a run can be
    reproduced on its own. Writes summary.csv (and trace_<run>.csv when
    `trace_logs`) into `exp_dir`.

    Returns:
        List of SolveResult, one per run.
    """
    os.makedirs(exp_dir, exist_ok=True)
    summary_path = os.path.join(exp_dir, "summary.csv")
    results = []
    with open(summary_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(SUMMARY_HEADER)
        for run in range(runs):
            rng = random.Random(seed + run)
            cube = Cube(dims)
            cube.shuffle(scramble, rng=rng)

            run_cfg = cfg
            if trace_logs:
                run_cfg = replace(cfg, log_path=os.path.join(exp_dir, f"trace_{run}.csv"))
            result = LocalSearchSolver(run_cfg).solve(cube, rng=rng)
            results.append(result)

            writer.writerow([run, dims, scramble, int(result.solved), result.num_moves, result.iterations,
                             result.reverted, result.accepted_worse, f"{result.elapsed:.3f}"])
            print(f"run {run:>3d} | solved={result.solved!s:5} | moves={result.num_moves:>5d} | "
                  f"iters={result.iterations:>7d} | {result.elapsed:6.2f}s")
    return results


def main():
    p = argparse.ArgumentParser("Scramble and solve N-D cubes with randomized local search")
    p.add_argument("--dims", type=int, default=3)
    p.add_argument("--scramble", type=int, default=3)
    p.add_argument("--runs", type=int, default=5)
    p.add_argument("--max-iterations", type=int, default=100_000, dest="max_iterations",
                   help="per-run cap, 0 for unbounded")
    p.add_argument("--keep-worse", type=int, default=10, dest="keep_worse",
                   help="%% chance to keep a move that made things worse")
    p.add_argument("--keep-better", type=int, default=90, dest="keep_better",
                   help="%% chance to keep a move that didn't make things worse")
    p.add_argument("--scoring", choices=[o.name.lower() for o in ScoringOption], default="unsolvedness")
    p.add_argument("--trace-logs", action="store_true", dest="trace_logs")
    p.add_argument("--exp", type=str, default=None)
    p.add_argument("--outdir", type=str, default="runs")
    p.add_argument("--plot", action="store_true", help="plot the trace of the last run")
    p.add_argument("--seed", type=int, default=42)
    args = p.parse_args()

    if args.dims < 3:
        p.error("--dims must be at least 3")

    cfg = SearchConfig(
        keep_worse_pct=args.keep_worse,
        keep_better_pct=args.keep_better,
        scoring=ScoringOption[args.scoring.upper()],
        max_iterations=args.max_iterations or None,
    )
    exp_name = args.exp or time.strftime("solve_%Y%m%d-%H%M%S")
    exp_dir = os.path.join(args.outdir, exp_name)

    print(f"Solving {args.runs} cubes | dims={args.dims} | scramble={args.scramble} | seed={args.seed}")
    print("-" * 72)
    results = run_experiment(args.dims, args.scramble, args.runs, cfg, args.seed, exp_dir, args.trace_logs)
    solved = sum(r.solved for r in results)
    print("=" * 72)
    print(f"solved {solved}/{len(results)}; summary written to {os.path.join(exp_dir, 'summary.csv')}")

    if args.plot and results:
        from ndcube.visualisation.trace_plot import plot_trace
        plot_trace(results[-1])


if __name__ == "__main__":
    main()
