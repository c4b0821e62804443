'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Plot how the score evolved during a local search run.

'''

import matplotlib.pyplot as plt


def plot_trace(result, ax=None, figsize=(8, 4), show=True):
    """
    Line plot of the score after each iteration of a SolveResult.

    Args:
        result: SolveResult from LocalSearchSolver.solve / Cube.last_result.
        ax: Optional matplotlib axis. If None, creates a new figure.
        figsize: Size of the figure (if created internally).
        show: Call plt.show() when the figure was created here.

    Returns:
        The axis drawn on.
    """
    frame = result.trace_frame()
    fig = None
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)

    ax.plot(frame["iteration"], frame["score"], lw=1)
    ax.set_xlabel("iteration")
    ax.set_ylabel("score")
    status = "solved" if result.solved else "unsolved"
    ax.set_title(f"{status}: {result.num_moves} moves kept, {result.reverted} reverted")
    ax.grid(True, alpha=0.3)

    if fig is not None and show:
        plt.show()
    return ax
