import os
import sys
import numpy as np
import matplotlib.pyplot as plt

from envs.grid import CellState, MazeGrid


def render_maze(grid: MazeGrid, path=None, ax=None, title=None,
                start=None, goal=None):
    """
    Render a MazeGrid.

    Layers:
      - open cells (white), blocked cells (dark gray), annotated cells (light green)
      - path polyline (lime)
      - start (green star), goal (red star)
    """
    H, W = grid.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(W, 1) / 5, max(H, 1) / 5), dpi=120)

    ax.set_xticks([]); ax.set_yticks([])
    if H == 0 or W == 0:
        if title:
            ax.set_title(title, fontsize=9)
        return ax

    rgb = np.ones((H, W, 3), dtype=float)
    rgb[~grid.open_mask()] = 0.2
    rgb[grid.cells == CellState.PATH] = (0.75, 1.0, 0.75)

    ax.imshow(rgb, interpolation="nearest", origin="upper")

    if path:
        rr, cc = zip(*path)
        ax.plot(cc, rr, color="lime", lw=2, alpha=0.8)
        start = start if start is not None else path[0]
        goal = goal if goal is not None else path[-1]

    if start is not None and grid.in_bounds(*start):
        ax.plot(start[1], start[0], marker="*", markersize=10, markeredgecolor="k", markerfacecolor="lime", lw=0)
        ax.text(start[1]+0.2, start[0]-0.2, "S", color="k", fontsize=8)
    if goal is not None and grid.in_bounds(*goal):
        ax.plot(goal[1], goal[0], marker="*", markersize=10, markeredgecolor="k", markerfacecolor="red", lw=0)
        ax.text(goal[1]+0.2, goal[0]-0.2, "G", color="k", fontsize=8)

    if title:
        ax.set_title(title, fontsize=9)
    return ax


def save_maze_figure(grid: MazeGrid, out_path: str, path=None, title=None,
                     start=None, goal=None) -> str:
    H, W = grid.shape
    fig, ax = plt.subplots(figsize=(max(W, 4) / 4, max(H, 4) / 4), dpi=120)
    render_maze(grid, path=path, ax=ax, title=title, start=start, goal=goal)
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
    return out_path


def main(maze_path, out_path):
    from envs.parser import read_maze
    from planners.bfs import BFSPlanner, corner_endpoints

    grid = read_maze(maze_path)
    start, goal = corner_endpoints(grid)
    res = BFSPlanner().search(grid, start, goal, want_path=True)
    title = f"bfs: solved in {res.distance} steps" if res else "bfs: no solution"
    save_maze_figure(grid, out_path, path=res.path, title=title, start=start, goal=goal)
    print("Saved:", out_path)


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python -m tools.plot_maze <maze.txt> <out.png>")
        raise SystemExit(1)
    main(sys.argv[1], sys.argv[2])
