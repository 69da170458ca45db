"""Diagnostic run: shows distance scores and reads the walls of the start cell."""

from __future__ import annotations

import sys

from .api import Simulator
from .maze import Heading, Position, new_grid, sense_walls

BANNER = (
    "Maze Solving Algorithm\n"
    "FOR TESTING PURPOSES ONLY!\n"
    "Version: 0.2\n"
    "Type: unknown\n"
    "Date: 25-06-2025\n"
    "\n"
)

# Highest cell index the neighbour lookup allows, fixed for a 16x16 maze.
_MAX_INDEX = 15


def distance_scores(rows: int, cols: int) -> list[list[int]]:
    """Scores counting steps out from the central cells, which score 0."""
    scores = [[0] * cols for _ in range(rows)]
    half_rows, half_cols = rows // 2, cols // 2
    for i in range(half_rows):
        for j in range(half_cols):
            distance = i + j
            scores[half_rows + i][half_cols + j] = distance
            scores[half_rows - 1 - i][half_cols - 1 - j] = distance
            scores[half_rows + i][half_cols - 1 - j] = distance
            scores[half_rows - 1 - i][half_cols + j] = distance
    return scores


def score_table(grid) -> str:
    """The grid's scores as tab-separated text, one line per row."""
    return "".join("".join(f"{cell.score}\t" for cell in row) + "\n" for row in grid)


def neighbour_scores(grid, pos: Position) -> dict[str, int]:
    """Scores of the open neighbours keyed n, s, e, w; 0 where blocked."""
    here = grid[pos.x][pos.y]
    scores = {"n": 0, "s": 0, "e": 0, "w": 0}
    if pos.y < _MAX_INDEX and not here.top_wall:
        scores["n"] = grid[pos.x][pos.y + 1].score
    if pos.y > 0 and not here.bottom_wall:
        scores["s"] = grid[pos.x][pos.y - 1].score
    if pos.x > 0 and not here.right_wall:
        scores["e"] = grid[pos.x - 1][pos.y].score
    if pos.x < _MAX_INDEX and not here.left_wall:
        scores["w"] = grid[pos.x + 1][pos.y].score
    return scores


def main(argv=None) -> int:
    """Show the score grid, then sense the start cell and score its neighbours."""
    sim = Simulator(sys.stdin, sys.stdout)
    rows = sim.maze_height()
    cols = sim.maze_width()
    grid = new_grid(rows, cols)
    for row, scores in zip(grid, distance_scores(rows, cols)):
        for cell, score in zip(row, scores):
            cell.score = score

    sys.stderr.write(BANNER)
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            sim.set_text(i, j, str(cell.score))
    sys.stderr.write(score_table(grid))
    sys.stderr.flush()

    pos = Position(0, 0, Heading.NORTH)
    sense_walls(grid, pos, sim)
    neighbour_scores(grid, pos)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())