"""Score-guided exploration that drives the mouse towards the maze centre."""

from __future__ import annotations

import sys

from .api import Simulator
from .maze import Heading, Position, new_grid, sense_walls

_STEPS = {
    Heading.NORTH: (0, 1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, -1),
    Heading.WEST: (-1, 0),
}

_BLOCKING_WALL = {
    Heading.NORTH: "top_wall",
    Heading.EAST: "right_wall",
    Heading.SOUTH: "bottom_wall",
    Heading.WEST: "left_wall",
}


def center_scores(rows: int, cols: int) -> list[list[int]]:
    """Scores rising from 1 at the corners towards the centre, mirrored in both axes."""
    half_rows, half_cols = rows // 2, cols // 2

    def fold(i: int, size: int, half: int) -> int:
        return i if i < half else size - 1 - i

    def score(i: int, j: int) -> int:
        fi, fj = fold(i, rows, half_rows), fold(j, cols, half_cols)
        if fi < half_rows and fj < half_cols:
            return 1 + fi * fj + fi + fj
        return 1

    return [[score(i, j) for j in range(cols)] for i in range(rows)]


def goal_cells(rows: int, cols: int) -> frozenset[tuple[int, int]]:
    """The 2x2 block of cells counted as the goal."""
    goal_x = cols // 2 - (1 if cols % 2 == 0 else 0)
    goal_y = rows // 2 - (1 if rows % 2 == 0 else 0)
    return frozenset((x, y) for x in (goal_x, goal_x + 1) for y in (goal_y, goal_y + 1))


def rotate_to(sim, heading: Heading, target: Heading) -> Heading:
    """Turn the mouse from ``heading`` to ``target`` with the fewest turns."""
    diff = (target - heading) % 4
    if diff == 1:
        sim.turn_right()
    elif diff == 2:
        sim.turn_right()
        sim.turn_right()
    elif diff == 3:
        sim.turn_left()
    return Heading(target)


def _open_neighbours(grid, pos: Position, rows: int, cols: int):
    here = grid[pos.x][pos.y]
    for heading, (dx, dy) in _STEPS.items():
        nx, ny = pos.x + dx, pos.y + dy
        if not (0 <= nx < cols and 0 <= ny < rows):
            continue
        if getattr(here, _BLOCKING_WALL[heading]):
            continue
        yield heading, nx, ny, grid[nx][ny]


def next_move(grid, pos: Position, rows: int, cols: int, sim) -> Position:
    """Step to the best reachable neighbour and return the new position.

    Unexplored neighbours win, the lowest score among them and the last in
    N, E, S, W order on a tie. Otherwise the lowest-scored neighbour, the first
    on a tie. With nowhere to go the position is returned unchanged.
    """
    options = list(_open_neighbours(grid, pos, rows, cols))
    if not options:
        return pos
    unexplored = [option for option in options if not option[3].explored]
    if unexplored:
        heading, nx, ny, _ = min(reversed(unexplored), key=lambda option: option[3].score)
    else:
        heading, nx, ny, _ = min(options, key=lambda option: option[3].score)
    heading = rotate_to(sim, pos.heading, heading)
    sim.move_forward()
    return Position(nx, ny, heading)


def solve(sim) -> Position:
    """Explore until a goal cell is reached and return the final position."""
    rows = sim.maze_height()
    cols = sim.maze_width()
    grid = new_grid(rows, cols)
    for i, (row, scores) in enumerate(zip(grid, center_scores(rows, cols))):
        for j, (cell, score) in enumerate(zip(row, scores)):
            cell.score = score
            sim.set_text(i, j, str(score))

    goals = goal_cells(rows, cols)
    pos = Position(0, 0, Heading.NORTH)
    while True:
        sense_walls(grid, pos, sim)
        pos = next_move(grid, pos, rows, cols, sim)
        if (pos.x, pos.y) in goals:
            sim.set_color(pos.x, pos.y, "g")
            sys.stderr.write("Goal reached!\n")
            sys.stderr.flush()
            return pos


def main(argv=None) -> int:
    """Run the solver against a simulator on standard input and output."""
    solve(Simulator(sys.stdin, sys.stdout))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())