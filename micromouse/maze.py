"""Cell grid, mouse position and wall sensing."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum


class Heading(IntEnum):
    """Direction the mouse faces; turning right adds one."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@dataclass
class Cell:
    """What is known about one maze cell."""

    top_wall: bool = False
    bottom_wall: bool = False
    left_wall: bool = False
    right_wall: bool = False
    score: int = 0
    explored: bool = False


@dataclass(frozen=True)
class Position:
    """Cell coordinates of the mouse and the way it faces."""

    x: int
    y: int
    heading: Heading = Heading.NORTH


# For each heading, which cell wall each sensor reading belongs to, in query order.
_SENSING = {
    Heading.NORTH: (("top_wall", "wall_front"), ("left_wall", "wall_left"), ("right_wall", "wall_right")),
    Heading.EAST: (("top_wall", "wall_right"), ("bottom_wall", "wall_left"), ("left_wall", "wall_front")),
    Heading.SOUTH: (("bottom_wall", "wall_front"), ("left_wall", "wall_right"), ("right_wall", "wall_left")),
    Heading.WEST: (("top_wall", "wall_left"), ("bottom_wall", "wall_right"), ("right_wall", "wall_front")),
}


def _log(text: str) -> None:
    sys.stderr.write(text)
    sys.stderr.flush()


def new_grid(rows: int, cols: int) -> list[list[Cell]]:
    """Return ``rows`` lists of ``cols`` blank cells, indexed ``grid[x][y]``."""
    return [[Cell() for _ in range(cols)] for _ in range(rows)]


def mark_walls(grid, pos: Position, sim) -> None:
    """Show the known walls of the current cell in the simulator.

    The north wall is only shown while the cell is still unexplored; the
    other walls are shown on every visit.
    """
    cell = grid[pos.x][pos.y]
    if not cell.explored and cell.top_wall:
        sim.set_wall(pos.x, pos.y, "n")
    if cell.bottom_wall:
        sim.set_wall(pos.x, pos.y, "s")
    if cell.left_wall:
        sim.set_wall(pos.x, pos.y, "w")
    if cell.right_wall:
        sim.set_wall(pos.x, pos.y, "e")


def sense_walls(grid, pos: Position, sim) -> Cell:
    """Read the sensors into the current cell, show its walls and mark it explored."""
    sim.set_color(pos.x, pos.y, "y")
    cell = grid[pos.x][pos.y]
    readings = _SENSING.get(pos.heading)
    if readings is None:
        _log("Error checking walls\n")
    else:
        for wall, sensor in readings:
            setattr(cell, wall, bool(getattr(sim, sensor)()))
    mark_walls(grid, pos, sim)
    cell.explored = True
    return cell