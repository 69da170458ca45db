# micromouse

Maze-solving agents for a micromouse simulator. The simulator starts the
agent as a child process, sends its answers to the agent's standard input,
and reads commands from the agent's standard output, one per line.
Diagnostic messages go to standard error.

## Installing

```
pip install .
```

## Commands

`micromouse-solve` runs the solver. It asks for the maze size, gives every
cell a score that is 1 at the corners and rises toward the centre
(mirrored in both directions), and writes those scores into the simulator.
Then it walks the maze starting at cell (0, 0) facing north: at each cell
it colours the cell yellow, reads the wall sensors, and draws the walls it
found. It then turns toward an open neighbour and moves one cell. Among
unexplored neighbours it takes the lowest score; if every open neighbour
has been explored, it takes the lowest-scoring one. It stops when it
reaches a cell of the 2x2 goal block at the centre, colours that cell
green and prints `Goal reached!` on standard error.

`micromouse-tester` is a diagnostic agent. It scores every cell by its
step distance from the central cells (which score 0), writes the scores
into the simulator, prints a banner and the scores as a tab-separated
table on standard error, senses the walls of the start cell, and exits.

Point the simulator's run command at either of these.

## Using the library

`micromouse.api.Simulator` wraps the text protocol. Pass it any pair of
text streams:

```python
import io
from micromouse.api import Simulator

sim = Simulator(io.StringIO("16\n"), io.StringIO())
print(sim.maze_width())  # 16
```

Queries such as `maze_width`, `maze_height`, `wall_front`, `wall_left`,
`wall_right`, `move_forward`, `turn_left`, `turn_right`, `was_reset` and
`ack_reset` write a command and read one reply line; if the input stream
ends, they raise `EOFError`. Drawing calls such as `set_wall`,
`clear_wall`, `set_color`, `clear_color`, `clear_all_color`, `set_text`,
`clear_text` and `clear_all_text` only write.

`micromouse.maze` holds the grid model (`Cell`, `Position`, `Heading`,
`new_grid`) and the wall sensing shared by both agents (`sense_walls`,
`mark_walls`).

`micromouse.solver` provides `solve`, which runs the solver against a
`Simulator` and returns the final `Position`, along with its parts:
`center_scores`, `goal_cells`, `rotate_to` and `next_move`.

`micromouse.tester` provides `distance_scores`, `score_table` and
`neighbour_scores`, which build, format and look up the tester's scores.

## Limitations

- The solver does not check whether a move succeeded, does not respond to
  simulator resets, and does not return to the start or make a second,
  faster run once it has reached the goal.
- If the solver finds itself in a cell with no open neighbour, it keeps
  sensing that cell and never finishes.
- `neighbour_scores` assumes a 16x16 maze when checking the upper edges.

## Tests

```
pip install .[test]
pytest
```