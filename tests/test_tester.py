import io
import sys

import pytest

from micromouse.maze import Cell, Position, new_grid
from micromouse.tester import BANNER, distance_scores, main, neighbour_scores, score_table


@pytest.mark.parametrize("rows, cols", [(16, 16), (4, 4), (6, 8)])
def test_distance_scores_even_symmetry(rows, cols):
    scores = distance_scores(rows, cols)
    for i in range(rows):
        for j in range(cols):
            assert scores[i][j] == scores[rows - 1 - i][cols - 1 - j]
            assert scores[i][j] == scores[rows - 1 - i][j]
    r2, c2 = rows // 2, cols // 2
    assert {scores[r2 - 1][c2 - 1], scores[r2][c2], scores[r2 - 1][c2], scores[r2][c2 - 1]} == {0}


def test_distance_scores_step_by_one():
    scores = distance_scores(16, 16)
    for i in range(8, 15):
        assert scores[i + 1][8] == scores[i][8] + 1
    assert scores[0][0] == max(max(row) for row in scores)


def grid_with_scores(rows, cols):
    grid = new_grid(rows, cols)
    for row, scores in zip(grid, distance_scores(rows, cols)):
        for cell, score in zip(row, scores):
            cell.score = score
    return grid


def test_score_table_format():
    grid = new_grid(2, 2)
    grid[0][1].score = 3
    assert score_table(grid) == "0\t3\t\n0\t0\t\n"


def test_neighbour_scores_corner_start():
    grid = grid_with_scores(16, 16)
    result = neighbour_scores(grid, Position(0, 0))
    assert result == {"n": grid[0][1].score, "s": 0, "e": 0, "w": grid[1][0].score}


def test_neighbour_scores_blocked_by_walls():
    grid = grid_with_scores(16, 16)
    grid[3][3] = Cell(top_wall=True, bottom_wall=True, left_wall=True, right_wall=True, score=grid[3][3].score)
    assert neighbour_scores(grid, Position(3, 3)) == {"n": 0, "s": 0, "e": 0, "w": 0}


def test_neighbour_scores_far_corner():
    grid = grid_with_scores(16, 16)
    result = neighbour_scores(grid, Position(15, 15))
    assert result == {"n": 0, "s": grid[15][14].score, "e": grid[14][15].score, "w": 0}


def test_main_protocol(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("16\n16\ntrue\nfalse\nfalse\n"))
    assert main() == 0
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines[:2] == ["mazeHeight", "mazeWidth"]
    scores = distance_scores(16, 16)
    assert lines[2:258] == [f"setText {i} {j} {scores[i][j]}" for i in range(16) for j in range(16)]
    assert lines[258:] == ["setColor 0 0 y", "wallFront", "wallLeft", "wallRight", "setWall 0 0 n"]
    assert captured.err.startswith(BANNER)
    assert captured.err[len(BANNER):] == score_table(grid_with_scores(16, 16))