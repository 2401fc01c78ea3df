"""Tests for the command line front-end."""

import pytest

from py_gridnav.cli import build_parser, main, render
from py_gridnav.search import bfs


class TestCli:
    """Test running the CLI end to end."""

    def test_plain_run(self, capsys):
        code = main(["--rows", "8", "--cols", "12", "--algorithm", "bfs", "--log-level", "WARNING"])
        out = capsys.readouterr().out.splitlines()

        assert code == 0
        assert len(out) == 8
        assert all(len(line) == 12 for line in out)
        assert "*" in "".join(out)

    def test_maze_terrain_and_race(self, capsys):
        code = main(
            [
                "--rows", "15",
                "--cols", "21",
                "--maze", "randomized_dfs",
                "--terrain",
                "--seed", "7",
                "--algorithm", "dijkstra",
                "--race", "astar",
                "--log-level", "INFO",
            ]
        )
        captured = capsys.readouterr()

        assert code == 0
        assert len(captured.out.splitlines()) == 15
        assert '"kind": "race"' in captured.err
        assert '"winner"' in captured.err

    def test_invalid_grid_returns_error(self, capsys):
        code = main(["--rows", "3", "--cols", "3", "--log-level", "CRITICAL"])
        assert code == 2
        assert "error" in capsys.readouterr().err

    def test_unknown_algorithm_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--algorithm", "teleport"])


class TestRender:
    def test_path_drawn_between_endpoints(self, wall_column_grid):
        lines = render(wall_column_grid, bfs(wall_column_grid).path)

        assert lines[0][0] == "S"
        assert lines[4][4] == "F"
        assert "".join(lines).count("*") == 7
        assert lines[4][1:4] == "***"
        assert lines[0][2] == "#"

    def test_shared_cells_marked(self, wall_column_grid):
        path = bfs(wall_column_grid).path
        lines = render(wall_column_grid, path, path)
        assert "".join(lines).count("@") == 7
        assert "*" not in "".join(lines)
