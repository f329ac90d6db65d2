"""Tests for the command line entry point."""

import pytest

from turncost.__main__ import main


def test_reports_cost_and_tiles(maze_files, capsys):
    assert main([str(maze_files["small"])]) == 0
    out = capsys.readouterr().out
    assert "Lowest cost: 7036" in out
    assert "Optimal tiles: 45" in out


def test_cost_only(maze_files, capsys):
    assert main([str(maze_files["twin"]), "--part", "cost"]) == 0
    out = capsys.readouterr().out
    assert "Lowest cost: 3004" in out
    assert "Optimal tiles" not in out


def test_tiles_only_with_render(maze_files, capsys):
    assert main([str(maze_files["twin"]), "--part", "tiles", "--render"]) == 0
    out = capsys.readouterr().out
    assert "Optimal tiles: 8" in out
    assert "Lowest cost" not in out
    assert "#S#E#" in out


def test_start_direction_and_costs(maze_files, capsys):
    assert main([str(maze_files["twin"]), "--part", "cost", "--direction", "up",
                 "--turn-cost", "10"]) == 0
    # Up, turn, right two, turn, down: 1 + 2 + 1 steps and two turns
    assert "Lowest cost: 24" in capsys.readouterr().out


def test_render_with_free_moves(capsys):
    assert main(["--generate", "11", "11", "--seed", "0", "--loops", "0.5",
                 "--forward-cost", "0", "--turn-cost", "0", "--render"]) == 0
    assert "Lowest cost: 0" in capsys.readouterr().out


def test_unreachable_end(maze_files, capsys):
    assert main([str(maze_files["enclosed"])]) == 1
    assert "No path" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Failed to prepare maze" in capsys.readouterr().out


def test_generate_and_save(tmp_path, capsys):
    target = tmp_path / "generated.txt"
    assert main(["--generate", "11", "9", "--seed", "4", "--save", str(target)]) == 0
    out = capsys.readouterr().out
    assert "Generated maze 11x9" in out
    assert "Optimal tiles" in out
    assert target.read_text().count("S") == 1


def test_requires_a_maze(capsys):
    with pytest.raises(SystemExit):
        main([])


def test_rejects_negative_costs(maze_files):
    with pytest.raises(SystemExit):
        main([str(maze_files["twin"]), "--turn-cost", "-1"])
