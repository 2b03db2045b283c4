"""Command-line interface."""

from __future__ import annotations

from typer.testing import CliRunner

from frontend.cli.commands import MAX_NODES_ENV, app

runner = CliRunner()


def test_check_solvable() -> None:
    result = runner.invoke(app, ["check", "1,3,2,4,7,5,_,8,6"])
    assert result.exit_code == 0
    assert "solvable (4 inversions)" in result.stdout


def test_check_unsolvable() -> None:
    result = runner.invoke(app, ["check", "2,1,3,4,5,6,7,8,_"])
    assert result.exit_code == 1
    assert "unsolvable (1 inversions)" in result.stdout


def test_check_rejects_bad_board() -> None:
    result = runner.invoke(app, ["check", "1,1,2"])
    assert result.exit_code == 2


def test_check_rejects_non_ascii_digit() -> None:
    result = runner.invoke(app, ["check", "1,2,3,4,5,6,7,8,\u00b2"])
    assert result.exit_code == 2


def test_hint() -> None:
    result = runner.invoke(app, ["hint", "1,2,3,4,5,6,7,_,8"])
    assert result.exit_code == 0
    assert "move tile 8 at position 8 ←" in result.stdout


def test_hint_already_solved() -> None:
    result = runner.invoke(app, ["hint", "1,2,3,4,5,6,7,8,_"])
    assert result.exit_code == 0
    assert "already solved" in result.stdout


def test_hint_unsolvable() -> None:
    result = runner.invoke(app, ["hint", "2,1,3,4,5,6,7,8,_"])
    assert result.exit_code == 1
    assert "unsolvable" in result.stdout


def test_hint_budget_from_environment() -> None:
    result = runner.invoke(
        app, ["hint", "1,2,3,4,5,6,_,7,8"], env={MAX_NODES_ENV: "1"}
    )
    assert result.exit_code == 3
    assert "no hint found after 1 nodes" in result.stdout


def test_solve() -> None:
    result = runner.invoke(app, ["solve", "1,2,3,4,5,6,_,7,8"])
    assert result.exit_code == 0
    assert "2 moves: 7 8" in result.stdout


def test_solve_goal() -> None:
    result = runner.invoke(app, ["solve", "1 2 3 4 5 6 7 8 _"])
    assert result.exit_code == 0
    assert "already solved" in result.stdout


def test_shuffle_zero_steps() -> None:
    result = runner.invoke(app, ["shuffle", "--steps", "0"])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[0] == "1,2,3,4,5,6,7,8,_"
    assert result.stdout.splitlines()[1:4] == ["  1 2 3", "  4 5 6", "  7 8 _"]


def test_shuffle_is_reproducible_and_solvable() -> None:
    first = runner.invoke(app, ["shuffle", "--seed", "3"])
    second = runner.invoke(app, ["shuffle", "--seed", "3"])
    assert first.exit_code == 0
    assert first.stdout == second.stdout

    board = first.stdout.splitlines()[0]
    check = runner.invoke(app, ["check", board])
    assert check.exit_code == 0


def test_launcher_exposes_the_same_app() -> None:
    import main

    assert main.app is app
