"""Typer command line: play, check, hint, solve and shuffle."""

import logging
import random
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from backend.engine.gamegenerator import DEFAULT_SHUFFLE_STEPS, GameGenerator
from backend.engine.gamesolver import DEFAULT_MAX_NODES, HintStatus, Solver
from backend.errors import BoardInvariantError
from backend.models.board import EMPTY, SIZE, Board, Direction

MAX_NODES_ENV = "EIGHT_PUZZLE_MAX_NODES"


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_path=False,
            )
        ],
        force=True,
    )


def _parse_board(text: str) -> Board:
    try:
        return Board.parse(text)
    except BoardInvariantError as exc:
        raise typer.BadParameter(str(exc), param_hint="BOARD") from exc


def _print_grid(board: Board) -> None:
    for r in range(SIZE):
        row = board.tiles[r * SIZE : (r + 1) * SIZE]
        print("  " + " ".join("_" if v == EMPTY else str(v) for v in row))


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)

_max_nodes_option = typer.Option(
    DEFAULT_MAX_NODES, "--max-nodes",
    min=1, envvar=MAX_NODES_ENV,
    help="Search budget (expanded nodes) before giving up.",
)


@app.callback()
def _main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log solver diagnostics.",
    ),
) -> None:
    """Play, check, hint and solve 3×3 sliding puzzles."""
    _setup_logging(verbose)


@app.command()
def play(
    board: Optional[str] = typer.Argument(
        None, help="Starting board, e.g. 1,3,2,4,7,5,_,8,6.",
    ),
    shuffle: bool = typer.Option(
        False, "--shuffle",
        help="Scramble the board before starting.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible shuffles.",
    ),
    max_nodes: int = _max_nodes_option,
) -> None:
    """Play in the terminal."""
    from frontend.cli.rich.app import run

    start = _parse_board(board) if board is not None else None
    run(board=start, shuffle=shuffle, seed=seed, max_nodes=max_nodes)


@app.command()
def check(board: str = typer.Argument(..., help="Board to check.")) -> None:
    """Report whether BOARD can be solved."""
    parsed = _parse_board(board)
    inversions = Solver.inversions(parsed.tiles)
    if Solver.is_solvable(parsed):
        print(f"solvable ({inversions} inversions)")
    else:
        print(f"unsolvable ({inversions} inversions)")
        raise typer.Exit(code=1)


@app.command()
def hint(
    board: str = typer.Argument(..., help="Current board."),
    max_nodes: int = _max_nodes_option,
) -> None:
    """Print the tile to move next."""
    parsed = _parse_board(board)
    if not Solver.is_solvable(parsed):
        print("unsolvable")
        raise typer.Exit(code=1)

    result = Solver.first_move(parsed, max_nodes=max_nodes)
    if result.status is HintStatus.ALREADY_SOLVED:
        print("already solved")
    elif result.found and result.position is not None:
        tile = parsed.get_tile(result.position)
        arrow = Direction.between(result.position, parsed.empty_pos).arrow
        print(f"move tile {tile} at position {result.position} {arrow}")
    else:
        print(f"no hint found after {result.expanded} nodes")
        raise typer.Exit(code=3)


@app.command()
def solve(
    board: str = typer.Argument(..., help="Board to solve."),
    max_nodes: int = _max_nodes_option,
) -> None:
    """Print a shortest sequence of tile positions to move."""
    parsed = _parse_board(board)
    if parsed.is_solved():
        print("already solved")
        return
    if not Solver.is_solvable(parsed):
        print("unsolvable")
        raise typer.Exit(code=1)
    path = Solver.solve(parsed, max_nodes=max_nodes)
    if not path:
        print("no solution found")
        raise typer.Exit(code=3)
    print(f"{len(path)} moves: " + " ".join(str(p) for p in path))


@app.command()
def shuffle(
    steps: int = typer.Option(
        DEFAULT_SHUFFLE_STEPS, "-n", "--steps",
        min=0,
        help="Number of random moves from the goal.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
) -> None:
    """Print a random solvable board."""
    rng = random.Random(seed) if seed is not None else None
    board = GameGenerator.generate(steps, rng)
    print(board)
    _print_grid(board)

