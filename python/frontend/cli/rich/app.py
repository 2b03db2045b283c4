"""Rich terminal frontend: styled board, clock and hint arrow.

Talks to the backend only through ``GamePlay``: keypresses become tile
positions, and the board redraw is driven by the slots the session reports
as changed.
"""

from __future__ import annotations

import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import DEFAULT_MAX_NODES, HintResult, HintStatus, Solver
from backend.models.board import EMPTY, SIZE, Board, Direction
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- helpers ------------------------------------------------------------------


def format_time(seconds: float) -> str:
    """Format a duration as ``MM:SS.t``."""
    tenths = max(0, int(seconds * 10))
    m, rest = divmod(tenths, 600)
    s, t = divmod(rest, 10)
    return f"{m:02d}:{s:02d}.{t}"


class SlotTracker:
    """Collects the positions the session reports as changed.

    The board view highlights them on the next draw and then forgets them.
    """

    def __init__(self) -> None:
        self.changed: set[int] = set()

    def on_slot_changed(self, position: int) -> None:
        self.changed.add(position)

    def drain(self) -> set[int]:
        changed, self.changed = self.changed, set()
        return changed


# -- board rendering ----------------------------------------------------------


def render_board(
    board: Board,
    changed: set[int] | frozenset[int] = frozenset(),
    hint: tuple[int, Direction] | None = None,
) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=2, justify="center")

    for r in range(SIZE):
        cells: list[str] = []
        for c in range(SIZE):
            pos = r * SIZE + c
            val = board.get_tile(pos)
            if val == EMPTY:
                cells.append("[dim]·[/dim]")
            elif hint is not None and hint[0] == pos:
                cells.append(f"[bold black on yellow]{val}{hint[1].arrow}[/]")
            elif pos in changed:
                cells.append(f"[bold cyan]{val}[/bold cyan]")
            elif board.is_tile_correct(pos):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def describe_hint(game: GamePlay, result: HintResult) -> str:
    """Turn a hint result into a status line."""
    if result.status is HintStatus.ALREADY_SOLVED:
        return "[green]Already solved![/green]"
    if not result.found or result.position is None:
        return "[yellow]No hint available.[/yellow]"
    tile = game.state.board.get_tile(result.position)
    direction = Direction.between(result.position, game.state.board.empty_pos)
    return f"[cyan]Hint:[/cyan] move [bold]{tile}[/bold] {direction.arrow}"


# -- screens ------------------------------------------------------------------


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_time(game.state.elapsed_time), style="bold yellow")
    stats.append("    Hints: ", style="dim")
    stats.append(str(game.state.hints_used), style="bold yellow")
    return stats


def _controls(game: GamePlay) -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("1-8", style="bold cyan")
    controls.append("  move   ", style="dim")
    if not game.state.running:
        controls.append("Enter", style="bold green")
        controls.append("  start   ", style="dim")
    if game.hint_available:
        controls.append("N", style="bold cyan")
        controls.append("  hint   ", style="dim")
        controls.append("V", style="bold cyan")
        controls.append("  solve   ", style="dim")
    controls.append("X", style="bold yellow")
    controls.append("  shuffle   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


def _draw_game(
    game: GamePlay,
    tracker: SlotTracker,
    status: str = "",
    hint: tuple[int, Direction] | None = None,
) -> None:
    console.clear()
    board_table = render_board(game.state.board, tracker.drain(), hint)

    panel = Panel(
        Align.center(board_table),
        title="[bold cyan]Eight Puzzle[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))
    if game.warning:
        console.print(Align.center(Text(f"  {game.warning}", style="bold red")))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls(game)))


def _draw_win(game: GamePlay) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("SOLVED!", style="bold green")
    congrats.append("  ★\n", style="bold yellow")

    group = Group(
        Align.center(render_board(game.state.board)),
        Align.center(congrats),
        Align.center(_stats(game)),
    )
    panel = Panel(
        group,
        title="[bold green]Eight Puzzle[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  X shuffle  R replay  Q quit\n", style="dim"))
    )


def _auto_solve(game: GamePlay, tracker: SlotTracker) -> str:
    path = Solver.solve(game.state.board.copy(), max_nodes=game.max_nodes)
    if not path:
        if game.is_won:
            return "[green]Already solved![/green]"
        return "[red]No solution found.[/red]"

    for i, position in enumerate(path, 1):
        game.move_tile(position)
        _draw_game(game, tracker, f"[bold cyan]Solving… move {i}/{len(path)}[/]")
        sys.stdout.flush()
        time.sleep(0.15)

    return f"[bold green]Solved in {len(path)} moves![/bold green]"


# -- game loop ----------------------------------------------------------------


def _handle(
    game: GamePlay, tracker: SlotTracker, key: str
) -> tuple[str, tuple[int, Direction] | None]:
    """Apply one action.  Returns ``(status, hint)`` for the next draw."""
    if key in _DIRECTIONS:
        game.move(_DIRECTIONS[key])
    elif key.isdigit():
        game.move_tile(game.state.board.position_of(int(key)))
    elif key == "start":
        game.start()
        return "[green]Clock started.[/green]", None
    elif key == "shuffle":
        game.shuffle()
        return "[yellow]Shuffled! Press Enter to start.[/yellow]", None
    elif key == "reset":
        game.reset()
        return "[yellow]Back to the starting layout.[/yellow]", None
    elif key == "hint" and game.hint_available:
        result = game.hint()
        hint = None
        if result.found and result.position is not None:
            hint = (
                result.position,
                Direction.between(result.position, game.state.board.empty_pos),
            )
        return describe_hint(game, result), hint
    elif key == "solve" and game.hint_available:
        return _auto_solve(game, tracker), None
    return "", None


def _after_win(game: GamePlay, key: str) -> bool:
    """Handle a key on the win screen.  Returns True to quit."""
    if key == "quit":
        return True
    if key == "shuffle":
        game.shuffle()
    elif key == "reset":
        game.reset()
        game.state.reset_timer()
    return False


def _play(game: GamePlay, tracker: SlotTracker) -> None:
    status = ""
    hint: tuple[int, Direction] | None = None

    while True:
        if game.is_won and game.state.moves:
            game.state.pause()
            _draw_win(game)
            if _after_win(game, get_key()):
                return
            continue

        _draw_game(game, tracker, status, hint)

        # Short timeout so the clock keeps ticking while the clock runs.
        key = None
        while key is None:
            key = get_key_timeout(0.5) if game.state.running else get_key()
            if key is None:
                _draw_game(game, tracker, status, hint)

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        status, hint = _handle(game, tracker, key)


# -- public entry point -------------------------------------------------------


def run(
    board: Board | None = None,
    shuffle: bool = False,
    seed: int | None = None,
    max_nodes: int = DEFAULT_MAX_NODES,
) -> None:
    """Launch the Rich terminal game."""
    tracker = SlotTracker()
    rng = random.Random(seed) if seed is not None else None
    game = GamePlay(board, observer=tracker, rng=rng, max_nodes=max_nodes)
    if shuffle:
        game.shuffle()
    _play(game, tracker)
