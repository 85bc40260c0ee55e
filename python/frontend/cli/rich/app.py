"""Rich terminal frontend: interactive route builder.

Draws the board with its walls, the pieces at their simulated cells, the
ghosts of their starting cells and the path traces of the current route.
Routes are built with the arrow keys or WASD for the selected piece, or by
moving a cursor with IJKL and pressing Enter to slide toward it.
"""

from __future__ import annotations

import logging

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.analysis import RouteAnalyzer
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import RouteSession
from backend.engine.movement import SimulationResult
from backend.models.board import Board, Direction, Wall
from backend.models.route import PIECE_COUNT, PIECE_NAMES, InvalidRouteError
from backend.models.snapshot import GameSnapshot
from frontend.cli.input_handler import get_key

logger = logging.getLogger(__name__)

console = Console()

PIECE_STYLES = ("bold red", "bold green", "bold deep_sky_blue1", "bold yellow")
_PATH_STYLES = ("red", "green", "deep_sky_blue1", "yellow")
_WALL_STYLE = "bold magenta"
_GRID_STYLE = "grey30"

_DIRECTION_KEYS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_CURSOR_KEYS = {
    "cursor_up": Direction.UP,
    "cursor_down": Direction.DOWN,
    "cursor_left": Direction.LEFT,
    "cursor_right": Direction.RIGHT,
}


# -- board rendering ----------------------------------------------------------


def _cell_glyph(
    board: Board,
    cell: int,
    snapshot: GameSnapshot,
    result: SimulationResult,
    path_owner: dict[int, int],
) -> tuple[str, str]:
    if cell in result.final_positions:
        piece = result.final_positions.index(cell)
        return " ● ", PIECE_STYLES[piece]
    if cell == snapshot.target_cell:
        return " ◎ ", PIECE_STYLES[snapshot.target_piece]
    if cell in snapshot.positions:
        piece = snapshot.positions.index(cell)
        return " ○ ", f"dim {_PATH_STYLES[piece]}"
    if cell in path_owner:
        return " · ", _PATH_STYLES[path_owner[cell]]
    if board.is_center(cell):
        return "░░░", "grey23"
    return "   ", ""


def _horizontal_walled(board: Board, row: int, col: int) -> bool:
    """Check for a wall on the top edge of (row, col); row may be ``size``."""
    if row == 0 or row == board.size:
        return True
    above = board.cell_at(row - 1, col)
    below = board.cell_at(row, col)
    return board.has_wall(above, Wall.SOUTH) or board.has_wall(below, Wall.NORTH)


def _vertical_walled(board: Board, row: int, col: int) -> bool:
    """Check for a wall on the left edge of (row, col); col may be ``size``."""
    if col == 0 or col == board.size:
        return True
    left = board.cell_at(row, col - 1)
    right = board.cell_at(row, col)
    return board.has_wall(left, Wall.EAST) or board.has_wall(right, Wall.WEST)


def render_board(
    snapshot: GameSnapshot, result: SimulationResult, cursor: int | None = None
) -> Text:
    """Return the board as styled text, walls drawn from either side.

    The *cursor* cell, if given, is bracketed and drawn in reverse video.
    """
    board = snapshot.board
    path_owner: dict[int, int] = {}
    for trace in result.traces:
        for cell in trace.visited:
            path_owner[cell] = trace.piece

    text = Text()
    for row in range(board.size + 1):
        for col in range(board.size):
            text.append("+", style=_GRID_STYLE)
            if _horizontal_walled(board, row, col):
                text.append("───", style=_WALL_STYLE)
            else:
                text.append("   ")
        text.append("+\n", style=_GRID_STYLE)
        if row == board.size:
            break

        for col in range(board.size + 1):
            if _vertical_walled(board, row, col):
                text.append("│", style=_WALL_STYLE)
            else:
                text.append(" ")
            if col == board.size:
                break
            cell = board.cell_at(row, col)
            glyph, style = _cell_glyph(board, cell, snapshot, result, path_owner)
            if cell == cursor:
                glyph, style = f"[{glyph[1]}]", f"{style} reverse".strip()
            text.append(glyph, style=style)
        text.append("\n")
    text.rstrip()
    return text


def move_cursor(board: Board, cursor: int, direction: Direction) -> int:
    """Move the cursor one cell, staying put at the board edge."""
    neighbour = board.step(cursor, direction)
    return cursor if neighbour is None else neighbour


def trace_table(result: SimulationResult) -> Table:
    """Return a table with one row per simulated slide."""
    table = Table(box=rich.box.ROUNDED, border_style="dim", title="Traces", title_style="bold cyan")
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Piece")
    table.add_column("Dir", justify="center")
    table.add_column("Start", justify="right", style="yellow")
    table.add_column("End", justify="right", style="yellow")
    table.add_column("Visited", style="dim")

    for i, trace in enumerate(result.traces, 1):
        table.add_row(
            str(i),
            Text(PIECE_NAMES[trace.piece], style=PIECE_STYLES[trace.piece]),
            trace.direction.symbol,
            str(trace.start_cell),
            str(trace.end_cell),
            " ".join(str(c) for c in trace.visited),
        )
    return table


def _history_table(session: RouteSession) -> Table:
    table = Table(box=rich.box.ROUNDED, border_style="dim", show_lines=False)
    table.add_column("Piece")
    table.add_column("Moves", justify="right", style="yellow")
    table.add_column("Slides")
    table.add_column("Start → End", justify="right", style="dim")

    for history in RouteAnalyzer.piece_histories(session.snapshot, session.route):
        name = PIECE_NAMES[history.piece]
        if history.piece == session.selected_piece:
            name = f"▶ {name}"
        slides = "  ".join(f"{d.symbol}{end}" for d, end in history.slides)
        table.add_row(
            Text(name, style=PIECE_STYLES[history.piece]),
            str(history.move_count),
            slides or Text("no moves yet", style="dim italic"),
            f"{history.start_cell} → {history.end_cell}",
        )
    return table


# -- screens ------------------------------------------------------------------


def _info_line(snapshot: GameSnapshot) -> Text:
    size = snapshot.board.size
    info = Text()
    info.append("  Board: ", style="dim")
    info.append(f"{size}×{size}", style="bold")
    info.append("    Target: ", style="dim")
    info.append(PIECE_NAMES[snapshot.target_piece], style=PIECE_STYLES[snapshot.target_piece])
    info.append(f" → {snapshot.target_cell}", style="bold")
    info.append("    Best: ", style="dim")
    info.append("-" if snapshot.best_move is None else str(snapshot.best_move), style="bold yellow")
    info.append("    Winner: ", style="dim")
    info.append(
        "In Progress" if snapshot.winner is None else f"P{snapshot.winner + 1}",
        style="bold",
    )
    return info


def _success_banner(session: RouteSession) -> Text | None:
    success = session.success
    if success is None:
        return None

    banner = Text()
    banner.append("\n  ★ ", style="bold yellow")
    banner.append("Solution found!  ", style="bold green")
    banner.append(PIECE_NAMES[success.piece], style=PIECE_STYLES[success.piece])
    banner.append(f" reaches {success.position} in {success.moves} moves", style="green")
    best = session.snapshot.best_move
    if best is not None:
        if session.snapshot.is_new_best(success.moves):
            banner.append(f"  (new best, previous {best})", style="bold green")
        else:
            banner.append(f"  (current best {best})", style="dim")
    banner.append("  ★\n", style="bold yellow")
    return banner


_HELP_ROWS = (
    ("↑↓←→ / WASD", "slide the selected piece"),
    ("1-4 / Tab", "select a piece"),
    ("IJKL", "move the cursor"),
    ("Enter", "slide the selected piece toward the cursor"),
    ("U / Backspace", "undo the last move"),
    ("C", "clear the route"),
    ("P", "show the ledger payload"),
    ("N", "new random game"),
    ("H / ?", "this help"),
    ("Q / Esc", "quit"),
)


def _controls() -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("1-4", style="bold cyan")
    controls.append("  piece   ", style="dim")
    controls.append("IJKL", style="bold cyan")
    controls.append(" + ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  click   ", style="dim")
    controls.append("U", style="bold cyan")
    controls.append("  undo   ", style="dim")
    controls.append("H", style="bold cyan")
    controls.append("  help   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


def _draw_game(session: RouteSession, cursor: int, status: str = "") -> None:
    console.clear()

    snapshot = session.snapshot
    result = session.result

    route = Text()
    route.append("  Route: ", style="dim")
    route.append(str(session.display), style="bold")
    route.append("    Cursor: ", style="dim")
    route.append(str(cursor), style="bold")

    parts = [
        Align.center(render_board(snapshot, result, cursor)),
        Text(""),
        Align.center(_info_line(snapshot)),
        Align.center(route),
    ]
    banner = _success_banner(session)
    if banner is not None:
        parts.append(Align.center(banner))

    panel = Panel(
        Group(*parts),
        title="[bold cyan]R I C O C H E T   R O U T E S[/bold cyan]",
        border_style="bright_blue" if banner is None else "bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_history_table(session)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


def _draw_help() -> None:
    """Full-screen key reference."""
    console.clear()

    table = Table(box=rich.box.ROUNDED, border_style="dim", show_header=False)
    table.add_column("Key", style="bold cyan", justify="right")
    table.add_column("Action")
    for key, action in _HELP_ROWS:
        table.add_row(key, action)

    panel = Panel(
        Align.center(table),
        title="[bold]H E L P[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


def show_simulation(snapshot: GameSnapshot, result: SimulationResult) -> None:
    """Print the board and trace table once, without interaction."""
    console.print(Align.center(render_board(snapshot, result)))
    console.print(Align.center(_info_line(snapshot)))
    if result.traces:
        console.print(Align.center(trace_table(result)))


# -- game loop ----------------------------------------------------------------


def _payload_status(session: RouteSession) -> str:
    try:
        payload = session.payload()
    except InvalidRouteError as exc:
        return f"[yellow]{exc}[/yellow]"
    return f"[cyan]Payload:[/cyan] [bold]{payload.hex()}[/bold]"


def click_status(session: RouteSession, cursor: int) -> str:
    """Add the move toward *cursor* and describe what happened."""
    move = session.click(cursor)
    if move is None:
        return "[yellow]No move suggested.[/yellow]"
    return f"[cyan]Added[/cyan] {move}"


def _piece_cell(session: RouteSession) -> int:
    return session.result.final_positions[session.selected_piece]


def _play(session: RouteSession, size: int) -> None:
    status = ""
    cursor = _piece_cell(session)

    while True:
        _draw_game(session, cursor, status)
        status = ""
        key = get_key()

        if key in _DIRECTION_KEYS:
            move = session.push(_DIRECTION_KEYS[key])
            status = f"[cyan]Added[/cyan] {move}"
        elif key in _CURSOR_KEYS:
            cursor = move_cursor(session.snapshot.board, cursor, _CURSOR_KEYS[key])
        elif key == "enter":
            status = click_status(session, cursor)
        elif key.startswith("piece"):
            session.select(int(key[len("piece"):]))
            cursor = _piece_cell(session)
        elif key == "next":
            session.select((session.selected_piece + 1) % PIECE_COUNT)
            cursor = _piece_cell(session)
        elif key == "undo":
            if session.undo() is None:
                status = "[yellow]Route is already empty.[/yellow]"
        elif key == "clear":
            session.clear()
            status = "[yellow]Route cleared.[/yellow]"
        elif key == "payload":
            status = _payload_status(session)
        elif key == "new":
            session.reload(GameGenerator.generate(size))
            cursor = _piece_cell(session)
            status = "[yellow]New game![/yellow]"
        elif key == "help":
            _draw_help()
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(snapshot: GameSnapshot, size: int) -> None:
    """Launch the interactive route builder on *snapshot*."""
    logger.info(
        "starting route builder on a %d×%d board", snapshot.board.size, snapshot.board.size
    )
    _play(RouteSession(snapshot), size)
