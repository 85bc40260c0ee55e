#!/usr/bin/env python3
"""Ricochet Routes.

Usage::

    python main.py                                  # route builder, random 16×16 game
    python main.py play --state game.json           # route builder on a saved state
    python main.py simulate -t game.json -r 0,6,0,2 # print the traces of a route
    python main.py check -t game.json -r 0,6,0,2    # exit 0 iff the route wins
    python main.py payload -r 0,6,0,2               # hex ledger payload
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.analysis import RouteAnalyzer  # noqa: E402
from backend.engine.gamegenerator import DEFAULT_SIZE, GameGenerator  # noqa: E402
from backend.engine.movement import RouteSimulator  # noqa: E402
from backend.models.route import InvalidRouteError, route_payload  # noqa: E402
from backend.models.snapshot import GameSnapshot  # noqa: E402

logger = logging.getLogger("ricochet")

err_console = Console(stderr=True)


# -- helpers ------------------------------------------------------------------


def setup_logging(level: str = "WARNING") -> None:
    """Route log records through Rich on stderr."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise typer.BadParameter(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def parse_route_option(raw: str) -> list[int]:
    """Parse ``"0,6,0,2"`` (commas and/or spaces) into a flat route."""
    parts = raw.replace(",", " ").split()
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise typer.BadParameter(f"Route must be a list of integers, got {raw!r}.") from None


def _load_snapshot(state: Optional[Path], size: int, seed: Optional[int]) -> GameSnapshot:
    if state is None:
        logger.info("no state file given, generating a %d×%d game", size, size)
        return GameGenerator.generate(size, seed)
    try:
        return GameSnapshot.load(state)
    except (OSError, ValueError) as exc:
        logger.error("could not load %s: %s", state, exc)
        raise typer.BadParameter(f"Cannot load game state from {state}: {exc}") from exc


def _route_or_fail(raw: str) -> list[int]:
    route = parse_route_option(raw)
    try:
        route_payload(route)
    except InvalidRouteError as exc:
        logger.error("invalid route %s: %s", route, exc)
        raise typer.BadParameter(str(exc)) from exc
    return route


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)

_STATE = typer.Option(
    None, "-t", "--state",
    help="JSON game state (parsed or raw object response). Omit for a random game.",
)
_SIZE = typer.Option(
    DEFAULT_SIZE, "-s", "--size",
    min=3, max=32,
    help="Board size of a generated game.",
)
_SEED = typer.Option(None, "--seed", help="Seed for the generated game.")
_ROUTE = typer.Option(
    ..., "-r", "--route",
    help="Flat route: piece, direction, ... (directions 8=up 2=down 4=left 6=right).",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
) -> None:
    """Ricochet Routes."""
    setup_logging(log_level)
    if ctx.invoked_subcommand is None:
        ctx.invoke(play, state=None, size=DEFAULT_SIZE, seed=None)


@app.command()
def play(
    state: Optional[Path] = _STATE,
    size: int = _SIZE,
    seed: Optional[int] = _SEED,
) -> None:
    """Build a route interactively."""
    from frontend.cli.rich.app import run

    run(_load_snapshot(state, size, seed), size)


@app.command()
def simulate(
    route: str = _ROUTE,
    state: Optional[Path] = _STATE,
    size: int = _SIZE,
    seed: Optional[int] = _SEED,
) -> None:
    """Replay a route and print its traces."""
    from frontend.cli.rich.app import show_simulation

    snapshot = _load_snapshot(state, size, seed)
    flat = _route_or_fail(route)
    result = RouteSimulator.simulate(snapshot.board, snapshot.positions, flat)
    show_simulation(snapshot, result)


@app.command()
def check(
    route: str = _ROUTE,
    state: Optional[Path] = _STATE,
    size: int = _SIZE,
    seed: Optional[int] = _SEED,
) -> None:
    """Exit with status 0 if the route brings the target piece home."""
    snapshot = _load_snapshot(state, size, seed)
    flat = _route_or_fail(route)
    success = RouteAnalyzer.check_success(snapshot, flat)
    display = RouteAnalyzer.render_route(flat)
    if success is None:
        typer.echo(f"{display}: target not reached")
        raise typer.Exit(code=1)
    typer.echo(f"{display}: piece {success.piece} reaches {success.position}")


@app.command()
def payload(route: str = _ROUTE) -> None:
    """Print the hex ledger payload of a route."""
    typer.echo(route_payload(_route_or_fail(route)).hex())


if __name__ == "__main__":
    app()
