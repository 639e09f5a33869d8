"""Command-line driver for placing a fleet on the board."""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Sequence

from pydantic import ValidationError

from fleetsetup.config import SetupConfig
from fleetsetup.engine.board import Board, PlacementRequest
from fleetsetup.engine.session import PlacementSession, run_setup
from fleetsetup.engine.ship import Coordinate, Orientation, new_fleet
from fleetsetup.telemetry import init_telemetry, record_setup_metric

logger = logging.getLogger(__name__)

Ask = Callable[[str], str]
Write = Callable[[str], None]

_ORIENTATIONS = {
    "H": Orientation.HORIZONTAL,
    "HORIZONTAL": Orientation.HORIZONTAL,
    "V": Orientation.VERTICAL,
    "VERTICAL": Orientation.VERTICAL,
}


def parse_coordinate(text: str) -> Coordinate:
    """Parse ``"x y"`` into a 1-based coordinate."""
    parts = text.split()
    if len(parts) != 2:
        raise ValueError("Enter two numbers separated by a space, e.g. '3 7'.")
    try:
        x, y = (int(part) for part in parts)
    except ValueError as exc:
        raise ValueError("Coordinates must be whole numbers.") from exc
    return Coordinate(x, y)


def parse_orientation(text: str) -> Orientation:
    try:
        return _ORIENTATIONS[text.strip().upper()]
    except KeyError:
        raise ValueError("Please enter h for horizontal or v for vertical.") from None


def prompt_placement(ask: Ask, write: Write) -> PlacementRequest:
    """Keep asking until both answers parse; never returns a malformed request."""
    while True:
        try:
            coordinate = parse_coordinate(ask("enter coordinate (x y): "))
        except ValueError as exc:
            write(f"Invalid coordinate: {exc}")
            continue
        break

    while True:
        try:
            orientation = parse_orientation(ask("enter orientation (h v): "))
        except ValueError as exc:
            write(f"Invalid orientation: {exc}")
            continue
        return PlacementRequest(coordinate, orientation)


def setup_fleet(config: SetupConfig, ask: Ask = input, write: Write = print) -> PlacementSession:
    """Place a full fleet on a fresh board using the given prompt callables."""
    board = Board(width=config.width, height=config.height)
    session = PlacementSession(board, new_fleet())
    run_setup(session, lambda: prompt_placement(ask, write), write)
    record_setup_metric(
        "fleetsetup_setup_completed_total",
        1,
        {"width": board.width, "height": board.height},
    )
    record_setup_metric("fleetsetup_setup_attempts_total", session.attempts)
    return session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Place your fleet on the board.")
    parser.add_argument("--width", type=int, default=None, help="Board width (default 10).")
    parser.add_argument("--height", type=int, default=None, help="Board height (default 10).")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = SetupConfig.from_env(width=args.width, height=args.height)
    except ValidationError as exc:
        parser.error(f"invalid board size: {exc.errors()[0]['msg']}")

    init_telemetry()
    try:
        setup_fleet(config, input, print)
    except (EOFError, KeyboardInterrupt):
        logger.warning("setup_aborted")
        print("\nSetup aborted before the fleet was placed.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
