"""Board and fleet placement engine."""

from .board import (
    Board,
    BoardCell,
    CoordinateOutOfRange,
    PlacementOutcome,
    PlacementRequest,
    expand,
)
from .session import PlacementSession, SetupPhase, ShipState, run_setup
from .ship import (
    FLEET_ORDER,
    Coordinate,
    Fleet,
    Orientation,
    Ship,
    ShipHandle,
    ShipKind,
    display_name,
    length,
    new_fleet,
    new_ship,
)

__all__ = [
    "Board",
    "BoardCell",
    "CoordinateOutOfRange",
    "PlacementOutcome",
    "PlacementRequest",
    "expand",
    "PlacementSession",
    "SetupPhase",
    "ShipState",
    "run_setup",
    "FLEET_ORDER",
    "Coordinate",
    "Fleet",
    "Orientation",
    "Ship",
    "ShipHandle",
    "ShipKind",
    "display_name",
    "length",
    "new_fleet",
    "new_ship",
]
