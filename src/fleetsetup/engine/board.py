"""Fixed-size placement board for the fleet setup engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from fleetsetup.telemetry import get_meter, get_tracer

from .ship import Coordinate, Orientation, Ship, ShipHandle

logger = logging.getLogger(__name__)
tracer = get_tracer("fleetsetup.engine.board")
meter = get_meter("fleetsetup.engine.board")

PLACEMENT_COUNTER = meter.create_counter(
    "fleetsetup_engine_ship_placements",
    unit="1",
    description="Number of attempted ship placements",
)

OCCUPIED_MARKER = "S"
EMPTY_MARKER = "~"


class CoordinateOutOfRange(ValueError):
    """Raised when a coordinate lies outside the board."""

    def __init__(self, coord: Coordinate, width: int, height: int) -> None:
        super().__init__(f"Coordinate {coord} is outside the {width}x{height} board.")
        self.coord = coord


class PlacementOutcome(Enum):
    """Result of offering a placement to the board."""

    PLACED = "ship placed"
    OUT_OF_BOUNDS = "invalid coordinate"
    OVERLAP = "overlaps with ship"

    @property
    def ok(self) -> bool:
        return self is PlacementOutcome.PLACED

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlacementRequest:
    """Anchor coordinate plus the direction the ship extends in."""

    coordinate: Coordinate
    orientation: Orientation

    def coordinates(self, length: int) -> list[Coordinate]:
        """Return the ``length`` cells covered, anchor first."""
        if length < 1:
            raise ValueError("Placement length must be at least 1.")
        coords: list[Coordinate] = []
        current = self.coordinate
        for _ in range(length):
            coords.append(current)
            current = self.orientation.next(current)
        return coords


def expand(request: PlacementRequest, length: int) -> list[Coordinate]:
    """Placement geometry; independent of any board state."""
    return request.coordinates(length)


@dataclass
class BoardCell:
    """One grid position, optionally holding a fleet handle."""

    ship: ShipHandle | None = None

    @property
    def occupied(self) -> bool:
        return self.ship is not None


@dataclass
class Board:
    """A width×height grid stored as a flat, row-major list of cells."""

    width: int = 10
    height: int = 10
    owner: str = "player"
    cells: list[BoardCell] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive.")
        self.cells = [BoardCell() for _ in range(self.width * self.height)]

    @property
    def area(self) -> int:
        return self.width * self.height

    def coordinate_to_index(self, coord: Coordinate) -> int:
        """Map a 1-based coordinate to its flat index. Does not bounds-check."""
        return (coord.y - 1) * self.width + (coord.x - 1)

    def index_to_coordinate(self, index: int) -> Coordinate:
        y, x = divmod(index, self.width)
        return Coordinate(x + 1, y + 1)

    def is_valid_coordinate(self, coord: Coordinate) -> bool:
        """Check whether a coordinate lies inside the board boundaries."""
        return 1 <= coord.x <= self.width and 1 <= coord.y <= self.height

    def cell_at(self, coord: Coordinate) -> BoardCell:
        """Return the cell at ``coord``, raising if it is off the board."""
        if not self.is_valid_coordinate(coord):
            raise CoordinateOutOfRange(coord, self.width, self.height)
        return self.cells[self.coordinate_to_index(coord)]

    def has_ship_at(self, coord: Coordinate) -> bool:
        if not self.is_valid_coordinate(coord):
            return False
        return self.cell_at(coord).occupied

    def ship_at(self, coord: Coordinate) -> ShipHandle | None:
        """Return the handle stored at ``coord``; off-board cells hold nothing."""
        if not self.is_valid_coordinate(coord):
            return None
        return self.cell_at(coord).ship

    def check_placement(self, request: PlacementRequest, length: int) -> PlacementOutcome:
        """Validate a placement without touching any cell."""
        for coord in expand(request, length):
            if not self.is_valid_coordinate(coord):
                return PlacementOutcome.OUT_OF_BOUNDS
            if self.cell_at(coord).occupied:
                return PlacementOutcome.OVERLAP
        return PlacementOutcome.PLACED

    def place_ship(
        self, request: PlacementRequest, handle: ShipHandle, ship: Ship
    ) -> PlacementOutcome:
        """Validate every target cell, then assign all of them or none."""
        with tracer.start_as_current_span("board.place_ship") as span:
            span.set_attribute("ship.kind", ship.kind.name)
            span.set_attribute("ship.length", ship.length)
            span.set_attribute("ship.anchor.x", request.coordinate.x)
            span.set_attribute("ship.anchor.y", request.coordinate.y)
            span.set_attribute("board.owner", self.owner)
            details = {
                "owner": self.owner,
                "ship_kind": ship.kind.name,
                "handle": handle,
                "orientation": request.orientation.name,
                "x": request.coordinate.x,
                "y": request.coordinate.y,
            }

            outcome = self.check_placement(request, ship.length)
            span.set_attribute("placement.outcome", outcome.name)
            if not outcome.ok:
                PLACEMENT_COUNTER.add(
                    1, attributes={"result": outcome.name.lower(), "owner": self.owner}
                )
                logger.warning(
                    "ship_placement_failed", extra={**details, "reason": outcome.name}
                )
                return outcome

            for coord in expand(request, ship.length):
                self.cell_at(coord).ship = handle
            PLACEMENT_COUNTER.add(1, attributes={"result": "success", "owner": self.owner})
            logger.info("ship_placed", extra=details)
            return outcome

    def occupied_coordinates(self) -> list[Coordinate]:
        """Return occupied cells in row-major order."""
        return [
            self.index_to_coordinate(index)
            for index, cell in enumerate(self.cells)
            if cell.occupied
        ]

    def placed_handles(self) -> set[ShipHandle]:
        return {cell.ship for cell in self.cells if cell.ship is not None}

    def render(self) -> str:
        """Return a text grid: column header, then one labelled line per row."""
        header = "   " + "".join(f"{x:<2}" for x in range(1, self.width + 1))
        rows = [header.rstrip()]
        for y in range(1, self.height + 1):
            markers = []
            for x in range(1, self.width + 1):
                cell = self.cell_at(Coordinate(x, y))
                symbol = OCCUPIED_MARKER if cell.occupied else EMPTY_MARKER
                markers.append(f"{symbol} ")
            rows.append((f"{y:>2} " + "".join(markers)).rstrip())
        return "\n".join(rows)
