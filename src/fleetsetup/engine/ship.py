"""Fleet catalog: coordinates, orientations and ship kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

ShipHandle = int


@dataclass(frozen=True)
class Coordinate:
    """Immutable 1-based board coordinate."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x}/{self.y}"


class Orientation(Enum):
    """Allowed ship orientations."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def next(self, coord: Coordinate) -> Coordinate:
        """Return the coordinate one step further along this orientation."""
        if self is Orientation.HORIZONTAL:
            return Coordinate(coord.x + 1, coord.y)
        return Coordinate(coord.x, coord.y + 1)

    def __str__(self) -> str:
        return self.value


class ShipKind(Enum):
    """All supported ship classes, valued by their length."""

    DESTROYER = 2
    SUBMARINE = 3
    CRUISER = 4
    BATTLESHIP = 5
    AIRCRAFT_CARRIER = 6

    @property
    def length(self) -> int:
        """Return the number of contiguous cells the ship occupies."""
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[ShipKind, str] = {
    ShipKind.DESTROYER: "Destroyer",
    ShipKind.SUBMARINE: "Submarine",
    ShipKind.CRUISER: "Cruiser",
    ShipKind.BATTLESHIP: "Battleship",
    ShipKind.AIRCRAFT_CARRIER: "Aircraft Carrier",
}

# Largest first.
FLEET_ORDER: tuple[ShipKind, ...] = (
    ShipKind.AIRCRAFT_CARRIER,
    ShipKind.BATTLESHIP,
    ShipKind.CRUISER,
    ShipKind.SUBMARINE,
    ShipKind.DESTROYER,
)


def length(kind: ShipKind) -> int:
    return kind.length


def display_name(kind: ShipKind) -> str:
    return kind.display_name


@dataclass
class Ship:
    """A single fleet member; health starts at the kind's length."""

    kind: ShipKind
    health: int = field(init=False)

    def __post_init__(self) -> None:
        self.health = self.kind.length

    @property
    def length(self) -> int:
        return self.kind.length

    @property
    def name(self) -> str:
        return self.kind.display_name


def new_ship(kind: ShipKind) -> Ship:
    """Construct a ship of the given kind at full health."""
    return Ship(kind)


@dataclass
class Fleet:
    """Ordered ships owned by the setup loop.

    Boards never hold a ship directly. They store the ship's position in
    this fleet (its handle) and callers resolve it with ``fleet[handle]``.
    """

    ships: list[Ship] = field(default_factory=list)

    def __getitem__(self, handle: ShipHandle) -> Ship:
        return self.ships[handle]

    def __len__(self) -> int:
        return len(self.ships)

    def __iter__(self) -> Iterator[Ship]:
        return iter(self.ships)

    def handles(self) -> range:
        """Return every valid handle in placement order."""
        return range(len(self.ships))

    def total_length(self) -> int:
        return sum(ship.length for ship in self.ships)


def new_fleet(kinds: Iterable[ShipKind] = FLEET_ORDER) -> Fleet:
    """Build one ship per kind, preserving the given order."""
    return Fleet([new_ship(kind) for kind in kinds])
