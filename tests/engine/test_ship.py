"""Tests for the fleet catalog."""

import pytest
from fleetsetup.engine.ship import (
    FLEET_ORDER,
    Coordinate,
    Orientation,
    Ship,
    ShipKind,
    display_name,
    length,
    new_fleet,
    new_ship,
)


@pytest.mark.parametrize(
    ("kind", "expected_length", "expected_name"),
    [
        (ShipKind.DESTROYER, 2, "Destroyer"),
        (ShipKind.SUBMARINE, 3, "Submarine"),
        (ShipKind.CRUISER, 4, "Cruiser"),
        (ShipKind.BATTLESHIP, 5, "Battleship"),
        (ShipKind.AIRCRAFT_CARRIER, 6, "Aircraft Carrier"),
    ],
)
def test_catalog_tables(kind: ShipKind, expected_length: int, expected_name: str) -> None:
    assert length(kind) == expected_length
    assert display_name(kind) == expected_name


def test_new_ship_starts_at_full_health() -> None:
    for kind in ShipKind:
        ship = new_ship(kind)
        assert ship.kind is kind
        assert ship.health == kind.length == ship.length


def test_new_fleet_is_largest_first() -> None:
    fleet = new_fleet()
    assert [ship.kind for ship in fleet] == list(FLEET_ORDER)
    assert [ship.length for ship in fleet] == [6, 5, 4, 3, 2]
    assert fleet.total_length() == 20
    assert list(fleet.handles()) == [0, 1, 2, 3, 4]
    assert fleet[4].kind is ShipKind.DESTROYER


def test_fleet_ships_are_distinct_instances() -> None:
    fleet = new_fleet([ShipKind.DESTROYER, ShipKind.DESTROYER])
    assert fleet[0] == fleet[1]
    assert fleet[0] is not fleet[1]
    assert isinstance(fleet[0], Ship)


def test_orientation_steps_one_axis() -> None:
    start = Coordinate(3, 4)
    assert Orientation.HORIZONTAL.next(start) == Coordinate(4, 4)
    assert Orientation.VERTICAL.next(start) == Coordinate(3, 5)
    assert str(Orientation.HORIZONTAL) == "horizontal"


def test_coordinate_is_a_value_type() -> None:
    assert Coordinate(1, 2) == Coordinate(1, 2)
    assert len({Coordinate(1, 2), Coordinate(1, 2)}) == 1
    assert str(Coordinate(1, 2)) == "1/2"
