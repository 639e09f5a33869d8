"""Fleet setup controller: places one ship at a time until the fleet is done."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from fleetsetup.telemetry import get_meter, get_tracer

from .board import Board, PlacementOutcome, PlacementRequest
from .ship import Fleet, Ship, ShipHandle

logger = logging.getLogger(__name__)
tracer = get_tracer("fleetsetup.engine.session")
meter = get_meter("fleetsetup.engine.session")

OFFER_COUNTER = meter.create_counter(
    "fleetsetup_setup_offers",
    unit="1",
    description="Placement requests offered during fleet setup",
)

COMPLETE_BANNER = "--< all ships placed >------------------------------------------"


class SetupPhase(Enum):
    """Lifecycle of a fleet setup."""

    PLACING = "placing"
    COMPLETE = "complete"


class ShipState(Enum):
    """Placement state of a single fleet member."""

    UNPLACED = "unplaced"
    PLACED = "placed"


class PlacementSession:
    """Offers placements for each fleet member in order.

    The session only moves to the next ship after the board accepts the
    current one; rejected requests leave it where it was.
    """

    def __init__(self, board: Board, fleet: Fleet) -> None:
        self.board = board
        self.fleet = fleet
        self._states: list[ShipState] = [ShipState.UNPLACED for _ in fleet.handles()]
        self._next: ShipHandle = 0
        self.attempts: int = 0

    @property
    def phase(self) -> SetupPhase:
        if self._next >= len(self.fleet):
            return SetupPhase.COMPLETE
        return SetupPhase.PLACING

    @property
    def current_handle(self) -> ShipHandle | None:
        if self.phase is SetupPhase.COMPLETE:
            return None
        return self._next

    @property
    def current_ship(self) -> Ship | None:
        handle = self.current_handle
        return None if handle is None else self.fleet[handle]

    def ship_state(self, handle: ShipHandle) -> ShipState:
        return self._states[handle]

    def offer(self, request: PlacementRequest) -> PlacementOutcome:
        """Try to place the current ship; advance only when it is accepted."""
        with tracer.start_as_current_span("setup.offer") as span:
            handle = self.current_handle
            if handle is None:
                logger.error("offer_rejected_setup_complete", extra={"owner": self.board.owner})
                raise RuntimeError("All ships have already been placed.")
            ship = self.fleet[handle]
            span.set_attribute("ship.handle", handle)
            span.set_attribute("ship.kind", ship.kind.name)

            self.attempts += 1
            outcome = self.board.place_ship(request, handle, ship)
            span.set_attribute("placement.outcome", outcome.name)
            OFFER_COUNTER.add(1, attributes={"result": outcome.name.lower()})
            if outcome.ok:
                self._states[handle] = ShipState.PLACED
                self._next += 1
                if self.phase is SetupPhase.COMPLETE:
                    logger.info(
                        "setup_complete",
                        extra={"owner": self.board.owner, "attempts": self.attempts},
                    )
            return outcome


def run_setup(
    session: PlacementSession,
    read_request: Callable[[], PlacementRequest],
    write: Callable[[str], None],
) -> None:
    """Drive ``session`` to completion using injected input and output."""
    with tracer.start_as_current_span("setup.run"):
        write(session.board.render())
        ship = session.current_ship
        while ship is not None:
            write("")
            write(f"> Placing {ship.name}, size {ship.length}")
            while True:
                write(session.board.render())
                outcome = session.offer(read_request())
                if outcome.ok:
                    write(outcome.message)
                    break
                write(f"could not place ship: {outcome.message}")
            ship = session.current_ship

        write(COMPLETE_BANNER)
        write(session.board.render())
