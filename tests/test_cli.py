"""Tests for the console placement adapter."""

from typing import Iterator

import pytest
from fleetsetup import cli
from fleetsetup.config import SetupConfig
from fleetsetup.engine.board import PlacementRequest
from fleetsetup.engine.session import COMPLETE_BANNER, SetupPhase
from fleetsetup.engine.ship import Coordinate, Orientation


def _answers(values: list[str]):
    stream: Iterator[str] = iter(values)
    prompts: list[str] = []

    def ask(prompt: str) -> str:
        prompts.append(prompt)
        return next(stream)

    ask.prompts = prompts  # type: ignore[attr-defined]
    return ask


@pytest.mark.parametrize(
    ("text", "expected"),
    [("3 7", Coordinate(3, 7)), ("  10   1 ", Coordinate(10, 1)), ("0 4", Coordinate(0, 4))],
)
def test_parse_coordinate(text: str, expected: Coordinate) -> None:
    assert cli.parse_coordinate(text) == expected


@pytest.mark.parametrize("text", ["", "3", "3 4 5", "a b", "3,4", "1.5 2"])
def test_parse_coordinate_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        cli.parse_coordinate(text)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("h", Orientation.HORIZONTAL),
        (" H ", Orientation.HORIZONTAL),
        ("horizontal", Orientation.HORIZONTAL),
        ("v", Orientation.VERTICAL),
        ("Vertical", Orientation.VERTICAL),
    ],
)
def test_parse_orientation(text: str, expected: Orientation) -> None:
    assert cli.parse_orientation(text) is expected


def test_parse_orientation_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        cli.parse_orientation("diagonal")


def test_prompt_placement_reasks_on_malformed_input() -> None:
    ask = _answers(["x", "4", "4 2", "sideways", "v"])
    lines: list[str] = []

    request = cli.prompt_placement(ask, lines.append)

    assert request == PlacementRequest(Coordinate(4, 2), Orientation.VERTICAL)
    assert len(ask.prompts) == 5
    assert sum(line.startswith("Invalid coordinate") for line in lines) == 2
    assert sum(line.startswith("Invalid orientation") for line in lines) == 1


def test_setup_fleet_runs_scripted_session() -> None:
    ask = _answers(
        ["1 1", "h", "bad", "1 2", "h", "1 3", "h", "9 4", "h", "1 4", "h", "1 5", "h"]
    )
    lines: list[str] = []

    session = cli.setup_fleet(SetupConfig(), ask, lines.append)

    assert session.phase is SetupPhase.COMPLETE
    assert COMPLETE_BANNER in lines
    assert "could not place ship: invalid coordinate" in lines
    assert session.board.render().count("S") == 20


def test_main_returns_one_on_eof(monkeypatch: pytest.MonkeyPatch) -> None:
    def _eof(prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    monkeypatch.setattr(cli, "init_telemetry", lambda: None)
    monkeypatch.delenv("FLEETSETUP_BOARD_WIDTH", raising=False)
    monkeypatch.delenv("FLEETSETUP_BOARD_HEIGHT", raising=False)

    assert cli.main(["--width", "6", "--height", "6"]) == 1


def test_main_rejects_non_positive_board(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "init_telemetry", lambda: None)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--width", "0"])
    assert excinfo.value.code == 2


def test_main_places_fleet_and_returns_zero(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    answers = iter(["1 1", "h", "1 2", "h", "1 3", "h", "1 4", "h", "1 5", "h"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    monkeypatch.setattr(cli, "init_telemetry", lambda: None)
    monkeypatch.delenv("FLEETSETUP_BOARD_WIDTH", raising=False)
    monkeypatch.delenv("FLEETSETUP_BOARD_HEIGHT", raising=False)

    assert cli.main(["--width", "10", "--height", "10"]) == 0

    out = capsys.readouterr().out
    assert COMPLETE_BANNER in out
    assert out.count("ship placed") == 5
    assert "could not place ship" not in out
