import pytest

from reversi.othello.board import Board, Disc
from reversi.players.computer import ComputerPlayer


@pytest.mark.parametrize(
    ["disc", "expected"],
    [
        pytest.param(Disc.BLACK, 19, id="black"),
        pytest.param(Disc.WHITE, 20, id="white"),
    ],
)
def test_select_move_picks_lowest_index(disc: Disc, expected: int) -> None:
    player = ComputerPlayer(verbose=False)
    assert player.select_move(Board.start(), disc) == expected


def test_select_move_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    ComputerPlayer(verbose=True).select_move(Board.start(), Disc.BLACK)
    assert capsys.readouterr().out == "Computer plays d3 for BLACK\n"


def test_select_move_quiet(capsys: pytest.CaptureFixture[str]) -> None:
    ComputerPlayer(verbose=False).select_move(Board.start(), Disc.BLACK)
    assert capsys.readouterr().out == ""


def test_verbose_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_VERBOSE", "1")
    assert ComputerPlayer().verbose

    monkeypatch.setenv("REVERSI_VERBOSE", "0")
    assert not ComputerPlayer().verbose
