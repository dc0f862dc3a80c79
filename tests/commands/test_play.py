import pytest
from typer.testing import CliRunner

from reversi.commands import play
from reversi.othello.board import Board, Disc
from reversi.othello.player import Player

runner = CliRunner()


class StubbornPlayer(Player):
    def select_move(self, board: Board, disc: Disc) -> int:
        return 0


def test_computer_vs_computer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_VERBOSE", "0")

    result = runner.invoke(play.app, ["-b", "computer", "-w", "computer"])

    assert result.exit_code == 0
    assert "+-a-b-c-d-e-f-g-h-+" in result.output
    assert "Black: " in result.output
    last_line = result.output.strip().splitlines()[-1]
    assert last_line in ["Black wins", "White wins", "Tie"]


def test_players_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_BLACK_PLAYER", "computer")
    monkeypatch.setenv("REVERSI_WHITE_PLAYER", "computer")
    monkeypatch.setenv("REVERSI_VERBOSE", "1")

    result = runner.invoke(play.app, [])

    assert result.exit_code == 0
    assert "Computer plays d3 for BLACK" in result.output


def test_unknown_player() -> None:
    result = runner.invoke(play.app, ["-b", "robot", "-w", "computer"])

    assert result.exit_code == 1
    assert "Player not found: robot" in result.output
    assert "- computer" in result.output
    assert "- human" in result.output


def test_too_many_invalid_moves(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(play.PLAYERS, "stubborn", StubbornPlayer)
    monkeypatch.setenv("REVERSI_MAX_INVALID_MOVES", "2")

    result = runner.invoke(play.app, ["-b", "stubborn", "-w", "computer"])

    assert result.exit_code == 1
    assert "Game aborted: BLACK returned 3 invalid moves in a row" in result.output
