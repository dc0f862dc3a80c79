from __future__ import annotations

from typing import Optional

from reversi.othello.board import Board, Disc
from reversi.othello.player import Player


class GameError(Exception):
    pass


class GameInvalidMove(GameError):
    pass


class TooManyInvalidMoves(GameError):
    pass


class GameOutcome:
    def __init__(self, winner: Optional[Disc]) -> None:
        # None means the game is a tie.
        self.winner = winner

    @classmethod
    def tie(cls) -> GameOutcome:
        return GameOutcome(None)

    @classmethod
    def won_by(cls, disc: Disc) -> GameOutcome:
        return GameOutcome(disc)

    def is_tie(self) -> bool:
        return self.winner is None

    def __repr__(self) -> str:
        if self.winner is None:
            return "GameOutcome(tie)"
        return f"GameOutcome(winner={self.winner.name})"

    def __str__(self) -> str:
        if self.winner is None:
            return "Tie"
        return f"{self.winner.name.capitalize()} wins"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameOutcome):
            return NotImplemented
        return self.winner == other.winner

    def __hash__(self) -> int:
        return hash(self.winner)


class Game:
    def __init__(
        self,
        black: Player,
        white: Player,
        *,
        board: Optional[Board] = None,
        current: Disc = Disc.BLACK,
        max_invalid_moves: Optional[int] = None,
    ) -> None:
        self.board = board if board is not None else Board.start()
        self.black = black
        self.white = white
        self.current = current

        # None means a player may keep returning invalid moves forever.
        self.max_invalid_moves = max_invalid_moves
        self.invalid_moves = 0

    def current_disc(self) -> Disc:
        return self.current

    def current_player(self) -> Player:
        if self.current == Disc.BLACK:
            return self.black
        return self.white

    def available_moves(self, disc: Optional[Disc] = None) -> list[int]:
        if disc is None:
            disc = self.current
        return self.board.valid_moves(disc)

    def forced_pass(self) -> bool:
        return not self.available_moves()

    def apply_current(self, choice: int) -> None:
        if not self.board.is_valid_move(choice, self.current):
            raise GameInvalidMove(
                f"{self.current.name} cannot play on square {choice}"
            )

        self.board.apply_move(choice, self.current)

    def advance_turn(self) -> None:
        self.current = self.current.opposite()
        self.invalid_moves = 0

    def is_over(self) -> bool:
        return not (
            self.available_moves(Disc.BLACK) or self.available_moves(Disc.WHITE)
        )

    def outcome(self) -> Optional[GameOutcome]:
        if not self.is_over():
            return None

        black = self.board.count_discs(Disc.BLACK)
        white = self.board.count_discs(Disc.WHITE)

        if black > white:
            return GameOutcome.won_by(Disc.BLACK)
        if white > black:
            return GameOutcome.won_by(Disc.WHITE)
        return GameOutcome.tie()

    def step(self) -> bool:
        """
        Plays one half-move for the side to move.
        Returns False if the player's choice was rejected and the turn did not advance.
        """

        if self.forced_pass():
            self.advance_turn()
            return True

        # Players get a copy, so they can't modify our board.
        choice = self.current_player().select_move(self.board.copy(), self.current)

        try:
            self.apply_current(choice)
        except GameInvalidMove:
            self.invalid_moves += 1

            if (
                self.max_invalid_moves is not None
                and self.invalid_moves > self.max_invalid_moves
            ):
                raise TooManyInvalidMoves(
                    f"{self.current.name} returned {self.invalid_moves} invalid moves in a row"
                )
            return False

        self.advance_turn()
        return True

    def run(self) -> GameOutcome:
        while not self.is_over():
            self.step()

        outcome = self.outcome()
        assert outcome is not None
        return outcome
