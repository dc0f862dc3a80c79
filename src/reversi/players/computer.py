from typing import Optional

from reversi.config import get_verbose
from reversi.othello.board import Board, Disc
from reversi.othello.player import Player


class ComputerPlayer(Player):
    """
    Plays the legal move with the lowest index.
    """

    def __init__(self, verbose: Optional[bool] = None) -> None:
        self.verbose = get_verbose() if verbose is None else verbose

    def select_move(self, board: Board, disc: Disc) -> int:
        moves = board.valid_moves(disc)

        # Game never asks a player to move when it has to pass.
        assert moves

        move = moves[0]

        if self.verbose:
            print(f"Computer plays {Board.index_to_field(move)} for {disc.name}")

        return move
