from reversi.othello.board import Board, Disc


class Player:
    def select_move(self, board: Board, disc: Disc) -> int:
        """
        Returns the index of the square `disc` should play on.
        The result is not trusted: it may be out of range or illegal.
        """
        raise NotImplementedError
