from reversi.othello.board import Board, Disc
from reversi.othello.player import Player


class HumanPlayer(Player):
    """
    Reads moves from stdin. Accepts a field such as "d3" or a square index such as "19".
    """

    def parse_move(self, text: str) -> int:
        text = text.strip()

        if text.isdigit():
            return int(text)

        return Board.field_to_index(text)

    def select_move(self, board: Board, disc: Disc) -> int:
        while True:
            board.show(moves_for=disc)

            try:
                text = input(f"Enter move for {disc.name}: ")
            except EOFError:
                raise SystemExit("No more input, quitting.")

            try:
                move = self.parse_move(text)
            except ValueError as e:
                print(f"Could not read move: {e}")
                continue

            if board.is_valid_move(move, disc):
                return move

            print("Invalid move, try again.")
