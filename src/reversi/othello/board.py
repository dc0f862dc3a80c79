from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

WIDTH = 8
HEIGHT = 8
SURFACE = WIDTH * HEIGHT

# (delta_row, delta_col): N, NE, E, SE, S, SW, W, NW
DIRECTIONS = [
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
]


class Disc(Enum):
    BLACK = -1
    WHITE = 1

    def opposite(self) -> Disc:
        return Disc(-self.value)


class BoardError(Exception):
    pass


class OutOfBounds(BoardError):
    pass


class SquareOccupied(BoardError):
    pass


class InvalidMove(BoardError):
    pass


class Board:
    def __init__(self, squares: list[Optional[Disc]]) -> None:
        if len(squares) != SURFACE:
            raise ValueError(f"Board needs {SURFACE} squares, got {len(squares)}")

        self.squares = list(squares)

    @classmethod
    def start(cls) -> Board:
        board = cls.empty()

        mid_row = HEIGHT // 2
        mid_col = WIDTH // 2

        init = [
            (mid_row, mid_col, Disc.WHITE),
            (mid_row - 1, mid_col, Disc.BLACK),
            (mid_row, mid_col - 1, Disc.BLACK),
            (mid_row - 1, mid_col - 1, Disc.WHITE),
        ]

        for row, col, disc in init:
            board.squares[board.index(row, col)] = disc

        return board

    @classmethod
    def empty(cls) -> Board:
        return Board([None] * SURFACE)

    @classmethod
    def from_squares(cls, squares: Iterable[Optional[Disc]]) -> Board:
        return Board(list(squares))

    def __repr__(self) -> str:
        rows = []
        for row in range(HEIGHT):
            line = ""
            for col in range(WIDTH):
                line += _symbol(self.squares[row * WIDTH + col])
            rows.append(line)
        return f"Board({'/'.join(rows)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.squares == other.squares

    # Mutable, so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Board:
        return Board(self.squares)

    @staticmethod
    def index(row: int, col: int) -> int:
        if row not in range(HEIGHT) or col not in range(WIDTH):
            raise OutOfBounds(f"Row {row}, col {col} is not on the board")
        return row * WIDTH + col

    @staticmethod
    def row_col(index: int) -> tuple[int, int]:
        if index not in range(SURFACE):
            raise OutOfBounds(f"Index {index} is not on the board")
        return index // WIDTH, index % WIDTH

    def get_field(self, index: int) -> Optional[Disc]:
        if index not in range(SURFACE):
            raise OutOfBounds(f"Index {index} is not on the board")
        return self.squares[index]

    def _next_index(self, index: int, delta_row: int, delta_col: int) -> Optional[int]:
        row, col = self.row_col(index)
        try:
            return self.index(row + delta_row, col + delta_col)
        except OutOfBounds:
            return None

    def _flips_in_direction(
        self, start: int, disc: Disc, delta_row: int, delta_col: int
    ) -> list[int]:
        opponent = disc.opposite()
        flips: list[int] = []

        index = self._next_index(start, delta_row, delta_col)

        while index is not None:
            square = self.squares[index]

            if square == opponent:
                flips.append(index)
            elif square == disc:
                return flips
            else:
                # Empty square ends the run without a capture.
                return []

            index = self._next_index(index, delta_row, delta_col)

        # Ran off the board.
        return []

    def get_flips(self, index: int, disc: Disc) -> list[int]:
        """
        Returns the indexes of all discs captured when `disc` is placed on `index`.
        The result is empty if the move is not a legal move.
        """

        if index not in range(SURFACE) or self.squares[index] is not None:
            return []

        flips: list[int] = []
        for delta_row, delta_col in DIRECTIONS:
            flips += self._flips_in_direction(index, disc, delta_row, delta_col)
        return sorted(flips)

    def is_valid_move(self, index: int, disc: Disc) -> bool:
        return len(self.get_flips(index, disc)) > 0

    def valid_moves(self, disc: Disc) -> list[int]:
        return [index for index in range(SURFACE) if self.is_valid_move(index, disc)]

    def apply_move(self, index: int, disc: Disc) -> None:
        if self.get_field(index) is not None:
            raise SquareOccupied(f"Square {index} is already taken")

        flips = self.get_flips(index, disc)

        if not flips:
            raise InvalidMove(f"Placing {disc.name} on {index} captures nothing")

        self.squares[index] = disc
        for flip in flips:
            self.squares[flip] = disc

    def count_discs(self, disc: Disc) -> int:
        return sum(1 for square in self.squares if square == disc)

    def count_empties(self) -> int:
        return self.squares.count(None)

    def show(self, moves_for: Optional[Disc] = None) -> None:
        moves = set(self.valid_moves(moves_for)) if moves_for is not None else set()

        print("+-a-b-c-d-e-f-g-h-+")
        for row in range(HEIGHT):
            print("{} ".format(row + 1), end="")

            for col in range(WIDTH):
                index = row * WIDTH + col
                square = self.squares[index]

                if square is not None:
                    print(_symbol(square) + " ", end="")
                elif index in moves:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    @classmethod
    def index_to_field(cls, index: int) -> str:
        if index not in range(SURFACE):
            raise ValueError(f"Index {index} is not on the board")
        return "abcdefgh"[index % WIDTH] + "12345678"[index // WIDTH]

    @classmethod
    def indexes_to_fields(cls, indexes: Iterable[int]) -> str:
        return " ".join(cls.index_to_field(index) for index in indexes)

    @classmethod
    def field_to_index(cls, field: str) -> int:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        col = ord(field[0]) - ord("a")
        row = ord(field[1]) - ord("1")
        return row * WIDTH + col


def _symbol(square: Optional[Disc]) -> str:
    if square == Disc.BLACK:
        return "○"
    if square == Disc.WHITE:
        return "●"
    return "."
