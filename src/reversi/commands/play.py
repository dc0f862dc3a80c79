import typer
from typing import Annotated, Callable, Optional

from reversi.config import (
    get_black_player,
    get_max_invalid_moves,
    get_white_player,
)
from reversi.othello.board import Disc
from reversi.othello.game import Game, GameError
from reversi.othello.player import Player
from reversi.players.computer import ComputerPlayer
from reversi.players.human import HumanPlayer

app = typer.Typer(pretty_exceptions_enable=False)

PLAYERS: dict[str, Callable[[], Player]] = {
    "computer": ComputerPlayer,
    "human": HumanPlayer,
}


def make_player(name: str) -> Player:
    try:
        player_type = PLAYERS[name]
    except KeyError:
        print(f"Player not found: {name}")
        print("Available players: ")
        for player_name in sorted(PLAYERS.keys()):
            print(f"- {player_name}")
        raise typer.Exit(1)

    return player_type()


@app.command()
def main(
    black: Annotated[Optional[str], typer.Option("--black", "-b")] = None,
    white: Annotated[Optional[str], typer.Option("--white", "-w")] = None,
) -> None:
    black_player = make_player(black or get_black_player())
    white_player = make_player(white or get_white_player())

    # A cap of 0 means no cap.
    max_invalid_moves: Optional[int] = get_max_invalid_moves() or None

    game = Game(black_player, white_player, max_invalid_moves=max_invalid_moves)

    try:
        outcome = game.run()
    except GameError as e:
        print(f"Game aborted: {e}")
        raise typer.Exit(1)

    game.board.show()
    black_count = game.board.count_discs(Disc.BLACK)
    white_count = game.board.count_discs(Disc.WHITE)
    print(f"Black: {black_count}, White: {white_count}")
    print(outcome)


if __name__ == "__main__":
    app()
