import os
from dotenv import load_dotenv

from reversi import PROJECT_ROOT

load_dotenv(PROJECT_ROOT / ".env")


def get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def get_max_invalid_moves() -> int:
    return get_int("REVERSI_MAX_INVALID_MOVES", 10)


def get_verbose() -> bool:
    return os.getenv("REVERSI_VERBOSE", "0") != "0"


def get_black_player() -> str:
    return os.getenv("REVERSI_BLACK_PLAYER", "human")


def get_white_player() -> str:
    return os.getenv("REVERSI_WHITE_PLAYER", "computer")
