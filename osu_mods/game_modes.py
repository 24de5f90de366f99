from enum import IntEnum

from osu_mods.errors import InvalidGameMode


class GameMode(IntEnum):
    OSU = 0
    TAIKO = 1
    CATCH = 2
    MANIA = 3


def to_string(game_mode: int) -> str:
    if game_mode == GameMode.OSU:
        return "osu"
    elif game_mode == GameMode.TAIKO:
        return "taiko"
    elif game_mode == GameMode.CATCH:
        return "fruits"
    elif game_mode == GameMode.MANIA:
        return "mania"
    else:
        raise InvalidGameMode(game_mode)


def from_string(value: str) -> GameMode:
    match value:
        case "0" | "osu" | "osu!":
            return GameMode.OSU
        case "1" | "taiko" | "tko":
            return GameMode.TAIKO
        case "2" | "ctb" | "fruits":
            return GameMode.CATCH
        case "3" | "mania" | "mna":
            return GameMode.MANIA
        case _:
            raise InvalidGameMode(value)


def parse(value: "int | str | GameMode") -> GameMode:
    """Accept a ruleset id, a `GameMode` or any name the osu! API uses."""
    if isinstance(value, GameMode):
        return value

    if isinstance(value, bool):
        raise InvalidGameMode(value)

    if isinstance(value, int):
        try:
            return GameMode(value)
        except ValueError:
            raise InvalidGameMode(value)

    if isinstance(value, str):
        return from_string(value)

    raise InvalidGameMode(value)
