from collections.abc import Iterable
from typing import Any
from typing import TypedDict

from osu_mods import builders
from osu_mods import codec
from osu_mods import game_modes
from osu_mods import logger
from osu_mods.errors import DefinitionsError
from osu_mods.errors import ParsingError
from osu_mods.errors import ServiceError
from osu_mods.game_modes import GameMode
from osu_mods.game_mods import GameMods


class Score(TypedDict):
    score_id: int
    account_id: int
    beatmap_id: int
    game_mode: GameMode
    mods: GameMods
    legacy_mods: int


def parse_mods(raw_mods: Any, game_mode: GameMode) -> GameMods | ServiceError:
    try:
        mods = codec.decode_mods(raw_mods, game_mode)
    except ParsingError as exc:
        logger.warning(
            "Failed to parse mods",
            raw_mods=raw_mods,
            game_mode=game_mode.name,
            error=str(exc),
        )
        return exc.error
    except DefinitionsError as exc:
        logger.error("Failed to load mod definitions", exc_info=exc)
        return exc.error

    return mods


def parse_score(raw_score: dict[str, Any]) -> Score | ServiceError:
    """Read the mod-related fields of an osu! API score object."""
    try:
        score_id = int(raw_score["id"])
        account_id = int(raw_score["user_id"])
        beatmap_id = int(raw_score["beatmap_id"])
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("Received an invalid score", error=repr(exc))
        return ServiceError.SCORES_INVALID

    raw_game_mode = raw_score.get("ruleset_id")
    if raw_game_mode is None:
        raw_game_mode = raw_score.get("mode")

    if raw_game_mode is None:
        logger.warning("Received a score without a game mode", score_id=score_id)
        return ServiceError.SCORES_INVALID

    try:
        game_mode = game_modes.parse(raw_game_mode)
    except ParsingError as exc:
        logger.warning("Received a score with an invalid game mode", score_id=score_id)
        return exc.error

    mods = parse_mods(raw_score.get("mods"), game_mode)
    if isinstance(mods, ServiceError):
        return mods

    return {
        "score_id": score_id,
        "account_id": account_id,
        "beatmap_id": beatmap_id,
        "game_mode": game_mode,
        "mods": mods,
        "legacy_mods": mods.bits(),
    }


def build_mods_filter(
    acronyms: Iterable[str],
    game_mode: GameMode | None = None,
) -> list[tuple[str, str]] | ServiceError:
    """Build the `mods[]` query parameters of a leaderboard request."""
    acronyms = list(acronyms)

    try:
        if game_mode is None:
            mods = builders.mods(*acronyms)
        else:
            mods = builders.mods(*acronyms, mode=game_mode)
    except ParsingError as exc:
        logger.warning("Failed to build mods filter", acronyms=acronyms, error=str(exc))
        return exc.error

    return codec.mods_as_query(mods)
