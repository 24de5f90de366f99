from typing import overload

from osu_mods.acronym import Acronym
from osu_mods.errors import UnknownMod
from osu_mods.game_mod import GameMod
from osu_mods.game_modes import GameMode
from osu_mods.game_mods import GameMods
from osu_mods.game_mods_intermode import GameModsIntermode
from osu_mods.intermode import GameModIntermode


def _split_tokens(tokens: tuple[str, ...]) -> list[Acronym]:
    # a blank token fails acronym validation
    return [Acronym(part) for token in tokens for part in (token.split() or [token])]


@overload
def mods(*tokens: str) -> GameModsIntermode:
    ...


@overload
def mods(*tokens: str, mode: GameMode) -> GameMods:
    ...


def mods(*tokens: str, mode: GameMode | None = None) -> GameModsIntermode | GameMods:
    """
    Build a mod collection from acronyms, e.g. `mods("HD", "DT")` or
    `mods("HD HR", mode=GameMode.OSU)`.

    Without a mode the result is a `GameModsIntermode`; with one it is a
    `GameMods` of mods with default settings.
    """
    acronyms = _split_tokens(tokens)

    if mode is None:
        intermode = GameModsIntermode()
        for acronym in acronyms:
            identity = GameModIntermode.from_acronym(acronym)
            if identity is None:
                raise UnknownMod(acronym.as_str(), None)

            intermode.insert(identity)

        return intermode

    game_mods = GameMods()
    for acronym in acronyms:
        mod = GameMod.new(acronym, mode)
        if mod is None:
            raise UnknownMod(acronym.as_str(), mode)

        game_mods.insert(mod)

    return game_mods
