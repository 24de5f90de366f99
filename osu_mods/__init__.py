from osu_mods.acronym import Acronym
from osu_mods.builders import mods
from osu_mods.definitions import GameModKind
from osu_mods.errors import ModsError
from osu_mods.errors import ParsingError
from osu_mods.errors import ServiceError
from osu_mods.errors import UnknownMod
from osu_mods.game_mod import GameMod
from osu_mods.game_mod import GameModOrder
from osu_mods.game_modes import GameMode
from osu_mods.game_mods import GameMods
from osu_mods.game_mods_intermode import GameModsIntermode
from osu_mods.intermode import GameModIntermode

__all__ = [
    "Acronym",
    "GameMod",
    "GameModIntermode",
    "GameModKind",
    "GameModOrder",
    "GameMode",
    "GameMods",
    "GameModsIntermode",
    "ModsError",
    "ParsingError",
    "ServiceError",
    "UnknownMod",
    "mods",
]
