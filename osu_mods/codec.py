"""
Conversions between mod collections and their wire formats: the legacy
bitmask, the structured `{"acronym": ..., "settings": {...}}` objects of the
osu! API and plain acronym strings.
"""
from collections.abc import Iterable
from typing import Any

from osu_mods import definitions
from osu_mods import logger
from osu_mods.acronym import Acronym
from osu_mods.errors import InvalidSetting
from osu_mods.errors import MissingField
from osu_mods.errors import ParsingError
from osu_mods.errors import UnknownMod
from osu_mods.game_mod import GameMod
from osu_mods.game_mod import validate_settings
from osu_mods.game_modes import GameMode
from osu_mods.game_mods import NO_MOD
from osu_mods.game_mods import GameMods
from osu_mods.game_mods_intermode import GameModsIntermode
from osu_mods.intermode import GameModIntermode

MAX_LEGACY_BITS = 2**32 - 1

QUERY_KEY = "mods[]"


# legacy bitmask


def encode_bits(mods: GameMods | GameModsIntermode) -> int:
    return mods.bits()


def _check_bits_range(bits: int) -> None:
    if not 0 <= bits <= MAX_LEGACY_BITS:
        raise ParsingError(f"Legacy mod bits must fit in 32 bits, got {bits}")


def decode_bits(bits: int, mode: GameMode) -> GameMods:
    _check_bits_range(bits)

    intermode = GameModsIntermode.from_bits(bits)

    ignored_bits = bits & ~intermode.bits()
    if ignored_bits:
        logger.debug("Ignored unassigned legacy mod bits", bits=bits, ignored_bits=ignored_bits)

    return GameMods.from_intermode(intermode, mode)


# structured json


def encode_mod(mod: GameMod) -> dict[str, Any]:
    encoded: dict[str, Any] = {"acronym": mod.acronym.as_str()}

    settings = mod.settings
    if settings:
        # `GameMod` keeps present settings in schema order
        encoded["settings"] = dict(settings)

    return encoded


def encode_mods(mods: Iterable[GameMod]) -> list[dict[str, Any]]:
    return [encode_mod(mod) for mod in mods]


def decode_mod(value: Any, mode: GameMode) -> GameMod:
    if isinstance(value, str):
        acronym = Acronym(value).as_str()
        raw_settings: Any = None
    elif isinstance(value, dict):
        raw_acronym = value.get("acronym")
        if raw_acronym is None:
            raise MissingField("acronym")

        if not isinstance(raw_acronym, str):
            raise ParsingError(f"Mod acronym must be a string, got {raw_acronym!r}")

        acronym = Acronym(raw_acronym).as_str()
        raw_settings = value.get("settings")
    else:
        raise ParsingError(f"Expected a mod object or acronym, got {value!r}")

    definition = definitions.get_definition(acronym, mode)
    if definition is None:
        raise UnknownMod(acronym, mode)

    if raw_settings is None:
        raw_settings = {}
    elif not isinstance(raw_settings, dict):
        raise InvalidSetting(acronym, "settings", raw_settings)

    return GameMod(definition, validate_settings(definition, raw_settings, ignore_unknown=True))


def decode_mods(value: Any, mode: GameMode) -> GameMods:
    """
    Decode any of the shapes the osu! API uses for a score's mods.

    `None` means no mods; numbers and digit strings are legacy bitmasks;
    lists hold structured mods or acronyms; other strings are concatenated
    acronyms.
    """
    match value:
        case None:
            return GameMods()
        case bool():
            raise ParsingError(f"Expected mods, got {value!r}")
        case int():
            return decode_bits(value, mode)
        case str() if value.isascii() and value.isdigit():
            return decode_bits(int(value), mode)
        case str():
            try:
                intermode = GameModsIntermode.from_acronyms(value)
            except UnknownMod as exc:
                raise UnknownMod(exc.acronym, mode) from exc

            for identity in intermode:
                if definitions.get_definition(identity.value, mode) is None:
                    raise UnknownMod(identity.value, mode)

            return GameMods.from_intermode(intermode, mode)
        case list():
            return GameMods(decode_mod(element, mode) for element in value)
        case _:
            raise ParsingError(f"Expected mods, got {value!r}")


# mode-independent acronyms


def encode_intermode(mods: Iterable[GameModIntermode]) -> list[str]:
    return [mod.value for mod in mods]


def _decode_identity(value: Any) -> GameModIntermode:
    if isinstance(value, dict):
        value = value.get("acronym")
        if value is None:
            raise MissingField("acronym")

    if not isinstance(value, str):
        raise ParsingError(f"Mod acronym must be a string, got {value!r}")

    acronym = Acronym(value)
    identity = GameModIntermode.from_acronym(acronym)
    if identity is None:
        raise UnknownMod(acronym.as_str(), None)

    return identity


def decode_intermode(value: Any) -> GameModsIntermode:
    match value:
        case None:
            return GameModsIntermode()
        case bool():
            raise ParsingError(f"Expected mods, got {value!r}")
        case int():
            _check_bits_range(value)
            return GameModsIntermode.from_bits(value)
        case str() if value.isascii() and value.isdigit():
            bits = int(value)
            _check_bits_range(bits)
            return GameModsIntermode.from_bits(bits)
        case str():
            return GameModsIntermode.from_acronyms(value)
        case list():
            return GameModsIntermode(_decode_identity(element) for element in value)
        case _:
            raise ParsingError(f"Expected mods, got {value!r}")


# request parameters


def mods_as_query(mods: GameMods | GameModsIntermode) -> list[tuple[str, str]]:
    if not mods:
        return [(QUERY_KEY, NO_MOD)]

    return [(QUERY_KEY, str(mod)) for mod in mods]


def mods_as_filter(mods: GameMods | GameModsIntermode) -> str:
    return ",".join(str(mod) for mod in mods)
