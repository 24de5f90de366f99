"""
The static mod catalogue: every mod per game mode with its kind, legacy bit,
incompatibilities and settings schema.

The catalogue is stored in the osu-web `database/mods.json` layout and is
parsed once, lazily, into pydantic models.
"""
import os
from enum import IntEnum
from functools import cache
from typing import Any
from typing import Literal

import orjson
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic import model_validator

from osu_mods import logger
from osu_mods import settings
from osu_mods.acronym import Acronym
from osu_mods.errors import DefinitionsError
from osu_mods.errors import InvalidSetting
from osu_mods.game_modes import GameMode

DEFAULT_DEFINITIONS_PATH = os.path.join(os.path.dirname(__file__), "data", "mods.json")

LEGACY_BITS: dict[str, int] = {
    "NF": 1 << 0,
    "EZ": 1 << 1,
    "TD": 1 << 2,
    "HD": 1 << 3,
    "HR": 1 << 4,
    "SD": 1 << 5,
    "DT": 1 << 6,
    "RX": 1 << 7,
    "HT": 1 << 8,
    "NC": 1 << 6 | 1 << 9,
    "FL": 1 << 10,
    "AT": 1 << 11,
    "SO": 1 << 12,
    "AP": 1 << 13,
    "PF": 1 << 5 | 1 << 14,
    "4K": 1 << 15,
    "5K": 1 << 16,
    "6K": 1 << 17,
    "7K": 1 << 18,
    "8K": 1 << 19,
    "FI": 1 << 20,
    "RD": 1 << 21,
    "CN": 1 << 22,
    "TP": 1 << 23,
    "9K": 1 << 24,
    "DS": 1 << 25,
    "1K": 1 << 26,
    "3K": 1 << 27,
    "2K": 1 << 28,
    "SV2": 1 << 29,
    "MR": 1 << 30,
}

_MODE_SUFFIXES = {
    GameMode.OSU: "Osu",
    GameMode.TAIKO: "Taiko",
    GameMode.CATCH: "Catch",
    GameMode.MANIA: "Mania",
}


class GameModKind(IntEnum):
    DIFFICULTY_REDUCTION = 0
    DIFFICULTY_INCREASE = 1
    CONVERSION = 2
    AUTOMATION = 3
    FUN = 4
    SYSTEM = 5

    @classmethod
    def from_string(cls, value: str) -> "GameModKind":
        match value:
            case "DifficultyReduction":
                return cls.DIFFICULTY_REDUCTION
            case "DifficultyIncrease":
                return cls.DIFFICULTY_INCREASE
            case "Conversion":
                return cls.CONVERSION
            case "Automation":
                return cls.AUTOMATION
            case "Fun":
                return cls.FUN
            case "System":
                return cls.SYSTEM
            case _:
                raise ValueError(f"Unexpected mod kind {value!r}")


SettingValue = bool | float | str


def coerce_setting(
    acronym: str,
    setting_name: str,
    setting_type: str,
    value: Any,
) -> SettingValue | None:
    """Type-check a raw setting value against its schema type.

    `None` means the setting is absent. Numbers are always stored as floats.
    """
    if value is None:
        return None

    match setting_type:
        case "number":
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                try:
                    return float(value)
                except OverflowError as exc:
                    raise InvalidSetting(acronym, setting_name, value) from exc
        case "boolean":
            if isinstance(value, bool):
                return value
        case "string":
            if isinstance(value, str):
                return value

    raise InvalidSetting(acronym, setting_name, value)


class SettingDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name")
    type: Literal["boolean", "number", "string"] = Field(alias="Type")
    label: str = Field(default="", alias="Label")
    description: str = Field(default="", alias="Description")
    default: Any = Field(default=None, alias="Default")

    @field_validator("default")
    @classmethod
    def _check_default(cls, value: Any, info: ValidationInfo) -> Any:
        if "type" not in info.data:
            return value

        return coerce_setting("", info.data.get("name", ""), info.data["type"], value)

    def coerce(self, acronym: str, value: Any) -> SettingValue | None:
        return coerce_setting(acronym, self.name, self.type, value)


class ModDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    acronym: str = Field(alias="Acronym")
    name: str = Field(alias="Name")
    description: str = Field(default="", alias="Description")
    kind: GameModKind = Field(alias="Type")
    settings: tuple[SettingDefinition, ...] = Field(default=(), alias="Settings")
    incompatible_mods: tuple[str, ...] = Field(default=(), alias="IncompatibleMods")
    requires_configuration: bool = Field(default=False, alias="RequiresConfiguration")
    user_playable: bool = Field(default=True, alias="UserPlayable")
    valid_for_multiplayer: bool = Field(default=True, alias="ValidForMultiplayer")
    valid_for_multiplayer_as_free_mod: bool = Field(
        default=True,
        alias="ValidForMultiplayerAsFreeMod",
    )

    mode: GameMode
    bits: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _apply_legacy_data(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        acronym = data.get("Acronym", data.get("acronym"))
        incompatible_mods = data.get("IncompatibleMods", data.get("incompatible_mods", ()))

        return {
            **data,
            "bits": LEGACY_BITS.get(acronym) if isinstance(acronym, str) else None,
            # a mod is never incompatible with itself
            "IncompatibleMods": [other for other in incompatible_mods if other != acronym],
        }

    @field_validator("acronym")
    @classmethod
    def _check_acronym(cls, value: str) -> str:
        return Acronym(value).as_str()

    @field_validator("kind", mode="before")
    @classmethod
    def _parse_kind(cls, value: Any) -> Any:
        if isinstance(value, str):
            return GameModKind.from_string(value)

        return value

    @property
    def legacy_index(self) -> int | None:
        if self.bits is None:
            return None

        return self.bits.bit_length()

    @property
    def type_name(self) -> str:
        """The mod's name as a single identifier, e.g. `HiddenOsu`."""
        return self.name.replace(" ", "") + _MODE_SUFFIXES[self.mode]

    def setting_definition(self, name: str) -> SettingDefinition | None:
        for setting in self.settings:
            if setting.name == name:
                return setting

        return None


class RulesetDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name")
    ruleset_id: GameMode = Field(alias="RulesetID")
    mods: tuple[ModDefinition, ...] = Field(default=(), alias="Mods")

    @model_validator(mode="before")
    @classmethod
    def _propagate_mode(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        ruleset_id = data.get("RulesetID", data.get("ruleset_id"))
        mods = data.get("Mods", data.get("mods", ()))

        return {
            **data,
            "Mods": [
                {**mod, "mode": ruleset_id} if isinstance(mod, dict) else mod
                for mod in mods
            ],
        }


def load_rulesets(path: str) -> list[RulesetDefinition]:
    try:
        with open(path, "rb") as f:
            raw_rulesets = orjson.loads(f.read())
    except (OSError, orjson.JSONDecodeError) as exc:
        raise DefinitionsError(f"Failed to read mod definitions from {path}") from exc

    if not isinstance(raw_rulesets, list):
        raise DefinitionsError(f"Mod definitions in {path} must be a list of rulesets")

    try:
        rulesets = [RulesetDefinition.model_validate(raw) for raw in raw_rulesets]
    except ValidationError as exc:
        raise DefinitionsError(f"Invalid mod definitions in {path}") from exc

    logger.debug(
        "Loaded mod definitions",
        path=path,
        rulesets=len(rulesets),
        mods=sum(len(ruleset.mods) for ruleset in rulesets),
    )
    return rulesets


@cache
def _rulesets() -> tuple[RulesetDefinition, ...]:
    return tuple(load_rulesets(settings.MODS_DEFINITIONS_PATH or DEFAULT_DEFINITIONS_PATH))


@cache
def _definitions_by_mode() -> dict[GameMode, dict[str, ModDefinition]]:
    by_mode: dict[GameMode, dict[str, ModDefinition]] = {mode: {} for mode in GameMode}
    for ruleset in _rulesets():
        for definition in ruleset.mods:
            by_mode[ruleset.ruleset_id][definition.acronym] = definition

    return by_mode


@cache
def _intermode_definitions() -> dict[str, ModDefinition]:
    definitions: dict[str, ModDefinition] = {}
    for definition in all_definitions():
        definitions.setdefault(definition.acronym, definition)

    return definitions


def clear_cache() -> None:
    _rulesets.cache_clear()
    _definitions_by_mode.cache_clear()
    _intermode_definitions.cache_clear()


def get_definition(acronym: "str | Acronym", mode: GameMode) -> ModDefinition | None:
    return _definitions_by_mode()[mode].get(str(acronym))


def definitions_for_mode(mode: GameMode) -> list[ModDefinition]:
    return list(_definitions_by_mode()[mode].values())


def all_definitions() -> list[ModDefinition]:
    return [definition for ruleset in _rulesets() for definition in ruleset.mods]


def intermode_definition(acronym: "str | Acronym") -> ModDefinition | None:
    """Mode-independent data of a mod (name, kind, bits) from its first ruleset."""
    return _intermode_definitions().get(str(acronym))
