from collections.abc import Mapping
from dataclasses import dataclass
from functools import total_ordering
from types import MappingProxyType
from typing import Any

from osu_mods import definitions
from osu_mods.acronym import Acronym
from osu_mods.definitions import GameModKind
from osu_mods.definitions import ModDefinition
from osu_mods.definitions import SettingValue
from osu_mods.errors import InvalidSetting
from osu_mods.game_modes import GameMode
from osu_mods.intermode import GameModIntermode

DEFAULT_DOUBLE_TIME_RATE = 1.5
DEFAULT_HALF_TIME_RATE = 0.75


@total_ordering
@dataclass(frozen=True)
class GameModOrder:
    """Sort key of a `GameMod`: mode, then legacy bit position, then acronym."""

    mode: GameMode
    index: int | None
    intermode: GameModIntermode

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, GameModOrder):
            return NotImplemented

        if self.mode != other.mode:
            return self.mode < other.mode

        match (self.index, other.index):
            case (int(), int()) if self.index != other.index:
                return self.index < other.index
            case (int(), None):
                return True
            case (None, int()):
                return False

        return self.intermode.value < other.intermode.value


def validate_settings(
    definition: ModDefinition,
    raw_settings: Mapping[str, Any],
    *,
    ignore_unknown: bool = False,
) -> dict[str, SettingValue]:
    """Type-check raw settings, keeping only present values in schema order."""
    if not ignore_unknown:
        for name, value in raw_settings.items():
            if definition.setting_definition(name) is None:
                raise InvalidSetting(definition.acronym, name, value)

    settings: dict[str, SettingValue] = {}
    for setting in definition.settings:
        value = setting.coerce(definition.acronym, raw_settings.get(setting.name))
        if value is not None:
            settings[setting.name] = value

    return settings


class GameMod:
    """A mod of one game mode together with its settings."""

    __slots__ = ("_definition", "_settings")

    def __init__(
        self,
        definition: ModDefinition,
        settings: Mapping[str, SettingValue] | None = None,
    ) -> None:
        self._definition = definition
        self._settings = dict(settings or {})

    @classmethod
    def new(cls, acronym: "str | Acronym", mode: GameMode, **settings: Any) -> "GameMod | None":
        definition = definitions.get_definition(acronym, mode)
        if definition is None:
            return None

        return cls(definition, validate_settings(definition, settings))

    @property
    def definition(self) -> ModDefinition:
        return self._definition

    @property
    def acronym(self) -> Acronym:
        return Acronym(self._definition.acronym)

    @property
    def description(self) -> str:
        return self._definition.description

    @property
    def kind(self) -> GameModKind:
        return self._definition.kind

    @property
    def mode(self) -> GameMode:
        return self._definition.mode

    @property
    def bits(self) -> int | None:
        return self._definition.bits

    @property
    def intermode(self) -> GameModIntermode:
        return GameModIntermode(self._definition.acronym)

    @property
    def name(self) -> str:
        return self._definition.type_name

    @property
    def incompatible_mods(self) -> tuple[Acronym, ...]:
        return tuple(Acronym(acronym) for acronym in self._definition.incompatible_mods)

    @property
    def settings(self) -> Mapping[str, SettingValue]:
        return MappingProxyType(self._settings)

    @property
    def order(self) -> GameModOrder:
        return GameModOrder(
            mode=self.mode,
            index=self._definition.legacy_index,
            intermode=self.intermode,
        )

    def setting(self, name: str) -> SettingValue | None:
        if name in self._settings:
            return self._settings[name]

        setting = self._definition.setting_definition(name)
        if setting is None:
            return None

        return setting.default

    def with_settings(self, **settings: Any) -> "GameMod":
        merged = {**self._settings, **settings}
        return GameMod(self._definition, validate_settings(self._definition, merged))

    def clock_rate(self) -> float | None:
        """The playback rate this mod applies, or `None` if it varies during play."""
        match self._definition.acronym:
            case "DT" | "NC":
                speed_change = self._settings.get("speed_change")
                return DEFAULT_DOUBLE_TIME_RATE if speed_change is None else speed_change
            case "HT" | "DC":
                speed_change = self._settings.get("speed_change")
                return DEFAULT_HALF_TIME_RATE if speed_change is None else speed_change
            case "WU" | "WD" | "AS":
                return None
            case _:
                return 1.0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GameMod):
            return NotImplemented

        return (
            self.mode == other.mode
            and self._definition.acronym == other._definition.acronym
            and self._settings == other._settings
        )

    def __hash__(self) -> int:
        return hash(
            (self.mode, self._definition.acronym, tuple(sorted(self._settings.items()))),
        )

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, GameMod):
            return NotImplemented

        return self.order < other.order

    def __str__(self) -> str:
        return self._definition.acronym

    def __repr__(self) -> str:
        if self._settings:
            return f"GameMod({self._definition.acronym!r}, {self.mode.name}, {self._settings!r})"

        return f"GameMod({self._definition.acronym!r}, {self.mode.name})"
