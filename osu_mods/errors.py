from enum import Enum
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from osu_mods.game_modes import GameMode


class ServiceError(str, Enum):
    INTERNAL_SERVER_ERROR = "global.internal_server_error"

    ACRONYMS_INVALID_LENGTH = "acronyms.invalid_length"
    ACRONYMS_INVALID_CHARS = "acronyms.invalid_chars"

    GAME_MODES_INVALID = "game_modes.invalid"

    MODS_UNKNOWN_MOD = "mods.unknown_mod"
    MODS_MISSING_FIELD = "mods.missing_field"
    MODS_INVALID_SETTING = "mods.invalid_setting"
    MODS_PARSING_FAILED = "mods.parsing_failed"
    MODS_DEFINITIONS_UNAVAILABLE = "mods.definitions_unavailable"

    SCORES_INVALID = "scores.invalid"


class ModsError(Exception):
    error = ServiceError.INTERNAL_SERVER_ERROR


class ParsingError(ModsError, ValueError):
    error = ServiceError.MODS_PARSING_FAILED


class InvalidAcronymLength(ParsingError):
    error = ServiceError.ACRONYMS_INVALID_LENGTH

    def __init__(self, value: str) -> None:
        super().__init__(f"Acronym must be 2 to 4 characters long, got {value!r}")
        self.value = value


class InvalidAcronymChars(ParsingError):
    error = ServiceError.ACRONYMS_INVALID_CHARS

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Acronym may only contain uppercase letters and digits, got {value!r}",
        )
        self.value = value


class InvalidGameMode(ParsingError):
    error = ServiceError.GAME_MODES_INVALID

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid game mode {value!r}")
        self.value = value


class UnknownMod(ParsingError):
    error = ServiceError.MODS_UNKNOWN_MOD

    def __init__(self, acronym: str, mode: "GameMode | None" = None) -> None:
        if mode is None:
            message = f"Unknown mod {acronym!r}"
        else:
            message = f"Unknown mod {acronym!r} for mode {mode.name.lower()}"

        super().__init__(message)
        self.acronym = acronym
        self.mode = mode


class MissingField(ParsingError):
    error = ServiceError.MODS_MISSING_FIELD

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing field {field!r}")
        self.field = field


class InvalidSetting(ParsingError):
    error = ServiceError.MODS_INVALID_SETTING

    def __init__(self, acronym: str, setting: str, value: Any) -> None:
        super().__init__(f"Invalid value {value!r} for setting {setting!r} of {acronym}")
        self.acronym = acronym
        self.setting = setting
        self.value = value


class DefinitionsError(ModsError):
    error = ServiceError.MODS_DEFINITIONS_UNAVAILABLE
