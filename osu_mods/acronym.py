from functools import total_ordering
from typing import Any

from osu_mods.errors import InvalidAcronymChars
from osu_mods.errors import InvalidAcronymLength

MIN_LENGTH = 2
MAX_LENGTH = 4

_VALID_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")


@total_ordering
class Acronym:
    """A validated mod acronym such as `HD`, `4K` or `SV2`."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        if not MIN_LENGTH <= len(value) <= MAX_LENGTH:
            raise InvalidAcronymLength(value)

        if any(char not in _VALID_CHARS for char in value):
            raise InvalidAcronymChars(value)

        self._value = value

    @classmethod
    def parse(cls, value: "str | Acronym") -> "Acronym":
        if isinstance(value, Acronym):
            return value

        return cls(value)

    def as_str(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Acronym({self._value!r})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Acronym):
            return self._value == other._value
        elif isinstance(other, str):
            return self._value == other
        else:
            return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Acronym):
            return self._value < other._value
        elif isinstance(other, str):
            return self._value < other
        else:
            return NotImplemented
