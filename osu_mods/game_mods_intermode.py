from collections.abc import Iterable
from collections.abc import Iterator
from typing import Any

from osu_mods import definitions
from osu_mods.acronym import Acronym
from osu_mods.errors import ParsingError
from osu_mods.errors import UnknownMod
from osu_mods.game_modes import GameMode
from osu_mods.game_mods import NO_MOD
from osu_mods.game_mods import GameMods
from osu_mods.intermode import GameModIntermode


class GameModsIntermode:
    """An ordered set of mod identities without settings or game mode."""

    __slots__ = ("_mods",)

    def __init__(self, mods: Iterable[GameModIntermode] | None = None) -> None:
        self._mods: set[GameModIntermode] = set()
        if mods is not None:
            self.extend(mods)

    @classmethod
    def from_bits(cls, bits: int) -> "GameModsIntermode":
        """
        Decode a legacy bitmask.

        Nightcore and Perfect carry the bit of the mod they extend, so they are
        only recognised when both bits are set and then replace that mod.
        Unassigned bits are ignored.
        """
        mods = cls()
        for acronym, mod_bits in definitions.LEGACY_BITS.items():
            if bits & mod_bits == mod_bits:
                mods.insert(GameModIntermode(acronym))

        if GameModIntermode.NIGHTCORE in mods._mods:
            mods.remove(GameModIntermode.DOUBLE_TIME)

        if GameModIntermode.PERFECT in mods._mods:
            mods.remove(GameModIntermode.SUDDEN_DEATH)

        return mods

    @classmethod
    def from_acronyms(cls, value: str) -> "GameModsIntermode":
        """
        Parse concatenated acronyms such as `HDHR` or `4KFI`, case-insensitively.

        Acronyms are split greedily from the left, preferring a known
        two-character acronym unless that would leave a single character.
        Comma-separated filters such as `HD,HR` hold one acronym per token.
        """
        value = value.upper()
        mods = cls()
        if value == NO_MOD:
            return mods

        if "," in value:
            for token in value.split(","):
                acronym = Acronym(token.strip())
                mod = GameModIntermode.from_acronym(acronym)
                if mod is None:
                    raise UnknownMod(acronym.as_str())

                mods.insert(mod)

            return mods

        remaining = value
        while remaining:
            length = _next_acronym_length(remaining)
            if length is None:
                # name the whole tail when it could be a single acronym
                unknown = remaining if len(remaining) <= 4 else remaining[:2]
                raise UnknownMod(Acronym(unknown).as_str())

            mods.insert(GameModIntermode(remaining[:length]))
            remaining = remaining[length:]

        return mods

    @classmethod
    def try_from_acronyms(cls, value: str) -> "GameModsIntermode | None":
        try:
            return cls.from_acronyms(value)
        except ParsingError:
            return None

    @classmethod
    def from_mods(cls, mods: GameMods) -> "GameModsIntermode":
        return cls(mod.intermode for mod in mods)

    # mutation

    def insert(self, mod: GameModIntermode) -> None:
        self._mods.add(mod)

    def extend(self, mods: Iterable[GameModIntermode]) -> None:
        for mod in mods:
            self.insert(mod)

    def remove(self, mod: GameModIntermode) -> bool:
        if mod not in self._mods:
            return False

        self._mods.remove(mod)
        return True

    def remove_all(self, mods: Iterable[GameModIntermode]) -> None:
        for mod in mods:
            self.remove(mod)

    # queries

    def contains(self, mod: GameModIntermode) -> bool:
        return mod in self._mods

    def contains_acronym(self, acronym: "Acronym | str") -> bool:
        if not self._mods:
            return acronym == NO_MOD

        return any(mod.value == acronym for mod in self._mods)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, GameModIntermode):
            return self.contains(item)
        elif isinstance(item, (Acronym, str)):
            return self.contains_acronym(item)
        else:
            return False

    def iter(self) -> Iterator[GameModIntermode]:
        return iter(sorted(self._mods))

    def __iter__(self) -> Iterator[GameModIntermode]:
        return self.iter()

    def __len__(self) -> int:
        return len(self._mods)

    def is_empty(self) -> bool:
        return not self._mods

    def __bool__(self) -> bool:
        return bool(self._mods)

    def bits(self) -> int:
        bits = 0
        for mod in self._mods:
            if mod.bits is not None:
                bits |= mod.bits

        return bits

    def checked_bits(self) -> int | None:
        bits = 0
        for mod in self._mods:
            if mod.bits is None:
                return None

            bits |= mod.bits

        return bits

    def intersection(self, other: "GameModsIntermode") -> Iterator[GameModIntermode]:
        return iter(sorted(self._mods & other._mods))

    def intersects(self, other: "GameModsIntermode") -> bool:
        return not self._mods.isdisjoint(other._mods)

    def legacy_clock_rate(self) -> float:
        if self._mods & {GameModIntermode.DOUBLE_TIME, GameModIntermode.NIGHTCORE}:
            return 1.5
        elif self._mods & {GameModIntermode.HALF_TIME, GameModIntermode.DAYCORE}:
            return 0.75
        else:
            return 1.0

    def with_mode(self, mode: GameMode) -> GameMods:
        return GameMods.from_intermode(self, mode)

    def try_with_mode(self, mode: GameMode) -> GameMods | None:
        return GameMods.try_from_intermode(self, mode)

    # operators

    def __or__(self, other: Any) -> "GameModsIntermode":
        if not isinstance(other, (GameModIntermode, GameModsIntermode)):
            return NotImplemented

        mods = GameModsIntermode(self._mods)
        mods |= other
        return mods

    def __ior__(self, other: Any) -> "GameModsIntermode":
        if isinstance(other, GameModIntermode):
            self.insert(other)
        elif isinstance(other, GameModsIntermode):
            self.extend(other._mods)
        else:
            return NotImplemented

        return self

    def __sub__(self, other: Any) -> "GameModsIntermode":
        if not isinstance(other, (GameModIntermode, GameModsIntermode)):
            return NotImplemented

        mods = GameModsIntermode(self._mods)
        mods -= other
        return mods

    def __isub__(self, other: Any) -> "GameModsIntermode":
        if isinstance(other, GameModIntermode):
            self.remove(other)
        elif isinstance(other, GameModsIntermode):
            self.remove_all(other._mods)
        else:
            return NotImplemented

        return self

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GameModsIntermode):
            return NotImplemented

        return self._mods == other._mods

    def __str__(self) -> str:
        if not self._mods:
            return NO_MOD

        return "".join(mod.value for mod in self)

    def __repr__(self) -> str:
        return f"GameModsIntermode({str(self)!r})"


def _next_acronym_length(remaining: str) -> int | None:
    for length in (2, 3, 4):
        if len(remaining) < length:
            return None

        if GameModIntermode.from_acronym(remaining[:length]) is None:
            continue

        # a two-character match must not strand a single trailing character
        if length == 2 and len(remaining) == 3:
            continue

        return length

    return None
