from collections.abc import Iterable
from collections.abc import Iterator
from typing import Any

from osu_mods import logger
from osu_mods.acronym import Acronym
from osu_mods.game_mod import GameMod
from osu_mods.game_mod import GameModOrder
from osu_mods.game_modes import GameMode
from osu_mods.intermode import GameModIntermode

NO_MOD = "NM"


class GameMods:
    """
    An ordered set of mods with their settings.

    Mods are keyed by their `GameModOrder`, so a collection holds at most one
    entry per (mode, mod) pair and always iterates in legacy bit order.
    Mods of several game modes may coexist in one collection.
    """

    __slots__ = ("_mods",)

    def __init__(self, mods: Iterable[GameMod] | None = None) -> None:
        self._mods: dict[GameModOrder, GameMod] = {}
        if mods is not None:
            self.extend(mods)

    @classmethod
    def from_mod(cls, mod: GameMod) -> "GameMods":
        return cls((mod,))

    @classmethod
    def from_intermode(
        cls,
        intermode: Iterable[GameModIntermode],
        mode: GameMode,
    ) -> "GameMods":
        """Convert to `mode`, dropping any mod that does not exist for it."""
        mods = cls()
        for identity in intermode:
            mod = GameMod.new(identity.value, mode)
            if mod is None:
                logger.debug(
                    "Dropped mod missing from game mode",
                    acronym=identity.value,
                    game_mode=mode.name,
                )
                continue

            mods.insert(mod)

        return mods

    @classmethod
    def try_from_intermode(
        cls,
        intermode: Iterable[GameModIntermode],
        mode: GameMode,
    ) -> "GameMods | None":
        mods = cls()
        for identity in intermode:
            mod = GameMod.new(identity.value, mode)
            if mod is None:
                return None

            mods.insert(mod)

        return mods

    # mutation

    def insert(self, mod: GameMod) -> None:
        self._mods[mod.order] = mod

    def extend(self, mods: Iterable[GameMod]) -> None:
        for mod in mods:
            self.insert(mod)

    def remove(self, mod: GameMod) -> bool:
        return self._mods.pop(mod.order, None) is not None

    def remove_intermode(self, identity: "GameModIntermode | Acronym | str") -> bool:
        """Remove the first mod (in iteration order) with the given identity."""
        intermode = _to_intermode(identity)
        if intermode is None:
            return False

        for order in sorted(self._mods):
            if order.intermode is intermode:
                del self._mods[order]
                return True

        return False

    def remove_all(self, mods: Iterable[GameMod]) -> None:
        for mod in mods:
            self.remove(mod)

    def remove_all_intermode(
        self,
        identities: Iterable["GameModIntermode | Acronym | str"],
    ) -> None:
        for identity in identities:
            self.remove_intermode(identity)

    # queries

    def contains(self, mod: GameMod) -> bool:
        return mod.order in self._mods

    def contains_intermode(self, identity: "GameModIntermode | Acronym | str") -> bool:
        intermode = _to_intermode(identity)
        if intermode is None:
            return False

        return any(order.intermode is intermode for order in self._mods)

    def contains_any(self, identities: Iterable["GameModIntermode | Acronym | str"]) -> bool:
        return any(self.contains_intermode(identity) for identity in identities)

    def contains_acronym(self, acronym: "Acronym | str") -> bool:
        if not self._mods:
            return acronym == NO_MOD

        return any(mod.acronym == acronym for mod in self._mods.values())

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, GameMod):
            return self.contains(item)
        elif isinstance(item, GameModIntermode):
            return self.contains_intermode(item)
        elif isinstance(item, (Acronym, str)):
            return self.contains_acronym(item)
        else:
            return False

    def iter(self) -> Iterator[GameMod]:
        for order in sorted(self._mods):
            yield self._mods[order]

    def __iter__(self) -> Iterator[GameMod]:
        return self.iter()

    def __len__(self) -> int:
        return len(self._mods)

    def is_empty(self) -> bool:
        return not self._mods

    def __bool__(self) -> bool:
        return bool(self._mods)

    def bits(self) -> int:
        """Legacy bitmask of the mods that have one; mods without bits are skipped."""
        bits = 0
        for mod in self._mods.values():
            if mod.bits is not None:
                bits |= mod.bits

        return bits

    def checked_bits(self) -> int | None:
        bits = 0
        for mod in self._mods.values():
            if mod.bits is None:
                return None

            bits |= mod.bits

        return bits

    def intersection(self, other: "GameMods") -> Iterator[GameMod]:
        return (mod for mod in self if mod.order in other._mods)

    def intersects(self, other: "GameMods") -> bool:
        return any(order in other._mods for order in self._mods)

    def clock_rate(self) -> float | None:
        clock_rate = 1.0
        for mod in self._mods.values():
            mod_clock_rate = mod.clock_rate()
            if mod_clock_rate is None:
                return None

            clock_rate *= mod_clock_rate

        return clock_rate

    # validation

    def is_valid(self) -> bool:
        acronyms = {mod.acronym for mod in self._mods.values()}

        for mod in self._mods.values():
            if any(acronym in acronyms for acronym in mod.incompatible_mods):
                return False

        return True

    def sanitize(self) -> None:
        """Remove mods that are excluded by others until the set is valid.

        Earlier mods win: each mod in iteration order removes the mods it is
        incompatible with.
        """
        while True:
            for mod in self:
                excluded = next(
                    (
                        order
                        for acronym in mod.incompatible_mods
                        for order in self._mods
                        if order.intermode.value == acronym
                    ),
                    None,
                )
                if excluded is not None:
                    del self._mods[excluded]
                    break
            else:
                return

    def copy(self) -> "GameMods":
        return GameMods(self._mods.values())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GameMods):
            return NotImplemented

        return self._mods == other._mods

    def __str__(self) -> str:
        if not self._mods:
            return NO_MOD

        return "".join(str(mod) for mod in self)

    def __repr__(self) -> str:
        return f"GameMods({list(self)!r})"


def _to_intermode(identity: "GameModIntermode | Acronym | str") -> GameModIntermode | None:
    if isinstance(identity, GameModIntermode):
        return identity

    return GameModIntermode.from_acronym(identity)
