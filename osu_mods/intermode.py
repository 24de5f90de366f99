from enum import Enum
from functools import total_ordering
from typing import Any

from osu_mods import definitions
from osu_mods.acronym import Acronym
from osu_mods.definitions import GameModKind


@total_ordering
class GameModIntermode(Enum):
    """The identity of a mod, independent of any game mode."""

    EASY = "EZ"
    NO_FAIL = "NF"
    HALF_TIME = "HT"
    DAYCORE = "DC"
    NO_RELEASE = "NR"
    HARD_ROCK = "HR"
    SUDDEN_DEATH = "SD"
    PERFECT = "PF"
    DOUBLE_TIME = "DT"
    NIGHTCORE = "NC"
    FADE_IN = "FI"
    HIDDEN = "HD"
    COVER = "CO"
    FLASHLIGHT = "FL"
    BLINDS = "BL"
    STRICT_TRACKING = "ST"
    ACCURACY_CHALLENGE = "AC"
    TARGET_PRACTICE = "TP"
    DIFFICULTY_ADJUST = "DA"
    CLASSIC = "CL"
    RANDOM = "RD"
    MIRROR = "MR"
    ALTERNATE = "AL"
    SINGLE_TAP = "SG"
    SWAP = "SW"
    CONSTANT_SPEED = "CS"
    DUAL_STAGES = "DS"
    INVERT = "IN"
    HOLD_OFF = "HO"
    ONE_KEY = "1K"
    TWO_KEYS = "2K"
    THREE_KEYS = "3K"
    FOUR_KEYS = "4K"
    FIVE_KEYS = "5K"
    SIX_KEYS = "6K"
    SEVEN_KEYS = "7K"
    EIGHT_KEYS = "8K"
    NINE_KEYS = "9K"
    TEN_KEYS = "10K"
    AUTOPLAY = "AT"
    CINEMA = "CN"
    RELAX = "RX"
    AUTOPILOT = "AP"
    SPUN_OUT = "SO"
    TRANSFORM = "TR"
    WIGGLE = "WG"
    SPIN_IN = "SI"
    GROW = "GR"
    DEFLATE = "DF"
    WIND_UP = "WU"
    WIND_DOWN = "WD"
    TRACEABLE = "TC"
    BARREL_ROLL = "BR"
    APPROACH_DIFFERENT = "AD"
    MUTED = "MU"
    NO_SCOPE = "NS"
    MAGNETISED = "MG"
    REPEL = "RP"
    ADAPTIVE_SPEED = "AS"
    FREEZE_FRAME = "FR"
    BUBBLES = "BU"
    SYNESTHESIA = "SY"
    DEPTH = "DP"
    FLOATING_FRUITS = "FF"
    TOUCH_DEVICE = "TD"
    SCORE_V2 = "SV2"

    @classmethod
    def from_acronym(cls, acronym: "str | Acronym") -> "GameModIntermode | None":
        try:
            return cls(str(acronym))
        except ValueError:
            return None

    @property
    def acronym(self) -> Acronym:
        return Acronym(self.value)

    @property
    def bits(self) -> int | None:
        return definitions.LEGACY_BITS.get(self.value)

    @property
    def kind(self) -> GameModKind:
        return self._definition().kind

    @property
    def name_pretty(self) -> str:
        return self._definition().name

    def _definition(self) -> definitions.ModDefinition:
        definition = definitions.intermode_definition(self.value)
        assert definition is not None, f"{self.value} is missing from the mod catalogue"
        return definition

    def _sort_key(self) -> tuple[bool, int, str]:
        bits = self.bits
        return (bits is None, bits or 0, self.value)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, GameModIntermode):
            return NotImplemented

        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return self.value
