"""
Gen 3 data types.

Small value types returned by the section views, plus the enums that
steer loading (game version, validation strictness).
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class GameVersion(IntEnum):
    """Game family a save belongs to, decoded from the Trainer game code."""

    RUBY_SAPPHIRE = 0
    FIRE_RED_LEAF_GREEN = 1
    EMERALD = 2

    @classmethod
    def from_game_code(cls, game_code: int) -> "GameVersion":
        if game_code == 0:
            return cls.RUBY_SAPPHIRE
        if game_code == 1:
            return cls.FIRE_RED_LEAF_GREEN
        # On Emerald this field holds the security key
        return cls.EMERALD

    def __str__(self):
        return _VERSION_NAMES[self]

    def __format__(self, format_spec):
        return format(str(self), format_spec)


_VERSION_NAMES = {
    GameVersion.RUBY_SAPPHIRE: "Ruby/Sapphire",
    GameVersion.FIRE_RED_LEAF_GREEN: "FireRed/LeafGreen",
    GameVersion.EMERALD: "Emerald",
}


class ValidationMode(Enum):
    """
    How strictly a save image is checked on load.

    NONE skips every structural check; the caller vouches for the data.
    BASIC and FULL currently run the same checks (save indices, section
    ids, checksums, signatures). FULL is kept separate so deeper checks of
    the reserved sections can be added without changing callers.
    """

    NONE = "none"
    BASIC = "basic"
    FULL = "full"


@dataclass(frozen=True)
class TrainerId:
    """Trainer id as two 16-bit halves."""

    public: int
    private: int

    def __str__(self):
        return f"{self.public:05d}-{self.private:05d}"


@dataclass(frozen=True)
class TimePlayed:
    hours: int
    minutes: int
    seconds: int
    frames: int

    def __str__(self):
        return f"{self.hours:03d}:{self.minutes:02d}:{self.seconds:02d}"


@dataclass(frozen=True)
class SaveSlotInfo:
    """
    Absolute buffer offsets of a save slot and of the sections the editor
    reads, resolved once per load.
    """

    offset: int
    trainer: int
    team_items: int
