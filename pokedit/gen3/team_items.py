"""
Gen 3 Team/Items section (id 1).

Field offsets differ between Ruby/Sapphire/Emerald and FireRed/LeafGreen,
and some fields are XORed with the save's security key, so the view is
built with both as context.
"""

from typing import Optional

from ..view import DataView, DataViewMut
from .constants import MONEY_OFFSET_FRLG, MONEY_OFFSET_RSE, SECTION_SIZE
from .data_types import GameVersion

MONEY_OFFSETS = {
    GameVersion.RUBY_SAPPHIRE: MONEY_OFFSET_RSE,
    GameVersion.FIRE_RED_LEAF_GREEN: MONEY_OFFSET_FRLG,
    GameVersion.EMERALD: MONEY_OFFSET_RSE,
}


class TeamItemsSection(DataView):
    SIZE = SECTION_SIZE

    def __init__(
        self,
        buffer,
        offset: int = 0,
        version: GameVersion = GameVersion.RUBY_SAPPHIRE,
        security_key: int = 0,
        _token: Optional[int] = None,
    ):
        super().__init__(buffer, offset, _token=_token)
        self.version = version
        self.security_key = security_key & 0xFFFFFFFF

    def money(self) -> int:
        """
        Money, de-obfuscated with the security key.

        A wrong key gives a wrong amount; nothing in the save detects it.
        """
        return self._read_word(MONEY_OFFSETS[self.version]) ^ self.security_key


class TeamItemsSectionMut(DataViewMut, TeamItemsSection):
    def set_money(self, value: int) -> None:
        self._write_word(
            MONEY_OFFSETS[self.version], (value & 0xFFFFFFFF) ^ self.security_key
        )
