"""
Gen 3 Trainer section (id 0).

Handles the player's identity: raw name bytes, gender, trainer id, play
time and the game code that tells the game versions apart.
"""

import logging

from ..common import Gender
from ..exceptions import InvalidDataError, NotAvailableInVersionError
from ..view import DataView
from .constants import (
    FRLG_SECURITY_KEY_OFFSET,
    SECTION_SIZE,
    TIME_PLAYED_FRAMES_OFFSET,
    TIME_PLAYED_HOURS_OFFSET,
    TIME_PLAYED_MINUTES_OFFSET,
    TIME_PLAYED_SECONDS_OFFSET,
    TRAINER_GAME_CODE_OFFSET,
    TRAINER_GENDER_OFFSET,
    TRAINER_NAME_LENGTH,
    TRAINER_NAME_OFFSET,
    TRAINER_PRIVATE_ID_OFFSET,
    TRAINER_PUBLIC_ID_OFFSET,
)
from .data_types import GameVersion, TimePlayed, TrainerId

logger = logging.getLogger(__name__)


class TrainerSection(DataView):
    SIZE = SECTION_SIZE

    @property
    def name_raw(self) -> bytes:
        """Trainer name, 7 bytes in the game's own character table."""
        return self._read_bytes(TRAINER_NAME_OFFSET, TRAINER_NAME_LENGTH)

    def gender(self) -> Gender:
        """
        Raises:
            InvalidDataError: the gender byte is neither 0 nor 1
        """
        value = self._read_byte(TRAINER_GENDER_OFFSET)
        if value == 0:
            return Gender.MALE
        if value == 1:
            return Gender.FEMALE
        logger.error(f"Invalid gender byte 0x{value:02X}")
        raise InvalidDataError("gender")

    @property
    def trainer_id(self) -> TrainerId:
        return TrainerId(
            public=self._read_half_word(TRAINER_PUBLIC_ID_OFFSET),
            private=self._read_half_word(TRAINER_PRIVATE_ID_OFFSET),
        )

    @property
    def time_played(self) -> TimePlayed:
        return TimePlayed(
            hours=self._read_half_word(TIME_PLAYED_HOURS_OFFSET),
            minutes=self._read_byte(TIME_PLAYED_MINUTES_OFFSET),
            seconds=self._read_byte(TIME_PLAYED_SECONDS_OFFSET),
            frames=self._read_byte(TIME_PLAYED_FRAMES_OFFSET),
        )

    @property
    def game_code(self) -> int:
        """
        Version discriminant: 0 on Ruby/Sapphire, 1 on FireRed/LeafGreen.
        Emerald stores its security key here instead.
        """
        return self._read_word(TRAINER_GAME_CODE_OFFSET)

    @property
    def version(self) -> GameVersion:
        return GameVersion.from_game_code(self.game_code)

    def security_key(self) -> int:
        """
        Key XORed into obfuscated fields such as money.

        Raises:
            NotAvailableInVersionError: Ruby/Sapphire have no security key
        """
        game_code = self.game_code
        version = GameVersion.from_game_code(game_code)
        if version is GameVersion.RUBY_SAPPHIRE:
            raise NotAvailableInVersionError("security key")
        if version is GameVersion.FIRE_RED_LEAF_GREEN:
            return self._read_word(FRLG_SECURITY_KEY_OFFSET)
        return game_code
