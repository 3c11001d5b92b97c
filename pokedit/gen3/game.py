"""
Gen 3 game save.

A Game reads as little as possible up front. It keeps the raw bytes and
reads fields on demand through section views; only the slot layout, the
game version and the security key are resolved at load time.

| Offset  | Size  | Contents                |
|---------|-------|-------------------------|
| 0x00000 | 57344 | Save slot A             |
| 0x0E000 | 57344 | Save slot B             |
| 0x1C000 | 8192  | Hall of Fame            |
| 0x1E000 | 4096  | Mystery Gift / e-Reader |
| 0x1F000 | 4096  | Recorded Battle         |
"""

import logging

from ..exceptions import (
    InternalError,
    NotAvailableInVersionError,
    SaveFileTooSmallError,
    SaveIOError,
)
from ..view import SaveBuffer
from .constants import SAVE_FILE_MIN_SIZE
from .data_types import GameVersion, SaveSlotInfo, ValidationMode
from .save_slot import SaveSlot, SaveSlotMut, select_save_slots
from .team_items import TeamItemsSection, TeamItemsSectionMut
from .trainer import TrainerSection

logger = logging.getLogger(__name__)


def emulator_intro_length(data) -> int:
    """
    Length of the header some emulators put in front of the save dump.

    No emulator formats are recognised yet, so this is always 0.
    """
    return 0


class Game:
    """
    A loaded Gen 3 save image.

    Supports: Ruby, Sapphire, Emerald, FireRed, LeafGreen
    """

    def __init__(
        self,
        data,
        mode: ValidationMode = ValidationMode.FULL,
        intro_detector=emulator_intro_length,
    ):
        """
        Load a save image.

        Args:
            data: Save file bytes. A bytearray is edited in place, anything
                else is copied first.
            mode: How strictly both save slots are validated
            intro_detector: Callable returning the emulator header length

        Raises:
            SaveFileTooSmallError: fewer than 131072 bytes after the header
            SaveLoadError: a save slot failed validation or lacks a section
            InternalError: intro_detector returned a length outside the buffer
        """
        logger.debug(f"Loading Gen 3 game with size: {len(data)}")
        self._buffer = SaveBuffer(data)

        intro_length = intro_detector(self._buffer.data)
        if not 0 <= intro_length <= len(self._buffer):
            raise InternalError(
                f"emulator intro length {intro_length} outside buffer of "
                f"{len(self._buffer)} bytes"
            )
        if intro_length > 0:
            logger.debug(f"Skipping {intro_length} bytes from emulator intro")

        received_size = len(self._buffer) - intro_length
        if received_size < SAVE_FILE_MIN_SIZE:
            logger.error(f"Save file too small: {received_size} bytes")
            raise SaveFileTooSmallError(SAVE_FILE_MIN_SIZE, received_size)
        self._intro_length = intro_length

        current, backup = select_save_slots(self._buffer, intro_length)
        current.validate(mode)
        backup.validate(mode)

        self._current_info = current.to_info()
        self._backup_info = backup.to_info()

        trainer = self.trainer()
        self._version = trainer.version
        try:
            self._security_key = trainer.security_key()
        except NotAvailableInVersionError:
            self._security_key = 0

        logger.debug(f"Gen 3 game {self._version} loaded")

    @classmethod
    def from_file(cls, path, mode: ValidationMode = ValidationMode.FULL) -> "Game":
        """
        Read and load a save file.

        Raises:
            SaveIOError: the file could not be read
        """
        try:
            with open(path, "rb") as f:
                data = bytearray(f.read())
        except OSError as e:
            raise SaveIOError(f"could not read save file {path}: {e}") from e
        return cls(data, mode)

    # ==================== LAYOUT ====================

    @property
    def version(self) -> GameVersion:
        return self._version

    @property
    def security_key(self) -> int:
        """Security key of the current slot, 0 on Ruby/Sapphire."""
        return self._security_key

    @property
    def emulator_intro_length(self) -> int:
        return self._intro_length

    @property
    def current_slot_info(self) -> SaveSlotInfo:
        return self._current_info

    @property
    def backup_slot_info(self) -> SaveSlotInfo:
        return self._backup_info

    def save_slot(self) -> SaveSlot:
        return SaveSlot(self._buffer, self._current_info.offset)

    def save_slot_mut(self) -> SaveSlotMut:
        return SaveSlotMut(self._buffer, self._current_info.offset)

    def backup_save_slot(self) -> SaveSlot:
        return SaveSlot(self._buffer, self._backup_info.offset)

    # ==================== SECTIONS ====================

    def trainer(self) -> TrainerSection:
        return TrainerSection(self._buffer, self._current_info.trainer)

    def team_items(self) -> TeamItemsSection:
        return TeamItemsSection(
            self._buffer,
            self._current_info.team_items,
            version=self._version,
            security_key=self._security_key,
        )

    def team_items_mut(self) -> TeamItemsSectionMut:
        """Writable Team/Items view; use it as a context manager."""
        return TeamItemsSectionMut(
            self._buffer,
            self._current_info.team_items,
            version=self._version,
            security_key=self._security_key,
        )

    # ==================== SAVING ====================

    def update_checksum(self) -> None:
        """
        Recompute the checksum of every section in the current slot.

        Must run after payload edits, or the stored checksums go stale.
        """
        with self.save_slot_mut() as save_slot:
            save_slot.update_checksum()

    def to_bytes(self) -> bytes:
        """The whole buffer, emulator header included."""
        return self._buffer.to_bytes()

    def save(self, destination) -> None:
        """
        Update checksums and write the whole buffer to ``destination``.

        The save index is left alone and the backup slot is untouched, so
        the output only differs from the input by field edits and fresh
        checksums.

        Args:
            destination: Path or writable binary stream

        Raises:
            SaveIOError: the write failed
        """
        self.update_checksum()
        try:
            if hasattr(destination, "write"):
                destination.write(self._buffer.data)
            else:
                with open(destination, "wb") as f:
                    f.write(self._buffer.data)
        except OSError as e:
            raise SaveIOError(f"could not write save file {destination}: {e}") from e
        logger.info(f"Saved {len(self._buffer)} bytes to {destination}")
