"""
Gen 3 save slots.

A save image holds two complete copies of the game (slot A at 0x0000,
slot B at 0xE000). Each slot is 14 sections whose physical order changes
from save to save, so sections are always found by scanning their ids.
"""

import logging
from dataclasses import dataclass

from ..exceptions import (
    InvalidSectionIdError,
    MismatchedSaveIndexError,
    MissingSectionError,
    NotAvailableInVersionError,
    SaveStructureError,
)
from ..view import DataView, DataViewMut
from .constants import (
    SAVE_SLOT_A_OFFSET,
    SAVE_SLOT_B_OFFSET,
    SAVE_SLOT_SIZE,
    SECTION_COUNT,
    SECTION_PAYLOAD_SIZES,
    SECTION_SIZE,
    TEAM_ITEMS_SECTION_ID,
    TRAINER_SECTION_ID,
)
from .data_types import SaveSlotInfo, ValidationMode
from .section import Section, SectionMut
from .team_items import TeamItemsSection
from .trainer import TrainerSection

logger = logging.getLogger(__name__)

_SECTION_NAMES = {
    TRAINER_SECTION_ID: "Trainer",
    TEAM_ITEMS_SECTION_ID: "Team/Items",
}


@dataclass
class Sections:
    """The semantic sections of one save slot."""

    trainer: TrainerSection
    team_items: TeamItemsSection


class SaveSlot(DataView):
    SIZE = SAVE_SLOT_SIZE
    _SECTION_VIEW = Section

    @property
    def save_index(self) -> int:
        """
        Save index of the first physical section.

        Readable before validation; only meant for picking the newest slot.
        """
        return self._child(Section, 0).save_index

    def sections(self):
        """Yield the 14 section views in physical order."""
        for i in range(SECTION_COUNT):
            yield self._child(self._SECTION_VIEW, i * SECTION_SIZE)

    def validate(self, mode: ValidationMode) -> None:
        """
        Check every section of the slot.

        Raises:
            MismatchedSaveIndexError: a section's save index differs from
                the first section's
            InvalidSectionIdError: a section id outside 0..13
            InvalidChecksumError, InvalidSignatureError: from Section.validate
            SaveStructureError: the slot lacks 14 distinct sections
        """
        if mode is ValidationMode.NONE:
            return

        expected_save_index = self.save_index
        seen_ids = set()
        for section in self.sections():
            save_index = section.save_index
            if save_index != expected_save_index:
                logger.error(
                    f"Mismatched save index - expected {expected_save_index}, "
                    f"found: {save_index}"
                )
                raise MismatchedSaveIndexError(expected_save_index, save_index)

            section_id = section.id
            if section_id not in SECTION_PAYLOAD_SIZES:
                logger.error(f"Found invalid section id: {section_id}")
                raise InvalidSectionIdError(section_id)

            section.validate(mode)
            seen_ids.add(section_id)

        if len(seen_ids) != SECTION_COUNT:
            missing = sorted(set(SECTION_PAYLOAD_SIZES) - seen_ids)
            logger.error(
                f"Wrong number of sections, expected: {SECTION_COUNT}, "
                f"found {len(seen_ids)} (missing {missing})"
            )
            raise SaveStructureError(
                f"save slot at 0x{self.offset:X} has {len(seen_ids)} distinct "
                f"sections, expected {SECTION_COUNT}"
            )

    def _scan(self):
        """Map the Trainer and Team/Items ids to their section views."""
        found = {}
        for section in self.sections():
            section_id = section.id
            if section_id in _SECTION_NAMES:
                found[section_id] = section
            elif section_id not in SECTION_PAYLOAD_SIZES:
                logger.error(f"Found invalid section id: {section_id}")
                raise InvalidSectionIdError(section_id)

        for section_id, name in _SECTION_NAMES.items():
            if section_id not in found:
                raise MissingSectionError(name)
        return found

    def to_sections(self, version=None, security_key=None) -> Sections:
        """
        Resolve the Trainer and Team/Items sections.

        Args:
            version: GameVersion used to read Team/Items; decoded from the
                Trainer section when omitted
            security_key: Key used to de-obfuscate Team/Items fields; read
                from the Trainer section when omitted (0 on Ruby/Sapphire)

        Returns:
            Sections: typed views over this slot
        """
        found = self._scan()
        trainer = TrainerSection(
            self._buffer, found[TRAINER_SECTION_ID].offset, _token=self._token
        )
        if version is None:
            version = trainer.version
        if security_key is None:
            try:
                security_key = trainer.security_key()
            except NotAvailableInVersionError:
                security_key = 0
        team_items = TeamItemsSection(
            self._buffer,
            found[TEAM_ITEMS_SECTION_ID].offset,
            version=version,
            security_key=security_key,
            _token=self._token,
        )
        return Sections(trainer=trainer, team_items=team_items)

    def to_info(self) -> SaveSlotInfo:
        """Record absolute offsets of this slot's Trainer and Team/Items sections."""
        found = self._scan()
        return SaveSlotInfo(
            offset=self.offset,
            trainer=found[TRAINER_SECTION_ID].offset,
            team_items=found[TEAM_ITEMS_SECTION_ID].offset,
        )


class SaveSlotMut(DataViewMut, SaveSlot):
    _SECTION_VIEW = SectionMut

    def update_checksum(self) -> None:
        """Recompute and store the checksum of every section in the slot."""
        for section in self.sections():
            checksum = section.update_checksum()
            logger.debug(f"Section {section.id} checksum updated to 0x{checksum:04X}")


def select_save_slots(buffer, base: int = 0):
    """
    Pick the current and backup save slots.

    The slot with the strictly greater save index is current. On a tie
    slot B wins.

    Args:
        buffer: SaveBuffer holding the save image
        base: Offset of the playable region (after any emulator intro)

    Returns:
        tuple: (current SaveSlot, backup SaveSlot)
    """
    slot_a = SaveSlot(buffer, base + SAVE_SLOT_A_OFFSET)
    slot_b = SaveSlot(buffer, base + SAVE_SLOT_B_OFFSET)
    a_index = slot_a.save_index
    b_index = slot_b.save_index

    use_a = a_index > b_index
    logger.debug(
        f"Save indices {{a = 0x{a_index:08X}, b = 0x{b_index:08X}}} - "
        f"using save slot {'a' if use_a else 'b'}"
    )
    if use_a:
        return slot_a, slot_b
    return slot_b, slot_a
