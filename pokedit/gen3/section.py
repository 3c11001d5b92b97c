"""
Gen 3 save sections and the section checksum.

Every section is a 4096-byte window whose last 12 bytes hold the section
id, a 16-bit checksum of the payload, the magic signature and the save
index of the slot it belongs to.
"""

import logging
import struct

from ..exceptions import InternalError, InvalidChecksumError, InvalidSignatureError
from ..view import DataView, DataViewMut
from .constants import (
    SECTION_CHECKSUM_OFFSET,
    SECTION_ID_OFFSET,
    SECTION_PAYLOAD_SIZES,
    SECTION_SAVE_INDEX_OFFSET,
    SECTION_SIGNATURE,
    SECTION_SIGNATURE_OFFSET,
    SECTION_SIZE,
)
from .data_types import ValidationMode

logger = logging.getLogger(__name__)


def calculate_checksum(data, offset, size):
    """
    Compute the 16-bit section checksum.

    Sums ``size`` bytes as little-endian 32-bit words (wrapping at 32
    bits), then folds the sum by adding its high and low halves.

    Args:
        data: Save file data
        offset: Offset of the payload
        size: Payload length in bytes (multiple of 4)

    Returns:
        int: 16-bit checksum
    """
    if offset < 0 or offset + size > len(data) or size % 4:
        raise InternalError(
            f"cannot checksum {size} bytes at 0x{offset:X} of {len(data)}"
        )
    words = struct.unpack_from(f"<{size // 4}I", data, offset)
    checksum = sum(words) & 0xFFFFFFFF
    return ((checksum >> 16) + (checksum & 0xFFFF)) & 0xFFFF


def payload_size(section_id: int) -> int:
    """Checksummed payload length for ``section_id``."""
    try:
        return SECTION_PAYLOAD_SIZES[section_id]
    except KeyError:
        # Slot validation rejects unknown ids before checksums are touched
        raise InternalError(f"no payload size for section id {section_id}") from None


class Section(DataView):
    SIZE = SECTION_SIZE

    @property
    def id(self) -> int:
        return self._read_half_word(SECTION_ID_OFFSET)

    @property
    def checksum(self) -> int:
        """Checksum stored in the section trailer."""
        return self._read_half_word(SECTION_CHECKSUM_OFFSET)

    @property
    def signature(self) -> int:
        return self._read_word(SECTION_SIGNATURE_OFFSET)

    @property
    def save_index(self) -> int:
        return self._read_word(SECTION_SAVE_INDEX_OFFSET)

    @property
    def payload_size(self) -> int:
        return payload_size(self.id)

    def calculate_checksum(self) -> int:
        """Checksum recomputed from the current payload bytes."""
        size = self.payload_size
        self._check_access()
        return calculate_checksum(self._buffer.data, self._absolute(0, size), size)

    def validate(self, mode: ValidationMode) -> None:
        """
        Check the stored checksum and signature.

        Raises:
            InvalidChecksumError: stored checksum differs from the payload's
            InvalidSignatureError: signature is not 0x08012025
        """
        if mode is ValidationMode.NONE:
            return

        section_id = self.id
        calculated = self.calculate_checksum()
        stored = self.checksum
        if calculated != stored:
            logger.error(
                f"Section {section_id} checksum mismatch: "
                f"stored=0x{stored:04X}, calculated=0x{calculated:04X}"
            )
            raise InvalidChecksumError(section_id, expected=calculated, found=stored)

        signature = self.signature
        if signature != SECTION_SIGNATURE:
            logger.error(
                f"Section {section_id} signature mismatch: 0x{signature:08X}"
            )
            raise InvalidSignatureError(
                section_id, expected=SECTION_SIGNATURE, found=signature
            )


class SectionMut(DataViewMut, Section):
    def update_checksum(self) -> int:
        """Store the recomputed checksum and return it."""
        checksum = self.calculate_checksum()
        self._write_half_word(SECTION_CHECKSUM_OFFSET, checksum)
        return checksum
