"""
Word codec for raw save bytes.

Reads and writes 16-bit ("half word") and 32-bit ("word") unsigned
integers at byte offsets. The GBA is little-endian, so the plain functions
are little-endian; the ``_be`` variants cover the odd big-endian field.

Offsets come from fixed layout tables, so an out of range access is a bug
in the caller and raises InternalError instead of a save error.
"""

import struct

from .exceptions import InternalError

_HALF_WORD_LE = struct.Struct("<H")
_WORD_LE = struct.Struct("<I")
_HALF_WORD_BE = struct.Struct(">H")
_WORD_BE = struct.Struct(">I")


def _check_bounds(data, offset, width):
    if offset < 0 or offset + width > len(data):
        raise InternalError(
            f"{width} byte access at offset 0x{offset:X} outside "
            f"buffer of {len(data)} bytes"
        )


def _read(codec, data, offset):
    _check_bounds(data, offset, codec.size)
    return codec.unpack_from(data, offset)[0]


def _write(codec, data, offset, value):
    _check_bounds(data, offset, codec.size)
    # Truncate to the field width
    codec.pack_into(data, offset, value & ((1 << (codec.size * 8)) - 1))


def read_half_word(data, offset: int) -> int:
    return _read(_HALF_WORD_LE, data, offset)


def write_half_word(data, offset: int, value: int) -> None:
    _write(_HALF_WORD_LE, data, offset, value)


def read_word(data, offset: int) -> int:
    return _read(_WORD_LE, data, offset)


def write_word(data, offset: int, value: int) -> None:
    _write(_WORD_LE, data, offset, value)


def read_half_word_be(data, offset: int) -> int:
    return _read(_HALF_WORD_BE, data, offset)


def write_half_word_be(data, offset: int, value: int) -> None:
    _write(_HALF_WORD_BE, data, offset, value)


def read_word_be(data, offset: int) -> int:
    return _read(_WORD_BE, data, offset)


def write_word_be(data, offset: int, value: int) -> None:
    _write(_WORD_BE, data, offset, value)
