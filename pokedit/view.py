"""
Bounded windows over a shared save buffer.

A SaveBuffer owns the raw bytes. Views never copy: each one is a fixed
size window described by an absolute offset into the buffer. Read views
can be created freely. Mutable views borrow their window from the buffer
for the duration of a ``with`` block, and while that borrow is held no
other view may touch overlapping bytes:

    with game.team_items_mut() as team_items:
        team_items.set_money(999999)
"""

import logging
from typing import ClassVar, Optional

from . import mem
from .exceptions import BorrowError, InternalError

logger = logging.getLogger(__name__)


class SaveBuffer:
    """Owner of the raw save bytes plus the table of active mutable borrows."""

    def __init__(self, data):
        # A bytearray is used in place, anything else is copied
        self.data = data if isinstance(data, bytearray) else bytearray(data)
        self._borrows: dict[int, tuple[int, int]] = {}
        self._next_token = 1

    def __len__(self):
        return len(self.data)

    def borrow(self, start: int, length: int) -> int:
        """Take a mutable borrow of ``[start, start + length)`` and return its token."""
        end = start + length
        for token, (b_start, b_end) in self._borrows.items():
            if start < b_end and b_start < end:
                raise BorrowError(
                    f"window 0x{start:X}..0x{end:X} overlaps mutable borrow "
                    f"#{token} at 0x{b_start:X}..0x{b_end:X}"
                )
        token = self._next_token
        self._next_token += 1
        self._borrows[token] = (start, end)
        logger.debug(f"Borrowed 0x{start:X}..0x{end:X} as #{token}")
        return token

    def release(self, token: int) -> None:
        if self._borrows.pop(token, None) is None:
            raise BorrowError(f"borrow #{token} is not active")
        logger.debug(f"Released borrow #{token}")

    def is_borrowed(self, token: int) -> bool:
        return token in self._borrows

    def check_readable(self, start: int, length: int, token: Optional[int] = None):
        """Fail if ``[start, start + length)`` overlaps a borrow other than ``token``."""
        end = start + length
        for other, (b_start, b_end) in self._borrows.items():
            if other != token and start < b_end and b_start < end:
                raise BorrowError(
                    f"window 0x{start:X}..0x{end:X} is mutably borrowed "
                    f"(#{other})"
                )

    def to_bytes(self) -> bytes:
        return bytes(self.data)


class DataView:
    """
    Read-only window of ``SIZE`` bytes starting at ``offset``.

    ``buffer`` may be a SaveBuffer or any bytes-like object, which then
    gets wrapped in a fresh SaveBuffer.
    """

    SIZE: ClassVar[int] = 0

    def __init__(self, buffer, offset: int = 0, _token: Optional[int] = None):
        if not isinstance(buffer, SaveBuffer):
            buffer = SaveBuffer(buffer)
        if offset < 0 or offset + self.SIZE > len(buffer):
            raise InternalError(
                f"{type(self).__name__} expects {self.SIZE} bytes at offset "
                f"0x{offset:X}, buffer has {len(buffer)}"
            )
        self._buffer = buffer
        self._offset = offset
        self._token = _token
        if _token is None:
            buffer.check_readable(offset, self.SIZE)

    def __repr__(self):
        return f"{type(self).__name__}(offset=0x{self._offset:X})"

    @property
    def offset(self) -> int:
        """Absolute offset of this window in the save buffer."""
        return self._offset

    def _check_access(self):
        if self._token is not None and not self._buffer.is_borrowed(self._token):
            raise BorrowError(f"{type(self).__name__} used after its borrow ended")
        self._buffer.check_readable(self._offset, self.SIZE, self._token)

    def _absolute(self, relative: int, width: int) -> int:
        if relative < 0 or relative + width > self.SIZE:
            raise InternalError(
                f"{width} byte field at 0x{relative:X} outside "
                f"{type(self).__name__} of {self.SIZE} bytes"
            )
        return self._offset + relative

    def _read_byte(self, relative: int) -> int:
        self._check_access()
        return self._buffer.data[self._absolute(relative, 1)]

    def _read_bytes(self, relative: int, length: int) -> bytes:
        self._check_access()
        start = self._absolute(relative, length)
        return bytes(self._buffer.data[start : start + length])

    def _read_half_word(self, relative: int) -> int:
        self._check_access()
        return mem.read_half_word(self._buffer.data, self._absolute(relative, 2))

    def _read_word(self, relative: int) -> int:
        self._check_access()
        return mem.read_word(self._buffer.data, self._absolute(relative, 4))

    def _child(self, view_cls, relative: int):
        """Sub-window of this view, sharing its borrow if it has one."""
        return view_cls(
            self._buffer, self._absolute(relative, view_cls.SIZE), _token=self._token
        )


class DataViewMut(DataView):
    """
    Writable window. Only usable inside its ``with`` block, which holds a
    mutable borrow on the window.
    """

    def __init__(self, *args, **kwargs):
        self._owns_borrow = False
        super().__init__(*args, **kwargs)

    def __enter__(self):
        if self._token is not None:
            raise BorrowError(f"{type(self).__name__} is already borrowed")
        self._token = self._buffer.borrow(self._offset, self.SIZE)
        self._owns_borrow = True
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._owns_borrow:
            self._buffer.release(self._token)
            self._owns_borrow = False
            self._token = None
        return False

    def _check_access(self):
        if self._token is None:
            raise BorrowError(
                f"{type(self).__name__} must be used inside a with block"
            )
        super()._check_access()

    def _write_half_word(self, relative: int, value: int) -> None:
        self._check_access()
        mem.write_half_word(self._buffer.data, self._absolute(relative, 2), value)

    def _write_word(self, relative: int, value: int) -> None:
        self._check_access()
        mem.write_word(self._buffer.data, self._absolute(relative, 4), value)
