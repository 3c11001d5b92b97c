"""Tests for the save buffer borrow bookkeeping."""

import pytest

from pokedit.exceptions import BorrowError, InternalError
from pokedit.gen3 import Section, SectionMut
from pokedit.view import SaveBuffer

from gen3_save_builder import SECTION_SIZE


class TestSaveBuffer:
    def test_bytearray_is_not_copied(self):
        data = bytearray(16)
        assert SaveBuffer(data).data is data

    def test_bytes_are_copied(self):
        buffer = SaveBuffer(bytes(16))
        assert isinstance(buffer.data, bytearray)

    def test_overlapping_borrows(self):
        buffer = SaveBuffer(bytearray(32))
        token = buffer.borrow(0, 16)
        with pytest.raises(BorrowError):
            buffer.borrow(8, 16)
        buffer.borrow(16, 16)
        buffer.release(token)
        buffer.borrow(0, 8)

    def test_release_twice(self):
        buffer = SaveBuffer(bytearray(8))
        token = buffer.borrow(0, 8)
        buffer.release(token)
        with pytest.raises(BorrowError):
            buffer.release(token)


class TestViews:
    def test_window_past_end(self):
        with pytest.raises(InternalError):
            Section(bytearray(2 * SECTION_SIZE), SECTION_SIZE + 1)

    def test_adjacent_windows_do_not_conflict(self):
        buffer = SaveBuffer(bytearray(2 * SECTION_SIZE))
        with SectionMut(buffer, 0) as first:
            first.update_checksum()
            assert Section(buffer, SECTION_SIZE).id == 0

    def test_borrow_released_on_error(self):
        buffer = SaveBuffer(bytearray(SECTION_SIZE))
        with pytest.raises(RuntimeError):
            with SectionMut(buffer):
                raise RuntimeError("boom")
        Section(buffer).checksum

    def test_view_reusable_after_with_block(self):
        buffer = SaveBuffer(bytearray(SECTION_SIZE))
        section = SectionMut(buffer)
        with section:
            section.update_checksum()
        with pytest.raises(BorrowError):
            section.update_checksum()
        with section:
            section.update_checksum()
