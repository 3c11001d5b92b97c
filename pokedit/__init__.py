"""
pokedit - Pokemon save file editor.

Loads a save image into memory, validates it, exposes typed views over its
fields and writes the edited bytes back with fresh checksums.
"""

from .common import Gender
from .exceptions import (
    BorrowError,
    InternalError,
    InvalidChecksumError,
    InvalidDataError,
    InvalidSectionIdError,
    InvalidSignatureError,
    MismatchedSaveIndexError,
    MissingSectionError,
    NotAvailableInVersionError,
    PokeditError,
    SaveFileTooSmallError,
    SaveIOError,
    SaveLoadError,
    SaveStructureError,
)

__version__ = "0.1.0"

__all__ = [
    "BorrowError",
    "Gender",
    "InternalError",
    "InvalidChecksumError",
    "InvalidDataError",
    "InvalidSectionIdError",
    "InvalidSignatureError",
    "MismatchedSaveIndexError",
    "MissingSectionError",
    "NotAvailableInVersionError",
    "PokeditError",
    "SaveFileTooSmallError",
    "SaveIOError",
    "SaveLoadError",
    "SaveStructureError",
]
