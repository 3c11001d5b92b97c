"""
Custom exceptions for pokedit.

Every fallible save operation raises a subclass of PokeditError so callers
can tell exactly what is wrong with a save image. InternalError sits
outside that hierarchy: it marks a broken offset table or a misuse of the
view layer, not a bad save file, and is not meant to be caught.
"""


class PokeditError(Exception):
    """Base exception for pokedit."""
    pass


class SaveLoadError(PokeditError):
    """Structural problem found while loading a save image."""
    pass


class SaveFileTooSmallError(SaveLoadError):
    """Raised when the buffer is shorter than a full save image."""

    def __init__(self, expected_size: int, received_size: int):
        self.expected_size = expected_size
        self.received_size = received_size
        super().__init__(
            f"expected save file with a minimum size of {expected_size} bytes, "
            f"received file with {received_size} bytes"
        )


class InvalidChecksumError(SaveLoadError):
    """
    Raised when a section's stored checksum does not match its payload.

    ``expected`` is the freshly computed checksum, ``found`` the stored one.
    """

    def __init__(self, section_id: int, expected: int, found: int):
        self.section_id = section_id
        self.expected = expected
        self.found = found
        super().__init__(
            f"section {section_id} has an invalid checksum 0x{found:04X}, "
            f"expected 0x{expected:04X}"
        )


class InvalidSignatureError(SaveLoadError):
    """Raised when a section does not carry the magic signature."""

    def __init__(self, section_id: int, expected: int, found: int):
        self.section_id = section_id
        self.expected = expected
        self.found = found
        super().__init__(
            f"section {section_id} has an invalid signature 0x{found:08X}, "
            f"expected 0x{expected:08X}"
        )


class MissingSectionError(SaveLoadError):
    """Raised when a required section id never shows up in a save slot."""

    def __init__(self, section_name: str):
        self.section_name = section_name
        super().__init__(f"save file missing section: {section_name}")


class InvalidSectionIdError(SaveLoadError):
    """Raised for a section id outside 0..13."""

    def __init__(self, section_id: int):
        self.section_id = section_id
        super().__init__(f"save file contains invalid section id: {section_id}")


class MismatchedSaveIndexError(SaveLoadError):
    """
    Raised when sections of one save slot disagree on the save index.

    ``expected`` is the index of the slot's first section.
    """

    def __init__(self, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(
            f"sections contain mismatching save indices: {expected} - {found}"
        )


class SaveStructureError(SaveLoadError):
    """Generic structural error, e.g. a slot without 14 distinct sections."""
    pass


class InvalidDataError(PokeditError):
    """Raised when a decoded field holds a value with no valid mapping."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"save file contains invalid data: {field}")


class NotAvailableInVersionError(PokeditError):
    """Raised when a field does not exist in the loaded game version."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(
            f'the requested datum "{field}" is not available in the version '
            f"of the loaded game"
        )


class SaveIOError(PokeditError):
    """
    Raised when reading or writing a save file fails.

    The underlying OSError is chained as ``__cause__``.
    """
    pass


class InternalError(Exception):
    """
    Broken internal invariant: out of range offsets, unknown section ids
    after validation, and the like.
    """
    pass


class BorrowError(InternalError):
    """Raised when a view overlaps a window that is mutably borrowed."""
    pass
