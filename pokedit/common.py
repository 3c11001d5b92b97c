"""Types shared by every game generation."""

from enum import IntEnum


class Gender(IntEnum):
    """Player gender as stored in the save (one byte)."""

    MALE = 0
    FEMALE = 1

    def __str__(self):
        return self.name.capitalize()

    def __format__(self, format_spec):
        return format(str(self), format_spec)
