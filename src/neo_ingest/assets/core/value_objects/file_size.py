"""File size value object.

ONLY file size - represents a validated byte count with size-literal parsing
("40k", "2m") and the human-readable formatting used in validation messages.

Following maximum separation architecture - one file = one purpose.
"""

import re
from dataclasses import dataclass
from typing import Union


# "1024", "40k", "2 MB", "1g" - binary multiples
SIZE_LITERAL_PATTERN = re.compile(r'^(\d+)\s*([kmgt]?)b?$', re.IGNORECASE)


@dataclass(frozen=True)
class FileSize:
    """File size value object.

    Represents a file size in bytes. Size limits in policies are written as
    literals (``"40k"``, ``"1m"``) and messages shown to uploaders use
    :meth:`format_size`.
    """

    value: int  # Size in bytes

    # Size unit constants
    BYTE = 1
    KILOBYTE = 1024
    MEGABYTE = 1024 ** 2
    GIGABYTE = 1024 ** 3
    TERABYTE = 1024 ** 4

    SUFFIX_MULTIPLIERS = {
        '': BYTE,
        'k': KILOBYTE,
        'm': MEGABYTE,
        'g': GIGABYTE,
        't': TERABYTE,
    }

    def __post_init__(self):
        """Validate file size value."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"FileSize must be an integer, got {type(self.value).__name__}")

        if self.value < 0:
            raise ValueError(f"File size cannot be negative: {self.value}")

    @classmethod
    def zero(cls) -> 'FileSize':
        """Create a zero-size file size."""
        return cls(0)

    @classmethod
    def parse(cls, literal: Union[int, str]) -> 'FileSize':
        """Create FileSize from a byte count or a size literal.

        Accepts integers, numeric strings and ``N`` followed by ``k``, ``m``,
        ``g`` or ``t`` (optionally with a trailing ``b``), case-insensitive.
        Suffixes are binary multiples: ``"1k"`` is 1024 bytes.
        """
        if isinstance(literal, bool):
            raise ValueError(f"Invalid size literal: {literal!r}")

        if isinstance(literal, int):
            return cls(literal)

        if isinstance(literal, float) and literal.is_integer():
            return cls(int(literal))

        if not isinstance(literal, str):
            raise ValueError(f"Invalid size literal: {literal!r}")

        match = SIZE_LITERAL_PATTERN.match(literal.strip())
        if not match:
            raise ValueError(f"Invalid size literal: {literal!r}")

        number, suffix = match.groups()
        return cls(int(number) * cls.SUFFIX_MULTIPLIERS[suffix.lower()])

    def to_bytes(self) -> int:
        """Get size in bytes."""
        return self.value

    def format_size(self) -> str:
        """Format size the way upload error messages display it.

        Under 1 KB sizes are shown in bytes; below ten units one decimal
        place is kept, above that the value is rounded to whole units.
        """
        size = self.value
        if size < self.KILOBYTE:
            return f"{size} bytes"
        if size < self.KILOBYTE * 10:
            return f"{_round_to(size / self.KILOBYTE, 1)} KB"
        if size < self.MEGABYTE:
            return f"{_round_to(size / self.KILOBYTE, 0)} KB"
        if size < self.MEGABYTE * 10:
            return f"{_round_to(size / self.MEGABYTE, 1)} MB"
        if size < self.GIGABYTE:
            return f"{_round_to(size / self.MEGABYTE, 0)} MB"
        return f"{_round_to(size / self.GIGABYTE, 1)} GB"

    def is_zero(self) -> bool:
        """Check if size is zero."""
        return self.value == 0

    def exceeds(self, other: 'FileSize') -> bool:
        """Check if this size exceeds another size."""
        return self.value > other.value

    def fits_in(self, other: 'FileSize') -> bool:
        """Check if this size fits within another size limit."""
        return self.value <= other.value

    def __lt__(self, other: 'FileSize') -> bool:
        if not isinstance(other, FileSize):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: 'FileSize') -> bool:
        if not isinstance(other, FileSize):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: 'FileSize') -> bool:
        if not isinstance(other, FileSize):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: 'FileSize') -> bool:
        if not isinstance(other, FileSize):
            return NotImplemented
        return self.value >= other.value

    def __str__(self) -> str:
        """String representation for display."""
        return self.format_size()

    def __repr__(self) -> str:
        """Developer representation."""
        return f"FileSize({self.value})"


def _round_to(value: float, places: int) -> str:
    """Round half up and drop a trailing '.0'."""
    factor = 10 ** places
    rounded = int(value * factor + 0.5) / factor
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{places}f}"
