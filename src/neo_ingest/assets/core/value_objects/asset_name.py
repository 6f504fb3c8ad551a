"""Asset name value object.

ONLY logical asset name - a base name plus an optional extension, where the
extension may span several segments ("tar.gz") and is always treated as one
unit.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Optional


# Extensions that span two dot-segments
COMPOUND_EXTENSIONS = frozenset({
    'tar.gz', 'tar.bz2', 'tar.xz', 'tar.zst', 'tar.lz', 'tar.lzma', 'tar.z',
})

# Characters that cannot appear in a logical name
FORBIDDEN_NAME_CHARACTERS = frozenset({'/', '\\', '\x00'})


def normalize_extension(extension: Optional[str]) -> str:
    """Lower-case an extension and drop a leading dot."""
    if not extension:
        return ""
    return extension.strip().lstrip(".").lower()


def split_extension(filename: str) -> tuple:
    """Split a filename into (base, extension).

    The extension is the last dot-segment, or the last two for a known
    compound extension. Dotfiles (".env") have no extension.
    """
    parts = filename.split(".")
    if len(parts) < 2 or not parts[-1] or (not parts[0] and len(parts) == 2):
        return filename, ""

    if len(parts) >= 3 and f"{parts[-2]}.{parts[-1]}".lower() in COMPOUND_EXTENSIONS:
        return ".".join(parts[:-2]), f"{parts[-2]}.{parts[-1]}"

    return ".".join(parts[:-1]), parts[-1]


@dataclass(frozen=True)
class AssetName:
    """Logical asset name.

    ``base`` never includes the extension; ``extension`` keeps its original
    case for display and is compared case-insensitively via
    :attr:`normalized_extension`.
    """

    base: str
    extension: str = ""

    def __post_init__(self):
        """Validate name parts."""
        if not isinstance(self.base, str) or not self.base.strip():
            raise ValueError("Asset name base cannot be empty")

        extension = (self.extension or "").lstrip(".")
        object.__setattr__(self, 'extension', extension)

        for char in FORBIDDEN_NAME_CHARACTERS:
            if char in self.base or char in extension:
                raise ValueError(f"Asset name contains forbidden character: {char!r}")

    @classmethod
    def parse(cls, filename: str, extension: Optional[str] = None) -> 'AssetName':
        """Create an AssetName from a filename.

        When ``extension`` is given and the filename ends with it, that
        extension is used as-is (so "archive.tar.gz" with "tar.gz" splits
        correctly even for unknown compounds). An explicitly empty extension
        keeps the whole filename as the base.
        """
        filename = filename.strip()
        if extension is not None:
            wanted = extension.strip().lstrip(".")
            if not wanted:
                return cls(filename, "")
            suffix = f".{wanted}"
            if filename.lower().endswith(suffix.lower()) and len(filename) > len(suffix):
                return cls(filename[:-len(suffix)], filename[-len(wanted):])

        base, ext = split_extension(filename)
        return cls(base, ext)

    @property
    def normalized_extension(self) -> str:
        return normalize_extension(self.extension)

    @property
    def filename(self) -> str:
        """Full logical name including the extension."""
        if self.extension:
            return f"{self.base}.{self.extension}"
        return self.base

    def with_base(self, base: str) -> 'AssetName':
        """Copy of this name with a different base and the same extension."""
        return AssetName(base, self.extension)

    def __str__(self) -> str:
        return self.filename

    def __repr__(self) -> str:
        return f"AssetName('{self.filename}')"
