"""Extension policy.

ONLY extension allow-listing - which file extensions an upload may carry.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from ...core.value_objects.asset_name import normalize_extension


@dataclass(frozen=True)
class ExtensionPolicy:
    """Allowed extensions.

    An empty set means no restriction is configured. The empty string as a
    member admits files without an extension; without it a restricted
    policy rejects them. Multi-segment extensions ("tar.gz") are single
    members.
    """

    allowed: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(
            self, 'allowed', frozenset(normalize_extension(ext) for ext in self.allowed)
        )

    @classmethod
    def of(cls, extensions: Optional[Iterable[str]]) -> 'ExtensionPolicy':
        return cls(frozenset(extensions or ()))

    @property
    def is_restricted(self) -> bool:
        return bool(self.allowed)

    @property
    def allows_extensionless(self) -> bool:
        return not self.is_restricted or "" in self.allowed

    def allows(self, extension: Optional[str]) -> bool:
        if not self.is_restricted:
            return True
        return normalize_extension(extension) in self.allowed

    def describe(self) -> str:
        """Comma separated list of allowed extensions for error messages."""
        return ", ".join(sorted(ext for ext in self.allowed if ext))
