"""Asset identifier value object.

ONLY asset identifier - represents the identity a record store assigns to an
asset record on creation. Identities are positive integers that grow with
creation order so callers can sort records chronologically.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, order=True)
class AssetId:
    """Asset identifier value object.

    Immutable, hashable and ordered. The ingestion core never creates these;
    record stores do.
    """

    value: int

    def __post_init__(self):
        """Validate asset ID."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"AssetId must be an integer, got {type(self.value).__name__}")
        if self.value < 1:
            raise ValueError(f"AssetId must be positive, got {self.value}")

    @classmethod
    def from_value(cls, value: Union[int, str]) -> 'AssetId':
        """Create AssetId from an int or its string representation."""
        try:
            return cls(int(value))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid asset ID format: {value}") from e

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"AssetId({self.value})"
