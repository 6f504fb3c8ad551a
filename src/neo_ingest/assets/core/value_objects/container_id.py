"""Container identifier value object.

ONLY container reference - an opaque handle to a folder-like container owned
by the external record store. The ingestion core never embeds containers,
it only passes these handles to collaborators.

Following maximum separation architecture - one file = one purpose.
"""

import re
from dataclasses import dataclass


# Path-like handles: "Uploads", "team/reports", "3f2a..."
CONTAINER_ID_PATTERN = re.compile(r'^[A-Za-z0-9_\-][A-Za-z0-9_\-./]*$')


@dataclass(frozen=True)
class ContainerId:
    """Opaque container handle."""

    value: str

    def __post_init__(self):
        """Validate and normalize container handle."""
        if not isinstance(self.value, str):
            raise ValueError(f"ContainerId must be a string, got {type(self.value).__name__}")

        normalized = self.value.strip().strip("/")
        if not normalized or not CONTAINER_ID_PATTERN.match(normalized):
            raise ValueError(f"Invalid container ID: {self.value!r}")

        if any(segment in ("", ".", "..") for segment in normalized.split("/")):
            raise ValueError(f"Container ID cannot contain empty or relative segments: {self.value!r}")

        object.__setattr__(self, 'value', normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ContainerId('{self.value}')"
