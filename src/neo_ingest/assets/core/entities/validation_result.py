"""Validation result entity.

ONLY validation outcome - the ordered list of structured errors collected
during one validation pass over a file descriptor.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ValidationErrorKind(Enum):
    """Kinds of validation failure."""
    TRANSPORT_ERROR = "transport_error"
    ZERO_SIZE = "zero_size"
    SIZE_EXCEEDED = "size_exceeded"
    EXTENSION_NOT_ALLOWED = "extension_not_allowed"


@dataclass(frozen=True)
class ValidationMessage:
    """One structured validation error: a kind plus human text."""

    kind: ValidationErrorKind
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def subkind(self) -> Optional[str]:
        """Transport subkind for TRANSPORT_ERROR messages."""
        return self.details.get("subkind")

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message, "details": dict(self.details)}


@dataclass
class ValidationResult:
    """Ordered validation errors; valid when empty.

    Mutated only by a validator during a single pass. Callers may
    :meth:`clear` it and validate again.
    """

    errors: List[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> List[str]:
        """Human-readable error texts in the order they were recorded."""
        return [error.message for error in self.errors]

    @property
    def kinds(self) -> List[ValidationErrorKind]:
        return [error.kind for error in self.errors]

    def add(self, kind: ValidationErrorKind, message: str, **details: Any) -> ValidationMessage:
        error = ValidationMessage(kind=kind, message=message, details=details)
        self.errors.append(error)
        return error

    def has(self, kind: ValidationErrorKind) -> bool:
        return any(error.kind is kind for error in self.errors)

    def clear(self) -> None:
        self.errors.clear()

    def __len__(self) -> int:
        return len(self.errors)
