"""Visibility value objects.

ONLY access visibility - the storage visibility of committed content, the
access rules containers and records carry, and the tagged "forced or
inherit" mode a record uses to pick its visibility.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Visibility(str, Enum):
    """Effective storage visibility of an asset."""
    PUBLIC = "public"
    PROTECTED = "protected"


class AccessRule(str, Enum):
    """Who may view a container or record."""
    INHERIT = "Inherit"                   # Defer to the parent container
    ANYONE = "Anyone"                     # Public
    LOGGED_IN_USERS = "LoggedInUsers"     # Any authenticated user
    ONLY_THESE_USERS = "OnlyTheseUsers"   # Explicit user/group list

    @property
    def is_inherit(self) -> bool:
        return self is AccessRule.INHERIT

    def to_visibility(self) -> Optional[Visibility]:
        """Visibility this rule forces, or None when it defers."""
        if self is AccessRule.INHERIT:
            return None
        if self is AccessRule.ANYONE:
            return Visibility.PUBLIC
        return Visibility.PROTECTED


@dataclass(frozen=True)
class VisibilityMode:
    """A record's own visibility setting.

    Either ``Forced(Public)``, ``Forced(Protected)`` or ``Inherit``; the
    forced value is held in :attr:`forced` and is None for inherit.
    """

    forced: Optional[Visibility] = None

    @classmethod
    def inherit(cls) -> 'VisibilityMode':
        return cls(None)

    @classmethod
    def forced_public(cls) -> 'VisibilityMode':
        return cls(Visibility.PUBLIC)

    @classmethod
    def forced_protected(cls) -> 'VisibilityMode':
        return cls(Visibility.PROTECTED)

    @classmethod
    def from_access_rule(cls, rule: AccessRule) -> 'VisibilityMode':
        """Map a record access rule onto a visibility mode."""
        return cls(AccessRule(rule).to_visibility())

    @property
    def is_inherit(self) -> bool:
        return self.forced is None

    def __str__(self) -> str:
        if self.forced is None:
            return "Inherit"
        return f"Forced({self.forced.value})"
