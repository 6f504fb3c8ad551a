"""Container tree protocol.

ONLY container hierarchy contract - the access rule each container carries
and its parent, used to resolve inherited visibility.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional
from typing_extensions import Protocol, runtime_checkable

from ..value_objects import AccessRule, ContainerId


@runtime_checkable
class ContainerTree(Protocol):
    """Container tree protocol."""

    async def effective_access_rule(self, container_id: ContainerId) -> AccessRule:
        """Access rule set on the container itself (INHERIT defers to parent)."""
        ...

    async def parent_of(self, container_id: ContainerId) -> Optional[ContainerId]:
        """Parent container, or None for a top-level container."""
        ...
