"""Visibility resolver service.

ONLY effective visibility - resolves a record's visibility mode against the
access rules of its container chain.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import List, Optional, Set

from ...core.entities.asset_record import AssetRecord
from ...core.exceptions.visibility_cycle_detected import VisibilityCycleDetected
from ...core.protocols.container_tree import ContainerTree
from ...core.value_objects import AccessRule, ContainerId, Visibility, VisibilityMode


logger = logging.getLogger(__name__)


class VisibilityResolver:
    """Resolves effective visibility.

    A record forcing a visibility wins outright. An inheriting record takes
    its container's effective visibility: the first container up the chain
    with a non-inherit rule decides (only "Anyone" is public), and a chain
    that runs out of parents without a rule is public.
    """

    def __init__(self, container_tree: ContainerTree):
        self._container_tree = container_tree

    async def resolve(
        self,
        record: AssetRecord,
        container_id: Optional[ContainerId] = None
    ) -> Visibility:
        """Effective visibility of a record.

        Args:
            record: The record being committed
            container_id: Container override; the record's own when None
        """
        if container_id is None:
            container_id = record.container_id
        return await self.resolve_mode(record.visibility_mode, container_id)

    async def resolve_mode(
        self,
        mode: VisibilityMode,
        container_id: Optional[ContainerId]
    ) -> Visibility:
        if not mode.is_inherit:
            return mode.forced
        return await self.container_visibility(container_id)

    async def container_visibility(self, container_id: Optional[ContainerId]) -> Visibility:
        """Effective visibility of a container (None is the public store root).

        Raises:
            VisibilityCycleDetected: If a container is reached twice
        """
        chain: List[ContainerId] = []
        seen: Set[ContainerId] = set()
        current = container_id

        while current is not None:
            if current in seen:
                logger.error(f"Container cycle while resolving visibility: {chain + [current]}")
                raise VisibilityCycleDetected(
                    message=f"Container {current} is its own ancestor",
                    container_id=current,
                    chain=chain + [current]
                )
            seen.add(current)
            chain.append(current)

            rule = AccessRule(await self._container_tree.effective_access_rule(current))
            if not rule.is_inherit:
                return rule.to_visibility()

            current = await self._container_tree.parent_of(current)

        return Visibility.PUBLIC


def create_visibility_resolver(container_tree: ContainerTree) -> VisibilityResolver:
    """Create visibility resolver over a container tree."""
    return VisibilityResolver(container_tree)
