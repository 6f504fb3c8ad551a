"""In-memory container tree.

ONLY process-local container hierarchy - container access rules and parent
links held in a dict.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Dict, Optional, Tuple, Union

from ...core.value_objects import AccessRule, ContainerId


ContainerRef = Union[ContainerId, str]


def _container(value: Optional[ContainerRef]) -> Optional[ContainerId]:
    if value is None or isinstance(value, ContainerId):
        return value
    return ContainerId(value)


class InMemoryContainerTree:
    """Dict-backed ContainerTree.

    Unknown containers behave like top-level containers without a rule.
    Parent links are not checked for cycles here; the visibility resolver
    detects them.
    """

    def __init__(self):
        self._containers: Dict[ContainerId, Tuple[AccessRule, Optional[ContainerId]]] = {}

    def add(
        self,
        container_id: ContainerRef,
        rule: Union[AccessRule, str] = AccessRule.INHERIT,
        parent: Optional[ContainerRef] = None
    ) -> ContainerId:
        """Register or overwrite a container."""
        container_id = _container(container_id)
        self._containers[container_id] = (AccessRule(rule), _container(parent))
        return container_id

    async def effective_access_rule(self, container_id: ContainerId) -> AccessRule:
        rule, _ = self._containers.get(container_id, (AccessRule.INHERIT, None))
        return rule

    async def parent_of(self, container_id: ContainerId) -> Optional[ContainerId]:
        _, parent = self._containers.get(container_id, (AccessRule.INHERIT, None))
        return parent

    def __contains__(self, container_id: object) -> bool:
        return container_id in self._containers
