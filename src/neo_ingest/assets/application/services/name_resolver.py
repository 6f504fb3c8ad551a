"""Name resolver service.

ONLY collision-free naming - generates candidate logical names for a
requested name and picks the first one a container does not already hold.

Following maximum separation architecture - one file = one purpose.
"""

import inspect
import logging
import re
from typing import Awaitable, Callable, Iterator, Optional, Union

from ....config.settings import IngestSettings, get_settings
from ...core.exceptions.name_resolution_exhausted import NameResolutionExhausted
from ...core.value_objects import AssetName, ContainerId


logger = logging.getLogger(__name__)


DEFAULT_VERSION_PREFIX = "-v"
DEFAULT_MAX_ATTEMPTS = 10000

NameTakenPredicate = Callable[[AssetName], Union[bool, Awaitable[bool]]]


class NameCandidates:
    """Deterministic, lazy sequence of candidate names.

    The first candidate is the requested name itself. Later candidates
    carry a version counter in front of the extension:

    - with a version prefix ("-v"): ``name.tar.gz`` -> ``name-v2.tar.gz`` ->
      ``name-v3.tar.gz``; a base already ending in ``-v{n}`` continues at
      ``n + 1``
    - with an empty prefix the trailing digits of the base are the counter,
      keeping their zero padding: ``IMG001.jpg`` -> ``IMG002.jpg``; a base
      without digits gets one appended: ``report`` -> ``report2``

    Iterating again starts over from the requested name.
    """

    def __init__(
        self,
        name: AssetName,
        version_prefix: str = DEFAULT_VERSION_PREFIX,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")

        self.name = name
        self.version_prefix = version_prefix or ""
        self.max_attempts = max_attempts
        self._pattern = re.compile(
            rf'^(?P<stem>.*?){re.escape(self.version_prefix)}(?P<version>\d+)$'
        )

    def __iter__(self) -> Iterator[AssetName]:
        return self._generate()

    def _generate(self) -> Iterator[AssetName]:
        yield self.name

        match = self._pattern.match(self.name.base)
        if match:
            stem = match.group('stem')
            version = int(match.group('version'))
            width = len(match.group('version'))
        else:
            stem = self.name.base
            version = 1
            width = 1

        for _ in range(self.max_attempts - 1):
            version += 1
            yield self.name.with_base(f"{stem}{self.version_prefix}{version:0{width}d}")


class NameResolver:
    """Picks the first free candidate name in a container.

    The "taken" predicate is asked again for every candidate and nothing is
    cached between calls: concurrent ingestion into the same container can
    claim names at any time. The record store's uniqueness guard stays the
    authority; this loop only makes collisions at commit unlikely.
    """

    def __init__(
        self,
        version_prefix: str = DEFAULT_VERSION_PREFIX,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS
    ):
        """Initialize name resolver.

        Args:
            version_prefix: Marker placed before the version counter;
                empty selects zero-padded numeric suffixes
            max_attempts: Candidates tried before giving up
        """
        self.version_prefix = version_prefix or ""
        self.max_attempts = max_attempts

    def candidates(self, name: AssetName) -> NameCandidates:
        return NameCandidates(name, self.version_prefix, self.max_attempts)

    async def resolve(
        self,
        name: AssetName,
        is_taken: NameTakenPredicate,
        container_id: Optional[ContainerId] = None
    ) -> AssetName:
        """Resolve a free name.

        Args:
            name: Requested logical name
            is_taken: Predicate (sync or async) telling whether a name is held
            container_id: Container being searched, for error reporting

        Returns:
            The first candidate the predicate reports as free

        Raises:
            NameResolutionExhausted: If every candidate is taken
        """
        attempts = 0
        for candidate in self.candidates(name):
            attempts += 1
            taken = is_taken(candidate)
            if inspect.isawaitable(taken):
                taken = await taken

            if not taken:
                if attempts > 1:
                    logger.debug(f"Resolved '{name}' to '{candidate}' after {attempts} attempts")
                return candidate

            logger.debug(f"Name '{candidate}' is taken in container {container_id}")

        logger.error(f"No free name for '{name}' in container {container_id} after {attempts} attempts")
        raise NameResolutionExhausted(
            message=f"Could not find a free name for '{name}' after {attempts} attempts",
            requested_name=name,
            container_id=container_id,
            attempts=attempts
        )


def create_name_resolver(settings: Optional[IngestSettings] = None) -> NameResolver:
    """Create name resolver from ingestion settings."""
    settings = settings or get_settings()
    return NameResolver(
        version_prefix=settings.version_prefix,
        max_attempts=settings.max_name_attempts,
    )
