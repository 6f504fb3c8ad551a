"""Size policy.

ONLY maximum file size resolution - maps selectors (an extension, a
bracketed category tag or the "*" wildcard) to byte limits and resolves the
limit that applies to a file by trying selector tiers in priority order.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Tuple, Union

from ...core.protocols.category_classifier import CategoryClassifier
from ...core.value_objects.file_size import FileSize


WILDCARD = "*"

SizeLiteral = Union[int, str]
SizeConfig = Union[None, SizeLiteral, Mapping[str, SizeLiteral]]


class SelectorTier(Enum):
    """Size policy selector tiers, highest priority first."""
    EXTENSION = "extension"
    CATEGORY = "category"
    WILDCARD = "wildcard"


@dataclass(frozen=True)
class SizeLimit:
    """A resolved size limit and the selector that produced it."""

    selector: str
    max_bytes: int
    tier: SelectorTier


def normalize_selector(selector: str) -> str:
    """Lower-case a selector; extensions lose a leading dot."""
    selector = selector.strip().lower()
    if selector.startswith("[") or selector == WILDCARD:
        return selector
    return selector.lstrip(".")


def _match_extension(
    rules: Mapping[str, int],
    extension: str,
    classifier: Optional[CategoryClassifier]
) -> Optional[str]:
    return extension if extension in rules else None


def _match_category(
    rules: Mapping[str, int],
    extension: str,
    classifier: Optional[CategoryClassifier]
) -> Optional[str]:
    if classifier is None or not extension:
        return None
    category = classifier.category_of(extension)
    if not category:
        return None
    category = normalize_selector(category)
    return category if category in rules else None


def _match_wildcard(
    rules: Mapping[str, int],
    extension: str,
    classifier: Optional[CategoryClassifier]
) -> Optional[str]:
    return WILDCARD if WILDCARD in rules else None


# Tried in order; the first tier that matches decides the limit
SIZE_LOOKUP_TIERS: Tuple[Tuple[SelectorTier, Callable[..., Optional[str]]], ...] = (
    (SelectorTier.EXTENSION, _match_extension),
    (SelectorTier.CATEGORY, _match_category),
    (SelectorTier.WILDCARD, _match_wildcard),
)


@dataclass(frozen=True)
class SizePolicy:
    """Selector -> maximum byte count.

    An empty policy imposes no limit. A policy never merges with another:
    see :meth:`effective`.
    """

    rules: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        normalized = {}
        for selector, limit in dict(self.rules).items():
            normalized[normalize_selector(selector)] = FileSize.parse(limit).value
        object.__setattr__(self, 'rules', normalized)

    @classmethod
    def from_config(cls, value: SizeConfig) -> 'SizePolicy':
        """Build a policy from configuration.

        A mapping is taken as selector -> size literal. A single literal is a
        wildcard limit; a non-positive single literal means no limit.
        """
        if value is None:
            return cls()
        if isinstance(value, Mapping):
            return cls(dict(value))

        limit = FileSize.parse(value).value
        if limit <= 0:
            return cls()
        return cls({WILDCARD: limit})

    @staticmethod
    def effective(instance: Optional['SizePolicy'], default: Optional['SizePolicy']) -> 'SizePolicy':
        """The policy a validation call uses.

        A non-empty instance policy replaces the default policy entirely;
        selectors it does not mention get no limit from the default.
        """
        if instance is not None and not instance.is_empty:
            return instance
        return default if default is not None else SizePolicy()

    @property
    def is_empty(self) -> bool:
        return not self.rules

    def lookup(
        self,
        extension: Optional[str],
        classifier: Optional[CategoryClassifier] = None
    ) -> Optional[SizeLimit]:
        """Resolve the limit for an extension through the selector tiers.

        ``extension`` may also be a category tag ("[image]") to read a
        category entry directly. None skips straight to the wildcard.
        """
        if extension is None:
            tiers = SIZE_LOOKUP_TIERS[-1:]
            extension = ""
        else:
            tiers = SIZE_LOOKUP_TIERS
            extension = normalize_selector(extension)

        for tier, match in tiers:
            selector = match(self.rules, extension, classifier)
            if selector is not None:
                return SizeLimit(selector=selector, max_bytes=self.rules[selector], tier=tier)
        return None

    def resolve_max_size(
        self,
        extension: Optional[str],
        classifier: Optional[CategoryClassifier] = None
    ) -> Optional[int]:
        """Maximum size in bytes for an extension, or None when no tier matches."""
        limit = self.lookup(extension, classifier)
        return limit.max_bytes if limit else None

    def largest(self) -> Optional[int]:
        """Largest limit across every selector, or None when nothing is configured.

        This deliberately ignores whether a selector could match any given
        file: it is the number quoted when the transport itself rejected an
        upload as too large.
        """
        if not self.rules:
            return None
        return max(self.rules.values())
