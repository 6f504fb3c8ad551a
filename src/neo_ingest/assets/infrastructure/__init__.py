"""Asset ingestion infrastructure layer.

Collaborator implementations for the ingestion core:

- Record persistence (repositories)
- Content storage
- Extension categorization (classifiers)
- Web framework adapters (imported explicitly from ``.adapters``)
"""

from .classifiers import *
from .repositories import *
from .storage import *

from .classifiers import __all__ as _classifiers_all
from .repositories import __all__ as _repositories_all
from .storage import __all__ as _storage_all

__all__ = _classifiers_all + _repositories_all + _storage_all
