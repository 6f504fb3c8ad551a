"""Asset ingestion module.

Takes fully received files through validation, collision-free naming and
visibility resolution, then commits their content and metadata records.

Provides:
- Tiered maximum size policies (extension, category, wildcard)
- Extension allow-lists
- Versioned name resolution ("report-v2.tar.gz", "IMG002.jpg")
- Visibility inherited through container chains
- Replace mode preserving record identity
"""

# Only the core is imported here; configuration depends on it
from .core.entities import *
from .core.value_objects import *
from .core.exceptions import *
from .core.protocols import *

from .core import __all__
