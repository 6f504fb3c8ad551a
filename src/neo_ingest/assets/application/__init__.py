"""Asset ingestion application layer.

Validators, services and commands that implement the ingestion pipeline on
top of the core protocols.

Following maximum separation architecture - one file = one purpose.
"""

from .validators import *
from .services import *
from .commands import *

from .validators import __all__ as _validators_all
from .services import __all__ as _services_all
from .commands import __all__ as _commands_all

__all__ = _validators_all + _services_all + _commands_all
