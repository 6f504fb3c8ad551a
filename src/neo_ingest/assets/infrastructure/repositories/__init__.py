"""Asset record and container repository implementations.

Record persistence for PostgreSQL (asyncpg) and in-process use, plus an
in-memory container tree.

Following maximum separation architecture - one file = one purpose.
"""

from .asyncpg_record_store import AsyncpgRecordStore, create_asyncpg_record_store
from .in_memory_record_store import InMemoryRecordStore, create_in_memory_record_store
from .in_memory_container_tree import InMemoryContainerTree

__all__ = [
    "AsyncpgRecordStore",
    "create_asyncpg_record_store",
    "InMemoryRecordStore",
    "create_in_memory_record_store",
    "InMemoryContainerTree",
]
