"""Task persistence: backends, record codec and the whole-document store."""

from .backends import Backend, FileBackend, MemoryBackend
from .codec import from_record, to_record
from .core import TaskStore, default_store

__all__ = [
    "Backend",
    "FileBackend",
    "MemoryBackend",
    "TaskStore",
    "default_store",
    "from_record",
    "to_record",
]
