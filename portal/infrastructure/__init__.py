"""Portal infrastructure layer."""

from portal.infrastructure.filesystem import LocalFileSystem
from portal.infrastructure.record_cache import RecordCache

__all__ = [
    "LocalFileSystem",
    "RecordCache",
]
