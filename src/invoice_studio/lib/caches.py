"""
Disk-backed key-value storage.

Provides a DiskStore class that keeps JSON-compatible values on disk using
the diskcache library. It is the on-device persistence layer behind the
store-backed invoice service: the service reads and writes whole
collections by key and performs no partial updates.
"""

from pathlib import Path
from typing import Any, Iterator

import diskcache

from invoice_studio.lib import logs

LOG = logs.logger(__file__)


class DiskStore:
    """
    Persistent key-value store.

    Thread-safe and process-safe, backed by diskcache's SQLite storage.

    Attributes:
        directory: Path to the store directory.
    """

    def __init__(self, directory: str | Path) -> None:
        """
        Open (or create) the store.

        Args:
            directory: Directory path for the store files. Created if it
                       doesn't exist.
        """
        self.directory = Path(directory)
        self._cache = diskcache.Cache(str(self.directory))
        LOG.info("Opened store at %s", self.directory)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under key, or default when absent."""
        return self._cache.get(key, default=default)

    def set(self, key: str, value: Any) -> None:
        """Store a value under key, replacing any previous value."""
        self._cache.set(key, value)

    def delete(self, key: str) -> None:
        """Delete a key. Missing keys are ignored."""
        self._cache.delete(key)

    def keys(self) -> Iterator[str]:
        """Iterate over stored keys."""
        return iter(self._cache)

    def __contains__(self, key: str) -> bool:
        return key in self._cache

    def close(self) -> None:
        """Close the store and release resources."""
        self._cache.close()
