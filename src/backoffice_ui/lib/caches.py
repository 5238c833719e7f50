"""
Disk-backed key/value storage for state that must survive a restart.

The browser dashboard kept the session token in persisted local storage.
Here the same role is played by a diskcache directory, which is safe to
share between the Reflex worker processes.
"""

import os
import tempfile
from pathlib import Path
from typing import Any

import diskcache

# Directory for persisted state; defaults to the system temp dir
SESSION_DIR = os.getenv("BACKOFFICE_SESSION_DIR") or str(
    Path(tempfile.gettempdir()) / "backoffice_ui_session"
)


class PersistentStore:
    """
    Namespaced persistent storage.

    Keys are prefixed with the namespace so several sessions (for instance
    one per browser client) can share a single cache directory.

    Attributes:
        cache_dir: Path to the cache directory.
        namespace: Prefix applied to every key.
    """

    def __init__(self, cache_dir: str | Path | None = None, namespace: str = "default") -> None:
        self.cache_dir = Path(cache_dir or SESSION_DIR)
        self.namespace = namespace
        self._cache = diskcache.Cache(str(self.cache_dir))

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value for key, or default when absent."""
        return self._cache.get(self._key(key), default=default)

    def set(self, key: str, value: Any, expire: int | None = None) -> None:
        """
        Store a value.

        Args:
            key: Key inside this store's namespace.
            value: Picklable value.
            expire: TTL in seconds. None means no expiration.
        """
        self._cache.set(self._key(key), value, expire=expire)

    def delete(self, key: str) -> None:
        """Remove a key; missing keys are ignored."""
        self._cache.delete(self._key(key))

    def close(self) -> None:
        """Close the cache and release resources."""
        self._cache.close()
