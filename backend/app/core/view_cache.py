"""In-memory cache of rendered views, keyed by path."""

import logging
from threading import Lock
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class ViewInvalidator(Protocol):
    def revalidate_path(self, path: str) -> None: ...


class ViewCache:
    """Thread-safe store of rendered view payloads.

    The view that owns a path stores its rendered payload with ``set`` and
    serves it back with ``get``. Writers call ``revalidate_path`` after
    mutating data shown on that view; the next ``get`` misses and the view
    renders fresh content.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._lock = Lock()

    def get(self, path: str) -> Any | None:
        with self._lock:
            return self._entries.get(path)

    def set(self, path: str, value: Any) -> None:
        with self._lock:
            self._entries[path] = value

    def revalidate_path(self, path: str) -> None:
        """Mark ``path`` stale. Idempotent."""
        with self._lock:
            self._entries.pop(path, None)
        logger.debug("Revalidated view %s", path)

    def reset(self) -> None:
        """Clear all cached views (useful for testing)."""
        with self._lock:
            self._entries.clear()


view_cache = ViewCache()


def get_view_cache() -> ViewCache:
    return view_cache
