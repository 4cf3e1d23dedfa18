"""View Cache — in-process cache of rendered listing payloads, invalidated by path.

Invariants:
    - Entries are keyed by (path, params); revalidate_path(p) drops p and every path below it
    - A revalidated path is never served stale on the next read
    - Each path holds at most max_entries_per_path entries; the least recently used goes first
    - Single event loop: no locking needed (no await between check and set)

Design Decisions:
    - Path-prefix invalidation mirrors how the dashboard addresses its views
      ("/dashboard/invoices" also covers "/dashboard/invoices/<id>")
    - OrderedDict LRU per path; cap set from Settings.view_cache_max_entries at startup
    - Module-level singleton, swapped in tests through get_view_cache override
"""

import logging
from collections import OrderedDict
from typing import Any, Hashable

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES_PER_PATH = 256


class ViewCache:
    """Path-addressed LRU cache implementing the ViewRefresher protocol."""

    def __init__(self, max_entries_per_path: int = DEFAULT_MAX_ENTRIES_PER_PATH):
        if max_entries_per_path < 1:
            raise ValueError("max_entries_per_path must be at least 1")
        self.max_entries_per_path = max_entries_per_path
        self._entries: dict[str, OrderedDict[Hashable, Any]] = {}

    def get(self, path: str, key: Hashable) -> Any | None:
        entries = self._entries.get(path)
        if entries is None or key not in entries:
            return None
        entries.move_to_end(key)
        return entries[key]

    def set(self, path: str, key: Hashable, value: Any) -> None:
        entries = self._entries.setdefault(path, OrderedDict())
        entries[key] = value
        entries.move_to_end(key)
        while len(entries) > self.max_entries_per_path:
            entries.popitem(last=False)

    def size(self, path: str) -> int:
        return len(self._entries.get(path, ()))

    def revalidate_path(self, path: str) -> None:
        prefix = path.rstrip("/")
        stale = [
            p for p in self._entries
            if p == prefix or p.startswith(prefix + "/")
        ]
        for p in stale:
            del self._entries[p]
        logger.info(
            f"Revalidated {path} ({len(stale)} cached view(s) dropped)",
            extra={"path": path},
        )

    def clear(self) -> None:
        self._entries.clear()


view_cache = ViewCache()


def get_view_cache() -> ViewCache:
    """FastAPI dependency for the process-wide view cache."""
    return view_cache
