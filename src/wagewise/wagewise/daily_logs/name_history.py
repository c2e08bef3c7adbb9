from __future__ import annotations

from typing import Sequence

from ..core.constants import DEFAULT_NAME_HISTORY_LIMIT, NAME_HISTORY_KEY
from ..database.store import KeyValueStore


class NameHistory:
    """Most-recent-first list of employee names, used for autocomplete."""

    def __init__(self, store: KeyValueStore, *, limit: int = DEFAULT_NAME_HISTORY_LIMIT):
        self._store = store
        self._limit = int(limit)

    def list_names(self) -> Sequence[str]:
        raw = self._store.load(NAME_HISTORY_KEY, [])
        if not isinstance(raw, list):
            return []
        return [str(n) for n in raw if isinstance(n, str)][: self._limit]

    def remember(self, name: str) -> Sequence[str]:
        name = name.strip()
        if not name:
            return self.list_names()
        names = [name] + [n for n in self.list_names() if n != name]
        names = names[: self._limit]
        self._store.save(NAME_HISTORY_KEY, names)
        return names
