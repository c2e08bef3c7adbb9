from __future__ import annotations

import copy
import json
import logging
from typing import Any

from .store import KeyValueStore

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """Keeps serialized JSON strings in a dict, like a browser's local storage.

    Values go through json on both save and load, so callers never share
    mutable state with the store.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def load(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(key)
        if raw is None:
            return copy.deepcopy(default)
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Ignoring corrupt record %r", key)
            return copy.deepcopy(default)

    def save(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value, ensure_ascii=False)