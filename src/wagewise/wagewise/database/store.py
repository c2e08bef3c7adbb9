from __future__ import annotations

from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Persistence interface: named JSON records read and written wholesale.

    load() never raises for missing or unreadable records; it returns the
    given default instead.
    """

    def load(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def save(self, key: str, value: Any) -> None:
        raise NotImplementedError
