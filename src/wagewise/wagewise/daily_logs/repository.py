from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import DailyLogEntry, DailyLogKey


class DailyLogRepository(Protocol):
    def get(self, key: DailyLogKey) -> Optional[DailyLogEntry]:
        raise NotImplementedError

    def list_for_date(self, date: str) -> Sequence[DailyLogEntry]:
        raise NotImplementedError

    def upsert(self, entry: DailyLogEntry) -> None:
        """Replace the entry for entry.key, or add it."""

        raise NotImplementedError
