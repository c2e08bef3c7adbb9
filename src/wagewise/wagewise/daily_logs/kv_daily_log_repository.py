from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import DAILY_LOGS_KEY
from ..database.store import KeyValueStore
from .model import DailyLogEntry, DailyLogKey
from .repository import DailyLogRepository


class KeyValueDailyLogRepository(DailyLogRepository):
    """Daily logs stored as one record: date -> list of entries."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _load(self) -> dict[str, list[dict]]:
        raw = self._store.load(DAILY_LOGS_KEY, {})
        if not isinstance(raw, dict):
            return {}
        return {str(d): [e for e in entries if isinstance(e, dict)] for d, entries in raw.items() if isinstance(entries, list)}

    def _index(self, logs: dict[str, list[dict]], date: str) -> dict[DailyLogKey, DailyLogEntry]:
        by_key: dict[DailyLogKey, DailyLogEntry] = {}
        for raw in logs.get(date, []):
            entry = DailyLogEntry.from_dict(raw, date=date)
            by_key.setdefault(entry.key, entry)
        return by_key

    def get(self, key: DailyLogKey) -> Optional[DailyLogEntry]:
        return self._index(self._load(), key.date).get(key)

    def list_for_date(self, date: str) -> Sequence[DailyLogEntry]:
        return list(self._index(self._load(), date).values())

    def upsert(self, entry: DailyLogEntry) -> None:
        logs = self._load()
        kept = [e for e in logs.get(entry.date, []) if e.get("employeeName") != entry.employee_name]
        kept.append(entry.to_dict())
        logs[entry.date] = kept
        self._store.save(DAILY_LOGS_KEY, logs)
