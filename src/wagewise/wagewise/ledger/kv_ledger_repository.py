from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import LEDGER_KEY
from ..database.store import KeyValueStore
from .model import EmployeeLedgerEntry, LedgerKey
from .repository import LedgerRepository


class KeyValueLedgerRepository(LedgerRepository):
    """Ledger rows stored as one ordered list record."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _load(self) -> list[EmployeeLedgerEntry]:
        raw = self._store.load(LEDGER_KEY, [])
        if not isinstance(raw, list):
            return []
        return [EmployeeLedgerEntry.from_dict(r) for r in raw if isinstance(r, dict)]

    def _save(self, entries: Sequence[EmployeeLedgerEntry]) -> None:
        self._store.save(LEDGER_KEY, [e.to_dict() for e in entries])

    @staticmethod
    def _by_key(entries: Sequence[EmployeeLedgerEntry]) -> dict[LedgerKey, EmployeeLedgerEntry]:
        index: dict[LedgerKey, EmployeeLedgerEntry] = {}
        for e in entries:
            index.setdefault(e.key, e)
        return index

    def list_all(self) -> Sequence[EmployeeLedgerEntry]:
        return self._load()

    def get_by_id(self, entry_id: str) -> Optional[EmployeeLedgerEntry]:
        return next((e for e in self._load() if e.id == entry_id), None)

    def get_by_key(self, key: LedgerKey) -> Optional[EmployeeLedgerEntry]:
        return self._by_key(self._load()).get(key)

    def save(self, entry: EmployeeLedgerEntry) -> None:
        entries = self._load()
        for i, e in enumerate(entries):
            if e.id == entry.id:
                entries[i] = entry
                break
        else:
            entries.append(entry)
        self._save(entries)

    def delete_by_id(self, entry_id: str) -> bool:
        entries = self._load()
        kept = [e for e in entries if e.id != entry_id]
        if len(kept) == len(entries):
            return False
        self._save(kept)
        return True

    def clear(self) -> None:
        self._save([])
