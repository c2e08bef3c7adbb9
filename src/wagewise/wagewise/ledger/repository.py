from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeeLedgerEntry, LedgerKey


class LedgerRepository(Protocol):
    def list_all(self) -> Sequence[EmployeeLedgerEntry]:
        raise NotImplementedError

    def get_by_id(self, entry_id: str) -> Optional[EmployeeLedgerEntry]:
        raise NotImplementedError

    def get_by_key(self, key: LedgerKey) -> Optional[EmployeeLedgerEntry]:
        raise NotImplementedError

    def save(self, entry: EmployeeLedgerEntry) -> None:
        """Replace the row with entry.id, or append it."""

        raise NotImplementedError

    def delete_by_id(self, entry_id: str) -> bool:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError
