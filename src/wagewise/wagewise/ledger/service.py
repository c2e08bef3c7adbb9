from __future__ import annotations

import uuid
from typing import Any, Callable, Optional, Sequence

from ..common.datetime_utils import format_date_display
from ..common.formatting import format_inr
from ..common.validators import coerce_amount
from ..core.enums import AdjustableField, ClassType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.service import EmployeeDirectoryService
from .model import EmployeeLedgerEntry, LedgerKey, LedgerRow, LedgerTotals
from .reconciliation import apply_adjustment, apply_wage_edit, apply_wage_total
from .repository import LedgerRepository


class LedgerService:
    """Use case: keep the employee ledger and its balances consistent.

    Two entry points change a row: wage totals propagated from saved daily
    logs, and manual edits made on the ledger itself.
    """

    def __init__(
        self,
        ledger: LedgerRepository,
        directory: Optional[EmployeeDirectoryService] = None,
        *,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._ledger = ledger
        self._directory = directory
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))

    def list_entries(self) -> Sequence[EmployeeLedgerEntry]:
        return self._ledger.list_all()

    def get_entry(self, entry_id: str) -> EmployeeLedgerEntry:
        entry = self._ledger.get_by_id(entry_id)
        if not entry:
            raise NotFoundError("Ledger entry not found.")
        return entry

    def record_wage_total(self, *, date: str, employee_name: str, total: float) -> EmployeeLedgerEntry:
        existing = self._ledger.get_by_key(LedgerKey(date, employee_name))
        entry = apply_wage_total(
            existing,
            entry_id=existing.id if existing else self._new_id(),
            date=date,
            employee_name=employee_name,
            total=float(total),
        )
        self._ledger.save(entry)
        return entry

    def adjust_amount(self, entry_id: str, field: AdjustableField | str, value: Any) -> EmployeeLedgerEntry:
        try:
            field = AdjustableField(field)
        except ValueError:
            raise ValidationError("Unknown ledger field.")

        entry = apply_adjustment(self.get_entry(entry_id), field, coerce_amount(value))
        self._ledger.save(entry)
        return entry

    def edit_entry(self, entry_id: str, *, employee_name: str, wage: Any) -> EmployeeLedgerEntry:
        current = self.get_entry(entry_id)
        # Rows are identified by id; a rename may share (date, name) with another row.
        name = (employee_name or "").strip()
        entry = apply_wage_edit(current, employee_name=name, total=coerce_amount(wage))
        self._ledger.save(entry)
        return entry

    def delete_entry(self, entry_id: str) -> None:
        if not self._ledger.delete_by_id(entry_id):
            raise NotFoundError("Ledger entry not found.")

    def clear_all(self) -> None:
        self._ledger.clear()

    @staticmethod
    def totals(entries: Sequence[EmployeeLedgerEntry]) -> LedgerTotals:
        return LedgerTotals(
            wage=sum(e.total_amount for e in entries),
            advance=sum(e.advance_amount for e in entries),
            repay=sum(e.repay_amount for e in entries),
            balance=sum(e.balance_amount for e in entries),
        )

    def list_rows(self) -> list[LedgerRow]:
        badges: dict[str, ClassType] = self._directory.badge_lookup() if self._directory else {}
        return [
            LedgerRow(
                entry=e,
                class_type=badges.get(e.employee_name),
                date_display=format_date_display(e.date),
                total_display=format_inr(e.total_amount),
                balance_display=format_inr(e.balance_amount),
            )
            for e in self._ledger.list_all()
        ]
