"""Ledger balance reconciliation.

Every function returns a whole new entry whose balance was computed together
with the field that changed, so a stored row is never partially updated.
Negative balances are kept as they are.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..core.enums import AdjustableField
from .model import EmployeeLedgerEntry


def compute_balance(total: float, advance: float, repay: float) -> float:
    return total - advance - repay


def apply_wage_total(
    existing: Optional[EmployeeLedgerEntry],
    *,
    entry_id: str,
    date: str,
    employee_name: str,
    total: float,
) -> EmployeeLedgerEntry:
    """Propagate a saved daily-log grand total into the ledger row for (date, name)."""
    if existing is None:
        return EmployeeLedgerEntry(
            id=entry_id,
            date=date,
            employee_name=employee_name,
            total_amount=total,
            advance_amount=0.0,
            repay_amount=0.0,
            balance_amount=total,
        )

    return replace(
        existing,
        total_amount=total,
        balance_amount=compute_balance(total, existing.advance_amount, existing.repay_amount),
    )


def apply_adjustment(entry: EmployeeLedgerEntry, field: AdjustableField, value: float) -> EmployeeLedgerEntry:
    advance = value if field == AdjustableField.ADVANCE else entry.advance_amount
    repay = value if field == AdjustableField.REPAY else entry.repay_amount
    return replace(
        entry,
        advance_amount=advance,
        repay_amount=repay,
        balance_amount=compute_balance(entry.total_amount, advance, repay),
    )


def apply_wage_edit(entry: EmployeeLedgerEntry, *, employee_name: str, total: float) -> EmployeeLedgerEntry:
    return replace(
        entry,
        employee_name=employee_name,
        total_amount=total,
        balance_amount=compute_balance(total, entry.advance_amount, entry.repay_amount),
    )
