from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import NamedTuple, Optional

from ..common.validators import coerce_amount
from ..core.enums import ClassType


class LedgerKey(NamedTuple):
    """Upsert key of a ledger row; the row's id stays its durable identity."""

    date: str
    employee_name: str


@dataclass(frozen=True)
class EmployeeLedgerEntry:
    """Domain entity: one employee's wage, advance, repayment and balance for a day.

    Build instances through ledger.reconciliation so that
    balance_amount == total_amount - advance_amount - repay_amount.
    """

    id: str
    date: str
    employee_name: str
    total_amount: float
    advance_amount: float
    repay_amount: float
    balance_amount: float

    @property
    def key(self) -> LedgerKey:
        return LedgerKey(self.date, self.employee_name)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date,
            "employeeName": self.employee_name,
            "totalAmount": self.total_amount,
            "advanceAmount": self.advance_amount,
            "repayAmount": self.repay_amount,
            "balanceAmount": self.balance_amount,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EmployeeLedgerEntry":
        total = coerce_amount(data.get("totalAmount"))
        advance = coerce_amount(data.get("advanceAmount"))
        repay = coerce_amount(data.get("repayAmount"))
        # Balance is derived, never read back; older records may not carry it.
        return cls(
            id=str(data.get("id") or uuid.uuid4()),
            date=str(data.get("date") or ""),
            employee_name=str(data.get("employeeName") or ""),
            total_amount=total,
            advance_amount=advance,
            repay_amount=repay,
            balance_amount=total - advance - repay,
        )


@dataclass(frozen=True)
class LedgerTotals:
    wage: float = 0.0
    advance: float = 0.0
    repay: float = 0.0
    balance: float = 0.0


@dataclass(frozen=True)
class LedgerRow:
    """Read-model for one row of the Employee Ledger view."""

    entry: EmployeeLedgerEntry
    class_type: Optional[ClassType]
    date_display: str
    total_display: str
    balance_display: str
