from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Sequence

import pandas as pd

from ..common.datetime_utils import format_date_display
from .model import EmployeeLedgerEntry
from .repository import LedgerRepository

EXPORT_FIELDS = [
    "date",
    "employee_name",
    "total_amount",
    "advance_amount",
    "repay_amount",
    "balance_amount",
]

EXCEL_HEADERS = {
    "date": "Date",
    "employee_name": "Employee",
    "total_amount": "Wage",
    "advance_amount": "Advance",
    "repay_amount": "Repay",
    "balance_amount": "Balance",
}


@dataclass(frozen=True)
class LedgerReport:
    rows: list[dict]
    summary: list[dict]


class LedgerReportService:
    def __init__(self, ledger: LedgerRepository):
        self._ledger = ledger

    def build_report(self, *, start: str | None = None, end: str | None = None) -> LedgerReport:
        """Rows between start and end (inclusive, YYYY-MM-DD) plus a per-employee summary."""

        entries: Sequence[EmployeeLedgerEntry] = [
            e
            for e in self._ledger.list_all()
            if (not start or e.date >= start) and (not end or e.date <= end)
        ]

        out_rows: list[dict] = []
        summary_map: dict[str, dict] = {}

        for e in entries:
            out_rows.append(
                {
                    "date": format_date_display(e.date),
                    "employee_name": e.employee_name,
                    "total_amount": round(e.total_amount, 2),
                    "advance_amount": round(e.advance_amount, 2),
                    "repay_amount": round(e.repay_amount, 2),
                    "balance_amount": round(e.balance_amount, 2),
                }
            )

            s = summary_map.get(e.employee_name)
            if not s:
                s = {
                    "employee_name": e.employee_name,
                    "days": 0,
                    "total_amount": 0.0,
                    "advance_amount": 0.0,
                    "repay_amount": 0.0,
                    "balance_amount": 0.0,
                }
                summary_map[e.employee_name] = s
            s["days"] += 1
            s["total_amount"] += e.total_amount
            s["advance_amount"] += e.advance_amount
            s["repay_amount"] += e.repay_amount
            s["balance_amount"] += e.balance_amount

        summary = sorted(summary_map.values(), key=lambda x: x["balance_amount"], reverse=True)
        return LedgerReport(rows=out_rows, summary=summary)


def report_to_excel(report: LedgerReport) -> io.BytesIO:
    """Write ledger rows and the per-employee summary to an in-memory .xlsx file."""

    rows = pd.DataFrame(report.rows, columns=EXPORT_FIELDS).rename(columns=EXCEL_HEADERS)
    summary = pd.DataFrame(
        report.summary,
        columns=["employee_name", "days", "total_amount", "advance_amount", "repay_amount", "balance_amount"],
    ).rename(columns={**EXCEL_HEADERS, "days": "Days"})

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        rows.to_excel(writer, index=False, sheet_name="Ledger")
        summary.to_excel(writer, index=False, sheet_name="Summary")

    output.seek(0)
    return output
