from __future__ import annotations

import pandas as pd

from src.wagewise.wagewise.core.enums import AdjustableField
from src.wagewise.wagewise.ledger.kv_ledger_repository import KeyValueLedgerRepository
from src.wagewise.wagewise.ledger.report import LedgerReportService, report_to_excel
from src.wagewise.wagewise.ledger.service import LedgerService


def _seed(store):
    ledger = LedgerService(KeyValueLedgerRepository(store))
    a = ledger.record_wage_total(date="2024-01-05", employee_name="Asha", total=500)
    ledger.adjust_amount(a.id, AdjustableField.ADVANCE, 100)
    ledger.record_wage_total(date="2024-01-06", employee_name="Asha", total=300)
    ledger.record_wage_total(date="2024-01-06", employee_name="Ravi", total=900)


def test_summary_per_employee_sorted_by_balance(store):
    _seed(store)
    report = LedgerReportService(KeyValueLedgerRepository(store)).build_report()

    assert [s["employee_name"] for s in report.summary] == ["Ravi", "Asha"]
    asha = report.summary[1]
    assert asha["days"] == 2
    assert asha["total_amount"] == 800
    assert asha["balance_amount"] == 700
    assert report.rows[0]["date"] == "05/01/2024"


def test_report_filters_by_date_range(store):
    _seed(store)
    report = LedgerReportService(KeyValueLedgerRepository(store)).build_report(start="2024-01-06", end="2024-01-06")

    assert len(report.rows) == 2
    assert {r["employee_name"] for r in report.rows} == {"Asha", "Ravi"}


def test_excel_export_has_ledger_and_summary_sheets(store):
    _seed(store)
    report = LedgerReportService(KeyValueLedgerRepository(store)).build_report()

    sheets = pd.read_excel(report_to_excel(report), sheet_name=None, engine="openpyxl")

    assert set(sheets) == {"Ledger", "Summary"}
    assert list(sheets["Ledger"].columns) == ["Date", "Employee", "Wage", "Advance", "Repay", "Balance"]
    assert len(sheets["Ledger"]) == 3
