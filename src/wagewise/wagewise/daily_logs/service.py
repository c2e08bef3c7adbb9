from __future__ import annotations

from datetime import date as date_type
from typing import Callable, Mapping, Optional, Sequence

from ..common.datetime_utils import require_log_date, today_local
from ..common.validators import require_non_empty
from ..ledger.service import LedgerService
from ..products.repository import ProductRepository
from .calculator.base import WageCalculator
from .calculator.meter_rate_calculator import MeterRateCalculator
from .model import DailyLogEntry, DailyLogKey, DailyLogSheet
from .name_history import NameHistory
from .repository import DailyLogRepository


class DailyLogService:
    """Use case: enter meter readings for an employee and day, and save them.

    Saving writes the daily log, remembers the employee name and propagates
    the grand total into the employee ledger.
    """

    def __init__(
        self,
        logs: DailyLogRepository,
        products: ProductRepository,
        history: NameHistory,
        ledger: LedgerService,
        *,
        calculator: Optional[WageCalculator] = None,
        today: Optional[Callable[[], date_type]] = None,
    ):
        self._logs = logs
        self._products = products
        self._history = history
        self._ledger = ledger
        self._calculator = calculator or MeterRateCalculator()
        self._today = today or today_local

    def name_history(self) -> Sequence[str]:
        return self._history.list_names()

    def compute_sheet(
        self,
        *,
        date: Optional[str],
        employee_name: str,
        meters: Mapping[str, str],
        saved: bool = False,
        reset: bool = False,
    ) -> DailyLogSheet:
        log_date = require_log_date(date, today=self._today())
        lines = [self._calculator.line_for(p, meters.get(p.id)) for p in self._products.list_all()]
        return DailyLogSheet(
            date=log_date,
            employee_name=(employee_name or "").strip(),
            lines=lines,
            grand_total=self._calculator.grand_total(lines),
            saved=saved,
            reset=reset,
        )

    def load_sheet(self, *, date: Optional[str], employee_name: str) -> DailyLogSheet:
        """Meters saved for (date, employee), or all zero when nothing was saved."""

        log_date = require_log_date(date, today=self._today())
        name = (employee_name or "").strip()
        entry = self._logs.get(DailyLogKey(log_date, name)) if name else None
        return self.compute_sheet(
            date=log_date,
            employee_name=name,
            meters=entry.meters if entry else {},
            saved=entry is not None,
        )

    def reset_meters(self, *, date: Optional[str], employee_name: str) -> DailyLogSheet:
        """All meters back to zero; nothing is persisted."""

        return self.compute_sheet(date=date, employee_name=employee_name, meters={}, reset=True)

    def save_entries(
        self,
        *,
        date: Optional[str],
        employee_name: str,
        meters: Mapping[str, str],
        keep_stored: bool = True,
    ) -> DailyLogSheet:
        """Persist the sheet and propagate its grand total to the ledger.

        With ``keep_stored`` readings already saved for products missing from
        ``meters`` are carried over; after a reset the entry holds exactly the
        submitted meters.
        """
        name = require_non_empty(employee_name, "Employee name")
        sheet = self.compute_sheet(date=date, employee_name=name, meters=meters)

        # Readings for products no longer in the catalog stay stored but count for nothing.
        existing = self._logs.get(DailyLogKey(sheet.date, name)) if keep_stored else None
        stored = dict(existing.meters) if existing else {}
        stored.update({str(k): str(v) for k, v in meters.items()})
        stored.update(sheet.meters)

        self._logs.upsert(
            DailyLogEntry(
                employee_name=name,
                date=sheet.date,
                meters=stored,
                grand_total=sheet.grand_total,
            )
        )
        self._history.remember(name)
        self._ledger.record_wage_total(date=sheet.date, employee_name=name, total=sheet.grand_total)

        return DailyLogSheet(
            date=sheet.date,
            employee_name=name,
            lines=sheet.lines,
            grand_total=sheet.grand_total,
            saved=True,
        )
