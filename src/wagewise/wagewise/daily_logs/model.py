from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from ..common.validators import coerce_amount
from ..products.model import Product


class DailyLogKey(NamedTuple):
    """At most one daily log entry exists per (date, employee name)."""

    date: str
    employee_name: str


@dataclass(frozen=True)
class DailyLogEntry:
    """Domain entity: one employee's meter readings for one day.

    meters keeps the readings as entered (product id -> text), so a value the
    user typed is shown back unchanged; totals are computed from it.
    """

    employee_name: str
    date: str
    meters: dict[str, str] = field(default_factory=dict)
    grand_total: float = 0.0

    @property
    def key(self) -> DailyLogKey:
        return DailyLogKey(self.date, self.employee_name)

    def to_dict(self) -> dict:
        return {
            "employeeName": self.employee_name,
            "meters": dict(self.meters),
            "date": self.date,
            "grandTotal": self.grand_total,
        }

    @classmethod
    def from_dict(cls, data: dict, *, date: str | None = None) -> "DailyLogEntry":
        meters = data.get("meters")
        if not isinstance(meters, dict):
            meters = {}
        return cls(
            employee_name=str(data.get("employeeName") or ""),
            date=str(data.get("date") or date or ""),
            meters={str(k): "" if v is None else str(v) for k, v in meters.items()},
            grand_total=coerce_amount(data.get("grandTotal")),
        )


@dataclass(frozen=True)
class ProductLine:
    """Read-model: one row of the meter table."""

    product: Product
    meter: str
    meter_value: float
    row_total: float


@dataclass(frozen=True)
class DailyLogSheet:
    """Read-model for the Daily Log view."""

    date: str
    employee_name: str
    lines: list[ProductLine]
    grand_total: float
    saved: bool = False
    # Meters were cleared in this edit; saving must not bring back stored readings.
    reset: bool = False

    @property
    def meters(self) -> dict[str, str]:
        return {line.product.id: line.meter for line in self.lines}
