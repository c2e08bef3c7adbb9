from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import EMPLOYEES_KEY
from ..database.store import KeyValueStore
from .model import Employee
from .repository import EmployeeRepository


class KeyValueEmployeeRepository(EmployeeRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def _load(self) -> list[Employee]:
        raw = self._store.load(EMPLOYEES_KEY, [])
        if not isinstance(raw, list):
            return []
        return [Employee.from_dict(r) for r in raw if isinstance(r, dict)]

    def _save(self, employees: Sequence[Employee]) -> None:
        self._store.save(EMPLOYEES_KEY, [e.to_dict() for e in employees])

    def list_all(self) -> Sequence[Employee]:
        return self._load()

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self._load() if e.id == employee_id), None)

    def add(self, employee: Employee) -> None:
        employees = self._load()
        employees.append(employee)
        self._save(employees)

    def update(self, employee: Employee) -> bool:
        employees = self._load()
        for i, e in enumerate(employees):
            if e.id == employee.id:
                employees[i] = employee
                self._save(employees)
                return True
        return False

    def delete_by_id(self, employee_id: str) -> bool:
        employees = self._load()
        kept = [e for e in employees if e.id != employee_id]
        if len(kept) == len(employees):
            return False
        self._save(kept)
        return True
