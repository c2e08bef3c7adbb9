from __future__ import annotations

import uuid
from typing import Callable, Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import ClassType
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository


def _parse_class_type(value: str | ClassType | None) -> ClassType:
    if isinstance(value, ClassType):
        return value
    if value is None or not str(value).strip():
        return ClassType.A
    try:
        return ClassType(str(value).strip().upper())
    except ValueError:
        raise ValidationError("Classification must be one of A, B, C, D.")


class EmployeeDirectoryService:
    """Use case: manage the employee directory.

    Names are not unique. Lookups by name return the first match, which is
    what the ledger uses for its classification badge.
    """

    def __init__(self, employees: EmployeeRepository, *, id_factory: Optional[Callable[[], str]] = None):
        self._employees = employees
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def add_employee(self, *, name: str, phone: str, class_type: str | ClassType | None = None) -> Employee:
        name = require_non_empty(name, "Employee name")
        phone = require_non_empty(phone, "Phone")
        employee = Employee(id=self._new_id(), name=name, class_type=_parse_class_type(class_type), phone=phone)
        self._employees.add(employee)
        return employee

    def edit_employee(
        self,
        employee_id: str,
        *,
        name: str,
        phone: str,
        class_type: str | ClassType | None = None,
    ) -> Employee:
        current = self._employees.get_by_id(employee_id)
        if not current:
            raise NotFoundError("Employee not found.")

        updated = Employee(
            id=current.id,
            name=require_non_empty(name, "Employee name"),
            class_type=_parse_class_type(class_type) if class_type else current.class_type,
            phone=require_non_empty(phone, "Phone"),
        )
        self._employees.update(updated)
        return updated

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found.")

    def find_by_name(self, name: str | None) -> Optional[Employee]:
        if not name:
            return None
        return next((e for e in self._employees.list_all() if e.name == name), None)

    def badge_lookup(self) -> dict[str, ClassType]:
        """Name -> classification for every directory name, first match wins."""
        badges: dict[str, ClassType] = {}
        for e in self._employees.list_all():
            badges.setdefault(e.name, e.class_type)
        return badges
