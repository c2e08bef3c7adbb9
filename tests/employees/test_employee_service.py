from __future__ import annotations

import pytest

from src.wagewise.wagewise.core.constants import EMPLOYEES_KEY
from src.wagewise.wagewise.core.enums import ClassType
from src.wagewise.wagewise.core.exceptions import NotFoundError, RequiredFieldError, ValidationError
from src.wagewise.wagewise.database.memory_store import InMemoryKeyValueStore
from src.wagewise.wagewise.employees.kv_employee_repository import KeyValueEmployeeRepository
from src.wagewise.wagewise.employees.service import EmployeeDirectoryService


@pytest.fixture
def svc(store, sequential_ids):
    return EmployeeDirectoryService(KeyValueEmployeeRepository(store), id_factory=sequential_ids)


def test_add_defaults_classification_to_a(svc, store):
    emp = svc.add_employee(name="Asha", phone="98765")

    assert emp.class_type == ClassType.A
    assert store.load(EMPLOYEES_KEY, []) == [{"id": "id-1", "name": "Asha", "classType": "A", "phone": "98765"}]


@pytest.mark.parametrize("name,phone", [("", "1"), ("Asha", " ")])
def test_add_requires_name_and_phone(svc, name, phone):
    with pytest.raises(RequiredFieldError):
        svc.add_employee(name=name, phone=phone)


def test_add_rejects_unknown_classification(svc):
    with pytest.raises(ValidationError):
        svc.add_employee(name="Asha", phone="1", class_type="Z")


def test_edit_in_place(svc):
    emp = svc.add_employee(name="Asha", phone="1", class_type="b")

    updated = svc.edit_employee(emp.id, name="Asha K", phone="2", class_type="D")

    assert updated.id == emp.id
    assert [(e.name, e.class_type, e.phone) for e in svc.list_employees()] == [("Asha K", ClassType.D, "2")]


def test_edit_missing_employee(svc):
    with pytest.raises(NotFoundError):
        svc.edit_employee("nope", name="A", phone="1")


def test_delete(svc):
    emp = svc.add_employee(name="Asha", phone="1")
    svc.delete_employee(emp.id)
    assert svc.list_employees() == []


def test_duplicate_names_allowed_and_first_match_wins(svc):
    svc.add_employee(name="Ravi", phone="1", class_type="C")
    svc.add_employee(name="Ravi", phone="2", class_type="B")

    assert len(svc.list_employees()) == 2
    assert svc.find_by_name("Ravi").class_type == ClassType.C
    assert svc.badge_lookup() == {"Ravi": ClassType.C}
    assert svc.find_by_name("Nobody") is None


def test_unknown_stored_classification_reads_as_a():
    store = InMemoryKeyValueStore({EMPLOYEES_KEY: '[{"id": "e1", "name": "Old", "phone": "1", "classType": "X"}]'})
    assert KeyValueEmployeeRepository(store).list_all()[0].class_type == ClassType.A
