from __future__ import annotations

import pytest

from src.wagewise.wagewise.core.constants import DAILY_LOGS_KEY, NAME_HISTORY_KEY
from src.wagewise.wagewise.core.enums import AdjustableField
from src.wagewise.wagewise.core.exceptions import RequiredFieldError, ValidationError


@pytest.fixture
def catalog(container):
    bricks = container.product_service.add_product(name="Bricks", rate=2.5)
    tiles = container.product_service.add_product(name="Tiles", rate=4)
    return bricks, tiles


def test_load_without_saved_entry_is_all_zero(container, catalog):
    sheet = container.daily_log_service.load_sheet(date="2024-01-05", employee_name="Asha")

    assert [line.meter for line in sheet.lines] == ["0", "0"]
    assert sheet.grand_total == 0
    assert sheet.saved is False


def test_date_defaults_to_today(container, catalog):
    assert container.daily_log_service.load_sheet(date=None, employee_name="").date == "2024-01-10"


def test_future_date_is_rejected(container, catalog):
    with pytest.raises(ValidationError):
        container.daily_log_service.load_sheet(date="2024-01-11", employee_name="Asha")


def test_save_creates_log_and_ledger_row(container, store, catalog):
    bricks, tiles = catalog

    sheet = container.daily_log_service.save_entries(
        date="2024-01-05",
        employee_name=" Asha ",
        meters={bricks.id: "200", tiles.id: "abc"},
    )

    assert sheet.grand_total == 500
    assert sheet.saved is True

    logs = store.load(DAILY_LOGS_KEY, {})
    assert logs["2024-01-05"] == [
        {
            "employeeName": "Asha",
            "meters": {bricks.id: "200", tiles.id: "abc"},
            "date": "2024-01-05",
            "grandTotal": 500.0,
        }
    ]

    (entry,) = container.ledger_service.list_entries()
    assert (entry.date, entry.employee_name) == ("2024-01-05", "Asha")
    assert (entry.total_amount, entry.advance_amount, entry.repay_amount, entry.balance_amount) == (500, 0, 0, 500)


def test_resave_replaces_log_and_keeps_ledger_adjustments(container, store, catalog):
    bricks, tiles = catalog
    svc = container.daily_log_service

    svc.save_entries(date="2024-01-05", employee_name="Asha", meters={bricks.id: "200"})
    entry = container.ledger_service.list_entries()[0]
    container.ledger_service.adjust_amount(entry.id, AdjustableField.ADVANCE, 100)
    container.ledger_service.adjust_amount(entry.id, AdjustableField.REPAY, 50)

    svc.save_entries(date="2024-01-05", employee_name="Asha", meters={bricks.id: "200", tiles.id: "30"})

    assert len(store.load(DAILY_LOGS_KEY, {})["2024-01-05"]) == 1
    (updated,) = container.ledger_service.list_entries()
    assert updated.id == entry.id
    assert updated.total_amount == 620
    assert (updated.advance_amount, updated.repay_amount) == (100, 50)
    assert updated.balance_amount == 470


def test_load_returns_saved_meters(container, catalog):
    bricks, tiles = catalog
    container.daily_log_service.save_entries(date="2024-01-05", employee_name="Asha", meters={tiles.id: "7"})

    sheet = container.daily_log_service.load_sheet(date="2024-01-05", employee_name="Asha")

    assert sheet.meters == {bricks.id: "0", tiles.id: "7"}
    assert sheet.grand_total == 28
    assert sheet.saved is True


def test_save_requires_employee_name(container, store, catalog):
    bricks, _ = catalog
    with pytest.raises(RequiredFieldError):
        container.daily_log_service.save_entries(date="2024-01-05", employee_name="  ", meters={bricks.id: "1"})

    assert store.load(DAILY_LOGS_KEY, {}) == {}
    assert container.ledger_service.list_entries() == []


def test_reset_does_not_persist(container, store, catalog):
    bricks, _ = catalog
    svc = container.daily_log_service
    svc.save_entries(date="2024-01-05", employee_name="Asha", meters={bricks.id: "10"})

    sheet = svc.reset_meters(date="2024-01-05", employee_name="Asha")

    assert sheet.grand_total == 0
    assert svc.load_sheet(date="2024-01-05", employee_name="Asha").grand_total == 25


def test_name_history_is_most_recent_first_and_capped(container, store, catalog):
    svc = container.daily_log_service
    for i in range(25):
        svc.save_entries(date="2024-01-05", employee_name=f"W{i}", meters={})
    svc.save_entries(date="2024-01-06", employee_name="W10", meters={})

    names = store.load(NAME_HISTORY_KEY, [])
    assert len(names) == 20
    assert names[0] == "W10"
    assert names.count("W10") == 1
    assert names[1] == "W24"


def test_meters_of_deleted_products_are_kept_but_not_counted(container, store, catalog):
    bricks, tiles = catalog
    svc = container.daily_log_service
    svc.save_entries(date="2024-01-05", employee_name="Asha", meters={bricks.id: "10", tiles.id: "5"})

    container.product_service.delete_product(tiles.id)
    sheet = svc.save_entries(date="2024-01-05", employee_name="Asha", meters={bricks.id: "10"})

    assert sheet.grand_total == 25
    stored = store.load(DAILY_LOGS_KEY, {})["2024-01-05"][0]["meters"]
    assert stored == {bricks.id: "10", tiles.id: "5"}


def test_save_after_reset_writes_exactly_the_submitted_meters(container, store, catalog):
    bricks, tiles = catalog
    svc = container.daily_log_service
    svc.save_entries(date="2024-01-05", employee_name="Asha", meters={bricks.id: "10", tiles.id: "5"})
    container.product_service.delete_product(tiles.id)

    sheet = svc.reset_meters(date="2024-01-05", employee_name="Asha")
    assert sheet.reset is True

    svc.save_entries(date="2024-01-05", employee_name="Asha", meters=sheet.meters, keep_stored=False)

    stored = store.load(DAILY_LOGS_KEY, {})["2024-01-05"][0]["meters"]
    assert stored == {bricks.id: "0"}
    assert container.ledger_service.list_entries()[0].total_amount == 0
