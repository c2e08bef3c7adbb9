from src.wagewise.wagewise.core.enums import AdjustableField
from src.wagewise.wagewise.ledger.model import EmployeeLedgerEntry
from src.wagewise.wagewise.ledger.reconciliation import (
    apply_adjustment,
    apply_wage_edit,
    apply_wage_total,
    compute_balance,
)


def _entry(**overrides) -> EmployeeLedgerEntry:
    data = dict(
        id="e1",
        date="2024-01-05",
        employee_name="Asha",
        total_amount=620.0,
        advance_amount=100.0,
        repay_amount=50.0,
        balance_amount=470.0,
    )
    data.update(overrides)
    return EmployeeLedgerEntry(**data)


def test_new_row_from_wage_total():
    entry = apply_wage_total(None, entry_id="e1", date="2024-01-05", employee_name="Asha", total=500)

    assert (entry.advance_amount, entry.repay_amount, entry.balance_amount) == (0, 0, 500)


def test_wage_total_keeps_advance_and_repay():
    existing = _entry(total_amount=500, balance_amount=350)

    entry = apply_wage_total(existing, entry_id="ignored", date="2024-01-05", employee_name="Asha", total=620)

    assert entry.id == "e1"
    assert entry.total_amount == 620
    assert (entry.advance_amount, entry.repay_amount) == (100, 50)
    assert entry.balance_amount == 470


def test_adjust_advance_uses_current_total_and_repay():
    entry = apply_adjustment(_entry(advance_amount=0, balance_amount=570), AdjustableField.ADVANCE, 200)

    assert entry.advance_amount == 200
    assert entry.repay_amount == 50
    assert entry.balance_amount == 370


def test_adjust_repay():
    entry = apply_adjustment(_entry(), AdjustableField.REPAY, 0)
    assert entry.balance_amount == 520


def test_wage_edit_replaces_name_and_total():
    entry = apply_wage_edit(_entry(), employee_name="Asha K", total=100)

    assert entry.employee_name == "Asha K"
    assert entry.total_amount == 100
    assert entry.balance_amount == -50


def test_negative_balance_is_not_clamped():
    assert compute_balance(10, 40, 5) == -35
