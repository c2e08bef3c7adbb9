"""Example: using the service layer without Flask.

Controllers are a thin layer; the wage and ledger rules live in the services.
"""

from src.wagewise.wagewise.container import build_container
from src.wagewise.wagewise.database.memory_store import InMemoryKeyValueStore


def main():
    container = build_container(store=InMemoryKeyValueStore())
    bricks = container.product_service.add_product(name="Bricks", rate=2.5)

    container.daily_log_service.save_entries(date=None, employee_name="Asha", meters={bricks.id: "200"})
    entry = container.ledger_service.list_entries()[0]
    container.ledger_service.adjust_amount(entry.id, "advanceAmount", "100")

    for row in container.ledger_service.list_rows():
        print(row.date_display, row.entry.employee_name, row.total_display, row.balance_display)


if __name__ == "__main__":
    main()
