from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from .core.constants import DEFAULT_NAME_HISTORY_LIMIT
from .core.enums import StorageBackend
from .daily_logs.kv_daily_log_repository import KeyValueDailyLogRepository
from .daily_logs.name_history import NameHistory
from .daily_logs.service import DailyLogService
from .database.connection import DBConfig, DatabaseConnection
from .database.json_store import JsonFileKeyValueStore
from .database.memory_store import InMemoryKeyValueStore
from .database.mysql_store import MySQLKeyValueStore
from .database.store import KeyValueStore
from .employees.kv_employee_repository import KeyValueEmployeeRepository
from .employees.service import EmployeeDirectoryService
from .ledger.kv_ledger_repository import KeyValueLedgerRepository
from .ledger.report import LedgerReportService
from .ledger.service import LedgerService
from .products.kv_product_repository import KeyValueProductRepository
from .products.service import ProductService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    products_repo: KeyValueProductRepository
    daily_logs_repo: KeyValueDailyLogRepository
    ledger_repo: KeyValueLedgerRepository
    employees_repo: KeyValueEmployeeRepository
    name_history: NameHistory

    product_service: ProductService
    employee_service: EmployeeDirectoryService
    ledger_service: LedgerService
    ledger_report_service: LedgerReportService
    daily_log_service: DailyLogService


def build_store(
    backend: str | StorageBackend,
    *,
    data_file: Optional[str | Path] = None,
    db_config: Optional[dict] = None,
) -> KeyValueStore:
    backend = StorageBackend(str(getattr(backend, "value", backend)).lower())

    if backend == StorageBackend.MEMORY:
        return InMemoryKeyValueStore()
    if backend == StorageBackend.MYSQL:
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql storage backend")
        return MySQLKeyValueStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    if not data_file:
        raise ValueError("DATA_FILE is required for the json storage backend")
    return JsonFileKeyValueStore(data_file)


def build_container(
    *,
    store: KeyValueStore,
    name_history_limit: int = DEFAULT_NAME_HISTORY_LIMIT,
    today: Optional[Callable[[], date]] = None,
) -> Container:
    products_repo = KeyValueProductRepository(store)
    daily_logs_repo = KeyValueDailyLogRepository(store)
    ledger_repo = KeyValueLedgerRepository(store)
    employees_repo = KeyValueEmployeeRepository(store)
    name_history = NameHistory(store, limit=name_history_limit)

    product_service = ProductService(products_repo)
    employee_service = EmployeeDirectoryService(employees_repo)
    ledger_service = LedgerService(ledger_repo, employee_service)
    ledger_report_service = LedgerReportService(ledger_repo)
    daily_log_service = DailyLogService(daily_logs_repo, products_repo, name_history, ledger_service, today=today)

    return Container(
        store=store,
        products_repo=products_repo,
        daily_logs_repo=daily_logs_repo,
        ledger_repo=ledger_repo,
        employees_repo=employees_repo,
        name_history=name_history,
        product_service=product_service,
        employee_service=employee_service,
        ledger_service=ledger_service,
        ledger_report_service=ledger_report_service,
        daily_log_service=daily_log_service,
    )
