"""Seed a demo product catalog and employee directory into the configured store.

Existing products with the same name are skipped.
"""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.wagewise.wagewise.container import build_container, build_store
from src.wagewise.wagewise.core.exceptions import DuplicateNameError

DEMO_PRODUCTS = [("Bricks", 2.5), ("Tiles", 4), ("Blocks", 6.75)]
DEMO_EMPLOYEES = [("Asha", "A", "9876500001"), ("Ravi", "B", "9876500002"), ("Meena", "C", "9876500003")]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        settings.STORAGE_BACKEND,
        data_file=getattr(settings, "DATA_FILE", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    container = build_container(store=store)

    for name, rate in DEMO_PRODUCTS:
        try:
            container.product_service.add_product(name=name, rate=rate)
        except DuplicateNameError:
            pass

    known = {e.name for e in container.employee_service.list_employees()}
    for name, class_type, phone in DEMO_EMPLOYEES:
        if name not in known:
            container.employee_service.add_employee(name=name, phone=phone, class_type=class_type)

    print(f"OK: Seeded demo data -> {settings.STORAGE_BACKEND}")


if __name__ == "__main__":
    main()
