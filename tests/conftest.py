from __future__ import annotations

import itertools
from datetime import date

import pytest

from src.wagewise.wagewise.container import build_container
from src.wagewise.wagewise.database.memory_store import InMemoryKeyValueStore


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 1, 10)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def container(store, fixed_today):
    # "today" is pinned so date validation does not depend on the machine clock.
    return build_container(store=store, today=lambda: fixed_today)


@pytest.fixture
def app(monkeypatch, store):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.wagewise.wagewise.main import create_app

    return create_app(store=store)


@pytest.fixture
def client(app):
    return app.test_client()
