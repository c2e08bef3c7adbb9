from __future__ import annotations

import pytest

from src.wagewise.wagewise.core.constants import PRODUCTS_KEY
from src.wagewise.wagewise.core.exceptions import (
    DuplicateNameError,
    InvalidNumberError,
    LengthExceededError,
    NotFoundError,
    RequiredFieldError,
)
from src.wagewise.wagewise.database.memory_store import InMemoryKeyValueStore
from src.wagewise.wagewise.products.kv_product_repository import KeyValueProductRepository
from src.wagewise.wagewise.products.service import ProductService


@pytest.fixture
def svc(store, sequential_ids):
    return ProductService(KeyValueProductRepository(store), id_factory=sequential_ids)


def test_add_product_trims_name_and_parses_rate(svc, store):
    product = svc.add_product(name="  Bricks ", rate="2.50")

    assert product.id == "id-1"
    assert product.name == "Bricks"
    assert product.rate == 2.5
    assert store.load(PRODUCTS_KEY, []) == [{"id": "id-1", "name": "Bricks", "rate": 2.5}]


def test_duplicate_name_is_rejected_case_insensitively(svc):
    svc.add_product(name="Bricks", rate=2)

    with pytest.raises(DuplicateNameError):
        svc.add_product(name="bricks", rate=3)

    assert [p.name for p in svc.list_products()] == ["Bricks"]


@pytest.mark.parametrize("rate", ["-5", -5, "abc", "", None])
def test_invalid_rate_is_rejected(svc, rate):
    with pytest.raises(InvalidNumberError):
        svc.add_product(name="Tiles", rate=rate)
    assert svc.list_products() == []


def test_zero_rate_is_allowed(svc):
    assert svc.add_product(name="Samples", rate="0").rate == 0


def test_empty_name_is_rejected(svc):
    with pytest.raises(RequiredFieldError):
        svc.add_product(name="   ", rate=1)


def test_name_longer_than_50_is_rejected(svc):
    svc.add_product(name="x" * 50, rate=1)
    with pytest.raises(LengthExceededError):
        svc.add_product(name="y" * 51, rate=1)


def test_delete_product(svc):
    bricks = svc.add_product(name="Bricks", rate=2)
    tiles = svc.add_product(name="Tiles", rate=4)

    svc.delete_product(bricks.id)

    assert [p.id for p in svc.list_products()] == [tiles.id]
    with pytest.raises(NotFoundError):
        svc.delete_product(bricks.id)


def test_records_without_id_or_rate_still_load():
    store = InMemoryKeyValueStore({PRODUCTS_KEY: '[{"name": "Old"}]'})
    products = KeyValueProductRepository(store).list_all()

    assert products[0].name == "Old"
    assert products[0].rate == 0
    assert products[0].id
