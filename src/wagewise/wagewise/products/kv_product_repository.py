from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import PRODUCTS_KEY
from ..database.store import KeyValueStore
from .model import Product
from .repository import ProductRepository


class KeyValueProductRepository(ProductRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def _load(self) -> list[Product]:
        raw = self._store.load(PRODUCTS_KEY, [])
        if not isinstance(raw, list):
            return []
        return [Product.from_dict(r) for r in raw if isinstance(r, dict)]

    def _save(self, products: Sequence[Product]) -> None:
        self._store.save(PRODUCTS_KEY, [p.to_dict() for p in products])

    def list_all(self) -> Sequence[Product]:
        return self._load()

    def get_by_id(self, product_id: str) -> Optional[Product]:
        for p in self._load():
            if p.id == product_id:
                return p
        return None

    def add(self, product: Product) -> None:
        products = self._load()
        products.append(product)
        self._save(products)

    def delete_by_id(self, product_id: str) -> bool:
        products = self._load()
        kept = [p for p in products if p.id != product_id]
        if len(kept) == len(products):
            return False
        self._save(kept)
        return True
