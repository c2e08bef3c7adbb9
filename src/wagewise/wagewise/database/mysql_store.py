from __future__ import annotations

import copy
import json
import logging
from typing import Any

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchone
from .store import KeyValueStore

logger = logging.getLogger(__name__)


class MySQLKeyValueStore(KeyValueStore):
    """Records kept as JSON text in the kv_store table (see database/schema.sql)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self, key: str, default: Any = None) -> Any:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT store_value FROM kv_store WHERE store_key=%s", (key,))
            row = fetchone(cur)

        if not row or row.get("store_value") is None:
            return copy.deepcopy(default)
        try:
            return json.loads(row["store_value"])
        except ValueError:
            logger.warning("Ignoring corrupt kv_store row %r", key)
            return copy.deepcopy(default)

    def save(self, key: str, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store(store_key, store_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                """,
                (key, payload),
            )
