from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from .store import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """All records in a single JSON object on disk.

    The file is read fully on every load and rewritten wholesale on every
    save; the last writer wins.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def _read_all(self) -> dict[str, Any]:
        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("Data file %s is unreadable, treating it as empty", self._path)
            return {}

        if not isinstance(data, dict):
            logger.warning("Data file %s does not hold an object, treating it as empty", self._path)
            return {}
        return data

    def load(self, key: str, default: Any = None) -> Any:
        data = self._read_all()
        if key not in data:
            return copy.deepcopy(default)
        return data[key]

    def save(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value

        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=self._path.name, suffix=".tmp", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except Exception:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
