# -*- coding: utf-8 -*-
"""Local key-value store — a JSON object on disk, overwritten wholesale on every write."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


class JsonKeyValueStore:
    """String values keyed by name, like a browser's localStorage."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._lock = threading.Lock()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable store %s, treating as empty: %s", self.path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Store %s is not a JSON object, treating as empty", self.path)
            return {}
        return {str(k): v for k, v in raw.items() if isinstance(v, str)}

    def _write_all(self, data: Dict[str, str]) -> None:
        _ensure_dir(self.path.parent)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read_all()
            data[key] = value
            self._write_all(data)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._read_all()
            if data.pop(key, None) is not None:
                self._write_all(data)
