# -*- coding: utf-8 -*-
"""Process-wide tracker session (single user)."""

from __future__ import annotations

import threading
from typing import Optional

from .catalog.storage import KeyValueCatalogStorage
from .catalog.store import CatalogStore
from .config import settings
from .local_store import JsonKeyValueStore
from .tracker import TrackerSession

_session: Optional[TrackerSession] = None
_session_lock = threading.Lock()


def build_session() -> TrackerSession:
    storage = KeyValueCatalogStorage(JsonKeyValueStore(settings.store_path), settings.catalog_key)
    return TrackerSession(CatalogStore(storage), weight_jin=settings.default_weight_jin)


def get_session() -> TrackerSession:
    global _session
    with _session_lock:
        if _session is None:
            _session = build_session()
        return _session
