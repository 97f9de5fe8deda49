# -*- coding: utf-8 -*-
"""Catalog — snapshot storage.

The whole product list is serialized under one key; no versioning.
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from ..local_store import JsonKeyValueStore
from .models import Product

logger = logging.getLogger(__name__)

_PRODUCT_LIST = TypeAdapter(List[Product])


def dump_products(products: List[Product]) -> str:
    return json.dumps(
        [p.model_dump(mode="json", by_alias=True) for p in products],
        ensure_ascii=False,
    )


def parse_products(raw: str) -> Optional[List[Product]]:
    """Parse a snapshot; ``None`` when it is not a valid product array."""
    try:
        data = json.loads(raw)
    except ValueError as exc:
        logger.warning("Catalog snapshot is not valid JSON: %s", exc)
        return None
    try:
        products = _PRODUCT_LIST.validate_python(data)
    except ValidationError as exc:
        logger.warning("Catalog snapshot failed validation (%d errors)", exc.error_count())
        return None
    ids = [p.id for p in products]
    if len(ids) != len(set(ids)):
        logger.warning("Catalog snapshot has duplicate product ids")
        return None
    return products


class CatalogStorage:
    """Interface: ``load()`` returns ``None`` when nothing usable is stored."""

    def load(self) -> Optional[List[Product]]:
        raise NotImplementedError

    def save(self, products: List[Product]) -> None:
        raise NotImplementedError


class KeyValueCatalogStorage(CatalogStorage):
    def __init__(self, store: JsonKeyValueStore, key: str) -> None:
        self.store = store
        self.key = key

    def load(self) -> Optional[List[Product]]:
        raw = self.store.get(self.key)
        if raw is None:
            return None
        return parse_products(raw)

    def save(self, products: List[Product]) -> None:
        self.store.set(self.key, dump_products(products))


class MemoryCatalogStorage(CatalogStorage):
    def __init__(self, raw: Optional[str] = None) -> None:
        self.raw = raw
        self.save_count = 0

    def load(self) -> Optional[List[Product]]:
        if self.raw is None:
            return None
        return parse_products(self.raw)

    def save(self, products: List[Product]) -> None:
        self.raw = dump_products(products)
        self.save_count += 1
