# -*- coding: utf-8 -*-
"""Catalog — in-memory product list, snapshotted on every mutation."""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from .models import SEED_PRODUCT_IDS, SEED_PRODUCTS, Product, ProductDraft
from .storage import CatalogStorage

logger = logging.getLogger(__name__)


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class CatalogStore:
    def __init__(self, storage: CatalogStorage, clock: Callable[[], int] = _epoch_ms) -> None:
        self._storage = storage
        self._clock = clock
        loaded = storage.load()
        if loaded is None:
            logger.info("No usable catalog snapshot, seeding %d default products", len(SEED_PRODUCTS))
            self._products: List[Product] = list(SEED_PRODUCTS)
        else:
            self._products = loaded
        self._save()

    @property
    def products(self) -> List[Product]:
        return list(self._products)

    def get(self, product_id: str) -> Optional[Product]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def is_protected(self, product_id: str) -> bool:
        return product_id in SEED_PRODUCT_IDS

    def _next_id(self) -> str:
        stamp = self._clock()
        taken = {p.id for p in self._products}
        while f"custom-{stamp}" in taken:
            stamp += 1
        return f"custom-{stamp}"

    def _save(self) -> None:
        self._storage.save(self._products)

    def add(self, draft: ProductDraft) -> Optional[Product]:
        if not draft.name.strip():
            return None
        product = Product(
            id=self._next_id(),
            name=draft.name,
            protein_percentage=draft.protein_percentage,
            unit_weight=draft.unit_weight,
            unit_name=draft.unit_name,
        )
        self._products.append(product)
        self._save()
        logger.info("Added product %s (%s)", product.id, product.name)
        return product

    def remove(self, product_id: str) -> bool:
        if self.is_protected(product_id):
            logger.info("Refusing to remove seed product %s", product_id)
            return False
        remaining = [p for p in self._products if p.id != product_id]
        if len(remaining) == len(self._products):
            return False
        self._products = remaining
        self._save()
        logger.info("Removed product %s", product_id)
        return True
