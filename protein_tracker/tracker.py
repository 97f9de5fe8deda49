# -*- coding: utf-8 -*-
"""
蛋白质追踪会话

持有最小的权威状态（体重、产品目录、摄入记录），
所有派生值在每次读取时通过纯函数重新计算，不缓存。
"""

from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .catalog.models import Product, ProductDraft
from .catalog.store import CatalogStore
from .intake.ledger import IntakeLedger
from .intake.models import IntakeEntry
from .tools import calculator

logger = logging.getLogger(__name__)


class ConfirmationRequired(Exception):
    """A destructive action was invoked without the user's confirmation."""


class ProductRow(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product: Product
    quantity: float
    protein_per_unit_g: float = Field(..., alias="proteinPerUnitG")
    deletable: bool


class BreakdownRow(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId")
    name: str
    quantity: float
    unit_name: str = Field(..., alias="unitName")
    protein_g: float = Field(..., alias="proteinG")


class Dashboard(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    weight_jin: float = Field(..., alias="weightJin")
    weight_kg: float = Field(..., alias="weightKg")
    daily_target_g: float = Field(..., alias="dailyTargetG")
    total_intake_g: float = Field(..., alias="totalIntakeG")
    remaining_g: float = Field(..., alias="remainingG")
    achievement_ratio: float = Field(..., alias="achievementRatio")
    achievement_percent: int = Field(..., alias="achievementPercent")
    products: List[ProductRow]
    breakdown: List[BreakdownRow]


class TrackerSession:
    """Single-user session; every operation runs under one re-entrant lock.

    FastAPI runs sync handlers in a threadpool, so requests can overlap.
    """

    def __init__(self, catalog: CatalogStore, weight_jin: float = 30.0) -> None:
        self.catalog = catalog
        self.ledger = IntakeLedger()
        self._weight_jin = max(0.0, weight_jin)
        self._lock = threading.RLock()
        self._sync()

    def _sync(self) -> None:
        added = self.ledger.reconcile(self.catalog.products)
        if added:
            logger.debug("Ledger reconciled, new entries: %s", added)

    # ---- weight ----

    @property
    def weight_jin(self) -> float:
        return self._weight_jin

    def set_weight(self, weight_jin: float) -> float:
        with self._lock:
            self._weight_jin = max(0.0, weight_jin)
            return self._weight_jin

    def daily_target(self) -> float:
        return calculator.daily_target(self._weight_jin)

    # ---- catalog ----

    def products(self) -> List[Product]:
        with self._lock:
            return self.catalog.products

    def get_product(self, product_id: str) -> Optional[Product]:
        with self._lock:
            return self.catalog.get(product_id)

    def add_product(self, draft: ProductDraft) -> Optional[Product]:
        with self._lock:
            product = self.catalog.add(draft)
            self._sync()
            return product

    def remove_product(self, product_id: str, *, confirmed: bool) -> bool:
        if not confirmed:
            raise ConfirmationRequired(f"Removing {product_id} requires confirmation")
        with self._lock:
            removed = self.catalog.remove(product_id)
            if removed:
                self.ledger.forget(product_id)
            self._sync()
            return removed

    # ---- ledger ----

    def entries(self) -> List[IntakeEntry]:
        with self._lock:
            return self.ledger.entries

    def adjust(self, product_id: str, delta: float = calculator.ADJUST_STEP) -> Optional[IntakeEntry]:
        with self._lock:
            return self.ledger.adjust(product_id, delta)

    def set_exact(self, product_id: str, value: Any) -> Optional[IntakeEntry]:
        with self._lock:
            return self.ledger.set_exact(product_id, value)

    def reset_all(self, *, confirmed: bool) -> List[IntakeEntry]:
        if not confirmed:
            raise ConfirmationRequired("Resetting today's intake requires confirmation")
        with self._lock:
            self.ledger.reset_all()
            logger.info("Reset all intake quantities")
            return self.ledger.entries

    # ---- derived ----

    def total_intake(self) -> float:
        with self._lock:
            return calculator.total_intake(self.ledger.entries, self.catalog.products)

    def dashboard(self) -> Dashboard:
        with self._lock:
            products = self.catalog.products
            entries = self.ledger.entries
            quantities = {e.product_id: e.quantity for e in entries}
            weight_jin = self._weight_jin

        target = calculator.daily_target(weight_jin)
        total = calculator.total_intake(entries, products)
        rows = [
            ProductRow(
                product=p,
                quantity=quantities.get(p.id, 0.0),
                protein_per_unit_g=round(calculator.protein_per_unit(p), 2),
                deletable=not self.catalog.is_protected(p.id),
            )
            for p in products
        ]
        breakdown = [
            BreakdownRow(
                product_id=line.product_id,
                name=line.name,
                quantity=line.quantity,
                unit_name=line.unit_name,
                protein_g=round(line.protein_g, 2),
            )
            for line in calculator.intake_breakdown(entries, products)
        ]
        return Dashboard(
            weight_jin=weight_jin,
            weight_kg=calculator.jin_to_kg(weight_jin),
            daily_target_g=target,
            total_intake_g=round(total, 2),
            remaining_g=round(calculator.remaining_protein(total, target), 2),
            achievement_ratio=calculator.achievement_ratio(total, target),
            achievement_percent=calculator.achievement_percent(total, target),
            products=rows,
            breakdown=breakdown,
        )
