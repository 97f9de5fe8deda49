# -*- coding: utf-8 -*-
"""Intake — ledger of one quantity per catalog product (not persisted)."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Optional

from ..catalog.models import Product
from .models import IntakeEntry

_NUM_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_TENTH = Decimal("0.1")


def round_tenth(value: float) -> float:
    """One decimal place, ties away from zero (0.25 -> 0.3)."""
    return float(Decimal(repr(value)).quantize(_TENTH, rounding=ROUND_HALF_UP))


def coerce_quantity(value: Any) -> float:
    """Lenient numeric parse of a quantity field.

    Strings use their leading number ("1.5勺" -> 1.5); anything unparseable,
    NaN or infinite becomes 0. Negative results clamp to 0.
    """
    num: Optional[float] = None
    if isinstance(value, bool) or value is None:
        num = None
    elif isinstance(value, (int, float)):
        num = float(value)
    elif isinstance(value, str):
        m = _NUM_RE.match(value.strip())
        if m:
            try:
                num = float(m.group(0))
            except ValueError:
                num = None
    if num is None or not math.isfinite(num):
        return 0.0
    return max(0.0, num)


class IntakeLedger:
    def __init__(self) -> None:
        self._entries: Dict[str, IntakeEntry] = {}

    @property
    def entries(self) -> List[IntakeEntry]:
        return [e.model_copy() for e in self._entries.values()]

    def quantity_of(self, product_id: str) -> float:
        entry = self._entries.get(product_id)
        return entry.quantity if entry else 0.0

    def reconcile(self, products: Iterable[Product]) -> List[str]:
        """Add zero entries for products that lack one; returns the added ids."""
        added: List[str] = []
        for product in products:
            if product.id not in self._entries:
                self._entries[product.id] = IntakeEntry(product_id=product.id, quantity=0.0)
                added.append(product.id)
        return added

    def forget(self, product_id: str) -> None:
        self._entries.pop(product_id, None)

    def adjust(self, product_id: str, delta: float) -> Optional[IntakeEntry]:
        entry = self._entries.get(product_id)
        if entry is None:
            return None
        entry.quantity = round_tenth(max(0.0, entry.quantity + delta))
        return entry.model_copy()

    def set_exact(self, product_id: str, value: Any) -> Optional[IntakeEntry]:
        entry = self._entries.get(product_id)
        if entry is None:
            return None
        entry.quantity = coerce_quantity(value)
        return entry.model_copy()

    def reset_all(self) -> None:
        for entry in self._entries.values():
            entry.quantity = 0.0
