# -*- coding: utf-8 -*-
"""
蛋白质摄入计算器

每日目标：体重(kg) × 2.1 × 0.8，体重输入单位为斤（1kg = 2斤）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from ..catalog.models import Product
from ..intake.models import IntakeEntry

PROTEIN_FORMULA_COEFF_1 = 2.1
PROTEIN_FORMULA_COEFF_2 = 0.8

JIN_PER_KG = 2

# +/- 按钮的调节粒度
ADJUST_STEP = 0.2


@dataclass
class BreakdownLine:
    """今日摄入明细中的一行"""
    product_id: str
    name: str
    quantity: float
    unit_name: str
    protein_g: float


def jin_to_kg(weight_jin: float) -> float:
    """斤 → 公斤"""
    return weight_jin / JIN_PER_KG


def daily_target(weight_jin: float) -> float:
    """
    计算每日蛋白质目标 (g)

    Args:
        weight_jin: 体重（斤），负数按 0 处理

    Returns:
        float: 保留两位小数的每日目标
    """
    weight_kg = jin_to_kg(max(0.0, weight_jin))
    return round(weight_kg * PROTEIN_FORMULA_COEFF_1 * PROTEIN_FORMULA_COEFF_2, 2)


def protein_per_unit(product: Product) -> float:
    """每个单位（勺/袋/克）所含蛋白质 (g)"""
    return product.unit_weight * product.protein_percentage / 100


def _index(products: Iterable[Product]) -> Dict[str, Product]:
    return {p.id: p for p in products}


def total_intake(entries: Iterable[IntakeEntry], products: Iterable[Product]) -> float:
    """
    累计蛋白质摄入 (g)

    找不到对应产品的记录（产品已删除）不计入。
    """
    by_id = _index(products)
    total = 0.0
    for entry in entries:
        product = by_id.get(entry.product_id)
        if product is None:
            continue
        total += entry.quantity * protein_per_unit(product)
    return total


def achievement_ratio(total: float, target: float) -> float:
    """达成比例，封顶 1；目标为 0 时返回 0。"""
    if target <= 0:
        return 0.0
    return min(total / target, 1.0)


def achievement_percent(total: float, target: float) -> int:
    """今日达成率（百分比整数，不封顶）"""
    if target <= 0:
        return 0
    return round(total / target * 100)


def remaining_protein(total: float, target: float) -> float:
    return max(target - total, 0.0)


def intake_breakdown(
    entries: Iterable[IntakeEntry], products: Iterable[Product]
) -> List[BreakdownLine]:
    """
    今日摄入明细

    只列出数量大于 0 且产品仍存在的记录，顺序与记录顺序一致。
    """
    by_id = _index(products)
    lines: List[BreakdownLine] = []
    for entry in entries:
        if entry.quantity == 0:
            continue
        product = by_id.get(entry.product_id)
        if product is None:
            continue
        lines.append(
            BreakdownLine(
                product_id=product.id,
                name=product.name,
                quantity=entry.quantity,
                unit_name=product.unit_name.value,
                protein_g=entry.quantity * protein_per_unit(product),
            )
        )
    return lines
