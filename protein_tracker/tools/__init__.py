# -*- coding: utf-8 -*-
"""
蛋白质摄入计算工具

纯函数，无副作用；所有派生值（目标、累计摄入、达成率）都在读取时重新计算。
"""

from .calculator import (
    ADJUST_STEP,
    PROTEIN_FORMULA_COEFF_1,
    PROTEIN_FORMULA_COEFF_2,
    achievement_percent,
    achievement_ratio,
    daily_target,
    intake_breakdown,
    jin_to_kg,
    protein_per_unit,
    remaining_protein,
    total_intake,
)

__all__ = [
    "ADJUST_STEP",
    "PROTEIN_FORMULA_COEFF_1",
    "PROTEIN_FORMULA_COEFF_2",
    "achievement_percent",
    "achievement_ratio",
    "daily_target",
    "intake_breakdown",
    "jin_to_kg",
    "protein_per_unit",
    "remaining_protein",
    "total_intake",
]
