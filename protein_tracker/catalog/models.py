# -*- coding: utf-8 -*-
"""Catalog — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UnitName(str, Enum):
    scoop = "勺"
    sachet = "袋"
    gram = "克"


class ProductDraft(BaseModel):
    """New-product form payload; the defaults match the empty form."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field("", description="Product name, blank names are ignored")
    protein_percentage: float = Field(15, ge=0, le=100, alias="proteinPercentage", description="g protein per 100g")
    unit_weight: float = Field(5, gt=0, alias="unitWeight", description="grams per scoop/sachet")
    unit_name: UnitName = Field(UnitName.scoop, alias="unitName")


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    protein_percentage: float = Field(..., ge=0, le=100, alias="proteinPercentage")
    unit_weight: float = Field(..., gt=0, alias="unitWeight")
    unit_name: UnitName = Field(..., alias="unitName")


class ProductCreateResponse(BaseModel):
    created: bool
    product: Optional[Product] = None


class ProductListResponse(BaseModel):
    count: int
    products: List[Product]


class ProductDeleteResponse(BaseModel):
    status: str = "deleted"
    id: str


# Shipped as-is; ids are stable and protected from deletion.
SEED_PRODUCTS: List[Product] = [
    Product(
        id="huaxia-2",
        name="华夏 2号",
        protein_percentage=15.3,
        unit_weight=9.3,
        unit_name=UnitName.scoop,
    ),
    Product(
        id="niubeifu",
        name="纽贝福",
        protein_percentage=29.7,
        unit_weight=4.7,
        unit_name=UnitName.scoop,
    ),
    Product(
        id="huaxia-protein",
        name="华夏蛋白粉",
        protein_percentage=80,
        unit_weight=20,
        unit_name=UnitName.sachet,
    ),
]

SEED_PRODUCT_IDS = frozenset(p.id for p in SEED_PRODUCTS)
