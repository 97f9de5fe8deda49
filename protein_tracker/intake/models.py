# -*- coding: utf-8 -*-
"""Intake — Pydantic models."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class IntakeEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId")
    quantity: float = Field(0.0, ge=0)


class IntakeAdjustRequest(BaseModel):
    delta: float = Field(0.2, allow_inf_nan=False, description="Signed step, the UI uses +/-0.2")


class IntakeSetRequest(BaseModel):
    # Raw field value; coerce_quantity decides what counts as a number.
    value: Any = Field(None, description="Free-text quantity; non-numeric becomes 0")


class IntakeEntriesResponse(BaseModel):
    count: int
    entries: List[IntakeEntry]
