# -*- coding: utf-8 -*-
"""
蛋白粉摄入追踪 API

体重 → 每日蛋白质目标；各产品摄入数量 → 累计摄入与达成率。
"""

from __future__ import annotations

import logging
import os

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from .catalog.api import router as catalog_router
from .config import settings
from .intake.api import router as intake_router
from .session import get_session
from .tools.calculator import jin_to_kg
from .tracker import Dashboard, TrackerSession

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="蛋白粉摄入追踪",
    description="每日蛋白质目标计算与摄入记录",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog_router)
app.include_router(intake_router)


class WeightRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    weight_jin: float = Field(..., alias="weightJin", allow_inf_nan=False, description="体重（斤），负数按 0 处理")


class WeightResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    weight_jin: float = Field(..., alias="weightJin")
    weight_kg: float = Field(..., alias="weightKg")
    daily_target_g: float = Field(..., alias="dailyTargetG")


def _weight_response(session: TrackerSession) -> WeightResponse:
    return WeightResponse(
        weight_jin=session.weight_jin,
        weight_kg=jin_to_kg(session.weight_jin),
        daily_target_g=session.daily_target(),
    )


@app.get("/api/health")
def health() -> dict:
    return {"ok": True}


@app.get("/api/weight", response_model=WeightResponse)
def get_weight(session: TrackerSession = Depends(get_session)):
    return _weight_response(session)


@app.put("/api/weight", response_model=WeightResponse)
def put_weight(request: WeightRequest, session: TrackerSession = Depends(get_session)):
    session.set_weight(request.weight_jin)
    return _weight_response(session)


@app.get("/api/dashboard", response_model=Dashboard)
def dashboard(session: TrackerSession = Depends(get_session)):
    """Target, cumulative intake and per-product rows, derived on every call."""
    return session.dashboard()


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    host = os.environ.get("PROTEIN_HOST") or os.environ.get("HOST") or "127.0.0.1"
    port_raw = os.environ.get("PROTEIN_PORT") or os.environ.get("PORT") or "8000"
    try:
        port = int(port_raw)
    except ValueError:
        port = 8000

    uvicorn.run("protein_tracker.api:app", host=host, port=port, reload=False)
