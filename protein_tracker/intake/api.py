# -*- coding: utf-8 -*-
"""Intake — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..session import get_session
from ..tracker import ConfirmationRequired, TrackerSession
from .models import IntakeAdjustRequest, IntakeEntriesResponse, IntakeEntry, IntakeSetRequest

router = APIRouter(prefix="/api/intake", tags=["Intake"])


@router.get("", response_model=IntakeEntriesResponse, summary="Today's intake entries")
def list_entries(session: TrackerSession = Depends(get_session)):
    entries = session.entries()
    return IntakeEntriesResponse(count=len(entries), entries=entries)


@router.post("/reset", response_model=IntakeEntriesResponse, summary="Zero every quantity")
def reset_entries(
    confirm: bool = Query(default=False, description="Must be true; the client asks the user first"),
    session: TrackerSession = Depends(get_session),
):
    try:
        entries = session.reset_all(confirmed=confirm)
    except ConfirmationRequired as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return IntakeEntriesResponse(count=len(entries), entries=entries)


@router.post("/{product_id}/adjust", response_model=IntakeEntry, summary="Step a quantity up or down")
def adjust_entry(product_id: str, request: IntakeAdjustRequest, session: TrackerSession = Depends(get_session)):
    entry = session.adjust(product_id, request.delta)
    if entry is None:
        raise HTTPException(status_code=404, detail="No intake entry for product")
    return entry


@router.put("/{product_id}", response_model=IntakeEntry, summary="Set a quantity from free text")
def set_entry(product_id: str, request: IntakeSetRequest, session: TrackerSession = Depends(get_session)):
    entry = session.set_exact(product_id, request.value)
    if entry is None:
        raise HTTPException(status_code=404, detail="No intake entry for product")
    return entry
