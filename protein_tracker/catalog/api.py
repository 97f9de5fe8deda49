# -*- coding: utf-8 -*-
"""Catalog — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ..session import get_session
from ..tracker import ConfirmationRequired, TrackerSession
from .models import ProductCreateResponse, ProductDeleteResponse, ProductDraft, ProductListResponse

router = APIRouter(prefix="/api/products", tags=["Catalog"])


@router.get("", response_model=ProductListResponse, summary="List products")
def list_products(session: TrackerSession = Depends(get_session)):
    products = session.products()
    return ProductListResponse(count=len(products), products=products)


@router.get("/defaults", response_model=ProductDraft, summary="Empty new-product form")
def product_defaults():
    return ProductDraft()


@router.post("", response_model=ProductCreateResponse, summary="Add a product")
def create_product(draft: ProductDraft, response: Response, session: TrackerSession = Depends(get_session)):
    try:
        product = session.add_product(draft)
    except OSError as exc:
        raise HTTPException(status_code=500, detail=f"Failed to save catalog: {exc}") from exc
    if product is None:
        # Blank name: silently ignored.
        return ProductCreateResponse(created=False)
    response.status_code = 201
    return ProductCreateResponse(created=True, product=product)


@router.delete("/{product_id}", response_model=ProductDeleteResponse, summary="Delete a custom product")
def delete_product(
    product_id: str,
    confirm: bool = Query(default=False, description="Must be true; the client asks the user first"),
    session: TrackerSession = Depends(get_session),
):
    if session.get_product(product_id) is None:
        raise HTTPException(status_code=404, detail="Product not found")
    if session.catalog.is_protected(product_id):
        raise HTTPException(status_code=403, detail="Default products cannot be deleted")
    try:
        session.remove_product(product_id, confirmed=confirm)
    except ConfirmationRequired as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except OSError as exc:
        raise HTTPException(status_code=500, detail=f"Failed to save catalog: {exc}") from exc
    return ProductDeleteResponse(id=product_id)
