"""
Product endpoints. Every route here sits behind the auth gate.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..deps import get_current_account, get_db, get_inventory_service
from ..inventory import InventoryService
from ..models import Account
from ..schemas import (
    ErrorResponse,
    ProductCreate,
    ProductCreated,
    ProductResponse,
    QuantityResponse,
    QuantityUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/products",
    tags=["products"],
    responses={401: {"description": "Missing or invalid token", "model": ErrorResponse}},
)


@router.post(
    "",
    response_model=ProductCreated,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid product data", "model": ErrorResponse}},
)
def create_product(
    payload: ProductCreate,
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
    inventory: InventoryService = Depends(get_inventory_service),
):
    product = inventory.create(db, payload)
    logger.info(f"[Products] Created by {account.username}: id={product.id}")
    return ProductCreated(id=product.id)


@router.put(
    "/{product_id}/quantity",
    response_model=QuantityResponse,
    responses={404: {"description": "Unknown product id", "model": ErrorResponse}},
)
def update_quantity(
    product_id: str,
    payload: QuantityUpdate,
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
    inventory: InventoryService = Depends(get_inventory_service),
):
    product = inventory.update_quantity(db, product_id, payload.quantity)
    return QuantityResponse(id=product.id, quantity=product.quantity)


@router.get("", response_model=List[ProductResponse])
def list_products(
    # Raw strings so that unparsable values fall back to defaults instead of 422
    skip: Optional[str] = Query(None, description="Number of products to skip"),
    limit: Optional[str] = Query(None, description="Maximum number of products to return"),
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
    inventory: InventoryService = Depends(get_inventory_service),
):
    return [product.to_dict() for product in inventory.list(db, skip=skip, limit=limit)]
