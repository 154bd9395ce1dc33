"""
Product create, update-quantity and list operations.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .errors import InvalidData, NotFoundError
from .models import Product
from .schemas import ProductCreate

logger = logging.getLogger(__name__)

DEFAULT_SKIP = 0
DEFAULT_LIMIT = 10


def parse_skip(raw) -> int:
    """Offset from a raw query value; anything unparsable or negative is 0."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_SKIP
    return value if value >= 0 else DEFAULT_SKIP


def parse_limit(raw) -> int:
    """Page size from a raw query value; anything unparsable or below 1 is 10."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_LIMIT
    return value if value > 0 else DEFAULT_LIMIT


class InventoryService:
    def create(self, db: Session, data: ProductCreate) -> Product:
        product = Product(
            name=data.name,
            sku=data.sku,
            quantity=data.quantity,
            price=data.price,
        )
        db.add(product)
        try:
            db.commit()
        except (IntegrityError, OverflowError) as exc:
            db.rollback()
            logger.warning(f"Product rejected by store: sku={data.sku}")
            raise InvalidData() from exc
        db.refresh(product)
        logger.info(f"Product created: id={product.id}, sku={product.sku}")
        return product

    def get(self, db: Session, product_id: str) -> Optional[Product]:
        return db.query(Product).filter(Product.id == product_id).first()

    def update_quantity(self, db: Session, product_id: str, quantity: int) -> Product:
        product = self.get(db, product_id)
        if not product:
            raise NotFoundError()
        product.quantity = quantity
        try:
            db.commit()
        except OverflowError as exc:
            db.rollback()
            logger.warning(f"Quantity rejected by store: id={product_id}")
            raise InvalidData() from exc
        db.refresh(product)
        logger.info(f"Product quantity updated: id={product.id}, quantity={product.quantity}")
        return product

    def list(self, db: Session, skip=DEFAULT_SKIP, limit=DEFAULT_LIMIT) -> List[Product]:
        return (
            db.query(Product)
            .order_by(Product.seq.asc())
            .offset(parse_skip(skip))
            .limit(parse_limit(limit))
            .all()
        )
