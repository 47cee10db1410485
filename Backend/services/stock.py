"""Stock rows of one pharmacy. Every mutation returns the full listing."""

import logging

from sqlalchemy.orm import Session

from models.medicine import Medicine
from models.stock import PharmacyStock
from services.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def stock_row(stock: PharmacyStock) -> dict:
    med = stock.medicine
    return {
        "id": f"med-{med.id}",
        "stock_id": stock.id,
        "medicine_id": med.id,
        "name": med.name,
        "strength": med.strength,
        "price_rwf": stock.price_rwf,
        "requires_prescription": bool(med.requires_prescription),
        "quantity": stock.quantity,
    }


def get_pharmacy_stock(db: Session, pharmacy_id: str) -> list[dict]:
    rows = (
        db.query(PharmacyStock)
        .join(Medicine, PharmacyStock.medicine_id == Medicine.id)
        .filter(PharmacyStock.pharmacy_id == pharmacy_id)
        .order_by(Medicine.name.asc(), PharmacyStock.id.asc())
        .all()
    )
    return [stock_row(r) for r in rows]


def _find_stock(db: Session, pharmacy_id: str, medicine_id: int) -> PharmacyStock | None:
    return (
        db.query(PharmacyStock)
        .filter(PharmacyStock.pharmacy_id == pharmacy_id, PharmacyStock.medicine_id == medicine_id)
        .first()
    )


def add_stock(db: Session, pharmacy_id: str, medicine_id: int, quantity: int, price_rwf: float) -> list[dict]:
    if not db.query(Medicine).filter(Medicine.id == medicine_id).first():
        raise NotFoundError("Medicine not found")
    if _find_stock(db, pharmacy_id, medicine_id):
        raise ConflictError("Stock already exists for this medicine")
    db.add(PharmacyStock(pharmacy_id=pharmacy_id, medicine_id=medicine_id, quantity=quantity, price_rwf=price_rwf))
    db.commit()
    logger.info("Added stock medicine_id=%s qty=%s price=%s at %s", medicine_id, quantity, price_rwf, pharmacy_id)
    return get_pharmacy_stock(db, pharmacy_id)


def update_stock(db: Session, pharmacy_id: str, medicine_id: int, quantity: int, price_rwf: float) -> list[dict]:
    row = _find_stock(db, pharmacy_id, medicine_id)
    if not row:
        raise NotFoundError("Stock not found")
    row.quantity = quantity
    row.price_rwf = price_rwf
    db.commit()
    logger.info("Updated stock medicine_id=%s qty=%s price=%s at %s", medicine_id, quantity, price_rwf, pharmacy_id)
    return get_pharmacy_stock(db, pharmacy_id)


def delete_stock(db: Session, pharmacy_id: str, medicine_id: int) -> list[dict]:
    row = _find_stock(db, pharmacy_id, medicine_id)
    if not row:
        raise NotFoundError("Stock not found")
    db.delete(row)
    db.commit()
    logger.info("Deleted stock medicine_id=%s at %s", medicine_id, pharmacy_id)
    return get_pharmacy_stock(db, pharmacy_id)


def list_medicines(db: Session) -> list[Medicine]:
    return db.query(Medicine).order_by(Medicine.name.asc(), Medicine.id.asc()).all()
