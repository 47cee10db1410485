"""Insurance partners accepted by a pharmacy."""

import logging

from sqlalchemy.orm import Session

from models.pharmacy import InsuranceType, PharmacyInsurance
from services.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def get_pharmacy_insurance(db: Session, pharmacy_id: str) -> list[InsuranceType]:
    return (
        db.query(InsuranceType)
        .join(PharmacyInsurance, PharmacyInsurance.insurance_id == InsuranceType.id)
        .filter(PharmacyInsurance.pharmacy_id == pharmacy_id)
        .order_by(InsuranceType.name.asc())
        .all()
    )


def list_insurance_types(db: Session) -> list[InsuranceType]:
    return db.query(InsuranceType).order_by(InsuranceType.name.asc()).all()


def _find_link(db: Session, pharmacy_id: str, insurance_id: int) -> PharmacyInsurance | None:
    return (
        db.query(PharmacyInsurance)
        .filter(PharmacyInsurance.pharmacy_id == pharmacy_id, PharmacyInsurance.insurance_id == insurance_id)
        .first()
    )


def add_insurance_partner(db: Session, pharmacy_id: str, insurance_id: int) -> list[InsuranceType]:
    if not db.query(InsuranceType).filter(InsuranceType.id == insurance_id).first():
        raise NotFoundError("Insurance type not found")
    if _find_link(db, pharmacy_id, insurance_id):
        raise ConflictError("Insurance partner already added")
    db.add(PharmacyInsurance(pharmacy_id=pharmacy_id, insurance_id=insurance_id))
    db.commit()
    logger.info("Pharmacy %s now accepts insurance_id=%s", pharmacy_id, insurance_id)
    return get_pharmacy_insurance(db, pharmacy_id)


def remove_insurance_partner(db: Session, pharmacy_id: str, insurance_id: int) -> list[InsuranceType]:
    link = _find_link(db, pharmacy_id, insurance_id)
    if not link:
        raise NotFoundError("Insurance partner not found")
    db.delete(link)
    db.commit()
    logger.info("Pharmacy %s dropped insurance_id=%s", pharmacy_id, insurance_id)
    return get_pharmacy_insurance(db, pharmacy_id)
