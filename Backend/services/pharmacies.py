from sqlalchemy import or_
from sqlalchemy.orm import Session

from models.medicine import Medicine
from models.pharmacy import InsuranceType, Pharmacy, PharmacyInsurance
from models.stock import PharmacyStock
from services.errors import NotFoundError
from services.insurance import get_pharmacy_insurance
from services.stock import get_pharmacy_stock


def pharmacy_view(db: Session, pharmacy: Pharmacy) -> dict:
    return {
        "id": pharmacy.id,
        "name": pharmacy.name,
        "sector": pharmacy.sector,
        "address": pharmacy.address,
        "phone": pharmacy.phone,
        "delivery": bool(pharmacy.delivery),
        "lat": pharmacy.lat,
        "lng": pharmacy.lng,
        "description": pharmacy.description,
        "insurance": [it.name for it in get_pharmacy_insurance(db, pharmacy.id)],
        "stocks": get_pharmacy_stock(db, pharmacy.id),
    }


def search_pharmacies(
    db: Session,
    q: str | None = None,
    loc: str | None = None,
    insurance: str | None = None,
) -> list[dict]:
    """Filter by pharmacy or medicine name, sector/address and accepted insurance."""
    query = db.query(Pharmacy)
    if q and q.strip():
        pattern = f"%{q.strip()}%"
        query = query.filter(
            or_(
                Pharmacy.name.ilike(pattern),
                Pharmacy.stocks.any(PharmacyStock.medicine.has(Medicine.name.ilike(pattern))),
            )
        )
    if loc and loc.strip():
        pattern = f"%{loc.strip()}%"
        query = query.filter(or_(Pharmacy.sector.ilike(pattern), Pharmacy.address.ilike(pattern)))
    if insurance and insurance.strip():
        pattern = f"%{insurance.strip()}%"
        query = query.filter(
            Pharmacy.insurance_links.any(PharmacyInsurance.insurance.has(InsuranceType.name.ilike(pattern)))
        )
    return [pharmacy_view(db, p) for p in query.order_by(Pharmacy.name.asc()).all()]


def get_pharmacy(db: Session, pharmacy_id: str) -> dict:
    pharmacy = db.query(Pharmacy).filter(Pharmacy.id == pharmacy_id).first()
    if not pharmacy:
        raise NotFoundError("Pharmacy not found")
    return pharmacy_view(db, pharmacy)


def list_pharmacies(db: Session) -> list[Pharmacy]:
    return db.query(Pharmacy).order_by(Pharmacy.name.asc()).all()
