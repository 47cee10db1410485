from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from schemas.pharmacy import PharmacyListItem, PharmacyOut
from services.pharmacies import get_pharmacy, list_pharmacies, search_pharmacies

router = APIRouter(prefix="/pharmacies", tags=["Pharmacies"])


@router.get("/", response_model=list[PharmacyOut])
def search(
    q: str | None = Query(None, description="Pharmacy or medicine name"),
    loc: str | None = Query(None, description="Sector or address"),
    insurance: str | None = Query(None, description="Accepted insurance"),
    db: Session = Depends(get_db),
):
    return search_pharmacies(db, q=q, loc=loc, insurance=insurance)


# Must stay above /{pharmacy_id}
@router.get("/list/all", response_model=list[PharmacyListItem])
def list_all(db: Session = Depends(get_db)):
    """All pharmacies, for linking an account at signup."""
    return list_pharmacies(db)


@router.get("/{pharmacy_id}", response_model=PharmacyOut)
def get_one(pharmacy_id: str, db: Session = Depends(get_db)):
    return get_pharmacy(db, pharmacy_id)
