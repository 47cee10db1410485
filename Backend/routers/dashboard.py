"""Pharmacy dashboard. Every route is scoped to the caller's own pharmacy."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from dependencies import get_current_pharmacy_id
from schemas.insurance import InsuranceOut, InsurancePartnerCreate
from schemas.medicine import MedicineOut
from schemas.order import OrderOut, OrderStatusUpdate, PrescriptionStatusUpdate
from schemas.stock import StockCreate, StockOut, StockUpdate
from services import insurance as insurance_service
from services import orders as order_service
from services import stock as stock_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


# ─── Stock ─────────────────────────────────────────────────
@router.get("/stock", response_model=list[StockOut])
def get_stock(pharmacy_id: str = Depends(get_current_pharmacy_id), db: Session = Depends(get_db)):
    return stock_service.get_pharmacy_stock(db, pharmacy_id)


@router.post("/stock", response_model=list[StockOut])
def add_stock(
    data: StockCreate,
    pharmacy_id: str = Depends(get_current_pharmacy_id),
    db: Session = Depends(get_db),
):
    return stock_service.add_stock(db, pharmacy_id, data.medicine_id, data.quantity, data.price_rwf)


@router.put("/stock/{medicine_id}", response_model=list[StockOut])
def update_stock(
    medicine_id: int,
    data: StockUpdate,
    pharmacy_id: str = Depends(get_current_pharmacy_id),
    db: Session = Depends(get_db),
):
    return stock_service.update_stock(db, pharmacy_id, medicine_id, data.quantity, data.price_rwf)


@router.delete("/stock/{medicine_id}", response_model=list[StockOut])
def delete_stock(
    medicine_id: int,
    pharmacy_id: str = Depends(get_current_pharmacy_id),
    db: Session = Depends(get_db),
):
    return stock_service.delete_stock(db, pharmacy_id, medicine_id)


@router.get("/medicines", response_model=list[MedicineOut])
def get_medicines(_: str = Depends(get_current_pharmacy_id), db: Session = Depends(get_db)):
    return stock_service.list_medicines(db)


# ─── Orders ────────────────────────────────────────────────
@router.get("/orders", response_model=list[OrderOut])
def get_orders(
    status: str | None = Query(None),
    pharmacy_id: str = Depends(get_current_pharmacy_id),
    db: Session = Depends(get_db),
):
    return order_service.list_pharmacy_orders(db, pharmacy_id, status)


@router.get("/orders/{order_id}", response_model=OrderOut)
def get_order(
    order_id: str,
    pharmacy_id: str = Depends(get_current_pharmacy_id),
    db: Session = Depends(get_db),
):
    return order_service.get_order_details(db, pharmacy_id, order_id)


@router.put("/orders/{order_id}/status", response_model=list[OrderOut])
def set_order_status(
    order_id: str,
    data: OrderStatusUpdate,
    pharmacy_id: str = Depends(get_current_pharmacy_id),
    db: Session = Depends(get_db),
):
    return order_service.update_order_status(db, pharmacy_id, order_id, data.status)


@router.put("/orders/{order_id}/prescription", response_model=list[OrderOut])
def set_prescription_status(
    order_id: str,
    data: PrescriptionStatusUpdate,
    pharmacy_id: str = Depends(get_current_pharmacy_id),
    db: Session = Depends(get_db),
):
    return order_service.update_prescription_status(db, pharmacy_id, order_id, data.prescription_status)


# ─── Insurance ─────────────────────────────────────────────
@router.get("/insurance", response_model=list[InsuranceOut])
def get_insurance(pharmacy_id: str = Depends(get_current_pharmacy_id), db: Session = Depends(get_db)):
    return insurance_service.get_pharmacy_insurance(db, pharmacy_id)


@router.get("/insurance/available", response_model=list[InsuranceOut])
def get_available_insurance(_: str = Depends(get_current_pharmacy_id), db: Session = Depends(get_db)):
    return insurance_service.list_insurance_types(db)


@router.post("/insurance", response_model=list[InsuranceOut])
def add_insurance(
    data: InsurancePartnerCreate,
    pharmacy_id: str = Depends(get_current_pharmacy_id),
    db: Session = Depends(get_db),
):
    return insurance_service.add_insurance_partner(db, pharmacy_id, data.insurance_id)


@router.delete("/insurance/{insurance_id}", response_model=list[InsuranceOut])
def remove_insurance(
    insurance_id: int,
    pharmacy_id: str = Depends(get_current_pharmacy_id),
    db: Session = Depends(get_db),
):
    return insurance_service.remove_insurance_partner(db, pharmacy_id, insurance_id)
