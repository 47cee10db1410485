from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from database import get_db
from dependencies import get_current_user
from models.user import User
from schemas.order import CustomerOrderOut, OrderCreate, OrderCreated, PrescriptionUploadOut
from services.matching import LineItemRequest
from services.orders import CustomerSnapshot, create_order, list_customer_orders
from services.prescriptions import save_prescription

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post("/", response_model=OrderCreated, status_code=201)
def place_order(
    data: OrderCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Resolve every cart line against the pharmacy's stock and place the order."""
    order = create_order(
        db,
        pharmacy_id=data.pharmacy_id,
        items=[LineItemRequest(name=it.name, quantity=it.quantity, id=it.id) for it in data.items],
        customer=CustomerSnapshot(
            name=current_user.name,
            email=current_user.email,
            phone=current_user.phone,
        ),
        delivery=data.delivery,
        delivery_address=data.delivery_address,
        prescription_file=data.prescription_file,
    )
    return OrderCreated(
        id=order.id,
        total_rwf=order.total_rwf,
        prescription_status=order.prescription_status,
    )


@router.get("/", response_model=list[CustomerOrderOut])
def my_orders(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return list_customer_orders(db, current_user.email)


@router.post("/prescriptions", response_model=PrescriptionUploadOut, status_code=201)
async def upload_prescription(
    file: UploadFile = File(...),
    _: User = Depends(get_current_user),
):
    content = await file.read()
    return PrescriptionUploadOut(prescription_file=save_prescription(file.filename, content))
