from datetime import datetime

from pydantic import BaseModel, Field

from schemas.pharmacy import PharmacyBrief


class OrderItemCreate(BaseModel):
    id: str | int | None = Field(default=None, description="Medicine id, bare or like 'med-12'")
    name: str | None = None
    quantity: int = Field(default=1, ge=1)


class OrderCreate(BaseModel):
    pharmacy_id: str = Field(min_length=1)
    items: list[OrderItemCreate] = Field(min_length=1)
    delivery: bool = False
    delivery_address: str | None = None
    prescription_file: str | None = None


class OrderCreated(BaseModel):
    id: str
    message: str = "Order created successfully"
    total_rwf: float
    prescription_status: str | None = None


class OrderItemOut(BaseModel):
    medicine_id: int
    name: str | None = None
    strength: str | None = None
    quantity: int
    price_rwf: float
    line_total: float

    class Config:
        from_attributes = True


class OrderOut(BaseModel):
    id: str
    pharmacy_id: str
    customer_name: str
    customer_email: str | None = None
    customer_phone: str | None = None
    items: list[OrderItemOut] = []
    total_rwf: float
    status: str
    prescription_status: str | None = None
    prescription_file: str | None = None
    delivery: bool
    delivery_address: str | None = None
    created_at: datetime | None
    updated_at: datetime | None

    class Config:
        from_attributes = True


class CustomerOrderOut(OrderOut):
    pharmacy: PharmacyBrief | None = None


class OrderStatusUpdate(BaseModel):
    status: str = Field(min_length=1)


class PrescriptionStatusUpdate(BaseModel):
    prescription_status: str = Field(min_length=1)


class PrescriptionUploadOut(BaseModel):
    prescription_file: str
