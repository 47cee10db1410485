from pydantic import BaseModel, Field


class StockCreate(BaseModel):
    medicine_id: int
    quantity: int = Field(ge=0)
    price_rwf: float = Field(ge=0)


class StockUpdate(BaseModel):
    quantity: int = Field(ge=0)
    price_rwf: float = Field(ge=0)


class StockOut(BaseModel):
    id: str
    stock_id: int
    medicine_id: int
    name: str
    strength: str | None = None
    price_rwf: float
    requires_prescription: bool
    quantity: int
