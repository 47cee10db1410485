from pydantic import BaseModel

from schemas.stock import StockOut


class PharmacyOut(BaseModel):
    id: str
    name: str
    sector: str | None = None
    address: str | None = None
    phone: str | None = None
    delivery: bool
    lat: float | None = None
    lng: float | None = None
    description: str | None = None
    insurance: list[str] = []
    stocks: list[StockOut] = []


class PharmacyListItem(BaseModel):
    id: str
    name: str
    sector: str | None = None
    phone: str | None = None

    class Config:
        from_attributes = True


class PharmacyBrief(BaseModel):
    id: str
    name: str
    phone: str | None = None
    address: str | None = None

    class Config:
        from_attributes = True
