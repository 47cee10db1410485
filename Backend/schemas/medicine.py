from pydantic import BaseModel


class MedicineOut(BaseModel):
    id: int
    name: str
    strength: str | None = None
    requires_prescription: bool

    class Config:
        from_attributes = True
