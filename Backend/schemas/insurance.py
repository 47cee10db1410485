from pydantic import BaseModel


class InsuranceOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class InsurancePartnerCreate(BaseModel):
    insurance_id: int
