from sqlalchemy import Column, Integer, String, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from database import Base


class PharmacyStock(Base):
    __tablename__ = "pharmacy_stocks"
    __table_args__ = (UniqueConstraint("pharmacy_id", "medicine_id", name="uq_pharmacy_medicine"),)

    id = Column(Integer, primary_key=True, index=True)
    pharmacy_id = Column(String(30), ForeignKey("pharmacies.id"), nullable=False, index=True)
    medicine_id = Column(Integer, ForeignKey("medicines.id"), nullable=False, index=True)
    price_rwf = Column(Float, nullable=False, default=0)
    quantity = Column(Integer, nullable=False, default=0)

    pharmacy = relationship("Pharmacy", back_populates="stocks")
    medicine = relationship("Medicine")
