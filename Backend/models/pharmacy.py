from sqlalchemy import Column, Integer, String, Float, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from database import Base


class Pharmacy(Base):
    __tablename__ = "pharmacies"

    id = Column(String(30), primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    sector = Column(String(120), nullable=True)
    address = Column(String(255), nullable=True)
    phone = Column(String(30), nullable=True)
    delivery = Column(Boolean, default=False, nullable=False)
    lat = Column(Float, nullable=True)
    lng = Column(Float, nullable=True)
    description = Column(String(500), nullable=True)

    stocks = relationship("PharmacyStock", back_populates="pharmacy", cascade="all, delete-orphan")
    insurance_links = relationship("PharmacyInsurance", back_populates="pharmacy", cascade="all, delete-orphan")


class InsuranceType(Base):
    __tablename__ = "insurance_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), unique=True, nullable=False)


class PharmacyInsurance(Base):
    __tablename__ = "pharmacy_insurance"
    __table_args__ = (UniqueConstraint("pharmacy_id", "insurance_id", name="uq_pharmacy_insurance"),)

    id = Column(Integer, primary_key=True, index=True)
    pharmacy_id = Column(String(30), ForeignKey("pharmacies.id"), nullable=False, index=True)
    insurance_id = Column(Integer, ForeignKey("insurance_types.id"), nullable=False, index=True)

    pharmacy = relationship("Pharmacy", back_populates="insurance_links")
    insurance = relationship("InsuranceType")
