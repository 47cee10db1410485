from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func

from database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(150), unique=True, nullable=False, index=True)
    name = Column(String(120), nullable=True)
    phone = Column(String(30), nullable=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="customer")  # customer | pharmacy
    pharmacy_id = Column(String(30), ForeignKey("pharmacies.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
