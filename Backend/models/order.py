from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum

from database import Base


class OrderStatus(str, enum.Enum):
    """Suggested progression. Stored as a plain string; any value is accepted."""

    pending = "pending"
    processing = "processing"
    confirmed = "confirmed"
    ready = "ready"
    completed = "completed"
    delivered = "delivered"
    cancelled = "cancelled"


class PrescriptionStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(40), primary_key=True, index=True)
    pharmacy_id = Column(String(30), ForeignKey("pharmacies.id"), nullable=False, index=True)
    customer_name = Column(String(120), nullable=False, default="Guest")
    customer_email = Column(String(150), nullable=True, index=True)
    customer_phone = Column(String(30), nullable=True)
    total_rwf = Column(Float, nullable=False, default=0.0)
    status = Column(String(30), nullable=False, default=OrderStatus.pending.value)
    prescription_status = Column(String(30), nullable=True)
    prescription_file = Column(String(300), nullable=True)
    delivery = Column(Boolean, default=False, nullable=False)
    delivery_address = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    pharmacy = relationship("Pharmacy")
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")


class OrderItem(Base):
    __tablename__ = "order_items"

    order_id = Column(String(40), ForeignKey("orders.id"), primary_key=True)
    medicine_id = Column(Integer, ForeignKey("medicines.id"), primary_key=True)
    quantity = Column(Integer, nullable=False, default=1)
    price_rwf = Column(Float, nullable=False)

    order = relationship("Order", back_populates="items")
    medicine = relationship("Medicine")

    @property
    def name(self) -> str | None:
        return self.medicine.name if self.medicine else None

    @property
    def strength(self) -> str | None:
        return self.medicine.strength if self.medicine else None

    @property
    def line_total(self) -> float:
        return self.price_rwf * self.quantity
