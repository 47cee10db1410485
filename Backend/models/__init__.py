from models.medicine import Medicine
from models.pharmacy import Pharmacy, InsuranceType, PharmacyInsurance
from models.stock import PharmacyStock
from models.order import Order, OrderItem, OrderStatus, PrescriptionStatus
from models.user import User

__all__ = [
    "Medicine",
    "Pharmacy",
    "InsuranceType",
    "PharmacyInsurance",
    "PharmacyStock",
    "Order",
    "OrderItem",
    "OrderStatus",
    "PrescriptionStatus",
    "User",
]
