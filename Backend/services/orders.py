"""Order placement and the pharmacy-side order mutations.

Creation is all-or-nothing: every line is resolved and checked before the
order row is added to the session, and the order and its items are committed
together. Stock quantities are only checked, never decremented.
"""

import logging
import random
import string
import time
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from models.order import Order, OrderItem, OrderStatus, PrescriptionStatus
from models.pharmacy import Pharmacy
from services.errors import (
    InsufficientStockError,
    ItemNotFoundError,
    NotFoundError,
    ValidationError,
)
from services.matching import LineItemRequest, MatchStrategy, StockMatch, available_labels, resolve_line_item

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_sysrand = random.SystemRandom()


@dataclass
class CustomerSnapshot:
    name: str | None = None
    email: str | None = None
    phone: str | None = None


def generate_order_id() -> str:
    suffix = "".join(_sysrand.choice(_ID_ALPHABET) for _ in range(9))
    return f"ORD-{int(time.time() * 1000)}-{suffix}"


def _id_text(item: LineItemRequest) -> str:
    return "" if item.id is None else str(item.id).strip()


def _validate_request(pharmacy_id: str | None, items: list[LineItemRequest]) -> None:
    if not pharmacy_id or not items:
        raise ValidationError("Pharmacy ID and items are required")
    for item in items:
        if not item.clean_name and _id_text(item) == "":
            raise ValidationError("Each item needs a name or a medicine id")
        if item.quantity is None or item.quantity < 1:
            raise ValidationError(f"Quantity for {item.display_name} must be at least 1")


def _not_found_with_diagnostics(db: Session, pharmacy_id: str, item: LineItemRequest) -> ItemNotFoundError:
    try:
        available = available_labels(db, pharmacy_id)
    except SQLAlchemyError:
        logger.warning("Could not list stock of %s for diagnostics", pharmacy_id, exc_info=True)
        available = []
    logger.error(
        "Medicine not found: searched=%r medicine_id=%r pharmacy_id=%s available=%s",
        item.name,
        item.id,
        pharmacy_id,
        available,
    )
    return ItemNotFoundError(item.display_name, available)


def _resolve_all(
    db: Session,
    pharmacy_id: str,
    items: list[LineItemRequest],
    strategies: list[MatchStrategy] | None,
) -> list[tuple[StockMatch, int]]:
    """Resolve every line, merging lines that land on the same medicine."""
    resolved: dict[int, list] = {}
    for item in items:
        match = resolve_line_item(db, pharmacy_id, item, strategies)
        if match is None:
            raise _not_found_with_diagnostics(db, pharmacy_id, item)
        entry = resolved.setdefault(match.stock.medicine_id, [match, 0])
        entry[1] += item.quantity
        if entry[0].stock.quantity < entry[1]:
            raise InsufficientStockError(item.display_name, entry[0].stock.quantity)
    return [tuple(entry) for entry in resolved.values()]


def create_order(
    db: Session,
    pharmacy_id: str,
    items: list[LineItemRequest],
    customer: CustomerSnapshot | None = None,
    delivery: bool = False,
    delivery_address: str | None = None,
    prescription_file: str | None = None,
    strategies: list[MatchStrategy] | None = None,
) -> Order:
    _validate_request(pharmacy_id, items)

    pharmacy = db.query(Pharmacy).filter(Pharmacy.id == pharmacy_id).first()
    if not pharmacy:
        raise NotFoundError("Pharmacy not found")

    resolved = _resolve_all(db, pharmacy_id, items, strategies)

    total = 0.0
    lines = []
    needs_prescription = False
    for match, quantity in resolved:
        unit_price = match.stock.price_rwf
        total += unit_price * quantity
        needs_prescription = needs_prescription or bool(match.medicine.requires_prescription)
        lines.append(OrderItem(medicine_id=match.stock.medicine_id, quantity=quantity, price_rwf=unit_price))

    # Prescription review starts as pending whether or not a file came with the order.
    prescription_status = PrescriptionStatus.pending.value if needs_prescription else None

    customer = customer or CustomerSnapshot()
    order = Order(
        id=generate_order_id(),
        pharmacy_id=pharmacy_id,
        customer_name=customer.name or "Guest",
        customer_email=customer.email,
        customer_phone=customer.phone,
        total_rwf=total,
        status=OrderStatus.pending.value,
        prescription_status=prescription_status,
        prescription_file=prescription_file or None,
        delivery=bool(delivery),
        delivery_address=delivery_address or None,
    )
    order.items = lines
    db.add(order)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(order)
    logger.info(
        "Created order %s at %s: %d item(s), total=%.2f, prescription_status=%s",
        order.id,
        pharmacy_id,
        len(lines),
        total,
        prescription_status,
    )
    return order


def list_pharmacy_orders(db: Session, pharmacy_id: str, status: str | None = None) -> list[Order]:
    q = db.query(Order).filter(Order.pharmacy_id == pharmacy_id)
    if status:
        q = q.filter(Order.status == status)
    return q.order_by(Order.created_at.desc(), Order.id.desc()).all()


def get_order_details(db: Session, pharmacy_id: str, order_id: str) -> Order:
    return _owned_order(db, pharmacy_id, order_id)


def list_customer_orders(db: Session, customer_email: str | None) -> list[Order]:
    if not customer_email:
        return []
    return (
        db.query(Order)
        .filter(Order.customer_email == customer_email)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )


def _owned_order(db: Session, pharmacy_id: str, order_id: str) -> Order:
    # Orders of other pharmacies look exactly like missing ones.
    order = db.query(Order).filter(Order.id == order_id, Order.pharmacy_id == pharmacy_id).first()
    if not order:
        raise NotFoundError("Order not found")
    return order


def update_order_status(db: Session, pharmacy_id: str, order_id: str, status: str) -> list[Order]:
    if not status or not status.strip():
        raise ValidationError("Status is required")
    order = _owned_order(db, pharmacy_id, order_id)
    order.status = status.strip()
    order.updated_at = func.now()
    db.commit()
    logger.info("Order %s status -> %s (pharmacy %s)", order_id, order.status, pharmacy_id)
    return list_pharmacy_orders(db, pharmacy_id)


def update_prescription_status(
    db: Session, pharmacy_id: str, order_id: str, prescription_status: str
) -> list[Order]:
    if not prescription_status or not prescription_status.strip():
        raise ValidationError("Prescription status is required")
    order = _owned_order(db, pharmacy_id, order_id)
    order.prescription_status = prescription_status.strip()
    order.updated_at = func.now()
    db.commit()
    logger.info(
        "Order %s prescription_status -> %s (pharmacy %s)", order_id, order.prescription_status, pharmacy_id
    )
    return list_pharmacy_orders(db, pharmacy_id)
