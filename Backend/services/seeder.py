"""Populate the store from the fixed catalog in ``services.catalog_data``."""

import logging
import random
from dataclasses import dataclass

from sqlalchemy.orm import Session

from models.medicine import Medicine
from models.order import Order, OrderItem
from models.pharmacy import InsuranceType, Pharmacy, PharmacyInsurance
from models.stock import PharmacyStock
from models.user import User
from services.catalog_data import INSURANCE_TYPES, PHARMACIES

logger = logging.getLogger(__name__)

PRESCRIPTION_KEYWORDS = (
    "Ceftriaxone",
    "Basiliximab",
    "Tacrolimus",
    "Ranibizumab",
    "Levonorgestrel",
    "Tramadol",
    "Clobetasol",
    "Azithromycin",
    "Ciprofloxacin",
    "Ornidazole",
    "Secnidazole",
    "Clindamycin",
)

PRICE_RANGE_RWF = (500, 5000)
QUANTITY_RANGE = (0, 100)


@dataclass(frozen=True)
class ParsedMedicine:
    name: str
    strength: str | None
    requires_prescription: bool

    @property
    def key(self) -> tuple[str, str | None]:
        return (self.name, self.strength)


@dataclass
class SeedSummary:
    insurance_types: int = 0
    pharmacies: int = 0
    insurance_links: int = 0
    medicines: int = 0
    stocks: int = 0


def parse_stock_label(label: str) -> ParsedMedicine:
    """Split ``"Azithromycin (suspension)"`` into name and strength.

    The prescription flag is a case-insensitive keyword match on the name.
    """
    head, sep, tail = label.partition("(")
    name = head.strip()
    strength = None
    if sep:
        strength = tail.replace(")", "").strip() or None
    lowered = name.lower()
    requires_prescription = any(kw.lower() in lowered for kw in PRESCRIPTION_KEYWORDS)
    return ParsedMedicine(name=name, strength=strength, requires_prescription=requires_prescription)


def collect_medicines(pharmacies: list[dict]) -> list[ParsedMedicine]:
    """Unique medicines across all pharmacies, keyed by (name, strength).

    First-seen order is kept and the first observation's prescription flag
    wins.
    """
    unique: dict[tuple[str, str | None], ParsedMedicine] = {}
    for pharmacy in pharmacies:
        for label in pharmacy.get("stocks", []):
            parsed = parse_stock_label(label)
            if parsed.key not in unique:
                unique[parsed.key] = parsed
    return list(unique.values())


def _clear_catalog_links(db: Session) -> None:
    # Stock and insurance links are rebuilt from scratch on every run.
    db.query(PharmacyStock).delete(synchronize_session=False)
    db.query(PharmacyInsurance).delete(synchronize_session=False)
    # Bulk deletes bypass the identity map; drop stale instances before reinserting.
    db.expunge_all()


def _reconcile_insurance_types(db: Session, names: list[str]) -> dict[str, int]:
    existing = {row.name: row for row in db.query(InsuranceType).all()}
    wanted = list(dict.fromkeys(names))
    for name in wanted:
        if name not in existing:
            existing[name] = InsuranceType(name=name)
            db.add(existing[name])
    for name, row in list(existing.items()):
        if name not in wanted:
            db.delete(row)
            del existing[name]
    db.flush()
    return {name: row.id for name, row in existing.items()}


def _reconcile_pharmacies(db: Session, pharmacies: list[dict]) -> None:
    existing = {row.id: row for row in db.query(Pharmacy).all()}
    for p in pharmacies:
        row = existing.get(p["id"])
        if row is None:
            row = Pharmacy(id=p["id"])
            db.add(row)
            existing[p["id"]] = row
        row.name = p["name"]
        row.sector = p.get("sector")
        row.address = p.get("address")
        row.phone = p.get("phone")
        row.delivery = bool(p.get("delivery"))
        row.lat = p.get("lat")
        row.lng = p.get("lng")
        row.description = p.get("description")
    db.flush()

    wanted = {p["id"] for p in pharmacies}
    for pharmacy_id, row in existing.items():
        if pharmacy_id in wanted:
            continue
        referenced = (
            db.query(Order.id).filter(Order.pharmacy_id == pharmacy_id).first()
            or db.query(User.id).filter(User.pharmacy_id == pharmacy_id).first()
        )
        if referenced:
            logger.warning("Pharmacy %s left the catalog but has orders or accounts, keeping it", pharmacy_id)
            continue
        db.delete(row)
    db.flush()


def _reconcile_medicines(db: Session, parsed: list[ParsedMedicine]) -> dict[tuple[str, str | None], int]:
    """Match medicines on (name, strength) so ids held by order items stay valid."""
    existing = {(row.name, row.strength): row for row in db.query(Medicine).all()}
    for med in parsed:
        row = existing.get(med.key)
        if row is None:
            row = Medicine(name=med.name, strength=med.strength)
            db.add(row)
            existing[med.key] = row
        row.requires_prescription = med.requires_prescription
    db.flush()

    wanted = {med.key for med in parsed}
    for key, row in list(existing.items()):
        if key in wanted:
            continue
        if db.query(OrderItem.order_id).filter(OrderItem.medicine_id == row.id).first():
            logger.warning("Medicine %r left the catalog but appears in orders, keeping it", row.label)
            continue
        db.delete(row)
        del existing[key]
    db.flush()
    return {key: row.id for key, row in existing.items() if key in wanted}


def seed_catalog(
    db: Session,
    pharmacies: list[dict] | None = None,
    insurance_types: list[str] | None = None,
    rng: random.Random | None = None,
) -> SeedSummary:
    """Reconcile insurance types, pharmacies and medicines with the catalog and
    rebuild insurance links and stock.

    Pharmacies are matched on id, medicines on (name, strength) and insurance
    types on name, so existing orders and pharmacy accounts keep pointing at
    valid rows. Everything happens in one transaction. A storage failure rolls
    back and propagates to the caller.
    """
    pharmacies = PHARMACIES if pharmacies is None else pharmacies
    insurance_types = INSURANCE_TYPES if insurance_types is None else insurance_types
    rng = rng or random.Random()
    summary = SeedSummary()

    try:
        _clear_catalog_links(db)

        insurance_ids = _reconcile_insurance_types(db, insurance_types)
        summary.insurance_types = len(insurance_ids)
        logger.info("Reconciled %d insurance types", summary.insurance_types)

        _reconcile_pharmacies(db, pharmacies)
        summary.pharmacies = len(pharmacies)
        logger.info("Reconciled %d pharmacies", summary.pharmacies)

        for p in pharmacies:
            for insurance_name in dict.fromkeys(p.get("insurance", [])):
                insurance_id = insurance_ids.get(insurance_name)
                if insurance_id is None:
                    logger.warning("Unknown insurance %r for pharmacy %s, skipping", insurance_name, p["id"])
                    continue
                db.add(PharmacyInsurance(pharmacy_id=p["id"], insurance_id=insurance_id))
                summary.insurance_links += 1
        db.flush()

        medicine_ids = _reconcile_medicines(db, collect_medicines(pharmacies))
        summary.medicines = len(medicine_ids)
        logger.info("Reconciled %d medicines", summary.medicines)

        for p in pharmacies:
            stocked: set[int] = set()
            for label in p.get("stocks", []):
                medicine_id = medicine_ids[parse_stock_label(label).key]
                if medicine_id in stocked:
                    continue
                stocked.add(medicine_id)
                db.add(
                    PharmacyStock(
                        pharmacy_id=p["id"],
                        medicine_id=medicine_id,
                        price_rwf=rng.randint(*PRICE_RANGE_RWF),
                        quantity=rng.randint(*QUANTITY_RANGE),
                    )
                )
                summary.stocks += 1
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Catalog seed failed, rolled back")
        raise

    logger.info(
        "Seeded %d pharmacies, %d medicines, %d stock rows, %d insurance links",
        summary.pharmacies,
        summary.medicines,
        summary.stocks,
        summary.insurance_links,
    )
    return summary
