"""Resolve a requested cart line to one stock row of a pharmacy.

Resolution walks an ordered list of matcher strategies and stops at the first
hit. There is no scoring: if two rows would match the same strategy, the one
with the lowest stock id wins.
"""

import logging
import re
from dataclasses import dataclass

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from models.medicine import Medicine
from models.stock import PharmacyStock

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_STRENGTH_SPLIT_RE = re.compile(r"\s+(?=[\d%])")
_SCRUB_RE = re.compile(r"[()%]")


def normalize_display_name(name: str | None) -> str:
    """Trim and collapse internal whitespace."""
    return _WHITESPACE_RE.sub(" ", (name or "").strip())


def split_base_name(name: str) -> str:
    """Text before the first whitespace run followed by a digit or ``%``.

    ``"Glucose 5% w/v"`` -> ``"Glucose"``
    """
    return _STRENGTH_SPLIT_RE.split(name, maxsplit=1)[0].strip() or name


def extract_medicine_id(raw) -> int | None:
    """Numeric medicine id from ``123``, ``"123"`` or ``"med-123"``."""
    if raw is None or isinstance(raw, bool):
        return None
    text = str(raw).strip()
    m = re.search(r"(\d+)$", text) or re.match(r"[+-]?(\d+)", text)
    if not m:
        return None
    value = int(m.group(1))
    return value or None


def _scrub(text: str) -> str:
    return _SCRUB_RE.sub("", text).strip().lower()


@dataclass
class LineItemRequest:
    name: str | None
    quantity: int
    id: str | int | None = None

    @property
    def clean_name(self) -> str:
        return normalize_display_name(self.name)

    @property
    def base_name(self) -> str:
        return split_base_name(self.clean_name)

    @property
    def display_name(self) -> str:
        return self.clean_name or str(self.id)


@dataclass
class StockMatch:
    stock: PharmacyStock
    strategy: str

    @property
    def medicine(self) -> Medicine:
        return self.stock.medicine


def _pharmacy_stock(db: Session, pharmacy_id: str):
    return (
        db.query(PharmacyStock)
        .join(Medicine, PharmacyStock.medicine_id == Medicine.id)
        .filter(PharmacyStock.pharmacy_id == pharmacy_id)
    )


def _lower_trim(expr):
    return func.lower(func.trim(expr))


class MatchStrategy:
    """One step of the fallback chain. ``attempt`` returns a row or ``None``."""

    name = "base"
    needs_name = True

    def applies(self, item: LineItemRequest) -> bool:
        return bool(item.clean_name) if self.needs_name else True

    def attempt(self, db: Session, pharmacy_id: str, item: LineItemRequest) -> PharmacyStock | None:
        raise NotImplementedError


class MedicineIdMatcher(MatchStrategy):
    name = "medicine_id"
    needs_name = False

    def applies(self, item: LineItemRequest) -> bool:
        return extract_medicine_id(item.id) is not None

    def attempt(self, db, pharmacy_id, item):
        medicine_id = extract_medicine_id(item.id)
        return _pharmacy_stock(db, pharmacy_id).filter(Medicine.id == medicine_id).first()


class ExactNameMatcher(MatchStrategy):
    name = "exact_name"

    def attempt(self, db, pharmacy_id, item):
        return (
            _pharmacy_stock(db, pharmacy_id)
            .filter(_lower_trim(Medicine.name) == item.clean_name.lower())
            .order_by(PharmacyStock.id.asc())
            .first()
        )


class BaseNameMatcher(MatchStrategy):
    name = "base_name"

    def attempt(self, db, pharmacy_id, item):
        base = item.base_name
        if not base:
            return None
        return (
            _pharmacy_stock(db, pharmacy_id)
            .filter(_lower_trim(Medicine.name) == base.lower())
            .order_by(PharmacyStock.id.asc())
            .first()
        )


class CompoundNameMatcher(MatchStrategy):
    """``name strength``, ``name (strength)`` and ``strength name``."""

    name = "compound_name"

    def attempt(self, db, pharmacy_id, item):
        target = item.clean_name.lower()
        strength = func.coalesce(Medicine.strength, "")
        forms = (
            Medicine.name + " " + strength,
            Medicine.name + " (" + strength + ")",
            strength + " " + Medicine.name,
        )
        return (
            _pharmacy_stock(db, pharmacy_id)
            .filter(or_(*[_lower_trim(form) == target for form in forms]))
            .order_by(PharmacyStock.id.asc())
            .first()
        )


class StockScanMatcher(MatchStrategy):
    """Last resort: scan every stock row with parentheses and ``%`` stripped."""

    name = "stock_scan"

    def attempt(self, db, pharmacy_id, item):
        search = _scrub(item.clean_name)
        if not search:
            return None
        base = _scrub(item.base_name)
        rows = _pharmacy_stock(db, pharmacy_id).order_by(PharmacyStock.id.asc()).all()
        for row in rows:
            med = row.medicine
            db_name = _scrub(med.name or "")
            db_full = _scrub(f"{med.name or ''} {med.strength or ''}")
            db_full_paren = _scrub(f"{med.name or ''} ({med.strength or ''})")
            if (
                search in (db_name, db_full, db_full_paren)
                or search in db_name
                or (db_name and db_name in search)
                or (base and db_name == base)
            ):
                return row
        return None


DEFAULT_STRATEGIES: tuple[MatchStrategy, ...] = (
    MedicineIdMatcher(),
    ExactNameMatcher(),
    BaseNameMatcher(),
    CompoundNameMatcher(),
    StockScanMatcher(),
)


def resolve_line_item(
    db: Session,
    pharmacy_id: str,
    item: LineItemRequest,
    strategies: tuple[MatchStrategy, ...] | list[MatchStrategy] | None = None,
) -> StockMatch | None:
    for strategy in strategies or DEFAULT_STRATEGIES:
        if not strategy.applies(item):
            continue
        row = strategy.attempt(db, pharmacy_id, item)
        if row is not None:
            logger.debug(
                "Resolved %r at %s via %s -> medicine_id=%s",
                item.display_name,
                pharmacy_id,
                strategy.name,
                row.medicine_id,
            )
            return StockMatch(stock=row, strategy=strategy.name)
    return None


def available_labels(db: Session, pharmacy_id: str) -> list[str]:
    """``name strength`` labels in stock at the pharmacy, for diagnostics."""
    rows = _pharmacy_stock(db, pharmacy_id).order_by(PharmacyStock.id.asc()).all()
    return [row.medicine.label for row in rows]
