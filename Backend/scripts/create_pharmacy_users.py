"""
Create a pharmacy account for every pharmacy that has none yet.

Each account gets ``<pharmacy-name-slug>@medifinder.local`` and the default
password from PHARMACY_DEFAULT_PASSWORD; change it after first login.

Usage:
  python Backend/scripts/create_pharmacy_users.py
"""

from __future__ import annotations

import logging
import os
import re
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from sqlalchemy.orm import Session

import models  # noqa: F401
from config import PHARMACY_DEFAULT_PASSWORD
from database import SessionLocal
from models.pharmacy import Pharmacy
from models.user import User
from services.security import hash_password

logger = logging.getLogger("medifinder.scripts.pharmacy_users")


def pharmacy_email(name: str) -> str:
    slug = re.sub(r"\s+", "-", name.strip().lower())
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    return f"{slug}@medifinder.local"


def create_pharmacy_users(db: Session, password: str = PHARMACY_DEFAULT_PASSWORD) -> list[User]:
    linked = {row[0] for row in db.query(User.pharmacy_id).filter(User.pharmacy_id.isnot(None)).all()}
    pending = [p for p in db.query(Pharmacy).order_by(Pharmacy.id.asc()).all() if p.id not in linked]
    if not pending:
        logger.info("All pharmacies already have user accounts.")
        return []

    password_hash = hash_password(password)
    created: list[User] = []
    for pharmacy in pending:
        email = pharmacy_email(pharmacy.name)
        if db.query(User).filter(User.email == email).first():
            logger.warning("Email %s already exists, skipping %s", email, pharmacy.name)
            continue
        user = User(
            email=email,
            name=pharmacy.name,
            phone=pharmacy.phone,
            password_hash=password_hash,
            role="pharmacy",
            pharmacy_id=pharmacy.id,
        )
        db.add(user)
        db.flush()
        created.append(user)
        logger.info("Created account %s for %s (%s)", email, pharmacy.name, pharmacy.id)
    db.commit()
    return created


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    session = SessionLocal()
    try:
        users = create_pharmacy_users(session)
    finally:
        session.close()
    print(f"Created {len(users)} pharmacy account(s). Default password: {PHARMACY_DEFAULT_PASSWORD}")
