"""Shared pytest fixtures: an in-memory database per test and an API client."""

import os
import tempfile

# Must be set before config/database are imported anywhere.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("UPLOADS_DIR", tempfile.mkdtemp(prefix="medifinder-uploads-"))
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="medifinder-logs-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from database import Base, get_db
from models.medicine import Medicine
from models.pharmacy import InsuranceType, Pharmacy, PharmacyInsurance
from models.stock import PharmacyStock
from models.user import User
from services.security import create_access_token, hash_password


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def pharmacy(db):
    """The pharmacy most tests order from."""
    row = Pharmacy(
        id="ph-test",
        name="Test Pharmacy",
        sector="Remera",
        address="KG 11 Ave, Remera, Kigali",
        phone="+250780000001",
        delivery=True,
        lat=-1.95,
        lng=30.12,
    )
    db.add(row)
    db.commit()
    return row


@pytest.fixture
def other_pharmacy(db):
    row = Pharmacy(
        id="ph-other",
        name="Other Pharmacy",
        sector="Kacyiru",
        address="Kacyiru, Kigali",
        phone="+250780000002",
        delivery=False,
    )
    db.add(row)
    db.commit()
    return row


@pytest.fixture
def make_stock(db):
    """Factory: stock a medicine at a pharmacy, creating the medicine if needed."""

    def _make(pharmacy_id, name, strength=None, price=500, quantity=10, requires_prescription=False):
        query = db.query(Medicine).filter(Medicine.name == name)
        if strength is None:
            query = query.filter(Medicine.strength.is_(None))
        else:
            query = query.filter(Medicine.strength == strength)
        med = query.first()
        if not med:
            med = Medicine(name=name, strength=strength, requires_prescription=requires_prescription)
            db.add(med)
            db.flush()
        stock = PharmacyStock(pharmacy_id=pharmacy_id, medicine_id=med.id, price_rwf=price, quantity=quantity)
        db.add(stock)
        db.commit()
        return stock

    return _make


@pytest.fixture
def insurance_types(db):
    rows = [InsuranceType(name=n) for n in ("Britam", "Eden Care Medical", "Sonarwa")]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture
def link_insurance(db):
    def _link(pharmacy_id, insurance):
        db.add(PharmacyInsurance(pharmacy_id=pharmacy_id, insurance_id=insurance.id))
        db.commit()

    return _link


@pytest.fixture
def client(session_factory):
    from main import app

    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _user(db, email, role="customer", pharmacy_id=None, name="Test User"):
    user = User(
        email=email,
        name=name,
        phone="+250788123456",
        password_hash=hash_password("secret123"),
        role=role,
        pharmacy_id=pharmacy_id,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _headers(user):
    return {"Authorization": f"Bearer {create_access_token({'sub': str(user.id)})}"}


@pytest.fixture
def customer(db):
    return _user(db, "alice@example.com", name="Alice")


@pytest.fixture
def customer_headers(customer):
    return _headers(customer)


@pytest.fixture
def pharmacy_headers(db, pharmacy):
    return _headers(_user(db, "staff@test-pharmacy.local", role="pharmacy", pharmacy_id=pharmacy.id))


@pytest.fixture
def other_pharmacy_headers(db, other_pharmacy):
    return _headers(_user(db, "staff@other-pharmacy.local", role="pharmacy", pharmacy_id=other_pharmacy.id))
