"""Seed the database with the fixed pharmacy catalog.

Usage: python seed.py [--seed N]
"""

import argparse
import logging
import random
import sys

import models  # noqa: F401
from database import SessionLocal, Base, engine
from services.seeder import seed_catalog

logger = logging.getLogger("medifinder.seed")


def seed(rng_seed: int | None = None) -> int:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        summary = seed_catalog(db, rng=random.Random(rng_seed))
    except Exception:
        logger.exception("Database seed failed")
        return 1
    finally:
        db.close()
    print(
        f"Seeded {summary.insurance_types} insurance types, {summary.pharmacies} pharmacies, "
        f"{summary.medicines} medicines, {summary.stocks} stock rows."
    )
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Populate the MediFinder catalog")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for reproducible prices and quantities")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    sys.exit(seed(args.seed))
