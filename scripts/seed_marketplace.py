#!/usr/bin/env python3
"""
Seed users, parts and ratings with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Vehicle attributes always come from the taxonomy, so every seeded part
  passes the same validation as a part created through the API

Usage:
    python scripts/seed_marketplace.py
"""

from __future__ import annotations

import logging
import random
import sys
import uuid
from decimal import Decimal

from parts_market.domain.vehicle_taxonomy import VehicleTaxonomy
from parts_market.infra.clock import current_year
from parts_market.infra.db.models.part import PartRow
from parts_market.infra.db.models.rating import RatingRow
from parts_market.infra.db.models.user import UserRow
from parts_market.infra.db.session import get_session

logger = logging.getLogger("seed_marketplace")


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_SELLERS = 8
NUM_BUYERS = 5
NUM_PARTS = 60
NUM_RATINGS = 40


# ==============================================================================
# Sample Data
# ==============================================================================

LOCATIONS = [
    "Westlands, Nairobi",
    "Industrial Area, Nairobi",
    "Kilimani, Nairobi",
    "Nyali, Mombasa",
    "Milimani, Kisumu",
    "Section 58, Nakuru",
    "Eldoret Town, Eldoret",
    "Thika Road, Ruiru",
]

FIRST_NAMES = ["Amina", "Brian", "Cynthia", "David", "Esther", "Felix", "Grace", "Hassan"]
LAST_NAMES = ["Otieno", "Mwangi", "Wanjiru", "Kiptoo", "Achieng", "Njoroge", "Mutua", "Omar"]
BUSINESS_SUFFIXES = ["Auto Spares", "Motors", "Parts Centre", "Garage Supplies"]

# Part name → typical price band
PART_TYPES = {
    "Brake Pads": (Decimal("25"), Decimal("120")),
    "Oil Filter": (Decimal("5"), Decimal("30")),
    "Alternator": (Decimal("90"), Decimal("400")),
    "Headlight Assembly": (Decimal("60"), Decimal("350")),
    "Radiator": (Decimal("80"), Decimal("300")),
    "Side Mirror": (Decimal("20"), Decimal("150")),
    "Spark Plugs (set)": (Decimal("10"), Decimal("60")),
    "Shock Absorber": (Decimal("40"), Decimal("220")),
    "Starter Motor": (Decimal("70"), Decimal("280")),
    "Clutch Kit": (Decimal("100"), Decimal("450")),
}

COMMENTS = [
    "Part exactly as described.",
    "Quick response on WhatsApp.",
    "Good price, will buy again.",
    "Delivery took a while but part works.",
    None,
]


# ==============================================================================
# Generation
# ==============================================================================


def generate_user(index: int, seller: bool) -> UserRow:
    first_name = FIRST_NAMES[index % len(FIRST_NAMES)]
    last_name = random.choice(LAST_NAMES)
    user = UserRow(
        id=uuid.uuid4(),
        email=f"{first_name.lower()}.{last_name.lower()}{index}@example.com",
        first_name=first_name,
        last_name=last_name,
        is_verified=False,
        is_admin=False,
    )

    if seller:
        user.seller_type = random.choice(["private", "business"])
        if user.seller_type == "business":
            user.business_name = f"{last_name} {random.choice(BUSINESS_SUFFIXES)}"
        user.location = random.choice(LOCATIONS)
        user.phone_number = f"+2547{random.randint(10000000, 99999999)}"
        user.whatsapp_number = user.phone_number
        user.is_verified = random.random() < 0.5

    return user


def random_vehicle(taxonomy: VehicleTaxonomy, year_now: int) -> tuple[str, int, str, str] | None:
    """A valid (vehicle_type, year, make, model) picked through the cascade."""
    vehicle_type = random.choice(taxonomy.vehicle_types())
    years = taxonomy.years_for_type(vehicle_type, year_now)
    if not years:
        return None

    year = random.choice(years)
    make = random.choice(taxonomy.makes_for_type_and_year(vehicle_type, year, year_now))
    model = random.choice(
        taxonomy.models_for_type_year_and_make(vehicle_type, year, make, year_now)
    )
    return vehicle_type, year, make, model


def generate_part(seller: UserRow, taxonomy: VehicleTaxonomy, year_now: int) -> PartRow:
    part_name = random.choice(list(PART_TYPES))
    low, high = PART_TYPES[part_name]
    vehicle = random_vehicle(taxonomy, year_now)

    part = PartRow(
        seller_id=seller.id,
        name=part_name,
        condition=random.choice(["new", "used"]),
        images=[],
        is_active=random.random() > 0.1,
    )

    # ~10% of parts are "price on request"
    if random.random() > 0.1:
        cents = random.randint(int(low * 100), int(high * 100))
        part.price = (Decimal(cents) / 100).quantize(Decimal("0.01"))

    if vehicle:
        part.vehicle_type, part.year, part.make, part.model = vehicle
        part.name = f"{part_name} - {vehicle[2]} {vehicle[3]}"
        part.car_model = f"{vehicle[2]} {vehicle[3]} {vehicle[1]}"
        part.description = f"Fits {vehicle[1]} {vehicle[2]} {vehicle[3]}."

    return part


def seed_marketplace(seed: int = RANDOM_SEED) -> None:
    random.seed(seed)
    taxonomy = VehicleTaxonomy()
    year_now = current_year()

    logger.info("Seeding marketplace (seed=%s, year=%s)", seed, year_now)

    with get_session() as session:
        # Parts and ratings go with the users (ON DELETE CASCADE)
        deleted = session.query(UserRow).delete()
        logger.info("Deleted %s existing users", deleted)

        sellers = [generate_user(i, seller=True) for i in range(NUM_SELLERS)]
        buyers = [generate_user(NUM_SELLERS + i, seller=False) for i in range(NUM_BUYERS)]
        admin = generate_user(NUM_SELLERS + NUM_BUYERS, seller=False)
        admin.is_admin = True
        session.add_all([*sellers, *buyers, admin])
        session.flush()

        parts = [
            generate_part(random.choice(sellers), taxonomy, year_now) for _ in range(NUM_PARTS)
        ]
        session.add_all(parts)

        ratings = [
            RatingRow(
                seller_id=random.choice(sellers).id,
                buyer_id=random.choice(buyers).id,
                rating=random.choices([1, 2, 3, 4, 5], weights=[1, 1, 2, 4, 5], k=1)[0],
                comment=random.choice(COMMENTS),
            )
            for _ in range(NUM_RATINGS)
        ]
        session.add_all(ratings)
        session.flush()

        logger.info(
            "Seeded %s sellers, %s buyers, 1 admin, %s parts, %s ratings",
            len(sellers),
            len(buyers),
            len(parts),
            len(ratings),
        )
        logger.info("Admin user id: %s", admin.id)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        seed_marketplace()
    except Exception:
        logger.exception("Error seeding database")
        sys.exit(1)
