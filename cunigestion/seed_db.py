"""
cunigestion/seed_db.py
----------------------
Populates a record store with realistic-looking demo data covering
all collections: rabbits, stocks, finances, reproductions, health events.

Run from the project root:
    python -m cunigestion.seed_db

Pass --reset to wipe the database first:
    python -m cunigestion.seed_db --reset
"""
from __future__ import annotations

import os
import random
import sys
from datetime import date, timedelta
from urllib.parse import urlparse

from . import config
from .store import RecordStore


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _remove_sqlite_file_if_local(database_url: str) -> None:
    """Delete the SQLite file so we start completely fresh."""
    parsed = urlparse(database_url)
    # urlparse turns  sqlite:///./foo.db  into  path=/./foo.db
    path = parsed.path.lstrip("/")
    if path and path != ":memory:" and os.path.exists(path):
        os.remove(path)
        print(f"  Removed existing database: {path}")


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

BREEDS = ["Néo-Zélandais", "Californien", "Rex", "Géant des Flandres", "Local"]

STOCK_ITEMS = [
    # (name, type, quantity, unit, alert_threshold, unit_price, supplier)
    ("Granulés lapin 25 kg", "feed", 12, "sac", 5, 9500, "Provenderie du Centre"),
    ("Foin de brachiaria", "feed", 3, "botte", 4, 1500, "Ferme Kossi"),
    ("Son de blé", "feed", 40, "kg", 20, 150, "Moulin Adjara"),
    ("Ivermectine 1%", "medicine", 2, "flacon", 2, 4500, "Vétopharma"),
    ("Vitamines AD3E", "medicine", 6, "flacon", 2, 2000, "Vétopharma"),
    ("Abreuvoir automatique", "equipment", 15, "pièce", 5, 1200, "Agri-Équipements"),
    ("Cage mère 4 loges", "equipment", 1, "pièce", 1, 45000, "Agri-Équipements"),
]

PURCHASES = [
    # (description, category, amount)
    ("Granulés lapin 10 sacs", "Alimentation", 95000),
    ("Foin 20 bottes", "Alimentation", 30000),
    ("Vermifuge et vitamines", "Santé", 13000),
    ("Abreuvoirs", "Équipement", 18000),
    ("Transport marché", "", 5000),
]


def seed(store: RecordStore, today: date | None = None) -> dict:
    today = today or date.today()
    random.seed(42)      # reproducible

    def days_ago(n: int) -> date:
        return today - timedelta(days=n)

    # ------------------------------------------------------------------
    # 1. Breeders: 3 does, 2 bucks
    # ------------------------------------------------------------------
    print("  Creating breeders...")

    does = [
        store.rabbits.append({"name": name, "sex": "female", "breed": breed,
                              "birth_date": days_ago(age), "current_weight": weight})
        for name, breed, age, weight in [
            ("Bella", BREEDS[0], 540, 4.6),
            ("Cannelle", BREEDS[1], 480, 4.2),
            ("Noisette", BREEDS[0], 420, 4.4),
        ]
    ]
    bucks = [
        store.rabbits.append({"name": name, "sex": "male", "breed": breed,
                              "birth_date": days_ago(age), "current_weight": weight})
        for name, breed, age, weight in [
            ("Hercule", BREEDS[0], 520, 5.1),
            ("Caramel", BREEDS[1], 460, 4.8),
        ]
    ]

    # ------------------------------------------------------------------
    # 2. Reproductions and the kits they produced
    # ------------------------------------------------------------------
    print("  Creating reproductions and kits...")

    plan = [
        # (doe_idx, buck_idx, days_ago_mated, kindled)
        (0, 0, 130, True),
        (1, 1, 100, True),
        (2, 0, 80, True),
        (0, 1, 10, False),    # upcoming kindling
    ]

    kits = []
    for doe_i, buck_i, mated_ago, kindled in plan:
        mating = days_ago(mated_ago)
        kindling = mating + timedelta(days=31)
        litter_size = random.randint(6, 9) if kindled else None

        store.reproductions.append({
            "mother_id": does[doe_i],
            "father_id": bucks[buck_i],
            "mating_date": mating,
            "actual_kindling_date": kindling if kindled else None,
            "litter_size": litter_size,
        })

        for i in range(litter_size or 0):
            age = (today - kindling).days
            weight = round(min(3.0, 0.05 + age * 0.03) * random.uniform(0.8, 1.1), 2)
            kits.append(store.rabbits.append({
                "name": f"L{mated_ago}-K{i + 1:02d}",
                "sex": random.choice(["male", "female"]),
                "breed": BREEDS[4],
                "birth_date": kindling,
                "current_weight": weight,
                "mother_id": does[doe_i],
                "father_id": bucks[buck_i],
            }))

    # ------------------------------------------------------------------
    # 3. Health events, one kit falls ill and one is sold
    # ------------------------------------------------------------------
    print("  Creating health events...")

    store.health_events.append({
        "rabbit_id": does[0],
        "type": "vaccination",
        "description": "Vaccin VHD",
        "start_date": days_ago(60),
        "end_date": days_ago(60),
    })
    if kits:
        store.health_events.append({
            "rabbit_id": kits[0],
            "type": "illness",
            "description": "Coccidiose",
            "start_date": days_ago(3),
            "medication": "Toltrazuril",
        })
        store.rabbits.replace(kits[0], {"status": "sick"})
    if len(kits) > 1:
        store.rabbits.replace(kits[1], {"status": "sold"})

    # ------------------------------------------------------------------
    # 4. Stocks
    # ------------------------------------------------------------------
    print("  Creating stocks...")

    for name, stock_type, qty, unit, threshold, price, supplier in STOCK_ITEMS:
        store.stocks.append({
            "name": name,
            "type": stock_type,
            "quantity": qty,
            "unit": unit,
            "alert_threshold": threshold,
            "unit_price": price,
            "supplier": supplier,
        })

    # ------------------------------------------------------------------
    # 5. Finances, roughly monthly over the past year
    # ------------------------------------------------------------------
    print("  Creating finances...")

    for month in range(12):
        description, category, amount = PURCHASES[month % len(PURCHASES)]
        store.finances.append({
            "kind": "purchase",
            "amount": amount,
            "description": description,
            "date": days_ago(month * 30 + 2),
            "category": category or "Divers",
        })
        store.finances.append({
            "kind": "sale",
            "amount": random.randint(4, 10) * 7500,
            "description": "Vente lapins de chair",
            "date": days_ago(month * 30 + 5),
            "category": "Vente lapins",
        })

    counts = {c.key: len(c.list()) for c in store.collections}

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------
    for key, count in counts.items():
        print(f"  ✓ {key + ':':<15} {count}")
    return counts


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    reset = "--reset" in sys.argv

    if reset:
        print("Resetting database...")
        _remove_sqlite_file_if_local(config.DATABASE_URL)

    print("Seeding data...")
    with RecordStore(config.DATABASE_URL) as store:
        seed(store)

    print("\nDone. Run the app with:")
    print("  python -m uvicorn cunigestion.main:app --reload")


if __name__ == "__main__":
    main()
