#!/usr/bin/env python3
"""Seed demo data.

Creates three demo accounts with pending grocery items and a purchase
history that exercises the co-purchase recommendations: account 3 shops on
five distinct days, and account 1 bought Milk today, so recommendations for
account 1 include what account 3 bought alongside Milk.

Usage:
    # Keep existing tables and replace the demo accounts:
    python scripts/seed_demo_data.py

    # Drop and recreate every table first:
    python scripts/seed_demo_data.py --reset
"""

import os
import sys
from datetime import UTC, datetime, timedelta

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from grocery_api.database import SessionLocal, init_db, reset_db
from grocery_api.models import GroceryItem, PurchaseHistory, User
from grocery_api.services.auth import get_password_hash
from grocery_api.services.items import QUICK_BUY_NOTE

DEMO_PASSWORD = "demopass123"

DEMO_USERS = [
    ("Alex Demo", "alex@example.com"),
    ("Sam Demo", "sam@example.com"),
    ("Jordan Demo", "jordan@example.com"),
]

# Days ago -> items bought together by the third account
SHOPPING_TRIPS = {
    2: ["Milk", "Bread", "Eggs"],
    5: ["Butter", "Cheese", "Milk"],
    9: ["Apples", "Bananas", "Bread"],
    14: ["Milk", "Eggs", "Yogurt", "Cereal"],
    20: ["Chicken", "Rice", "Juice"],
}


def seed_demo_data(reset: bool = False):
    """Seed the database with demo accounts, list items and purchase history."""
    if reset:
        reset_db()
    else:
        init_db()

    session = SessionLocal()
    now = datetime.now(UTC)

    try:
        emails = [email for _, email in DEMO_USERS]
        existing = session.query(User).filter(User.email.in_(emails)).all()
        if existing:
            print("Demo data already exists. Clearing and re-seeding...")
            # Items and history go with the account via ON DELETE CASCADE
            for user in existing:
                session.delete(user)
            session.commit()

        print("Creating demo users...")
        password_hash = get_password_hash(DEMO_PASSWORD)
        users = [
            User(name=name, email=email, password_hash=password_hash) for name, email in DEMO_USERS
        ]
        session.add_all(users)
        session.flush()
        first, second, third = users

        print("Creating grocery list items...")
        session.add_all(
            [
                GroceryItem(user_id=first.id, item_name="Coffee", quantity="1 bag"),
                GroceryItem(user_id=first.id, item_name="Tomatoes", quantity="6"),
                GroceryItem(user_id=first.id, item_name="Pasta", notes="Whole wheat if possible"),
                # Mirrors a quick buy; hidden from the pending list
                GroceryItem(user_id=first.id, item_name="Milk", notes=QUICK_BUY_NOTE),
                GroceryItem(user_id=second.id, item_name="Olive Oil"),
            ]
        )

        print("Creating purchase history...")
        history = [PurchaseHistory(user_id=first.id, item_name="Milk", purchased_on=now)]
        history.append(
            PurchaseHistory(user_id=second.id, item_name="Bread", purchased_on=now - timedelta(days=1))
        )
        for days_ago, trip in SHOPPING_TRIPS.items():
            day = now - timedelta(days=days_ago)
            history.extend(
                PurchaseHistory(user_id=third.id, item_name=name, purchased_on=day) for name in trip
            )
        session.add_all(history)

        session.commit()
        print("Demo data seeded successfully!")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data(reset="--reset" in sys.argv[1:])
