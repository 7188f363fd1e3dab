"""
Create two test profiles (one admin, one member) so you can log in and try the app
without going through sign-up.

Run from project root:
  python scripts/create_test_users.py

Credentials are printed at the end.
"""
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from sunescape.database import Base, SessionLocal, engine
from sunescape.models.profile import ProfileRole
from sunescape.seed import seed_house_settings
from sunescape.services.profiles import ensure_profile

PASSWORD = "sunny123"
USERS = [
    ("admin@sunescape.demo", "Maria Sol", "Maria", ProfileRole.admin),
    ("member@sunescape.demo", "Tom Reyes", "Tom", ProfileRole.member),
]


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_house_settings(db)
        for email, full_name, first_name, role in USERS:
            profile = ensure_profile(db, email, PASSWORD, full_name=full_name, first_name=first_name)
            profile.role = role
            db.commit()
            print(f"{role.value}: {email}")
    finally:
        db.close()
    print(f"\nPassword for both: {PASSWORD}")


if __name__ == "__main__":
    main()
