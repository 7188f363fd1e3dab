"""
Promote a profile to admin, or demote it back to member.
Admins can change total rooms and manage anyone's guests, notes and list items.

Run from project root:
  python scripts/set_role.py someone@example.com admin
  python scripts/set_role.py someone@example.com member
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from sunescape.database import SessionLocal
from sunescape.models.profile import ProfileRole
from sunescape.services.profiles import get_profile_by_email


def main():
    parser = argparse.ArgumentParser(description="Set a profile's role.")
    parser.add_argument("email")
    parser.add_argument("role", choices=[r.value for r in ProfileRole])
    args = parser.parse_args()

    db = SessionLocal()
    try:
        profile = get_profile_by_email(db, args.email)
        if not profile:
            print(f"No profile with email {args.email}. Sign up first.")
            sys.exit(1)
        profile.role = ProfileRole(args.role)
        db.commit()
        print(f"{profile.email} is now {profile.role.value}.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
