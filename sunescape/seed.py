"""Seed the singleton settings row so total_rooms is readable before any admin edit."""
from sqlalchemy.orm import Session
from sunescape.services.house_settings import get_house_settings


def seed_house_settings(db: Session) -> None:
    get_house_settings(db)
