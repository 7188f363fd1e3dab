"""Singleton house settings. Capacity changes never re-validate existing reservations."""
from sqlalchemy.orm import Session

from sunescape.config import get_settings
from sunescape.models.house_settings import HouseSettings, SETTINGS_ROW_ID
from sunescape.models.profile import Profile
from sunescape.services.profiles import is_admin
from sunescape.services.result import Ok, Result, permission_error, validation_error


def get_house_settings(db: Session) -> HouseSettings:
    row = db.query(HouseSettings).filter(HouseSettings.id == SETTINGS_ROW_ID).first()
    if row is None:
        row = HouseSettings(id=SETTINGS_ROW_ID, total_rooms=get_settings().total_rooms_default)
        db.add(row)
        db.commit()
        db.refresh(row)
    return row


def get_total_rooms(db: Session) -> int:
    return get_house_settings(db).total_rooms


def update_total_rooms(db: Session, actor: Profile, total_rooms: int) -> Result[HouseSettings]:
    if not is_admin(actor):
        return permission_error("Only admins can change house settings.")
    if total_rooms < 1:
        return validation_error("Total rooms must be at least 1.")
    row = get_house_settings(db)
    row.total_rooms = total_rooms
    row.updated_by = actor.id
    db.commit()
    db.refresh(row)
    return Ok(row)
