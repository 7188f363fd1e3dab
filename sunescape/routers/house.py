"""House settings: total rooms. Readable by everyone signed in, writable by admins."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sunescape.database import get_db
from sunescape.models.profile import Profile
from sunescape.schemas.reservation import HouseSettingsResponse, HouseSettingsUpdate
from sunescape.services.house_settings import get_house_settings, update_total_rooms
from sunescape.dependencies import get_current_user, require_admin, unwrap

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/", response_model=HouseSettingsResponse)
def read_settings(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    return HouseSettingsResponse.model_validate(get_house_settings(db))


@router.put("/", response_model=HouseSettingsResponse)
def write_settings(
    data: HouseSettingsUpdate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_admin),
):
    row = unwrap(update_total_rooms(db, current_user, data.total_rooms))
    return HouseSettingsResponse.model_validate(row)
