"""Shared dependencies: DB session, current profile, admin guard, outbox, result unwrapping."""
from fastapi import BackgroundTasks, Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from sunescape.database import get_db
from sunescape.models.profile import Profile
from sunescape.schemas.auth import ProfileResponse
from sunescape.services.auth import decode_token_with_error
from sunescape.services.outbox import Outbox
from sunescape.services.profiles import display_name, is_admin
from sunescape.services.result import ErrorKind, Result

security = HTTPBearer(auto_error=False)

ERROR_STATUS = {
    ErrorKind.validation: 400,
    ErrorKind.permission: 403,
    ErrorKind.not_found: 404,
    ErrorKind.conflict: 409,
}


def get_current_user(
    db: Session = Depends(get_db),
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Profile:
    if not credentials:
        raise HTTPException(status_code=401, detail="Not authenticated")
    token_str = (credentials.credentials or "").strip()
    payload, _ = decode_token_with_error(token_str)
    if not payload:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    try:
        profile_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Invalid token")
    profile = db.query(Profile).filter(Profile.id == profile_id).first()
    if not profile:
        raise HTTPException(status_code=401, detail="User not found")
    return profile


def require_admin(current_user: Profile = Depends(get_current_user)) -> Profile:
    if not is_admin(current_user):
        raise HTTPException(status_code=403, detail="Admin role required")
    return current_user


def get_outbox(background_tasks: BackgroundTasks) -> Outbox:
    return Outbox(background_tasks)


def unwrap(result: Result):
    """Return the Ok value or raise the HTTP error matching the Err kind."""
    if result.ok:
        return result.value
    raise HTTPException(status_code=ERROR_STATUS.get(result.kind, 400), detail=result.message)


def profile_response(profile: Profile) -> ProfileResponse:
    return ProfileResponse(
        id=profile.id,
        email=profile.email,
        role=profile.role,
        full_name=profile.full_name,
        first_name=profile.first_name,
        display_name=display_name(profile, fallback="Guest"),
        push_enabled=bool(profile.push_subscription),
    )
