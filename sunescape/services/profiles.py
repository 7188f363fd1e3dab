"""Profiles: display names, the ownership rule, first-sign-in upsert, push subscriptions."""
from sqlalchemy.orm import Session

from sunescape.models.profile import Profile, ProfileRole
from sunescape.services.auth import get_password_hash


def display_name(profile: Profile | None, fallback: str = "Unknown") -> str:
    """First name, else first word of full name, else the email's local part."""
    if not profile:
        return fallback
    if profile.first_name:
        return profile.first_name
    if profile.full_name and profile.full_name.strip():
        return profile.full_name.split()[0]
    if profile.email:
        return profile.email.split("@")[0]
    return fallback


def is_admin(profile: Profile | None) -> bool:
    return bool(profile) and profile.role == ProfileRole.admin


def can_manage(profile: Profile | None, created_by: int | None) -> bool:
    """The single ownership rule: creator or admin."""
    if not profile:
        return False
    return created_by == profile.id or is_admin(profile)


def get_profile(db: Session, profile_id: int) -> Profile | None:
    return db.query(Profile).filter(Profile.id == profile_id).first()


def get_profile_by_email(db: Session, email: str) -> Profile | None:
    return db.query(Profile).filter(Profile.email == (email or "").strip().lower()).first()


def list_profiles(db: Session) -> list[Profile]:
    return db.query(Profile).order_by(Profile.id.asc()).all()


def ensure_profile(
    db: Session,
    email: str,
    password: str,
    full_name: str | None = None,
    first_name: str | None = None,
) -> Profile:
    """Create the profile on first sign-up; later calls only fill in missing names."""
    profile = get_profile_by_email(db, email)
    if profile:
        if full_name and not profile.full_name:
            profile.full_name = full_name
        if first_name and not profile.first_name:
            profile.first_name = first_name
    else:
        profile = Profile(
            email=email.strip().lower(),
            hashed_password=get_password_hash(password),
            role=ProfileRole.member,
            full_name=full_name or None,
            first_name=first_name or None,
        )
        db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def save_push_subscription(db: Session, profile: Profile, subscription: dict | None) -> Profile:
    profile.push_subscription = subscription
    db.commit()
    db.refresh(profile)
    return profile


def clear_push_subscription(db: Session, profile: Profile) -> Profile:
    return save_push_subscription(db, profile, None)
