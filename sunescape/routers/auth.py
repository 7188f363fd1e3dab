"""Sign-up, sign-in and the current profile."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from sunescape.database import get_db
from sunescape.models.profile import Profile
from sunescape.schemas.auth import SignIn, SignUp, Token, ProfileResponse
from sunescape.services.auth import verify_password, create_access_token
from sunescape.services.profiles import ensure_profile, get_profile_by_email
from sunescape.dependencies import get_current_user, profile_response

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=Token)
def register(data: SignUp, db: Session = Depends(get_db)):
    if get_profile_by_email(db, data.email):
        raise HTTPException(status_code=400, detail="An account with this email already exists.")
    profile = ensure_profile(
        db,
        data.email,
        data.password,
        full_name=data.full_name,
        first_name=data.first_name.strip(),
    )
    token = create_access_token(profile.id, profile.email)
    return Token(access_token=token, profile=profile_response(profile))


@router.post("/login", response_model=Token)
def login(data: SignIn, db: Session = Depends(get_db)):
    profile = get_profile_by_email(db, data.email)
    if not profile or not verify_password(data.password, profile.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    token = create_access_token(profile.id, profile.email)
    return Token(access_token=token, profile=profile_response(profile))


@router.get("/me", response_model=ProfileResponse)
def me(current_user: Profile = Depends(get_current_user)):
    return profile_response(current_user)
