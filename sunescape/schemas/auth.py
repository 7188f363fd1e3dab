"""Sign-up / sign-in schemas."""
from pydantic import BaseModel, EmailStr, model_validator
from sunescape.models.profile import ProfileRole
from sunescape.services.auth import MIN_PASSWORD_LENGTH


class SignUp(BaseModel):
    first_name: str
    last_name: str = ""
    email: EmailStr
    password: str
    confirm_password: str = ""

    @model_validator(mode="after")
    def check_fields(self):
        if not self.first_name.strip() or not self.password:
            raise ValueError("Please fill in all required fields.")
        if self.confirm_password != self.password:
            raise ValueError("Passwords do not match.")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
        return self

    @property
    def full_name(self) -> str:
        first, last = self.first_name.strip(), self.last_name.strip()
        return f"{first} {last}" if last else first


class SignIn(BaseModel):
    email: EmailStr
    password: str


class ProfileResponse(BaseModel):
    id: int
    email: str
    role: ProfileRole
    full_name: str | None = None
    first_name: str | None = None
    display_name: str = ""
    push_enabled: bool = False

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    profile: ProfileResponse


class PushSubscriptionIn(BaseModel):
    """Browser PushSubscription.toJSON(): endpoint plus keys {p256dh, auth}."""
    endpoint: str
    keys: dict[str, str]
    expirationTime: float | None = None
