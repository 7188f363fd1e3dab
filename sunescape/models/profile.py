"""Profiles: one row per registered user, created on first sign-in."""
from sqlalchemy import Column, Integer, String, Enum as SQLEnum, DateTime, JSON
from sqlalchemy.sql import func
from sunescape.database import Base
import enum


class ProfileRole(str, enum.Enum):
    member = "member"
    admin = "admin"


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    role = Column(SQLEnum(ProfileRole), nullable=False, default=ProfileRole.member)

    full_name = Column(String(255), nullable=True)
    first_name = Column(String(255), nullable=True)

    # Web Push subscription as returned by PushSubscription.toJSON() in the browser
    push_subscription = Column(JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    @property
    def is_admin(self) -> bool:
        return self.role == ProfileRole.admin
