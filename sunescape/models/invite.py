"""Broadcast invite attached to a reservation, and each user's single response to it."""
import enum

from sqlalchemy import Column, Integer, Text, ForeignKey, DateTime, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sunescape.database import Base


class InviteResponseStatus(str, enum.Enum):
    accepted = "accepted"
    declined = "declined"


class Invite(Base):
    __tablename__ = "invites"

    id = Column(Integer, primary_key=True, index=True)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False, index=True)
    created_by = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    message = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    reservation = relationship("Reservation", backref="invites")
    creator = relationship("Profile")


class InviteResponse(Base):
    """One row per (invite, user); responding again overwrites."""
    __tablename__ = "invite_responses"

    invite_id = Column(Integer, ForeignKey("invites.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Integer, ForeignKey("profiles.id"), primary_key=True)
    status = Column(SQLEnum(InviteResponseStatus), nullable=False)
    rooms_count = Column(Integer, nullable=False, default=0)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
